# SPDX-License-Identifier: MIT

from labtrack.model.sample import AsphaltSample, ConcreteSample, SoilSample, SteelSample
from labtrack.time import now_utc


def get_concrete_sample_template() -> ConcreteSample:
    now = now_utc()
    return {
        "id": None,
        "material_type": "concrete",
        "contractor_name": "",
        "technician_name": "",
        "created": now,
        "updated": now,
        "files": [],
        "pouring_date": "",
        "pouring_type": "",
        "required_strength": "",
        "crush_date_7_days": None,
        "crush_date_28_days": None,
    }


def get_asphalt_sample_template() -> AsphaltSample:
    now = now_utc()
    return {
        "id": None,
        "material_type": "asphalt",
        "contractor_name": "",
        "technician_name": "",
        "created": now,
        "updated": now,
        "files": [],
        "mix_type": "B",
        "asphalt_plant": "",
    }


def get_soil_sample_template() -> SoilSample:
    now = now_utc()
    return {
        "id": None,
        "material_type": "soil",
        "contractor_name": "",
        "technician_name": "",
        "created": now,
        "updated": now,
        "files": [],
        "site_location": "",
        "required_tests": "",
    }


def get_steel_sample_template() -> SteelSample:
    now = now_utc()
    return {
        "id": None,
        "material_type": "steel",
        "contractor_name": "",
        "technician_name": "",
        "created": now,
        "updated": now,
        "files": [],
        "steel_grade": "",
        "diameter": "",
        "supplier": "",
    }
