# SPDX-License-Identifier: MIT

from typing import Iterable, Optional, TypedDict

from labtrack.model.file_attachment import FileAttachment
from labtrack.model.material_type import MATERIAL_TYPES
from labtrack.model.sample import (
    MIX_TYPES,
    AsphaltSample,
    ConcreteSample,
    Sample,
    SoilSample,
    SteelSample,
)
from labtrack.service.crush_date import crush_dates_to_str, derive_crush_dates
from labtrack.template.sample import (
    get_asphalt_sample_template,
    get_concrete_sample_template,
    get_soil_sample_template,
    get_steel_sample_template,
)


class SampleStats(TypedDict):
    total: int
    concrete: int
    asphalt: int
    soil: int
    steel: int


def create_concrete_sample(
    contractor_name: str,
    technician_name: str,
    pouring_date: str,
    pouring_type: str,
    required_strength: str,
    files: Optional[list[FileAttachment]] = None,
) -> ConcreteSample:
    """
    Build a concrete sample with its crush dates derived from the pour date.

    Raises:
        InvalidDate: if pouring_date is not a valid 'YYYY-MM-DD' date
    """
    crush_date_7_days, crush_date_28_days = crush_dates_to_str(
        derive_crush_dates(pouring_date)
    )

    sample = get_concrete_sample_template()
    sample["contractor_name"] = contractor_name
    sample["technician_name"] = technician_name
    sample["files"] = list(files) if files is not None else []
    sample["pouring_date"] = pouring_date.strip()
    sample["pouring_type"] = pouring_type
    sample["required_strength"] = required_strength
    sample["crush_date_7_days"] = crush_date_7_days
    sample["crush_date_28_days"] = crush_date_28_days
    return sample


def create_asphalt_sample(
    contractor_name: str,
    technician_name: str,
    mix_type: str,
    asphalt_plant: str,
    files: Optional[list[FileAttachment]] = None,
) -> AsphaltSample:
    validate_mix_type(mix_type)

    sample = get_asphalt_sample_template()
    sample["contractor_name"] = contractor_name
    sample["technician_name"] = technician_name
    sample["files"] = list(files) if files is not None else []
    sample["mix_type"] = "B" if mix_type == "B" else "C"
    sample["asphalt_plant"] = asphalt_plant
    return sample


def create_soil_sample(
    contractor_name: str,
    technician_name: str,
    site_location: str,
    required_tests: str,
    files: Optional[list[FileAttachment]] = None,
) -> SoilSample:
    sample = get_soil_sample_template()
    sample["contractor_name"] = contractor_name
    sample["technician_name"] = technician_name
    sample["files"] = list(files) if files is not None else []
    sample["site_location"] = site_location
    sample["required_tests"] = required_tests
    return sample


def create_steel_sample(
    contractor_name: str,
    technician_name: str,
    steel_grade: str,
    diameter: str,
    supplier: str,
    files: Optional[list[FileAttachment]] = None,
) -> SteelSample:
    sample = get_steel_sample_template()
    sample["contractor_name"] = contractor_name
    sample["technician_name"] = technician_name
    sample["files"] = list(files) if files is not None else []
    sample["steel_grade"] = steel_grade
    sample["diameter"] = diameter
    sample["supplier"] = supplier
    return sample


def validate_mix_type(mix_type: str) -> None:
    if mix_type not in MIX_TYPES:
        raise ValueError(f"mix type must be one of {', '.join(MIX_TYPES)}, got {mix_type!r}")


def filter_samples(
    samples: Iterable[Sample],
    search: Optional[str] = None,
    material_type: Optional[str] = None,
    contractor: Optional[str] = None,
) -> list[Sample]:
    """
    Filter samples the way the dashboard table does.

    Args:
        samples: Samples to filter
        search: Case-insensitive substring matched against contractor and
            technician names
        material_type: Exact material type, or None for all
        contractor: Exact contractor name, or None for all

    Returns:
        Matching samples in their original order
    """
    needle = search.lower() if search else ""
    filtered_samples: list[Sample] = []
    for sample in samples:
        if needle and not (
            needle in sample["contractor_name"].lower()
            or needle in sample["technician_name"].lower()
        ):
            continue
        if material_type is not None and sample["material_type"] != material_type:
            continue
        if contractor is not None and sample["contractor_name"] != contractor:
            continue
        filtered_samples.append(sample)
    return filtered_samples


def get_contractors(samples: Iterable[Sample]) -> list[str]:
    return list(dict.fromkeys(sample["contractor_name"] for sample in samples))


def get_sample_stats(samples: Iterable[Sample]) -> SampleStats:
    stats: SampleStats = {
        "total": 0,
        "concrete": 0,
        "asphalt": 0,
        "soil": 0,
        "steel": 0,
    }
    for sample in samples:
        stats["total"] += 1
        if sample["material_type"] in MATERIAL_TYPES:
            stats[sample["material_type"]] += 1
    return stats
