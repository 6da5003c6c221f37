# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

import pendulum

from labtrack.model.entity_id import EntityId
from labtrack.model.file_attachment import FileAttachment


class BaseSample(TypedDict):
    id: Optional[EntityId]
    contractor_name: str
    technician_name: str
    created: pendulum.DateTime
    updated: pendulum.DateTime
    files: list[FileAttachment]


class ConcreteSample(BaseSample):
    material_type: Literal["concrete"]
    pouring_date: str
    pouring_type: str
    required_strength: str
    crush_date_7_days: Optional[str]
    crush_date_28_days: Optional[str]


class AsphaltSample(BaseSample):
    material_type: Literal["asphalt"]
    mix_type: Literal["B", "C"]
    asphalt_plant: str


class SoilSample(BaseSample):
    material_type: Literal["soil"]
    site_location: str
    required_tests: str


class SteelSample(BaseSample):
    material_type: Literal["steel"]
    steel_grade: str
    diameter: str
    supplier: str


Sample: TypeAlias = ConcreteSample | AsphaltSample | SoilSample | SteelSample

COMMON_FIELDS: tuple[str, ...] = (
    "id",
    "material_type",
    "contractor_name",
    "technician_name",
    "created",
    "updated",
    "files",
)

# Fields a stored sample may have changed after creation, per material type.
# Pouring and crush dates are fixed at creation and never modifiable.
MODIFIABLE_FIELDS: dict[str, tuple[str, ...]] = {
    "concrete": ("pouring_type", "required_strength"),
    "asphalt": ("mix_type", "asphalt_plant"),
    "soil": ("site_location", "required_tests"),
    "steel": ("steel_grade", "diameter", "supplier"),
}

MIX_TYPES: tuple[str, ...] = ("B", "C")
