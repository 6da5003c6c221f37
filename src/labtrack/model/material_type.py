# SPDX-License-Identifier: MIT


class MaterialType:
    CONCRETE = "concrete"
    ASPHALT = "asphalt"
    SOIL = "soil"
    STEEL = "steel"


MATERIAL_TYPES: tuple[str, ...] = (
    MaterialType.CONCRETE,
    MaterialType.ASPHALT,
    MaterialType.SOIL,
    MaterialType.STEEL,
)
