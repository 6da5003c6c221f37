# SPDX-License-Identifier: MIT

from typing import Optional

from labtrack.i18n import translate
from labtrack.model.crush_alert import Urgency
from labtrack.model.material_type import MaterialType
from labtrack.service.crush_alert import get_urgency

MATERIAL_COLORS: dict[str, str] = {
    MaterialType.CONCRETE: "blue",
    MaterialType.ASPHALT: "grey70",
    MaterialType.SOIL: "dark_goldenrod",
    MaterialType.STEEL: "slate_blue1",
}

URGENCY_COLORS: dict[str, str] = {
    Urgency.OVERDUE: "red",
    Urgency.DUE_TODAY: "dark_orange",
    Urgency.DUE_TOMORROW: "yellow",
    Urgency.UPCOMING: "green",
}


def material_label(material_type: str, language: str) -> str:
    label = translate(f"material.{material_type}", language)
    color = MATERIAL_COLORS.get(material_type)
    if color is None:
        return label
    return f"[{color}]{label}[/{color}]"


def urgency_color(days_left: int) -> str:
    return URGENCY_COLORS[get_urgency(days_left)]


def short_id(id: Optional[str]) -> str:
    if id is None:
        return ""
    return id[:8]
