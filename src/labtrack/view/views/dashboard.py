# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from labtrack.i18n import translate
from labtrack.model.crush_alert import CrushAlert
from labtrack.model.material_type import MATERIAL_TYPES
from labtrack.service.crush_alert import days_left_label
from labtrack.service.sample import SampleStats
from labtrack.time import date_to_display_str
from labtrack.view.util import short_id, urgency_color
from labtrack.view.views.header import header


def dashboard_view(
    language: str, stats: SampleStats, alerts: list[CrushAlert]
) -> None:
    header(language, translate("dashboard.title", language))
    console = Console()

    stats_table = Table(box=box.SIMPLE)
    stats_table.add_column(translate("dashboard.totalSamples", language))
    for material_type in MATERIAL_TYPES:
        stats_table.add_column(translate(f"material.{material_type}", language))
    stats_table.add_row(
        str(stats["total"]),
        *[str(stats[material_type]) for material_type in MATERIAL_TYPES],  # type: ignore[literal-required]
    )
    console.print(stats_table)

    if len(alerts) == 0:
        return
    console.print(
        Panel(
            crush_alerts_table(language, alerts),
            title=f"{translate('dashboard.alerts', language)} ({len(alerts)})",
            border_style="red",
            expand=False,
        )
    )


def crush_alerts_table(language: str, alerts: list[CrushAlert]) -> Table:
    alerts_table = Table(box=box.SIMPLE)
    alerts_table.add_column(translate("common.status", language))
    alerts_table.add_column(translate("common.milestone", language))
    alerts_table.add_column(translate("common.contractor", language))
    alerts_table.add_column(translate("common.date", language))
    alerts_table.add_column(translate("common.id", language))

    for alert in alerts:
        color = urgency_color(alert["days_left"])
        milestone_key = (
            "dashboard.crushAlert7"
            if alert["milestone"] == 7
            else "dashboard.crushAlert28"
        )
        alerts_table.add_row(
            f"[{color}]{days_left_label(alert['days_left'], language)}[/{color}]",
            translate(milestone_key, language),
            alert["sample"]["contractor_name"],
            date_to_display_str(alert["date"]),
            short_id(alert["sample"]["id"]),
        )
    return alerts_table
