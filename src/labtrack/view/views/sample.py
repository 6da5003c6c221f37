# SPDX-License-Identifier: MIT

from typing import assert_never

from rich import box
from rich.console import Console
from rich.table import Table

from labtrack.i18n import translate
from labtrack.model.crush_alert import CrushDates
from labtrack.model.sample import Sample
from labtrack.time import (
    date_to_display_str,
    datetime_to_display_local_date_str,
)
from labtrack.view.util import material_label, short_id
from labtrack.view.views.header import header


def samples_view(language: str, report_name: str, samples: list[Sample]) -> None:
    header(language, report_name)

    samples_table = Table(box=box.SIMPLE)
    samples_table.add_column(translate("common.id", language))
    samples_table.add_column(translate("material.type", language))
    samples_table.add_column(translate("common.contractor", language))
    samples_table.add_column(translate("common.technician", language))
    samples_table.add_column(translate("common.date", language))

    for sample in samples:
        samples_table.add_row(
            short_id(sample["id"]),
            material_label(sample["material_type"], language),
            sample["contractor_name"],
            sample["technician_name"],
            datetime_to_display_local_date_str(sample["created"]),
        )

    console = Console()
    if len(samples) == 0:
        console.print(f" {translate('common.noData', language)}")
        return
    console.print(samples_table)


def single_sample_report(language: str, sample: Sample) -> None:
    header(language, translate("common.sample", language))

    sample_table = Table(box=box.SIMPLE)
    sample_table.add_column(translate("common.property", language))
    sample_table.add_column(translate("common.value", language))

    sample_table.add_row(translate("common.id", language), sample["id"] or "")
    sample_table.add_row(
        translate("material.type", language),
        material_label(sample["material_type"], language),
    )
    sample_table.add_row(
        translate("common.contractor", language), sample["contractor_name"]
    )
    sample_table.add_row(
        translate("common.technician", language), sample["technician_name"]
    )
    sample_table.add_row(
        translate("common.date", language),
        datetime_to_display_local_date_str(sample["created"]),
    )

    match sample["material_type"]:
        case "concrete":
            sample_table.add_row(
                translate("concrete.pouringDate", language), sample["pouring_date"]
            )
            sample_table.add_row(
                translate("concrete.pouringType", language), sample["pouring_type"]
            )
            sample_table.add_row(
                translate("concrete.requiredStrength", language),
                sample["required_strength"],
            )
            sample_table.add_row(
                translate("concrete.crushDate7", language),
                sample["crush_date_7_days"] or "",
            )
            sample_table.add_row(
                translate("concrete.crushDate28", language),
                sample["crush_date_28_days"] or "",
            )
        case "asphalt":
            sample_table.add_row(
                translate("asphalt.mixType", language), sample["mix_type"]
            )
            sample_table.add_row(
                translate("asphalt.plant", language), sample["asphalt_plant"]
            )
        case "soil":
            sample_table.add_row(
                translate("soil.siteLocation", language), sample["site_location"]
            )
            sample_table.add_row(
                translate("soil.requiredTests", language), sample["required_tests"]
            )
        case "steel":
            sample_table.add_row(
                translate("steel.grade", language), sample["steel_grade"]
            )
            sample_table.add_row(
                translate("steel.diameter", language), sample["diameter"]
            )
            sample_table.add_row(
                translate("steel.supplier", language), sample["supplier"]
            )
        case _:
            assert_never(sample["material_type"])

    files = ", ".join(
        f"{file['name']} ({short_id(file['id'])})" for file in sample["files"]
    )
    sample_table.add_row(translate("common.files", language), files)

    console = Console()
    console.print(sample_table)


def crush_dates_report(language: str, pouring_date: str, crush_dates: CrushDates) -> None:
    header(language, translate("concrete.pouringDate", language) + f": {pouring_date}")

    crush_dates_table = Table(box=box.SIMPLE)
    crush_dates_table.add_column(translate("common.milestone", language))
    crush_dates_table.add_column(translate("common.date", language))
    crush_dates_table.add_row(
        translate("concrete.crushDate7", language),
        date_to_display_str(crush_dates["day_7"]),
    )
    crush_dates_table.add_row(
        translate("concrete.crushDate28", language),
        date_to_display_str(crush_dates["day_28"]),
    )

    console = Console()
    console.print(crush_dates_table)
