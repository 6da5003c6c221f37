# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from labtrack.error import InvalidDate
from labtrack.model.sample import Sample
from labtrack.repository.configuration import CONFIGURATION_REPO
from labtrack.repository.sample import SAMPLE_REPO
from labtrack.service.sample import (
    create_asphalt_sample,
    create_concrete_sample,
    create_soil_sample,
    create_steel_sample,
)
from labtrack.terminal.custom_typer import AliasedTyperGroup
from labtrack.terminal.parse import load_attachments
from labtrack.view.views import sample as sample_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

ContractorOption = Annotated[str, typer.Option("--contractor", "-c", prompt=True)]
TechnicianOption = Annotated[str, typer.Option("--technician", "-te", prompt=True)]
FilesOption = Annotated[
    Optional[list[Path]],
    typer.Option(
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        readable=True,
        help="accepts multiple file options",
    ),
]


def __save_and_show(sample: Sample) -> None:
    config = CONFIGURATION_REPO.get_config()
    id = SAMPLE_REPO.save_new_sample(sample)
    sample_report.single_sample_report(config["language"], SAMPLE_REPO.get_sample(id))


@app.command("concrete, co")
def concrete(
    contractor: ContractorOption,
    technician: TechnicianOption,
    pouring_date: Annotated[
        str,
        typer.Option("--pouring-date", "-pd", prompt=True, help="YYYY-MM-DD"),
    ],
    pouring_type: Annotated[str, typer.Option("--pouring-type", "-pt")] = "",
    required_strength: Annotated[
        str, typer.Option("--required-strength", "-rs")
    ] = "",
    files: FilesOption = None,
) -> None:
    """
    Add a concrete sample; 7 and 28 day crush dates are derived from the pour date.
    """
    try:
        sample = create_concrete_sample(
            contractor_name=contractor,
            technician_name=technician,
            pouring_date=pouring_date,
            pouring_type=pouring_type,
            required_strength=required_strength,
            files=load_attachments(files),
        )
    except InvalidDate as e:
        raise typer.BadParameter(str(e), param_hint="--pouring-date") from e
    __save_and_show(sample)


@app.command("asphalt, as")
def asphalt(
    contractor: ContractorOption,
    technician: TechnicianOption,
    mix_type: Annotated[str, typer.Option("--mix-type", "-m", help="B or C")] = "B",
    asphalt_plant: Annotated[str, typer.Option("--plant", "-p")] = "",
    files: FilesOption = None,
) -> None:
    """
    Add an asphalt sample.
    """
    try:
        sample = create_asphalt_sample(
            contractor_name=contractor,
            technician_name=technician,
            mix_type=mix_type.upper(),
            asphalt_plant=asphalt_plant,
            files=load_attachments(files),
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--mix-type") from e
    __save_and_show(sample)


@app.command("soil, so")
def soil(
    contractor: ContractorOption,
    technician: TechnicianOption,
    site_location: Annotated[str, typer.Option("--site", "-s")] = "",
    required_tests: Annotated[str, typer.Option("--tests", "-rt")] = "",
    files: FilesOption = None,
) -> None:
    """
    Add a soil sample.
    """
    sample = create_soil_sample(
        contractor_name=contractor,
        technician_name=technician,
        site_location=site_location,
        required_tests=required_tests,
        files=load_attachments(files),
    )
    __save_and_show(sample)


@app.command("steel, st")
def steel(
    contractor: ContractorOption,
    technician: TechnicianOption,
    steel_grade: Annotated[str, typer.Option("--grade", "-g")] = "",
    diameter: Annotated[str, typer.Option("--diameter", "-d")] = "",
    supplier: Annotated[str, typer.Option("--supplier", "-s")] = "",
    files: FilesOption = None,
) -> None:
    """
    Add a steel sample.
    """
    sample = create_steel_sample(
        contractor_name=contractor,
        technician_name=technician,
        steel_grade=steel_grade,
        diameter=diameter,
        supplier=supplier,
        files=load_attachments(files),
    )
    __save_and_show(sample)
