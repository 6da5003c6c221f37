# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print

from labtrack.i18n import translate
from labtrack.model.material_type import MATERIAL_TYPES
from labtrack.repository.configuration import CONFIGURATION_REPO
from labtrack.repository.sample import SAMPLE_REPO
from labtrack.service.attachment import attachment_file_name, attachment_payload
from labtrack.service.sample import filter_samples, get_contractors
from labtrack.terminal.custom_typer import AliasedTyperGroup
from labtrack.terminal.parse import load_attachments
from labtrack.view.views import sample as sample_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def complete_material_type(incomplete: str) -> list[str]:
    return [
        material_type
        for material_type in MATERIAL_TYPES
        if material_type.startswith(incomplete)
    ]


def complete_contractor(incomplete: str) -> list[str]:
    contractors = get_contractors(SAMPLE_REPO.get_all_samples())
    return [contractor for contractor in contractors if contractor.startswith(incomplete)]


def __resolve_id(id: str) -> str:
    try:
        return SAMPLE_REPO.find_sample_id(id)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="ID") from e


@app.command("list, ls")
def list_samples(
    search: Annotated[
        Optional[str],
        typer.Option(
            "--search", "-s", help="matches contractor or technician name"
        ),
    ] = None,
    material: Annotated[
        Optional[str],
        typer.Option(
            "--material", "-m", autocompletion=complete_material_type
        ),
    ] = None,
    contractor: Annotated[
        Optional[str],
        typer.Option("--contractor", "-c", autocompletion=complete_contractor),
    ] = None,
) -> None:
    """
    List samples, newest first.
    """
    if material is not None and material not in MATERIAL_TYPES:
        raise typer.BadParameter(
            f"must be one of {', '.join(MATERIAL_TYPES)}", param_hint="--material"
        )
    config = CONFIGURATION_REPO.get_config()
    samples = filter_samples(
        SAMPLE_REPO.get_all_samples(),
        search=search,
        material_type=material,
        contractor=contractor,
    )
    sample_report.samples_view(
        config["language"], translate("common.samples", config["language"]), samples
    )


@app.command("show, sh", no_args_is_help=True)
def show(id: str) -> None:
    """
    Show every field of one sample.
    """
    config = CONFIGURATION_REPO.get_config()
    sample = SAMPLE_REPO.get_sample(__resolve_id(id))
    sample_report.single_sample_report(config["language"], sample)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    contractor: Annotated[Optional[str], typer.Option("--contractor", "-c")] = None,
    technician: Annotated[Optional[str], typer.Option("--technician", "-te")] = None,
    fields: Annotated[
        Optional[list[str]],
        typer.Option(
            "--set",
            help="material field as name=value, e.g. pouring_type=slab",
        ),
    ] = None,
    add_files: Annotated[
        Optional[list[Path]],
        typer.Option("--add-file", "-f", exists=True, dir_okay=False, readable=True),
    ] = None,
    remove_file_ids: Annotated[
        Optional[list[str]],
        typer.Option("--remove-file", "-rf", help="attachment id"),
    ] = None,
) -> None:
    """
    Modify a sample. Pouring and crush dates are fixed once recorded.
    """
    config = CONFIGURATION_REPO.get_config()
    real_id = __resolve_id(id)

    field_updates: Optional[dict[str, str]] = None
    if fields is not None:
        field_updates = {}
        for field in fields:
            name, separator, value = field.partition("=")
            if not separator:
                raise typer.BadParameter(
                    f"expected name=value, got {field!r}", param_hint="--set"
                )
            field_updates[name.strip()] = value

    # Attachment ids are shown shortened; match them by prefix
    full_remove_ids: Optional[list[str]] = None
    if remove_file_ids is not None:
        existing_files = SAMPLE_REPO.get_sample(real_id)["files"]
        full_remove_ids = [
            file["id"]
            for file in existing_files
            if any(file["id"].startswith(prefix) for prefix in remove_file_ids)
        ]

    try:
        SAMPLE_REPO.modify_sample(
            real_id,
            contractor_name=contractor,
            technician_name=technician,
            fields=field_updates,
            add_files=load_attachments(add_files) if add_files else None,
            remove_file_ids=full_remove_ids,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--set") from e

    sample_report.single_sample_report(
        config["language"], SAMPLE_REPO.get_sample(real_id)
    )


@app.command("delete, del", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """
    Delete a sample and its attachments.
    """
    real_id = __resolve_id(id)
    if not yes:
        typer.confirm(f"Delete sample {real_id}?", abort=True)
    SAMPLE_REPO.delete_sample(real_id)
    print(f"[red]deleted[/red] {real_id}")


@app.command("export-file, ef", no_args_is_help=True)
def export_file(
    id: str,
    file_id: str,
    output_dir: Annotated[
        Path, typer.Option("--output", "-o", file_okay=False)
    ] = Path("."),
) -> None:
    """
    Write an attachment of a sample back to disk.
    """
    sample = SAMPLE_REPO.get_sample(__resolve_id(id))
    matches = [file for file in sample["files"] if file["id"].startswith(file_id)]
    if len(matches) != 1:
        raise typer.BadParameter(
            f"expected exactly one attachment matching {file_id!r}, found {len(matches)}",
            param_hint="FILE_ID",
        )
    attachment = matches[0]
    try:
        file_name = attachment_file_name(attachment)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="FILE_ID")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / file_name
    output_path.write_bytes(attachment_payload(attachment))
    print(f"wrote {output_path}")
