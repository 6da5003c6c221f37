# SPDX-License-Identifier: MIT

import re
from pathlib import Path
from typing import Optional

import pendulum
import typer

from labtrack.error import InvalidDate
from labtrack.model.file_attachment import FileAttachment
from labtrack.service.attachment import attachment_from_path
from labtrack.time import date_from_str, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a calendar date option.

    Accepts YYYY-MM-DD, today (t), yesterday (y), tomorrow (o), or a day
    offset relative to today such as 1 or -3.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))
    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)

    try:
        return date_from_str(date)
    except InvalidDate as e:
        raise typer.BadParameter(str(e)) from e


def load_attachments(paths: Optional[list[Path]]) -> list[FileAttachment]:
    if paths is None:
        return []
    return [attachment_from_path(path) for path in paths]
