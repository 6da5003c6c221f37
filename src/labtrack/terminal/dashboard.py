# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from labtrack.error import InvalidDate
from labtrack.repository.configuration import CONFIGURATION_REPO
from labtrack.repository.sample import SAMPLE_REPO
from labtrack.service.crush_alert import get_crush_alerts
from labtrack.service.crush_date import derive_crush_dates
from labtrack.service.sample import get_sample_stats
from labtrack.terminal.parse import parse_date
from labtrack.time import today_local
from labtrack.view.views import dashboard as dashboard_report
from labtrack.view.views import sample as sample_report


def dashboard(
    today: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--today",
            "-t",
            parser=parse_date,
            help="evaluate alerts as of this date; valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
) -> None:
    """
    Show sample counts and the upcoming crush-date alerts.
    """
    config = CONFIGURATION_REPO.get_config()
    samples = SAMPLE_REPO.get_all_samples()
    reference = today if today is not None else today_local()

    dashboard_report.dashboard_view(
        config["language"],
        get_sample_stats(samples),
        get_crush_alerts(samples, reference),
    )


def crush_dates(
    pouring_date: Annotated[str, typer.Argument(help="YYYY-MM-DD")],
) -> None:
    """
    Preview the 7 and 28 day crush dates for a pour date.
    """
    config = CONFIGURATION_REPO.get_config()
    try:
        derived = derive_crush_dates(pouring_date)
    except InvalidDate as e:
        raise typer.BadParameter(str(e), param_hint="POURING_DATE") from e
    sample_report.crush_dates_report(config["language"], pouring_date, derived)
