# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Iterable, Optional

import pendulum

from labtrack.error import InvalidDate
from labtrack.i18n import DEFAULT_LANGUAGE, translate
from labtrack.model.crush_alert import CrushAlert, Milestone, Urgency
from labtrack.model.material_type import MaterialType
from labtrack.model.sample import ConcreteSample, Sample
from labtrack.time import date_from_str, days_between, to_calendar_date

ALERT_WINDOW_LOWER_BOUND_DAYS = -3
ALERT_WINDOW_UPPER_BOUND_DAYS = 7

log = logging.getLogger("crush_alert")


def is_within_alert_window(days_left: int) -> bool:
    return ALERT_WINDOW_LOWER_BOUND_DAYS <= days_left <= ALERT_WINDOW_UPPER_BOUND_DAYS


def get_crush_alerts(
    samples: Iterable[Sample], today: datetime.date
) -> list[CrushAlert]:
    """
    Build the crush-date alert feed for a snapshot of samples.

    Only concrete samples carrying two parseable crush dates are eligible.
    Each milestone whose days_left falls inside the alert window produces
    one alert, so a sample contributes zero, one or two entries.

    Args:
        samples: Samples as returned by the store
        today: Reference date; any time-of-day component is dropped

    Returns:
        Alerts sorted ascending by days_left (most overdue first)
    """
    reference = to_calendar_date(today)
    alerts: list[CrushAlert] = []

    for sample in samples:
        if sample.get("material_type") != MaterialType.CONCRETE:
            continue
        milestones = _parse_milestones(sample)
        if milestones is None:
            continue

        for milestone, milestone_date in milestones:
            days_left = days_between(reference, milestone_date)
            if is_within_alert_window(days_left):
                alerts.append(
                    {
                        "sample": sample,
                        "milestone": milestone,
                        "date": milestone_date,
                        "days_left": days_left,
                    }
                )

    alerts.sort(key=lambda alert: alert["days_left"])
    return alerts


def _parse_milestones(
    sample: ConcreteSample,
) -> Optional[list[tuple[Milestone, pendulum.Date]]]:
    try:
        day_7 = date_from_str(sample.get("crush_date_7_days"))
        day_28 = date_from_str(sample.get("crush_date_28_days"))
    except InvalidDate as e:
        log.debug("Skipping sample %s: %s", sample.get("id"), e)
        return None
    return [(7, day_7), (28, day_28)]


def get_urgency(days_left: int) -> str:
    if days_left < 0:
        return Urgency.OVERDUE
    if days_left == 0:
        return Urgency.DUE_TODAY
    if days_left == 1:
        return Urgency.DUE_TOMORROW
    return Urgency.UPCOMING


def days_left_label(days_left: int, language: str = DEFAULT_LANGUAGE) -> str:
    urgency = get_urgency(days_left)
    if urgency == Urgency.OVERDUE:
        return translate("dashboard.overdue", language)
    if urgency == Urgency.DUE_TODAY:
        return translate("dashboard.today", language)
    if urgency == Urgency.DUE_TOMORROW:
        return translate("dashboard.tomorrow", language)
    return translate("dashboard.daysLeft", language, days=days_left)
