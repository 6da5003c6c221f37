# SPDX-License-Identifier: MIT

from labtrack.model.crush_alert import CrushDates
from labtrack.time import add_days, date_from_str, date_to_str

CRUSH_OFFSET_7_DAYS = 7
CRUSH_OFFSET_28_DAYS = 28


def derive_crush_dates(pouring_date: str) -> CrushDates:
    """
    Derive the 7-day and 28-day crush dates for a concrete pour.

    Args:
        pouring_date: Pour date as entered, in 'YYYY-MM-DD' format

    Returns:
        The two milestone dates as calendar dates

    Raises:
        InvalidDate: if pouring_date is not a valid calendar date, or a
            milestone falls outside the representable range
    """
    poured = date_from_str(pouring_date)
    return {
        "day_7": add_days(poured, CRUSH_OFFSET_7_DAYS),
        "day_28": add_days(poured, CRUSH_OFFSET_28_DAYS),
    }


def crush_dates_to_str(crush_dates: CrushDates) -> tuple[str, str]:
    return date_to_str(crush_dates["day_7"]), date_to_str(crush_dates["day_28"])
