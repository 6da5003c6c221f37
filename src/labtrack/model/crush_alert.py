# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict

import pendulum

from labtrack.model.sample import ConcreteSample

Milestone: TypeAlias = Literal[7, 28]


class CrushDates(TypedDict):
    day_7: pendulum.Date
    day_28: pendulum.Date


class CrushAlert(TypedDict):
    sample: ConcreteSample
    milestone: Milestone
    date: pendulum.Date
    days_left: int


class Urgency:
    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    DUE_TOMORROW = "due_tomorrow"
    UPCOMING = "upcoming"
