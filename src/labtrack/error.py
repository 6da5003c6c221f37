# SPDX-License-Identifier: MIT


class InvalidDate(ValueError):
    """Raised when a value does not parse as a YYYY-MM-DD calendar date."""

    def __init__(self, value: object, reason: str = "not a valid calendar date") -> None:
        self.value = value
        super().__init__(f"{value!r} is {reason}")
