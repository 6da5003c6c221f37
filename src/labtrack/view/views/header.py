# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from labtrack.i18n import translate


def header(language: str, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        language: Label language
        sub_header: Optional sub-header text to display
    """
    print(
        Padding(
            f"[dark_orange]{translate('app.title', language)}[/dark_orange]",
            (1, 0, 0, 1),
        )
    )
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
