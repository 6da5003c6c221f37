# SPDX-License-Identifier: MIT

import atexit

from labtrack.repository.configuration import CONFIGURATION_REPO
from labtrack.repository.sample import SAMPLE_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    SAMPLE_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
