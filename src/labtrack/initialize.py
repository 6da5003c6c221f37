# SPDX-License-Identifier: MIT

import logging

from labtrack import configuration
from labtrack.repository.configuration import CONFIGURATION_REPO

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    logging.basicConfig(
        level=getattr(logging, config["log_level"], logging.WARNING),
        format=LOG_FORMAT,
    )
    logging.getLogger("initialize").debug(
        "Using data directory %s", configuration.DATA_PATH
    )


def __ensure_data_files() -> None:
    # Directory-based entity store (one file per sample)
    if not configuration.DATA_SAMPLES_DIR.is_dir():
        configuration.DATA_SAMPLES_DIR.mkdir(parents=True, exist_ok=True)
        (configuration.DATA_SAMPLES_DIR / ".gitkeep").touch()
