# SPDX-License-Identifier: MIT

import atexit

from loguru import logger

from heatgrid import configuration
from heatgrid.repository.configuration import CONFIGURATION_REPO


def save_configuration() -> None:
    """Write pending configuration changes made by the command that just ran."""
    if CONFIGURATION_REPO.is_dirty:
        logger.debug(f"Saving configuration to {configuration.APP_CONFIG_PATH}")
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(save_configuration)
