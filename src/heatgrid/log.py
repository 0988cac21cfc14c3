# SPDX-License-Identifier: MIT

import sys

from loguru import logger


def configure_logging(verbose: bool = False) -> None:
    """Send log output to stderr; DEBUG when verbose, WARNING otherwise."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<level>{level: <8}</level> {message}",
    )
