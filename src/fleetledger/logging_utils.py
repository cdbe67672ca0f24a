"""Application-wide logging helpers for fleetledger.

Structure:
    * configure_root_logger - installs a single stderr handler on the root logger.
    * get_logger - returns a module-specific logger.

Console output meant for the user goes through ``click.echo``; loggers carry
diagnostics only and stay quiet below WARNING unless ``--verbose`` is given.
"""

import logging
from typing import Optional

_LOGGER_INITIALISED = False


def configure_root_logger(level: int = logging.WARNING) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _LOGGER_INITIALISED

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""
    return logging.getLogger(name)
