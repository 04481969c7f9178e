################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""
Loggers used across the package.
"""

import logging

from ._env import VERBOSE_ENV, flag_set


def get_logger(name: str) -> logging.Logger:
    """Returns the logger for the module ``name``.

    When ``POWERVS_VERBOSE`` is set, the logger prints debug messages to stderr.
    Otherwise the configuration is left to the application.
    """
    logger = logging.getLogger(name)

    if flag_set(VERBOSE_ENV) and not logger.handlers:
        # Ensure it prints somewhere
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)

    return logger
