# -*- coding: utf-8 -*-
"""
src/wearpair/utils/logging_setup.py

Root logger configuration for the entry points. Library modules only ever
call logging.getLogger(__name__).
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = "WARNING"):
    """
    Configures the root logger.

    Args:
        level (str): A logging level name such as 'DEBUG' or 'INFO'. Unknown
                     names fall back to WARNING.
    """
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
