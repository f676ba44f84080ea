# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Logging utilities for the Resend client.

The library never installs handlers or sets levels; applications configure
logging (``logging.basicConfig()`` or their own setup) at the entry point.

Example:
    Typical usage in a module::

        from resend_client.logger import get_logger

        logger = get_logger("dispatcher")
        logger.debug("POST https://api.resend.com/emails")
"""

import logging

ROOT_LOGGER_NAME = "resend_client"


def get_logger(name: str | None = None) -> logging.Logger:
    """Retrieve a logger below the library's ``resend_client`` namespace.

    Args:
        name: Child logger name. ``None`` returns the library root logger.

    Returns:
        A ``logging.Logger`` instance bound to the given name.

    Example:
        >>> logger = get_logger("rate_limit")
        >>> logger.name
        'resend_client.rate_limit'
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
