"""Logger lookup for ddldoc modules.

Every module logs under the ``ddldoc`` hierarchy so one
``logging.getLogger("ddldoc")`` controls the whole package. ddldoc itself
never installs handlers; the ``ddldoc`` command sets up a plain
``[LEVEL] message`` format and applications embedding the library keep
their own setup.

What gets logged:

- INFO: each protocol found, each document written
- WARNING: synthetic protocol names, protocol names declared twice
- DEBUG: skipped declarations, classes after the last protocol

Example:
    >>> from ddldoc.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Found NEX protocol: %s", "MatchMaking")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``ddldoc`` hierarchy.

    Names already under ``ddldoc`` are used as is:

        >>> get_logger("ddldoc.tree").name
        'ddldoc.tree'
        >>> get_logger("plugins").name
        'ddldoc.plugins'
    """
    if not (name == "ddldoc" or name.startswith("ddldoc.")):
        name = f"ddldoc.{name}"
    return logging.getLogger(name)
