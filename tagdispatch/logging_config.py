# Copyright 2025 Ant Group Co., Ltd.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging for tagdispatch.

Everything the package logs goes through the ``tagdispatch`` logger:

* DEBUG: a registry rebinding an existing ``(operation, tag)`` pair or an
  operation's default, and a dispatch falling through to the default;
* WARNING: ``warn_unmatched`` defaults reporting tags without a method.

The logger is silent (NullHandler, no propagation) until ``setup_logging`` is
called or ``TAGDISPATCH_LOG_LEVEL`` is set in the environment at import.

    >>> import tagdispatch as td
    >>> td.setup_logging()                 # DEBUG to stderr: see every rebinding
    >>> td.setup_logging("WARNING")        # only unmatched-tag diagnostics
    >>> td.setup_logging(propagate=True, stream=False)  # hand off to the app
"""

import logging
import os
import sys
from typing import Any, Literal

TAGDISPATCH_LOGGER_NAME = "tagdispatch"
LOG_LEVEL_ENV = "TAGDISPATCH_LOG_LEVEL"

DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"

LevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: LevelName = "DEBUG",
    *,
    stream: Any = None,
    filename: str | None = None,
    format: str = DEFAULT_FORMAT,
    propagate: bool = False,
) -> logging.Logger:
    """Route tagdispatch records to a stream and/or a file.

    Each call replaces the handlers installed by the previous one, so calling
    it again only changes the configuration.

    Args:
        level: Threshold for tagdispatch records. DEBUG (the default) includes
            rebinding and default fall-through records.
        stream: Target stream, ``sys.stderr`` when None. False disables the
            stream handler.
        filename: Also append records to this file.
        format: ``logging.Formatter`` format string.
        propagate: Let records reach the application's root logger as well.

    Returns:
        The configured ``tagdispatch`` logger.
    """
    logger = logging.getLogger(TAGDISPATCH_LOGGER_NAME)
    _clear_handlers(logger)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = propagate

    formatter = logging.Formatter(format)
    handlers: list[logging.Handler] = []
    if stream is not False:
        handlers.append(logging.StreamHandler(sys.stderr if stream is None else stream))
    if filename:
        handlers.append(logging.FileHandler(filename))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if not handlers and not propagate:
        logger.addHandler(logging.NullHandler())
    return logger


def disable_logging() -> None:
    """Return the tagdispatch logger to its silent library default."""
    logger = logging.getLogger(TAGDISPATCH_LOGGER_NAME)
    _clear_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


def configure_from_env() -> bool:
    """Apply ``TAGDISPATCH_LOG_LEVEL`` if it is set. Returns whether it was."""
    level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not level:
        return False
    if level not in _LEVEL_NAMES:
        raise ValueError(f"{LOG_LEVEL_ENV}={level!r} is not a logging level name")
    setup_logging(level)  # type: ignore[arg-type]
    return True


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` under the tagdispatch hierarchy (prefixed if needed)."""
    if name != TAGDISPATCH_LOGGER_NAME and not name.startswith(
        f"{TAGDISPATCH_LOGGER_NAME}."
    ):
        name = f"{TAGDISPATCH_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def _clear_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


if not configure_from_env():
    _root_logger = logging.getLogger(TAGDISPATCH_LOGGER_NAME)
    if not _root_logger.handlers:
        _root_logger.addHandler(logging.NullHandler())
        _root_logger.propagate = False
