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

"""Ready-made default implementations."""

from __future__ import annotations

import os
import sys
import warnings
from typing import Any

from tagdispatch.errors import UnmatchedTagsWarning
from tagdispatch.logging_config import get_logger
from tagdispatch.registry import ImplFn
from tagdispatch.tags import tags_of

__all__ = ["warn_unmatched"]

logger = get_logger(__name__)

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


def _caller_stacklevel() -> int:
    """stacklevel for a warning raised here that points past tagdispatch frames.

    Level 1 is the function calling ``warnings.warn``; each frame inside the
    package between it and user code adds one.
    """
    level = 1
    frame = sys._getframe(1)
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(
        _PACKAGE_DIR
    ):
        frame = frame.f_back
        level += 1
    return level


def warn_unmatched(operation: str, result: Any = None) -> ImplFn:
    """Build a default that warns about the unmatched tags and returns ``result``.

    The warning names the operation and every tag the argument carried, so the
    caller learns which type is missing a method without the call failing.
    """

    def _default(argument: Any, *args: Any, **kwargs: Any) -> Any:
        tags = tags_of(argument)
        msg = (
            f"{operation}: no method for tags {list(tags)}, returning {result!r}"
            if tags
            else f"{operation}: no method for untagged {type(argument).__name__}, "
            f"returning {result!r}"
        )
        logger.warning(msg)
        warnings.warn(msg, UnmatchedTagsWarning, stacklevel=_caller_stacklevel())
        return result

    _default.__name__ = f"{operation}_default"
    return _default
