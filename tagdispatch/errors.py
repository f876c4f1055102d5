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

"""Exceptions and warnings raised by tagdispatch."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "TagDispatchError",
    "UnhandledTypeError",
    "UnmatchedTagsWarning",
]


class TagDispatchError(Exception):
    """Base exception for dispatch errors."""


class UnhandledTypeError(TagDispatchError, NotImplementedError):
    """Raised when no binding matches a value's tags and no default exists.

    Attributes:
        operation: Name of the generic operation that was dispatched.
        tags: Every tag that was tried, most specific first.
    """

    def __init__(self, operation: str, tags: Sequence[str]):
        self.operation = operation
        self.tags = tuple(tags)
        if self.tags:
            tried = ", ".join(repr(t) for t in self.tags)
            msg = f"no method for operation {operation!r} on tags [{tried}] and no default"
        else:
            msg = f"no method for operation {operation!r} on an untagged value and no default"
        super().__init__(msg)

    def __reduce__(self):  # keep attributes through pickling
        return (type(self), (self.operation, self.tags))


class UnmatchedTagsWarning(UserWarning):
    """Emitted by warning defaults when a value's tags have no binding."""
