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

"""Type tags: ordered labels a value is dispatched on.

A value's tags come from one of three places, checked in order:

1. a ``type_tags`` attribute stored on the instance or defined by its class
   (``Tagged`` wraps any payload this way). The lookup is static: dynamic
   ``__getattr__`` hooks, such as pandas column and index access, are never
   consulted, so a value's data cannot pose as its tags;
2. tags declared for its Python type with ``declare_tags``, looked up along
   the type's MRO;
3. nothing, in which case the value is untagged (``()``).

Tags are always most specific first. Fallback between tags follows that order
only; Python inheritance between the tagged classes plays no part.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Tagged",
    "declare_tags",
    "declared_tags",
    "normalize_tags",
    "tags_of",
]

TAGS_ATTR_NAME = "type_tags"


def normalize_tags(tags: str | Iterable[str]) -> tuple[str, ...]:
    """Validate tags and return them as a tuple.

    A single string is one tag. Repeated tags keep their first (most specific)
    position.
    """
    if isinstance(tags, str):
        tags = (tags,)
    out: list[str] = []
    for tag in tags:
        if not isinstance(tag, str):
            raise TypeError(f"type tag must be str, got {type(tag).__name__}")
        if not tag:
            raise ValueError("type tag must be a non-empty string")
        if tag not in out:
            out.append(tag)
    return tuple(out)


@dataclass(frozen=True)
class Tagged:
    """A payload carrying an explicit, ordered list of type tags.

    Example:
        >>> circle = Tagged({"r": 1.0}, ("circle", "shape"))
        >>> tags_of(circle)
        ('circle', 'shape')
    """

    value: Any
    type_tags: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "type_tags", normalize_tags(self.type_tags))


# Declared tags per Python type, plus an MRO resolution cache
_TYPE_TAGS: dict[type, tuple[str, ...]] = {}
_RESOLVED: dict[type, tuple[str, ...]] = {}


def declare_tags(py_type: type, tags: str | Iterable[str]) -> None:
    """Declare the tags carried by instances of ``py_type``.

    Redeclaring a type replaces its tags.
    """
    if not isinstance(py_type, type):
        raise TypeError(f"declare_tags expects a type, got {py_type!r}")
    _TYPE_TAGS[py_type] = normalize_tags(tags)
    _RESOLVED.clear()


def declared_tags(py_type: type) -> tuple[str, ...]:
    """Return the tags declared for ``py_type`` or its nearest base, else ()."""
    cached = _RESOLVED.get(py_type)
    if cached is not None:
        return cached
    tags: tuple[str, ...] = ()
    for base in py_type.__mro__:
        if base in _TYPE_TAGS:
            tags = _TYPE_TAGS[base]
            break
    _RESOLVED[py_type] = tags
    return tags


def tags_of(value: Any) -> tuple[str, ...]:
    """Return the ordered tags of ``value``, most specific first."""
    own = _own_tags(value)
    if own is not None:
        return normalize_tags(own)
    return declared_tags(type(value))


def _own_tags(value: Any) -> Any:
    if isinstance(value, type):
        return None
    own = inspect.getattr_static(value, TAGS_ATTR_NAME, None)
    # properties and other class-level descriptors
    if own is not None and hasattr(type(own), "__get__"):
        own = own.__get__(value, type(value))
    return own
