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

"""Generic functions: a callable front-end over a DispatchRegistry.

Example:
    >>> area = Generic("area")
    >>>
    >>> @area.register("circle")
    >>> def _circle(shape):
    >>>     return math.pi * shape.value["r"] ** 2
    >>>
    >>> @area.default
    >>> def _unknown(shape):
    >>>     return float("nan")
    >>>
    >>> area(Tagged({"r": 1.0}, ("circle",)))
    3.141592653589793
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tagdispatch.registry import DispatchRegistry, ImplFn, get_registry

__all__ = ["Generic", "default_def", "method_def"]


class Generic:
    """A named generic operation bound to one registry.

    Calling the object dispatches on the first argument's tags; the remaining
    arguments are forwarded to the selected implementation.
    """

    def __init__(self, name: str, registry: DispatchRegistry | None = None):
        """Initialize a generic operation.

        Args:
            name: Operation name shared by every implementation (e.g. "rss").
            registry: Table to register into and dispatch from. Defaults to
                the process-wide registry.
        """
        self.name = name
        self._registry = registry if registry is not None else get_registry()

    @property
    def registry(self) -> DispatchRegistry:
        return self._registry

    def register(self, *tags: str) -> Callable[[ImplFn], ImplFn]:
        """Decorator binding one implementation to each of ``tags``."""
        if not tags:
            raise TypeError(f"{self.name}.register() needs at least one type tag")

        def _decorator(fn: ImplFn) -> ImplFn:
            for tag in tags:
                self._registry.register(self.name, tag, fn)
            return fn

        return _decorator

    def default(self, fn: ImplFn) -> ImplFn:
        """Decorator binding the fallback implementation."""
        self._registry.register_default(self.name, fn)
        return fn

    def __call__(self, argument: Any, *args: Any, **kwargs: Any) -> Any:
        return self._registry.dispatch(self.name, argument, *args, **kwargs)

    def __repr__(self) -> str:
        return f"Generic({self.name!r})"


def method_def(operation: str, *tags: str) -> Callable[[ImplFn], ImplFn]:
    """Decorator to register an implementation in the process-wide registry.

        @method_def("rss", "lm")
        def _rss_lm(fit): ...
    """
    return Generic(operation).register(*tags)


def default_def(operation: str) -> Callable[[ImplFn], ImplFn]:
    """Decorator to register a default in the process-wide registry."""

    def _decorator(fn: ImplFn) -> ImplFn:
        get_registry().register_default(operation, fn)
        return fn

    return _decorator
