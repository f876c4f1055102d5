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

"""Dispatch registry: (operation, type tag) -> implementation.

Implementations register here, keyed by a generic operation name and one type
tag. ``dispatch`` walks the argument's tags most specific first and calls the
first bound implementation, then the operation's default, and otherwise raises
``UnhandledTypeError``.

Exposed primitives:
* ``DispatchRegistry``: an isolated binding table.
* ``register`` / ``register_default`` / ``dispatch``: the same operations on
  the process-wide registry returned by ``get_registry()``.
* ``get_profiler`` / ``enable_profiling`` / ``disable_profiling``: optional
  per-operation timing, also enabled by ``TAGDISPATCH_PROFILE=1``.

Bindings are plain dict entries: registering an existing pair overwrites it,
and nothing is ever removed. The registry takes no locks; concurrent
``register`` calls race and the last write wins.
"""

from __future__ import annotations

import os
import time
from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from tagdispatch.errors import UnhandledTypeError
from tagdispatch.logging_config import get_logger
from tagdispatch.tags import normalize_tags, tags_of

__all__ = [
    "Binding",
    "DispatchProfiler",
    "DispatchRegistry",
    "disable_profiling",
    "dispatch",
    "enable_profiling",
    "get_profiler",
    "get_registry",
    "register",
    "register_default",
]

logger = get_logger(__name__)

# Implementation signature: (argument, *args, **kwargs) -> Any
ImplFn = Callable[..., Any]

# ==============================================================================
# Profiler
# ==============================================================================


@dataclass
class DispatchProfiler:
    """Tracks how often and how long each operation's implementations run.

    Entries are keyed by ``(registry name, operation)`` so registries with
    distinct names never share statistics.
    """

    enabled: bool = False
    timings: dict[tuple[str, str], list[float]] = field(default_factory=lambda: defaultdict(list))
    defaults: dict[tuple[str, str], int] = field(default_factory=lambda: defaultdict(int))

    def reset(self) -> None:
        self.timings = defaultdict(list)
        self.defaults = defaultdict(int)

    def record(
        self, registry: str, operation: str, duration: float, used_default: bool
    ) -> None:
        if self.enabled:
            key = (registry, operation)
            self.timings[key].append(duration)
            if used_default:
                self.defaults[key] += 1

    def summary(self) -> dict[tuple[str, str], dict[str, float]]:
        """Get summary statistics for every operation dispatched so far."""
        result = {}
        for key, times in sorted(self.timings.items()):
            if times:
                result[key] = {
                    "count": len(times),
                    "defaults": self.defaults.get(key, 0),
                    "total": sum(times),
                    "mean": sum(times) / len(times),
                    "min": min(times),
                    "max": max(times),
                }
        return result

    def print_summary(self, top_n: int = 20) -> None:
        """Print a formatted summary of timing statistics."""
        stats = self.summary()
        if not stats:
            print("No dispatch data collected.")
            return

        print("\n" + "=" * 80)
        print("DISPATCH TIMING SUMMARY")
        print("=" * 80)
        print(
            f"{'Operation':<30} {'Count':>8} {'Default':>8} {'Total(s)':>10} "
            f"{'Mean(ms)':>10} {'Max(ms)':>10}"
        )
        print("-" * 80)

        sorted_stats = sorted(stats.items(), key=lambda x: -x[1]["total"])
        for (registry, operation), s in sorted_stats[:top_n]:
            label = f"{registry}/{operation}"
            print(
                f"{label:<30} {s['count']:>8} {s['defaults']:>8} "
                f"{s['total']:>10.3f} {s['mean'] * 1000:>10.3f} "
                f"{s['max'] * 1000:>10.3f}"
            )

        if len(sorted_stats) > top_n:
            print(f"  ... and {len(sorted_stats) - top_n} more operations")


_profiler = DispatchProfiler(
    enabled=os.environ.get("TAGDISPATCH_PROFILE", "").lower() in ("1", "true", "yes")
)


def get_profiler() -> DispatchProfiler:
    """Get the global dispatch profiler instance."""
    return _profiler


def enable_profiling() -> None:
    _profiler.enabled = True
    _profiler.reset()


def disable_profiling() -> None:
    _profiler.enabled = False


# ==============================================================================
# Registry
# ==============================================================================


@dataclass(frozen=True)
class Binding:
    """A selected implementation; ``tag`` is None for the default."""

    operation: str
    tag: str | None
    fn: ImplFn

    @property
    def is_default(self) -> bool:
        return self.tag is None


def _check_operation(operation: Any) -> str:
    if not isinstance(operation, str):
        raise TypeError(f"operation name must be str, got {type(operation).__name__}")
    if not operation:
        raise ValueError("operation name must be a non-empty string")
    return operation


def _check_impl(operation: str, fn: Any) -> ImplFn:
    if not callable(fn):
        raise TypeError(f"implementation for {operation!r} is not callable: {fn!r}")
    return fn


class DispatchRegistry:
    """An isolated table of implementation and default bindings.

    Parameters
    ----------
    name : str
        Label used in log messages, ``repr`` and profiler keys.
    """

    __slots__ = ("_bindings", "_defaults", "name")

    def __init__(self, name: str = "registry") -> None:
        self.name = name
        # operation -> tag -> implementation
        self._bindings: dict[str, dict[str, ImplFn]] = {}
        self._defaults: dict[str, ImplFn] = {}

    # ---- registration ----
    def register(self, operation: str, tag: str, fn: ImplFn) -> None:
        """Bind ``fn`` to ``(operation, tag)``, replacing any previous binding."""
        _check_operation(operation)
        if not isinstance(tag, str):
            raise TypeError(f"type tag must be str, got {type(tag).__name__}")
        (tag,) = normalize_tags(tag)
        _check_impl(operation, fn)
        table = self._bindings.setdefault(operation, {})
        if tag in table:
            logger.debug(
                "%s: rebinding %s[%s] from %r to %r",
                self.name,
                operation,
                tag,
                table[tag],
                fn,
            )
        table[tag] = fn

    def register_default(self, operation: str, fn: ImplFn) -> None:
        """Bind ``fn`` as the fallback of ``operation``, replacing any previous one."""
        _check_operation(operation)
        _check_impl(operation, fn)
        if operation in self._defaults:
            logger.debug("%s: rebinding default of %s to %r", self.name, operation, fn)
        self._defaults[operation] = fn

    # ---- lookup ----
    def resolve(self, operation: str, tags: Iterable[str]) -> Binding | None:
        """Return the binding ``dispatch`` would call for ``tags``, or None."""
        table = self._bindings.get(operation, {})
        for tag in tags:
            fn = table.get(tag)
            if fn is not None:
                return Binding(operation, tag, fn)
        default = self._defaults.get(operation)
        if default is not None:
            return Binding(operation, None, default)
        return None

    def dispatch(self, operation: str, argument: Any, *args: Any, **kwargs: Any) -> Any:
        """Call the implementation of ``operation`` selected by ``argument``'s tags.

        Extra positional and keyword arguments are forwarded unchanged. Errors
        raised by the implementation propagate as is.

        Raises:
            UnhandledTypeError: no tag is bound and the operation has no default.
        """
        _check_operation(operation)
        tags = tags_of(argument)
        binding = self.resolve(operation, tags)
        if binding is None:
            raise UnhandledTypeError(operation, tags)
        if binding.is_default:
            logger.debug(
                "%s: %s has no method for tags %s, using default",
                self.name,
                operation,
                list(tags),
            )

        if not _profiler.enabled:
            return binding.fn(argument, *args, **kwargs)

        t0 = time.perf_counter()
        try:
            return binding.fn(argument, *args, **kwargs)
        finally:
            _profiler.record(
                self.name, operation, time.perf_counter() - t0, binding.is_default
            )

    # ---- introspection ----
    def get_binding(self, operation: str, tag: str) -> ImplFn | None:
        return self._bindings.get(operation, {}).get(tag)

    def get_default(self, operation: str) -> ImplFn | None:
        return self._defaults.get(operation)

    def list_operations(self) -> list[str]:
        return sorted(set(self._bindings) | set(self._defaults))

    def list_tags(self, operation: str) -> list[str]:
        return sorted(self._bindings.get(operation, {}))

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        n = sum(len(t) for t in self._bindings.values())
        return (
            f"DispatchRegistry(name={self.name!r}, bindings={n}, "
            f"defaults={len(self._defaults)})"
        )


# Process-wide registry; bindings persist for the life of the interpreter
_REGISTRY = DispatchRegistry("global")


def get_registry() -> DispatchRegistry:
    """Return the process-wide registry."""
    return _REGISTRY


def register(operation: str, tag: str, fn: ImplFn) -> None:
    _REGISTRY.register(operation, tag, fn)


def register_default(operation: str, fn: ImplFn) -> None:
    _REGISTRY.register_default(operation, fn)


def dispatch(operation: str, argument: Any, *args: Any, **kwargs: Any) -> Any:
    return _REGISTRY.dispatch(operation, argument, *args, **kwargs)
