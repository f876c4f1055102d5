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

"""Single dispatch on ordered type tags.

    import tagdispatch as td

    td.register("area", "circle", circle_area)
    td.register_default("area", lambda shape: float("nan"))
    td.dispatch("area", td.Tagged({"r": 1.0}, ("circle", "shape")))

The numeric examples live in ``tagdispatch.stats`` and are not imported here.
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("tagdispatch")
except PackageNotFoundError:
    # Source checkout without an installed distribution
    __version__ = "0.0.0-dev"

from tagdispatch.defaults import warn_unmatched
from tagdispatch.errors import (
    TagDispatchError,
    UnhandledTypeError,
    UnmatchedTagsWarning,
)
from tagdispatch.generic import Generic, default_def, method_def
from tagdispatch.logging_config import (
    configure_from_env,
    disable_logging,
    get_logger,
    setup_logging,
)
from tagdispatch.registry import (
    Binding,
    DispatchProfiler,
    DispatchRegistry,
    disable_profiling,
    dispatch,
    enable_profiling,
    get_profiler,
    get_registry,
    register,
    register_default,
)
from tagdispatch.tags import Tagged, declare_tags, normalize_tags, tags_of

__all__ = [
    "Binding",
    "DispatchProfiler",
    "DispatchRegistry",
    "Generic",
    "TagDispatchError",
    "Tagged",
    "UnhandledTypeError",
    "UnmatchedTagsWarning",
    "__version__",
    "configure_from_env",
    "declare_tags",
    "default_def",
    "disable_logging",
    "disable_profiling",
    "dispatch",
    "enable_profiling",
    "get_logger",
    "get_profiler",
    "get_registry",
    "method_def",
    "normalize_tags",
    "register",
    "register_default",
    "setup_logging",
    "tags_of",
    "warn_unmatched",
]
