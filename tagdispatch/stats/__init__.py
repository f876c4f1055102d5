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

"""Worked example: residual sum of squares and summaries via tag dispatch."""

from tagdispatch.stats.generics import poor_mans_rss, rss, summary
from tagdispatch.stats.models import LinearFit, TreeFit, fit_glm, fit_linear, fit_tree

__all__ = [
    "LinearFit",
    "TreeFit",
    "fit_glm",
    "fit_linear",
    "fit_tree",
    "poor_mans_rss",
    "rss",
    "summary",
]
