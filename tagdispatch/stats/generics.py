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

"""``rss`` and ``summary`` generics over fits and data.

Importing this module registers the methods below in the process-wide
registry. ``poor_mans_rss`` computes the same thing with an explicit
``if/elif`` chain over the concrete fit classes.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from tagdispatch.defaults import warn_unmatched
from tagdispatch.errors import UnhandledTypeError
from tagdispatch.generic import Generic
from tagdispatch.stats.models import LinearFit, TreeFit
from tagdispatch.tags import declare_tags, tags_of

__all__ = ["poor_mans_rss", "rss", "summary"]

declare_tags(pd.DataFrame, ("data.frame", "list"))
declare_tags(pd.Series, ("numeric",))
declare_tags(np.ndarray, ("numeric",))

rss = Generic("rss")
summary = Generic("summary")


@rss.register("lm")
def _rss_lm(fit: LinearFit) -> float:
    return float(np.sum(fit.residuals**2))


@rss.register("rpart")
def _rss_rpart(fit: TreeFit) -> float:
    resid = fit.y - fit.predict(fit.x)
    return float(np.sum(resid**2))


rss.default(warn_unmatched("rss", result=float("nan")))


@summary.register("data.frame")
def _summary_frame(df: pd.DataFrame, **kwargs: Any) -> pd.DataFrame:
    return df.describe(**kwargs)


@summary.register("numeric")
def _summary_numeric(values: Any) -> pd.Series:
    x = np.asarray(values, dtype=np.float64).reshape(-1)
    if x.size == 0:
        raise ValueError("summary of an empty vector")
    q1, med, q3 = np.percentile(x, [25, 50, 75])
    return pd.Series(
        {
            "min": x.min(),
            "25%": q1,
            "50%": med,
            "mean": x.mean(),
            "75%": q3,
            "max": x.max(),
        }
    )


summary.default(warn_unmatched("summary"))


def poor_mans_rss(fit: Any) -> float:
    """RSS through an explicit type check per fit class.

    Supporting a new fit type means editing this function.
    """
    if isinstance(fit, LinearFit):
        return float(np.sum(fit.residuals**2))
    elif isinstance(fit, TreeFit):
        return float(np.sum((fit.y - fit.predict(fit.x)) ** 2))
    else:
        raise UnhandledTypeError("rss", tags_of(fit))
