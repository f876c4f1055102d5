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

"""Model-fit objects that carry type tags.

Each fit records the data it was trained on so generic operations such as
``rss`` can be computed from the fit alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from sklearn.tree import DecisionTreeRegressor

__all__ = ["LinearFit", "TreeFit", "fit_glm", "fit_linear", "fit_tree"]


def _as_design(x: Any) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)
    if x.ndim == 1:
        x = x.reshape(-1, 1)
    if x.ndim != 2:
        raise ValueError(f"x must be 1-D or 2-D, got shape {x.shape}")
    return x


def _as_response(y: Any, n: int) -> np.ndarray:
    y = np.asarray(y, dtype=np.float64).reshape(-1)
    if y.shape[0] != n:
        raise ValueError(f"x has {n} rows but y has {y.shape[0]} values")
    return y


@dataclass
class LinearFit:
    """Least-squares fit. ``coef[0]`` is the intercept when one was fitted."""

    coef: np.ndarray
    fitted: np.ndarray
    residuals: np.ndarray
    intercept: bool = True
    type_tags: tuple[str, ...] = field(default=("lm",))

    def predict(self, x: Any) -> np.ndarray:
        x = _as_design(x)
        if self.intercept:
            x = np.column_stack([np.ones(x.shape[0]), x])
        return x @ self.coef


@dataclass
class TreeFit:
    """Regression tree fit wrapping a scikit-learn estimator."""

    model: DecisionTreeRegressor
    x: np.ndarray
    y: np.ndarray
    type_tags: tuple[str, ...] = field(default=("rpart",))

    def predict(self, x: Any) -> np.ndarray:
        return self.model.predict(_as_design(x))


def fit_linear(
    x: Any, y: Any, *, intercept: bool = True, tags: tuple[str, ...] = ("lm",)
) -> LinearFit:
    x = _as_design(x)
    y = _as_response(y, x.shape[0])
    design = np.column_stack([np.ones(x.shape[0]), x]) if intercept else x
    coef, *_ = np.linalg.lstsq(design, y, rcond=None)
    fitted = design @ coef
    return LinearFit(
        coef=coef,
        fitted=fitted,
        residuals=y - fitted,
        intercept=intercept,
        type_tags=tags,
    )


def fit_glm(x: Any, y: Any, *, intercept: bool = True) -> LinearFit:
    """Gaussian GLM with identity link.

    The estimate equals ordinary least squares; the result is tagged
    ``("glm", "lm")`` so glm-specific methods win and lm methods still apply.
    """
    return fit_linear(x, y, intercept=intercept, tags=("glm", "lm"))


def fit_tree(
    x: Any, y: Any, *, max_depth: int | None = 3, random_state: int = 0
) -> TreeFit:
    x = _as_design(x)
    y = _as_response(y, x.shape[0])
    model = DecisionTreeRegressor(max_depth=max_depth, random_state=random_state)
    model.fit(x, y)
    return TreeFit(model=model, x=x, y=y)
