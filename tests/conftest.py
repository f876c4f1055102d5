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

import pytest

from tagdispatch import DispatchRegistry, Tagged, disable_logging


@pytest.fixture
def registry():
    """A fresh registry so tests never see each other's bindings."""
    return DispatchRegistry("test")


@pytest.fixture
def shapes():
    return {
        "circle": Tagged({"r": 2.0}, ("circle", "shape")),
        "square": Tagged({"side": 3.0}, ("square", "shape")),
        "triangle": Tagged({"base": 4.0, "height": 1.0}, ("triangle", "shape")),
    }


@pytest.fixture(autouse=True)
def _quiet_logging():
    yield
    disable_logging()
