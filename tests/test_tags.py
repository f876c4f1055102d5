"""Tests for type tag resolution."""

from __future__ import annotations

import dataclasses

import pandas as pd
import pytest

from tagdispatch import Tagged, declare_tags, normalize_tags, tags_of
from tagdispatch.tags import declared_tags


class _Base:
    pass


class _Child(_Base):
    pass


class _Grandchild(_Child):
    pass


class _Own:
    type_tags = ("own", "thing")


def test_normalize_single_string():
    assert normalize_tags("lm") == ("lm",)


def test_normalize_drops_duplicates_keeping_first():
    assert normalize_tags(["glm", "lm", "glm"]) == ("glm", "lm")


@pytest.mark.parametrize("bad", [[""], [None], ["ok", 1]])
def test_normalize_rejects_bad_tags(bad):
    with pytest.raises((TypeError, ValueError)):
        normalize_tags(bad)


def test_tagged_normalizes_and_is_frozen():
    t = Tagged(1, "circle")
    assert t.type_tags == ("circle",)
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.value = 2  # type: ignore[misc]


def test_own_attribute_wins():
    assert tags_of(_Own()) == ("own", "thing")


def test_class_object_is_not_tagged_by_its_attribute():
    assert tags_of(_Own) == ()


def test_declared_tags_follow_mro():
    declare_tags(_Base, ("base",))
    declare_tags(_Child, ("child", "base"))

    assert tags_of(_Base()) == ("base",)
    assert tags_of(_Child()) == ("child", "base")
    assert tags_of(_Grandchild()) == ("child", "base")


def test_redeclare_invalidates_cache():
    class Local:
        pass

    declare_tags(Local, "first")
    assert tags_of(Local()) == ("first",)
    declare_tags(Local, ["second"])
    assert declared_tags(Local) == ("second",)


def test_undeclared_value_has_no_tags():
    class Plain:
        pass

    assert tags_of(Plain()) == ()


def test_declare_tags_needs_a_type():
    with pytest.raises(TypeError):
        declare_tags("not a type", ("x",))  # type: ignore[arg-type]


class _Framelike:
    """Resolves unknown attributes from its data, like pandas objects."""

    def __init__(self, data):
        self._data = data

    def __getattr__(self, name):
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(name) from None


class _PropertyTagged:
    def __init__(self, kind):
        self.kind = kind

    @property
    def type_tags(self):
        return (self.kind, "model")


def test_dynamic_getattr_is_not_a_tag_source():
    declare_tags(_Framelike, ("frame",))
    value = _Framelike({"type_tags": ["x", "y"]})

    assert value.type_tags == ["x", "y"]
    assert tags_of(value) == ("frame",)


def test_property_tags_are_resolved():
    assert tags_of(_PropertyTagged("glm")) == ("glm", "model")


def test_pandas_data_cannot_supply_tags():
    class Frame(pd.DataFrame):
        pass

    declare_tags(Frame, ("frame",))
    df = Frame({"type_tags": ["x", "y"], "v": [1.0, 2.0]})
    assert tags_of(df) == ("frame",)
