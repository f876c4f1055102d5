"""Tests for Generic and the registration decorators."""

from __future__ import annotations

import pytest

import tagdispatch as td
from tagdispatch import Generic, Tagged, UnhandledTypeError


def test_generic_register_and_call(registry, shapes):
    area = Generic("area", registry)

    @area.register("circle")
    def _circle(shape):
        return 3 * shape.value["r"] ** 2

    @area.register("square", "rectangle")
    def _square(shape):
        return shape.value["side"] ** 2

    assert area(shapes["circle"]) == 12.0
    assert area(shapes["square"]) == 9.0
    assert registry.get_binding("area", "rectangle") is _square
    with pytest.raises(UnhandledTypeError):
        area(shapes["triangle"])


def test_generic_default(registry, shapes):
    area = Generic("area", registry)

    @area.default
    def _unknown(shape, scale=1):
        return -1 * scale

    assert area(shapes["triangle"], scale=2) == -2
    assert registry.get_default("area") is _unknown


def test_decorators_return_function(registry):
    g = Generic("op", registry)

    def impl(v):
        return v

    assert g.register("a")(impl) is impl
    assert g.default(impl) is impl


def test_register_needs_a_tag(registry):
    with pytest.raises(TypeError):
        Generic("op", registry).register()


def test_generic_defaults_to_global_registry():
    g = Generic("test_generic.global")
    assert g.registry is td.get_registry()


def test_method_def_and_default_def():
    op = "test_generic.method_def"

    @td.method_def(op, "a", "b")
    def _ab(v):
        return "ab"

    @td.default_def(op)
    def _dflt(v):
        return "default"

    assert td.dispatch(op, Tagged(None, ("b",))) == "ab"
    assert td.dispatch(op, Tagged(None, ("c",))) == "default"


def test_generic_repr():
    assert repr(Generic("rss", td.DispatchRegistry())) == "Generic('rss')"
