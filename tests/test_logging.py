"""Tests for tagdispatch logging functionality."""

import io
import logging

import pytest

import tagdispatch as td
from tagdispatch import logging_config


def test_logging_disabled_by_default():
    """The library logger only carries a NullHandler until configured."""
    td.disable_logging()
    logger = logging.getLogger("tagdispatch")

    assert logger.handlers
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert logger.propagate is False


def test_default_setup_shows_registry_debug_records(registry):
    log_stream = io.StringIO()
    td.setup_logging(stream=log_stream)

    registry.register("area", "circle", lambda s: 1)
    registry.register("area", "circle", lambda s: 2)
    registry.register_default("area", lambda s: 0)
    registry.register_default("area", lambda s: -1)
    registry.dispatch("area", td.Tagged(None, ("hexagon",)))

    lines = log_stream.getvalue().splitlines()
    assert any(
        line.startswith("DEBUG tagdispatch.registry: test: rebinding area[circle]")
        for line in lines
    )
    assert any("test: rebinding default of area" in line for line in lines)
    assert any(
        "test: area has no method for tags ['hexagon'], using default" in line
        for line in lines
    )


def test_warning_level_keeps_only_unmatched_diagnostics(registry):
    log_stream = io.StringIO()
    td.setup_logging("WARNING", stream=log_stream)

    registry.register("rss", "lm", lambda fit: 1.0)
    registry.register("rss", "lm", lambda fit: 2.0)
    registry.register_default("rss", td.warn_unmatched("rss"))
    with pytest.warns(td.UnmatchedTagsWarning):
        registry.dispatch("rss", td.Tagged(None, ("svm",)))

    output = log_stream.getvalue()
    assert "rebinding" not in output
    assert "using default" not in output
    assert "WARNING tagdispatch.defaults: rss: no method for tags ['svm']" in output


def test_setup_logging_replaces_previous_handlers():
    first, second = io.StringIO(), io.StringIO()
    td.setup_logging(stream=first)
    logger = td.setup_logging(stream=second)

    assert len(logger.handlers) == 1
    logging.getLogger("tagdispatch.test").info("only once")
    assert first.getvalue() == ""
    assert second.getvalue().count("only once") == 1


def test_setup_logging_to_file(tmp_path, registry):
    path = tmp_path / "dispatch.log"
    td.setup_logging(stream=False, filename=str(path))

    registry.register("op", "a", lambda v: 1)
    registry.register("op", "a", lambda v: 2)
    td.disable_logging()

    assert "rebinding op[a]" in path.read_text()


def test_propagate_hands_records_to_application(caplog, registry):
    td.setup_logging(stream=False, propagate=True)

    with caplog.at_level(logging.DEBUG):
        registry.register("op", "a", lambda v: 1)
        registry.register("op", "a", lambda v: 2)

    assert any("rebinding op[a]" in r.getMessage() for r in caplog.records)


def test_disable_logging():
    log_stream = io.StringIO()
    td.setup_logging(stream=log_stream)
    td.disable_logging()

    logging.getLogger("tagdispatch.test").error("This should not appear")

    assert "This should not appear" not in log_stream.getvalue()


def test_configure_from_env(monkeypatch):
    monkeypatch.setenv("TAGDISPATCH_LOG_LEVEL", "warning")
    assert logging_config.configure_from_env() is True
    assert logging.getLogger("tagdispatch").level == logging.WARNING

    monkeypatch.delenv("TAGDISPATCH_LOG_LEVEL")
    assert logging_config.configure_from_env() is False


def test_configure_from_env_rejects_unknown_level(monkeypatch):
    monkeypatch.setenv("TAGDISPATCH_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="TAGDISPATCH_LOG_LEVEL"):
        logging_config.configure_from_env()


def test_get_logger_prefixes_names():
    assert td.get_logger("tagdispatch.registry").name == "tagdispatch.registry"
    assert td.get_logger("tagdispatch").name == "tagdispatch"
    assert td.get_logger("myapp.shapes").name == "tagdispatch.myapp.shapes"
