"""Tests for zoomkit logging setup and runtime level changes."""

import io
import logging

import pytest

import zoomkit.utils.logger as logger_utils
from zoomkit.config import ZoomSettings
from zoomkit.domain import ManualMode, ZoomSegment
from zoomkit.easing import linear
from zoomkit.interpolation import ZoomInterpolator


@pytest.mark.parametrize(
    ("env_value", "expected"),
    [
        (None, logging.INFO),
        ("WARNING", logging.WARNING),
        ("debug", logging.DEBUG),
        ("CHATTY", logging.INFO),
    ],
)
def test_configure_logging_resolves_level_from_environment(
    monkeypatch: pytest.MonkeyPatch,
    fresh_root_logger,
    env_value: str | None,
    expected: int,
) -> None:
    """LOG_LEVEL drives the default; unknown names fall back to INFO."""
    if env_value is None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("LOG_LEVEL", env_value)

    with fresh_root_logger() as root_logger:
        assert logger_utils.configure_logging() == expected
        assert root_logger.level == expected


def test_configure_logging_explicit_level_wins_over_environment(
    monkeypatch: pytest.MonkeyPatch, fresh_root_logger
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    with fresh_root_logger() as root_logger:
        assert logger_utils.configure_logging(logging.DEBUG) == logging.DEBUG
        assert root_logger.level == logging.DEBUG


def test_get_logger_configures_once(
    monkeypatch: pytest.MonkeyPatch, fresh_root_logger
) -> None:
    """The first lookup installs one formatted handler; later lookups keep the level."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    with fresh_root_logger() as root_logger:
        logger_utils.get_logger("zoomkit.first")

        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].formatter._fmt == logger_utils.LOG_FORMAT

        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        logger_utils.get_logger("zoomkit.second")

        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1


def test_reconfiguring_to_debug_reaches_import_time_handler(fresh_root_logger) -> None:
    """Raising verbosity after import-time setup lets engine tracing through."""
    segments = [
        ZoomSegment(2.0, 4.0, 2.0, ManualMode(0.5, 0.5)),
        ZoomSegment(4.5, 6.0, 4.0, ManualMode(0.5, 0.5)),
    ]
    interpolator = ZoomInterpolator(ZoomSettings(), ease_in=linear, ease_out=linear)

    with fresh_root_logger() as root_logger:
        logger_utils.configure_logging("INFO")
        stream = io.StringIO()
        root_logger.handlers[0].setStream(stream)

        logger_utils.configure_logging("DEBUG")
        interpolator.at(5.0, segments)

    assert (
        "zoomkit.interpolation - DEBUG - Zoom-out interrupted at 4.500s"
        in stream.getvalue()
    )


def test_reconfiguring_to_warning_silences_info(fresh_root_logger) -> None:
    with fresh_root_logger() as root_logger:
        logger_utils.configure_logging("DEBUG")
        stream = io.StringIO()
        root_logger.handlers[0].setStream(stream)

        logger_utils.configure_logging("WARNING")
        logger_utils.get_logger("zoomkit.quiet").info("hidden")
        logger_utils.get_logger("zoomkit.quiet").warning("shown")

    assert "hidden" not in stream.getvalue()
    assert "shown" in stream.getvalue()
