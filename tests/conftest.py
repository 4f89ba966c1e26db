import contextlib
import io
import logging
import sys
from collections.abc import Callable, Generator, Iterator, Sequence
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import zoomkit.__main__ as zoomkit_main
import zoomkit.config as config
import zoomkit.utils.logger as logger_utils
from zoomkit.config import ZoomSettings
from zoomkit.easing import linear
from zoomkit.interpolation import ZoomInterpolator


@pytest.fixture(autouse=True)
def _reset_settings() -> Generator[None, None, None]:
    """Keeps global settings stable across tests."""
    config.reload_settings()
    yield
    config.reload_settings()


@pytest.fixture(autouse=True)
def _silence_halo(monkeypatch):
    """Replace Halo spinners with a no-op context manager for tests."""

    class _DummyHalo:
        def __init__(self, *args, **kwargs):
            self.text = kwargs.get("text")

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("zoomkit.utils.timeline_utils.Halo", _DummyHalo)


@pytest.fixture
def linear_interpolator() -> ZoomInterpolator:
    """Interpolator with identity easing and the default one-second transition."""
    return ZoomInterpolator(ZoomSettings(), ease_in=linear, ease_out=linear)


@pytest.fixture
def run_cli(monkeypatch):
    """Run the zoomkit CLI with a custom argv list."""

    def _run_cli(args: Sequence[str]) -> tuple[int, str]:
        monkeypatch.setattr(sys, "argv", ["zoomkit", *args])
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stdout):
            try:
                zoomkit_main.main()
            except SystemExit as exc:
                return exc.code, stdout.getvalue()
        return 0, stdout.getvalue()

    return _run_cli


@contextlib.contextmanager
def _stripped_root_logger() -> Iterator[logging.Logger]:
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    original_configured = logger_utils._LOGGING_CONFIGURED

    for handler in original_handlers:
        root_logger.removeHandler(handler)
    logger_utils._LOGGING_CONFIGURED = False
    try:
        yield root_logger
    finally:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        for handler in original_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(original_level)
        logger_utils._LOGGING_CONFIGURED = original_configured


@pytest.fixture
def fresh_root_logger() -> Callable[
    [], contextlib.AbstractContextManager[logging.Logger]
]:
    """Strips root handlers so the first-configuration path runs, then restores them.

    Enter the returned context manager inside the test body: pytest attaches
    its capture handlers to the root logger for the duration of the call phase.
    """
    return _stripped_root_logger
