"""Shared test fixtures for the lvlog test suite."""

import io

import pytest

from lvlog.config import Config
from lvlog.lib.log_lib import current_features
from lvlog.lib.log_lib.levels import Level


FIXED_TIME = "Thu, 01 Jan 2024 00:00:00"

FEATURES = current_features()

requires_color = pytest.mark.skipif(
    not FEATURES.color, reason="color feature not built in")
requires_humantime = pytest.mark.skipif(
    not FEATURES.humantime, reason="humantime feature not built in")


def requires_level(level):
    """Skip unless the module-level gate for ``level`` is built in."""
    return pytest.mark.skipif(
        not FEATURES.level_enabled(level),
        reason=f"{level} output not built in")


class FakeStream(io.StringIO):
    """A text stream that reports a chosen isatty() result."""

    def __init__(self, tty):
        super().__init__()
        self._tty = tty

    def isatty(self):
        return self._tty


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's LVLOG_* / NO_COLOR settings out of tests."""
    for name in ("LVLOG_LEVEL", "LVLOG_COLOR", "LVLOG_FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def plain_config():
    """Everything shown, color off."""
    return Config(log_level=Level.TRACE, colored_output=False)


@pytest.fixture
def forced_config():
    """Everything shown, color forced on regardless of terminals."""
    return Config(log_level=Level.TRACE, colored_output=True,
                  colored_output_forced=True)


@pytest.fixture
def tty_streams(monkeypatch):
    """Make every stream look like a terminal to the color policy.

    Patches the policy's terminal check, not sys.stdout/sys.stderr:
    pytest's capture reinstalls its own streams when the test body starts.
    """
    monkeypatch.setattr("lvlog.lib.log_lib.terminal._is_terminal",
                        lambda stream: True)
