"""
Tests for log_lib.gate — the build and run-time level gates, stream
selection, and end-to-end emission.
"""

import sys

import pytest

from lvlog.config import Config
from lvlog.lib.log_lib import gate
from lvlog.lib.log_lib.features import Features
from lvlog.lib.log_lib.gate import (
    dispatch, make_gate, make_init, make_trace_bytes, stream_for,
)
from lvlog.lib.log_lib.levels import Level

from conftest import requires_color, requires_level

FULL = Features()


class Boom:
    """Raises if anyone tries to format it."""

    def __format__(self, spec):
        raise AssertionError("formatted a suppressed message")

    def __str__(self):
        raise AssertionError("formatted a suppressed message")


# =============================================================================
# Run-time gate
# =============================================================================

class TestRunTimeGate:
    """level >= config.log_level decides emission."""

    def test_info_below_warn_suppressed(self, capsys):
        """INFO with a WARN threshold writes nothing anywhere."""
        make_gate(Level.INFO, FULL)(Config(log_level=Level.WARN), "hello")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    @pytest.mark.parametrize("threshold", list(Level))
    def test_error_always_emitted(self, capsys, threshold):
        """ERROR is the maximum severity: shown at every threshold."""
        make_gate(Level.ERROR, FULL)(Config(log_level=threshold), "boom")
        assert "Error]: boom" in capsys.readouterr().err

    @pytest.mark.parametrize("level", list(Level))
    @pytest.mark.parametrize("threshold", list(Level))
    def test_matrix(self, capsys, level, threshold):
        """Output appears exactly when level >= threshold."""
        make_gate(level, FULL)(Config(log_level=threshold), "msg")
        captured = capsys.readouterr()
        emitted = bool(captured.out or captured.err)
        assert emitted == (level >= threshold)

    def test_suppressed_args_not_formatted(self, capsys):
        """Nothing is computed for a suppressed message."""
        make_gate(Level.DEBUG, FULL)(Config(log_level=Level.WARN), "{}", Boom())
        assert capsys.readouterr().err == ""

    def test_placeholders_filled(self, capsys):
        make_gate(Level.WARN, FULL)(Config(), "retry {host} in {0}s", 5, host="db1")
        assert "retry db1 in 5s" in capsys.readouterr().err

    def test_braces_kept_without_args(self, capsys):
        """A message with no args is written verbatim."""
        make_gate(Level.WARN, FULL)(Config(), "literal {braces}")
        assert "literal {braces}" in capsys.readouterr().err


# =============================================================================
# Build gate
# =============================================================================

class TestBuildGate:
    """Levels left out of the feature set are no-ops."""

    def test_excluded_level_is_noop(self, capsys):
        features = Features.from_spec("log-err")
        fn = make_gate(Level.INFO, features)
        assert fn.compiled is False
        fn(Config(log_level=Level.TRACE), "{}", Boom())
        captured = capsys.readouterr()
        assert captured.out == "" and captured.err == ""

    def test_included_level_compiled(self):
        assert make_gate(Level.ERROR, Features.from_spec("log-err")).compiled is True

    def test_noop_ignores_config(self):
        """A disabled gate never touches the config."""
        make_gate(Level.TRACE, Features.from_spec(""))(None, "x")

    def test_both_gates_needed(self, capsys):
        """Built in but below threshold: still nothing."""
        fn = make_gate(Level.TRACE, Features.from_spec("log-trace"))
        fn(Config(log_level=Level.ERROR), "x")
        assert capsys.readouterr().err == ""

    def test_names(self):
        assert make_gate(Level.VERB, FULL).__name__ == "verb"
        assert make_gate(Level.VERB, Features.from_spec("")).__name__ == "verb"


# =============================================================================
# Stream selection and dispatch
# =============================================================================

class TestDispatch:
    """INFO to stdout, everything else to stderr."""

    def test_stream_for(self, capsys):
        assert stream_for(Level.INFO) is sys.stdout
        for level in (Level.ERROR, Level.WARN, Level.VERB, Level.DEBUG, Level.TRACE):
            assert stream_for(level) is sys.stderr

    def test_info_to_stdout(self, capsys, plain_config):
        dispatch(plain_config, "hello", Level.INFO)
        captured = capsys.readouterr()
        assert captured.out.endswith("Info ]: hello\n")
        assert captured.err == ""

    @pytest.mark.parametrize("level", [Level.ERROR, Level.WARN, Level.VERB,
                                       Level.DEBUG, Level.TRACE])
    def test_others_to_stderr(self, capsys, plain_config, level):
        dispatch(plain_config, "hello", level)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.endswith(f"{level!s:<5}]: hello\n")

    def test_color_dropped_when_captured(self, capsys):
        """Captured (non-terminal) streams never receive escape codes."""
        dispatch(Config(colored_output=True), "hello", Level.ERROR)
        assert "\x1b[" not in capsys.readouterr().err

    @requires_color
    def test_forced_color_written(self, capsys, forced_config):
        dispatch(forced_config, "hello", Level.ERROR)
        assert "\x1b[31mError\x1b[0m]: hello" in capsys.readouterr().err

    def test_config_not_mutated(self, capsys):
        config = Config(colored_output=True)
        dispatch(config, "hello", Level.ERROR)
        assert config.colored_output is True


# =============================================================================
# init and trace_bytes
# =============================================================================

class TestInit:
    """Startup trace line."""

    def test_init_writes_plain_line(self, capsys):
        make_init(FULL)("starting {n} workers", n=3)
        err = capsys.readouterr().err
        assert "Init ]: starting 3 workers" in err
        assert "\x1b[" not in err

    def test_init_excluded_without_trace(self, capsys):
        fn = make_init(Features.from_spec("log-err"))
        fn("starting")
        assert fn.compiled is False
        assert capsys.readouterr().err == ""


class TestTraceBytes:
    """Gated hex dump."""

    def test_emits_at_trace(self, capsys, plain_config):
        make_trace_bytes(FULL)(plain_config, b"ok\r\n", label="rx ")
        err = capsys.readouterr().err
        assert "Trace]: rx [" in err
        assert "6f 6b \\r \\n" in err

    def test_gated_below_threshold(self, capsys):
        make_trace_bytes(FULL)(Config(log_level=Level.DEBUG), b"ok")
        assert capsys.readouterr().err == ""

    def test_excluded_without_trace(self, capsys, plain_config):
        fn = make_trace_bytes(Features.from_spec("log-err,log-warn"))
        fn(plain_config, b"ok")
        assert fn.compiled is False
        assert capsys.readouterr().err == ""


# =============================================================================
# Module-level entry points (process feature set)
# =============================================================================

class TestModuleGates:
    """The ready-made entry points bound at import."""

    def test_gate_table(self):
        assert set(gate.GATES) == set(Level)
        assert gate.GATES[Level.WARN] is gate.warn

    @requires_level(Level.INFO)
    def test_info_end_to_end_suppressed(self, capsys):
        gate.info(Config(log_level=Level.WARN), "hidden")
        captured = capsys.readouterr()
        assert captured.out == "" and captured.err == ""

    @requires_level(Level.ERROR)
    def test_error_end_to_end(self, capsys):
        gate.error(Config(log_level=Level.ERROR), "shown")
        assert "shown" in capsys.readouterr().err
