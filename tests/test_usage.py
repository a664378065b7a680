"""Tests for usage rendering and reporting (cli/usage.py).

Coverage:
* Column layout: short-name column, padded long names, descriptions.
* Defaults shown only when non-empty / non-zero, formatted per kind.
* Config flag listed first, help line last.
* ``report_and_exit`` output and exit codes for success, help and errors.
"""

from __future__ import annotations

import io

import pytest

from tinyflags import FlagSet, Value
from tinyflags.cli import exit_codes
from tinyflags.cli.usage import format_error, format_usage, render_usage, report_and_exit


def _sample_flagset() -> FlagSet:
    fs = FlagSet()
    fs.bool_var(Value(), "verbose", "v", "Verbose output")
    fs.int_var(Value(), "port", None, 8080, "Port")
    fs.float_var(Value(), "ratio", None, 0.5, "Ratio")
    fs.config_flag("config", "c", "Config file")
    return fs


_SAMPLE_USAGE = (
    "FLAGS\n"
    "  -c, --config       Config file\n"
    "  -v, --verbose      Verbose output\n"
    "      --port         Port (default: 8080)\n"
    "      --ratio        Ratio (default: 0.500000)\n"
    "  -h, --help         Show this help message\n"
    "\n"
)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

class TestFormatUsage:
    def test_sample_layout(self) -> None:
        assert format_usage(_sample_flagset()) == _SAMPLE_USAGE

    def test_empty_flagset(self) -> None:
        assert format_usage(FlagSet()) == (
            "FLAGS\n"
            "  -h, --help  Show this help message\n"
            "\n"
        )

    def test_zero_and_empty_defaults_hidden(self) -> None:
        fs = FlagSet()
        fs.string_var(Value(), "name", None, "", "Name")
        fs.int_var(Value(), "count", None, 0, "Count")
        fs.double_var(Value(), "scale", None, 0.0, "Scale")
        fs.time_var(Value(), "since", None, 0, "Since")
        assert "default" not in format_usage(fs)

    def test_string_default_shown(self) -> None:
        fs = FlagSet()
        fs.string_var(Value(), "name", "n", "anon", "Your name")
        assert "  -n, --name      Your name (default: anon)\n" in format_usage(fs)

    def test_time_default_formatted(self) -> None:
        fs = FlagSet()
        fs.time_var(Value(), "since", None, 86400, "Start")
        assert "Start (default: 1970-01-02T00:00:00)" in format_usage(fs)

    def test_double_default_formatted(self) -> None:
        fs = FlagSet()
        fs.double_var(Value(), "scale", None, 1.25, "Scale")
        assert "Scale (default: 1.250000)" in format_usage(fs)

    def test_long_config_name_sets_width(self) -> None:
        fs = FlagSet()
        fs.bool_var(Value(), "x", None, "Short")
        fs.config_flag("configuration", None, "File")
        lines = format_usage(fs).splitlines()
        assert lines[1] == "      --configuration      File"
        assert lines[2] == "      --x                  Short"


# ---------------------------------------------------------------------------
# Rendering and errors
# ---------------------------------------------------------------------------

class TestRender:
    def test_defaults_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_usage(_sample_flagset())
        captured = capsys.readouterr()
        assert captured.err == _SAMPLE_USAGE
        assert captured.out == ""

    def test_explicit_stream(self) -> None:
        out = io.StringIO()
        render_usage(_sample_flagset(), out)
        assert out.getvalue() == _SAMPLE_USAGE

    def test_format_error_empty_without_failure(self) -> None:
        fs = _sample_flagset()
        assert fs.parse(["prog"])
        assert format_error(fs) == ""

    def test_format_error_line(self) -> None:
        fs = _sample_flagset()
        assert not fs.parse(["prog", "--port"])
        assert format_error(fs) == 'ERROR: missing value for flag "port"\n'


class TestReportAndExit:
    def test_success_returns_silently(self) -> None:
        fs = _sample_flagset()
        assert fs.parse(["prog", "-v"])
        out = io.StringIO()
        report_and_exit(fs, out)
        assert out.getvalue() == ""

    def test_help_prints_usage_and_exits_zero(self) -> None:
        fs = _sample_flagset()
        assert not fs.parse(["prog", "--help"])
        out = io.StringIO()
        with pytest.raises(SystemExit) as exc_info:
            report_and_exit(fs, out)
        assert exc_info.value.code == exit_codes.SUCCESS
        assert out.getvalue() == _SAMPLE_USAGE

    def test_error_prints_line_then_usage(self) -> None:
        fs = _sample_flagset()
        assert not fs.parse(["prog", "--nope"])
        out = io.StringIO()
        with pytest.raises(SystemExit) as exc_info:
            report_and_exit(fs, out)
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert out.getvalue() == 'ERROR: unknown flag "--nope"\n\n' + _SAMPLE_USAGE

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs = _sample_flagset()
        assert not fs.parse(["prog", "--port", "eighty"])
        with pytest.raises(SystemExit):
            report_and_exit(fs)
        assert capsys.readouterr().err.startswith('ERROR: invalid value for flag "port"\n\n')
