"""Tests for usage and version text (core/usage.py).

Pure string builders, nothing is printed.
"""

from __future__ import annotations

from tidycli.core.models import Flag
from tidycli.core.usage import format_usage, format_version, group_flags


# ---------------------------------------------------------------------------
# Factory helper
# ---------------------------------------------------------------------------

def _flag(
    name: str,
    *,
    usage: str = "Some flag",
    default: str = "",
    value: str = "",
    hidden: bool = False,
) -> Flag:
    return Flag(name=name, value=value, usage=usage, default=default, hidden=hidden)


# ---------------------------------------------------------------------------
# format_version
# ---------------------------------------------------------------------------

class TestFormatVersion:
    def test_strips_v_prefix(self) -> None:
        assert format_version("v1.2.3") == "1.2.3"

    def test_strips_only_one_v(self) -> None:
        assert format_version("vv1") == "v1"

    def test_plain_version_unchanged(self) -> None:
        assert format_version("1.2.3") == "1.2.3"

    def test_extra_adds_runtime_line(self) -> None:
        text = format_version("v1.0.0", extra=True, runtime="3.12.1")
        assert text == "Bin Version    : 1.0.0\nPython version : 3.12.1"

    def test_extra_defaults_to_running_interpreter(self) -> None:
        import platform

        text = format_version("1.0.0", extra=True)
        assert text.endswith(platform.python_version())


# ---------------------------------------------------------------------------
# group_flags
# ---------------------------------------------------------------------------

class TestGroupFlags:
    def test_display_names(self) -> None:
        assert _flag("v").display_name == "-v"
        assert _flag("ab").display_name == "-ab"
        assert _flag("abc").display_name == "--abc"

    def test_same_usage_merged_in_name_order(self) -> None:
        groups = group_flags([
            _flag("verbose", usage="Be chatty"),
            _flag("v", usage="Be chatty"),
        ])
        assert len(groups) == 1
        assert groups[0].label == "-v, --verbose"

    def test_first_by_name_supplies_default(self) -> None:
        groups = group_flags([
            _flag("b", usage="u", default="2"),
            _flag("a", usage="u", default="1"),
        ])
        assert groups[0].default == "1"

    def test_hidden_flags_skipped(self) -> None:
        assert group_flags([_flag("secret", hidden=True)]) == []


# ---------------------------------------------------------------------------
# format_usage
# ---------------------------------------------------------------------------

class TestFormatUsage:
    def test_minimal(self) -> None:
        assert format_usage("app") == "Usage: app [OPTIONS] COMMAND [arg...]\n\n"

    def test_description_block(self) -> None:
        text = format_usage("app", "Does things.")
        assert text == (
            "Usage: app [OPTIONS] COMMAND [arg...]\n\n"
            "Does things.\n\n"
        )

    def test_full_layout(self) -> None:
        text = format_usage(
            "app",
            "Does things.",
            commands={"run": "Run it", "build": "Build it"},
            flags=[
                _flag("v", usage="Print version"),
                _flag("version", usage="Print version"),
                _flag("n", usage="Count", default="3"),
            ],
        )
        assert text == (
            "Usage: app [OPTIONS] COMMAND [arg...]\n\n"
            "Does things.\n\n"
            "Options:\n"
            "  -n            : Count (default \"3\")\n"
            "  -v, --version : Print version\n"
            "\nCommands:\n"
            "  build         : Build it\n"
            "  run           : Run it\n"
        )

    def test_false_and_empty_defaults_hidden(self) -> None:
        text = format_usage(
            "app",
            flags=[
                _flag("q", usage="Quiet", default="false"),
                _flag("o", usage="Output", default=""),
            ],
        )
        assert "default" not in text

    def test_true_default_shown(self) -> None:
        text = format_usage("app", flags=[_flag("c", usage="Color", default="true")])
        assert '(default "true")' in text

    def test_commands_only(self) -> None:
        text = format_usage("app", commands={"go": "Go"})
        assert "Options:" not in text
        assert text.endswith("\nCommands:\n  go : Go\n")

    def test_width_from_longest_command(self) -> None:
        text = format_usage(
            "app",
            commands={"longcommand": "x"},
            flags=[_flag("a", usage="A")],
        )
        assert "  -a          : A\n" in text
        assert "  longcommand : x\n" in text

    def test_hidden_flag_not_listed(self) -> None:
        text = format_usage("app", flags=[_flag("debug", usage="x", hidden=True)])
        assert "Options:" not in text
