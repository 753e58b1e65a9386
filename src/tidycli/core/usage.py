"""Pure builders for usage and version text.

Both functions return strings and never print; the ``Cli`` façade owns
the output stream.  Option and command lines share one alignment width
and are each sorted alphabetically before rendering.
"""

from __future__ import annotations

import platform
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from tidycli.core.models import Flag

_SILENT_DEFAULTS: frozenset[str] = frozenset({"", "false"})
"""Defaults that are not worth a ``(default "...")`` suffix."""


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

def format_version(
    version: str,
    extra: bool = False,
    *,
    runtime: str | None = None,
) -> str:
    """Render *version* without its ``v`` prefix.

    With *extra*, a second line reports the Python *runtime* version
    (defaults to the running interpreter).
    """
    bare = version.removeprefix("v")
    if not extra:
        return bare
    if runtime is None:
        runtime = platform.python_version()
    return f"Bin Version    : {bare}\nPython version : {runtime}"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _FlagGroup:
    """Flags sharing one usage string, rendered on a single line."""

    usage: str
    default: str
    names: list[str] = field(default_factory=list)

    @property
    def label(self) -> str:
        return ", ".join(self.names)


def group_flags(flags: Iterable[Flag]) -> list[_FlagGroup]:
    """Merge visible flags with identical usage into aliases.

    Names inside a group follow ascending flag-name order; the first
    flag of a group supplies the default shown.
    """
    groups: dict[str, _FlagGroup] = {}
    for flag in sorted(flags, key=lambda f: f.name):
        if flag.hidden:
            continue
        group = groups.get(flag.usage)
        if group is None:
            group = groups[flag.usage] = _FlagGroup(flag.usage, flag.default)
        group.names.append(flag.display_name)
    return list(groups.values())


def _option_line(group: _FlagGroup, width: int) -> str:
    line = f"{group.label:<{width}} : {group.usage}"
    if group.default not in _SILENT_DEFAULTS:
        line += f' (default "{group.default}")'
    return line


# ---------------------------------------------------------------------------
# Usage
# ---------------------------------------------------------------------------

def format_usage(
    name: str,
    description: str = "",
    commands: Mapping[str, str] | None = None,
    flags: Iterable[Flag] = (),
) -> str:
    """Render the full usage text.

    Parameters
    ----------
    name:
        Program name shown in the synopsis line.
    description:
        Optional paragraph printed below the synopsis.
    commands:
        Subcommand name → one-line description.
    flags:
        Registered global flags; hidden ones are skipped.

    Returns
    -------
    str
        Synopsis, description, ``Options:`` and ``Commands:`` sections,
        each section present only when it has entries.
    """
    commands = commands or {}
    groups = group_flags(flags)

    width = max(
        [len(command) for command in commands]
        + [len(group.label) for group in groups],
        default=0,
    )

    option_lines = sorted(_option_line(group, width) for group in groups)
    command_lines = sorted(
        f"{command:<{width}} : {summary}"
        for command, summary in commands.items()
    )

    usage = f"Usage: {name} [OPTIONS] COMMAND [arg...]\n\n"
    if description:
        usage += description + "\n\n"

    if option_lines:
        usage += "Options:\n"
        for line in option_lines:
            usage += f"  {line}\n"

    if command_lines:
        usage += "\nCommands:\n"
        for line in command_lines:
            usage += f"  {line}\n"

    return usage
