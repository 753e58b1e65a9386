"""``argparse``-backed global flag registry.

Adapts an :class:`argparse.ArgumentParser` that declares the program's
global options into the read-only ``name → Flag`` view the core layer
consumes (see :class:`~tidycli.core.protocols.FlagRegistry`).

Every option string becomes its own entry, so ``-v`` and ``--verbose``
declared on one action show up as two flags sharing a usage string,
which the usage printer then merges into ``-v, --verbose``.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from tidycli.core.models import Flag


def display_value(value: Any) -> str:
    """Render a parsed flag value the way usage text shows it.

    This is presentation only: booleans become ``"true"``/``"false"``,
    ``None`` becomes ``""`` and anything else goes through ``str``.
    """
    if value is None or value is argparse.SUPPRESS:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ArgparseFlagRegistry(Mapping[str, Flag]):
    """Immutable mapping of flag name to :class:`Flag`, in name order.

    Parameters
    ----------
    flags:
        Flags to expose; duplicates by name keep the last entry.
    """

    def __init__(self, flags: Sequence[Flag] = ()) -> None:
        by_name = {flag.name: flag for flag in flags}
        self._flags: dict[str, Flag] = {
            name: by_name[name] for name in sorted(by_name)
        }

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_parser(
        cls,
        parser: argparse.ArgumentParser,
        argv: Sequence[str] | None = None,
    ) -> ArgparseFlagRegistry:
        """Parse *argv* with *parser* and snapshot every optional action.

        Tokens *parser* does not recognise are ignored; they belong to
        the subcommand.  The built-in ``-h/--help`` action is skipped.
        When *argv* is ``None`` nothing is parsed and every flag reports
        its default, so required options never abort the program.
        """
        namespace = argparse.Namespace()
        if argv is not None:
            namespace, _unknown = parser.parse_known_args(list(argv))

        flags: list[Flag] = []
        for action in parser._actions:
            if not action.option_strings or isinstance(action, argparse._HelpAction):
                continue
            value = getattr(namespace, action.dest, action.default)
            for option in action.option_strings:
                flags.append(
                    Flag(
                        name=option.lstrip(parser.prefix_chars),
                        value=display_value(value),
                        usage=action.help or "",
                        default=display_value(action.default),
                        hidden=action.help == argparse.SUPPRESS,
                    )
                )
        return cls(flags)

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, name: str) -> Flag:
        return self._flags[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._flags.values())!r})"

    def values_map(self) -> dict[str, str]:
        """Return ``{name: current value}`` for every flag, hidden included."""
        return {name: flag.value for name, flag in self._flags.items()}
