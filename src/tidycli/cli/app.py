"""The ``Cli`` façade and the ``tidycli`` entry point.

:class:`Cli` ties the pieces together for an embedding program: it
parses global flags through an ``argparse`` parser, classifies ``argv``
around the known subcommands, builds the stdout/stderr loggers, prints
usage and version text, and dispatches to a handler per subcommand.

:meth:`Cli.run` is the **error boundary**.  It catches
:class:`~tidycli.exceptions.TidyCliError`, ``KeyboardInterrupt`` and any
unexpected ``Exception``, renders them on the stderr console, and
returns a well-defined exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Mapping, Sequence
from typing import TextIO

from tidycli.cli import exit_codes
from tidycli.cli.console import console
from tidycli.cli.logs import build_loggers
from tidycli.core.classifier import classify
from tidycli.core.models import ClassifiedArgs
from tidycli.core.protocols import FlagRegistry
from tidycli.core.table import Table
from tidycli.core.usage import format_usage, format_version
from tidycli.exceptions import CommandNotFoundError, TidyCliError
from tidycli.infra.flag_registry import ArgparseFlagRegistry
from tidycli.version import __version__


class Cli:
    """Command-line interface of one program.

    Parameters
    ----------
    name:
        Program name used in usage text and logger names.
    version:
        Program version; a leading ``v`` is dropped when printed.
    description:
        Optional paragraph shown in usage text.
    commands:
        Subcommand name → one-line description.
    parser:
        Parser declaring the global flags.  Defaults to an empty parser
        without ``-h/--help``.
    """

    def __init__(
        self,
        name: str,
        version: str,
        description: str = "",
        commands: Mapping[str, str] | None = None,
        parser: argparse.ArgumentParser | None = None,
    ) -> None:
        self.name: str = name
        self.version: str = version
        self.description: str = description
        self.commands: dict[str, str] = dict(commands or {})
        self.parser: argparse.ArgumentParser = parser or argparse.ArgumentParser(
            prog=name,
            add_help=False,
            allow_abbrev=False,
        )

        self.sub_command: str = ""
        self.sub_command_args: list[str] = []
        self.sub_command_args_map: dict[str, str] = {}
        self.flags: dict[str, str] = {}
        self.log_out: logging.Logger | None = None
        self.log_err: logging.Logger | None = None
        self._registry: ArgparseFlagRegistry | None = None

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------

    def _global_args(self, argv: Sequence[str]) -> list[str]:
        """Leading flags after the program name, with their values.

        The segment ends at the first known command, at ``--``, or at the
        first token that is neither a flag nor the value of the flag
        before it.
        """
        options = self.parser._option_string_actions
        global_args: list[str] = []
        tokens = iter(argv[1:])
        for token in tokens:
            if token in self.commands or token == "--" or not token.startswith("-"):
                break
            global_args.append(token)
            action = options.get(token)
            if action is not None and action.nargs != 0:
                value = next(tokens, None)
                if value is not None:
                    global_args.append(value)
        return global_args

    def init(self, argv: Sequence[str] | None = None) -> ClassifiedArgs:
        """Parse global flags and classify *argv* (``sys.argv`` by default).

        Every call re-derives flags, loggers and subcommand fields from
        scratch.
        """
        argv = list(sys.argv if argv is None else argv)

        self._registry = ArgparseFlagRegistry.from_parser(
            self.parser,
            self._global_args(argv),
        )
        self.flags = self._registry.values_map()
        self.log_out, self.log_err = build_loggers(self.name)

        classified = classify(argv, self.commands)
        self.sub_command = classified.command
        self.sub_command_args = list(classified.args)
        self.sub_command_args_map = dict(classified.args_map)
        return classified

    # ------------------------------------------------------------------
    # Usage and version
    # ------------------------------------------------------------------

    @property
    def registry(self) -> FlagRegistry:
        """Global flag registry; defaults are used before :meth:`init`."""
        if self._registry is None:
            self._registry = ArgparseFlagRegistry.from_parser(self.parser, None)
        return self._registry

    def usage(self) -> str:
        return format_usage(
            self.name,
            self.description,
            self.commands,
            self.registry.values(),
        )

    def print_usage(self, file: TextIO | None = None) -> None:
        print(self.usage(), file=file or sys.stdout)

    def version_text(self, extra: bool = False) -> str:
        return format_version(self.version, extra)

    def print_version(self, extra: bool = False, file: TextIO | None = None) -> None:
        print(self.version_text(extra), file=file or sys.stdout)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(
        self,
        handlers: Mapping[str, Handler],
        argv: Sequence[str] | None,
        default: Handler | None,
    ) -> int:
        self.init(argv)

        if not self.sub_command:
            if default is None:
                self.print_usage()
                return exit_codes.SUCCESS
            handler = default
        else:
            handler = handlers.get(self.sub_command)
            if handler is None:
                raise CommandNotFoundError(
                    f"no handler registered for command '{self.sub_command}'",
                    hint=f"Run '{self.name}' without arguments to list commands.",
                )

        code = handler(self)
        return exit_codes.SUCCESS if code is None else code

    def run(
        self,
        handlers: Mapping[str, Handler],
        argv: Sequence[str] | None = None,
        default: Handler | None = None,
    ) -> int:
        """Initialise, dispatch the selected subcommand, return an exit code.

        Parameters
        ----------
        handlers:
            Subcommand name → handler.  A handler returning ``None``
            counts as success.
        argv:
            Explicit argument vector including the program name.  When
            ``None`` (default), ``sys.argv`` is used.
        default:
            Handler for runs without a subcommand.  When ``None``, usage
            text is printed instead.

        Returns
        -------
        int
            OS process exit code from :mod:`tidycli.cli.exit_codes`, or
            the handler's own code.

        A ``SystemExit`` raised while parsing global flags (a bad value,
        a missing required option, ``--help``) or by a handler is turned
        into its exit code instead of ending the process.
        """
        try:
            return self._dispatch(handlers, argv, default)
        except TidyCliError as exc:
            console.error(str(exc), exc.hint)
            return exit_codes.GENERAL_ERROR
        except KeyboardInterrupt:
            console.print("\n[yellow]Aborted by user.[/yellow]")
            return exit_codes.KEYBOARD_INTERRUPT
        except SystemExit as exc:
            if exc.code is None:
                return exit_codes.SUCCESS
            if isinstance(exc.code, int):
                return exc.code
            console.error(str(exc.code))
            return exit_codes.GENERAL_ERROR
        except Exception as exc:  # noqa: BLE001
            console.error(
                f"Unexpected error. {type(exc).__name__}: {exc}",
                hint="Please report this issue.",
            )
            return exit_codes.UNEXPECTED_ERROR


Handler = Callable[[Cli], int | None]
"""A subcommand handler receives the initialised ``Cli``."""


# ---------------------------------------------------------------------------
# tidycli's own command line
# ---------------------------------------------------------------------------

COMMANDS: dict[str, str] = {
    "version": "Print version information",
    "table": "Print the command arguments as an aligned table",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tidycli", add_help=False)
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Print usage and exit",
    )
    return parser


def _handle_default(cli: Cli) -> int:
    """No subcommand: honour ``--version``, otherwise print usage."""
    if cli.flags.get("version") == "true":
        cli.print_version()
    else:
        cli.print_usage()
    return exit_codes.SUCCESS


def _handle_version(cli: Cli) -> int:
    """``tidycli version [--extra]``."""
    cli.print_version(extra="extra" in cli.sub_command_args_map)
    return exit_codes.SUCCESS


def _handle_table(cli: Cli) -> int:
    """``tidycli table ARGS...``: one row per argument name."""
    table = Table()
    table.add_row(1, "NAME", "VALUE")
    for row, (name, value) in enumerate(cli.sub_command_args_map.items(), start=2):
        table.add_row(row, name, value)
    table.print_data()
    return exit_codes.SUCCESS


HANDLERS: dict[str, Handler] = {
    "version": _handle_version,
    "table": _handle_table,
}


def main(argv: list[str] | None = None) -> int:
    """Run the ``tidycli`` program.

    Parameters
    ----------
    argv:
        Explicit argument list **without** the program name.  When
        ``None`` (default), ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]
    cli = Cli(
        "tidycli",
        __version__,
        description="Subcommand handling, tidy usage and version printing.",
        commands=COMMANDS,
        parser=_build_parser(),
    )
    return cli.run(HANDLERS, ["tidycli", *argv], default=_handle_default)


def cli() -> None:
    """Console-script entry point."""
    sys.exit(main())
