"""Subcommand-aware classification of the raw argument vector.

Every function in this module is a **pure** transformation with no I/O,
no side effects, and no error paths.  Unexpected argument shapes are
absorbed rather than reported, so a stray token never crashes the
program.

Two passes (enforced by :func:`classify`):

1. **Select**: walk the whole vector; each known command name
   overwrites the current selection and everything after the selection
   becomes a residual argument.
2. **Map**: fold the residuals into a flag-style ``{name: value}`` view.
"""

from __future__ import annotations

from collections.abc import Container, Iterable, Sequence

from tidycli.core.models import ClassifiedArgs


# ---------------------------------------------------------------------------
# 1. Select
# ---------------------------------------------------------------------------

def select_command(
    raw_args: Iterable[str],
    known_commands: Container[str],
) -> tuple[str, list[str]]:
    """Return the selected command and its residual arguments.

    The **last** known command name wins, and residuals collected after
    an earlier, overwritten command are dropped with it.  Tokens that are
    command names themselves are never residuals.  Tokens seen before the
    first selection (program name, global flags) are discarded.
    """
    command = ""
    residuals: list[str] = []
    for token in raw_args:
        if token in known_commands:
            command = token
            residuals.clear()
        elif command:
            residuals.append(token)
    return command, residuals


# ---------------------------------------------------------------------------
# 2. Map
# ---------------------------------------------------------------------------

def build_args_map(args: Iterable[str]) -> dict[str, str]:
    """Fold subcommand arguments into a ``{name: value}`` mapping.

    * ``-name`` / ``--name`` maps *name* to ``""`` and waits for a value.
    * A plain token fills the pending name, or becomes a key of its own
      with an empty value when no name is pending.
    * ``-`` and ``--`` carry no name: nothing is recorded and any pending
      name is dropped.
    * Repeated keys keep the last value written.
    """
    args_map: dict[str, str] = {}
    pending = ""
    for token in args:
        if token.startswith("-"):
            pending = token.lstrip("-")
            if pending:
                args_map[pending] = ""
        elif pending:
            args_map[pending] = token
            pending = ""
        else:
            args_map[token] = ""
    return args_map


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def classify(
    raw_args: Sequence[str],
    known_commands: Container[str],
) -> ClassifiedArgs:
    """Run the select → map pipeline over a full ``argv``.

    *raw_args* includes the program name at index 0.  A vector holding
    only the program name yields an empty :class:`ClassifiedArgs`.
    """
    if len(raw_args) <= 1:
        return ClassifiedArgs()

    command, residuals = select_command(raw_args, known_commands)
    return ClassifiedArgs(
        command=command,
        args=tuple(residuals),
        args_map=build_args_map(residuals),
    )
