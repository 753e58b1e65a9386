"""Custom exception hierarchy for tidycli.

Every error raised on purpose by the toolkit inherits from
:class:`TidyCliError`, so an embedding program can catch one type at its
boundary.  The argument classifier never raises: malformed argument
shapes are absorbed, not reported.

Hierarchy
---------
TidyCliError
├── InvalidIndexError
├── CommandNotFoundError
└── DependencyMissingError
"""

from __future__ import annotations


class TidyCliError(Exception):
    """Base exception for all tidycli errors.

    The :meth:`Cli.run <tidycli.cli.app.Cli.run>` boundary renders the
    message (and hint, when present) instead of a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Table ------------------------------------------------------------------

class InvalidIndexError(TidyCliError):
    """Raised when a table row or column index is lower than 1."""


# --- Dispatch ---------------------------------------------------------------

class CommandNotFoundError(TidyCliError):
    """Raised when the selected subcommand has no registered handler."""


# --- Environment ------------------------------------------------------------

class DependencyMissingError(TidyCliError):
    """Raised when an optional runtime dependency is not installed."""
