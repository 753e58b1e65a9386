"""Domain models for tidycli.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Global flags
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Flag:
    """One registered global flag, with every field in display form."""

    name: str
    """Flag name without leading dashes (e.g. ``verbose``)."""

    value: str
    """Current value after parsing."""

    usage: str
    """Help text shown in the options list."""

    default: str
    """Default value; ``""`` and ``"false"`` are not shown in usage."""

    hidden: bool = False
    """Hidden flags keep their value but are left out of usage text."""

    @property
    def display_name(self) -> str:
        """``-x`` for short names, ``--name`` for names over two chars."""
        if len(self.name) > 2:
            return "--" + self.name
        return "-" + self.name


# ---------------------------------------------------------------------------
# Classified argument vector
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ClassifiedArgs:
    """Result of splitting ``argv`` around the selected subcommand."""

    command: str = ""
    """Selected subcommand, ``""`` when none was recognised."""

    args: tuple[str, ...] = ()
    """Tokens following the selected subcommand, command names excluded."""

    args_map: Mapping[str, str] = field(default_factory=dict)
    """Flag-style view of :attr:`args`."""

    def __bool__(self) -> bool:
        return self.command != ""
