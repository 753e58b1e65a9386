"""Protocols (interfaces) consumed by the core layer.

The usage printer only needs a read-only view of the registered global
flags.  Any mapping of flag name to :class:`~tidycli.core.models.Flag`
satisfies :class:`FlagRegistry` structurally, which keeps the core free
of ``argparse`` and of process-wide state.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol

from tidycli.core.models import Flag


class FlagRegistry(Protocol):
    """Contract for a read-only registry of global flags.

    Iteration must yield flag names (without leading dashes) in
    ascending order.
    """

    def __getitem__(self, name: str) -> Flag:
        ...  # pragma: no cover

    def __iter__(self) -> Iterator[str]:
        ...  # pragma: no cover

    def __len__(self) -> int:
        ...  # pragma: no cover

    def values(self) -> Iterable[Flag]:
        """Return the registered :class:`Flag` objects in name order."""
        ...  # pragma: no cover
