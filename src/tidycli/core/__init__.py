"""Core layer: pure argument classification, table layout and text.

Rules
-----
* No ``print()`` calls outside :meth:`Table.print_data`.
* No filesystem, network or process-state access.
* No imports from ``cli`` or ``infra``.
"""

from tidycli.core.classifier import build_args_map, classify, select_command
from tidycli.core.models import ClassifiedArgs, Flag
from tidycli.core.protocols import FlagRegistry
from tidycli.core.table import Table
from tidycli.core.usage import format_usage, format_version

__all__: list[str] = [
    "ClassifiedArgs",
    "Flag",
    "FlagRegistry",
    "Table",
    "build_args_map",
    "classify",
    "format_usage",
    "format_version",
    "select_command",
]
