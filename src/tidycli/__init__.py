"""tidycli: subcommand handling, tidy usage and version printing.

Small command-line front-end toolkit: an argument classifier that picks
the subcommand out of ``argv``, a usage/version printer, and an
aligned-column text table.
"""

from tidycli.cli.app import Cli
from tidycli.core.classifier import build_args_map, classify
from tidycli.core.models import ClassifiedArgs, Flag
from tidycli.core.table import Table
from tidycli.exceptions import InvalidIndexError, TidyCliError
from tidycli.version import __version__

__all__: list[str] = [
    "ClassifiedArgs",
    "Cli",
    "Flag",
    "InvalidIndexError",
    "Table",
    "TidyCliError",
    "__version__",
    "build_args_map",
    "classify",
]
