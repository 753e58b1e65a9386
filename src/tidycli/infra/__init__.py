"""Infrastructure layer: integration with ``argparse`` and the process.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Must expose clean, typed interfaces consumed by the core layer.
"""

from tidycli.infra.flag_registry import ArgparseFlagRegistry, display_value

__all__: list[str] = [
    "ArgparseFlagRegistry",
    "display_value",
]
