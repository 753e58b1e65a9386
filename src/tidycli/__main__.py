"""Allow ``python -m tidycli`` invocation.

Delegates to :func:`tidycli.cli.app.main` so that ``python -m tidycli``
behaves identically to the ``tidycli`` console script.
"""

from __future__ import annotations

import sys

from tidycli.cli.app import main

if __name__ == "__main__":
    sys.exit(main())
