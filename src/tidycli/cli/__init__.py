"""CLI layer: the ``Cli`` façade, console output, loggers, exit codes.

This package is the outermost layer.  It may import from ``core`` and
``infra``, but no other layer may import from ``cli``.
"""
