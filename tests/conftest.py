"""Shared pytest fixtures and configuration for the tidycli test suite.

Guidelines
----------
* Never mutate the real ``sys.argv``; pass explicit argument vectors.
* Core tests must be pure and never print.
* Output assertions go through ``capsys``.
"""

from __future__ import annotations
