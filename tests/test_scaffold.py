"""Smoke tests to verify package wiring.

These tests prove that:
* The public API is importable from the package root.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* Models are immutable value objects.
"""

from __future__ import annotations

import dataclasses

import pytest

import tidycli
from tidycli import __version__
from tidycli.cli import exit_codes
from tidycli.core.models import ClassifiedArgs, Flag
from tidycli.exceptions import (
    CommandNotFoundError,
    DependencyMissingError,
    InvalidIndexError,
    TidyCliError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TestPublicApi:
    @pytest.mark.parametrize("name", tidycli.__all__)
    def test_exported(self, name: str) -> None:
        assert hasattr(tidycli, name)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [InvalidIndexError, CommandNotFoundError, DependencyMissingError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[TidyCliError]
    ) -> None:
        assert issubclass(exc_class, TidyCliError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(TidyCliError, Exception)

    def test_hint_is_stored(self) -> None:
        err = TidyCliError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert TidyCliError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class TestModels:
    def test_flag_is_frozen(self) -> None:
        flag = Flag("v", "true", "Verbose", "false")
        with pytest.raises(dataclasses.FrozenInstanceError):
            flag.value = "false"  # type: ignore[misc]

    def test_flag_hidden_defaults_false(self) -> None:
        assert Flag("v", "", "", "").hidden is False

    def test_classified_args_defaults(self) -> None:
        empty = ClassifiedArgs()
        assert empty.command == ""
        assert empty.args == ()
        assert dict(empty.args_map) == {}
        assert not empty

    def test_classified_args_truthy_with_command(self) -> None:
        assert ClassifiedArgs(command="run")
