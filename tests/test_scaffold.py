"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from gopath_init import __version__
from gopath_init.cli import exit_codes
from gopath_init.cli.app import main
from gopath_init.exceptions import (
    ChangeDirectoryError,
    ConfigurationError,
    DirectoryCreateError,
    EnvironmentError,
    ExternalCommandError,
    GitIdentityError,
    GoNotFoundError,
    GopathInitError,
    MissingGopathError,
    ModuleInitError,
    RepositoryInitError,
    ScaffoldFilesystemError,
    TemplateWriteError,
    UsageError,
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
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            ConfigurationError,
            MissingGopathError,
            GitIdentityError,
            ScaffoldFilesystemError,
            DirectoryCreateError,
            ChangeDirectoryError,
            TemplateWriteError,
            ExternalCommandError,
            RepositoryInitError,
            ModuleInitError,
            GoNotFoundError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[GopathInitError]
    ) -> None:
        assert issubclass(exc_class, GopathInitError)

    @pytest.mark.parametrize(
        ("exc_class", "parent"),
        [
            (MissingGopathError, ConfigurationError),
            (GitIdentityError, ConfigurationError),
            (DirectoryCreateError, ScaffoldFilesystemError),
            (ChangeDirectoryError, ScaffoldFilesystemError),
            (TemplateWriteError, ScaffoldFilesystemError),
            (RepositoryInitError, ExternalCommandError),
            (ModuleInitError, ExternalCommandError),
        ],
    )
    def test_grouping(
        self, exc_class: type[GopathInitError], parent: type[GopathInitError]
    ) -> None:
        assert issubclass(exc_class, parent)

    def test_hint_is_stored(self) -> None:
        err = GopathInitError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert GopathInitError("boom").hint is None

    def test_module_init_error_keeps_output(self) -> None:
        err = ModuleInitError("failed", output="go: boom\n", hint="h")
        assert err.output == "go: boom\n"
        assert err.hint == "h"

    def test_module_init_error_output_defaults_to_empty(self) -> None:
        assert ModuleInitError("failed").output == ""


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
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"], environ={})
        assert exc_info.value.code == 0

    def test_doctor_flag_routes_to_doctor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from gopath_init.cli import app as app_module

        seen: list[object] = []
        monkeypatch.setattr(
            app_module, "_handle_doctor", lambda environ: seen.append(environ) or 0,
        )
        env = {"GOPATH": "/go"}
        assert main(["-doctor"], environ=env) == exit_codes.SUCCESS
        assert seen == [env]

    def test_project_name_routes_to_scaffold(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from gopath_init.cli import app as app_module

        configs: list[object] = []
        monkeypatch.setattr(
            app_module,
            "_handle_scaffold",
            lambda config, environ: configs.append(config) or exit_codes.SUCCESS,
        )
        assert main(["demo"], environ={"GOPATH": "/go"}) == exit_codes.SUCCESS
        assert len(configs) == 1
