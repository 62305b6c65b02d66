"""Shared pytest fixtures and configuration for the gopath-init test suite.

Guidelines
----------
* No network access and no real ``go`` executable in any test.
* Git runs for real (dulwich) but only inside ``tmp_path``.
* The scaffold changes the working directory; every test starts in
  ``tmp_path`` and monkeypatch restores the original afterwards.
* The process environment is never read — tests pass ``environ``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from gopath_init.core.scaffold_service import ScaffoldService
from gopath_init.infra.workspace import LocalWorkspace


# ---------------------------------------------------------------------------
# Fakes for the core protocols
# ---------------------------------------------------------------------------

class FakeIdentity:
    """In-memory :class:`IdentityProvider`."""

    def __init__(self, name: str = "gopher", error: Exception | None = None) -> None:
        self.name = name
        self.error = error
        self.calls = 0

    def global_user_name(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.name


class FakeRepository:
    """:class:`RepositoryInitializer` that only creates an empty ``.git`` dir."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.paths: list[Path] = []

    def init_repository(self, path: Path) -> None:
        self.paths.append(path)
        if self.error is not None:
            raise self.error
        (path / ".git").mkdir()


class FakeModules:
    """:class:`ModuleInitializer` that writes a ``go.mod`` without Go."""

    def __init__(
        self,
        output: str = "go: creating new go.mod: module demo\n",
        error: Exception | None = None,
    ) -> None:
        self.output = output
        self.error = error
        self.calls: list[tuple[Path, str | None]] = []

    def init_module(self, cwd: Path, module_path: str | None = None) -> str:
        self.calls.append((cwd, module_path))
        if self.error is not None:
            raise self.error
        (cwd / "go.mod").write_text(f"module {module_path or cwd.name}\n", encoding="utf-8")
        return self.output


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    # Rich must not emit ANSI codes into captured output.
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def gopath(tmp_path: Path) -> Path:
    path = tmp_path / "go"
    path.mkdir()
    return path


@pytest.fixture
def identity() -> FakeIdentity:
    return FakeIdentity()


@pytest.fixture
def repository() -> FakeRepository:
    return FakeRepository()


@pytest.fixture
def modules() -> FakeModules:
    return FakeModules()


@pytest.fixture
def service(
    identity: FakeIdentity,
    repository: FakeRepository,
    modules: FakeModules,
) -> ScaffoldService:
    return ScaffoldService(
        identity=identity,
        repository=repository,
        modules=modules,
        workspace=LocalWorkspace(),
    )


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    # configure_logging binds a handler to the stream current at call time.
    logger = logging.getLogger("gopath_init")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
