"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so tests can swap in fakes for Git, Go and the
filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class IdentityProvider(Protocol):
    """Source of the default username segment."""

    def global_user_name(self) -> str:
        """Return the global VCS identity name.

        Raises
        ------
        GitIdentityError
            When the configuration cannot be loaded or has no name set.
        """
        ...  # pragma: no cover


class RepositoryInitializer(Protocol):
    """Contract for creating a fresh, non-bare repository."""

    def init_repository(self, path: Path) -> None:
        """Initialize a repository whose work tree is *path*.

        Raises
        ------
        RepositoryInitError
            When a repository already exists or the backend fails.
        """
        ...  # pragma: no cover


class ModuleInitializer(Protocol):
    """Contract for the toolchain step that writes the module manifest."""

    def init_module(self, cwd: Path, module_path: str | None = None) -> str:
        """Run the module-init command in *cwd* and return its combined output.

        When *module_path* is ``None`` no module argument is passed and
        the toolchain infers one from the directory.

        Raises
        ------
        ModuleInitError
            When the command exits non-zero.
        GoNotFoundError
            When the toolchain executable cannot be found.
        """
        ...  # pragma: no cover


class Workspace(Protocol):
    """Contract for the local filesystem steps of the scaffold."""

    def create_directory(self, path: Path) -> None:
        """Create *path* and any missing parents."""
        ...  # pragma: no cover

    def change_directory(self, path: Path) -> None:
        """Make *path* the process working directory."""
        ...  # pragma: no cover

    def write_text_file(self, path: Path, content: str) -> None:
        """Write *content* to *path*, replacing any existing file.

        Raises
        ------
        ScaffoldFilesystemError
            When any of the operations above fails.
        """
        ...  # pragma: no cover
