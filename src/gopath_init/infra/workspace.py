"""Infrastructure: local filesystem steps of the scaffold.

Every ``OSError`` raised here is re-raised as the matching
:class:`~gopath_init.exceptions.ScaffoldFilesystemError` subclass.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from gopath_init.exceptions import (
    ChangeDirectoryError,
    DirectoryCreateError,
    TemplateWriteError,
)

LOGGER = logging.getLogger(__name__)

DIRECTORY_MODE: int = 0o755
FILE_MODE: int = 0o644


def create_directory(path: Path) -> None:
    """Create *path* and any missing parents.  Existing directories are fine."""
    LOGGER.debug("Creating directory %s", path)
    try:
        path.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(
            f"failed to create project directory: {exc}",
        ) from exc


def change_directory(path: Path) -> None:
    """Make *path* the process working directory for the rest of the run."""
    LOGGER.debug("Changing working directory to %s", path)
    try:
        os.chdir(path)
    except OSError as exc:
        raise ChangeDirectoryError(
            f"failed to change to project directory: {exc}",
        ) from exc


def write_text_file(path: Path, content: str) -> None:
    """Write *content* to *path* (UTF-8) with ``0644`` permissions."""
    LOGGER.debug("Writing %s (%d bytes)", path, len(content))
    try:
        path.write_text(content, encoding="utf-8")
        path.chmod(FILE_MODE)
    except OSError as exc:
        raise TemplateWriteError(
            f"failed to create {path.name} file: {exc}",
        ) from exc


class LocalWorkspace:
    """Concrete :class:`~gopath_init.core.protocols.Workspace` on the real filesystem."""

    def create_directory(self, path: Path) -> None:
        create_directory(path)

    def change_directory(self, path: Path) -> None:
        change_directory(path)

    def write_text_file(self, path: Path, content: str) -> None:
        write_text_file(path, content)
