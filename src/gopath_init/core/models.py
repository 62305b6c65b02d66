"""Domain models for gopath-init.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_PROVIDER: str = "github.com"
"""Hosting provider used when ``-provider`` is not given."""


# ---------------------------------------------------------------------------
# Scaffold input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScaffoldConfig:
    """Everything needed to scaffold one project, merged from flags and env."""

    project_name: str
    """Name of the project directory (the positional argument)."""

    gopath: str
    """Base path; ``""`` when neither flag nor environment supplied it."""

    provider: str = DEFAULT_PROVIDER
    """Hosting-service hostname segment, e.g. ``github.com``."""

    username: str = ""
    """Account segment; ``""`` means "resolve from global Git config"."""

    module_path: str | None = None
    """Explicit argument for ``go mod init``; ``None`` lets Go infer it."""

    def with_username(self, username: str) -> ScaffoldConfig:
        """Return a copy with :attr:`username` filled in."""
        return replace(self, username=username)


# ---------------------------------------------------------------------------
# Scaffold output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScaffoldResult:
    """Outcome of a successful scaffold run."""

    project_path: Path
    """Directory that now holds the repository, module and entry point."""

    entry_point: Path
    """Absolute path of the written ``main.go``."""

    module_output: str
    """Combined stdout/stderr captured from ``go mod init``."""

    artifacts: tuple[str, ...]
    """Human-readable labels of what was created, in creation order."""
