"""Custom exception hierarchy for gopath-init.

All exceptions that cross layer boundaries must inherit from
:class:`GopathInitError`.  Raw third-party and OS exceptions (dulwich,
``OSError``, ``subprocess``) must NEVER propagate beyond the layer that
touched the outside world — they are caught there and re-raised as a
typed subclass defined here.

Hierarchy
---------
GopathInitError
├── UsageError
├── ConfigurationError
│   ├── MissingGopathError
│   └── GitIdentityError
├── ScaffoldFilesystemError
│   ├── DirectoryCreateError
│   ├── ChangeDirectoryError
│   └── TemplateWriteError
├── ExternalCommandError
│   ├── RepositoryInitError
│   └── ModuleInitError
├── GoNotFoundError
└── EnvironmentError
"""

from __future__ import annotations


class GopathInitError(Exception):
    """Base exception for all gopath-init errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(GopathInitError):
    """Raised when the command line is malformed."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(GopathInitError):
    """Raised when a required configuration value cannot be determined."""


class MissingGopathError(ConfigurationError):
    """Raised when neither ``-gopath`` nor ``$GOPATH`` provides a base path."""


class GitIdentityError(ConfigurationError):
    """Raised when the global Git ``user.name`` is unset or unreadable."""


# --- Filesystem ------------------------------------------------------------

class ScaffoldFilesystemError(GopathInitError):
    """Raised when a filesystem step of the scaffold fails."""


class DirectoryCreateError(ScaffoldFilesystemError):
    """Raised when the project directory cannot be created."""


class ChangeDirectoryError(ScaffoldFilesystemError):
    """Raised when the process cannot move into the project directory."""


class TemplateWriteError(ScaffoldFilesystemError):
    """Raised when the entry-point file cannot be written."""


# --- External commands -----------------------------------------------------

class ExternalCommandError(GopathInitError):
    """Raised when an external collaborator (Git, Go) reports failure."""


class RepositoryInitError(ExternalCommandError):
    """Raised when the Git repository cannot be initialized."""


class ModuleInitError(ExternalCommandError):
    """Raised when ``go mod init`` exits with a non-zero status.

    The combined stdout/stderr of the command is kept on :attr:`output`
    so the error boundary can print it verbatim.
    """

    def __init__(
        self,
        message: str,
        *,
        output: str = "",
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.output: str = output


# --- Environment / tooling -------------------------------------------------

class GoNotFoundError(GopathInitError):
    """Raised when the ``go`` executable cannot be located on PATH."""


class EnvironmentError(GopathInitError):
    """Raised when a required runtime dependency is not available."""
