"""Pure path computation for the GOPATH source layout."""

from __future__ import annotations

from pathlib import Path

from gopath_init.core.models import ScaffoldConfig
from gopath_init.exceptions import MissingGopathError

SOURCE_DIR: str = "src"


def require_gopath(gopath: str) -> str:
    """Return *gopath* unchanged, or raise when it is empty."""
    if not gopath:
        raise MissingGopathError(
            "GOPATH is not set.",
            hint="Set the GOPATH environment variable or pass -gopath <dir>.",
        )
    return gopath


def build_project_path(config: ScaffoldConfig) -> Path:
    """Return ``<gopath>/src/<provider>/<username>/<project_name>``.

    No filesystem access happens here; the result is not resolved
    against the current directory.
    """
    return Path(
        require_gopath(config.gopath),
        SOURCE_DIR,
        config.provider,
        config.username,
        config.project_name,
    )
