"""Core scaffold service — runs the fixed project-creation pipeline.

The Git backend, the Go toolchain and the filesystem are injected at
construction time as :mod:`~gopath_init.core.protocols` implementations.  The pipeline is:

1. Validate the base path.
2. Resolve the username (global Git identity when not given).
3. Build ``<gopath>/src/<provider>/<username>/<project>``.
4. Create the directory and move into it.
5. Initialize the Git repository.
6. Run ``go mod init``.
7. Write ``main.go``.

Guarantees
----------
* Fail fast: the first error aborts the remaining steps.
* No rollback: artifacts created by earlier steps stay on disk.
* Only :class:`~gopath_init.exceptions.GopathInitError` subclasses escape.
* No ``print()`` — the CLI layer reports the result.
"""

from __future__ import annotations

import logging

from gopath_init.core.models import ScaffoldConfig, ScaffoldResult
from gopath_init.core.paths import build_project_path, require_gopath
from gopath_init.core.protocols import (
    IdentityProvider,
    ModuleInitializer,
    RepositoryInitializer,
    Workspace,
)
from gopath_init.core.template import ENTRY_POINT_FILENAME, render_main_go
from gopath_init.exceptions import (
    GitIdentityError,
    GopathInitError,
    ModuleInitError,
    RepositoryInitError,
)

LOGGER = logging.getLogger(__name__)

ARTIFACTS: tuple[str, ...] = ("Git repository", "Go module", f"{ENTRY_POINT_FILENAME} file")


class ScaffoldService:
    """Stateless service that drives the scaffold pipeline.

    Parameters
    ----------
    identity:
        Supplies the default username.
    repository:
        Creates the Git repository.
    modules:
        Runs the Go module initialization.
    workspace:
        Creates directories, changes into them and writes files.
    """

    def __init__(
        self,
        identity: IdentityProvider,
        repository: RepositoryInitializer,
        modules: ModuleInitializer,
        workspace: Workspace,
    ) -> None:
        self._identity: IdentityProvider = identity
        self._repository: RepositoryInitializer = repository
        self._modules: ModuleInitializer = modules
        self._workspace: Workspace = workspace

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def resolve_username(self, config: ScaffoldConfig) -> ScaffoldConfig:
        """Return *config* with a username, asking the identity provider if needed."""
        if config.username:
            return config

        try:
            name = self._identity.global_user_name()
        except GopathInitError:
            raise
        except Exception as exc:
            raise GitIdentityError(f"failed to read git username: {exc}") from exc

        LOGGER.debug("Resolved username %r from global git config", name)
        return config.with_username(name)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, config: ScaffoldConfig) -> ScaffoldResult:
        """Scaffold the project described by *config*.

        Raises
        ------
        MissingGopathError
            When ``config.gopath`` is empty.  Nothing has been touched yet.
        GitIdentityError
            When no username was given and none is configured.
        ScaffoldFilesystemError
            When a directory or file operation fails.
        RepositoryInitError, ModuleInitError, GoNotFoundError
            When Git or Go report failure.
        """
        require_gopath(config.gopath)
        config = self.resolve_username(config)

        # Must be absolute: the working directory changes below.
        project_path = build_project_path(config).absolute()
        LOGGER.debug("Project path: %s", project_path)

        self._workspace.create_directory(project_path)
        self._workspace.change_directory(project_path)

        try:
            self._repository.init_repository(project_path)
        except GopathInitError:
            raise
        except Exception as exc:
            raise RepositoryInitError(
                f"failed to initialize Git repository: {exc}",
            ) from exc

        try:
            output = self._modules.init_module(project_path, config.module_path)
        except GopathInitError:
            raise
        except Exception as exc:
            raise ModuleInitError(f"failed to initialize Go module: {exc}") from exc

        entry_point = project_path / ENTRY_POINT_FILENAME
        self._workspace.write_text_file(entry_point, render_main_go(config.project_name))

        return ScaffoldResult(
            project_path=project_path,
            entry_point=entry_point,
            module_output=output,
            artifacts=ARTIFACTS,
        )
