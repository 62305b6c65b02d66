"""Core / service layer — scaffold pipeline and pure data transformations.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli``.
* No imports from ``infra``: Git, Go and the filesystem are reached only
  through :mod:`~gopath_init.core.protocols`.
"""

from gopath_init.core.models import ScaffoldConfig, ScaffoldResult
from gopath_init.core.paths import build_project_path, require_gopath
from gopath_init.core.protocols import (
    IdentityProvider,
    ModuleInitializer,
    RepositoryInitializer,
    Workspace,
)
from gopath_init.core.scaffold_service import ScaffoldService
from gopath_init.core.template import render_main_go

__all__: list[str] = [
    "IdentityProvider",
    "ModuleInitializer",
    "RepositoryInitializer",
    "ScaffoldConfig",
    "ScaffoldResult",
    "ScaffoldService",
    "Workspace",
    "build_project_path",
    "render_main_go",
    "require_gopath",
]
