"""Infrastructure layer — external system integration.

This layer wraps all interaction with dulwich, the ``go`` executable,
and the local filesystem.  Every raw third-party or OS exception must be
caught here and re-raised as a :class:`~gopath_init.exceptions.GopathInitError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from gopath_init.infra.git_backend import DulwichGitBackend
from gopath_init.infra.go_toolchain import GoModuleInitializer, GoStatus, detect_go
from gopath_init.infra.workspace import LocalWorkspace

__all__: list[str] = [
    "DulwichGitBackend",
    "GoModuleInitializer",
    "GoStatus",
    "LocalWorkspace",
    "detect_go",
]
