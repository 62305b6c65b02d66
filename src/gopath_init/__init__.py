"""gopath-init — scaffold a new Go project inside GOPATH.

Creates ``$GOPATH/src/<provider>/<username>/<project>``, initializes a Git
repository and a Go module there, and writes a starter ``main.go``.
"""

from gopath_init.version import __version__

__all__: list[str] = ["__version__"]
