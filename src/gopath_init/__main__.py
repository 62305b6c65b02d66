"""Allow ``python -m gopath_init`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m gopath_init`` behaves identically to the ``gopath-init``
console script.
"""

from __future__ import annotations

from gopath_init.cli.app import cli

if __name__ == "__main__":
    cli()
