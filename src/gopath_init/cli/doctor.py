"""``gopath-init -doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can scaffold a project: the Go
toolchain, dulwich, ``GOPATH`` and the global Git identity.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from collections.abc import Mapping
from pathlib import Path

from gopath_init.cli import exit_codes
from gopath_init.cli.console import console, escape
from gopath_init.exceptions import GopathInitError
from gopath_init.infra.git_backend import DulwichGitBackend
from gopath_init.infra.go_toolchain import detect_go
from gopath_init.version import __version__

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the gopath-init version row."""
    return "gopath-init", __version__, OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _dulwich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the dulwich row."""
    try:
        import dulwich
    except ImportError:
        return "dulwich", "NOT INSTALLED", FAIL
    version = ".".join(str(part) for part in getattr(dulwich, "__version__", ()))
    return "dulwich", version or "unknown", OK


def _go_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Go toolchain row."""
    status = detect_go()
    if status.found:
        return "go", str(status.path) if status.path else "found", OK
    return "go", "not found", FAIL


def _gopath_check(environ: Mapping[str, str]) -> tuple[str, str, str]:
    """Return (label, value, status) for the GOPATH row.

    A missing ``GOPATH`` only warns because ``-gopath`` can supply it.
    """
    gopath = environ.get("GOPATH", "")
    if gopath:
        return "GOPATH", gopath, OK
    return "GOPATH", "not set", WARN


def _git_identity_check(environ: Mapping[str, str]) -> tuple[str, str, str]:
    """Return (label, value, status) for the global git user.name row.

    Only warns when unset because ``-username`` can supply it.
    """
    home = environ.get("HOME")
    backend = DulwichGitBackend(home=Path(home) if home else None, environ=environ)
    try:
        name = backend.global_user_name()
    except GopathInitError as exc:
        return "git user.name", str(exc), WARN
    return "git user.name", name, OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ngopath-init doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(environ: Mapping[str, str]) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _version_check(),
        _python_version_check(),
        _dulwich_check(),
        _go_check(),
        _gopath_check(environ),
        _git_identity_check(environ),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        Table = None  # noqa: N806

    if Table is not None:
        table = Table(
            title="gopath-init doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=14)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, escape(value), status)
        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    go_status = detect_go()
    if not go_status.found:
        console.print("[yellow]Go is not installed.[/yellow]")
        console.print("Install using one of the following commands:\n")
        for cmd in go_status.install_commands:
            console.print(f"  [bold]{cmd}[/bold]")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
