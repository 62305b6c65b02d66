"""CLI application entry point for gopath-init.

This module is the **sole error boundary** for the entire application.
It catches :class:`~gopath_init.exceptions.GopathInitError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — the scaffold pipeline belongs to
  :class:`~gopath_init.core.scaffold_service.ScaffoldService`.
* The process environment is read once, in :func:`main`, and passed on
  explicitly so tests can supply their own mapping.
* Options use Go's single-dash spelling (``-gopath``); the double-dash
  spelling is accepted as well.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from gopath_init.cli import exit_codes
from gopath_init.cli.console import configure_logging, console, escape, stdout_console
from gopath_init.core.models import DEFAULT_PROVIDER, ScaffoldConfig
from gopath_init.exceptions import GopathInitError, ModuleInitError, UsageError
from gopath_init.version import __version__

if TYPE_CHECKING:
    from gopath_init.core.scaffold_service import ScaffoldService

LOGGER = logging.getLogger(__name__)

PROGRAM_NAME: str = "gopath-init"

DESCRIPTION: str = (
    "Go Project Initializer\n\n"
    "Creates a new Go project directory under $GOPATH/src/<provider>/<username>, "
    "initializes a Git repository, sets up a Go module, and generates a basic "
    "main.go file.\n"
    "It uses GOPATH and the global git config, with options to override defaults."
)

MISSING_PROJECT_NAME: str = "Project name is required as an argument."


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` whose usage errors exit with ``GENERAL_ERROR``."""

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(exit_codes.GENERAL_ERROR, f"\nError: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    The CLI supports:
    * ``gopath-init [options] <project-name>`` — scaffold a project
    * ``gopath-init -doctor``                  — environment diagnostics
    * ``gopath-init -h`` / ``--version``
    """
    parser = _ArgumentParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s [options] <project-name>",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-provider",
        "--provider",
        default=DEFAULT_PROVIDER,
        help="Git provider (e.g., github.com, gitlab.com). Default: %(default)s",
    )
    parser.add_argument(
        "-gopath",
        "--gopath",
        default=None,
        help="GOPATH to use. Default: $GOPATH",
    )
    parser.add_argument(
        "-username",
        "--username",
        default="",
        help="Git username. Default: user.name from the global git config",
    )
    parser.add_argument(
        "-module",
        "--module",
        default=None,
        metavar="PATH",
        help="Module path passed to 'go mod init'. Default: inferred by go",
    )
    parser.add_argument(
        "-verbose",
        "--verbose",
        action="store_true",
        help="Log each step to stderr.",
    )
    parser.add_argument(
        "-doctor",
        "--doctor",
        action="store_true",
        help="Check the environment (go, git identity, GOPATH) and exit.",
    )
    parser.add_argument(
        "project_names",
        nargs="*",
        metavar="project-name",
        help="Name of the project to create (required)",
    )
    return parser


def build_config(args: argparse.Namespace, environ: Mapping[str, str]) -> ScaffoldConfig:
    """Merge parsed options with *environ* into a :class:`ScaffoldConfig`."""
    gopath = args.gopath if args.gopath is not None else environ.get("GOPATH", "")
    return ScaffoldConfig(
        project_name=args.project_names[0],
        gopath=gopath,
        provider=args.provider,
        username=args.username,
        module_path=args.module,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_service(environ: Mapping[str, str]) -> ScaffoldService:
    """Wire the real Git and Go adapters into a scaffold service."""
    from gopath_init.core.scaffold_service import ScaffoldService
    from gopath_init.infra.git_backend import DulwichGitBackend
    from gopath_init.infra.go_toolchain import GoModuleInitializer
    from gopath_init.infra.workspace import LocalWorkspace

    home = environ.get("HOME")
    git = DulwichGitBackend(home=Path(home) if home else None, environ=environ)
    return ScaffoldService(
        identity=git,
        repository=git,
        modules=GoModuleInitializer(),
        workspace=LocalWorkspace(),
    )


def _handle_scaffold(config: ScaffoldConfig, environ: Mapping[str, str]) -> int:
    """Run the scaffold pipeline and report what was created."""
    service = _build_service(environ)
    result = service.run(config)
    LOGGER.debug("Wrote %s", result.entry_point)
    if result.module_output:
        LOGGER.debug("go mod init: %s", result.module_output.strip())

    artifacts = list(result.artifacts)
    summary = ", ".join(artifacts[:-1]) + f", and {artifacts[-1]}"
    stdout_console.print(
        "[bold green]Successfully created and set up Go project at[/bold green] "
        f"{escape(str(result.project_path))}",
        soft_wrap=True,
    )
    stdout_console.print(f"Created: {escape(summary)}", soft_wrap=True)
    return exit_codes.SUCCESS


def _handle_doctor(environ: Mapping[str, str]) -> int:
    """Dispatch the ``-doctor`` diagnostics command."""
    from gopath_init.cli.doctor import run_doctor

    return run_doctor(environ)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the gopath-init CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environ:
        Environment mapping used for ``GOPATH``, ``HOME`` and
        ``XDG_CONFIG_HOME``.  Defaults to :data:`os.environ`.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        When not exactly one project name is given; the help text has
        already been written to stderr.
    """
    if environ is None:
        environ = os.environ

    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.doctor:
        return _handle_doctor(environ)

    if len(args.project_names) != 1:
        parser.print_help(sys.stderr)
        raise UsageError(MISSING_PROJECT_NAME)

    return _handle_scaffold(build_config(args, environ), environ)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report_error(exc: GopathInitError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", soft_wrap=True)
    if isinstance(exc, ModuleInitError) and exc.output:
        console.out(exc.output)
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", soft_wrap=True)


def cli(argv: Sequence[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except GopathInitError as exc:
        _report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
