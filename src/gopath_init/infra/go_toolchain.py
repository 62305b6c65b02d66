"""Infrastructure: Go toolchain detection and ``go mod init``.

This module is responsible for locating the ``go`` executable, running
the module initialization as a blocking subprocess, and providing
platform-specific installation guidance when Go is missing.

Rules
-----
* Detection via :func:`shutil.which`.
* stdout and stderr are captured together, in order.
* No timeout — the call blocks until ``go`` exits.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from gopath_init.exceptions import GoNotFoundError, ModuleInitError

LOGGER = logging.getLogger(__name__)

GO_EXECUTABLE: str = "go"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GoStatus:
    """Result of a Go toolchain detection probe.

    Attributes
    ----------
    found : bool
        Whether ``go`` was located on PATH.
    path : Path | None
        Absolute path to the ``go`` binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing Go on the current
        platform.  Empty when Go is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


def detect_go(executable: str = GO_EXECUTABLE) -> GoStatus:
    """Probe the system for the Go toolchain.

    Returns a :class:`GoStatus` regardless of whether Go is present —
    the caller decides whether to abort or merely warn.
    """
    result = shutil.which(executable)
    if result is not None:
        return GoStatus(found=True, path=Path(result).resolve(), install_commands=())
    return GoStatus(found=False, path=None, install_commands=_platform_install_commands())


def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install GoLang.Go",
            "choco install golang",
        )
    if system == "linux":
        return (
            "sudo apt install golang-go",
            "sudo dnf install golang",
            "sudo pacman -S go",
        )
    if system == "darwin":
        return ("brew install go",)
    return ("Please install Go from https://go.dev/dl/",)


def _missing_go_hint() -> str:
    lines = ["Install Go using one of:"]
    lines.extend(f"  {cmd}" for cmd in _platform_install_commands())
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Module initialization
# ---------------------------------------------------------------------------

class GoModuleInitializer:
    """Concrete :class:`~gopath_init.core.protocols.ModuleInitializer`.

    Runs ``go mod init [module_path]`` in the project directory.
    """

    def __init__(self, executable: str = GO_EXECUTABLE) -> None:
        self._executable: str = executable

    def build_command(self, module_path: str | None = None) -> list[str]:
        """Return the argv for ``go mod init``."""
        command = [self._executable, "mod", "init"]
        if module_path:
            command.append(module_path)
        return command

    def init_module(self, cwd: Path, module_path: str | None = None) -> str:
        """Run ``go mod init`` in *cwd* and return its combined output.

        Raises
        ------
        GoNotFoundError
            When the executable is not on ``PATH``.
        ModuleInitError
            When the process cannot be started (e.g. *cwd* is missing) or
            exits non-zero; ``output`` holds what it printed.
        """
        if shutil.which(self._executable) is None:
            raise GoNotFoundError(
                f"{self._executable!r} is not installed or not on PATH.",
                hint=_missing_go_hint(),
            )

        command = self.build_command(module_path)
        LOGGER.debug("Running %s in %s", " ".join(command), cwd)
        try:
            completed = subprocess.run(
                command,
                cwd=str(cwd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ModuleInitError(f"failed to initialize Go module: {exc}") from exc

        output = completed.stdout or ""
        if completed.returncode != 0:
            raise ModuleInitError(
                "failed to initialize Go module: "
                f"{' '.join(command)} exited with status {completed.returncode}",
                output=output,
            )
        return output
