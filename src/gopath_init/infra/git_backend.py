"""dulwich backed Git integration.

Implements both :class:`~gopath_init.core.protocols.IdentityProvider`
and :class:`~gopath_init.core.protocols.RepositoryInitializer`.  This
module is the **only** place in the codebase that imports ``dulwich``;
all dulwich and ``OSError`` failures are re-raised as typed
:class:`~gopath_init.exceptions.GopathInitError` subclasses.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from gopath_init.exceptions import EnvironmentError, GitIdentityError, RepositoryInitError

LOGGER = logging.getLogger(__name__)


def _import_dulwich() -> tuple[Any, Any]:
    """Return ``(ConfigFile, Repo)`` or raise ``EnvironmentError``."""
    try:
        from dulwich.config import ConfigFile
        from dulwich.repo import Repo
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "dulwich is not installed. Install with: pip install dulwich",
        ) from exc
    return ConfigFile, Repo


class DulwichGitBackend:
    """Global identity lookup and repository creation via dulwich.

    Parameters
    ----------
    home:
        Home directory holding ``.gitconfig``.  Defaults to
        :meth:`pathlib.Path.home`.
    environ:
        Environment used to locate ``$XDG_CONFIG_HOME``.  Defaults to
        :data:`os.environ`.
    """

    def __init__(
        self,
        home: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._home: Path | None = home
        self._environ: Mapping[str, str] = os.environ if environ is None else environ

    # ------------------------------------------------------------------
    # Global configuration
    # ------------------------------------------------------------------

    def global_config_paths(self) -> tuple[Path, ...]:
        """Return the global-scope config files, lowest precedence first.

        Git reads ``$XDG_CONFIG_HOME/git/config`` (falling back to
        ``~/.config/git/config``) and then ``~/.gitconfig``, letting the
        latter win.
        """
        home = self._home if self._home is not None else Path.home()
        xdg = self._environ.get("XDG_CONFIG_HOME", "")
        xdg_base = Path(xdg) if xdg else home / ".config"
        return (xdg_base / "git" / "config", home / ".gitconfig")

    def global_user_name(self) -> str:
        """Return ``user.name`` from the global Git configuration.

        Raises
        ------
        GitIdentityError
            When a config file cannot be parsed, or no file sets a name.
        """
        config_file_class, _ = _import_dulwich()

        name = ""
        for path in self.global_config_paths():
            if not path.is_file():
                continue
            LOGGER.debug("Reading git config %s", path)
            try:
                config = config_file_class.from_path(str(path))
            except (OSError, ValueError) as exc:
                raise GitIdentityError(
                    f"failed to load git config: {exc}",
                ) from exc
            try:
                value: bytes = config.get((b"user",), b"name")
            except KeyError:
                continue
            decoded = value.decode("utf-8", errors="replace").strip()
            if decoded:
                name = decoded

        if not name:
            raise GitIdentityError(
                "git user.name is not set in global config",
                hint='Run: git config --global user.name "Your Name" '
                "or pass -username <name>.",
            )
        return name

    # ------------------------------------------------------------------
    # Repository creation
    # ------------------------------------------------------------------

    def init_repository(self, path: Path) -> None:
        """Create a non-bare repository with its work tree at *path*.

        Raises
        ------
        RepositoryInitError
            When ``path/.git`` already exists or dulwich fails.
        """
        _, repo_class = _import_dulwich()

        if (path / ".git").exists():
            raise RepositoryInitError(
                "failed to initialize Git repository: repository already exists",
                hint=f"Remove {path / '.git'} or choose another project name.",
            )

        LOGGER.debug("Initializing git repository in %s", path)
        try:
            repo = repo_class.init(str(path))
        except OSError as exc:
            raise RepositoryInitError(
                f"failed to initialize Git repository: {exc}",
            ) from exc
        repo.close()
