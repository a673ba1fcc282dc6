"""Startup configuration.

The project root is fixed at ``<home>/Developer``; there is no config file.
"""

from pathlib import Path

from pydantic import BaseModel

from devmux.constants import PROJECTS_DIRNAME


class StartupError(Exception):
    """Raised when the tool cannot start (no home directory, no project root)."""


class ResolvedConfig(BaseModel):
    home: Path
    projects_root: Path


def resolve_home() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise StartupError("Could not determine the home directory") from e


def load_config(home: Path | str | None = None) -> ResolvedConfig:
    """Resolve the home directory and verify the project root exists.

    Args:
        home: Override for the home directory. If None, uses the platform default.
    """
    home_path = Path(home) if home else resolve_home()
    projects_root = home_path / PROJECTS_DIRNAME
    if not projects_root.is_dir():
        raise StartupError(f"~/{PROJECTS_DIRNAME} does not exist: {projects_root}")
    return ResolvedConfig(home=home_path, projects_root=projects_root)
