from pathlib import Path

import pytest

from devmux.config import ResolvedConfig
import devmux.services.tmux as _tmux_mod


@pytest.fixture(autouse=True)
def _reset_tmux_server():
    """Reset the cached libtmux server between tests."""
    _tmux_mod._server = None
    yield
    _tmux_mod._server = None


@pytest.fixture()
def projects_root(tmp_path: Path) -> Path:
    """A ~/Developer tree:

    Developer/
      alpha/          (leaf)
      Beta/
        api/
          src/
        web/
      .hidden/
      notes.txt
    """
    root = tmp_path / "home" / "Developer"
    (root / "alpha").mkdir(parents=True)
    (root / "Beta" / "api" / "src").mkdir(parents=True)
    (root / "Beta" / "web").mkdir(parents=True)
    (root / ".hidden").mkdir()
    (root / "notes.txt").write_text("not a project")
    return root


@pytest.fixture()
def fake_config(projects_root: Path) -> ResolvedConfig:
    return ResolvedConfig(home=projects_root.parent, projects_root=projects_root)
