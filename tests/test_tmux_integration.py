"""Integration tests for the detached launch steps using a real tmux server.

Attach needs a real terminal, so only has-session, new-session and
split-window are exercised here.
"""

import shutil

import libtmux
import pytest

from devmux.services.tmux import (
    LaunchError,
    LaunchStep,
    create_session,
    session_exists,
    split_window,
    tmux_session_name,
)

pytestmark = pytest.mark.skipif(shutil.which("tmux") is None, reason="tmux not installed")

SESSION_NAME = "devmux-test-integration"


@pytest.fixture
def session_name():
    """Yield a session name and kill the session afterwards if it was created."""
    yield SESSION_NAME

    server = libtmux.Server()
    try:
        server.sessions.get(session_name=SESSION_NAME).kill()
    except Exception:
        pass


def test_missing_session_does_not_exist():
    assert session_exists("devmux-nonexistent-session-12345") is False


def test_create_and_split(session_name, tmp_path):
    create_session(session_name, tmp_path)
    assert session_exists(session_name) is True

    split_window(session_name, tmp_path)

    session = libtmux.Server().sessions.get(session_name=session_name)
    panes = session.active_window.panes
    assert len(panes) == 2


def test_create_duplicate_fails(session_name, tmp_path):
    create_session(session_name, tmp_path)

    with pytest.raises(LaunchError) as excinfo:
        create_session(session_name, tmp_path)

    assert excinfo.value.step is LaunchStep.CREATE


@pytest.fixture
def dotted_session_name():
    name = tmux_session_name("devmux-test.dotted")
    yield name

    try:
        libtmux.Server().sessions.get(session_name=name).kill()
    except Exception:
        pass


def test_dotted_name_matches_tmux_rewrite(dotted_session_name, tmp_path):
    create_session(dotted_session_name, tmp_path)
    split_window(dotted_session_name, tmp_path)

    session = libtmux.Server().sessions.get(session_name=dotted_session_name)
    assert session.session_name == "devmux-test_dotted"
    assert len(session.active_window.panes) == 2
