import logging
import re
import subprocess
from collections.abc import Callable
from enum import Enum
from pathlib import Path

import libtmux
from libtmux import exc
from libtmux.common import tmux_cmd

from devmux.constants import TMUX_BIN

logger = logging.getLogger(__name__)

# libtmux.Server() is cheap, but reuse one instance for the whole launch sequence.
_server: libtmux.Server | None = None

# Characters tmux replaces with "_" in session names.
_TMUX_NAME_RE = re.compile(r"[.:]")


def _get_server() -> libtmux.Server:
    global _server
    if _server is None:
        _server = libtmux.Server()
    return _server


class LaunchStep(Enum):
    CHECK = "check"
    ATTACH = "attach"
    CREATE = "create"
    SPLIT = "split"


class LaunchError(Exception):
    """Raised when a tmux invocation in the launch sequence fails."""

    def __init__(self, step: LaunchStep, reason: str) -> None:
        self.step = step
        self.reason = reason
        super().__init__(f"tmux {step.value} failed: {reason}")


def _run_detached(step: LaunchStep, *args: str) -> tmux_cmd:
    """Run a tmux command without a TTY. Only a failure to invoke tmux raises."""
    try:
        proc = _get_server().cmd(*args)
    except (exc.LibTmuxException, OSError) as e:
        raise LaunchError(step, str(e) or type(e).__name__) from e
    logger.debug("tmux command finished", extra={"tmux_args": args, "returncode": proc.returncode})
    return proc


def _check_detached(step: LaunchStep, *args: str) -> None:
    proc = _run_detached(step, *args)
    if proc.returncode != 0:
        stderr = "\n".join(proc.stderr).strip()
        raise LaunchError(step, stderr or f"exited with status {proc.returncode}")


def session_exists(session_name: str) -> bool:
    """Check whether a tmux session exists. Non-zero exit means it does not."""
    return _run_detached(LaunchStep.CHECK, "has-session", "-t", session_name).returncode == 0


def create_session(session_name: str, path: Path | str) -> None:
    """Create a detached tmux session rooted at ``path``."""
    _check_detached(LaunchStep.CREATE, "new-session", "-d", "-s", session_name, "-c", str(path))


def split_window(session_name: str, path: Path | str) -> None:
    """Split the session's window into two side-by-side panes rooted at ``path``."""
    _check_detached(LaunchStep.SPLIT, "split-window", "-h", "-t", session_name, "-c", str(path))


def attach_session(session_name: str) -> None:
    """Attach the current terminal to a tmux session. Blocks until detach."""
    # Needs the real TTY, so this bypasses libtmux (which captures output).
    try:
        result = subprocess.run([TMUX_BIN, "attach-session", "-t", session_name])
    except OSError as e:
        raise LaunchError(LaunchStep.ATTACH, str(e)) from e
    if result.returncode != 0:
        raise LaunchError(LaunchStep.ATTACH, f"exited with status {result.returncode}")


def tmux_session_name(identifier: str) -> str:
    """Normalise a project identifier into the name tmux will actually use.

    tmux rewrites ``.`` and ``:`` to ``_`` when creating a session, so the
    same rewrite is applied up front to keep every later ``-t`` target valid.
    """
    return _TMUX_NAME_RE.sub("_", identifier.lower())


def launch(identifier: str, path: Path | str, notify: Callable[[str], None] | None = None) -> None:
    """Attach to the session named after ``identifier``, creating it first if needed.

    A new session is created detached at ``path``, split into two panes, then
    attached. The first failing step raises LaunchError and later steps are
    skipped. An existing session is attached as-is and ``path`` is ignored.
    ``notify`` receives a user-facing notice before an existing session is attached.
    """
    name = tmux_session_name(identifier)
    if session_exists(name):
        logger.info("Attaching to existing tmux session", extra={"session": name})
        if notify is not None:
            notify(f"Session '{name}' already exists, attaching...")
        attach_session(name)
        return

    logger.info("Creating tmux session", extra={"session": name, "path": str(path)})
    create_session(name, path)
    split_window(name, path)
    attach_session(name)
