import logging
from pathlib import Path

from devmux.constants import DEFAULT_SESSION_NAME

logger = logging.getLogger(__name__)


def _is_utf8(name: str) -> bool:
    # Undecodable bytes come back from the filesystem as lone surrogates.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def list_directories(path: Path | str) -> list[str]:
    """Return sorted names of the visible subdirectories of ``path``.

    Hidden entries (leading ``.``), names that are not valid UTF-8 and
    non-directories are skipped. Unreadable
    paths yield an empty list rather than an error.
    """
    names: list[str] = []
    try:
        for entry in Path(path).iterdir():
            if entry.name.startswith(".") or not _is_utf8(entry.name):
                continue
            try:
                if entry.is_dir():
                    names.append(entry.name)
            except OSError:
                logger.debug("Failed to stat directory entry", extra={"path": str(entry)})
    except OSError:
        logger.debug("Failed to list directory", extra={"path": str(path)}, exc_info=True)
        return []
    # Codepoint order, not locale order: "Beta" sorts before "alpha".
    return sorted(names)


def shorten_path(path: Path | str, home: Path | str | None) -> str:
    """Abbreviate the home directory prefix of ``path`` to ``~``."""
    path = Path(path)
    if home is None:
        return str(path)
    try:
        relative = path.relative_to(home)
    except ValueError:
        return str(path)
    if relative == Path("."):
        return "~"
    return f"~/{relative.as_posix()}"


def session_name_for(path: Path | str) -> str:
    """tmux session key for a project: its directory name, lower-cased."""
    name = Path(path).name
    return (name or DEFAULT_SESSION_NAME).lower()
