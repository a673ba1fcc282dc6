from collections.abc import Callable
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from devmux.services.directories import list_directories

Lister = Callable[[Path], list[str]]


class Selected(BaseModel):
    kind: Literal["selected"] = "selected"
    path: Path


class Cancelled(BaseModel):
    kind: Literal["cancelled"] = "cancelled"


Outcome = Selected | Cancelled


class NavigationState(BaseModel):
    """Cursor over the directory tree below ``root``.

    ``history`` holds the absolute paths of the ancestors of ``current_path``,
    so its length is the depth below ``root``. With ``nested=False`` the state
    never descends and ``history`` stays empty.
    """

    root: Path
    current_path: Path
    history: list[Path] = Field(default_factory=list)
    listing: list[str] = Field(default_factory=list)
    selected_index: int = 0
    nested: bool = True

    @classmethod
    def start(cls, root: Path, nested: bool = True, lister: Lister = list_directories) -> "NavigationState":
        return cls(root=root, current_path=root, listing=lister(root), nested=nested)

    @property
    def depth(self) -> int:
        return len(self.history)

    @property
    def selected_name(self) -> str | None:
        if not self.listing:
            return None
        return self.listing[self.selected_index]

    @property
    def selected_path(self) -> Path | None:
        name = self.selected_name
        if name is None:
            return None
        return self.current_path / name

    def move_up(self) -> bool:
        if not self.listing or self.selected_index == 0:
            return False
        self.selected_index -= 1
        return True

    def move_down(self) -> bool:
        if not self.listing or self.selected_index >= len(self.listing) - 1:
            return False
        self.selected_index += 1
        return True

    def enter(self, lister: Lister = list_directories) -> bool:
        """Descend into the selected entry. Entries with no subdirectories are not entered."""
        candidate = self.selected_path
        if not self.nested or candidate is None:
            return False
        child_listing = lister(candidate)
        if not child_listing:
            return False
        self.history.append(self.current_path)
        self.current_path = candidate
        self.listing = child_listing
        self.selected_index = 0
        return True

    def back(self, lister: Lister = list_directories) -> bool:
        if not self.history:
            return False
        self.current_path = self.history.pop()
        self.listing = lister(self.current_path)
        self.selected_index = 0
        return True

    def confirm(self) -> Selected | None:
        path = self.selected_path
        if path is None:
            return None
        return Selected(path=path)

    def cancel(self) -> Cancelled:
        return Cancelled()
