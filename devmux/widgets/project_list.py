from pathlib import Path

from rich.text import Text
from textual.widgets import Static

from devmux.constants import EMPTY_LISTING_PLACEHOLDER
from devmux.models import NavigationState
from devmux.services.directories import shorten_path

SEPARATOR = "─" * 37
TREE_LEGEND = "[↑↓/jk] move  [Space/→] open  [Enter] tmux  [←/BS] back  [q] quit"
FLAT_LEGEND = "[↑↓/jk] move  [Enter] tmux  [q] quit"

HEADER_STYLE = "cyan"
LEGEND_STYLE = "dim"
SELECTED_STYLE = "green"


def render_frame(state: NavigationState, home: Path | None = None) -> Text:
    """Build one frame: header, separator, legend, blank line, then the entries."""
    legend = TREE_LEGEND if state.nested else FLAT_LEGEND
    lines = [
        Text(f" {shorten_path(state.current_path, home)}", style=HEADER_STYLE),
        Text(f" {SEPARATOR}"),
        Text(f" {legend}", style=LEGEND_STYLE),
        Text(""),
    ]
    if not state.listing:
        lines.append(Text(f"   {EMPTY_LISTING_PLACEHOLDER}", style=LEGEND_STYLE))
    for i, name in enumerate(state.listing):
        if i == state.selected_index:
            lines.append(Text(f" ❯ {name}/", style=SELECTED_STYLE))
        else:
            lines.append(Text(f"   {name}/"))
    return Text("\n").join(lines)


class ProjectList(Static):
    """Shows the current directory listing with the selected entry highlighted."""

    DEFAULT_CSS = """
    ProjectList {
        width: 1fr;
        height: 1fr;
        padding: 0;
    }
    """

    def __init__(self, home: Path | None = None) -> None:
        super().__init__("", id="project-list")
        self._home = home

    def show_state(self, state: NavigationState) -> None:
        self.update(render_frame(state, self._home))
