from pathlib import Path

from devmux.models import NavigationState
from devmux.widgets.project_list import (
    FLAT_LEGEND,
    HEADER_STYLE,
    SELECTED_STYLE,
    SEPARATOR,
    TREE_LEGEND,
    render_frame,
)

HOME = Path("/home/me")
ROOT = HOME / "Developer"


def _state(listing: list[str], selected: int = 0, nested: bool = True) -> NavigationState:
    return NavigationState(root=ROOT, current_path=ROOT, listing=listing, selected_index=selected, nested=nested)


def _styled_lines(frame, style: str) -> list[str]:
    plain = frame.plain
    return [plain[span.start:span.end] for span in frame.spans if str(span.style) == style]


def test_frame_layout():
    frame = render_frame(_state(["Beta", "alpha"], selected=1), HOME)

    assert frame.plain.split("\n") == [
        " ~/Developer",
        f" {SEPARATOR}",
        f" {TREE_LEGEND}",
        "",
        "   Beta/",
        " ❯ alpha/",
    ]


def test_selected_entry_is_highlighted():
    frame = render_frame(_state(["Beta", "alpha"], selected=0), HOME)

    assert _styled_lines(frame, SELECTED_STYLE) == [" ❯ Beta/"]
    assert _styled_lines(frame, HEADER_STYLE) == [" ~/Developer"]


def test_empty_listing_placeholder():
    frame = render_frame(_state([]), HOME)

    lines = frame.plain.split("\n")
    assert lines[-1] == "   (no subdirectories)"
    assert _styled_lines(frame, SELECTED_STYLE) == []


def test_flat_legend():
    frame = render_frame(_state(["a"], nested=False), HOME)

    assert frame.plain.split("\n")[2] == f" {FLAT_LEGEND}"


def test_header_outside_home():
    state = NavigationState(root=Path("/srv/dev"), current_path=Path("/srv/dev/app"), listing=["x"])

    frame = render_frame(state, HOME)

    assert frame.plain.split("\n")[0] == " /srv/dev/app"


def test_names_with_brackets_render_verbatim():
    frame = render_frame(_state(["[wip] tool"]), HOME)

    assert frame.plain.split("\n")[-1] == " ❯ [wip] tool/"
