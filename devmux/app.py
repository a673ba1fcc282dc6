import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding

from devmux.models import Lister, NavigationState, Outcome
from devmux.services.directories import list_directories
from devmux.services.navigation import KEYMAP, Transition, apply_transition
from devmux.widgets.project_list import ProjectList

logger = logging.getLogger(__name__)


def _transition_bindings() -> list[Binding]:
    return [
        Binding(",".join(keys), f"transition('{transition.value}')", transition.value, show=False, priority=True)
        for transition, keys in KEYMAP.items()
    ]


class BrowserApp(App[Outcome]):
    """Project picker. Exits with Selected or Cancelled.

    Textual owns the terminal while the app runs (alternate screen, hidden
    cursor, raw input) and restores it before ``run()`` returns, including
    when a handler raises.
    """

    TITLE = "devmux"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = _transition_bindings()

    def __init__(self, state: NavigationState, home: Path | None = None, lister: Lister = list_directories) -> None:
        super().__init__()
        self.state = state
        self._home = home
        self._lister = lister

    def compose(self) -> ComposeResult:
        yield ProjectList(home=self._home)

    def on_mount(self) -> None:
        self._render_state()

    def _render_state(self) -> None:
        self.query_one(ProjectList).show_state(self.state)

    def action_transition(self, name: str) -> None:
        outcome = apply_transition(self.state, Transition(name), self._lister)
        if outcome is not None:
            logger.debug("Browser finished", extra={"outcome": outcome.kind})
            self.exit(outcome)
            return
        self._render_state()
