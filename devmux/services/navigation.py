"""Key dispatch for the browser: key names map to transitions, one function applies them."""

import logging
from enum import Enum

from devmux.models import Lister, NavigationState, Outcome
from devmux.services.directories import list_directories

logger = logging.getLogger(__name__)


class Transition(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ENTER = "enter"
    BACK = "back"
    CONFIRM = "confirm"
    CANCEL = "cancel"


# Textual key names per transition.
KEYMAP: dict[Transition, tuple[str, ...]] = {
    Transition.MOVE_DOWN: ("down", "j"),
    Transition.MOVE_UP: ("up", "k"),
    Transition.ENTER: ("space", "right"),
    Transition.BACK: ("backspace", "left"),
    Transition.CONFIRM: ("enter",),
    Transition.CANCEL: ("q", "escape"),
}

_KEY_TO_TRANSITION = {key: transition for transition, keys in KEYMAP.items() for key in keys}


def transition_for_key(key: str) -> Transition | None:
    return _KEY_TO_TRANSITION.get(key)


def apply_transition(
    state: NavigationState,
    transition: Transition,
    lister: Lister = list_directories,
) -> Outcome | None:
    """Apply ``transition`` to ``state``. Returns an outcome only for terminal transitions."""
    if transition is Transition.MOVE_UP:
        state.move_up()
    elif transition is Transition.MOVE_DOWN:
        state.move_down()
    elif transition is Transition.ENTER:
        if not state.enter(lister):
            logger.debug("Enter ignored", extra={"path": str(state.current_path), "entry": state.selected_name})
    elif transition is Transition.BACK:
        state.back(lister)
    elif transition is Transition.CONFIRM:
        return state.confirm()
    elif transition is Transition.CANCEL:
        return state.cancel()
    return None
