"""Menu state machine — pure transition rules.

States are :class:`~infra_creator.core.models.Screen` values.  The main
menu fans out to one screen per :class:`MainAction`; every sub-screen
returns to the main menu unconditionally once handled; ``EXIT`` is
terminal.

Guarantees
----------
* No I/O, no prompts, no rendering.
* Unknown selections raise :class:`InvalidSelectionError`; they are
  never mapped to a default screen.
"""

from __future__ import annotations

from infra_creator.core.models import MainAction, MenuState, Screen
from infra_creator.exceptions import InvalidSelectionError

ACTION_SCREENS: dict[MainAction, Screen] = {
    MainAction.CREATE: Screen.CREATE_INFRA,
    MainAction.VIEW: Screen.VIEW_RESOURCES,
    MainAction.SETTINGS: Screen.SETTINGS,
    MainAction.EXIT: Screen.EXIT,
}

RETURNING_SCREENS: frozenset[Screen] = frozenset(
    {Screen.CREATE_INFRA, Screen.VIEW_RESOURCES, Screen.SETTINGS},
)


def screen_for(selection: MainAction) -> Screen:
    """Return the screen a main-menu *selection* leads to."""
    try:
        return ACTION_SCREENS[MainAction(selection)]
    except (KeyError, ValueError) as exc:
        raise InvalidSelectionError(
            f"Unrecognised main-menu selection: {selection!r}",
        ) from exc


def next_screen(current: Screen, selection: MainAction | None = None) -> Screen:
    """Compute the screen that follows *current*.

    *selection* is required on the main menu and ignored elsewhere.

    Raises
    ------
    InvalidSelectionError
        If the main menu is left without a selection, or a transition
        is requested out of the terminal ``EXIT`` screen.
    """
    if current is Screen.MAIN_MENU:
        if selection is None:
            raise InvalidSelectionError("The main menu requires a selection.")
        return screen_for(selection)
    if current in RETURNING_SCREENS:
        return Screen.MAIN_MENU
    raise InvalidSelectionError(f"No transition out of {current.value!r}.")


def advance(state: MenuState, selection: MainAction | None = None) -> MenuState:
    """Move *state* to its next screen in place and return it.

    The settings draft only survives while the settings screen is active.
    """
    state.active_screen = next_screen(state.active_screen, selection)
    if state.active_screen is not Screen.SETTINGS:
        state.settings_draft = None
    return state
