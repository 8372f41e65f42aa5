"""Interactive selector-driven main menu."""

from __future__ import annotations

import enum
import logging

from .app import AppContext
from .selector import SelectorError
from .services.notes import (
    EchoFunc,
    PromptFunc,
    create_note,
    delete_notes,
    search_and_open,
)

OPTION_CREATE = "Create a new note"
OPTION_SEARCH = "Search and open notes"
OPTION_DELETE = "Delete a note"
OPTION_EXIT = "Exit"
MENU_OPTIONS = (OPTION_CREATE, OPTION_SEARCH, OPTION_DELETE, OPTION_EXIT)
MENU_PROMPT = "Select an option: "
MENU_HEIGHT = 10

logger = logging.getLogger(__name__)


class MenuState(enum.Enum):
    RUNNING = "running"
    EXITING = "exiting"


def menu_step(ctx: AppContext, *, prompt: PromptFunc, echo: EchoFunc) -> MenuState:
    """Show the menu once and run the chosen action."""

    try:
        selected = ctx.selector.select(
            MENU_OPTIONS, prompt=MENU_PROMPT, height=MENU_HEIGHT
        )
    except SelectorError as exc:
        echo(f"Error displaying menu: {exc}")
        return MenuState.EXITING

    choice = selected[0] if len(selected) == 1 else ""
    logger.debug("menu choice %r", choice)

    if choice == OPTION_CREATE:
        create_note(ctx, prompt=prompt, echo=echo)
    elif choice == OPTION_SEARCH:
        search_and_open(ctx, echo=echo)
    elif choice == OPTION_DELETE:
        delete_notes(ctx, prompt=prompt, echo=echo)
    elif choice == OPTION_EXIT:
        return MenuState.EXITING
    else:
        echo("Invalid selection")
    return MenuState.RUNNING


def run_menu(ctx: AppContext, *, prompt: PromptFunc, echo: EchoFunc) -> int:
    """Loop over the menu until the user exits; always returns 0."""

    state = MenuState.RUNNING
    while state is MenuState.RUNNING:
        state = menu_step(ctx, prompt=prompt, echo=echo)
    return 0
