"""Interactive menu navigator — the read / dispatch / render loop.

Screens are wired through a data-driven table mapping each
:class:`~infra_creator.core.models.Screen` to its handler method.
Transitions are delegated to :mod:`infra_creator.core.navigation`; this
module only prompts, renders, and calls the extension-point adapters.

End-of-input or a cancelled prompt on any screen is an implicit
``exit``: the farewell banner is printed once and the loop stops.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from infra_creator.cli import exit_codes, prompts
from infra_creator.cli.console import console, escape_markup
from infra_creator.core.models import (
    BACK,
    MainAction,
    MenuState,
    Region,
    ResourceType,
    Screen,
)
from infra_creator.core.navigation import RETURNING_SCREENS, advance, screen_for
from infra_creator.core.protocols import ProvisioningBackend, SettingsStore
from infra_creator.core.settings_rules import (
    DEFAULT_RESOURCE_GROUP,
    build_settings_draft,
    validate_subscription_id,
)
from infra_creator.exceptions import (
    InputClosedError,
    InvalidSelectionError,
    ProvisioningNotImplementedError,
)
from infra_creator.utils.logger import get_logger

logger = get_logger(__name__)

HEADER_LINES: tuple[str, ...] = (
    "╔═══════════════════════════════════╗",
    "║   Azure Infrastructure Creator    ║",
    "║   Secure. Simple. Best Practices. ║",
    "╚═══════════════════════════════════╝",
)

FAREWELL_LINES: tuple[str, ...] = (
    "╔═══════════════════════════════════╗",
    "║         Until next time!          ║",
    "╚═══════════════════════════════════╝",
)

MAIN_MENU_PROMPT = "What would you like to do?"
CREATE_MENU_PROMPT = "What type of infrastructure do you want to create?"
SUBSCRIPTION_PROMPT = "Enter your Azure Subscription ID:"
RESOURCE_GROUP_PROMPT = "Enter default Resource Group name:"
REGION_PROMPT = "Select default Azure region:"


class MenuNavigator:
    """Drives the interactive menu until the user exits.

    Parameters
    ----------
    provisioner:
        Backend consulted for every "create infrastructure" request.
    settings_store:
        Receives each confirmed settings draft.
    default_resource_group:
        Used when the resource group prompt is left blank.
    """

    def __init__(
        self,
        provisioner: ProvisioningBackend,
        settings_store: SettingsStore,
        *,
        default_resource_group: str = DEFAULT_RESOURCE_GROUP,
    ) -> None:
        self.state = MenuState()
        self._provisioner = provisioner
        self._settings_store = settings_store
        self._default_resource_group = default_resource_group
        self._said_goodbye = False
        self._handlers: dict[Screen, Callable[[], None]] = {
            Screen.CREATE_INFRA: self.show_create_infra_menu,
            Screen.VIEW_RESOURCES: self.show_view_resources,
            Screen.SETTINGS: self.show_settings_menu,
            Screen.EXIT: self.exit,
        }

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Print the header and loop until the ``EXIT`` screen is reached."""
        self._print_header()
        while not self.state.finished:
            try:
                selection = self.show_main_menu()
            except InputClosedError:
                logger.debug("Input closed on main menu; exiting")
                selection = MainAction.EXIT
            self.dispatch(selection)
        return exit_codes.SUCCESS

    def show_main_menu(self) -> MainAction:
        choice = prompts.select(
            MAIN_MENU_PROMPT,
            [(action.label, action.value) for action in MainAction],
        )
        try:
            return MainAction(choice)
        except ValueError as exc:
            raise InvalidSelectionError(
                f"Unrecognised main-menu selection: {choice!r}",
            ) from exc

    def dispatch(self, selection: MainAction) -> None:
        """Route *selection* to its screen handler and return to the main menu.

        Raises
        ------
        InvalidSelectionError
            If *selection* has no screen or the screen has no handler.
        """
        screen = screen_for(selection)
        handler = self._handlers.get(screen)
        if handler is None:
            raise InvalidSelectionError(f"No handler registered for {screen.value!r}.")

        advance(self.state, selection)
        logger.debug("Entered screen %s", self.state.active_screen.value)
        try:
            handler()
        except InputClosedError:
            logger.debug("Input closed on %s; exiting", screen.value)
            self.exit()
            return

        if self.state.active_screen in RETURNING_SCREENS:
            advance(self.state)
            logger.debug("Returned to %s", self.state.active_screen.value)

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def show_create_infra_menu(self) -> None:
        choices = [(rt.label, rt.value) for rt in ResourceType]
        choices.append(("Back", BACK))
        choice = prompts.select(CREATE_MENU_PROMPT, choices)
        if choice == BACK:
            return

        try:
            resource_type = ResourceType(choice)
        except ValueError as exc:
            raise InvalidSelectionError(f"Unknown resource type: {choice!r}") from exc

        try:
            result = self._provisioner.provision(
                resource_type,
                self._provision_parameters(),
            )
        except ProvisioningNotImplementedError as exc:
            console.print(f"\n[yellow]{exc}[/yellow]")
            if exc.hint:
                console.print(f"[dim]{exc.hint}[/dim]\n")
            return

        console.print(
            f"\n[bold green]{result.resource_type.label} created.[/bold green]\n",
        )

    def show_view_resources(self) -> None:
        console.print("\n[yellow]Resource viewing not yet implemented.[/yellow]")
        console.print("[dim]This will list all provisioned Azure resources.[/dim]\n")

    def show_settings_menu(self) -> None:
        subscription_id = prompts.ask_text(
            SUBSCRIPTION_PROMPT,
            validate=validate_subscription_id,
        )
        resource_group = prompts.ask_text(
            RESOURCE_GROUP_PROMPT,
            default=self._default_resource_group,
        )
        region = prompts.select(
            REGION_PROMPT,
            [(region.value, region.value) for region in Region],
        )

        draft = build_settings_draft(
            subscription_id,
            resource_group,
            region,
            default_resource_group=self._default_resource_group,
        )
        self.state.settings_draft = draft
        self._settings_store.save_settings(draft)

        console.print(
            "\n[green]Settings saved (local storage not yet implemented)[/green]",
        )
        console.print(f"[dim]Subscription: {escape_markup(draft.subscription_id)}[/dim]")
        console.print(f"[dim]Resource Group: {escape_markup(draft.resource_group)}[/dim]")
        console.print(f"[dim]Region: {draft.region.value}[/dim]\n")

    def exit(self) -> None:
        """Print the farewell banner once and mark the loop finished."""
        self.state.active_screen = Screen.EXIT
        self.state.settings_draft = None
        if self._said_goodbye:
            return
        self._said_goodbye = True
        console.print()
        for line in FAREWELL_LINES:
            console.print(f"[blue]{line}[/blue]")
        console.print()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _print_header(self) -> None:
        console.print()
        for line in HEADER_LINES:
            console.print(f"[bold blue]{line}[/bold blue]")
        console.print()

    def _provision_parameters(self) -> dict[str, Any]:
        """Build provisioning parameters from the last saved settings, if any."""
        saved = self._settings_store.load_settings()
        if saved is None:
            return {}
        return {
            "subscription_id": saved.subscription_id,
            "resource_group": saved.resource_group,
            "region": saved.region.value,
        }
