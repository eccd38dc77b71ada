"""Domain models for infra-creator.

Enumerations describe the closed choice sets offered by each menu
screen.  Records are frozen dataclasses with no I/O; only
:class:`MenuState` is mutable, and only the navigation loop mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Screens and selections
# ---------------------------------------------------------------------------

class Screen(str, Enum):
    """One menu state the navigator can be in."""

    MAIN_MENU = "main_menu"
    CREATE_INFRA = "create_infra"
    VIEW_RESOURCES = "view_resources"
    SETTINGS = "settings"
    EXIT = "exit"


class MainAction(str, Enum):
    """Choices offered by the main menu."""

    CREATE = "create"
    VIEW = "view"
    SETTINGS = "settings"
    EXIT = "exit"

    @property
    def label(self) -> str:
        return _MAIN_ACTION_LABELS[self]


_MAIN_ACTION_LABELS: dict[MainAction, str] = {
    MainAction.CREATE: "Create new infrastructure",
    MainAction.VIEW: "View existing resources",
    MainAction.SETTINGS: "Configure settings",
    MainAction.EXIT: "Exit",
}


class ResourceType(str, Enum):
    """Infrastructure kinds offered by the create menu."""

    VM = "vm"
    STORAGE = "storage"
    DATABASE = "database"
    NETWORK = "network"
    WEBAPP = "webapp"

    @property
    def label(self) -> str:
        return _RESOURCE_TYPE_LABELS[self]


_RESOURCE_TYPE_LABELS: dict[ResourceType, str] = {
    ResourceType.VM: "Virtual Machine",
    ResourceType.STORAGE: "Storage Account",
    ResourceType.DATABASE: "Database",
    ResourceType.NETWORK: "Network Resources",
    ResourceType.WEBAPP: "Web App / App Service",
}

BACK: str = "back"
"""Create-menu choice value that returns to the main menu."""


class Region(str, Enum):
    """Azure regions offered as the default region, in display order."""

    EASTUS = "eastus"
    WESTUS = "westus"
    NORTHEUROPE = "northeurope"
    WESTEUROPE = "westeurope"
    SOUTHEASTASIA = "southeastasia"
    EASTASIA = "eastasia"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SettingsDraft:
    """User-entered configuration collected by the settings screen.

    Transient: it lives only while the settings screen is active and is
    never written to durable storage.
    """

    subscription_id: str
    """Azure subscription identifier.  Never empty."""

    resource_group: str
    """Default resource group name."""

    region: Region
    """Default Azure region."""


@dataclass(frozen=True, slots=True)
class ProvisionResult:
    """Outcome of a successful provisioning request."""

    resource_type: ResourceType
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class MenuState:
    """The navigator's single piece of mutable state."""

    active_screen: Screen = Screen.MAIN_MENU
    settings_draft: SettingsDraft | None = None

    @property
    def finished(self) -> bool:
        return self.active_screen is Screen.EXIT
