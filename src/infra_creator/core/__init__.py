"""Core layer — domain models, menu state machine, and settings rules.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from infra_creator.core.models import (
    BACK,
    MainAction,
    MenuState,
    ProvisionResult,
    Region,
    ResourceType,
    Screen,
    SettingsDraft,
)
from infra_creator.core.navigation import advance, next_screen, screen_for
from infra_creator.core.protocols import ProvisioningBackend, SettingsStore
from infra_creator.core.settings_rules import (
    DEFAULT_RESOURCE_GROUP,
    build_settings_draft,
    resolve_resource_group,
    validate_subscription_id,
)

__all__: list[str] = [
    "BACK",
    "DEFAULT_RESOURCE_GROUP",
    "MainAction",
    "MenuState",
    "ProvisionResult",
    "ProvisioningBackend",
    "Region",
    "ResourceType",
    "Screen",
    "SettingsDraft",
    "SettingsStore",
    "advance",
    "build_settings_draft",
    "next_screen",
    "resolve_resource_group",
    "screen_for",
    "validate_subscription_id",
]
