"""Protocols (interfaces) for the two reserved extension points.

Core and CLI code depend only on these protocols, never on concrete
adapters, so a real Azure backend or a durable settings store can be
dropped in without touching the navigator.
"""

from __future__ import annotations

from typing import Any, Protocol

from infra_creator.core.models import ProvisionResult, ResourceType, SettingsDraft


class ProvisioningBackend(Protocol):
    """Contract for infrastructure provisioning backends."""

    def provision(
        self,
        resource_type: ResourceType,
        parameters: dict[str, Any],
    ) -> ProvisionResult:
        """Create one resource of *resource_type*.

        Implementations must map all backend-specific exceptions to
        :class:`~infra_creator.exceptions.InfraCreatorError` subclasses.

        Raises
        ------
        ProvisioningNotImplementedError
            When the backend cannot provision *resource_type* yet.
        """
        ...  # pragma: no cover


class SettingsStore(Protocol):
    """Contract for settings persistence."""

    def save_settings(self, draft: SettingsDraft) -> None:
        ...  # pragma: no cover

    def load_settings(self) -> SettingsDraft | None:
        """Return the last saved draft, or ``None`` if nothing was saved."""
        ...  # pragma: no cover
