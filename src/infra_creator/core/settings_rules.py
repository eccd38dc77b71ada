"""Validation and defaulting rules for the settings screen.

Pure functions only.  The prompt layer calls :func:`validate_subscription_id`
to decide whether to reprompt, and :func:`build_settings_draft` to turn
raw answers into a :class:`~infra_creator.core.models.SettingsDraft`.
"""

from __future__ import annotations

from infra_creator.core.models import Region, SettingsDraft
from infra_creator.exceptions import InvalidSelectionError, SettingsValidationError

DEFAULT_RESOURCE_GROUP: str = "rg-infra-creator"

SUBSCRIPTION_ID_REQUIRED: str = "Subscription ID is required"


def validate_subscription_id(value: str | None) -> bool | str:
    """Return ``True`` for a usable id, else the inline error message.

    The ``bool | str`` return shape is what questionary's ``validate``
    hook expects.  Whitespace-only input counts as empty.
    """
    if value is None or not value.strip():
        return SUBSCRIPTION_ID_REQUIRED
    return True


def resolve_resource_group(
    value: str | None,
    default: str = DEFAULT_RESOURCE_GROUP,
) -> str:
    """Return the stripped resource group, or *default* when blank."""
    if value is None or not value.strip():
        return default
    return value.strip()


def parse_region(value: str | Region) -> Region:
    try:
        return Region(value)
    except ValueError as exc:
        raise InvalidSelectionError(f"Unknown region: {value!r}") from exc


def build_settings_draft(
    subscription_id: str,
    resource_group: str | None,
    region: str | Region,
    *,
    default_resource_group: str = DEFAULT_RESOURCE_GROUP,
) -> SettingsDraft:
    """Validate raw answers and assemble a :class:`SettingsDraft`.

    Raises
    ------
    SettingsValidationError
        If *subscription_id* is empty.
    InvalidSelectionError
        If *region* is not one of the offered regions.
    """
    verdict = validate_subscription_id(subscription_id)
    if verdict is not True:
        raise SettingsValidationError(str(verdict))
    return SettingsDraft(
        subscription_id=subscription_id.strip(),
        resource_group=resolve_resource_group(resource_group, default_resource_group),
        region=parse_region(region),
    )
