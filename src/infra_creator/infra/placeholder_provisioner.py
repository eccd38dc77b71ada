"""Infrastructure: provisioning backend stand-in.

Every request is refused with :class:`ProvisioningNotImplementedError`
naming the requested resource type.  A real Azure SDK backend will
replace this class behind the same
:class:`~infra_creator.core.protocols.ProvisioningBackend` protocol.
"""

from __future__ import annotations

from typing import Any

from infra_creator.core.models import ProvisionResult, ResourceType
from infra_creator.exceptions import ProvisioningNotImplementedError
from infra_creator.utils.logger import get_logger

logger = get_logger(__name__)

COMING_SOON_HINT: str = "Coming soon with full Azure SDK integration!"


class PlaceholderProvisioner:
    """Provisioning backend that never provisions anything."""

    def provision(
        self,
        resource_type: ResourceType,
        parameters: dict[str, Any],
    ) -> ProvisionResult:
        logger.debug(
            "Provisioning requested for %s with %d parameter(s)",
            resource_type.value,
            len(parameters),
        )
        raise ProvisioningNotImplementedError(
            resource_type.value,
            hint=COMING_SOON_HINT,
        )
