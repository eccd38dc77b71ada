"""Infrastructure layer — adapters for the reserved extension points.

Neither adapter talks to Azure or the filesystem yet; they satisfy the
core protocols so the navigator can be wired end to end.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from infra_creator.infra.ephemeral_settings_store import EphemeralSettingsStore
from infra_creator.infra.placeholder_provisioner import PlaceholderProvisioner

__all__: list[str] = [
    "EphemeralSettingsStore",
    "PlaceholderProvisioner",
]
