"""Infrastructure: in-process settings store.

Holds the most recent :class:`~infra_creator.core.models.SettingsDraft`
in memory only.  Nothing is written to disk, so every new process
starts with no saved settings.
"""

from __future__ import annotations

from infra_creator.core.models import SettingsDraft
from infra_creator.utils.logger import get_logger

logger = get_logger(__name__)


class EphemeralSettingsStore:
    """Settings store whose contents are discarded at process exit."""

    def __init__(self) -> None:
        self._draft: SettingsDraft | None = None

    def save_settings(self, draft: SettingsDraft) -> None:
        logger.debug("Holding settings draft in memory (not persisted)")
        self._draft = draft

    def load_settings(self) -> SettingsDraft | None:
        return self._draft
