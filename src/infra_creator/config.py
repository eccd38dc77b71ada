"""Runtime configuration for the infra-creator tool itself.

Values come from environment variables, after an optional ``.env`` file
in the working directory has been loaded with python-dotenv.  These are
settings for the tool, not the Azure settings collected interactively;
the latter are never persisted.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from infra_creator.core.settings_rules import DEFAULT_RESOURCE_GROUP
from infra_creator.utils.logger import DEFAULT_LEVEL

ENV_LOG_LEVEL: str = "INFRA_CREATOR_LOG_LEVEL"
ENV_DEFAULT_RESOURCE_GROUP: str = "INFRA_CREATOR_DEFAULT_RESOURCE_GROUP"


@dataclass(frozen=True, slots=True)
class AppConfig:
    log_level: str = DEFAULT_LEVEL
    """Logging level name for the ``infra_creator`` logger."""

    default_resource_group: str = DEFAULT_RESOURCE_GROUP
    """Value used when the resource group prompt is left blank."""


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    load_env_file: bool = True,
) -> AppConfig:
    """Build an :class:`AppConfig` from *environ* (default ``os.environ``).

    Blank variables are treated as unset.
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    env = os.environ if environ is None else environ

    log_level = env.get(ENV_LOG_LEVEL, "").strip().upper() or DEFAULT_LEVEL
    resource_group = (
        env.get(ENV_DEFAULT_RESOURCE_GROUP, "").strip() or DEFAULT_RESOURCE_GROUP
    )
    return AppConfig(log_level=log_level, default_resource_group=resource_group)
