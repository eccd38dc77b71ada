"""infra-creator — interactive Azure infrastructure menu.

A questionary/Rich terminal menu with a strict layered architecture.
Provisioning and settings persistence are placeholder adapters.
"""

from infra_creator.version import __version__

__all__: list[str] = ["__version__"]
