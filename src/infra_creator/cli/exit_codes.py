"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: the user chose ``exit`` or input ended."""

GENERAL_ERROR: int = 1
"""An error escaped the menu loop.  A message was written to stderr."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C outside a prompt.  POSIX convention (128 + SIGINT=2)."""
