"""CLI console helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
bootstrap paths (``--help``, ``--version``) keep working even when Rich
is not installed.  Menu output goes to stdout; the error boundary
writes to stderr.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from infra_creator.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z0-9 #._-]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console targeting stdout, or stderr when asked.

    Emoji shortcodes are left alone so user-entered values such as
    ``sub:fire:prod`` are printed as typed.
    """
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False, emoji=False)


def escape_markup(text: str) -> str:
    """Escape user-supplied *text* so Rich prints square brackets literally."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


def strip_markup(text: str) -> str:
    """Remove Rich style tags such as ``[bold red]`` from *text*."""
    return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool = False) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            stream = sys.stderr if self._stderr else sys.stdout
            plain = [strip_markup(o) if isinstance(o, str) else o for o in objects]
            print(*plain, file=stream)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
