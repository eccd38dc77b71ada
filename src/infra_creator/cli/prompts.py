"""Interactive prompt helpers for the CLI layer.

Thin wrappers over questionary that:

* Import questionary lazily, raising ``EnvironmentError`` when missing.
* Translate end-of-input (``EOFError``) and cancelled prompts (questionary
  returns ``None`` on Ctrl+C) into :class:`InputClosedError`.
* Re-check validators after each answer and reprompt on failure, so the
  loop holds even for non-interactive prompt backends.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from infra_creator.cli.console import console
from infra_creator.exceptions import EnvironmentError, InputClosedError
from infra_creator.utils.logger import get_logger

logger = get_logger(__name__)

Validator = Callable[[str], bool | str]


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _ask(question: Any) -> Any:
    """Run a questionary question, mapping EOF and cancellation."""
    try:
        answer = question.ask()
    except EOFError as exc:
        raise InputClosedError("Input stream closed.") from exc
    if answer is None:
        raise InputClosedError("Prompt cancelled.")
    return answer


def select(message: str, choices: Sequence[tuple[str, str]]) -> str:
    """Prompt for one of *choices*, given as ``(title, value)`` pairs.

    Returns
    -------
    str
        The ``value`` of the chosen entry.

    Raises
    ------
    InputClosedError
        On end-of-input or when the user cancels the prompt.
    """
    questionary = _import_questionary()
    question = questionary.select(
        message,
        choices=[questionary.Choice(title=title, value=value) for title, value in choices],
        use_arrow_keys=True,
        use_shortcuts=False,
    )
    selected = _ask(question)
    logger.debug("%s -> %s", message, selected)
    return str(selected)


def ask_text(
    message: str,
    *,
    default: str = "",
    validate: Validator | None = None,
) -> str:
    """Prompt for free text, reprompting until *validate* accepts it.

    *validate* follows questionary's convention: ``True`` when the value
    is acceptable, otherwise the error message to display.
    """
    questionary = _import_questionary()
    while True:
        answer = str(
            _ask(questionary.text(message, default=default, validate=validate)),
        )
        if validate is None:
            return answer
        verdict = validate(answer)
        if verdict is True:
            return answer
        console.print(f"[red]>> {verdict}[/red]")
