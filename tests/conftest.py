"""Shared pytest fixtures and configuration for the infra-creator test suite.

Guidelines
----------
* No test touches a real terminal; questionary is replaced at the
  ``_import_questionary`` seam by a scripted fake.
* A script that runs out of answers behaves like end-of-input.
* Tests must not depend on the caller's environment variables.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from infra_creator.config import ENV_DEFAULT_RESOURCE_GROUP, ENV_LOG_LEVEL
from infra_creator.utils.logger import PACKAGE_LOGGER


class ScriptedQuestion:
    """Question object whose ``ask()`` replays one scripted answer."""

    def __init__(self, answer: Any) -> None:
        self._answer = answer

    def ask(self) -> Any:
        if isinstance(self._answer, BaseException):
            raise self._answer
        return self._answer


class ScriptedQuestionary:
    """Minimal stand-in for the ``questionary`` module.

    Each ``select``/``text`` call consumes the next scripted answer.
    Exception instances in the script are raised from ``ask()``.
    """

    class Choice:
        def __init__(self, title: str, value: str) -> None:
            self.title = title
            self.value = value

    def __init__(self, answers: tuple[Any, ...]) -> None:
        self.answers: list[Any] = list(answers)
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def _next(self, kind: str, message: str, kwargs: dict[str, Any]) -> ScriptedQuestion:
        self.calls.append((kind, message, kwargs))
        if not self.answers:
            return ScriptedQuestion(EOFError())
        return ScriptedQuestion(self.answers.pop(0))

    def select(self, message: str, **kwargs: Any) -> ScriptedQuestion:
        return self._next("select", message, kwargs)

    def text(self, message: str, **kwargs: Any) -> ScriptedQuestion:
        return self._next("text", message, kwargs)

    def messages(self) -> list[str]:
        return [message for _, message, _ in self.calls]


@pytest.fixture
def scripted_prompts(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[..., ScriptedQuestionary]:
    """Install a :class:`ScriptedQuestionary` answering with the given values."""

    def _install(*answers: Any) -> ScriptedQuestionary:
        fake = ScriptedQuestionary(answers)
        monkeypatch.setattr(
            "infra_creator.cli.prompts._import_questionary",
            lambda: fake,
        )
        return fake

    return _install


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_DEFAULT_RESOURCE_GROUP, raising=False)
    monkeypatch.setattr("infra_creator.config.load_dotenv", lambda *_, **__: False)
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
