"""Tests for the questionary prompt helpers (cli/prompts.py).

questionary is replaced by the scripted fake from conftest, or by a
``MagicMock`` where only call arguments matter.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from infra_creator.cli.prompts import ask_text, select
from infra_creator.core.settings_rules import validate_subscription_id
from infra_creator.exceptions import InputClosedError

Installer = Callable[..., Any]


class TestSelect:
    def test_returns_chosen_value(self, scripted_prompts: Installer) -> None:
        scripted_prompts("storage")
        result = select("Pick one", [("Virtual Machine", "vm"), ("Storage Account", "storage")])
        assert result == "storage"

    def test_choices_carry_titles_and_values(self, scripted_prompts: Installer) -> None:
        fake = scripted_prompts("vm")
        select("Pick one", [("Virtual Machine", "vm"), ("Back", "back")])
        _, message, kwargs = fake.calls[0]
        assert message == "Pick one"
        assert [(c.title, c.value) for c in kwargs["choices"]] == [
            ("Virtual Machine", "vm"),
            ("Back", "back"),
        ]
        assert kwargs["use_arrow_keys"] is True

    def test_cancel_raises_input_closed(self, scripted_prompts: Installer) -> None:
        scripted_prompts(None)
        with pytest.raises(InputClosedError, match="cancelled"):
            select("Pick one", [("A", "a")])

    def test_eof_raises_input_closed(self, scripted_prompts: Installer) -> None:
        scripted_prompts(EOFError())
        with pytest.raises(InputClosedError, match="closed"):
            select("Pick one", [("A", "a")])

    @patch("infra_creator.cli.prompts._import_questionary")
    def test_uses_questionary_select(self, mock_q: MagicMock) -> None:
        questionary_mod = MagicMock()
        questionary_mod.select.return_value.ask.return_value = "a"
        mock_q.return_value = questionary_mod

        assert select("Pick one", [("A", "a"), ("B", "b")]) == "a"
        questionary_mod.select.assert_called_once()
        assert questionary_mod.Choice.call_count == 2


class TestAskText:
    def test_returns_answer_without_validator(self, scripted_prompts: Installer) -> None:
        scripted_prompts("")
        assert ask_text("Name?") == ""

    def test_passes_default_and_validator(self, scripted_prompts: Installer) -> None:
        fake = scripted_prompts("value")
        ask_text("Name?", default="rg-infra-creator", validate=validate_subscription_id)
        _, _, kwargs = fake.calls[0]
        assert kwargs["default"] == "rg-infra-creator"
        assert kwargs["validate"] is validate_subscription_id

    def test_reprompts_until_valid(
        self, scripted_prompts: Installer, capsys: pytest.CaptureFixture[str],
    ) -> None:
        fake = scripted_prompts("", "", "sub-123")
        result = ask_text("Subscription?", validate=validate_subscription_id)
        assert result == "sub-123"
        assert len(fake.calls) == 3
        assert capsys.readouterr().out.count("Subscription ID is required") == 2

    def test_eof_while_reprompting(self, scripted_prompts: Installer) -> None:
        scripted_prompts("")
        with pytest.raises(InputClosedError):
            ask_text("Subscription?", validate=validate_subscription_id)
