"""Tests for the centralized logger helpers (utils/logger.py)."""

from __future__ import annotations

import logging

import pytest

from infra_creator.utils.logger import (
    PACKAGE_LOGGER,
    get_logger,
    resolve_level,
    setup_logging,
)


class TestResolveLevel:
    @pytest.mark.parametrize(
        ("name", "level"),
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), (" error ", logging.ERROR)],
    )
    def test_known_names(self, name: str, level: int) -> None:
        assert resolve_level(name) == level

    @pytest.mark.parametrize("name", ["", None, "LOUD"])
    def test_unknown_falls_back_to_warning(self, name: str | None) -> None:
        assert resolve_level(name) == logging.WARNING


class TestSetupLogging:
    def test_configures_package_logger_once(self) -> None:
        first = setup_logging("INFO")
        second = setup_logging("DEBUG")
        assert first is second
        assert first.name == PACKAGE_LOGGER
        assert first.level == logging.DEBUG
        assert len(first.handlers) == 1

    def test_module_loggers_inherit(self, caplog: pytest.LogCaptureFixture) -> None:
        setup_logging("DEBUG")
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            get_logger("infra_creator.cli.navigator").debug("hello")
        assert "hello" in caplog.text

    def test_root_logger_untouched(self) -> None:
        before = list(logging.getLogger().handlers)
        setup_logging("INFO")
        assert logging.getLogger().handlers == before
