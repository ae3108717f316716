"""Tests for logging configuration and theme lookup."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from kingside.ui.bootstrap import configure_logging
from kingside.ui.styles.theme import BoardTheme


@pytest.fixture
def _restore_level() -> Iterator[None]:
    logger = logging.getLogger("kingside")
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.mark.usefixtures("_restore_level")
class TestConfigureLogging:
    def test_named_level(self) -> None:
        configure_logging("debug")
        assert logging.getLogger("kingside").level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self) -> None:
        configure_logging("chatty")
        assert logging.getLogger("kingside").level == logging.WARNING


class TestBoardTheme:
    def test_named_presets(self) -> None:
        assert BoardTheme.named("Classic") == BoardTheme.classic()
        assert BoardTheme.named("Default") == BoardTheme.default()

    def test_unknown_name_uses_default(self) -> None:
        assert BoardTheme.named("Neon") == BoardTheme.default()
