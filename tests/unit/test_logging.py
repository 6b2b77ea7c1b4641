"""
Тесты для настройки логирования
"""

import logging

import pytest

from nelsc.infrastructure.logging import get_logger, setup_logging


class TestSetupLogging:
    """Тесты setup_logging / get_logger"""

    def test_level_case_insensitive(self) -> None:
        setup_logging("info")
        assert logging.getLogger().level == logging.INFO

    def test_repeated_setup_replaces_handler(self) -> None:
        setup_logging("DEBUG")
        setup_logging("WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len([h for h in root.handlers if isinstance(h, logging.StreamHandler)]) >= 1

    def test_custom_format(self) -> None:
        setup_logging("ERROR", "%(levelname)s %(message)s")
        formatters = [h.formatter for h in logging.getLogger().handlers if h.formatter]
        assert any(f._fmt == "%(levelname)s %(message)s" for f in formatters)

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown logging level"):
            setup_logging("CHATTY")

    def test_get_logger(self) -> None:
        assert get_logger("nelsc.reports.day_info").name == "nelsc.reports.day_info"
