"""로깅 설정 테스트"""

import logging

from src.core.logging import get_logger, resolve_level


class TestResolveLevel:
    def test_known_levels(self):
        assert resolve_level("DEBUG") == logging.DEBUG
        assert resolve_level("warning") == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert resolve_level("chatty") == logging.INFO


def test_get_logger_uses_module_name():
    assert get_logger("src.core.engine").name == "src.core.engine"
