# tests/test_logging.py
"""Tests for session-aware logging setup."""

import logging


class TestSetupLogging:

    def test_console_only_by_default(self):
        from cactus_core_api.utils.logging import get_current_log_file, setup_logging

        assert setup_logging(console_output=False) is None
        assert get_current_log_file() is None

    def test_session_log_file_and_symlink(self, tmp_path):
        from cactus_core_api.utils.logging import SYMLINK_NAME, get_session_id, setup_logging

        log_file = setup_logging(log_dir=tmp_path, console_output=False)
        session_id = get_session_id()
        assert log_file.parent == tmp_path
        assert log_file.name.startswith("cactus_core_api_")
        assert log_file.name.endswith(f"_{session_id}.log")
        assert len(session_id) == 6
        link = tmp_path / SYMLINK_NAME
        if link.is_symlink():
            assert link.resolve() == log_file.resolve()

    def test_log_dir_from_config(self, tmp_path, monkeypatch):
        from cactus_core_api.utils.logging import setup_logging

        monkeypatch.setenv("CACTUS_CORE_API_LOG_DIR", str(tmp_path / "cfg-logs"))
        log_file = setup_logging(console_output=False)
        assert log_file.parent == tmp_path / "cfg-logs"

    def test_records_carry_session_id(self, tmp_path):
        from cactus_core_api.utils.logging import get_logger, get_session_id, setup_logging

        log_file = setup_logging(level="DEBUG", log_dir=tmp_path, console_output=False)
        get_logger("tests.logging").warning("hello")
        content = log_file.read_text(encoding="utf-8")
        assert f"| {get_session_id()} | cactus_core_api.tests.logging:" in content
        assert "hello" in content

    def test_level_applied(self, tmp_path):
        from cactus_core_api.utils.logging import ROOT_LOGGER_NAME, setup_logging

        setup_logging(level="warning", log_dir=tmp_path, console_output=False)
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        from cactus_core_api.utils.logging import ROOT_LOGGER_NAME, setup_logging

        setup_logging(log_dir=tmp_path)
        setup_logging(log_dir=tmp_path)
        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert len(root.handlers) == 2
        assert len(root.filters) == 1
        assert root.propagate is False


class TestGetLogger:

    def test_namespacing(self):
        from cactus_core_api.utils.logging import get_logger

        assert get_logger("cactus_core_api.export").name == "cactus_core_api.export"
        assert get_logger("other").name == "cactus_core_api.other"

    def test_lazy_initialisation(self):
        from cactus_core_api.utils.logging import get_logger, get_session_id

        get_logger("lazy")
        assert get_session_id() is not None
