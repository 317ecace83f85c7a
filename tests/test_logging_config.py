# =============================================================================
# tests/test_logging_config.py - Logging Setup Tests
# =============================================================================
# setup_logging touches process-wide state, so the fixture below removes
# the application's named handlers before each test and puts the root
# and uvicorn loggers back the way it found them afterwards.
# =============================================================================

import logging

import pytest

from employee_api.app.core import logging_config
from employee_api.app.core.config import PROJECT_ROOT
from employee_api.app.core.logging_config import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    UVICORN_LOGGERS,
    resolve_log_path,
    setup_logging,
)

OWN_HANDLERS = (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME)


def _own_handlers():
    return [h for h in logging.getLogger().handlers if h.get_name() in OWN_HANDLERS]


@pytest.fixture
def clean_logging():
    root = logging.getLogger()
    saved_handlers = _own_handlers()
    saved_root_level = root.level
    saved_uvicorn_levels = {name: logging.getLogger(name).level for name in UVICORN_LOGGERS}
    for handler in saved_handlers:
        root.removeHandler(handler)

    yield root

    for handler in _own_handlers():
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_root_level)
    for name, level in saved_uvicorn_levels.items():
        logging.getLogger(name).setLevel(level)


# =============================================================================
# Handlers
# =============================================================================

class TestSetupLogging:

    def test_installs_console_handler(self, clean_logging):
        setup_logging("INFO")

        assert [h.get_name() for h in _own_handlers()] == [CONSOLE_HANDLER_NAME]
        assert clean_logging.level == logging.INFO

    def test_writes_to_log_file(self, clean_logging, tmp_path):
        log_file = tmp_path / "logs" / "app.log"

        setup_logging("DEBUG", str(log_file))
        logging.getLogger("employee_api.test").debug("hello file")
        for handler in _own_handlers():
            handler.flush()

        assert log_file.exists()
        content = log_file.read_text(encoding="utf-8")
        assert "[DEBUG] employee_api.test: hello file" in content

    def test_second_call_does_not_duplicate_handlers(self, clean_logging, tmp_path):
        log_file = str(tmp_path / "app.log")

        setup_logging("INFO", log_file)
        setup_logging("INFO", log_file)

        names = sorted(h.get_name() for h in _own_handlers())
        assert names == sorted(OWN_HANDLERS)

    def test_leaves_foreign_handlers_alone(self, clean_logging):
        foreign = logging.NullHandler()
        clean_logging.addHandler(foreign)
        try:
            setup_logging("INFO")

            assert foreign in clean_logging.handlers
            assert len(_own_handlers()) == 1
        finally:
            clean_logging.removeHandler(foreign)

    def test_second_call_updates_level(self, clean_logging):
        setup_logging("INFO")
        setup_logging("ERROR")

        assert clean_logging.level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self, clean_logging):
        setup_logging("CHATTY")

        assert clean_logging.level == logging.INFO

    def test_level_name_is_case_insensitive(self, clean_logging):
        setup_logging("warning")

        assert clean_logging.level == logging.WARNING

    @pytest.mark.parametrize("name", UVICORN_LOGGERS)
    def test_uvicorn_loggers_follow_level(self, clean_logging, name):
        setup_logging("WARNING")

        assert logging.getLogger(name).level == logging.WARNING


# =============================================================================
# Log file path
# =============================================================================

class TestResolveLogPath:

    def test_relative_path_is_taken_from_project_root(self):
        assert resolve_log_path("logs/app.log") == (PROJECT_ROOT / "logs" / "app.log").resolve()

    def test_absolute_path_is_kept(self, tmp_path):
        target = tmp_path / "app.log"

        assert resolve_log_path(str(target)) == target.resolve()

    def test_relative_log_file_is_created_under_project_root(self, clean_logging, tmp_path, monkeypatch):
        monkeypatch.setattr(logging_config, "PROJECT_ROOT", tmp_path)

        setup_logging("INFO", "logs/app.log")

        assert (tmp_path / "logs" / "app.log").exists()
