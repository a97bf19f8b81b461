"""Log level and handler selection from the environment."""

import logging

import pytest
from storefront.utils.logging import current_environment, get_log_level, setup_stdlib_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ENVIRONMENT", "PROTEAN_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers, root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers, root.level = handlers, level


class TestLogLevel:
    def test_defaults_to_development(self, clean_env):
        assert current_environment() == "development"
        assert get_log_level() == "DEBUG"

    def test_environment_wins_over_protean_env(self, clean_env):
        clean_env.setenv("PROTEAN_ENV", "test")
        clean_env.setenv("ENVIRONMENT", "Production")

        assert current_environment() == "production"
        assert get_log_level() == "INFO"

    def test_protean_env_is_used_alone(self, clean_env):
        clean_env.setenv("PROTEAN_ENV", "test")

        assert get_log_level() == "WARNING"

    def test_log_level_overrides_environment(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "production")
        clean_env.setenv("LOG_LEVEL", "debug")

        assert get_log_level() == "DEBUG"


class TestStdlibHandlers:
    def test_console_and_single_log_file(self, clean_env, root_logger, tmp_path):
        clean_env.setenv("LOG_DIR", str(tmp_path))

        setup_stdlib_logging("INFO")

        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 2
        assert [p.name for p in tmp_path.iterdir()] == ["storefront.log"]
        assert logging.getLogger("protean").level == logging.WARNING
