"""Tests for environment-driven settings and logging setup."""

import logging
from pathlib import Path

from shelfpos.infrastructure.bootstrap import prepare_directories
from shelfpos.infrastructure.config import Settings
from shelfpos.infrastructure.logging_config import configure_logging


class TestSettings:

    def test_defaults(self):
        config = Settings.from_env({"SHELFPOS_HOME": "/srv/store"})
        assert config.catalog_file == Path("/srv/store/data/inventory.csv")
        assert config.reports_dir == Path("/srv/store/reports")
        assert config.manager_password == "admin"
        assert config.store_name == "Marites Store"

    def test_overrides(self):
        config = Settings.from_env({
            "SHELFPOS_HOME": "/srv/store",
            "SHELFPOS_MANAGER_PASSWORD": "pw",
            "SHELFPOS_STORE_NAME": "Corner Shop",
        })
        assert (config.manager_password, config.store_name) == ("pw", "Corner Shop")

    def test_home_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert Settings.from_env({}).home == tmp_path

    def test_prepare_directories(self, tmp_path):
        config = Settings(home=tmp_path)
        prepare_directories(config)
        assert config.data_dir.is_dir()
        assert config.receipts_dir.is_dir()


class TestLoggingConfig:

    def test_file_handler_and_no_stacking(self, tmp_path):
        log_file = tmp_path / "logs" / "shelfpos.log"
        configure_logging(log_file=log_file)
        configure_logging(log_file=log_file)
        logger = logging.getLogger("shelfpos")
        assert len(logger.handlers) == 2
        logging.getLogger("shelfpos.test").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
