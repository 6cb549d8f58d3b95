# tests/auditor/test_config_and_logging.py
import json
import logging

import pytest

from a11y_auditor.utils import config_loader
from a11y_auditor.utils.configure_logging import LogWithTqdm, configure_logger

MOCK_SETTINGS_CONTENT = {
    "debug": {"level": "DEBUG"},
    "server": {"port": 4100, "host": "127.0.0.1"},
}


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Points the loader at a temporary settings.json."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setenv(config_loader.SETTINGS_ENV_VAR, str(path))
    return path


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_packaged_settings_are_loaded():
    """The shipped settings.json provides the server defaults."""
    assert config_loader.get_nested_config("server.port") == 3000
    assert config_loader.get_nested_config("report.default_style") == "diagnostic"


def test_load_config_from_env_override(settings_file):
    assert config_loader.load_config() == MOCK_SETTINGS_CONTENT


def test_missing_settings_file_gives_empty_config(tmp_path, monkeypatch):
    monkeypatch.setenv(config_loader.SETTINGS_ENV_VAR, str(tmp_path / "nope.json"))
    assert config_loader.load_config() == {}


def test_broken_settings_file_gives_empty_config(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    monkeypatch.setenv(config_loader.SETTINGS_ENV_VAR, str(path))
    assert config_loader.load_config() == {}


def test_get_nested_config(monkeypatch):
    monkeypatch.setattr(config_loader, "CONFIG", MOCK_SETTINGS_CONTENT)
    assert config_loader.get_nested_config("server.port") == 4100
    assert config_loader.get_nested_config("server.missing", "fallback") == "fallback"
    assert config_loader.get_nested_config("server.port.deeper", 1) == 1


def test_configure_logger_routes_through_tqdm(restore_root_logger, capsys):
    handler = configure_logger("DEBUG", module_specific_levels={"noisy.module": "ERROR"},
                               silenced_loggers={"werkzeug": "WARNING"})
    assert isinstance(handler, LogWithTqdm)
    assert restore_root_logger.handlers == [handler]
    assert logging.getLogger("noisy.module").level == logging.ERROR
    assert logging.getLogger("werkzeug").level == logging.WARNING

    logging.getLogger("a11y_auditor.test").warning("hello from the checker")
    err = capsys.readouterr().err
    assert "hello from the checker" in err
    assert "WARNING" in err
