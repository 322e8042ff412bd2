# tests/core/test_config_management.py
import json

import pytest

from htmlval_shell.core.managers.config_manager import ConfigManager
from htmlval_shell.core.utils.path_utils import PathUtils

# A standard, predictable configuration for the tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "parser": {
        "backend": "html5lib"
    },
    "validation": {
        "strict": False
    },
    "interactive": {
        "refresh_interval": 0.5
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    A fixture that sets up an isolated environment for the ConfigManager:
    - Creates a temporary package root with a mock 'settings.json'.
    - Points the user settings override to a (not yet existing) temp file.
    """
    package_root = tmp_path / "htmlval_shell"
    package_root.mkdir()
    settings_file = package_root / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    user_settings = tmp_path / "home" / ".htmlval" / "settings.json"

    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: settings_file)
    monkeypatch.setattr(PathUtils, 'get_user_settings_file', lambda: user_settings)

    # The global instance may already be loaded, so force a reload from our files.
    manager = ConfigManager()
    manager.reset()
    yield manager, user_settings

    monkeypatch.undo()
    manager.reset()


def test_bundled_settings_file_exists():
    assert PathUtils.get_settings_file().name == "settings.json"
    assert PathUtils.get_settings_file().exists()


def test_config_manager_is_singleton():
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_env):
    manager, _ = config_env
    assert manager.get_nested("debug.level") == "WARNING"
    assert manager.get_nested("parser.backend") == "html5lib"


def test_config_manager_get_nested(config_env):
    manager, _ = config_env
    assert manager.get_nested("interactive.refresh_interval") == 0.5
    assert manager.get_nested("non.existent.key", "default") == "default"
    assert manager.get_nested("parser.backend.deeper", "default") == "default"


def test_config_manager_set_nested(config_env):
    manager, _ = config_env

    manager.set_nested("debug.level", "INFO")
    assert manager.get_nested("debug.level") == "INFO"

    # A new key is stored as given
    manager.set_nested("output.color", False)
    assert manager.get_nested("output.color") is False

    # Type-casting follows the existing value
    manager.set_nested("interactive.refresh_interval", "2")
    assert manager.get_nested("interactive.refresh_interval") == 2.0

    manager.set_nested("validation.strict", "true")
    assert manager.get_nested("validation.strict") is True
    manager.set_nested("validation.strict", "off")
    assert manager.get_nested("validation.strict") is False


def test_config_manager_reset(config_env):
    manager, _ = config_env

    manager.set_nested("debug.level", "DEBUG")
    assert manager.get_nested("debug.level") == "DEBUG"

    manager.reset()
    assert manager.get_nested("debug.level") == "WARNING"


def test_user_settings_override(config_env):
    manager, user_settings = config_env
    user_settings.parent.mkdir(parents=True)
    user_settings.write_text(json.dumps({"parser": {"backend": "html.parser"}}))

    manager.reset()

    assert manager.get_nested("parser.backend") == "html.parser"
    # Untouched sections survive the merge
    assert manager.get_nested("debug.level") == "WARNING"


def test_broken_user_settings_are_ignored(config_env):
    manager, user_settings = config_env
    user_settings.parent.mkdir(parents=True)
    user_settings.write_text("{not json")

    manager.reset()

    assert manager.get_nested("parser.backend") == "html5lib"
