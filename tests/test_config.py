from pathlib import Path

import pytest

from image_enhancer.core import ConfigManager, get_config, ConfigurationError
from image_enhancer.core.config_manager import CONFIG_DIR_ENV

PACKAGE_SETTINGS = Path(__file__).parent.parent / "image_enhancer" / "config" / "settings.yaml"


def write_settings(directory, text):
    (directory / "settings.yaml").write_text(text)
    return directory


def test_packaged_defaults():
    config = get_config()
    assert config.get_setting('ai.tile_size') == 128
    assert config.get_setting('ai.scale_factor') == 2
    assert config.get_setting('enhancement.scale_factor') == 2
    assert config.get_setting('ai.providers') == ['CPUExecutionProvider']


def test_get_setting_default_for_missing_keys():
    config = get_config()
    assert config.get_setting('ai.not_a_key', 'fallback') == 'fallback'
    assert config.get_setting('ai.tile_size.deeper', 5) == 5


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_custom_directory(tmp_path):
    write_settings(tmp_path, "ai:\n  tile_size: 64\n")
    config = get_config(tmp_path)
    assert config.get_setting('ai.tile_size') == 64
    assert get_config() is config


def test_config_dir_from_environment(tmp_path, monkeypatch):
    write_settings(tmp_path, "enhancement:\n  default_intensity: 2.5\n")
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    assert get_config().get_setting('enhancement.default_intensity') == 2.5


def test_env_var_expansion(tmp_path, monkeypatch):
    monkeypatch.setenv("ENHANCER_TEST_LOGS", "/tmp/enhancer-logs")
    write_settings(tmp_path, "logging:\n  file:\n    path: \"${ENHANCER_TEST_LOGS}/run.log\"\n")
    config = get_config(tmp_path)
    assert config.get_setting('logging.file.path') == "/tmp/enhancer-logs/run.log"


def test_missing_directory(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path / "nowhere")


def test_missing_settings_file(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path).load_all()


def test_invalid_yaml(tmp_path):
    write_settings(tmp_path, "ai: [unclosed\n")
    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path).load_all()


@pytest.mark.parametrize("text", [
    "ai:\n  tile_size: 0\n",
    "ai:\n  tile_size: big\n",
    "ai:\n  scale_factor: -2\n",
    "enhancement:\n  scale_factor: 1.5\n",
    "enhancement:\n  default_intensity: strong\n",
    "ai:\n  providers: []\n",
    "logging:\n  level: LOUD\n",
])
def test_invalid_values(tmp_path, text):
    write_settings(tmp_path, text)
    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path).load_all()


def test_packaged_settings_file_exists():
    assert PACKAGE_SETTINGS.is_file()
