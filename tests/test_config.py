import pytest

from sizednum.config import DEFAULT_CONFIG, DisplayConfig, ReadConfig, SizedNumConfig
from sizednum.exceptions import ConfigurationError


def test_defaults():
    assert DEFAULT_CONFIG.read.default_type == "u8"
    assert DEFAULT_CONFIG.display.default_style == "default"


@pytest.mark.parametrize("kwargs", [{"default_type": "u24"}, {"max_values": 0}])
def test_read_config_validation(kwargs):
    with pytest.raises(ConfigurationError):
        ReadConfig(**kwargs)


def test_display_config_validation():
    with pytest.raises(ConfigurationError):
        DisplayConfig(default_style="roman")


def test_from_env(monkeypatch):
    monkeypatch.setenv("SIZEDNUM_TYPE", "i16le")
    monkeypatch.setenv("SIZEDNUM_MAX_VALUES", "10")
    monkeypatch.setenv("SIZEDNUM_STYLE", "hex")
    config = SizedNumConfig.from_env()
    assert config.read.default_type == "i16le"
    assert config.read.max_values == 10
    assert config.display.default_style == "hex"


def test_from_env_bad_number(monkeypatch):
    monkeypatch.setenv("SIZEDNUM_MAX_VALUES", "lots")
    with pytest.raises(ConfigurationError):
        SizedNumConfig.from_env()
