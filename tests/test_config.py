import pytest
from pydantic import ValidationError

from concli.config import CliConfig


def test_defaults():
    config = CliConfig()
    assert config.help_width == 75
    assert config.log_mode is None
    assert config.no_color is False


def test_help_width_minimum():
    with pytest.raises(ValidationError):
        CliConfig(help_width=10)


def test_log_mode_normalized():
    assert CliConfig(log_mode="JSON").log_mode == "json"
    assert CliConfig(log_mode=" ").log_mode is None
    with pytest.raises(ValidationError):
        CliConfig(log_mode="xml")


def test_from_env(monkeypatch):
    monkeypatch.setenv("CONCLI_HELP_WIDTH", "100")
    monkeypatch.setenv("CONCLI_LOG_MODE", "cli")
    monkeypatch.setenv("NO_COLOR", "1")
    config = CliConfig.from_env()
    assert config.help_width == 100
    assert config.log_mode == "cli"
    assert config.no_color is True


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("CONCLI_HELP_WIDTH", raising=False)
    monkeypatch.delenv("CONCLI_LOG_MODE", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert CliConfig.from_env() == CliConfig()


def test_from_env_invalid_width(monkeypatch):
    monkeypatch.setenv("CONCLI_HELP_WIDTH", "wide")
    with pytest.raises(ValidationError):
        CliConfig.from_env()
