"""
Configuration Tests
"""

import pytest

from runtime.config import BotConfig, ConfigError, DEFAULT_PORT


@pytest.fixture
def no_dotenv(tmp_path):
    return str(tmp_path / "missing.env")


def test_reads_token_and_default_port(monkeypatch, no_dotenv):
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "abc123")
    monkeypatch.delenv("PORT", raising=False)

    config = BotConfig.from_env(no_dotenv)

    assert config.discord_token == "abc123"
    assert config.port == DEFAULT_PORT == 3000


def test_reads_port(monkeypatch, no_dotenv):
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "abc123")
    monkeypatch.setenv("PORT", "8080")

    assert BotConfig.from_env(no_dotenv).port == 8080


def test_missing_token_raises(monkeypatch, no_dotenv):
    monkeypatch.delenv("DISCORD_BOT_TOKEN", raising=False)

    with pytest.raises(ConfigError):
        BotConfig.from_env(no_dotenv)


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_bad_port_raises(monkeypatch, no_dotenv, port):
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "abc123")
    monkeypatch.setenv("PORT", port)

    with pytest.raises(ConfigError):
        BotConfig.from_env(no_dotenv)


def test_dotenv_file_fills_missing_values(monkeypatch, tmp_path):
    # setenv first so the value loaded from the file is removed again on teardown
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "placeholder")
    monkeypatch.delenv("DISCORD_BOT_TOKEN")
    monkeypatch.setenv("PORT", "9000")
    env_file = tmp_path / ".env"
    env_file.write_text("DISCORD_BOT_TOKEN=from-file\nPORT=1234\n")

    config = BotConfig.from_env(str(env_file))

    assert config.discord_token == "from-file"
    assert config.port == 9000
