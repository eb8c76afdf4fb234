"""Unit tests for the configuration loader"""

import logging

import pytest

from transcript_signals.config import config_loader
from transcript_signals.config.config_loader import Config, config, default_config_path


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run from an empty directory with no checkout config to fall back on"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_loader, "PACKAGE_CONFIG_DIR", tmp_path / "absent")
    monkeypatch.delenv("TRANSCRIPT_SIGNALS_ENV", raising=False)
    (tmp_path / "config").mkdir()
    return tmp_path


@pytest.fixture
def config_file(tmp_path):
    """Write a small configuration file"""
    path = tmp_path / "config.yaml"
    path.write_text(
        "audio:\n"
        "  speech_threshold: 40\n"
        "attention:\n"
        "  memory_capacity: 7\n"
    )
    return path


def test_dot_notation(config_file):
    cfg = Config(str(config_file))

    assert cfg.get('audio.speech_threshold') == 40
    assert cfg['attention.memory_capacity'] == 7


def test_missing_key_returns_default(config_file):
    cfg = Config(str(config_file))

    assert cfg.get('audio.history_size', 10) == 10
    assert cfg.get('audio.speech_threshold.nested', 'x') == 'x'
    assert cfg.get('nonexistent') is None


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / "missing.yaml"))


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert Config(str(path)).get('audio.speech_threshold', 30) == 30


@pytest.mark.parametrize("content", [
    "audio:\n  vad_threshold: 0\n",
    "audio:\n  speech_threshold: 300\n",
    "audio:\n  history_size: 0\n",
    "attention:\n  memory_capacity: 0\n",
    "recognition:\n  default_confidence: 1.5\n",
])
def test_validate_rejects_invalid_values(tmp_path, content):
    path = tmp_path / "invalid.yaml"
    path.write_text(content)

    with pytest.raises(ValueError):
        Config(str(path)).validate()


def test_bundled_config_is_valid():
    """Test the repository configuration loads and validates"""
    config.validate()

    assert config.get('attention.memory_capacity') == 5
    assert config.get('audio.history_size') == 10


class TestDefaultLocation:
    """Tests for locating the config file when no path is given"""

    def test_reads_working_directory_config(self, workdir):
        (workdir / "config" / "config.yaml").write_text("audio:\n  history_size: 4\n")

        cfg = Config()

        assert cfg.config_path.resolve() == (workdir / "config" / "config.yaml").resolve()
        assert cfg.get('audio.history_size') == 4

    def test_environment_file_preferred(self, workdir, monkeypatch):
        (workdir / "config" / "config.yaml").write_text("audio:\n  history_size: 4\n")
        (workdir / "config" / "config.test.yaml").write_text("audio:\n  history_size: 6\n")
        monkeypatch.setenv("TRANSCRIPT_SIGNALS_ENV", "test")

        assert Config().get('audio.history_size') == 6

    def test_environment_without_file_uses_default(self, workdir, monkeypatch):
        (workdir / "config" / "config.yaml").write_text("audio:\n  history_size: 4\n")
        monkeypatch.setenv("TRANSCRIPT_SIGNALS_ENV", "staging")

        assert Config().get('audio.history_size') == 4

    def test_falls_back_to_checkout_config(self, workdir, monkeypatch):
        checkout = workdir / "checkout"
        checkout.mkdir()
        (checkout / "config.yaml").write_text("audio:\n  history_size: 8\n")
        monkeypatch.setattr(config_loader, "PACKAGE_CONFIG_DIR", checkout)

        assert default_config_path() == checkout / "config.yaml"
        assert Config().get('audio.history_size') == 8

    def test_missing_default_file_warns(self, workdir, caplog):
        """Test a missing default file yields empty config instead of raising"""
        with caplog.at_level(logging.WARNING, logger=config_loader.__name__):
            cfg = Config()

        assert cfg.get('audio.history_size') is None
        assert cfg.get('audio.history_size', 10) == 10
        assert "Config file not found" in caplog.text
