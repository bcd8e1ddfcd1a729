"""Tests for configuration loading."""

import pytest

from cmdhelper.config import CONFIG_ENV, Config, config_path, load_config, load_config_file
from cmdhelper.errors import ConfigError


def test_defaults_when_missing(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "nope.toml"))
    cfg = load_config()
    assert cfg == Config()
    assert cfg.colors.enabled
    assert cfg.paths.default_output == "."


def test_partial_file_keeps_defaults(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text('[general]\nverbose = true\n\n[paths]\ndefault_output = "/srv"\n')
    cfg = load_config_file(p)
    assert cfg.general.verbose
    assert not cfg.general.log_to_file
    assert cfg.paths.default_output == "/srv"
    assert cfg.colors.theme == "default"


def test_unknown_keys_ignored(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text("[colors]\nenabled = false\nsparkles = 3\n")
    assert not load_config_file(p).colors.enabled


def test_invalid_toml_raises(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text("[general\nverbose = ")
    with pytest.raises(ConfigError):
        load_config_file(p)


def test_section_must_be_table(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text('general = "loud"\n')
    with pytest.raises(ConfigError):
        load_config_file(p)


def test_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "c.toml"))
    assert config_path() == tmp_path / "c.toml"


def test_default_path_name(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    p = config_path()
    assert p.name == "config.toml"
    assert "cmdhelper" in str(p).lower()


def test_to_dict_roundtrip():
    cfg = Config()
    assert Config.from_dict(cfg.to_dict()) == cfg
