"""Tests for YAML configuration loading."""

import pytest

from founder_finder.config import AppConfig, FetchConfig, get_user_agent, load_config


def test_load_config_without_path_returns_defaults():
    cfg = load_config(None)

    assert cfg == AppConfig()
    assert cfg.fetch.max_attempts == 3
    assert cfg.fetch.timeout_seconds == 12.0
    assert cfg.fetch.backoff_base_seconds == 0.5
    assert cfg.fetch.pacing_seconds == 0.35
    assert cfg.batch.delay_seconds == 0.4
    assert cfg.output.default_filename == "founders.json"


def test_load_config_returns_independent_instances():
    first = load_config(None)
    first.batch.delay_seconds = 0

    assert load_config(None).batch.delay_seconds == 0.4


def test_load_config_merges_sections(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "fetch:\n  max_attempts: 5\n  pacing_seconds: 0\n"
        "wiki:\n  base_url: https://de.wikipedia.org\n"
        "unknown_section:\n  foo: bar\n",
        encoding="utf-8",
    )

    cfg = load_config(str(path))

    assert cfg.fetch.max_attempts == 5
    assert cfg.fetch.pacing_seconds == 0
    assert cfg.fetch.timeout_seconds == 12.0
    assert cfg.wiki.base_url == "https://de.wikipedia.org"


def test_load_config_rejects_unknown_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("fetch:\n  retries: 2\n", encoding="utf-8")

    with pytest.raises(TypeError):
        load_config(str(path))


def test_empty_config_file_uses_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == AppConfig()


def test_get_user_agent_prefers_environment(monkeypatch):
    cfg = FetchConfig(user_agent="Configured/1.0")
    monkeypatch.delenv("FOUNDER_FINDER_USER_AGENT", raising=False)
    assert get_user_agent(cfg) == "Configured/1.0"

    monkeypatch.setenv("FOUNDER_FINDER_USER_AGENT", "FromEnv/1.0")
    assert get_user_agent(cfg) == "FromEnv/1.0"
