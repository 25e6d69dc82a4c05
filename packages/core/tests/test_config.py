"""Tests for configuration loading."""

import pytest

from leadstream_core.config import DEFAULT_TRIGGER_WORDS, load_config, load_lead_criteria


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in (
        "YOUTUBE_API_KEY",
        "YOUTUBE_CHANNEL_ID",
        "LEADSTREAM_CLASSIFIER_KEY",
        "ANTHROPIC_API_KEY",
        "OPENAI_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_applied_when_no_config_file(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["mode"] == "fixture"
    assert config["classifier"] == "keyword"
    assert config["page_size"] == 10
    assert config["channel_id"] is None
    assert config["trigger_words"] == ["buy", "sell", "help", "contact"]
    assert config["lead_criteria"] is None


def test_config_file_overrides_defaults(tmp_path):
    cfg = tmp_path / ".leadstream.yml"
    cfg.write_text("mode: remote\nchannel_id: UC123\npage_size: 5\n")
    config = load_config(config_path=str(cfg))
    assert config["mode"] == "remote"
    assert config["channel_id"] == "UC123"
    assert config["page_size"] == 5


def test_trigger_words_loaded(tmp_path):
    cfg = tmp_path / ".leadstream.yml"
    cfg.write_text("trigger_words:\n  - quote\n  - price\n")
    config = load_config(config_path=str(cfg))
    assert config["trigger_words"] == ["quote", "price"]


def test_empty_config_file_uses_defaults(tmp_path):
    cfg = tmp_path / ".leadstream.yml"
    cfg.write_text("")
    config = load_config(config_path=str(cfg))
    assert config["mode"] == "fixture"


def test_cli_overrides_config_file(tmp_path):
    cfg = tmp_path / ".leadstream.yml"
    cfg.write_text("mode: remote\n")
    config = load_config(config_path=str(cfg), cli_overrides={"mode": "fixture"})
    assert config["mode"] == "fixture"


def test_none_cli_overrides_ignored(tmp_path):
    cfg = tmp_path / ".leadstream.yml"
    cfg.write_text("mode: remote\n")
    config = load_config(config_path=str(cfg), cli_overrides={"mode": None})
    assert config["mode"] == "remote"


def test_credentials_loaded_from_env(monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "yt-key")
    monkeypatch.setenv("LEADSTREAM_CLASSIFIER_KEY", "cls-key")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "ant-key")
    monkeypatch.setenv("OPENAI_API_KEY", "oai-key")
    config = load_config(config_path="nonexistent.yml")
    assert config["youtube_api_key"] == "yt-key"
    assert config["classifier_api_key"] == "cls-key"
    assert config["anthropic_api_key"] == "ant-key"
    assert config["openai_api_key"] == "oai-key"


def test_credentials_in_config_file_are_ignored(tmp_path):
    cfg = tmp_path / ".leadstream.yml"
    cfg.write_text("youtube_api_key: from-file\n")
    config = load_config(config_path=str(cfg))
    assert config["youtube_api_key"] is None


def test_channel_id_env_overrides_file(tmp_path, monkeypatch):
    monkeypatch.setenv("YOUTUBE_CHANNEL_ID", "UC-env")
    cfg = tmp_path / ".leadstream.yml"
    cfg.write_text("channel_id: UC-file\n")
    config = load_config(config_path=str(cfg))
    assert config["channel_id"] == "UC-env"


def test_trigger_words_list_is_not_shared_reference(tmp_path):
    """Mutating one config's trigger words must not affect another."""
    config_a = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_b = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_a["trigger_words"].append("quote")
    assert config_b["trigger_words"] == ["buy", "sell", "help", "contact"]
    assert DEFAULT_TRIGGER_WORDS == ["buy", "sell", "help", "contact"]


def test_custom_lead_criteria_path(tmp_path):
    criteria_file = tmp_path / "criteria.md"
    criteria_file.write_text("# Leads\n- asks for a quote")
    config = {"lead_criteria": str(criteria_file)}
    assert "asks for a quote" in load_lead_criteria(config)


def test_builtin_lead_criteria_loaded_as_fallback():
    content = load_lead_criteria({"lead_criteria": None})
    assert "lead" in content.lower()


def test_missing_custom_lead_criteria_raises(tmp_path):
    config = {"lead_criteria": str(tmp_path / "does-not-exist.md")}
    with pytest.raises(FileNotFoundError):
        load_lead_criteria(config)
