import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_TRIGGER_WORDS = ["buy", "sell", "help", "contact"]
DEFAULT_REPLY_TEMPLATE = "Thank you for watching! Let me know if you have questions."

DEFAULT_CONFIG: dict = {
    "mode": "fixture",  # fixture | remote
    "channel_id": None,
    "classifier": "keyword",  # keyword | anthropic | openai
    "trigger_words": DEFAULT_TRIGGER_WORDS,
    "reply_template": DEFAULT_REPLY_TEMPLATE,
    "page_size": 10,
    "request_timeout": 10.0,
    "fixture_delay": 0.0,
    "lead_criteria": None,  # None = use built-in default; set to a path string to override
}

BUILTIN_CRITERIA_DIR = Path(__file__).parent / "criteria"
_BUILTIN_DEFAULT = BUILTIN_CRITERIA_DIR / "default.md"


def load_config(config_path: str = ".leadstream.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .leadstream.yml in the current directory
      3. CLI argument overrides

    Credentials are only ever read from the environment.
    """
    config = {**DEFAULT_CONFIG, "trigger_words": list(DEFAULT_CONFIG["trigger_words"])}

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    channel_id = os.environ.get("YOUTUBE_CHANNEL_ID")
    if channel_id:
        config["channel_id"] = channel_id

    config["youtube_api_key"] = os.environ.get("YOUTUBE_API_KEY")
    config["classifier_api_key"] = os.environ.get("LEADSTREAM_CLASSIFIER_KEY")
    config["anthropic_api_key"] = os.environ.get("ANTHROPIC_API_KEY")
    config["openai_api_key"] = os.environ.get("OPENAI_API_KEY")

    return config


def load_lead_criteria(config: dict) -> str:
    """
    Load the lead criteria used to prompt LLM classifiers.

    If ``lead_criteria`` is set in config, loads from that path (relative to cwd).
    Otherwise falls back to the built-in default.
    """
    custom_path = config.get("lead_criteria")
    if custom_path:
        p = Path(custom_path)
        if not p.exists():
            raise FileNotFoundError(f"Lead criteria file not found: {custom_path}")
        return p.read_text()

    if _BUILTIN_DEFAULT.exists():
        return _BUILTIN_DEFAULT.read_text()

    raise FileNotFoundError("No lead criteria configured and built-in default is missing.")
