import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "repo": "phoenixframework/phoenix",
    "user": "chrismccord",
    "min_comment_length": 100,
    "max_issues": 100,
    "output_file": "phoenix_wisdom.md",
    "per_category_limit": 20,
    "title": "Phoenix Wisdom",
    "source": "gh",  # "gh" | "api" | "fixture"
    "fixture_path": None,
    "gh_timeout": 120,
    "categories": None,  # None = built-in rules; otherwise a list of {label, pattern}
}


# Integer settings and their smallest accepted value.
_INT_SETTINGS = {
    "min_comment_length": 0,
    "max_issues": 1,
    "per_category_limit": 1,
    "gh_timeout": 1,
}


class ConfigError(ValueError):
    """The configuration file or a configured value is unusable."""


def load_config(config_path: str = ".ghwisdom.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .ghwisdom.yml in the current directory
      3. CLI argument overrides (None values are ignored)
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        try:
            with open(path) as f:
                file_config = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"Could not read {config_path}: {e}")
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {config_path}: {e}")
        if not isinstance(file_config, dict):
            raise ConfigError(f"{config_path} must contain a mapping of settings.")
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    _check_int_settings(config)
    config["github_token"] = os.environ.get("GITHUB_TOKEN")

    return config


def _check_int_settings(config: dict) -> None:
    for key, minimum in _INT_SETTINGS.items():
        value = config.get(key)
        # bool is an int subclass; `max_issues: yes` is still a mistake.
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{key} must be an integer, got {value!r}.")
        if value < minimum:
            raise ConfigError(f"{key} must be at least {minimum}, got {value}.")
