import json
import os

from typing import Any, Optional

default_config_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

defaults = {
    "trigger-label": "doc update required",
    "target-owner": "GreptimeTeam",
    "target-repo": "docs",
    "title-template": "Update docs for /source_title",
    "body-template": "A document change request is generated from\n/source_link\n",
    "token-env": "DOCS_REPO_TOKEN",
}


class ConfigError(Exception):
    pass


def load_config(path: Optional[str] = None) -> dict[str, Any]:
    """
    Read the bot configuration.

    The file given explicitly wins, then the one named by DOC_ISSUE_BOT_CONFIG, then Bot/config.json. A missing default
    file is not an error: the built-in defaults are used instead. Keys not known to the bot are dropped.
    """
    explicit = path or os.getenv("DOC_ISSUE_BOT_CONFIG")
    config_path = explicit or default_config_path

    config = dict(defaults)
    if not os.path.exists(config_path):
        if explicit:
            raise ConfigError(f"Config file {config_path} does not exist")
        print("No config.json found, using the built-in defaults", flush=True)
        return config

    try:
        with open(config_path, "r") as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}") from e

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")

    config.update({key: value for key, value in loaded.items() if key in defaults})
    return config


def get_token(config: dict[str, Any]) -> Optional[str]:
    # Credentials only ever come from the environment, never from config.json
    return os.getenv(config["token-env"])
