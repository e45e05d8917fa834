"""Client configuration.

Values come from, in increasing precedence: model defaults, an optional YAML
file, WORDNIK_* environment variables, then explicit overrides.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from .errors import ConfigError

DEFAULT_BASE_URL = "http://api.wordnik.com"
DEFAULT_TIMEOUT = 10.0

ENV_VARS = {
    "api_key": "WORDNIK_API_KEY",
    "base_url": "WORDNIK_BASE_URL",
}


class ClientConfig(BaseModel):
    """Settings shared by every request a client sends."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    retain_responses: bool = False  # keep raw responses open for debugging
    collapse_false: bool = True


def load_config(path: Path | None = None, **overrides) -> ClientConfig:
    """Build a ClientConfig from a YAML file, the environment and overrides.

    Overrides whose value is None are ignored, so CLI options that were not
    given fall through to the file and environment.
    """
    values = {}
    if path is not None:
        values.update(_read_yaml(Path(path)))

    for key, env_var in ENV_VARS.items():
        env_value = os.getenv(env_var)
        if env_value:
            values[key] = env_value

    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ClientConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data
