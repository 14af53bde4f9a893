"""Configuration management."""
import os
import yaml
from pathlib import Path

_config = None
_DEFAULT_CONFIG = Path(__file__).parent / "default_config.yaml"

REQUIRED_SECTIONS = ("http", "sources", "dominance", "logging")
REQUIRED_SOURCES = ("cryptocompare", "coinbase", "coingecko")


def load_config(path=None):
    """Load config from YAML, merging defaults with optional overrides."""
    global _config

    with open(_DEFAULT_CONFIG) as f:
        config = yaml.safe_load(f)

    if path and Path(path).exists():
        with open(path) as f:
            overrides = yaml.safe_load(f) or {}
        config = _deep_merge(config, overrides)

    # Environment variable overrides
    env_map = {
        "RATIOPULSE_LOG_LEVEL": ("logging", "level"),
        "RATIOPULSE_HTTP_TIMEOUT": ("http", "timeout"),
        "RATIOPULSE_USER_AGENT": ("http", "user_agent"),
    }
    for env_key, config_path in env_map.items():
        val = os.environ.get(env_key)
        if val:
            d = config
            for k in config_path[:-1]:
                d = d.setdefault(k, {})
            try:
                d[config_path[-1]] = int(val)
            except ValueError:
                d[config_path[-1]] = val

    _validate_config(config)
    _config = config
    return config


def get_config():
    """Return cached config, loading defaults if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def _deep_merge(base, override):
    """Recursively merge override into base dict."""
    result = base.copy()
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _validate_config(config):
    """Basic config validation."""
    for section in REQUIRED_SECTIONS:
        if section not in config:
            raise ValueError(f"Missing required config section: {section}")

    for name in REQUIRED_SOURCES:
        if not config["sources"].get(name, {}).get("base_url"):
            raise ValueError(f"Missing base_url for source: {name}")

    timeout = config["http"].get("timeout")
    if not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError("http.timeout must be a positive number of seconds")
