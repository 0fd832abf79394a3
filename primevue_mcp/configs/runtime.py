"""
PrimeVue MCP Runtime Configuration

Configuration merging logic. Combines defaults, YAML config, and
environment variables.
"""

import os

from primevue_mcp.configs.constants import (
    CACHE_TTL_SECONDS,
    DEFAULT_HOST,
    DEFAULT_LIBRARY_DIR,
    DEFAULT_PORT,
    DEFAULT_THEME_DIRS,
    DOCS_BASE_URL,
    DOCS_REQUEST_DELAY,
)
from primevue_mcp.configs.logging import get_logger
from primevue_mcp.configs.yaml_config import load_yaml_config

logger = get_logger("configs.runtime")

# --- Default Runtime Configuration ---

DEFAULT_CONFIG = {
    "library_dir": DEFAULT_LIBRARY_DIR,
    "theme_dirs": list(DEFAULT_THEME_DIRS),
    "docs_base_url": DOCS_BASE_URL,
    "docs_request_delay": DOCS_REQUEST_DELAY,
    "host": DEFAULT_HOST,
    "port": DEFAULT_PORT,
    "cache_ttl": CACHE_TTL_SECONDS,
}

# Environment variable -> (config key, converter)
_ENV_OVERRIDES = {
    "PRIMEVUE_MCP_LIBRARY_DIR": ("library_dir", str),
    "PRIMEVUE_MCP_THEME_DIRS": ("theme_dirs", lambda v: [p for p in v.split(os.pathsep) if p]),
    "PRIMEVUE_MCP_DOCS_URL": ("docs_base_url", str),
    "PRIMEVUE_MCP_DOCS_DELAY": ("docs_request_delay", float),
    "PRIMEVUE_MCP_CACHE_TTL": ("cache_ttl", float),
    "HOST": ("host", str),
    "PORT": ("port", int),
}


def get_full_config() -> dict:
    """
    Get full configuration merged from defaults, YAML, and environment.

    Priority (highest wins):
    1. Environment variables
    2. YAML config file
    3. DEFAULT_CONFIG

    Returns:
        Merged configuration dictionary
    """
    config = dict(DEFAULT_CONFIG)
    config["theme_dirs"] = list(DEFAULT_CONFIG["theme_dirs"])

    yaml_config = load_yaml_config()
    for key, value in yaml_config.items():
        if key in config:
            config[key] = value
        else:
            logger.debug(f"Ignoring unknown config key: {key}")

    for env_name, (key, convert) in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if not raw:
            continue
        try:
            config[key] = convert(raw)
        except ValueError:
            logger.warning(f"Ignoring invalid {env_name}={raw!r}")

    return config
