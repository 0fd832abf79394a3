"""
PrimeVue MCP YAML Configuration

Loading, saving, and defaults for <data dir>/config.yaml.
"""

from pathlib import Path

import yaml

from primevue_mcp.configs.logging import get_logger
from primevue_mcp.configs.paths import ensure_data_dir, get_data_path

logger = get_logger("configs.yaml")

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# PrimeVue MCP Configuration
# Edit this file to customize extraction and serving.

# Extraction sources
library_dir: "node_modules/primevue"
theme_dirs:
  - "node_modules/@primeuix/styles"
  - "node_modules/@primeuix/styled"

# Documentation site scraped for titles, descriptions and examples
docs_base_url: "https://www.primevue.org"
docs_request_delay: 0.3

# Query API
host: "0.0.0.0"
port: 3000
cache_ttl: 300
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config() -> dict:
    """
    Load configuration from config.yaml in the data directory.

    Returns:
        Configuration dictionary (empty if the file doesn't exist or is invalid)
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        loaded = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return {}

    if not isinstance(loaded, dict):
        logger.warning(f"Ignoring config {config_path}: top level is not a mapping")
        return {}
    return loaded


def save_yaml_config(config: dict) -> Path:
    """
    Save configuration to config.yaml in the data directory.

    Args:
        config: Configuration dictionary to save

    Returns:
        Path of the written file
    """
    ensure_data_dir()
    config_path = get_config_path()
    content = yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
    config_path.write_text(content, encoding="utf-8")
    return config_path


def create_default_config() -> bool:
    """
    Create default config.yaml if it doesn't exist.

    Returns:
        True if file was created, False if it already exists
    """
    config_path = get_config_path()
    if config_path.exists():
        return False

    ensure_data_dir()
    config_path.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    return True
