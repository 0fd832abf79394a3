"""
PrimeVue MCP Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from primevue_mcp.configs.logging import get_logger, setup_logging

# Paths
from primevue_mcp.configs.paths import ensure_data_dir, get_data_path, get_dataset_paths

# Constants
from primevue_mcp.configs.constants import (
    CACHE_TTL_SECONDS,
    TIMEOUTS,
    TOKENS_KEY,
    get_timeout,
)

# YAML config
from primevue_mcp.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    load_yaml_config,
    save_yaml_config,
)

# Runtime
from primevue_mcp.configs.runtime import DEFAULT_CONFIG, get_full_config

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    "get_dataset_paths",
    # Constants
    "CACHE_TTL_SECONDS",
    "TIMEOUTS",
    "TOKENS_KEY",
    "get_timeout",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "save_yaml_config",
    "create_default_config",
    # Runtime
    "DEFAULT_CONFIG",
    "get_full_config",
]
