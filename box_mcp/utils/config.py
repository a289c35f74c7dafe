"""
Configuration Utility Module

This module provides functions for loading and accessing application configuration.
"""

import os
import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

# Default configuration file path
CONFIG_FILE_PATH = os.getenv("CONFIG_FILE_PATH", "config.yaml")

# Box endpoints
BOX_API_BASE_URL = "https://api.box.com/2.0"
BOX_OAUTH_URL = "https://api.box.com/oauth2/token"

# Expiry buffer for stored tokens, in seconds
DEFAULT_EXPIRY_BUFFER_SECONDS = 5 * 60

# Cached configuration
_config_cache: Optional[Dict[str, Any]] = None


def load_yaml_config() -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Returns:
        Dict[str, Any]: Configuration dictionary from YAML file or empty dict if file not found.
    """
    try:
        config_path = Path(os.getenv("CONFIG_FILE_PATH", CONFIG_FILE_PATH))
        if config_path.exists():
            with open(config_path, "r") as f:
                return yaml.safe_load(f) or {}
        else:
            logging.debug(f"Configuration file not found: {config_path}")
            return {}
    except Exception as e:
        logging.error(f"Error loading configuration file: {e}")
        return {}


def get_config() -> Dict[str, Any]:
    """
    Get the application configuration from YAML file and environment variables.

    The fallback access token is only ever read from the environment
    (BOX_ACCESS_TOKEN), never from the YAML file. Configuration is cached
    after first load.

    Returns:
        Dict[str, Any]: A dictionary containing the application configuration.
    """
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    yaml_config = load_yaml_config()

    server_config = yaml_config.get("server", {})
    mcp_config = yaml_config.get("mcp", {})
    box_config = yaml_config.get("box", {})

    config = {
        # Server configuration (from YAML)
        "log_level": server_config.get("log_level", "INFO"),

        # MCP configuration (env var overrides YAML)
        "mcp_server_name": os.getenv("MCP_SERVER_NAME") or mcp_config.get("name", "box-ai-server"),

        # Box API configuration (from YAML)
        "box_api_base_url": box_config.get("api_base_url", BOX_API_BASE_URL).rstrip("/"),
        "box_oauth_url": box_config.get("oauth_url", BOX_OAUTH_URL),
        "token_expiry_buffer_seconds": int(
            box_config.get("token_expiry_buffer_seconds", DEFAULT_EXPIRY_BUFFER_SECONDS)
        ),

        # Fallback bearer token (env only)
        "box_access_token": os.getenv("BOX_ACCESS_TOKEN", ""),
    }

    _config_cache = config
    return config


def get_config_value(key: str, default: Optional[Any] = None) -> Any:
    """
    Get a specific configuration value.

    Args:
        key (str): The configuration key to retrieve.
        default (Optional[Any], optional): The default value if the key is not found. Defaults to None.

    Returns:
        Any: The configuration value.
    """
    config = get_config()
    return config.get(key, default)


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_cache
    _config_cache = None
