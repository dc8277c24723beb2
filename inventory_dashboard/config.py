import os
from typing import Any, Dict

import streamlit as st

from inventory_dashboard.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_API_TIMEOUT = 10.0

# Mapping of configuration keys to their corresponding environment variables
_API_ENV_VARS = {
    "base_url": "INVENTORY_API_URL",
    "timeout": "INVENTORY_API_TIMEOUT",
}


def _read_secrets() -> Dict[str, Any]:
    """Return the ``inventory_api`` section of Streamlit secrets, if any."""
    try:
        if "inventory_api" in st.secrets:
            return dict(st.secrets["inventory_api"])
    except FileNotFoundError:
        # No secrets.toml for this deployment
        pass
    return {}


def load_api_config() -> Dict[str, Any]:
    """Return remote service configuration.

    Values are taken from environment variables first, then from the
    ``inventory_api`` section of Streamlit secrets, then from the defaults.
    """
    config: Dict[str, Any] = {k: os.getenv(env) for k, env in _API_ENV_VARS.items()}
    if not all(config.values()):
        secrets = _read_secrets()
        for key in _API_ENV_VARS:
            if not config[key] and secrets.get(key):
                config[key] = secrets[key]

    base_url = str(config["base_url"] or DEFAULT_API_URL).rstrip("/")
    try:
        timeout = float(config["timeout"]) if config["timeout"] else DEFAULT_API_TIMEOUT
    except (TypeError, ValueError):
        logger.warning(
            "Invalid API timeout %r, falling back to %s seconds",
            config["timeout"],
            DEFAULT_API_TIMEOUT,
        )
        timeout = DEFAULT_API_TIMEOUT
    return {"base_url": base_url, "timeout": timeout}
