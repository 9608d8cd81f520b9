"""
Configuration and secrets management for the Doctor Directory app.

This module provides a centralized way to access application configuration
and secrets, with fallbacks for every value so the app runs without a
secrets file.

Usage:
    from src.utils.config import get_api_config, get_app_config

    # Get the doctor data endpoint configuration
    doctors_config = get_api_config('doctors')
    endpoint_url = doctors_config.get('endpoint_url')

    # Get general app settings
    log_level = get_app_config().get('log_level')
"""

import logging
from typing import Any, Dict

import streamlit as st

logger = logging.getLogger(__name__)

DEFAULT_DOCTORS_ENDPOINT = "https://srijandubey.github.io/campus-api-mock/SRM-C1-25.json"

_logging_configured = False


def get_secret(key_path: str, default: Any = None) -> Any:
    """
    Safely retrieve a secret from Streamlit's secrets management.

    Args:
        key_path: Dot-notation path to the secret (e.g., 'doctors.endpoint_url')
        default: Default value if secret is not found

    Returns:
        The secret value or default if not found

    Examples:
        >>> get_secret('doctors.endpoint_url', '')
        >>> get_secret('doctors.request_timeout', 10)
        >>> get_secret('app.debug_mode', False)
    """
    try:
        keys = key_path.split(".")
        value = st.secrets

        for key in keys:
            try:
                value = value[key]
            except Exception:
                return default

        return value
    except Exception as e:
        logger.warning(f"Failed to retrieve secret '{key_path}': {e}")
        return default


def get_api_config(api_name: str) -> Dict[str, Any]:
    """
    Get configuration for a specific API or service.

    Args:
        api_name: Name of the API/service (currently only 'doctors')

    Returns:
        Dictionary containing the API configuration, empty for unknown names
    """
    if api_name == "doctors":
        return {
            "endpoint_url": get_secret("doctors.endpoint_url", DEFAULT_DOCTORS_ENDPOINT),
            "request_timeout": get_secret("doctors.request_timeout", 10),
            "suggestion_limit": get_secret("doctors.suggestion_limit", 3),
        }
    return {}


def get_app_config() -> Dict[str, Any]:
    """
    Get general application configuration.

    Returns:
        Dictionary containing app configuration
    """
    return {
        "environment": get_secret("app.environment", "production"),
        "debug_mode": get_secret("app.debug_mode", False),
        "log_level": get_secret("app.log_level", "INFO"),
    }


def validate_configuration() -> Dict[str, str]:
    """
    Validate the application configuration and return any warnings or errors.

    Returns:
        Dictionary with configuration validation results
    """
    issues = {}

    doctors_config = get_api_config("doctors")
    endpoint = str(doctors_config["endpoint_url"] or "")
    if not endpoint.startswith(("http://", "https://")):
        issues["doctors"] = f"Doctor data endpoint must be an http(s) URL, got: {endpoint!r}"
    else:
        timeout = doctors_config["request_timeout"]
        limit = doctors_config["suggestion_limit"]
        if not isinstance(timeout, (int, float)) or timeout <= 0:
            issues["doctors"] = "request_timeout must be a positive number of seconds"
        elif not isinstance(limit, int) or limit <= 0:
            issues["doctors"] = "suggestion_limit must be a positive integer"

    app_config = get_app_config()
    if app_config["environment"] not in ["development", "staging", "production"]:
        issues["app"] = f"Unknown environment: {app_config['environment']}"

    return issues


def configure_logging() -> None:
    """Apply the configured log level to the root logger (once per process)."""
    global _logging_configured

    if _logging_configured:
        return

    level_name = str(get_app_config()["log_level"]).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
        logger.warning(f"Unknown log level '{level_name}', falling back to INFO")

    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    _logging_configured = True


if __name__ == "__main__":
    print("Doctor Directory - Configuration Status")
    print("=" * 50)

    issues = validate_configuration()
    if issues:
        print("⚠️  Configuration Issues Found:")
        for component, issue in issues.items():
            print(f"  - {component}: {issue}")
    else:
        print("✅ Configuration validation passed")

    print(f"\n🌐 Endpoint: {get_api_config('doctors')['endpoint_url']}")
    print(f"🔧 Environment: {get_app_config()['environment']}")
    print(f"🐛 Debug Mode: {get_app_config()['debug_mode']}")
