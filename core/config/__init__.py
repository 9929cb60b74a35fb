"""
Runtime Configuration Module

Provides configuration loading and management for the comment client.
"""

from .runtime import ClientConfig, get_default_config_template, load_config

__all__ = [
    "ClientConfig",
    "get_default_config_template",
    "load_config",
]
