"""
Settings management for cargo-rustc-cfg.
"""

from .settings import (
    DEFAULT_CONFIG_NAME,
    OUTPUT_FORMATS,
    Settings,
    load_settings,
    apply_settings,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "OUTPUT_FORMATS",
    "Settings",
    "load_settings",
    "apply_settings",
]
