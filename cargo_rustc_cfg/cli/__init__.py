"""
cargo-rustc-cfg CLI module.

This module provides the command-line interface for cargo-rustc-cfg.
"""

from .parser import CLI, main
from . import utils

__all__ = ["CLI", "main", "utils"]
