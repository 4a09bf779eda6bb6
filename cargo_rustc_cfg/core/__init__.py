"""
Core functionality for cargo-rustc-cfg.

This package contains the exception hierarchy and the process execution
interface that the rest of the library depends on.
"""

from .exceptions import (
    CargoRustcCfgError,
    InvocationError,
    CargoLaunchError,
    CargoExecutionError,
    OutputEncodingError,
    ParseError,
    MalformedEntryError,
    MissingOutputError,
    ConfigError,
)

from .runner import (
    CommandResult,
    CommandRunner,
    SubprocessRunner,
)

__all__ = [
    "CargoRustcCfgError",
    "InvocationError",
    "CargoLaunchError",
    "CargoExecutionError",
    "OutputEncodingError",
    "ParseError",
    "MalformedEntryError",
    "MissingOutputError",
    "ConfigError",
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
]
