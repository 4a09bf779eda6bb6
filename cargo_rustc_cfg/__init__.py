"""
cargo-rustc-cfg: the Rust compiler configuration as seen through Cargo.

Runs ``cargo rustc -- --print cfg`` and parses its output into an ordered
ConfigurationSet, for the host or for a cross-compilation target triple:

    >>> from cargo_rustc_cfg import query_host, query_target
    >>> host = query_host()
    >>> host.get("target_os")
    'linux'
    >>> query_target("aarch64-unknown-linux-gnu").get("target_arch")
    'aarch64'
"""

from .core.exceptions import (
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
from .core.runner import CommandResult, CommandRunner, SubprocessRunner
from .entries import ConfigurationEntry, ConfigurationSet, Flag, KeyValue
from .invoker import CARGO, CARGO_VARIABLE, RUSTC, CargoInvoker
from .parser import parse_cfg, parse_line
from .query import query_host, query_target, query_with_args
from .target import Cfg, Target, host_cfg, target_cfg

__version__ = "0.1.0"

__all__ = [
    # Errors
    "CargoRustcCfgError",
    "InvocationError",
    "CargoLaunchError",
    "CargoExecutionError",
    "OutputEncodingError",
    "ParseError",
    "MalformedEntryError",
    "MissingOutputError",
    "ConfigError",
    # Process execution
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
    # Entries
    "ConfigurationEntry",
    "ConfigurationSet",
    "Flag",
    "KeyValue",
    # Invocation
    "CARGO",
    "CARGO_VARIABLE",
    "RUSTC",
    "CargoInvoker",
    # Parsing
    "parse_cfg",
    "parse_line",
    # Queries
    "query_host",
    "query_target",
    "query_with_args",
    # Target summary
    "Cfg",
    "Target",
    "host_cfg",
    "target_cfg",
]
