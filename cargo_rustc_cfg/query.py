"""
Public query operations.

Every query runs Cargo once and parses its output once. Host and target
queries share nothing, so callers may run them concurrently.
"""

import logging
from typing import Optional, Sequence

from .entries import ConfigurationSet
from .invoker import CargoInvoker
from .parser import parse_cfg

logger = logging.getLogger(__name__)


def query_host(
    invoker: Optional[CargoInvoker] = None,
    cargo_args: Sequence[str] = (),
    rustc_args: Sequence[str] = (),
) -> ConfigurationSet:
    """
    Query the configuration for the default (host) compiler target.

    Runs ``cargo rustc -- --print cfg``.

    Args:
        invoker: Invoker to use (a new CargoInvoker by default)
        cargo_args: Extra arguments for ``cargo rustc``
        rustc_args: Extra arguments for rustc

    Returns:
        Parsed configuration

    Raises:
        CargoRustcCfgError: Any launch, execution, encoding or parse failure
    """
    invoker = invoker or CargoInvoker()
    return parse_cfg(invoker.invoke(None, cargo_args, rustc_args))


def query_target(
    triple: str,
    invoker: Optional[CargoInvoker] = None,
    cargo_args: Sequence[str] = (),
    rustc_args: Sequence[str] = (),
) -> ConfigurationSet:
    """
    Query the configuration for a cross-compilation target triple.

    Runs ``cargo rustc --target <TRIPLE> -- --print cfg``. The triple is passed
    through as given; an unknown triple is reported by Cargo as a
    CargoExecutionError.

    Args:
        triple: Target triple (e.g., 'x86_64-unknown-linux-gnu')
        invoker: Invoker to use (a new CargoInvoker by default)
        cargo_args: Extra arguments for ``cargo rustc``
        rustc_args: Extra arguments for rustc

    Returns:
        Parsed configuration

    Raises:
        CargoRustcCfgError: Any launch, execution, encoding or parse failure

    Example:
        >>> config = query_target("i686-pc-windows-msvc")
        >>> config.get("target_pointer_width")
        '32'
    """
    invoker = invoker or CargoInvoker()
    return parse_cfg(invoker.invoke(triple, cargo_args, rustc_args))


def query_with_args(
    cargo_args: Sequence[str],
    rustc_args: Sequence[str] = (),
    invoker: Optional[CargoInvoker] = None,
) -> ConfigurationSet:
    """
    Query the configuration with custom ``cargo rustc`` and rustc arguments.

    Runs ``cargo rustc <CARGO_ARGS> -- <RUSTC_ARGS> --print cfg``. Arguments
    are passed through untouched, so ``["--target", triple]`` here behaves
    like query_target().

    Args:
        cargo_args: Arguments for ``cargo rustc`` before ``--``
        rustc_args: Arguments for rustc placed before ``--print cfg``
        invoker: Invoker to use (a new CargoInvoker by default)

    Returns:
        Parsed configuration
    """
    invoker = invoker or CargoInvoker()
    return parse_cfg(invoker.invoke(None, cargo_args, rustc_args))


__all__ = [
    "query_host",
    "query_target",
    "query_with_args",
]
