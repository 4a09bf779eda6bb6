"""
Cargo invocation for compiler configuration queries.

Runs ``cargo rustc [CARGO_ARGS] [--target TRIPLE] -- [RUSTC_ARGS] --print cfg``
so the configuration reflects whatever flags Cargo passes to rustc (for
example from RUSTFLAGS or ``.cargo/config.toml``), not just rustc's defaults.
"""

import logging
from typing import List, Optional, Sequence

from .core.exceptions import CargoExecutionError, OutputEncodingError
from .core.runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)

# Command line name of the Cargo application
CARGO = "cargo"

# Environment variable Cargo sets to its own path when running subcommands
CARGO_VARIABLE = "CARGO"

# Cargo subcommand that forwards extra arguments to the compiler
RUSTC = "rustc"


class CargoInvoker:
    """
    Build and run the Cargo command that prints the compiler configuration.

    Each call to invoke() spawns exactly one process and never retries.
    """

    def __init__(self, cargo: str = CARGO, runner: Optional[CommandRunner] = None):
        """
        Initialize invoker.

        Args:
            cargo: Cargo executable name or path
            runner: Command runner (defaults to SubprocessRunner)
        """
        self.cargo = str(cargo)
        self.runner = runner or SubprocessRunner()

    def build_command(
        self,
        triple: Optional[str] = None,
        cargo_args: Sequence[str] = (),
        rustc_args: Sequence[str] = (),
    ) -> List[str]:
        """
        Build the argument list for a configuration query.

        Args:
            triple: Target triple for a cross-compilation query, None for host
            cargo_args: Extra arguments for ``cargo rustc`` before ``--``
            rustc_args: Extra arguments for rustc placed before ``--print cfg``

        Returns:
            Complete argument list, program first
        """
        command = [self.cargo, RUSTC]
        command.extend(cargo_args)
        if triple is not None:
            command.extend(["--target", triple])
        command.append("--")
        command.extend(rustc_args)
        command.extend(["--print", "cfg"])
        return command

    def invoke(
        self,
        triple: Optional[str] = None,
        cargo_args: Sequence[str] = (),
        rustc_args: Sequence[str] = (),
    ) -> str:
        """
        Run the configuration query and return its standard output.

        Args:
            triple: Target triple for a cross-compilation query, None for host
            cargo_args: Extra arguments for ``cargo rustc`` before ``--``
            rustc_args: Extra arguments for rustc placed before ``--print cfg``

        Returns:
            Standard output decoded as UTF-8

        Raises:
            CargoLaunchError: If Cargo cannot be launched
            CargoExecutionError: If Cargo exits with a non-zero status
            OutputEncodingError: If the output is not valid UTF-8
        """
        command = self.build_command(triple, cargo_args, rustc_args)
        context = f"target {triple}" if triple is not None else "host"
        logger.debug(f"Querying {context} configuration: {' '.join(command)}")

        result = self.runner.run(command)

        if not result.success:
            stderr = result.stderr.decode("utf-8", errors="replace")
            logger.debug(f"Cargo failed with status {result.returncode}")
            raise CargoExecutionError(command, result.returncode, stderr)

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise OutputEncodingError(command, str(e)) from e


__all__ = [
    "CARGO",
    "CARGO_VARIABLE",
    "RUSTC",
    "CargoInvoker",
]
