"""
Process execution interface for cargo-rustc-cfg.

The invoker never spawns processes itself. It hands an argument list to a
CommandRunner, which lets tests substitute canned output for a real toolchain.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .exceptions import CargoLaunchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """
    Captured outcome of one finished process.

    Attributes:
        args: Argument list that was executed
        returncode: Process exit status
        stdout: Raw standard output bytes
        stderr: Raw standard error bytes
    """

    args: List[str]
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        """Whether the process exited with status zero."""
        return self.returncode == 0


class CommandRunner(ABC):
    """
    Abstract interface for components that execute external commands.

    Implementations run the command to completion and return its captured
    output. Failing to start the program at all must raise CargoLaunchError;
    a non-zero exit status is reported through CommandResult, not raised.
    """

    @abstractmethod
    def run(self, args: Sequence[str]) -> CommandResult:
        """
        Execute a command and wait for it to finish.

        Args:
            args: Program followed by its arguments

        Returns:
            CommandResult with exit status and captured output

        Raises:
            CargoLaunchError: If the program cannot be located or launched
        """
        pass


class SubprocessRunner(CommandRunner):
    """Run commands with subprocess.run, capturing stdout and stderr as bytes."""

    def __init__(self, cwd: Optional[Path] = None):
        """
        Initialize runner.

        Args:
            cwd: Working directory for commands (defaults to the current one)
        """
        self.cwd = cwd

    def run(self, args: Sequence[str]) -> CommandResult:
        argv = [str(arg) for arg in args]
        logger.debug(f"Running: {' '.join(argv)}")

        try:
            result = subprocess.run(
                argv, capture_output=True, check=False, cwd=self.cwd
            )
        except FileNotFoundError as e:
            raise CargoLaunchError(argv, "executable not found") from e
        except PermissionError as e:
            raise CargoLaunchError(argv, "permission denied") from e
        except OSError as e:
            raise CargoLaunchError(argv, str(e)) from e

        logger.debug(f"'{argv[0]}' exited with status {result.returncode}")
        return CommandResult(
            args=argv,
            returncode=result.returncode,
            stdout=result.stdout or b"",
            stderr=result.stderr or b"",
        )


__all__ = [
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
]
