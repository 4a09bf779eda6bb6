"""
Centralized exception hierarchy for cargo-rustc-cfg.

Every failure raised while querying or parsing the compiler configuration
derives from CargoRustcCfgError, so callers can catch a single type.
"""

from typing import Optional, Sequence


# ============================================================================
# Base Exceptions
# ============================================================================


class CargoRustcCfgError(Exception):
    """Base exception for all cargo-rustc-cfg errors."""

    pass


# ============================================================================
# Invocation Exceptions
# ============================================================================


class InvocationError(CargoRustcCfgError):
    """Base exception for failures while running the Cargo subprocess."""

    def __init__(self, message: str, command: Optional[Sequence[str]] = None):
        self.command = list(command) if command else []
        super().__init__(message)


class CargoLaunchError(InvocationError):
    """Raised when the Cargo binary cannot be located or launched."""

    def __init__(self, command: Sequence[str], reason: str):
        self.reason = reason
        program = command[0] if command else "<empty command>"
        super().__init__(f"Failed to launch '{program}': {reason}", command)


class CargoExecutionError(InvocationError):
    """Raised when the Cargo subprocess exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command '{' '.join(command)}' exited with status {returncode}"
        if stderr.strip():
            msg += f": {stderr.strip()}"
        super().__init__(msg, command)


class OutputEncodingError(InvocationError):
    """Raised when captured standard output is not valid UTF-8 text."""

    def __init__(self, command: Sequence[str], reason: str):
        self.reason = reason
        super().__init__(
            f"Output of '{' '.join(command)}' is not valid UTF-8: {reason}", command
        )


# ============================================================================
# Parsing Exceptions
# ============================================================================


class ParseError(CargoRustcCfgError):
    """Base exception for configuration output parsing errors."""

    pass


class MalformedEntryError(ParseError):
    """Raised when a line of output does not follow the cfg line grammar."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(
            f"Malformed cfg entry on line {line_number} ({line!r}): {reason}"
        )


class MissingOutputError(ParseError):
    """Raised when a required target key is absent from the output."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"The '{key}' is missing from the output")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(CargoRustcCfgError):
    """Settings file parsing or validation error."""

    pass
