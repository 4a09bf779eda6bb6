"""
Pytest configuration and shared fixtures for cargo-rustc-cfg tests.
"""

import shutil
from typing import Callable, List, Optional, Sequence

import pytest

from cargo_rustc_cfg.core.runner import CommandResult, CommandRunner


LINUX_HOST_OUTPUT = """\
debug_assertions
panic="unwind"
target_abi=""
target_arch="x86_64"
target_endian="little"
target_env="gnu"
target_family="unix"
target_feature="fxsr"
target_feature="sse"
target_feature="sse2"
target_has_atomic="16"
target_has_atomic="32"
target_has_atomic="64"
target_has_atomic="8"
target_has_atomic="ptr"
target_os="linux"
target_pointer_width="64"
target_vendor="unknown"
unix
"""

WINDOWS_MSVC_OUTPUT = """\
debug_assertions
panic="unwind"
target_arch="x86"
target_endian="little"
target_env="msvc"
target_family="windows"
target_feature="crt-static"
target_feature="fxsr"
target_feature="sse"
target_feature="sse2"
target_os="windows"
target_pointer_width="32"
target_vendor="pc"
windows
"""

BARE_METAL_OUTPUT = """\
debug_assertions
panic="abort"
target_abi="eabihf"
target_arch="arm"
target_endian="little"
target_env=""
target_os="none"
target_pointer_width="32"
target_vendor=""
"""


class CannedRunner(CommandRunner):
    """CommandRunner that records commands and replays prepared results."""

    def __init__(
        self,
        stdout: bytes = b"",
        stderr: bytes = b"",
        returncode: int = 0,
        error: Optional[Exception] = None,
    ):
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.error = error
        self.calls: List[List[str]] = []

    def run(self, args: Sequence[str]) -> CommandResult:
        self.calls.append(list(args))
        if self.error is not None:
            raise self.error
        return CommandResult(
            args=list(args),
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        )


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that invoke a real cargo",
    )


def pytest_collection_modifyitems(config, items):
    """
    Skip integration tests unless --integration flag is provided.
    Integration tests are also skipped when cargo is not on PATH.
    """
    if not config.getoption("--integration"):
        skip = pytest.mark.skip(reason="need --integration option to run")
    elif shutil.which("cargo") is None:
        skip = pytest.mark.skip(reason="cargo not found in PATH")
    else:
        return
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that run a real cargo (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def canned_runner() -> Callable[..., CannedRunner]:
    """Factory for CannedRunner instances."""

    def factory(stdout="", stderr="", returncode=0, error=None) -> CannedRunner:
        if isinstance(stdout, str):
            stdout = stdout.encode("utf-8")
        if isinstance(stderr, str):
            stderr = stderr.encode("utf-8")
        return CannedRunner(stdout, stderr, returncode, error)

    return factory


@pytest.fixture
def linux_host_output() -> str:
    """Output of --print cfg for x86_64-unknown-linux-gnu."""
    return LINUX_HOST_OUTPUT


@pytest.fixture
def windows_msvc_output() -> str:
    """Output of --print cfg for i686-pc-windows-msvc with crt-static."""
    return WINDOWS_MSVC_OUTPUT


@pytest.fixture
def bare_metal_output() -> str:
    """Output of --print cfg for thumbv7em-none-eabihf."""
    return BARE_METAL_OUTPUT


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run the test in an empty directory with no CARGO variable set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CARGO", raising=False)
    return tmp_path
