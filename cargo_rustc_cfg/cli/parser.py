"""
cargo-rustc-cfg CLI argument parser.

This module implements the command-line interface using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config.settings import OUTPUT_FORMATS, Settings, load_settings
from ..core.exceptions import CargoExecutionError, CargoRustcCfgError
from ..invoker import CargoInvoker
from ..query import query_host, query_target
from .utils import QueryResult, print_error, render

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("cargo-rustc-cfg")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

# First argument Cargo passes when invoked as "cargo rustc-cfg"
SUBCOMMAND = "rustc-cfg"


class CLI:
    """cargo-rustc-cfg command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="cargo-rustc-cfg",
            usage="%(prog)s [options] [-- RUSTC_ARGS...]",
            description=(
                "Print the Rust compiler configuration as seen through Cargo "
                "(cargo rustc -- --print cfg)"
            ),
            epilog=(
                "Arguments after '--' are passed to rustc before '--print cfg', "
                'e.g. "cargo-rustc-cfg -- -C target-feature=+crt-static"'
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"cargo-rustc-cfg {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to settings file (default: ./cargo-rustc-cfg.yaml)",
        )

        # Query options
        parser.add_argument(
            "--cargo",
            metavar="PATH",
            help="Cargo executable (default: $CARGO or 'cargo')",
        )
        parser.add_argument(
            "--target",
            action="append",
            metavar="TRIPLE",
            help=(
                "Also query a cross-compilation target triple, e.g. "
                "x86_64-unknown-linux-gnu (can be used multiple times)"
            ),
        )
        parser.add_argument(
            "--cargo-arg",
            action="append",
            dest="cargo_args",
            metavar="ARG",
            help="Additional 'cargo rustc' argument (can be used multiple times)",
        )
        parser.add_argument(
            "--format",
            choices=OUTPUT_FORMATS,
            metavar="FORMAT",
            help="Output format (text|json|yaml) [default: text]",
        )
        parser.add_argument(
            "--summary",
            action="store_true",
            help="Print the target summary (arch, os, features, ...) only",
        )
        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Everything after the first ``--`` is collected into ``rustc_args``
        untouched, so rustc options never clash with our own.

        When run as ``cargo rustc-cfg``, Cargo passes the subcommand name as the
        first argument; it is dropped.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        args = list(sys.argv[1:] if args is None else args)
        if args and args[0] == SUBCOMMAND:
            args = args[1:]
        rustc_args: List[str] = []
        if "--" in args:
            separator = args.index("--")
            rustc_args = args[separator + 1 :]
            args = args[:separator]

        parsed_args = self.parser.parse_args(args)
        parsed_args.rustc_args = rustc_args
        return parsed_args

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        try:
            settings = self._resolve_settings(parsed_args)
            results = self._query(settings)
            output = render(results, settings.format, parsed_args.summary)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except CargoExecutionError as e:
            print_error(
                f"Cargo exited with status {e.returncode}: {' '.join(e.command)}",
                e.stderr,
            )
            return 1
        except CargoRustcCfgError as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

        sys.stdout.write(output)
        return 0

    def _resolve_settings(self, args) -> Settings:
        """
        Merge the settings file with command-line overrides.

        Args:
            args: Parsed arguments

        Returns:
            Effective settings
        """
        settings = load_settings(args.config)

        if args.cargo:
            settings.cargo = args.cargo
        if args.cargo_args:
            settings.cargo_args = list(args.cargo_args)
        if args.rustc_args:
            settings.rustc_args = list(args.rustc_args)
        if args.target:
            settings.targets = list(args.target)
        if args.format:
            settings.format = args.format

        logger.debug(f"Effective settings: {settings}")
        return settings

    def _query(self, settings: Settings) -> List[QueryResult]:
        """
        Query the host and every requested target.

        Args:
            settings: Effective settings

        Returns:
            Host result first, then one result per target in the given order
        """
        invoker = CargoInvoker(cargo=settings.cargo)
        results: List[QueryResult] = [
            (
                None,
                query_host(invoker, settings.cargo_args, settings.rustc_args),
            )
        ]
        for triple in settings.targets:
            results.append(
                (
                    triple,
                    query_target(
                        triple, invoker, settings.cargo_args, settings.rustc_args
                    ),
                )
            )
        return results

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
