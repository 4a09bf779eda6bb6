"""
Entry point for running cargo-rustc-cfg as a module.

Usage: python -m cargo_rustc_cfg [options] [-- RUSTC_ARGS...]
"""

from cargo_rustc_cfg.cli.parser import main

if __name__ == "__main__":
    main()
