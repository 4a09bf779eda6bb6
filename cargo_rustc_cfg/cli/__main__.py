"""
Entry point for running the CLI as a module.

Usage: python -m cargo_rustc_cfg.cli [options] [-- RUSTC_ARGS...]
"""

from .parser import main

if __name__ == "__main__":
    main()
