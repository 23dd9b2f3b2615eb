# CLI Interface

from .app import run_cli, build_descriptor, setup_logging
