#!/usr/bin/env python3
"""
Utility functions for dockerhooks CLI
"""

import logging
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from dockerhooks.core.errors import ErrorHandler, set_error_handler
from .constants import ExitCode


# Initialize Rich consoles; diagnostics go to stderr so stdout stays docker's
console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Setup Rich logging configuration and unified error handler."""
    log_level = logging.DEBUG if verbose else logging.INFO

    rich_handler = RichHandler(
        console=err_console,
        show_time=True,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
    )

    error_handler = ErrorHandler(console=err_console, verbose=verbose)
    set_error_handler(error_handler)


def parse_env_pairs(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` strings into a mapping.

    Later pairs win over earlier ones. The value may itself contain ``=``.

    Raises:
        typer.Exit: If a pair has no ``=`` or an empty key.
    """
    env = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            err_console.print(f"❌ Invalid environment variable: [red]{pair}[/red]")
            err_console.print("💡 Use the form [green]KEY=VALUE[/green]")
            raise typer.Exit(ExitCode.INVALID_ARGS)
        env[key] = value
    return env
