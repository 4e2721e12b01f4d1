#!/usr/bin/env python3
"""
Environment check command for dockerhooks CLI
"""

import typer

from dockerhooks.core.docker import WORKSPACE_ENV, check_environment
from dockerhooks.core.errors import ConfigurationError, handle_error

from ..constants import ExitCode
from ..utils import console, setup_logging


def check_env() -> None:
    """
    🔎 Check that the runner workspace variable is set.
    """
    setup_logging()

    try:
        check_environment()
    except ConfigurationError as e:
        handle_error(e)
        raise typer.Exit(ExitCode.CONFIGURATION_ERROR)

    console.print(f"✅ [bold green]{WORKSPACE_ENV} is set[/bold green]")
