#!/usr/bin/env python3
"""
Main CLI Application for dockerhooks

This module contains the main Typer app and entry point for the dockerhooks CLI.
"""

import sys
from typing import Annotated

import typer
from rich.traceback import install

from dockerhooks import __version__

from .commands import check_env, docker, gpu_options, sanitize
from .constants import ExitCode
from .utils import console, err_console

# Install rich traceback handler for better error displays
install(show_locals=False)

# Docker flags and create options look like options to click
PASSTHROUGH_SETTINGS = {"allow_extra_args": True, "ignore_unknown_options": True}
# Everything after the first docker argument belongs to docker, even -e and -v
DOCKER_SETTINGS = {**PASSTHROUGH_SETTINGS, "allow_interspersed_args": False}

# Initialize the main Typer app
app = typer.Typer(
    name="dockerhooks",
    help="🐳 dockerhooks - Docker command line adapter for CI runner container hooks",
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=True,
)

# Register commands
app.command(context_settings=DOCKER_SETTINGS)(docker)
app.command()(sanitize)
app.command("gpu-options", context_settings=PASSTHROUGH_SETTINGS)(gpu_options)
app.command("check-env")(check_env)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """
    🐳 dockerhooks

    Runs the docker CLI for a CI job runner with a filtered environment,
    and resolves runner specific container options.
    """
    if version:
        console.print(
            f"🐳 [bold cyan]dockerhooks[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


def cli_main() -> None:
    """Entry point for the CLI application."""
    try:
        app()
    except KeyboardInterrupt:
        err_console.print("\n🛑 [yellow]Operation cancelled by user[/yellow]")
        sys.exit(ExitCode.FAILURE)
    except Exception as e:
        err_console.print(f"💥 [bold red]Unexpected error: {e}[/bold red]")
        err_console.print_exception()
        sys.exit(ExitCode.FAILURE)


if __name__ == "__main__":
    cli_main()
