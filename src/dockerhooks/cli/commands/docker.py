#!/usr/bin/env python3
"""
Docker command for dockerhooks CLI
"""

import sys
from pathlib import Path
from typing import Annotated, List, Optional

import typer

from dockerhooks.core.docker import DockerCommandOptions, DockerCommandRunner
from dockerhooks.core.errors import (
    ConfigurationError,
    ExecutionError,
    ValidationError,
    handle_error,
)

from ..constants import DEFAULT_DOCKER_EXECUTABLE, ExitCode
from ..utils import parse_env_pairs, setup_logging


def docker(
    args: Annotated[
        Optional[List[str]],
        typer.Argument(help="Arguments passed to docker; options after the first one go to docker"),
    ] = None,
    cwd: Annotated[
        Optional[Path],
        typer.Option("--cwd", help="Working directory for docker"),
    ] = None,
    env: Annotated[
        Optional[List[str]],
        typer.Option("--env", "-e", help="KEY=VALUE passed to docker (can specify multiple)"),
    ] = None,
    input_file: Annotated[
        Optional[Path],
        typer.Option(
            "--input-file",
            help="File written to docker's standard input",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    resplit: Annotated[
        bool,
        typer.Option(
            "--resplit/--no-resplit",
            help="Re-tokenize the joined arguments with shell rules",
        ),
    ] = True,
    executable: Annotated[
        str, typer.Option("--executable", help="Docker executable name or path")
    ] = DEFAULT_DOCKER_EXECUTABLE,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose logging")
    ] = False,
) -> None:
    """
    🐳 Run a docker command the way the container hooks do.

    Only the allow-listed Docker CLI variables of the current environment
    are forwarded, overriding any --env value of the same name.
    """
    setup_logging(verbose)

    options = DockerCommandOptions(
        working_dir=str(cwd) if cwd is not None else None,
        input=input_file.read_bytes() if input_file is not None else None,
        env=parse_env_pairs(env),
    )

    try:
        output = DockerCommandRunner(executable=executable).run(
            args or [], options, resplit=resplit
        )
    except ExecutionError as e:
        sys.stderr.write(e.stderr)
        sys.stderr.flush()
        raise typer.Exit(ExitCode.DOCKER_FAILURE)
    except ValidationError as e:
        handle_error(e)
        raise typer.Exit(ExitCode.INVALID_ARGS)
    except ConfigurationError as e:
        handle_error(e)
        raise typer.Exit(ExitCode.CONFIGURATION_ERROR)

    sys.stdout.write(output)
    sys.stdout.flush()
