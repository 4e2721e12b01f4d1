#!/usr/bin/env python3
"""Module to run docker commands.

This module provides the runner used by the CI hooks to invoke the docker
command line with a normalized argument list and a filtered environment.
"""
# built-in modules
import logging
import os
import shlex
import shutil
import typing
from dataclasses import dataclass
# user-defined modules
from dockerhooks.core.console import Console
from dockerhooks.core.errors import (
    ConfigurationError,
    ExecutionError,
    ValidationError,
    create_error_context,
)


logger = logging.getLogger(__name__)

WORKSPACE_ENV = "GITHUB_WORKSPACE"
DEFAULT_DOCKER_EXECUTABLE = "docker"

# From https://docs.docker.com/engine/reference/commandline/cli/#environment-variables
DOCKER_CLI_ENVS = frozenset([
    "DOCKER_API_VERSION",
    "DOCKER_CERT_PATH",
    "DOCKER_CONFIG",
    "DOCKER_CONTENT_TRUST_SERVER",
    "DOCKER_CONTENT_TRUST",
    "DOCKER_CONTEXT",
    "DOCKER_DEFAULT_PLATFORM",
    "DOCKER_HIDE_LEGACY_COMMANDS",
    "DOCKER_HOST",
    "DOCKER_STACK_ORCHESTRATOR",
    "DOCKER_TLS_VERIFY",
    "BUILDKIT_PROGRESS",
])


@dataclass
class DockerCommandOptions:
    """Options of a single docker invocation."""
    working_dir: typing.Optional[str] = None
    input: typing.Optional[bytes] = None
    env: typing.Optional[typing.Dict[str, str]] = None


def options_with_docker_envs(
        options: typing.Optional[DockerCommandOptions]=None
    ) -> DockerCommandOptions:
    """Return a copy of ``options`` with the docker CLI variables applied.

    Every allow-listed variable set in the current process environment
    overwrites the caller supplied value of the same name. The caller's
    mapping is left untouched.
    """
    docker_envs = {
        key: value for key, value in os.environ.items() if key in DOCKER_CLI_ENVS
    }

    env = dict(options.env) if options is not None and options.env else {}
    # Set docker envs or overwrite provided ones
    env.update(docker_envs)

    return DockerCommandOptions(
        working_dir=options.working_dir if options is not None else None,
        input=options.input if options is not None else None,
        env=env,
    )


def fix_args(args: typing.List[str]) -> typing.List[str]:
    """Join ``args`` with spaces and split them again with shell rules."""
    return shlex.split(" ".join(args))


def check_environment() -> None:
    """Check that the runner workspace is configured.

    Raises:
        ConfigurationError: If GITHUB_WORKSPACE is not set.
    """
    if not os.environ.get(WORKSPACE_ENV):
        raise ConfigurationError(
            f"{WORKSPACE_ENV} is not set",
            context=create_error_context("check_environment", component="docker"),
            suggestions=[f"Export {WORKSPACE_ENV} to the job workspace directory"],
        )


class DockerCommandRunner:
    """Class to run docker commands.

    Attributes:
        console (Console): The console object.
        executable (str): Name or path of the docker executable.
    """

    def __init__(
        self,
        console: typing.Optional[Console] = None,
        executable: str = DEFAULT_DOCKER_EXECUTABLE,
    ) -> None:
        """Constructor of the DockerCommandRunner class.

        Args:
            console (Console): The console object.
            executable (str): Name or path of the docker executable.
        """
        self.console = console or Console()
        self.executable = executable

    def run(
            self,
            args: typing.List[str],
            options: typing.Optional[DockerCommandOptions]=None,
            resplit: bool=True,
        ) -> str:
        """Run docker with ``args`` and return its standard output.

        Args:
            args (list): The docker arguments, e.g. ``["ps", "-a"]``.
            options (DockerCommandOptions): Working directory, input and env.
            resplit (bool): Re-tokenize the joined arguments with shell rules.

        Returns:
            str: The captured standard output.

        Raises:
            ValidationError: If the arguments cannot be split or none remain.
            ConfigurationError: If the docker executable cannot be found.
            ExecutionError: If docker exits with a non-zero status.
        """
        options = options_with_docker_envs(options)
        if resplit:
            try:
                args = fix_args(args)
            except ValueError as e:
                raise ValidationError(
                    f"Cannot split docker arguments: {e}",
                    context=create_error_context("run", component="DockerCommandRunner"),
                    suggestions=["Balance the quotes in the docker arguments"],
                    cause=e,
                ) from e
        else:
            args = list(args)

        if not args:
            raise ValidationError(
                "No docker arguments given",
                context=create_error_context("run", component="DockerCommandRunner"),
            )

        # The child env only holds docker variables, so resolve with our PATH
        executable = shutil.which(self.executable)
        if executable is None:
            raise ConfigurationError(
                f"Executable '{self.executable}' was not found on PATH",
                context=create_error_context("run", component="DockerCommandRunner"),
                suggestions=["Install the docker CLI or add it to PATH"],
            )

        pipes = self.console.run(
            [executable] + args,
            cwd=options.working_dir,
            input=options.input,
            env=options.env,
        )
        if pipes.exit_code != 0:
            logger.error(f"Docker failed with exit code {pipes.exit_code}")
            raise ExecutionError(
                pipes.stderr,
                exit_code=pipes.exit_code,
                stdout=pipes.stdout,
                context=create_error_context(
                    "run",
                    component="DockerCommandRunner",
                    command=shlex.join([self.executable] + args),
                ),
            )
        return pipes.stdout


def run_docker_command(
        args: typing.List[str],
        options: typing.Optional[DockerCommandOptions]=None,
    ) -> str:
    """Run docker with the default runner and return its standard output."""
    return DockerCommandRunner().run(args, options)
