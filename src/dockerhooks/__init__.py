"""
dockerhooks

Docker command line adapter for CI job runner container hooks.
"""

from dockerhooks.core.docker import (
    DOCKER_CLI_ENVS,
    DockerCommandOptions,
    DockerCommandRunner,
    check_environment,
    fix_args,
    options_with_docker_envs,
    run_docker_command,
)
from dockerhooks.core.errors import ConfigurationError, ExecutionError, ValidationError
from dockerhooks.utils import process_gpu_options, sanitize

__version__ = "0.1.0"

__all__ = [
    "DOCKER_CLI_ENVS",
    "DockerCommandOptions",
    "DockerCommandRunner",
    "check_environment",
    "fix_args",
    "options_with_docker_envs",
    "run_docker_command",
    "ConfigurationError",
    "ExecutionError",
    "ValidationError",
    "process_gpu_options",
    "sanitize",
    "__version__",
]
