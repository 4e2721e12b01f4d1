#!/usr/bin/env python3
"""
Constants and configuration for dockerhooks CLI
"""

from dockerhooks.core.docker import DEFAULT_DOCKER_EXECUTABLE


# Exit codes
class ExitCode:
    """Exit codes for CLI commands."""

    SUCCESS = 0
    FAILURE = 1
    DOCKER_FAILURE = 2
    CONFIGURATION_ERROR = 3
    INVALID_ARGS = 4


__all__ = ["ExitCode", "DEFAULT_DOCKER_EXECUTABLE"]
