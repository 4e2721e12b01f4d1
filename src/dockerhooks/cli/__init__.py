#!/usr/bin/env python3
"""
CLI Package for dockerhooks
"""

from .app import app, cli_main
from .constants import ExitCode, DEFAULT_DOCKER_EXECUTABLE
from .utils import setup_logging, parse_env_pairs

__all__ = [
    "app",
    "cli_main",
    "ExitCode",
    "DEFAULT_DOCKER_EXECUTABLE",
    "setup_logging",
    "parse_env_pairs",
]
