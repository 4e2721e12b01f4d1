"""
CLI Commands for dockerhooks
"""

from .docker import docker
from .environment import check_env
from .options import gpu_options, sanitize

__all__ = ["docker", "check_env", "gpu_options", "sanitize"]
