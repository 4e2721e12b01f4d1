"""
dockerhooks Utilities

Utility modules for dockerhooks including name sanitizing and GPU option resolution.
"""

from .gpu_options import process_gpu_options
from .sanitize import sanitize

__all__ = ["process_gpu_options", "sanitize"]
