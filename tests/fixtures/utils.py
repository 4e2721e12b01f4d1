"""Utility functions for tests.
"""

# built-in modules
import os
import stat
from pathlib import Path

# Variables the hooks read from the process environment
HOOK_ENV_VARS = ["GITHUB_WORKSPACE", "RUNNER_VISIBLE_DEVICES"]

# Stand-in for the docker CLI; the first argument picks the behaviour
FAKE_DOCKER_SCRIPT = r"""#!/bin/sh
case "$1" in
  fail)
    printf 'boom' >&2
    exit 1
    ;;
  exit)
    printf 'partial'
    printf 'exit %s' "$2" >&2
    exit "$2"
    ;;
  args)
    shift
    for arg in "$@"; do
      printf '%s\n' "$arg"
    done
    ;;
  show-env)
    shift
    for name in "$@"; do
      eval "value=\${$name-__unset__}"
      printf '%s=%s\n' "$name" "$value"
    done
    ;;
  pwd)
    pwd
    ;;
  stdin)
    while IFS= read -r line; do
      printf 'got:%s\n' "$line"
    done
    ;;
  *)
    printf 'ok\n'
    ;;
esac
"""


def install_fake_docker(directory: Path, name: str = "docker") -> Path:
    """Write the fake docker script into ``directory`` and make it executable.

    Args:
        directory: Directory that will be put on PATH
        name: File name of the executable

    Returns:
        Path to the script
    """
    script = Path(directory) / name
    script.write_text(FAKE_DOCKER_SCRIPT)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


def prepend_path(directory: Path) -> str:
    """Return a PATH value with ``directory`` in front of the current one."""
    return str(directory) + os.pathsep + os.environ.get("PATH", "")
