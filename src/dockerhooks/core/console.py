#!/usr/bin/env python3
"""Module to run console commands.

This module provides a class to run an argument vector as a child process
and capture its exit code, standard output and standard error.
"""
# built-in modules
import logging
import shlex
import subprocess
import typing
from dataclasses import dataclass
# user-defined modules
from dockerhooks.core.errors import ExecutionError, create_error_context


logger = logging.getLogger(__name__)


@dataclass
class ExecOutput:
    """Result of a finished child process."""
    exit_code: int
    stdout: str
    stderr: str


class Console:
    """Class to run console commands.

    Attributes:
        shellVerbose (bool): Log each command line before running it.
    """
    def __init__(self, shellVerbose: bool=True) -> None:
        """Constructor of the Console class.

        Args:
            shellVerbose (bool): The shell verbose flag.
        """
        self.shellVerbose = shellVerbose

    def run(
            self,
            argv: typing.List[str],
            cwd: typing.Optional[str]=None,
            input: typing.Optional[bytes]=None,
            env: typing.Optional[typing.Dict[str, str]]=None,
            timeout: typing.Optional[float]=None,
        ) -> ExecOutput:
        """Run a command and wait for it to finish.

        Args:
            argv (list): The executable followed by its arguments.
            cwd (str): The working directory of the child.
            input (bytes): Data written to the child's standard input.
            env (dict): The complete environment of the child.
            timeout (float): Seconds to wait; None waits forever.

        Returns:
            ExecOutput: The exit code and the decoded output streams.

        Raises:
            ExecutionError: If the timeout expires.
        """
        if self.shellVerbose:
            logger.debug("> %s", shlex.join(argv))

        # Run in BINARY mode to handle UTF-8 safely
        proc = subprocess.Popen(
            argv,
            stdin=subprocess.PIPE if input is not None else subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=cwd,
            env=env,
        )

        try:
            raw_outs, raw_errs = proc.communicate(input=input, timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            proc.kill()
            _, raw_errs = proc.communicate()
            raise ExecutionError(
                raw_errs.decode("utf-8", errors="replace"),
                message=f"Command timed out after {timeout} seconds",
                context=create_error_context(
                    "run", component="Console", command=shlex.join(argv)
                ),
                cause=exc,
            ) from exc

        return ExecOutput(
            exit_code=proc.returncode,
            stdout=raw_outs.decode("utf-8", errors="replace"),
            stderr=raw_errs.decode("utf-8", errors="replace"),
        )
