#!/usr/bin/env python3
"""
Unified error handling for dockerhooks

This module provides the error taxonomy raised by the Docker command
runner and a Rich based handler that renders those errors for the CLI.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


class ErrorCategory(Enum):
    """Categories of dockerhooks errors."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    EXECUTION = "execution"


@dataclass
class ErrorContext:
    """Where and while doing what an error happened."""

    operation: str
    phase: Optional[str] = None
    component: Optional[str] = None
    command: Optional[str] = None
    additional_info: Optional[Dict[str, Any]] = None


class DockerHooksError(Exception):
    """Base class for all dockerhooks errors.

    Attributes:
        message (str): Human readable description.
        category (ErrorCategory): The error category.
        context (ErrorContext): Optional context of the failing operation.
        recoverable (bool): Whether retrying with different input may succeed.
        suggestions (list): Hints shown to the user.
        cause (Exception): The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        context: Optional[ErrorContext] = None,
        recoverable: bool = False,
        suggestions: Optional[List[str]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category
        self.context = context
        self.recoverable = recoverable
        self.suggestions = suggestions or []
        self.cause = cause


class ValidationError(DockerHooksError):
    """Invalid input handed to dockerhooks."""

    def __init__(self, message: str, **kwargs) -> None:
        kwargs.setdefault("recoverable", True)
        super().__init__(message, ErrorCategory.VALIDATION, **kwargs)


class ConfigurationError(DockerHooksError):
    """Missing or invalid environment configuration."""

    def __init__(self, message: str, **kwargs) -> None:
        kwargs.setdefault("recoverable", True)
        super().__init__(message, ErrorCategory.CONFIGURATION, **kwargs)


class ExecutionError(DockerHooksError):
    """The Docker executable exited with a non-zero status.

    Unless ``message`` is given, the error message is the captured standard
    error of the process, so ``str(error)`` is exactly what Docker reported.
    ``stderr`` always holds the captured standard error only.
    """

    def __init__(
        self,
        stderr: str,
        exit_code: Optional[int] = None,
        stdout: str = "",
        message: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(
            message if message is not None else stderr, ErrorCategory.EXECUTION, **kwargs
        )
        self.stderr = stderr
        self.stdout = stdout
        self.exit_code = exit_code


_CATEGORY_STYLES = {
    ErrorCategory.VALIDATION: ("⚠️", "Validation Error", "yellow"),
    ErrorCategory.CONFIGURATION: ("⚙️", "Configuration Error", "yellow"),
    ErrorCategory.EXECUTION: ("🐳", "Execution Error", "red"),
}


class ErrorHandler:
    """Render errors on a Rich console and mirror them to logging."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False) -> None:
        self.console = console or Console(stderr=True)
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)

    def handle_error(
        self,
        error: BaseException,
        context: Optional[ErrorContext] = None,
        show_traceback: bool = False,
    ) -> None:
        """Display an error panel for ``error``.

        Args:
            error: The exception to display.
            context: Context used when the error does not carry its own.
            show_traceback: Print the traceback as well (verbose mode only).
        """
        if isinstance(error, DockerHooksError):
            emoji, title, style = _CATEGORY_STYLES.get(
                error.category, ("❌", "Error", "red")
            )
            context = error.context or context
            suggestions = error.suggestions
            cause = error.cause
        else:
            emoji, title, style = "❌", type(error).__name__, "red"
            suggestions = []
            cause = None

        body = Text(str(error) or title, style="bold")
        if context is not None:
            body.append(f"\n\nOperation: {context.operation}", style="dim")
            if context.component:
                body.append(f"\nComponent: {context.component}", style="dim")
            if context.command:
                body.append(f"\nCommand: {context.command}", style="dim")
        if cause is not None:
            body.append(f"\n\nCaused by: {type(cause).__name__}: {cause}", style="dim")
        if suggestions:
            body.append("\n\n💡 Suggestions:")
            for suggestion in suggestions:
                body.append(f"\n  • {suggestion}")

        self.console.print(
            Panel(body, title=f"{emoji} {title}", border_style=style, expand=False)
        )
        self.logger.debug("Handled %s: %s", type(error).__name__, error)

        if show_traceback and self.verbose:
            self.console.print_exception()


_error_handler: Optional[ErrorHandler] = None


def set_error_handler(handler: Optional[ErrorHandler]) -> None:
    """Install the process wide error handler."""
    global _error_handler
    _error_handler = handler


def get_error_handler() -> Optional[ErrorHandler]:
    """Return the process wide error handler, if one was installed."""
    return _error_handler


def handle_error(
    error: BaseException,
    context: Optional[ErrorContext] = None,
    show_traceback: bool = False,
) -> None:
    """Route ``error`` to the installed handler, or to logging without one."""
    if _error_handler is None:
        logging.error("%s: %s", type(error).__name__, error)
        return
    _error_handler.handle_error(error, context=context, show_traceback=show_traceback)


def create_error_context(operation: str, **kwargs) -> ErrorContext:
    """Convenience constructor for :class:`ErrorContext`."""
    return ErrorContext(operation=operation, **kwargs)
