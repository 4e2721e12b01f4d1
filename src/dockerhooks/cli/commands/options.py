#!/usr/bin/env python3
"""
Option helper commands for dockerhooks CLI
"""

from typing import Annotated

import typer

from dockerhooks.utils import process_gpu_options, sanitize as sanitize_name

from ..utils import console, setup_logging


def sanitize(
    value: Annotated[str, typer.Argument(help="String to turn into a name")],
) -> None:
    """
    🏷️ Print VALUE reduced to a container-safe name.
    """
    console.print(sanitize_name(value), markup=False, highlight=False, soft_wrap=True)


def gpu_options(
    create_options: Annotated[
        str, typer.Argument(help="Additional docker create options")
    ],
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose logging")
    ] = False,
) -> None:
    """
    🎮 Resolve --gpus runner_decide from RUNNER_VISIBLE_DEVICES.
    """
    setup_logging(verbose)
    console.print(process_gpu_options(create_options), markup=False, highlight=False, soft_wrap=True)
