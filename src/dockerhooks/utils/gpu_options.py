"""
GPU placeholder resolution for container create options

The runner may ask for ``--gpus runner_decide`` in a job's container
options. The actual devices are only known on the host, which exports them
through ``RUNNER_VISIBLE_DEVICES``.

Handled forms:
    --gpus runner_decide
    --gpus=runner_decide
    --gpus "runner_decide"
    --gpus='runner_decide'
"""

import logging
import os
import re
from typing import Optional

logger = logging.getLogger(__name__)

VISIBLE_DEVICES_ENV = "RUNNER_VISIBLE_DEVICES"
GPU_PLACEHOLDER = "runner_decide"

GPU_PATTERN = re.compile(r"(--gpus[=\s]+)(['\"]?)" + GPU_PLACEHOLDER + r"\2")


def process_gpu_options(create_options: Optional[str]) -> Optional[str]:
    """
    Replace the GPU placeholder in ``create_options``.

    Args:
        create_options: Additional ``docker create`` options as one string

    Returns:
        The options with every placeholder replaced by the visible devices in
        double quotes, or removed (and the result stripped) when no devices
        are visible. Input without a placeholder is returned unchanged.
    """
    if not create_options:
        return create_options

    if not GPU_PATTERN.search(create_options):
        return create_options

    visible_devices = os.environ.get(VISIBLE_DEVICES_ENV)

    if not visible_devices:
        logger.warning(
            f"Hook: Found --gpus {GPU_PLACEHOLDER} but {VISIBLE_DEVICES_ENV} is not set. "
            "GPU allocation will be skipped."
        )
        return GPU_PATTERN.sub("", create_options).strip()

    logger.info(f"Hook: Replacing --gpus {GPU_PLACEHOLDER} with --gpus {visible_devices}")
    # Callable replacement keeps backslashes in the device list literal
    return GPU_PATTERN.sub(
        lambda match: f'{match.group(1)}"{visible_devices}"', create_options
    )
