"""Best-effort installation of the Koa type declarations."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from strapi_webhook_proxy.contracts.outcome import StepOutcome

logger = logging.getLogger(__name__)

STEP = "install"


def install_type_declarations(project_root: Path, command: Sequence[str]) -> StepOutcome:
    """Run the package manager with inherited console I/O.

    Failures never raise; the outcome carries the command to run by hand.
    """
    printable = " ".join(command)
    logger.debug("Running: %s (cwd=%s)", printable, project_root)
    try:
        subprocess.run(list(command), cwd=project_root, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.debug("Install command failed: %s", exc)
        return StepOutcome.failed(STEP, f"Failed to install {command[-1]}. Please run: {printable}")
    return StepOutcome.applied(STEP, f"Installed {command[-1]}")
