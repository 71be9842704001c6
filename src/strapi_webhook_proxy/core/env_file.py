"""Add GitHub placeholder variables to a project's ``.env`` file."""

from __future__ import annotations

import logging
from pathlib import Path

from strapi_webhook_proxy.contracts.outcome import StepOutcome

logger = logging.getLogger(__name__)

STEP = "env"
ENV_FILE = ".env"
MARKER = "GITHUB_PAT"

ENV_VARIABLES: dict[str, str] = {
    "GITHUB_PAT": "github_pat_{TOKEN}",
    "GITHUB_URL": "https://api.github.com/repos/{OWNER}/{REPO}",
    "GITHUB_EVENT_TYPE": "strapi_triggers_github_workflow",
}


def env_block() -> str:
    lines = ["", "# GitHub Webhook Proxy"]
    lines.extend(f"{name}={value}" for name, value in ENV_VARIABLES.items())
    return "\n".join(lines) + "\n"


def ensure_env_block(project_root: Path) -> StepOutcome:
    """Create or append the GitHub block; no-op when ``GITHUB_PAT`` is already there."""
    env_path = project_root / ENV_FILE
    try:
        if not env_path.exists():
            env_path.write_text(env_block(), encoding="utf-8")
            return StepOutcome.applied(STEP, f"Created {ENV_FILE} with GitHub variables")

        if MARKER in env_path.read_text(encoding="utf-8"):
            logger.debug("%s already defines %s", env_path, MARKER)
            return StepOutcome.skipped(STEP, f"{ENV_FILE} already contains GitHub variables")

        with env_path.open("a", encoding="utf-8") as handle:
            handle.write(env_block())
    except (OSError, UnicodeDecodeError) as exc:
        return StepOutcome.failed(STEP, f"Could not update {ENV_FILE}: {exc}")

    return StepOutcome.applied(STEP, f"Updated {ENV_FILE} with GitHub variables")
