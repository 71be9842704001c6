"""Rich-based setup progress display."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console
from rich.markup import escape

from strapi_webhook_proxy.cli.common import format_outcome
from strapi_webhook_proxy.contracts.outcome import StepOutcome, StepStatus
from strapi_webhook_proxy.contracts.progress import SetupProgress


class RichSetupProgress(SetupProgress):
    """Prints one styled line per step outcome as the setup runs."""

    _STEP_LABELS: ClassVar[dict[str, str]] = {
        "templates": "Copying template files",
        "env": "Updating .env",
        "bootstrap": "Patching src/index.ts",
        "install": "Installing dependencies",
    }
    _STATUS_STYLES: ClassVar[dict[StepStatus, str]] = {
        StepStatus.APPLIED: "green",
        StepStatus.SKIPPED: "yellow",
        StepStatus.FAILED: "red",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    def step_start(self, step: str) -> None:
        label = self._STEP_LABELS.get(step, step)
        self._console.print(f"\n[bold]{escape(label)}...[/bold]")

    def step_done(self, outcome: StepOutcome) -> None:
        style = self._STATUS_STYLES[outcome.status]
        self._console.print(f"[{style}]{escape(format_outcome(outcome))}[/{style}]", soft_wrap=True)
