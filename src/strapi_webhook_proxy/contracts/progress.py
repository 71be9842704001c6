"""Contracts for setup progress reporting."""

from __future__ import annotations

from typing import Protocol

from strapi_webhook_proxy.contracts.outcome import StepOutcome


class SetupProgress(Protocol):
    def step_start(self, step: str) -> None: ...

    def step_done(self, outcome: StepOutcome) -> None: ...
