"""Step outcome contracts."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field


class StepStatus(StrEnum):
    APPLIED = "applied"
    SKIPPED = "skipped"
    FAILED = "failed"


class StepOutcome(BaseModel):
    step: str
    status: StepStatus
    message: str
    details: list[str] = Field(default_factory=list)

    @classmethod
    def applied(cls, step: str, message: str, *, details: list[str] | None = None) -> StepOutcome:
        return cls(step=step, status=StepStatus.APPLIED, message=message, details=details or [])

    @classmethod
    def skipped(cls, step: str, message: str, *, details: list[str] | None = None) -> StepOutcome:
        return cls(step=step, status=StepStatus.SKIPPED, message=message, details=details or [])

    @classmethod
    def failed(cls, step: str, message: str, *, details: list[str] | None = None) -> StepOutcome:
        return cls(step=step, status=StepStatus.FAILED, message=message, details=details or [])


class SetupResult(BaseModel):
    project_root: Path
    events: list[str] = Field(default_factory=list)
    outcomes: list[StepOutcome] = Field(default_factory=list)

    def count(self, status: StepStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    def for_step(self, step: str) -> list[StepOutcome]:
        return [outcome for outcome in self.outcomes if outcome.step == step]
