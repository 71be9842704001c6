"""Shared CLI formatting helpers."""

from __future__ import annotations

from strapi_webhook_proxy.contracts.outcome import StepOutcome, StepStatus

STATUS_ICONS = {
    StepStatus.APPLIED: "✅",
    StepStatus.SKIPPED: "⚠️ ",
    StepStatus.FAILED: "❌",
}


def format_outcome(outcome: StepOutcome) -> str:
    lines = [f"{STATUS_ICONS[outcome.status]} {outcome.message}"]
    lines.extend(f"   {detail}" for detail in outcome.details)
    return "\n".join(lines)


def format_comma_or_none(values: list[str]) -> str:
    if not values:
        return "none"
    return ", ".join(values)


def split_events(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [part for part in (p.strip() for p in value.split(",")) if part]
