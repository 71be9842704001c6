"""Setup configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

EVENT_CHOICES: tuple[str, ...] = (
    "entry.create",
    "entry.update",
    "entry.delete",
    "entry.publish",
    "entry.unpublish",
    "media.create",
    "media.update",
    "media.delete",
)

INSTALL_COMMAND: tuple[str, ...] = ("npm", "install", "--save-dev", "@types/koa")


def default_templates_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "templates"


class SetupConfig(BaseModel):
    project_root: Path = Field(default_factory=Path.cwd)
    templates_dir: Path = Field(default_factory=default_templates_dir)
    events: list[str] | None = None
    install: bool = True
    install_command: tuple[str, ...] = INSTALL_COMMAND
    verbose: bool = False

    model_config = {"frozen": True}

    @field_validator("project_root")
    @classmethod
    def validate_project_root(cls, value: Path) -> Path:
        resolved = value.expanduser().resolve()
        if not resolved.is_dir():
            raise ValueError(f"project root is not a directory: {value}")
        return resolved

    @field_validator("events")
    @classmethod
    def validate_events(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return normalize_events(value)


def normalize_events(events: list[str]) -> list[str]:
    """Strip, de-duplicate and validate event tokens, keeping selection order."""
    selected: list[str] = []
    for raw in events:
        event = raw.strip()
        if not event:
            continue
        if event not in EVENT_CHOICES:
            raise ValueError(f"unknown webhook event {event!r} (choose from: {', '.join(EVENT_CHOICES)})")
        if event not in selected:
            selected.append(event)
    return selected
