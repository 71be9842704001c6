"""Copy template files into a Strapi project."""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path

from strapi_webhook_proxy.contracts.exceptions import TemplateError
from strapi_webhook_proxy.contracts.manifest import ContentTransform, ManifestEntry
from strapi_webhook_proxy.contracts.outcome import StepOutcome

logger = logging.getLogger(__name__)

STEP = "templates"

# Placeholder in util/set-up-github-webhook.ts replaced with the selected events.
EVENTS_PLACEHOLDER = "events: [],"

TEMPLATE_MANIFEST: tuple[ManifestEntry, ...] = (
    ManifestEntry(source="config.ts", destination="src/config.ts"),
    ManifestEntry(source="util/get-github-auth.ts", destination="src/util/get-github-auth.ts"),
    ManifestEntry(
        source="util/set-up-github-webhook.ts",
        destination="src/util/set-up-github-webhook.ts",
        transform=ContentTransform.EVENTS,
    ),
    ManifestEntry(source="util/index.ts", destination="src/util/index.ts"),
    ManifestEntry(
        source="api/github/routes/trigger-pipeline.ts",
        destination="src/api/github/routes/trigger-pipeline.ts",
    ),
    ManifestEntry(
        source="api/github/controllers/trigger-pipeline.ts",
        destination="src/api/github/controllers/trigger-pipeline.ts",
    ),
)


def render_events(content: str, events: list[str]) -> str:
    """Substitute the selected events into the webhook template.

    Events are serialised as a compact JSON array, e.g.
    ``events: ["entry.publish","entry.unpublish"],``.
    """
    rendered = json.dumps(events, separators=(",", ":"), ensure_ascii=False)
    return content.replace(EVENTS_PLACEHOLDER, f"events: {rendered},", 1)


def _read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateError(f"cannot read template {path}: {exc}", source=str(path)) from exc


def materialize_entry(
    entry: ManifestEntry,
    *,
    project_root: Path,
    templates_dir: Path,
    events: list[str],
) -> StepOutcome:
    """Copy one template into the project, never overwriting an existing file."""
    source = templates_dir / entry.source
    destination = project_root / entry.destination

    if destination.exists():
        logger.debug("Destination exists, leaving untouched: %s", destination)
        return StepOutcome.skipped(STEP, f"File already exists, skipping: {entry.destination}")

    try:
        if not source.is_file():
            raise TemplateError(f"template not found: {source}", source=str(source))
        destination.parent.mkdir(parents=True, exist_ok=True)
        if entry.transform is ContentTransform.EVENTS:
            destination.write_text(render_events(_read_template(source), events), encoding="utf-8")
        else:
            shutil.copyfile(source, destination)
    except (TemplateError, OSError) as exc:
        logger.debug("Failed to materialize %s", entry.destination, exc_info=True)
        return StepOutcome.failed(STEP, f"Could not create {entry.destination}: {exc}")

    return StepOutcome.applied(STEP, f"Created: {entry.destination}")


def materialize_templates(
    *,
    project_root: Path,
    templates_dir: Path,
    events: list[str],
    manifest: tuple[ManifestEntry, ...] = TEMPLATE_MANIFEST,
) -> list[StepOutcome]:
    return [
        materialize_entry(entry, project_root=project_root, templates_dir=templates_dir, events=events)
        for entry in manifest
    ]
