"""Strapi project detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from strapi_webhook_proxy.contracts.manifest import PackageManifest

logger = logging.getLogger(__name__)

STRAPI_PACKAGE = "@strapi/strapi"
MANIFEST_FILE = "package.json"
ENTRY_POINTS = ("src/index.ts", "src/index.js")


@dataclass(frozen=True)
class ProjectFacts:
    """Snapshot of the file-system facts the compatibility check depends on."""

    manifest: PackageManifest | None
    entry_points: tuple[str, ...] = ()


def load_package_manifest(project_root: Path) -> PackageManifest | None:
    """Parse ``package.json`` under *project_root*.

    Returns ``None`` when the file is missing, unreadable, not valid JSON or
    not shaped like a package manifest. A broken manifest is indistinguishable
    from a missing one.
    """
    path = project_root / MANIFEST_FILE
    try:
        return PackageManifest.model_validate_json(path.read_bytes())
    except (OSError, ValidationError) as exc:
        logger.debug("Unusable %s at %s: %s", MANIFEST_FILE, path, exc)
        return None


def inspect_project(project_root: Path) -> ProjectFacts:
    present = tuple(name for name in ENTRY_POINTS if (project_root / name).is_file())
    return ProjectFacts(manifest=load_package_manifest(project_root), entry_points=present)


def is_compatible(facts: ProjectFacts) -> bool:
    if facts.manifest is None:
        return False
    return facts.manifest.declares(STRAPI_PACKAGE) and bool(facts.entry_points)


def is_strapi_project(project_root: Path) -> bool:
    facts = inspect_project(project_root)
    compatible = is_compatible(facts)
    logger.debug("Project %s compatible=%s (entry points: %s)", project_root, compatible, facts.entry_points)
    return compatible
