"""Template manifest and package manifest contracts."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContentTransform(StrEnum):
    EVENTS = "events"


class ManifestEntry(BaseModel):
    source: str
    destination: str
    transform: ContentTransform | None = None

    model_config = ConfigDict(frozen=True)


class PackageManifest(BaseModel):
    """The parts of ``package.json`` the detector looks at."""

    dependencies: dict[str, Any] | None = None
    dev_dependencies: dict[str, Any] | None = Field(default=None, alias="devDependencies")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def declares(self, package: str) -> bool:
        for deps in (self.dependencies, self.dev_dependencies):
            if deps and deps.get(package):
                return True
        return False
