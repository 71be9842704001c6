"""Helpers shared by test modules."""

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace
from typing import Any


def write_package_json(root: Path, payload: object) -> Path:
    path = root / "package.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class FakeQuestion:
    """Mimics questionary.Question — returns a canned value from .ask()."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def ask(self) -> Any:
        return self._value


def build_fake_questionary(selected: list[str] | None) -> SimpleNamespace:
    """Build a fake questionary module whose ``checkbox`` answers *selected*.

    Prompts and choices are recorded on the returned namespace as ``calls``.
    """
    calls: list[dict[str, Any]] = []

    def _checkbox(message: str, **kw: Any) -> FakeQuestion:
        calls.append({"message": message, **kw})
        return FakeQuestion(selected)

    return SimpleNamespace(
        checkbox=_checkbox,
        Choice=lambda title, value: value,  # type: ignore[arg-type]
        calls=calls,
    )


DEFAULT_INDEX_TS = """
import type { Core } from '@strapi/strapi';

export default {
  register({ strapi }: { strapi: Core.Strapi }) {},
  bootstrap(/* { strapi }: { strapi: Core.Strapi } */) {},
};
"""
