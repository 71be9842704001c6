"""Inject the webhook setup call into a Strapi ``bootstrap`` lifecycle hook.

Only a handful of known ``src/index.ts`` shapes are rewritten. Anything else is
left untouched and the operator gets manual instructions instead, because the
file is user-owned application code.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from strapi_webhook_proxy.contracts.outcome import StepOutcome

logger = logging.getLogger(__name__)

STEP = "bootstrap"
INDEX_FILE = "src/index.ts"

SETUP_IMPORT = 'import { setUpGithubWebhook } from "./util/set-up-github-webhook";'
SETUP_IMPORT_MARKER = "import { setUpGithubWebhook }"
SETUP_CALL = "await setUpGithubWebhook(strapi);"
SETUP_CALL_MARKER = "setUpGithubWebhook("

# bootstrap(/* { strapi }: { strapi: Core.Strapi } */) {}
_COMMENTED_STUB_RE = re.compile(r"bootstrap\s*\(\s*/\*.*?\*/\s*\)\s*\{\s*\}")
_COMMENTED_STUB_REPLACEMENT = (
    "async bootstrap({ strapi }: { strapi: Core.Strapi }) {\n" f"    {SETUP_CALL}\n" "  }"
)
_COMMENTED_CORE_IMPORT = "// import type { Core }"
_CORE_IMPORT = "import type { Core }"

_EMPTY_STUB = "bootstrap({ strapi }) {}"
_EMPTY_STUB_REPLACEMENT = "async bootstrap({ strapi }) {\n" f"    {SETUP_CALL}\n" "  }"

MANUAL_STEPS: tuple[str, ...] = (
    "Please manually add:",
    f"  {SETUP_IMPORT}",
    "  // In bootstrap:",
    f"  {SETUP_CALL}",
)


class BootstrapShape(StrEnum):
    COMMENTED_STUB = "commented-stub"
    EMPTY_STUB = "empty-stub"
    ALREADY_PATCHED = "already-patched"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class BootstrapPatch:
    text: str
    modified: bool
    shape: BootstrapShape


def classify_bootstrap(text: str) -> BootstrapShape:
    if _COMMENTED_STUB_RE.search(text):
        return BootstrapShape.COMMENTED_STUB
    if _EMPTY_STUB in text:
        return BootstrapShape.EMPTY_STUB
    if SETUP_CALL_MARKER in text:
        return BootstrapShape.ALREADY_PATCHED
    return BootstrapShape.UNRECOGNIZED


def _line_ending(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def _ensure_import(text: str, eol: str) -> str:
    if SETUP_IMPORT_MARKER in text:
        return text
    return f"{SETUP_IMPORT}{eol}{text}"


def patch_bootstrap(text: str) -> BootstrapPatch:
    """Return *text* with the setup import and call injected.

    Injected lines use the file's own line ending. ``modified`` is false for
    already-patched and unrecognized files, in which case ``text`` is returned
    unchanged.
    """
    shape = classify_bootstrap(text)
    eol = _line_ending(text)

    if shape is BootstrapShape.COMMENTED_STUB:
        replacement = _COMMENTED_STUB_REPLACEMENT.replace("\n", eol)
        patched = _COMMENTED_STUB_RE.sub(lambda _m: replacement, _ensure_import(text, eol), count=1)
        if _COMMENTED_CORE_IMPORT in patched:
            patched = patched.replace(_COMMENTED_CORE_IMPORT, _CORE_IMPORT, 1)
        return BootstrapPatch(text=patched, modified=True, shape=shape)

    if shape is BootstrapShape.EMPTY_STUB:
        replacement = _EMPTY_STUB_REPLACEMENT.replace("\n", eol)
        patched = _ensure_import(text, eol).replace(_EMPTY_STUB, replacement, 1)
        return BootstrapPatch(text=patched, modified=True, shape=shape)

    return BootstrapPatch(text=text, modified=False, shape=shape)


def patch_bootstrap_file(project_root: Path) -> StepOutcome:
    """Patch ``src/index.ts`` in place, writing only when the text changed."""
    index_path = project_root / INDEX_FILE
    if not index_path.is_file():
        return StepOutcome.skipped(
            STEP,
            f"{INDEX_FILE} not found. Please ensure you call setUpGithubWebhook in your bootstrap function.",
        )

    try:
        # newline="" keeps CRLF files as CRLF
        with index_path.open(encoding="utf-8", newline="") as handle:
            result = patch_bootstrap(handle.read())
        logger.debug("%s classified as %s", index_path, result.shape)
        if result.modified:
            with index_path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(result.text)
    except (OSError, UnicodeDecodeError) as exc:
        return StepOutcome.failed(STEP, f"Could not update {INDEX_FILE}: {exc}", details=list(MANUAL_STEPS))

    if result.modified:
        return StepOutcome.applied(STEP, f"Updated {INDEX_FILE}: injected setUpGithubWebhook into bootstrap")
    if result.shape is BootstrapShape.ALREADY_PATCHED:
        return StepOutcome.skipped(STEP, f"{INDEX_FILE} already seems to contain the webhook setup.")
    return StepOutcome.failed(
        STEP,
        f"Could not automatically update {INDEX_FILE} (pattern not matched).",
        details=list(MANUAL_STEPS),
    )
