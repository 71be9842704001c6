"""Setup orchestration."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from strapi_webhook_proxy.contracts.config import EVENT_CHOICES, SetupConfig, normalize_events
from strapi_webhook_proxy.contracts.exceptions import ConfigError, IncompatibleProjectError
from strapi_webhook_proxy.contracts.outcome import SetupResult, StepOutcome
from strapi_webhook_proxy.contracts.progress import SetupProgress
from strapi_webhook_proxy.core import bootstrap, env_file, install, materialize
from strapi_webhook_proxy.core.detect import is_strapi_project

logger = logging.getLogger(__name__)

EventSelector = Callable[[Sequence[str]], list[str]]


class _NullProgress:
    def step_start(self, step: str) -> None:
        pass

    def step_done(self, outcome: StepOutcome) -> None:
        pass


def run_setup(
    config: SetupConfig,
    *,
    select_events: EventSelector,
    progress: SetupProgress | None = None,
) -> SetupResult:
    """Scaffold the webhook proxy into ``config.project_root``.

    Raises :class:`IncompatibleProjectError` before prompting or touching any
    file when the target is not a Strapi project. Every later step reports a
    :class:`StepOutcome` and never aborts the run.
    """
    progress = progress or _NullProgress()
    root = config.project_root

    if not is_strapi_project(root):
        raise IncompatibleProjectError(str(root))

    if config.events is not None:
        events = list(config.events)
    else:
        try:
            events = normalize_events(select_events(EVENT_CHOICES))
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
    logger.debug("Selected events: %s", events)

    result = SetupResult(project_root=root, events=events)

    def record(outcomes: list[StepOutcome]) -> None:
        for outcome in outcomes:
            result.outcomes.append(outcome)
            progress.step_done(outcome)

    progress.step_start(materialize.STEP)
    record(materialize.materialize_templates(project_root=root, templates_dir=config.templates_dir, events=events))

    progress.step_start(env_file.STEP)
    record([env_file.ensure_env_block(root)])

    progress.step_start(bootstrap.STEP)
    record([bootstrap.patch_bootstrap_file(root)])

    if config.install:
        progress.step_start(install.STEP)
        record([install.install_type_declarations(root, config.install_command)])

    return result
