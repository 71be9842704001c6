"""Setup command handlers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from strapi_webhook_proxy.cli.common import format_comma_or_none, split_events
from strapi_webhook_proxy.contracts.config import SetupConfig
from strapi_webhook_proxy.contracts.exceptions import ConfigError
from strapi_webhook_proxy.contracts.outcome import SetupResult, StepStatus
from strapi_webhook_proxy.core.env_file import ENV_VARIABLES

WORKFLOW_SNIPPET = (
    "  on:",
    "    repository_dispatch:",
    f"      types: [{ENV_VARIABLES['GITHUB_EVENT_TYPE']}]",
)


def build_config(args: argparse.Namespace) -> SetupConfig:
    raw: dict[str, object] = {
        "project_root": Path(args.project_root),
        "events": split_events(args.events),
        "install": not args.skip_install,
        "verbose": args.verbose,
    }
    if args.templates_dir is not None:
        raw["templates_dir"] = Path(args.templates_dir)
    try:
        return SetupConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc


def prompt_events(choices: Sequence[str]) -> list[str]:
    """Ask which webhook events should trigger the workflow."""
    import questionary

    selected = questionary.checkbox(
        "Select webhook events to trigger the workflow:",
        choices=[questionary.Choice(event, value=event) for event in choices],
    ).ask()
    if selected is None:
        raise KeyboardInterrupt
    return list(selected)


def format_setup_summary(result: SetupResult) -> str:
    applied = result.count(StepStatus.APPLIED)
    skipped = result.count(StepStatus.SKIPPED)
    failed = result.count(StepStatus.FAILED)

    lines = [
        "",
        "strapi-webhook-proxy - setup complete",
        "",
        f"  Project:   {result.project_root}",
        f"  Events:    {format_comma_or_none(result.events)}",
        f"  Steps:     {applied} applied, {skipped} skipped, {failed} failed",
    ]
    if failed:
        lines.append("  Attention: some steps need manual follow-up (see messages above)")

    lines.extend(
        [
            "",
            "Don't forget to:",
            "- configure your .env file.",
            "- add this to your GitHub Actions workflow:",
            "",
            *WORKFLOW_SNIPPET,
            "",
        ]
    )
    return "\n".join(lines)


def run_setup_command(args: argparse.Namespace) -> int:
    import strapi_webhook_proxy.cli as cli

    config = build_config(args)
    cli.console.print("🚀 Setting up Strapi Webhook Proxy...")
    result = cli.run_setup(config, select_events=cli._prompt_events, progress=cli.RichSetupProgress(cli.console))
    cli.console.print(format_setup_summary(result), markup=False, soft_wrap=True)
    return 0


__all__ = ["build_config", "format_setup_summary", "prompt_events", "run_setup_command"]
