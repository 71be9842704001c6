"""Command-line interface for strapi-webhook-proxy."""

from __future__ import annotations

import logging as logging

from rich.console import Console

from strapi_webhook_proxy import run_setup as run_setup
from strapi_webhook_proxy.cli.app import main as main
from strapi_webhook_proxy.cli.commands import setup as setup_command
from strapi_webhook_proxy.cli.parser import _package_version as _parser_package_version
from strapi_webhook_proxy.cli.parser import build_parser as build_parser
from strapi_webhook_proxy.cli.progress.rich import RichSetupProgress as RichSetupProgress

console = Console(highlight=False)

_build_config = setup_command.build_config
_format_summary = setup_command.format_setup_summary
_prompt_events = setup_command.prompt_events
_run_setup_command = setup_command.run_setup_command

_package_version = _parser_package_version
