"""Exception hierarchy for strapi-webhook-proxy."""

from __future__ import annotations


class WebhookProxyError(Exception):
    """Base exception for all strapi-webhook-proxy errors."""


class ConfigError(WebhookProxyError):
    """Invalid command-line configuration."""


class IncompatibleProjectError(ConfigError):
    """Target directory is not a Strapi project."""

    def __init__(self, project_root: str) -> None:
        super().__init__(
            f"{project_root} doesn't appear to be a Strapi project. "
            "Please run this command from the root of your Strapi project."
        )
        self.project_root = project_root


class TemplateError(WebhookProxyError):
    """Template source is missing or unreadable."""

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(message)
        self.source = source
