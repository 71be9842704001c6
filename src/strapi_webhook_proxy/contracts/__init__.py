"""Public contracts for strapi-webhook-proxy."""

from strapi_webhook_proxy.contracts.config import EVENT_CHOICES, INSTALL_COMMAND, SetupConfig, normalize_events
from strapi_webhook_proxy.contracts.exceptions import (
    ConfigError,
    IncompatibleProjectError,
    TemplateError,
    WebhookProxyError,
)
from strapi_webhook_proxy.contracts.manifest import ContentTransform, ManifestEntry, PackageManifest
from strapi_webhook_proxy.contracts.outcome import SetupResult, StepOutcome, StepStatus
from strapi_webhook_proxy.contracts.progress import SetupProgress

__all__ = [
    "EVENT_CHOICES",
    "INSTALL_COMMAND",
    "ConfigError",
    "ContentTransform",
    "IncompatibleProjectError",
    "ManifestEntry",
    "PackageManifest",
    "SetupConfig",
    "SetupProgress",
    "SetupResult",
    "StepOutcome",
    "StepStatus",
    "TemplateError",
    "WebhookProxyError",
    "normalize_events",
]
