"""Public API surface for strapi-webhook-proxy."""

__version__ = "1.0.0"

from strapi_webhook_proxy.contracts import (
    EVENT_CHOICES,
    ConfigError,
    IncompatibleProjectError,
    SetupConfig,
    SetupProgress,
    SetupResult,
    StepOutcome,
    StepStatus,
    TemplateError,
    WebhookProxyError,
)
from strapi_webhook_proxy.core import (
    BootstrapShape,
    ensure_env_block,
    is_strapi_project,
    materialize_templates,
    patch_bootstrap,
    run_setup,
)

__all__ = [
    "EVENT_CHOICES",
    "BootstrapShape",
    "ConfigError",
    "IncompatibleProjectError",
    "SetupConfig",
    "SetupProgress",
    "SetupResult",
    "StepOutcome",
    "StepStatus",
    "TemplateError",
    "WebhookProxyError",
    "__version__",
    "ensure_env_block",
    "is_strapi_project",
    "materialize_templates",
    "patch_bootstrap",
    "run_setup",
]
