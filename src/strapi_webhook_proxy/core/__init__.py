"""Scaffolding steps and orchestration."""

from strapi_webhook_proxy.core.bootstrap import (
    BootstrapPatch,
    BootstrapShape,
    classify_bootstrap,
    patch_bootstrap,
    patch_bootstrap_file,
)
from strapi_webhook_proxy.core.detect import ProjectFacts, inspect_project, is_compatible, is_strapi_project
from strapi_webhook_proxy.core.env_file import ensure_env_block
from strapi_webhook_proxy.core.install import install_type_declarations
from strapi_webhook_proxy.core.materialize import TEMPLATE_MANIFEST, materialize_entry, materialize_templates
from strapi_webhook_proxy.core.setup import run_setup

__all__ = [
    "TEMPLATE_MANIFEST",
    "BootstrapPatch",
    "BootstrapShape",
    "ProjectFacts",
    "classify_bootstrap",
    "ensure_env_block",
    "inspect_project",
    "install_type_declarations",
    "is_compatible",
    "is_strapi_project",
    "materialize_entry",
    "materialize_templates",
    "patch_bootstrap",
    "patch_bootstrap_file",
    "run_setup",
]
