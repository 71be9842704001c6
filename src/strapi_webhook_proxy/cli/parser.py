"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("strapi-webhook-proxy")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strapi-webhook-proxy",
        description="Set up a Strapi webhook that triggers a GitHub Actions workflow",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument(
        "--project-root",
        default=".",
        help="Root of the Strapi project (default: current directory)",
    )
    parser.add_argument("--templates-dir", default=None, help="Alternative template directory")
    parser.add_argument(
        "--events",
        default=None,
        help="Comma-separated webhook events; skips the interactive prompt",
    )
    parser.add_argument("--skip-install", action="store_true", help="Do not install @types/koa")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
