"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from strapi_webhook_proxy import ConfigError, WebhookProxyError


def main(argv: list[str] | None = None) -> int:
    import strapi_webhook_proxy.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        return cli._run_setup_command(args)
    except KeyboardInterrupt:
        print("\nAborted.")
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except WebhookProxyError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
