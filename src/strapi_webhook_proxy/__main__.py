"""Module entrypoint for ``python -m strapi_webhook_proxy``."""

from strapi_webhook_proxy.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
