from __future__ import annotations

import argparse
from typing import Sequence

from .config import Settings, setup_logging
from .runtime.server import run


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="lightnet", description="lightnet: single-owner network registry")
    p.add_argument("--host", default=None, help="bind address (env: LIGHTNET_HOST, default 127.0.0.1)")
    p.add_argument("--port", type=int, default=None, help="bind port (env: LIGHTNET_PORT, default 8000)")
    p.add_argument(
        "--log-level",
        default=None,
        choices=["critical", "error", "warning", "info", "debug"],
        help="log level (env: LIGHTNET_LOG_LEVEL, default info)",
    )
    p.add_argument("--access-log", action="store_true")
    return p.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Read settings from the environment, with explicit CLI flags taking precedence."""

    overrides = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = settings_from_args(args)

    setup_logging(settings.log_level)

    srv = run(
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        access_log=args.access_log,
        new_server=True,
        settings=settings,
    )
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    import time

    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
