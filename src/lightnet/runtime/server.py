from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
from dataclasses import dataclass

import httpx
import uvicorn

from ..config import Settings
from ..core.registry import NetworkRegistry
from ..sdk.client import LightNetClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LightNetServer:
    host: str
    port: int
    url: str

    def client(self, caller: str, *, timeout_s: float = 10.0) -> LightNetClient:
        """Return an SDK client that acts as `caller` against this server."""
        return LightNetClient(self.url.rstrip("/"), caller, timeout_s=timeout_s)


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort probe to determine if a lightnet server is reachable."""

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s) as client:
            r = client.get("/healthz")
            if r.status_code != 200:
                return False
            return bool(r.json().get("ok"))
    except (httpx.HTTPError, ValueError):
        return False


def _attach(url: str, *, host: str, port: int, registry: NetworkRegistry | None) -> LightNetServer:
    if registry is not None:
        logger.warning("attaching to running lightnet server at %s; the given registry is not served", url)
    else:
        logger.info("attaching to running lightnet server at %s", url)
    return LightNetServer(host=host, port=port, url=url + "/")


def run(
    *,
    host: str | None = None,
    port: int | None = None,
    log_level: str | None = None,
    access_log: bool = False,
    new_server: bool = False,
    registry: NetworkRegistry | None = None,
    settings: Settings | None = None,
    connect_timeout_s: float = 0.2,
) -> LightNetServer:
    """Serve a registry over HTTP in a background thread.

    Behavior:
    - If LIGHTNET_URL is set and reachable, attach to that server unless `new_server=True`.
    - Otherwise, if `port != 0` and a server is already reachable at http://{host}:{port},
      attach to it unless `new_server=True`.
    - Otherwise start a new local server. `port=0` picks a free port.

    When attaching, `registry` is not used: the running server keeps its own.

    Arguments left as None fall back to `Settings()`.
    """

    settings = settings if settings is not None else Settings()
    host = host if host is not None else settings.host
    port = port if port is not None else settings.port
    log_level = log_level or settings.log_level

    env_url = _normalize_base_url(settings.url)
    if env_url and not new_server:
        if _is_server_alive(env_url, timeout_s=connect_timeout_s):
            parsed = httpx.URL(env_url)
            return _attach(env_url, host=parsed.host, port=int(parsed.port or 80), registry=registry)

    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            return _attach(default_url, host=host, port=port, registry=registry)

    if port == 0:
        port = _find_free_port(host)

    app = create_app(registry, settings=settings)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    # Give it a moment so a subsequent client call doesn't race with startup.
    time.sleep(0.05)

    url = f"http://{host}:{port}/"
    logger.info("lightnet serving at %s", url)
    return LightNetServer(host=host, port=port, url=url)
