from __future__ import annotations

from fastapi import FastAPI

from .. import __version__
from ..config import Settings
from ..core.registry import REGISTRY, NetworkRegistry
from .routes import mount_networks_api


def create_api_app(registry: NetworkRegistry | None = None, *, settings: Settings | None = None) -> FastAPI:
    """Create the HTTP host for a registry.

    Uses the process-wide `REGISTRY` unless an explicit registry is given.
    """

    settings = settings if settings is not None else Settings()
    reg = registry if registry is not None else REGISTRY

    app = FastAPI(title="lightnet", version=__version__)
    app.state.registry = reg
    app.state.settings = settings

    mount_networks_api(app, reg, caller_header=settings.caller_header)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app


__all__ = ["create_api_app"]
