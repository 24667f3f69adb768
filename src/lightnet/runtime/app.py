from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from ..api import create_api_app
from ..config import Settings
from ..core.registry import NetworkRegistry

_app: FastAPI | None = None


def create_app(registry: NetworkRegistry | None = None, *, settings: Settings | None = None) -> FastAPI:
    """Create the full app served by `lightnet.run()` and the CLI."""

    return create_api_app(registry, settings=settings)


def __getattr__(name: str) -> Any:
    # Convenience for uvicorn: `uvicorn lightnet.runtime.app:app`.
    # Built on first access so importing lightnet never reads the environment.
    global _app
    if name == "app":
        if _app is None:
            _app = create_app()
        return _app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
