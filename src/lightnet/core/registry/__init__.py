from __future__ import annotations

from .service import NetworkRegistry, REGISTRY

__all__ = ["NetworkRegistry", "REGISTRY"]
