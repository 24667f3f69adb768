from __future__ import annotations

from .client import LightNetClient

__all__ = ["LightNetClient"]
