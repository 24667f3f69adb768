from __future__ import annotations

from .app import create_app
from .server import LightNetServer, run

__all__ = ["create_app", "LightNetServer", "run"]
