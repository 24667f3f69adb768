from __future__ import annotations

from .networks import mount_networks_api

__all__ = ["mount_networks_api"]
