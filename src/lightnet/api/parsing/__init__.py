from __future__ import annotations

from .networks import parse_caller, parse_device_count, parse_network_body

__all__ = [
    "parse_caller",
    "parse_device_count",
    "parse_network_body",
]
