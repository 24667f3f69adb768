from __future__ import annotations

__version__ = "0.1.0"

from .core.errors import (
    AlreadyExistsError,
    ErrorKind,
    InvalidNameError,
    NotFoundError,
    RegistryError,
    UnauthorizedError,
)
from .core.records import NetworkRecord
from .core.registry import REGISTRY, NetworkRegistry
from .runtime.server import LightNetServer, run
from .sdk.client import LightNetClient

__all__ = [
    "__version__",
    "run",
    "LightNetServer",
    "LightNetClient",
    "NetworkRegistry",
    "NetworkRecord",
    "REGISTRY",
    "ErrorKind",
    "RegistryError",
    "InvalidNameError",
    "AlreadyExistsError",
    "NotFoundError",
    "UnauthorizedError",
]
