from __future__ import annotations

from .errors import (
    AlreadyExistsError,
    ErrorKind,
    InvalidNameError,
    NotFoundError,
    RegistryError,
    UnauthorizedError,
)
from .records import (
    DEVICE_COUNT_MAX,
    LOCATION_MAX_LEN,
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    Identity,
    NetworkFields,
    NetworkRecord,
    check_fields,
    is_valid_name,
    check_identity,
    validate_name,
)
from .registry import REGISTRY, NetworkRegistry

__all__ = [
    "ErrorKind",
    "RegistryError",
    "InvalidNameError",
    "AlreadyExistsError",
    "NotFoundError",
    "UnauthorizedError",
    "Identity",
    "NetworkRecord",
    "NetworkFields",
    "NAME_MIN_LEN",
    "NAME_MAX_LEN",
    "LOCATION_MAX_LEN",
    "DEVICE_COUNT_MAX",
    "check_fields",
    "is_valid_name",
    "check_identity",
    "validate_name",
    "NetworkRegistry",
    "REGISTRY",
]
