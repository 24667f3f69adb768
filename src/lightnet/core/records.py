from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidNameError

Identity = str

NAME_MIN_LEN = 1
NAME_MAX_LEN = 50
LOCATION_MAX_LEN = 100
DEVICE_COUNT_MAX = 2**128 - 1


@dataclass(frozen=True)
class NetworkRecord:
    """Metadata for one identity's network.

    `owner` is the identity that registered the record and never changes.
    """

    name: str
    location: str
    device_count: int
    owner: Identity


@dataclass(frozen=True)
class NetworkFields:
    """The caller-supplied, mutable part of a record."""

    name: str
    location: str
    device_count: int


def check_identity(identity: object) -> Identity:
    """Return `identity` unchanged if it is a usable key.

    Identities are opaque: they are never trimmed or case-folded, so
    surrounding whitespace is rejected rather than stripped.
    """

    if not isinstance(identity, str):
        raise TypeError(f"identity must be a string, got {type(identity).__name__}")
    if not identity:
        raise ValueError("identity cannot be empty")
    if identity != identity.strip():
        raise ValueError("identity cannot have leading or trailing whitespace")
    return identity


def _require_ascii(value: object, *, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {type(value).__name__}")
    if not value.isascii():
        raise ValueError(f"{field} must contain ASCII characters only")
    return value


def check_fields(name: object, location: object, device_count: object) -> NetworkFields:
    """Check argument types and static bounds.

    Name length is not checked here; it is a registry rule (see `validate_name`).
    """

    name_v = _require_ascii(name, field="name")
    location_v = _require_ascii(location, field="location")
    if len(location_v) > LOCATION_MAX_LEN:
        raise ValueError(f"location must be at most {LOCATION_MAX_LEN} characters, got {len(location_v)}")

    if isinstance(device_count, bool) or not isinstance(device_count, int):
        raise TypeError(f"device_count must be an integer, got {type(device_count).__name__}")
    if device_count < 0:
        raise ValueError("device_count must be >= 0")
    if device_count > DEVICE_COUNT_MAX:
        raise ValueError("device_count does not fit in an unsigned 128-bit integer")

    return NetworkFields(name=name_v, location=location_v, device_count=int(device_count))


def is_valid_name(name: str) -> bool:
    return NAME_MIN_LEN <= len(name) <= NAME_MAX_LEN


def validate_name(name: str) -> str:
    if not is_valid_name(name):
        raise InvalidNameError(
            f"name must be {NAME_MIN_LEN}-{NAME_MAX_LEN} characters, got {len(name)}"
        )
    return name
