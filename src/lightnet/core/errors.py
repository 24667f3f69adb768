from __future__ import annotations

from enum import IntEnum
from typing import Any


class ErrorKind(IntEnum):
    """Registry failure kinds.

    The values are stable numeric codes and double as HTTP status codes.
    """

    INVALID_NAME = 400
    UNAUTHORIZED = 403
    NOT_FOUND = 404
    ALREADY_EXISTS = 409

    @classmethod
    def from_any(cls, value: Any) -> "ErrorKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            pass
        key = str(value).strip().upper().replace("-", "_")
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Unknown error kind: {value!r}")

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


class RegistryError(Exception):
    """Base class for the four terminal registry failures."""

    kind: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.label)

    @property
    def code(self) -> int:
        return int(self.kind)

    @staticmethod
    def for_kind(kind: ErrorKind | int | str, message: str | None = None) -> "RegistryError":
        k = ErrorKind.from_any(kind)
        return _ERRORS_BY_KIND[k](message)


class InvalidNameError(RegistryError, ValueError):
    kind = ErrorKind.INVALID_NAME


class UnauthorizedError(RegistryError):
    kind = ErrorKind.UNAUTHORIZED


class NotFoundError(RegistryError, LookupError):
    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(RegistryError, ValueError):
    kind = ErrorKind.ALREADY_EXISTS


_ERRORS_BY_KIND: dict[ErrorKind, type[RegistryError]] = {
    ErrorKind.INVALID_NAME: InvalidNameError,
    ErrorKind.UNAUTHORIZED: UnauthorizedError,
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.ALREADY_EXISTS: AlreadyExistsError,
}
