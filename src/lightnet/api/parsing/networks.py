from __future__ import annotations

from typing import Any, Mapping

from ...core.records import NetworkFields, check_fields, check_identity


def parse_caller(value: Any, *, header: str) -> str:
    if value is None:
        raise ValueError(f"Missing caller header: {header}")
    try:
        return check_identity(str(value))
    except ValueError as ex:
        raise ValueError(f"Invalid caller header: {header}") from ex


def parse_device_count(value: Any) -> int:
    if value is None:
        raise ValueError("Missing totalDevices")
    if isinstance(value, bool):
        raise ValueError("Invalid totalDevices")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValueError("Invalid totalDevices")


def parse_network_body(body: Any) -> NetworkFields:
    """Parse a register/update JSON body into checked fields.

    Expected shape: {"name": str, "location": str, "totalDevices": int}
    """

    if not isinstance(body, Mapping):
        raise ValueError("Body must be a JSON object")

    if "name" not in body:
        raise ValueError("Missing name")
    if "location" not in body:
        raise ValueError("Missing location")
    count = parse_device_count(body.get("totalDevices"))

    try:
        return check_fields(body.get("name"), body.get("location"), count)
    except TypeError as ex:
        raise ValueError(str(ex)) from ex
