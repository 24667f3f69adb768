from __future__ import annotations

from typing import Any

from ...core.errors import RegistryError
from ...core.records import NetworkRecord


def record_to_item(record: NetworkRecord) -> dict[str, Any]:
    return {
        "name": record.name,
        "location": record.location,
        "totalDevices": int(record.device_count),
        "owner": record.owner,
    }


def record_from_item(item: dict[str, Any]) -> NetworkRecord:
    return NetworkRecord(
        name=str(item["name"]),
        location=str(item["location"]),
        device_count=int(item["totalDevices"]),
        owner=str(item["owner"]),
    )


def error_to_detail(err: RegistryError) -> dict[str, Any]:
    return {
        "error": err.kind.label,
        "code": err.code,
        "message": str(err),
    }
