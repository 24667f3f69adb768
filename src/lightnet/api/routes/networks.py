from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request

from ...core.errors import RegistryError
from ...core.registry import NetworkRegistry
from ..parsing import parse_caller, parse_network_body
from ..serializers import error_to_detail, record_to_item

logger = logging.getLogger(__name__)


def mount_networks_api(app: FastAPI, registry: NetworkRegistry, *, caller_header: str) -> None:
    """Mount the network registry endpoints.

    The caller identity is taken from `caller_header` on mutating requests.
    Registry errors are returned with their numeric code as the status code.
    """

    def _caller(request: Request) -> str:
        try:
            return parse_caller(request.headers.get(caller_header), header=caller_header)
        except ValueError as e:
            raise HTTPException(status_code=401, detail=str(e))

    def _fields(body: dict):
        try:
            return parse_network_body(body)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    def _registry_error(e: RegistryError) -> HTTPException:
        logger.debug("request rejected: %s (%d)", e, e.code)
        return HTTPException(status_code=e.code, detail=error_to_detail(e))

    @app.post("/api/networks")
    def register_network(request: Request, body: dict) -> dict[str, Any]:
        caller = _caller(request)
        fields = _fields(body)
        try:
            ident = registry.register(caller, fields.name, fields.location, fields.device_count)
        except RegistryError as e:
            raise _registry_error(e)
        return {"ok": ident}

    @app.put("/api/networks")
    def update_own_network(request: Request, body: dict) -> dict[str, Any]:
        caller = _caller(request)
        fields = _fields(body)
        try:
            ident = registry.update(caller, fields.name, fields.location, fields.device_count)
        except RegistryError as e:
            raise _registry_error(e)
        return {"ok": ident}

    @app.put("/api/networks/{identity}")
    def update_network(identity: str, request: Request, body: dict) -> dict[str, Any]:
        caller = _caller(request)
        fields = _fields(body)
        try:
            ident = registry.update(
                caller,
                fields.name,
                fields.location,
                fields.device_count,
                network=identity,
            )
        except RegistryError as e:
            raise _registry_error(e)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return {"ok": ident}

    @app.get("/api/networks/{identity}")
    def get_network_details(identity: str) -> dict[str, Any]:
        try:
            record = registry.get(identity)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return {"network": record_to_item(record) if record is not None else None}

    @app.get("/api/networks/{identity}/exists")
    def network_exists(identity: str) -> dict[str, bool]:
        try:
            return {"exists": registry.exists(identity)}
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    @app.get("/api/total-networks")
    def get_total_networks() -> dict[str, int]:
        return {"total": registry.total()}
