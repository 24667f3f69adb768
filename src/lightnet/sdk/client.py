from __future__ import annotations

import os
from typing import Any
from urllib.parse import quote

import httpx

from ..config import DEFAULT_CALLER_HEADER
from ..core.errors import ErrorKind, RegistryError
from ..core.records import NetworkRecord, check_identity
from ..api.serializers import record_from_item

_REGISTRY_CODES = {int(k) for k in ErrorKind}


def _raise_for_response(res: httpx.Response, action: str) -> None:
    if res.status_code < 400:
        return
    detail: Any = None
    try:
        body = res.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        detail = body.get("detail")
    if res.status_code in _REGISTRY_CODES and isinstance(detail, dict) and "code" in detail:
        raise RegistryError.for_kind(int(detail["code"]), str(detail.get("message") or ""))
    if res.status_code == 422:
        raise ValueError(f"Failed to {action}: {detail or res.text}")
    raise RuntimeError(f"Failed to {action}: {res.status_code} {res.text}")


class LightNetClient:
    """HTTP client acting as a single caller identity against a lightnet server.

    Registry failures come back as the matching `RegistryError` subclass
    (`InvalidNameError`, `AlreadyExistsError`, `NotFoundError`, `UnauthorizedError`).
    """

    def __init__(
        self,
        base_url: str | None = None,
        caller: str = "",
        *,
        caller_header: str = DEFAULT_CALLER_HEADER,
        timeout_s: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        url = base_url or os.getenv("LIGHTNET_URL", "") or "http://127.0.0.1:8000"
        self.base_url = url.rstrip("/")
        self.caller = check_identity(caller)
        self.caller_header = caller_header
        self.timeout_s = float(timeout_s)
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout_s,
            headers={self.caller_header: self.caller},
            transport=self._transport,
        )

    @staticmethod
    def _body(name: str, location: str, device_count: int) -> dict[str, Any]:
        return {"name": name, "location": location, "totalDevices": device_count}

    def register(self, name: str, location: str, device_count: int) -> str:
        """Register this caller's network. Returns the caller identity."""
        with self._client() as client:
            res = client.post("/api/networks", json=self._body(name, location, device_count))
            _raise_for_response(res, "register network")
            return str(res.json()["ok"])

    def update(self, name: str, location: str, device_count: int, *, network: str | None = None) -> str:
        """Update a network (this caller's own unless `network` is given)."""
        path = "/api/networks" if network is None else f"/api/networks/{quote(network, safe='')}"
        with self._client() as client:
            res = client.put(path, json=self._body(name, location, device_count))
            _raise_for_response(res, "update network")
            return str(res.json()["ok"])

    def exists(self, identity: str | None = None) -> bool:
        ident = quote(identity or self.caller, safe="")
        with self._client() as client:
            res = client.get(f"/api/networks/{ident}/exists")
            _raise_for_response(res, "check network")
            return bool(res.json()["exists"])

    def get(self, identity: str | None = None) -> NetworkRecord | None:
        ident = quote(identity or self.caller, safe="")
        with self._client() as client:
            res = client.get(f"/api/networks/{ident}")
            _raise_for_response(res, "get network details")
            item = res.json().get("network")
            return record_from_item(item) if item is not None else None

    def total(self) -> int:
        with self._client() as client:
            res = client.get("/api/total-networks")
            _raise_for_response(res, "get total networks")
            return int(res.json()["total"])
