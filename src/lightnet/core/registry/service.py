from __future__ import annotations

import logging
import threading

from ..errors import AlreadyExistsError, NotFoundError, UnauthorizedError
from ..records import Identity, NetworkRecord, check_fields, check_identity, validate_name

logger = logging.getLogger(__name__)


class NetworkRegistry:
    """Identity-keyed registry holding at most one network record per caller.

    Every public method runs under a single lock, so each call is one atomic
    transition: a failed call leaves the registry untouched.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._records: dict[Identity, NetworkRecord] = {}
        self._total = 0

    def exists(self, identity: Identity) -> bool:
        ident = check_identity(identity)
        with self._lock:
            return ident in self._records

    def get(self, identity: Identity) -> NetworkRecord | None:
        ident = check_identity(identity)
        with self._lock:
            return self._records.get(ident)

    def total(self) -> int:
        with self._lock:
            return self._total

    def register(self, caller: Identity, name: str, location: str, device_count: int) -> Identity:
        """Create the caller's record and return the caller.

        Raises `InvalidNameError` before `AlreadyExistsError`. Registration is
        not idempotent: a second call from the same caller always fails.
        """

        ident = check_identity(caller)
        fields = check_fields(name, location, device_count)

        with self._lock:
            try:
                validate_name(fields.name)
                if ident in self._records:
                    raise AlreadyExistsError(f"Network already registered for {ident}")
            except ValueError as e:
                logger.debug("register rejected for %s: %s", ident, e)
                raise

            self._records[ident] = NetworkRecord(
                name=fields.name,
                location=fields.location,
                device_count=fields.device_count,
                owner=ident,
            )
            self._total += 1
            logger.info("registered network %r for %s (total=%d)", fields.name, ident, self._total)
            return ident

    def update(
        self,
        caller: Identity,
        name: str,
        location: str,
        device_count: int,
        *,
        network: Identity | None = None,
    ) -> Identity:
        """Overwrite a record's name, location and device count; return the caller.

        `network` selects the record to update and defaults to the caller's own.
        Checks run in order: `NotFoundError`, `UnauthorizedError`, `InvalidNameError`.
        """

        ident = check_identity(caller)
        target = ident if network is None else check_identity(network)
        fields = check_fields(name, location, device_count)

        with self._lock:
            current = self._records.get(target)
            try:
                if current is None:
                    raise NotFoundError(f"No network registered for {target}")
                if current.owner != ident:
                    raise UnauthorizedError(f"{ident} does not own the network of {target}")
                validate_name(fields.name)
            except (NotFoundError, UnauthorizedError, ValueError) as e:
                logger.debug("update rejected for %s: %s", ident, e)
                raise

            self._records[target] = NetworkRecord(
                name=fields.name,
                location=fields.location,
                device_count=fields.device_count,
                owner=ident,
            )
            logger.info("updated network %r for %s", fields.name, ident)
            return ident


REGISTRY = NetworkRegistry()
