"""
Supplier/consumer for a single remote variable with optional caching.

A fetched value can be cached for a fixed time to spare round-trips to the
endpoint. The cache duration is set at construction and cannot be changed.
With a TTL of zero every read goes to the remote endpoint.

Writes are checked against the declared type before anything is sent, and a
successful write refreshes the cache with the written value without reading
it back. A failed write leaves the cache as it was.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Hashable

from assetlink.validation_guards import require_instance, require_non_negative

from .data_types import DataType
from .remote_client import RemoteClient

logger = logging.getLogger(__name__)

_NEVER = float("-inf")


class RemoteVariable:
    """Reads or writes one remote variable, caching reads for ``cache_ttl`` seconds."""

    def __init__(
        self,
        client: RemoteClient,
        node_id: Hashable,
        data_type: DataType,
        cache_ttl: float = 0.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        require_instance(data_type, DataType, "data_type")
        require_non_negative(cache_ttl, "cache_ttl")
        self._client = client
        self._node_id = node_id
        self._data_type = data_type
        self._cache_ttl = float(cache_ttl)
        self._clock = clock
        self._lock = threading.Lock()
        self._cache_timestamp = _NEVER
        self._cached_value: Any = None

    @property
    def node_id(self) -> Hashable:
        return self._node_id

    @property
    def data_type(self) -> DataType:
        return self._data_type

    @property
    def cache_ttl(self) -> float:
        return self._cache_ttl

    @property
    def client(self) -> RemoteClient:
        return self._client

    def get_value(self) -> Any:
        with self._lock:
            if self._cache_valid():
                logger.debug("Variable '%s' read from cache", self._node_id)
                return self._cached_value

            logger.debug("Variable '%s' not cached", self._node_id)
            self._fetch_value()
            return self._cached_value

    def apply_value(self, value: Any) -> None:
        wire_value = self._data_type.to_protocol(value)

        with self._lock:
            logger.debug("Writing %r to '%s' on %s", value, self._node_id, self._endpoint())
            self._client.write_value(self._node_id, wire_value)
            self._cached_value = value
            self._cache_timestamp = self._clock()

    def _cache_valid(self) -> bool:
        return self._clock() < self._cache_timestamp + self._cache_ttl

    def _fetch_value(self) -> None:
        logger.debug("Reading value for '%s' from %s", self._node_id, self._endpoint())
        raw = self._client.read_value(self._node_id)
        if getattr(self._client, "json_values", False):
            raw = self._data_type.from_json(raw)
        self._cached_value = self._data_type.to_host(raw)
        self._cache_timestamp = self._clock()

    def _endpoint(self) -> str:
        return getattr(self._client, "endpoint", "<unknown endpoint>")

    def __repr__(self) -> str:
        return f"RemoteVariable(node_id={self._node_id!s}, data_type={self._data_type.name}, cache_ttl={self._cache_ttl})"


__all__ = ["RemoteVariable"]
