"""
Creates and memoizes ``RemoteVariable`` instances.

Variables are indexed by client and node id only. The data type and cache
TTL are not part of the key: the first registration wins, and later requests
for the same node with different settings get the existing instance.

When no TTL is given, ``ConnectionSettings.default_cache_ttl_seconds`` applies
(``ASSETLINK_CACHE_TTL_SECONDS``, zero unless configured).
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Hashable, Optional

from assetlink.config import get_connection_settings

from .data_types import DataType
from .remote_client import RemoteClient
from .remote_variable import RemoteVariable

logger = logging.getLogger(__name__)


def _resolve_ttl(cache_ttl: Optional[float]) -> float:
    if cache_ttl is None:
        return get_connection_settings().default_cache_ttl_seconds
    return cache_ttl


class VariableRegistry:
    """Process-lifetime cache of remote variables keyed by ``(client, node_id)``."""

    def __init__(self) -> None:
        self._variables: Dict[RemoteClient, Dict[Hashable, RemoteVariable]] = {}
        self._lock = threading.Lock()

    def get_or_create(
        self,
        client: RemoteClient,
        node_id: Hashable,
        data_type: DataType,
        cache_ttl: Optional[float] = None,
    ) -> RemoteVariable:
        """
        Return the registered variable for ``client`` and ``node_id`` or register a new one.

        Args:
            client: The client used to reach the variable.
            node_id: The variable's node id.
            data_type: The variable's declared type (ignored if already registered).
            cache_ttl: Cache duration in seconds (ignored if already registered).

        Returns:
            Either the existing or a newly registered ``RemoteVariable``.
        """
        cache_ttl = _resolve_ttl(cache_ttl)
        with self._lock:
            by_node = self._variables.setdefault(client, {})
            variable = by_node.get(node_id)
            if variable is None:
                variable = RemoteVariable(client, node_id, data_type, cache_ttl)
                by_node[node_id] = variable
                return variable

        if variable.data_type is not data_type or variable.cache_ttl != float(cache_ttl):
            logger.warning(
                "Variable '%s' already registered as %s/%ss; ignoring requested %s/%ss",
                node_id,
                variable.data_type.name,
                variable.cache_ttl,
                data_type.name,
                cache_ttl,
            )
        return variable

    @staticmethod
    def create(
        client: RemoteClient,
        node_id: Hashable,
        data_type: DataType,
        cache_ttl: Optional[float] = None,
    ) -> RemoteVariable:
        """Create a fresh variable that is neither taken from nor added to any registry."""
        return RemoteVariable(client, node_id, data_type, _resolve_ttl(cache_ttl))

    def __len__(self) -> int:
        with self._lock:
            return sum(len(by_node) for by_node in self._variables.values())


_default_registry = VariableRegistry()


def get_default_registry() -> VariableRegistry:
    return _default_registry


def get_or_create(
    client: RemoteClient, node_id: Hashable, data_type: DataType, cache_ttl: Optional[float] = None
) -> RemoteVariable:
    """``VariableRegistry.get_or_create`` on the process-wide registry."""
    return _default_registry.get_or_create(client, node_id, data_type, cache_ttl)


def create(client: RemoteClient, node_id: Hashable, data_type: DataType, cache_ttl: Optional[float] = None) -> RemoteVariable:
    """Create an unregistered variable."""
    return VariableRegistry.create(client, node_id, data_type, cache_ttl)


__all__ = ["VariableRegistry", "create", "get_default_registry", "get_or_create"]
