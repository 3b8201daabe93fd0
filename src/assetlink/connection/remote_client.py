"""Contract for clients talking to a remote endpoint."""

from __future__ import annotations

from typing import Any, Hashable, Protocol, runtime_checkable


@runtime_checkable
class RemoteClient(Protocol):
    """Reads and writes single addressable values on one remote endpoint.

    ``node`` is whatever addresses a value on that endpoint, e.g. a ``NodeId``
    or a model path. Implementations raise ``RemoteCommunicationError`` (or a
    subclass) on timeouts, lost connections and protocol faults. Clients are
    used as registry keys, so they must keep the default identity hash.

    Clients whose reads yield decoded JSON scalars instead of protocol-typed
    values set a truthy ``json_values`` attribute; ``RemoteVariable`` then
    passes each read through ``DataType.from_json`` before the type check.
    """

    endpoint: str

    def read_value(self, node: Hashable) -> Any: ...

    def write_value(self, node: Hashable, value: Any) -> None: ...


__all__ = ["RemoteClient"]
