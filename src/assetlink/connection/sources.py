"""Value sources and filters used by ``ConnectedProperty``."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Protocol, runtime_checkable

SupplyFilter = Callable[[Mapping[str, Any]], Any]
"""Maps supplier names and their values to a single property value."""

ConsumeFilter = Callable[[Any, Dict[str, Any]], None]
"""Receives a property value and an empty dict to fill with one value per consumer name."""


@runtime_checkable
class PropertyValueSupplier(Protocol):
    """Gets the current value of some quantity from the asset.

    Implementations may cache previously fetched values and may raise
    ``RemoteCommunicationError`` when talking to the asset fails.
    """

    def get_value(self) -> Any: ...


@runtime_checkable
class PropertyValueConsumer(Protocol):
    """Writes a new value of some quantity to the asset.

    May raise ``RemoteCommunicationError`` when talking to the asset fails.
    """

    def apply_value(self, value: Any) -> None: ...


class CallableSupplier:
    """Adapts a zero-argument function to ``PropertyValueSupplier``."""

    def __init__(self, func: Callable[[], Any]) -> None:
        self._func = func

    def get_value(self) -> Any:
        return self._func()


class CallableConsumer:
    """Adapts a one-argument function to ``PropertyValueConsumer``."""

    def __init__(self, func: Callable[[Any], None]) -> None:
        self._func = func

    def apply_value(self, value: Any) -> None:
        self._func(value)


__all__ = [
    "CallableConsumer",
    "CallableSupplier",
    "ConsumeFilter",
    "PropertyValueConsumer",
    "PropertyValueSupplier",
    "SupplyFilter",
]
