"""
A property whose value is read from and written to the asset.

``ConnectedProperty`` is a drop-in ``Property`` that installs a value delegate
on itself, so the element tree calls ``get_value``/``set_value`` whenever the
property is read or written.

If the property doesn't map one-to-one to a single asset quantity, filters
bridge the gap: the *supply filter* merges the values of several suppliers
into the property value, and the *consume filter* splits a new property value
into one value per consumer. A filter is required as soon as more than one
supplier (or consumer) is registered.

Example:
    speed = ConnectedProperty("Speed", "int")
    speed.add_supplier("left", left_motor_speed)
    speed.add_supplier("right", right_motor_speed)
    speed.set_read_filter(lambda values: (values["left"] + values["right"]) // 2)
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Tuple

from assetlink.delegates import ValueDelegate
from assetlink.element_tree import Property
from assetlink.exceptions import ConfigurationError, DuplicateParticipantError, UnknownParticipantError
from assetlink.validation_guards import require_non_empty_string

from .sources import ConsumeFilter, PropertyValueConsumer, PropertyValueSupplier, SupplyFilter


class ConnectedProperty(Property):
    """Property backed by named suppliers and consumers.

    ``get_value`` and ``set_value`` are serialized per instance, so concurrent
    callers never observe a partially aggregated set of source values.
    """

    def __init__(self, id_short: str, value_type: Optional[str] = None) -> None:
        super().__init__(id_short, value_type)
        self._suppliers: Dict[str, PropertyValueSupplier] = {}
        self._consumers: Dict[str, PropertyValueConsumer] = {}
        self._read_filter: Optional[SupplyFilter] = None
        self._write_filter: Optional[ConsumeFilter] = None
        self._lock = threading.RLock()

        delegate = ValueDelegate.install_on(self)
        delegate.set_get_handler(self.get_value)
        delegate.set_set_handler(self.set_value)

    @property
    def suppliers(self) -> Tuple[str, ...]:
        return tuple(self._suppliers)

    @property
    def consumers(self) -> Tuple[str, ...]:
        return tuple(self._consumers)

    def add_supplier(self, name: str, supplier: PropertyValueSupplier) -> None:
        """
        Register a value supplier under a name unique among this property's suppliers.

        Raises:
            DuplicateParticipantError: If a supplier with that name already exists.
        """
        require_non_empty_string(name, "name")
        if name in self._suppliers:
            raise DuplicateParticipantError(f"A supplier named '{name}' already exists on '{self.id_short}'", name=name)
        self._suppliers[name] = supplier

    def add_consumer(self, name: str, consumer: PropertyValueConsumer) -> None:
        """
        Register a value consumer under a name unique among this property's consumers.

        Raises:
            DuplicateParticipantError: If a consumer with that name already exists.
        """
        require_non_empty_string(name, "name")
        if name in self._consumers:
            raise DuplicateParticipantError(f"A consumer named '{name}' already exists on '{self.id_short}'", name=name)
        self._consumers[name] = consumer

    def set_read_filter(self, read_filter: Optional[SupplyFilter]) -> None:
        self._read_filter = read_filter

    def set_write_filter(self, write_filter: Optional[ConsumeFilter]) -> None:
        self._write_filter = write_filter

    def get_value(self) -> Any:
        with self._lock:
            if not self._suppliers:
                raise ConfigurationError(f"'{self.id_short}' must have at least one supplier before it can be read")
            if len(self._suppliers) > 1 and self._read_filter is None:
                raise ConfigurationError(f"'{self.id_short}' has several suppliers and needs a read filter")

            values = {name: supplier.get_value() for name, supplier in self._suppliers.items()}
            if len(values) == 1:
                return next(iter(values.values()))
            return self._read_filter(values)

    def set_value(self, value: Any) -> None:
        with self._lock:
            if not self._consumers:
                raise ConfigurationError(f"'{self.id_short}' must have at least one consumer before it can be written")
            if len(self._consumers) > 1 and self._write_filter is None:
                raise ConfigurationError(f"'{self.id_short}' has several consumers and needs a write filter")

            if len(self._consumers) == 1:
                next(iter(self._consumers.values())).apply_value(value)
                return

            values_by_consumer: Dict[str, Any] = {}
            self._write_filter(value, values_by_consumer)

            unknown = [name for name in values_by_consumer if name not in self._consumers]
            if unknown:
                raise UnknownParticipantError(
                    f"Write filter of '{self.id_short}' targeted unknown consumer(s): {', '.join(map(repr, unknown))}",
                    names=unknown,
                )
            for name, consumer_value in values_by_consumer.items():
                self._consumers[name].apply_value(consumer_value)


__all__ = ["ConnectedProperty"]
