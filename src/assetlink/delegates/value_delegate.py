"""
Computed values for submodel elements.

Normally an element's value is stored statically. A ``ValueDelegate`` replaces
that storage with a getter/setter pair, which the element tree invokes every
time the element is read or written through ``LambdaProvider``.

Example:
    prop = Property("Temperature", "int")
    delegate = ValueDelegate.install_on(prop)
    delegate.set_get_handler(lambda: random.randint(0, 1000))
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, TypeVar

from assetlink.element_tree import VALUE_GET_KEY, VALUE_SET_KEY, SubmodelElement, SubmodelElementCollection
from assetlink.exceptions import UnsupportedOperationError

T = TypeVar("T")

GetHandler = Callable[[], Any]
SetHandler = Callable[[Any], None]


def _unsupported_get() -> Any:
    raise UnsupportedOperationError("No get handler installed on this delegate")


def _unsupported_set(value: Any) -> None:
    raise UnsupportedOperationError("No set handler installed on this delegate")


class ValueDelegate(Generic[T]):
    """Getter/setter pair standing in for an element's static value.

    Handlers can be swapped at any time and take effect on the next access.
    There is no internal locking: do not replace handlers while calls are in flight.
    """

    def __init__(self) -> None:
        self.handler_map: Dict[str, Callable[..., Any]] = {}
        self.set_get_handler(_unsupported_get)
        self.set_set_handler(_unsupported_set)

    @staticmethod
    def install_on(element: SubmodelElement) -> "ValueDelegate[Any]":
        """
        Create a delegate and install it as ``element``'s value.

        The new delegate raises ``UnsupportedOperationError`` on both get and set
        until its handlers are replaced. Collections receive a ``CollectionDelegate``.

        Args:
            element: The element whose value must be derived at runtime.

        Returns:
            The installed delegate.
        """
        from .collection_delegate import CollectionDelegate

        delegate: ValueDelegate[Any]
        if isinstance(element, SubmodelElementCollection):
            delegate = CollectionDelegate()
        else:
            delegate = ValueDelegate()
        element.value = delegate.handler_map
        return delegate

    def set_get_handler(self, get_handler: Callable[[], T]) -> None:
        self.handler_map[VALUE_GET_KEY] = get_handler

    def set_set_handler(self, set_handler: Callable[[T], None]) -> None:
        self.handler_map[VALUE_SET_KEY] = set_handler

    def get(self) -> Any:
        """Invoke the installed getter as the element tree would."""
        return self.handler_map[VALUE_GET_KEY]()

    def set(self, value: Any) -> None:
        """Invoke the installed setter as the element tree would."""
        self.handler_map[VALUE_SET_KEY](value)


__all__ = ["GetHandler", "SetHandler", "ValueDelegate"]
