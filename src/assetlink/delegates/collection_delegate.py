"""Delegate variant for submodel element collections."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Callable, Dict

from assetlink.element_tree import SubmodelElement
from assetlink.element_tree.elements import keyed_by_id_short

from .value_delegate import ValueDelegate


class CollectionDelegate(ValueDelegate[Collection[SubmodelElement]]):
    """Lets handlers work with plain collections of child elements.

    The element tree only understands children keyed by ``id_short``, so the
    getter's collection is converted to such a dict, and the setter receives
    the dict's values. The order of elements handed to the setter is not
    guaranteed to match the order the caller used.
    """

    def set_get_handler(self, get_handler: Callable[[], Collection[SubmodelElement]]) -> None:
        def keyed_children() -> Dict[str, SubmodelElement]:
            return keyed_by_id_short(get_handler())

        super().set_get_handler(keyed_children)

    def set_set_handler(self, set_handler: Callable[[Collection[SubmodelElement]], None]) -> None:
        def apply_children(children: Mapping[str, SubmodelElement]) -> None:
            set_handler(list(children.values()))

        super().set_set_handler(apply_children)


__all__ = ["CollectionDelegate"]
