"""Path-based value access that resolves handler maps."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from assetlink.exceptions import ElementNotFoundError

from .elements import (
    PATH_SEPARATOR,
    VALUE_GET_KEY,
    VALUE_SET_KEY,
    Submodel,
    SubmodelElement,
    SubmodelElementCollection,
    is_handler_map,
    keyed_by_id_short,
    split_path,
)

logger = logging.getLogger(__name__)

ELEMENTS_PREFIX = "submodelElements/"
VALUE_SUFFIX = "/value"


class LambdaProvider:
    """Reads and writes element values by path, invoking installed handlers.

    Paths have the form ``submodelElements/<id>/<id>/.../value``. Walking into
    a delegate-backed collection calls its getter to obtain the children.
    Collection values are exchanged with handlers as ``id_short``-keyed dicts
    and returned to callers as lists of elements.
    """

    def __init__(self, submodel: Submodel) -> None:
        self.submodel = submodel

    def get_value(self, path: str) -> Any:
        element = self._resolve(self._element_ids(path))
        value = element.value
        if is_handler_map(value):
            logger.debug("Resolving '%s' through its get handler", path)
            value = value[VALUE_GET_KEY]()
        if isinstance(element, SubmodelElementCollection):
            return list(keyed_by_id_short(value).values())
        return value

    def set_value(self, path: str, new_value: Any) -> None:
        element = self._resolve(self._element_ids(path))
        if isinstance(element, SubmodelElementCollection):
            new_value = keyed_by_id_short(new_value)
        if is_handler_map(element.value):
            logger.debug("Resolving '%s' through its set handler", path)
            element.value[VALUE_SET_KEY](new_value)
            return
        element.value = new_value

    def _resolve(self, id_shorts: List[str]) -> SubmodelElement:
        children: Dict[str, SubmodelElement] = self.submodel.submodel_elements
        for depth, id_short in enumerate(id_shorts):
            element = children.get(id_short)
            if element is None:
                walked = PATH_SEPARATOR.join(id_shorts[: depth + 1])
                raise ElementNotFoundError(f"No element at '{walked}' in submodel '{self.submodel.id_short}'")
            if depth == len(id_shorts) - 1:
                return element
            if not isinstance(element, SubmodelElementCollection):
                raise ElementNotFoundError(f"'{element.id_short}' is not a collection")
            children = self._children_of(element)
        raise ElementNotFoundError("Empty element path")

    @staticmethod
    def _children_of(collection: SubmodelElementCollection) -> Dict[str, SubmodelElement]:
        value = collection.value
        if is_handler_map(value):
            value = value[VALUE_GET_KEY]()
        return keyed_by_id_short(value)

    @staticmethod
    def _element_ids(path: str) -> List[str]:
        if not path.startswith(ELEMENTS_PREFIX) or not path.endswith(VALUE_SUFFIX):
            raise ValueError(f"Expected '{ELEMENTS_PREFIX}<id_shorts>{VALUE_SUFFIX}', got {path!r}")
        inner = path[len(ELEMENTS_PREFIX) : -len(VALUE_SUFFIX)]
        return split_path(inner)


__all__ = ["ELEMENTS_PREFIX", "LambdaProvider", "VALUE_SUFFIX"]
