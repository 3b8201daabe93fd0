"""Submodel element types.

Each element stores its value in ``value``. For delegate-backed elements that
attribute holds a handler map instead: a dict with a callable getter under
``VALUE_GET_KEY`` and a callable setter under ``VALUE_SET_KEY``. Reading
``value`` directly on such an element returns the map itself; use
``LambdaProvider`` to resolve it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Dict, Optional

from assetlink.exceptions import ElementNotFoundError
from assetlink.validation_guards import require_id_short, require_non_empty_string

VALUE_GET_KEY = "get"
VALUE_SET_KEY = "set"
PATH_SEPARATOR = "/"


def is_handler_map(value: Any) -> bool:
    """Return True when ``value`` is a getter/setter map rather than a static value."""
    if not isinstance(value, Mapping):
        return False
    return callable(value.get(VALUE_GET_KEY)) and callable(value.get(VALUE_SET_KEY))


class SubmodelElement:
    """Base class of everything addressable by ``id_short`` inside a submodel."""

    def __init__(self, id_short: str) -> None:
        require_id_short(id_short)
        self.id_short = id_short
        self.value: Any = None

    @property
    def is_delegated(self) -> bool:
        return is_handler_map(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.id_short!r})"


class Property(SubmodelElement):
    """A leaf element holding a single value."""

    def __init__(self, id_short: str, value_type: Optional[str] = None, value: Any = None) -> None:
        super().__init__(id_short)
        self.value_type = value_type
        self.value = value


class SubmodelElementCollection(SubmodelElement):
    """An element whose value is a set of child elements keyed by ``id_short``."""

    def __init__(self, id_short: str, elements: Iterable[SubmodelElement] = ()) -> None:
        super().__init__(id_short)
        self.value: Any = {}
        for element in elements:
            self.add_submodel_element(element)

    def add_submodel_element(self, element: SubmodelElement) -> None:
        if self.is_delegated:
            raise TypeError(f"Collection '{self.id_short}' is delegate-backed; its children are computed")
        _insert_unique(self.value, element, owner=self.id_short)


class Submodel:
    """Root of an element tree."""

    def __init__(self, id_short: str, identification: str, elements: Iterable[SubmodelElement] = ()) -> None:
        require_id_short(id_short)
        require_non_empty_string(identification, "identification")
        self.id_short = id_short
        self.identification = identification
        self.submodel_elements: Dict[str, SubmodelElement] = {}
        for element in elements:
            self.add_submodel_element(element)

    def add_submodel_element(self, element: SubmodelElement) -> None:
        _insert_unique(self.submodel_elements, element, owner=self.id_short)

    def get_submodel_element(self, path: str) -> SubmodelElement:
        """Resolve ``Outer/Inner/Leaf`` through statically stored collections."""
        id_shorts = split_path(path)
        children: Mapping[str, SubmodelElement] = self.submodel_elements
        for depth, id_short in enumerate(id_shorts):
            element = children.get(id_short)
            if element is None:
                walked = PATH_SEPARATOR.join(id_shorts[: depth + 1])
                raise ElementNotFoundError(f"No element at '{walked}' in submodel '{self.id_short}'")
            if depth == len(id_shorts) - 1:
                return element
            if not isinstance(element, SubmodelElementCollection) or element.is_delegated:
                raise ElementNotFoundError(f"'{element.id_short}' has no statically stored children")
            children = element.value
        raise ElementNotFoundError("Empty element path")

    def __repr__(self) -> str:
        return f"Submodel({self.id_short!r}, {self.identification!r})"


def split_path(path: str) -> list[str]:
    require_non_empty_string(path, "path")
    parts = path.strip(PATH_SEPARATOR).split(PATH_SEPARATOR)
    if any(part == "" for part in parts):
        raise ValueError(f"Path contains an empty segment: {path!r}")
    return parts


def keyed_by_id_short(elements: Any) -> Dict[str, SubmodelElement]:
    """Normalize a mapping or iterable of elements to a dict keyed by ``id_short``."""
    if isinstance(elements, Mapping):
        return dict(elements)
    keyed: Dict[str, SubmodelElement] = {}
    for element in elements:
        _insert_unique(keyed, element, owner="collection value")
    return keyed


def _insert_unique(target: Dict[str, SubmodelElement], element: SubmodelElement, *, owner: str) -> None:
    if not isinstance(element, SubmodelElement):
        raise TypeError(f"Expected a SubmodelElement, got {type(element).__name__}")
    if element.id_short in target:
        raise ValueError(f"Duplicate id_short '{element.id_short}' in {owner}")
    target[element.id_short] = element


__all__ = [
    "PATH_SEPARATOR",
    "Property",
    "Submodel",
    "SubmodelElement",
    "SubmodelElementCollection",
    "VALUE_GET_KEY",
    "VALUE_SET_KEY",
    "is_handler_map",
    "keyed_by_id_short",
    "split_path",
]
