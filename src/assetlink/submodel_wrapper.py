"""
Uniform value access to static and delegate-backed submodel elements.

An element backed by a ``ValueDelegate`` stores a handler map instead of a
value, so reading its ``value`` attribute directly returns the map. This
wrapper resolves values through the element tree's ``LambdaProvider``, which
calls the handlers, so every element can be read or written the same way.

Elements are addressed by the sequence of ``id_short``s from the submodel root.
Given::

    MySubmodel
        OuterCollection
            InnerCollection
                DeeplyNestedProperty
            PropertyInOuter
        PropertyInRoot

the paths are ``("PropertyInRoot",)``, ``("OuterCollection", "PropertyInOuter")``
and ``("OuterCollection", "InnerCollection", "DeeplyNestedProperty")``.
"""

from __future__ import annotations

from typing import Any, Sequence

from assetlink.element_tree import ELEMENTS_PREFIX, PATH_SEPARATOR, VALUE_SUFFIX, LambdaProvider, Submodel, SubmodelElement


class SubmodelWrapper:
    """Reads and writes submodel element values by ``id_short`` path."""

    def __init__(self, submodel: Submodel) -> None:
        self._submodel = submodel
        self._provider = LambdaProvider(submodel)

    @property
    def submodel(self) -> Submodel:
        """The wrapped submodel, for bypassing the wrapper."""
        return self._submodel

    def get_submodel_element(self, *id_shorts: str) -> SubmodelElement:
        """
        Get the element object itself.

        The returned element gets no help from this wrapper: for a
        delegate-backed element its ``value`` is the handler map. Use this to
        reach static elements or attributes other than the value.
        """
        return self._submodel.get_submodel_element(self._join(id_shorts))

    def get_value(self, *id_shorts: str) -> Any:
        """Get an element's value, calling its get handler if it has one."""
        return self._provider.get_value(self._value_path(id_shorts))

    def set_value(self, value: Any, *id_shorts: str) -> None:
        """Set an element's value, calling its set handler if it has one."""
        self._provider.set_value(self._value_path(id_shorts), value)

    @classmethod
    def _value_path(cls, id_shorts: Sequence[str]) -> str:
        return f"{ELEMENTS_PREFIX}{cls._join(id_shorts)}{VALUE_SUFFIX}"

    @staticmethod
    def _join(id_shorts: Sequence[str]) -> str:
        if not id_shorts:
            raise ValueError("At least one id_short is required")
        return PATH_SEPARATOR.join(id_shorts)


__all__ = ["SubmodelWrapper"]
