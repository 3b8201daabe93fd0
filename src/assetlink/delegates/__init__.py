"""Computed get/set handlers for submodel elements."""

from .collection_delegate import CollectionDelegate
from .value_delegate import ValueDelegate

__all__ = ["CollectionDelegate", "ValueDelegate"]
