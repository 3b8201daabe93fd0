"""Minimal submodel element tree with delegate-aware path access."""

from .elements import (
    PATH_SEPARATOR,
    VALUE_GET_KEY,
    VALUE_SET_KEY,
    Property,
    Submodel,
    SubmodelElement,
    SubmodelElementCollection,
    is_handler_map,
)
from .lambda_provider import ELEMENTS_PREFIX, VALUE_SUFFIX, LambdaProvider

__all__ = [
    "ELEMENTS_PREFIX",
    "LambdaProvider",
    "PATH_SEPARATOR",
    "Property",
    "Submodel",
    "SubmodelElement",
    "SubmodelElementCollection",
    "VALUE_GET_KEY",
    "VALUE_SET_KEY",
    "VALUE_SUFFIX",
    "is_handler_map",
]
