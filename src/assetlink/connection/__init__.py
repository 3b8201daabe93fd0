"""Connecting submodel properties to remote asset data."""

from .connected_property import ConnectedProperty
from .data_types import DataType, UnsignedByte, UnsignedInteger, UnsignedLong, UnsignedShort
from .http_client import HttpRemoteClient, create_http_client
from .node_id import NodeId
from .remote_client import RemoteClient
from .remote_variable import RemoteVariable
from .sources import (
    CallableConsumer,
    CallableSupplier,
    ConsumeFilter,
    PropertyValueConsumer,
    PropertyValueSupplier,
    SupplyFilter,
)
from .variable_registry import VariableRegistry, create, get_default_registry, get_or_create

__all__ = [
    "CallableConsumer",
    "CallableSupplier",
    "ConnectedProperty",
    "ConsumeFilter",
    "DataType",
    "HttpRemoteClient",
    "NodeId",
    "PropertyValueConsumer",
    "PropertyValueSupplier",
    "RemoteClient",
    "RemoteVariable",
    "SupplyFilter",
    "UnsignedByte",
    "UnsignedInteger",
    "UnsignedLong",
    "UnsignedShort",
    "VariableRegistry",
    "create",
    "create_http_client",
    "get_default_registry",
    "get_or_create",
]
