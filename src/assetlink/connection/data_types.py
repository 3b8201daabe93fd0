"""
Declared value types of remote variables and their host representations.

Remote endpoints distinguish unsigned integers of fixed width, which are
modelled here as ``int`` subclasses that validate their range. Callers work
with plain ``int`` instead. Every ``DataType`` names the exact runtime type a
remote read must produce (``protocol_type``) and the exact runtime type
callers exchange with the property (``host_type``):

    DataType            protocol_type      host_type
    UNSIGNED_BYTE       UnsignedByte       int
    UNSIGNED_SHORT      UnsignedShort      int
    UNSIGNED_INTEGER    UnsignedInteger    int
    UNSIGNED_LONG       UnsignedLong       int
    BOOLEAN             bool               bool
    INTEGER             int                int
    DOUBLE              float              float
    STRING              str                str
    BYTE_STRING         bytes              bytes
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Dict

from assetlink.exceptions import TypeMismatchError


class _Unsigned(int):
    """Base of the fixed-width unsigned integer wrappers."""

    bits: ClassVar[int] = 0

    def __new__(cls, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{cls.__name__} requires an int, got {type(value).__name__}")
        if not 0 <= value <= cls.max_value():
            raise ValueError(f"{value} is out of range for {cls.__name__} (0..{cls.max_value()})")
        return super().__new__(cls, value)

    @classmethod
    def max_value(cls) -> int:
        return (1 << cls.bits) - 1

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({int(self)})"


class UnsignedByte(_Unsigned):
    bits = 8


class UnsignedShort(_Unsigned):
    bits = 16


class UnsignedInteger(_Unsigned):
    bits = 32


class UnsignedLong(_Unsigned):
    bits = 64


class DataType(Enum):
    UNSIGNED_BYTE = "UnsignedByte"
    UNSIGNED_SHORT = "UnsignedShort"
    UNSIGNED_INTEGER = "UnsignedInteger"
    UNSIGNED_LONG = "UnsignedLong"
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    DOUBLE = "Double"
    STRING = "String"
    BYTE_STRING = "ByteString"

    @property
    def protocol_type(self) -> type:
        return _CONVERSIONS[self].protocol_type

    @property
    def host_type(self) -> type:
        return _CONVERSIONS[self].host_type

    def to_host(self, raw: Any) -> Any:
        """Convert a value received from the remote endpoint; the type must match exactly."""
        conversion = _CONVERSIONS[self]
        if type(raw) is not conversion.protocol_type:
            raise TypeMismatchError(
                f"Mismatch between declared type ({conversion.protocol_type.__name__}) "
                f"and type received from remote endpoint ({type(raw).__name__})",
                expected=conversion.protocol_type,
                actual=type(raw),
            )
        return conversion.to_host(raw)

    def from_json(self, raw: Any) -> Any:
        """
        Give a decoded JSON scalar the protocol type it stands for.

        JSON has no unsigned or fixed-width integers and writes whole doubles
        without a fraction, so plain ints are wrapped for unsigned tags and
        widened for ``DOUBLE``. Anything else is returned unchanged for
        ``to_host`` to check.
        """
        conversion = _CONVERSIONS[self]
        if type(raw) is not int or conversion.protocol_type is int:
            return raw
        if self is DataType.DOUBLE:
            return float(raw)
        if issubclass(conversion.protocol_type, _Unsigned):
            try:
                return conversion.protocol_type(raw)
            except ValueError as exc:
                raise TypeMismatchError(str(exc), expected=conversion.protocol_type, actual=int) from exc
        return raw

    def to_protocol(self, value: Any) -> Any:
        """Convert a caller's value for sending to the remote endpoint; the type must match exactly."""
        conversion = _CONVERSIONS[self]
        if type(value) is not conversion.host_type:
            raise TypeMismatchError(
                f"Mismatch between declared type ({conversion.host_type.__name__}) "
                f"and type of given value ({type(value).__name__})",
                expected=conversion.host_type,
                actual=type(value),
            )
        try:
            return conversion.to_protocol(value)
        except ValueError as exc:
            raise TypeMismatchError(str(exc), expected=conversion.protocol_type, actual=type(value)) from exc


@dataclass(frozen=True)
class _Conversion:
    protocol_type: type
    host_type: type
    to_host: Callable[[Any], Any]
    to_protocol: Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


def _unsigned(wrapper: type) -> _Conversion:
    return _Conversion(protocol_type=wrapper, host_type=int, to_host=int, to_protocol=wrapper)


def _plain(python_type: type) -> _Conversion:
    return _Conversion(protocol_type=python_type, host_type=python_type, to_host=_identity, to_protocol=_identity)


_CONVERSIONS: Dict[DataType, _Conversion] = {
    DataType.UNSIGNED_BYTE: _unsigned(UnsignedByte),
    DataType.UNSIGNED_SHORT: _unsigned(UnsignedShort),
    DataType.UNSIGNED_INTEGER: _unsigned(UnsignedInteger),
    DataType.UNSIGNED_LONG: _unsigned(UnsignedLong),
    DataType.BOOLEAN: _plain(bool),
    DataType.INTEGER: _plain(int),
    DataType.DOUBLE: _plain(float),
    DataType.STRING: _plain(str),
    DataType.BYTE_STRING: _plain(bytes),
}


__all__ = [
    "DataType",
    "UnsignedByte",
    "UnsignedInteger",
    "UnsignedLong",
    "UnsignedShort",
]
