"""
Identifiers of addressable nodes on a remote endpoint.

A NodeId is made up of a namespace index and an identifier that is unique
within that namespace. The identifier is an integer, a string, a UUID or a
byte string.

The human-readable string form is ``ns=<namespace>;<kind>=<identifier>`` where
kind is ``i`` (integer), ``s`` (string), ``g`` (GUID) or ``b`` (base64 bytes).
The ``ns=0;`` prefix may be omitted. Examples:

    NodeId(1, 4211)              <-> "ns=1;i=4211"
    NodeId(2, "Motor.Speed")     <-> "ns=2;s=Motor.Speed"
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Union
from uuid import UUID

Identifier = Union[int, str, UUID, bytes]

_MAX_NAMESPACE_INDEX = 0xFFFF
_MAX_NUMERIC_IDENTIFIER = 0xFFFFFFFF


@dataclass(frozen=True)
class NodeId:
    namespace_index: int
    identifier: Identifier

    def __post_init__(self) -> None:
        if not isinstance(self.namespace_index, int) or isinstance(self.namespace_index, bool):
            raise TypeError("namespace_index must be an int")
        if not 0 <= self.namespace_index <= _MAX_NAMESPACE_INDEX:
            raise ValueError(f"namespace_index out of range: {self.namespace_index}")
        if isinstance(self.identifier, bool) or not isinstance(self.identifier, (int, str, UUID, bytes)):
            raise TypeError(f"Unsupported identifier type: {type(self.identifier).__name__}")
        if isinstance(self.identifier, int) and not 0 <= self.identifier <= _MAX_NUMERIC_IDENTIFIER:
            raise ValueError(f"Numeric identifier out of range: {self.identifier}")
        if isinstance(self.identifier, str) and not self.identifier:
            raise ValueError("String identifier cannot be empty")

    @property
    def kind(self) -> str:
        if isinstance(self.identifier, int):
            return "i"
        if isinstance(self.identifier, str):
            return "s"
        if isinstance(self.identifier, UUID):
            return "g"
        return "b"

    @classmethod
    def parse(cls, text: str) -> "NodeId":
        """Parse the ``ns=<n>;<kind>=<identifier>`` string form."""
        if not isinstance(text, str):
            raise TypeError("NodeId text must be a string")

        namespace_index = 0
        remainder = text.strip()
        if remainder.startswith("ns="):
            namespace_part, separator, remainder = remainder.partition(";")
            if not separator:
                raise ValueError(f"Malformed NodeId (missing identifier): {text!r}")
            try:
                namespace_index = int(namespace_part[3:])
            except ValueError as exc:
                raise ValueError(f"Malformed namespace index in NodeId: {text!r}") from exc

        kind, separator, raw_identifier = remainder.partition("=")
        if not separator or not raw_identifier:
            raise ValueError(f"Malformed NodeId: {text!r}")
        return cls(namespace_index, _parse_identifier(kind, raw_identifier, text))

    def __str__(self) -> str:
        if isinstance(self.identifier, bytes):
            rendered = base64.b64encode(self.identifier).decode("ascii")
        else:
            rendered = str(self.identifier)
        prefix = f"ns={self.namespace_index};" if self.namespace_index else ""
        return f"{prefix}{self.kind}={rendered}"


def _parse_identifier(kind: str, raw: str, text: str) -> Identifier:
    if kind == "i":
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"Numeric NodeId identifier expected: {text!r}") from exc
    if kind == "s":
        return raw
    if kind == "g":
        try:
            return UUID(raw)
        except ValueError as exc:
            raise ValueError(f"GUID NodeId identifier expected: {text!r}") from exc
    if kind == "b":
        try:
            return base64.b64decode(raw, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Base64 NodeId identifier expected: {text!r}") from exc
    raise ValueError(f"Unknown NodeId identifier kind {kind!r} in {text!r}")


__all__ = ["Identifier", "NodeId"]
