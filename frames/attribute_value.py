# frames/attribute_value.py
import base64, binascii
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union


class ColumnKind(Enum):
    """Kind tag of an attribute value; values are the DynamoDB wire tags."""

    STRING = "S"
    NUMBER = "N"
    BINARY = "B"
    BOOLEAN = "BOOL"
    MAP = "M"
    LIST = "L"
    NULL = "NULL"
    UNKNOWN = "UNKNOWN"


_PAYLOAD_TYPES = {
    ColumnKind.STRING: str,
    ColumnKind.NUMBER: str,
    ColumnKind.BINARY: (bytes, bytearray, memoryview),
    ColumnKind.BOOLEAN: bool,
    ColumnKind.MAP: dict,
    ColumnKind.LIST: list,
}


def _payload_fits(kind, payload) -> bool:
    if not isinstance(kind, ColumnKind):
        return False
    if kind in (ColumnKind.NULL, ColumnKind.UNKNOWN):
        return True
    expected = _PAYLOAD_TYPES.get(kind)
    return expected is not None and isinstance(payload, expected)


@dataclass(frozen=True)
class AttributeValue:
    """
    One variant-typed value. `kind` selects the populated case, `payload` holds it:
      STRING -> str, NUMBER -> str (decimal text), BINARY -> bytes, BOOLEAN -> bool,
      MAP -> dict of AttributeValue, LIST -> list of AttributeValue, NULL/UNKNOWN -> None
    """

    kind: ColumnKind
    payload: Any = None

    def __post_init__(self):
        # a payload that does not fit its kind leaves the value unpopulated
        if not _payload_fits(self.kind, self.payload):
            object.__setattr__(self, "kind", ColumnKind.UNKNOWN)
            object.__setattr__(self, "payload", None)
        elif self.kind == ColumnKind.BINARY:
            object.__setattr__(self, "payload", bytes(self.payload))
        elif self.kind in (ColumnKind.NULL, ColumnKind.UNKNOWN):
            object.__setattr__(self, "payload", None)

    @classmethod
    def string(cls, value: str) -> "AttributeValue":
        return cls(ColumnKind.STRING, value)

    @classmethod
    def number(cls, value: Union[str, int, float]) -> "AttributeValue":
        # numbers travel as text to avoid precision loss
        return cls(ColumnKind.NUMBER, str(value))

    @classmethod
    def binary(cls, value: bytes) -> "AttributeValue":
        return cls(ColumnKind.BINARY, bytes(value))

    @classmethod
    def boolean(cls, value: bool) -> "AttributeValue":
        return cls(ColumnKind.BOOLEAN, bool(value))

    @classmethod
    def null(cls) -> "AttributeValue":
        return cls(ColumnKind.NULL)

    @classmethod
    def map(cls, value: Mapping[str, "AttributeValue"]) -> "AttributeValue":
        return cls(ColumnKind.MAP, dict(value))

    @classmethod
    def list(cls, value: List["AttributeValue"]) -> "AttributeValue":
        return cls(ColumnKind.LIST, list(value))

    @classmethod
    def unknown(cls) -> "AttributeValue":
        return cls(ColumnKind.UNKNOWN)


Record = Mapping[str, AttributeValue]


def _decode_binary(raw) -> Optional[bytes]:
    # None when the slot holds nothing usable as bytes
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw)
    if isinstance(raw, str):
        # JSON transports carry binary as base64
        try:
            return base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError):
            return None
    return None


def from_wire(raw: Any) -> AttributeValue:
    """
    Convert a DynamoDB low-level attribute value ({"S": "x"}, {"N": "1"}, {"M": {...}} ...)
    into an AttributeValue.

    A malformed value (several slots populated) resolves with the fixed precedence
    S, N, B, BOOL, M, L, NULL; a value matching none of them is UNKNOWN.
    NULL only counts when its flag is true. A B slot that does not decode to bytes
    counts as absent. Never raises.
    """
    if isinstance(raw, AttributeValue):
        return raw
    if not isinstance(raw, Mapping):
        return AttributeValue.unknown()

    if raw.get("S") is not None:
        return AttributeValue.string(str(raw["S"]))
    if raw.get("N") is not None:
        return AttributeValue.number(raw["N"])
    if raw.get("B") is not None:
        data = _decode_binary(raw["B"])
        if data is not None:
            return AttributeValue.binary(data)
    if raw.get("BOOL") is not None:
        return AttributeValue.boolean(raw["BOOL"])
    if raw.get("M") is not None:
        m = raw["M"]
        if not isinstance(m, Mapping):
            return AttributeValue.unknown()
        return AttributeValue.map({str(k): from_wire(v) for k, v in m.items()})
    if raw.get("L") is not None:
        items = raw["L"]
        if not isinstance(items, (list, tuple)):
            return AttributeValue.unknown()
        return AttributeValue.list([from_wire(v) for v in items])
    if raw.get("NULL") is True:
        return AttributeValue.null()
    # SS / NS / BS sets and anything else
    return AttributeValue.unknown()


def record_from_wire(item: Mapping[str, Any]) -> Dict[str, AttributeValue]:
    """Convert one scanned item (field -> wire value) into a Record, keeping key order."""
    return {str(k): from_wire(v) for k, v in item.items()}


def classify(value: Any) -> ColumnKind:
    # accepts an AttributeValue or its raw wire mapping
    if isinstance(value, AttributeValue):
        return value.kind
    return from_wire(value).kind
