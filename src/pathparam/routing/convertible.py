"""Lossless raw-bytes conversion for parameter values.

Route registration keys its dispatch tables on a uniform byte-level
representation, so every built-in parameter type can turn its resolved value
into ``bytes`` and back without loss.
"""

import struct
import uuid
from typing import Any, Protocol, runtime_checkable

from pathparam.errors import RoutingError

UUID_SIZE = 16

# struct format per float width
_FLOAT_FORMATS: dict[int, str] = {32: "<f", 64: "<d"}


@runtime_checkable
class LosslessDataConvertible(Protocol):
    """A type whose values round-trip through ``bytes``."""

    @classmethod
    def convert_to_data(cls, value: Any) -> bytes: ...

    @classmethod
    def convert_from_data(cls, data: bytes) -> Any: ...


def int_to_data(value: int, *, bits: int, signed: bool, type_name: str) -> bytes:
    """Little-endian two's complement, exactly ``bits // 8`` bytes."""
    try:
        return value.to_bytes(bits // 8, "little", signed=signed)
    except OverflowError as exc:
        msg = f"The value {value} does not fit in a {type_name}"
        raise RoutingError("fwi", msg) from exc


def int_from_data(data: bytes, *, bits: int, signed: bool, type_name: str) -> int:
    if len(data) != bits // 8:
        msg = f"Expected {bits // 8} bytes for a {type_name}, got {len(data)}"
        raise RoutingError("fwi", msg)
    return int.from_bytes(data, "little", signed=signed)


def float_to_data(value: float, *, bits: int) -> bytes:
    """IEEE-754 little-endian. ``value`` must already be narrowed to ``bits``."""
    return struct.pack(_FLOAT_FORMATS[bits], value)


def float_from_data(data: bytes, *, bits: int, type_name: str) -> float:
    if len(data) != bits // 8:
        msg = f"Expected {bits // 8} bytes for a {type_name}, got {len(data)}"
        raise RoutingError("bfp", msg)
    (value,) = struct.unpack(_FLOAT_FORMATS[bits], data)
    return value


def str_to_data(value: str) -> bytes:
    return value.encode("utf-8")


def str_from_data(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = "The data was not valid UTF-8"
        raise RoutingError("utf8", msg) from exc


def uuid_to_data(value: uuid.UUID) -> bytes:
    return value.bytes


def uuid_from_data(data: bytes) -> uuid.UUID:
    """Parse a UUID from its 16-byte RFC 4122 representation.

    Fields are read explicitly in network byte order; any other length is
    rejected before a single field is read.
    """
    if len(data) != UUID_SIZE:
        msg = f"Expected {UUID_SIZE} bytes for a UUID, got {len(data)}"
        raise RoutingError("uuid", msg)
    time_low = int.from_bytes(data[0:4], "big")
    time_mid = int.from_bytes(data[4:6], "big")
    time_hi_version = int.from_bytes(data[6:8], "big")
    clock_seq_hi_variant = data[8]
    clock_seq_low = data[9]
    node = int.from_bytes(data[10:16], "big")
    return uuid.UUID(
        fields=(
            time_low,
            time_mid,
            time_hi_version,
            clock_seq_hi_variant,
            clock_seq_low,
            node,
        )
    )
