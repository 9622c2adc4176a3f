"""Path parameter types and string-to-value conversion.

A *parameter type* is a ``Parameter`` subclass. The class itself is the
capability: it advertises a routing slug, builds a ``PathComponent`` for
route registration, and resolves the raw string a router captured for that
segment::

    dynamic path: /users/{int}
    actual path:  /users/42

    Int.resolve_parameter("42")  -> 42

Built-in families share one implementation each: every integer width
delegates to ``FixedWidthInteger``, both float widths to
``BinaryFloatingPoint``.
"""

import math
import re
import uuid
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pathparam.errors import ConfigurationError, RoutingError
from pathparam.routing import convertible as _data
from pathparam.routing.component import PathComponent
from pathparam.routing.convertible import LosslessDataConvertible

_INT_LITERAL = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FLOAT_PATTERN = r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|(?i:inf(?:inity)?|nan))"
_FLOAT_LITERAL = re.compile(_FLOAT_PATTERN, re.ASCII)
_UUID_LITERAL = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.ASCII | re.IGNORECASE,
)


class Parameter(ABC):
    """A type that can be used as a dynamic route parameter.

    Subclasses implement ``resolve_parameter``. ``routing_slug`` defaults to
    the class name lowercased; set ``slug`` only when that name is ambiguous
    or collides with another type.

    ``convertible`` names the byte-convertible type backing this parameter in
    route registration. Leave it ``None`` when the parameter type implements
    ``convert_to_data`` / ``convert_from_data`` itself.
    """

    resolved_type: ClassVar[type] = object
    regex: ClassVar[str] = r"[^/]+"
    slug: ClassVar[str | None] = None
    convertible: ClassVar[type | None] = None

    @classmethod
    def routing_slug(cls) -> str:
        """Key identifying this parameter in a route pattern."""
        if cls.slug is not None:
            return cls.slug
        return cls.__name__.lower()

    @classmethod
    def path_component(cls) -> PathComponent:
        """Create a ``PathComponent`` for registering routes with this type."""
        backing = cls.convertible
        if backing is None:
            if not isinstance(cls, LosslessDataConvertible):
                msg = (
                    f"{cls.__name__} does not implement convert_to_data/convert_from_data; "
                    "set 'convertible' to a byte-convertible type"
                )
                raise ConfigurationError(msg)
            backing = cls
        return PathComponent.parameter(cls.routing_slug(), backing)

    @classmethod
    @abstractmethod
    def resolve_parameter(cls, raw: str) -> Any:
        """Convert the string captured from the URL into the resolved value.

        Raises ``RoutingError`` if the string is not convertible.
        """

    @classmethod
    def to_string(cls, value: Any) -> str:
        """Render a resolved value back into a path segment."""
        return str(value)


# -- String --


class String(Parameter):
    resolved_type = str

    @classmethod
    def resolve_parameter(cls, raw: str) -> str:
        return raw

    @classmethod
    def to_string(cls, value: Any) -> str:
        value = str(value)
        if "/" in value:
            msg = "The value may not contain path separators"
            raise RoutingError("string", msg)
        return value

    @classmethod
    def convert_to_data(cls, value: str) -> bytes:
        return _data.str_to_data(value)

    @classmethod
    def convert_from_data(cls, data: bytes) -> str:
        return _data.str_from_data(data)


# -- Fixed-width integers --


class FixedWidthInteger(Parameter):
    """Shared base for every integer width and signedness.

    Accepts an ASCII base-10 literal with an optional leading sign. The
    value must fit ``bits`` exactly; there is no wrapping or clamping.
    """

    resolved_type = int
    regex = r"[+-]?[0-9]+"
    bits: ClassVar[int] = 64
    signed: ClassVar[bool] = True

    @classmethod
    def min_value(cls) -> int:
        return -(1 << (cls.bits - 1)) if cls.signed else 0

    @classmethod
    def max_value(cls) -> int:
        return (1 << (cls.bits - 1)) - 1 if cls.signed else (1 << cls.bits) - 1

    @classmethod
    def _not_convertible(cls) -> RoutingError:
        return RoutingError("fwi", f"The parameter was not convertible to a {cls.__name__}")

    @classmethod
    def resolve_parameter(cls, raw: str) -> int:
        if _INT_LITERAL.fullmatch(raw) is None:
            raise cls._not_convertible()
        try:
            number = int(raw)
        except ValueError as exc:
            # Literal longer than the interpreter's int digit limit
            raise cls._not_convertible() from exc
        if not cls.min_value() <= number <= cls.max_value():
            raise cls._not_convertible()
        return number

    @classmethod
    def to_string(cls, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, int):
            raise cls._not_convertible()
        if not cls.min_value() <= value <= cls.max_value():
            raise cls._not_convertible()
        return str(value)

    @classmethod
    def convert_to_data(cls, value: int) -> bytes:
        return _data.int_to_data(value, bits=cls.bits, signed=cls.signed, type_name=cls.__name__)

    @classmethod
    def convert_from_data(cls, data: bytes) -> int:
        return _data.int_from_data(data, bits=cls.bits, signed=cls.signed, type_name=cls.__name__)


class Int(FixedWidthInteger):
    bits = 64


class Int8(FixedWidthInteger):
    bits = 8


class Int16(FixedWidthInteger):
    bits = 16


class Int32(FixedWidthInteger):
    bits = 32


class Int64(FixedWidthInteger):
    bits = 64


class UInt(FixedWidthInteger):
    bits = 64
    signed = False


class UInt8(FixedWidthInteger):
    bits = 8
    signed = False


class UInt16(FixedWidthInteger):
    bits = 16
    signed = False


class UInt32(FixedWidthInteger):
    bits = 32
    signed = False


class UInt64(FixedWidthInteger):
    bits = 64
    signed = False


# -- Floating point --


class BinaryFloatingPoint(Parameter):
    """Shared base for float widths.

    Always parses as a double, then narrows to ``bits``. Narrowing never
    fails: finite doubles beyond the 32-bit range become a signed infinity.
    """

    resolved_type = float
    regex = _FLOAT_PATTERN
    bits: ClassVar[int] = 64

    @classmethod
    def narrow(cls, value: float) -> float:
        if cls.bits == 64:
            return value
        try:
            data = _data.float_to_data(value, bits=cls.bits)
        except OverflowError:
            return math.copysign(math.inf, value)
        return _data.float_from_data(data, bits=cls.bits, type_name=cls.__name__)

    @classmethod
    def resolve_parameter(cls, raw: str) -> float:
        if _FLOAT_LITERAL.fullmatch(raw) is None:
            msg = f"The parameter was not convertible to a {cls.__name__}"
            raise RoutingError("bfp", msg)
        return cls.narrow(float(raw))

    @classmethod
    def to_string(cls, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f"The value was not convertible to a {cls.__name__}"
            raise RoutingError("bfp", msg)
        try:
            number = float(value)
        except OverflowError as exc:
            msg = f"The value was not convertible to a {cls.__name__}"
            raise RoutingError("bfp", msg) from exc
        return repr(cls.narrow(number))

    @classmethod
    def convert_to_data(cls, value: float) -> bytes:
        return _data.float_to_data(cls.narrow(value), bits=cls.bits)

    @classmethod
    def convert_from_data(cls, data: bytes) -> float:
        return _data.float_from_data(data, bits=cls.bits, type_name=cls.__name__)


class Float(BinaryFloatingPoint):
    bits = 32


class Double(BinaryFloatingPoint):
    bits = 64


# -- UUID --


class UUID(Parameter):
    """Canonical ``8-4-4-4-12`` hex form only, case-insensitive."""

    resolved_type = uuid.UUID
    regex = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

    @classmethod
    def resolve_parameter(cls, raw: str) -> uuid.UUID:
        if _UUID_LITERAL.fullmatch(raw) is None:
            msg = "The parameter was not convertible to a UUID"
            raise RoutingError("uuid", msg)
        return uuid.UUID(raw)

    @classmethod
    def to_string(cls, value: Any) -> str:
        if not isinstance(value, uuid.UUID):
            msg = "The value was not convertible to a UUID"
            raise RoutingError("uuid", msg)
        return str(value)

    @classmethod
    def convert_to_data(cls, value: uuid.UUID) -> bytes:
        return _data.uuid_to_data(value)

    @classmethod
    def convert_from_data(cls, data: bytes) -> uuid.UUID:
        return _data.uuid_from_data(data)


BUILTIN_PARAMETERS: tuple[type[Parameter], ...] = (
    String,
    Int,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    Float,
    Double,
    UUID,
)
