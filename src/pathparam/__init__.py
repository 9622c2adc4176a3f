"""pathparam — typed route parameters for web routers.

Converts raw URL path segments into integers of a fixed width, floats,
UUIDs, or strings, and reports malformed input as a ``RoutingError`` that
maps to HTTP 400.

Basic usage::

    from pathparam import Int32, UUID, build_path

    path = build_path("users", Int32)     # /users/{int32}
    Int32.resolve_parameter("42")         # 42
    UUID.resolve_parameter("not-a-uuid")  # raises RoutingError("uuid", ...)
"""

from importlib import import_module

__version__ = "0.1.0-dev"

# Public name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    # Parameter types
    "Parameter": "pathparam.routing.params",
    "String": "pathparam.routing.params",
    "FixedWidthInteger": "pathparam.routing.params",
    "Int": "pathparam.routing.params",
    "Int8": "pathparam.routing.params",
    "Int16": "pathparam.routing.params",
    "Int32": "pathparam.routing.params",
    "Int64": "pathparam.routing.params",
    "UInt": "pathparam.routing.params",
    "UInt8": "pathparam.routing.params",
    "UInt16": "pathparam.routing.params",
    "UInt32": "pathparam.routing.params",
    "UInt64": "pathparam.routing.params",
    "BinaryFloatingPoint": "pathparam.routing.params",
    "Float": "pathparam.routing.params",
    "Double": "pathparam.routing.params",
    "UUID": "pathparam.routing.params",
    # Registration
    "LosslessDataConvertible": "pathparam.routing.convertible",
    "PathComponent": "pathparam.routing.component",
    "build_path": "pathparam.routing.component",
    "format_path": "pathparam.routing.component",
    "ParameterRegistry": "pathparam.routing.registry",
    "default_registry": "pathparam.routing.registry",
    # Per request
    "Parameters": "pathparam.routing.container",
    "resolve_all": "pathparam.routing.container",
    # Config
    "ParamConfig": "pathparam.config",
    # Errors
    "PathParamError": "pathparam.errors",
    "ConfigurationError": "pathparam.errors",
    "RoutingError": "pathparam.errors",
    "HTTPError": "pathparam.errors",
    "BadRequest": "pathparam.errors",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathparam`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
