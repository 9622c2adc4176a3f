"""pathparam exception hierarchy.

Shared across the parameter types, registry, and container so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class PathParamError(Exception):
    """Base for all pathparam-specific errors."""


class ConfigurationError(PathParamError):
    """Raised when a parameter type or registry is misconfigured.

    Typically raised at route-registration time, never per request.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(PathParamError):
    """An error that maps directly to an HTTP status code.

    Routers that consume resolved parameters translate ``RoutingError``
    into one of these via ``RoutingError.to_http()``.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """400 — a path segment could not be converted to its declared type."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


@dataclass(frozen=True, slots=True)
class RoutingError(PathParamError):
    """A path segment failed to convert.

    ``identifier`` is a short machine-readable tag (``"fwi"`` for fixed-width
    integers, ``"bfp"`` for floating point, ``"uuid"``, ...). ``reason`` is
    the human-readable message, naming the target type.
    """

    identifier: str
    reason: str

    @property
    def status(self) -> int:
        return 400

    def to_http(self) -> BadRequest:
        """Return the client-facing error a router should respond with."""
        return BadRequest(self.reason)

    def __str__(self) -> str:
        return f"{self.identifier}: {self.reason}"
