"""PathComponent frozen dataclass and path-building helpers."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pathparam.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class PathComponent:
    """A registration-time segment of a route path.

    Constant:  ``users``  (is_param=False)
    Param:     ``{int}``  (is_param=True, param_name="int", convertible=Int)

    ``convertible`` is the type whose ``convert_to_data`` /
    ``convert_from_data`` pair the router uses for this segment.
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    convertible: type | None = None

    @classmethod
    def constant(cls, value: str) -> "PathComponent":
        return cls(value=value)

    @classmethod
    def parameter(cls, slug: str, convertible: type) -> "PathComponent":
        return cls(
            value=f"{{{slug}}}",
            is_param=True,
            param_name=slug,
            convertible=convertible,
        )

    @property
    def pattern(self) -> str:
        return self.value


def build_path(*parts: Any) -> tuple[PathComponent, ...]:
    """Build path components from constants and parameter types.

    Examples::

        build_path("users", Int)          -> (users, {int})
        build_path("/api/v1/items", UUID) -> (api, v1, items, {uuid})
    """
    from pathparam.routing.params import Parameter

    components: list[PathComponent] = []
    for part in parts:
        if isinstance(part, PathComponent):
            components.append(part)
        elif isinstance(part, str):
            components.extend(PathComponent.constant(p) for p in part.split("/") if p)
        elif isinstance(part, type) and issubclass(part, Parameter):
            components.append(part.path_component())
        else:
            msg = f"Cannot build a path component from {part!r}"
            raise ConfigurationError(msg)
    return tuple(components)


def format_path(components: Iterable[PathComponent]) -> str:
    """Render components as a route pattern: ``/users/{int}``."""
    return "/" + "/".join(c.pattern for c in components)
