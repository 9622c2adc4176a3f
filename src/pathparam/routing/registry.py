"""Slug registry mapping route-pattern keys to parameter types.

Types are registered during setup. Lookups and resolution are read-only,
so a populated registry can be shared across request-handling threads.
"""

import logging
from collections.abc import Iterator
from typing import Any, TypeVar

from pathparam.config import ParamConfig
from pathparam.errors import ConfigurationError, RoutingError
from pathparam.routing.params import BUILTIN_PARAMETERS, Parameter

P = TypeVar("P", bound=type[Parameter])


class ParameterRegistry:
    """Slug -> parameter type lookup.

    Usage::

        registry = default_registry()

        @registry.register
        class Widget(Parameter):
            ...

        registry.resolve("int32", "42")  -> 42
    """

    __slots__ = ("_aliases", "_config", "_logger", "_types")

    def __init__(self, config: ParamConfig | None = None) -> None:
        self._config = config or ParamConfig()
        self._aliases = self._config.alias_map()
        self._logger = logging.getLogger(self._config.logger_name)
        self._types: dict[str, type[Parameter]] = {}

    @property
    def config(self) -> ParamConfig:
        return self._config

    def register(self, parameter_type: P) -> P:
        """Register a parameter type under its routing slug.

        Returns the type unchanged so this works as a class decorator.
        Re-registering the same type is a no-op.
        """
        if not (isinstance(parameter_type, type) and issubclass(parameter_type, Parameter)):
            msg = f"{parameter_type!r} is not a Parameter subclass"
            raise ConfigurationError(msg)

        slug = parameter_type.routing_slug()
        existing = self._types.get(slug)
        if existing is not None and existing is not parameter_type:
            msg = (
                f"Routing slug {slug!r} is already registered to {existing.__name__}; "
                f"set 'slug' on {parameter_type.__name__} to disambiguate"
            )
            raise ConfigurationError(msg)
        self._types[slug] = parameter_type
        return parameter_type

    def get(self, slug: str) -> type[Parameter]:
        """Return the parameter type for *slug* (or one of its aliases).

        A registered slug always wins over an alias of the same name.
        """
        parameter_type = self._types.get(slug)
        if parameter_type is not None:
            return parameter_type
        try:
            return self._types[self._aliases[slug]]
        except KeyError:
            msg = f"No parameter type is registered for slug {slug!r}"
            raise ConfigurationError(msg) from None

    def resolve(self, slug: str, raw: str) -> Any:
        """Look up *slug* and resolve *raw* with that parameter type.

        Raises ``ConfigurationError`` for an unknown slug and
        ``RoutingError`` when *raw* is not convertible.
        """
        parameter_type = self.get(slug)
        try:
            return parameter_type.resolve_parameter(raw)
        except RoutingError as exc:
            if self._config.log_failures:
                self._logger.debug(
                    "Parameter %r rejected %r (%s): %s",
                    slug,
                    raw,
                    exc.identifier,
                    exc.reason,
                )
            raise

    def slugs(self) -> list[str]:
        return sorted(self._types)

    def __contains__(self, slug: object) -> bool:
        if not isinstance(slug, str):
            return False
        return slug in self._types or self._aliases.get(slug) in self._types

    def __iter__(self) -> Iterator[type[Parameter]]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)


def default_registry(config: ParamConfig | None = None) -> ParameterRegistry:
    """Return a fresh registry holding every built-in parameter type."""
    registry = ParameterRegistry(config)
    for parameter_type in BUILTIN_PARAMETERS:
        registry.register(parameter_type)
    return registry
