"""Per-request parameter container.

The router fills a ``Parameters`` with the ``(slug, raw)`` pairs it captured
while matching, in path order. Handlers pull typed values out one at a time::

    def show_user(request):
        user_id = request.parameters.next(Int)
        return f"user id: {user_id}"
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pathparam.config import ParamConfig
from pathparam.errors import RoutingError
from pathparam.routing.component import PathComponent
from pathparam.routing.params import Parameter
from pathparam.routing.registry import ParameterRegistry, default_registry


class Parameters:
    """Ordered raw parameter values captured for one request.

    Not shared between requests; each request gets its own instance.
    Failed conversions are logged per *config*, as in ``ParameterRegistry``.
    """

    __slots__ = ("_config", "_index", "_logger", "_values")

    def __init__(
        self,
        values: Iterable[tuple[str, str]] = (),
        config: ParamConfig | None = None,
    ) -> None:
        self._values: list[tuple[str, str]] = list(values)
        self._index = 0
        self._config = config or ParamConfig()
        self._logger = logging.getLogger(self._config.logger_name)

    def next(self, parameter_type: type[Parameter]) -> Any:
        """Resolve the next captured value as *parameter_type*.

        Raises ``RoutingError`` when no values remain, when the next value
        was captured for a different slug, or when it is not convertible.
        """
        slug = parameter_type.routing_slug()
        if self._index >= len(self._values):
            msg = f"Insufficient parameters: no value left for {slug!r}"
            raise RoutingError("next", msg)

        captured_slug, raw = self._values[self._index]
        if captured_slug != slug:
            msg = f"Invalid parameter type: expected {slug!r}, next value is {captured_slug!r}"
            raise RoutingError("next", msg)

        self._index += 1
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

    def peek(self) -> tuple[str, str] | None:
        """Return the next ``(slug, raw)`` pair without consuming it."""
        if self._index >= len(self._values):
            return None
        return self._values[self._index]

    @property
    def remaining(self) -> int:
        return len(self._values) - self._index

    def raw_values(self) -> list[tuple[str, str]]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Parameters({self._values!r}, consumed={self._index})"


def resolve_all(
    components: Sequence[PathComponent],
    raw_segments: Sequence[str],
    registry: ParameterRegistry | None = None,
) -> dict[str, Any]:
    """Resolve every parameter component against the matched segments.

    *components* and *raw_segments* are aligned by position. Constant
    components must equal their segment exactly.

    Returns ``{slug: resolved_value}``. When a slug appears more than once
    the last value wins.
    """
    if len(components) != len(raw_segments):
        msg = f"Expected {len(components)} path segments, got {len(raw_segments)}"
        raise RoutingError("count", msg)

    if registry is None:
        registry = default_registry()
    resolved: dict[str, Any] = {}
    for component, raw in zip(components, raw_segments, strict=True):
        if not component.is_param:
            if component.value != raw:
                msg = f"Expected path segment {component.value!r}, got {raw!r}"
                raise RoutingError("constant", msg)
            continue
        slug = component.param_name or ""
        resolved[slug] = registry.resolve(slug, raw)
    return resolved
