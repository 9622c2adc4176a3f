"""Registry configuration.

ParamConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParamConfig:
    """Parameter registry configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ParamConfig(aliases=(("id", "int64"),), log_failures=False)
    """

    # Extra slugs accepted by ParameterRegistry.get(), as (alias, slug) pairs
    aliases: tuple[tuple[str, str], ...] = (("str", "string"), ("integer", "int"))

    # Logging
    log_failures: bool = True  # DEBUG record for every failed conversion
    logger_name: str = "pathparam.routing"

    def alias_map(self) -> dict[str, str]:
        """Return the aliases as a lookup dict."""
        return dict(self.aliases)
