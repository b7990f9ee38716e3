"""Fallback queries — resolving a key across two data sources.

A value can come from two places:

    - **CONFIGURATION** — the ordered store parsed from the ``.env`` file.
    - **PROCESS** — the host process's environment variables.

A ``FallbackStrategy`` names the source to ask first and, optionally, the
source to ask when the first one has nothing.  The default asks the
configuration and falls back to the process, so a file entry always wins
over an inherited variable of the same name.

Process variables are plain strings; they go through the same type
inference as file entries.  They are never copied into the store, so they
are never written back to disk.
"""

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from py_dotenv.store import OrderedStore
from py_dotenv.value import Value

log = logging.getLogger(__name__)

EnvironmentLookup: TypeAlias = Callable[[str], str | None]
"""A read-only ``key -> str | None`` view of process environment variables."""


def process_lookup(key: str) -> str | None:
    """Read *key* from ``os.environ`` at call time."""
    return os.environ.get(key)


class DataSource(StrEnum):
    """Where a value can be read from."""

    CONFIGURATION = "configuration"
    PROCESS = "process"


@dataclass(frozen=True)
class FallbackStrategy:
    """Which data source to query first, and which to fall back to.

    Falling back to the source that was just queried is pointless, so a
    fallback equal to ``query`` is replaced by None.

    Attributes:
        query: The data source consulted first.
        fallback: The data source consulted on a miss, or None to disable
            falling back.

    """

    query: DataSource
    fallback: DataSource | None = DataSource.PROCESS

    def __post_init__(self) -> None:
        """Drop a fallback that repeats the query source."""
        if self.fallback == self.query:
            object.__setattr__(self, "fallback", None)


class FallbackQuery:
    """Resolve keys against a store and a process lookup per a strategy."""

    def __init__(
        self,
        store: OrderedStore,
        lookup: EnvironmentLookup,
        strategy: FallbackStrategy,
    ) -> None:
        """Bind the two data sources and the strategy that orders them."""
        self._store = store
        self._lookup = lookup
        self._strategy = strategy

    @property
    def strategy(self) -> FallbackStrategy:
        """Return the strategy used by this query."""
        return self._strategy

    def query_value(self, key: str) -> Value | None:
        """Return the value for *key*, falling back once on a miss.

        Absence is a normal outcome and is reported as None; this never
        raises.
        """
        value = self.resolve(self._strategy.query, key)
        if value is not None:
            return value
        value = self.resolve(self._strategy.fallback, key)
        if value is not None:
            log.debug("Resolved %s from fallback source %s", key, self._strategy.fallback)
        return value

    def resolve(self, source: DataSource | None, key: str) -> Value | None:
        """Look *key* up in a single data source.

        Args:
            source: The data source to read, or None (always a miss).
            key: The key to look up.

        Returns:
            The stored value, the inferred process value, or None.

        """
        match source:
            case None:
                return None
            case DataSource.CONFIGURATION:
                return self._store.get(key)
            case DataSource.PROCESS:
                raw = self._lookup(key)
                return Value.infer(raw) if raw is not None else None
