"""The environment — a parsed ``.env`` file plus the process it runs in.

An ``Environment`` owns one ``OrderedStore`` (the file's entries) and
holds a read-only lookup into the host process's environment variables.
Reads go through a ``FallbackQuery`` so that a key missing from the file
can still be answered by the process (or the other way round, depending
on the configured strategy).  Writes only ever touch the store, and only
the store is serialized; values borrowed from the process are never
persisted.

Keys can be given directly (``env["API_KEY"]``) or as Python-style member
names (``env.api_key`` / ``env.member("apiKey")``), which are converted to
SCREAMING_SNAKE_CASE first.  Assigning ``env.apiKey = value`` writes to the
store the same way ``env["API_KEY"] = value`` does.
"""

from collections.abc import Iterator, Mapping

from py_dotenv import codec
from py_dotenv.config import DEFAULT_CONFIG, DotenvConfig
from py_dotenv.naming import member_to_key
from py_dotenv.query import EnvironmentLookup, FallbackQuery, process_lookup
from py_dotenv.store import OrderedStore
from py_dotenv.value import Value


class Environment:
    """Typed configuration values with a fallback to process variables.

    Each instance owns its store; modifying one environment does not
    affect any other, and the process lookup is never written to.
    """

    def __init__(
        self,
        store: OrderedStore | None = None,
        *,
        lookup: EnvironmentLookup = process_lookup,
        config: DotenvConfig = DEFAULT_CONFIG,
    ) -> None:
        """Create an environment around a store.

        Args:
            store: Starting entries (copied, not referenced).  Empty if None.
            lookup: Read-only view of process environment variables.
            config: Delimiter and fallback strategy to use.

        """
        self._store = store.copy() if store is not None else OrderedStore()
        self._lookup = lookup
        self._config = config
        self._query = FallbackQuery(self._store, lookup, config.fallback_strategy)

    # -- Construction ----------------------------------------------------------

    @classmethod
    def from_strings(
        cls,
        pairs: Mapping[str, str],
        *,
        lookup: EnvironmentLookup = process_lookup,
        config: DotenvConfig = DEFAULT_CONFIG,
    ) -> "Environment":
        """Create an environment from raw text pairs.

        Raises:
            EmptyKeyValuePairError: If a key or value is empty.
            InvalidKeyError: If a key could not be written and read back.

        """
        return cls(OrderedStore.from_strings(pairs), lookup=lookup, config=config)

    @classmethod
    def from_values(
        cls,
        pairs: Mapping[str, Value],
        *,
        lookup: EnvironmentLookup = process_lookup,
        config: DotenvConfig = DEFAULT_CONFIG,
    ) -> "Environment":
        """Create an environment from typed values.

        Raises:
            EmptyKeyValuePairError: If a key or a STRING value is empty.
            InvalidKeyError: If a key could not be written and read back.

        """
        return cls(OrderedStore.from_values(pairs), lookup=lookup, config=config)

    @classmethod
    def from_contents(
        cls,
        contents: str,
        *,
        lookup: EnvironmentLookup = process_lookup,
        config: DotenvConfig = DEFAULT_CONFIG,
    ) -> "Environment":
        """Create an environment from ``.env`` file contents.

        Raises:
            MalformedKeyValuePairError: If a line is not a valid pair.
            EmptyKeyValuePairError: If a value is a quoted empty string.

        """
        return cls(codec.parse(contents, config), lookup=lookup, config=config)

    # -- Settings --------------------------------------------------------------

    @property
    def config(self) -> DotenvConfig:
        """Return the settings this environment was built with."""
        return self._config

    def with_config(self, config: DotenvConfig) -> "Environment":
        """Return a copy of this environment bound to *config*."""
        return Environment(self._store, lookup=self._lookup, config=config)

    # -- Queries ---------------------------------------------------------------

    def query_value(self, key: str) -> Value | None:
        """Return the value for *key* per the fallback strategy, or None."""
        return self._query.query_value(key)

    def get(self, key: str, default: Value | None = None) -> Value | None:
        """Return the value for *key*, or *default* if no source has it."""
        value = self.query_value(key)
        return value if value is not None else default

    def member(self, name: str) -> Value | None:
        """Look up a camelCase or snake_case member name, e.g. ``apiKey``."""
        return self.query_value(member_to_key(name))

    @property
    def values(self) -> dict[str, Value]:
        """Return the stored entries in order (process values excluded)."""
        return self._store.to_dict()

    # -- Mutation --------------------------------------------------------------

    def set_value(self, key: str, value: Value | str | None, *, force: bool = False) -> None:
        """Write *value* to the store.

        Without *force*, a key that already has a stored value is left
        alone.  With *force*, the value is overwritten, or removed when
        *value* is None.  Raw strings are type-inferred.
        """
        self._store.set_value(key, value, force=force)

    def set_member(self, name: str, value: Value | str | None, *, force: bool = False) -> None:
        """Write to the key derived from member *name*."""
        self.set_value(member_to_key(name), value, force=force)

    def remove_value(self, key: str) -> Value | None:
        """Remove *key* from the store and return what it resolved to.

        The returned value comes from the normal query path, so it may be
        a process value even though only the store is modified.
        """
        old_value = self.query_value(key)
        self._store.discard(key)
        return old_value

    # -- Serialization ---------------------------------------------------------

    def serialize(self) -> str:
        """Return the stored entries as ``.env`` file contents.

        Raises:
            EncodingError: If an entry would not parse back as written.

        """
        return codec.serialize(self._store, self._config)

    def copy(self) -> "Environment":
        """Return an independent copy of this environment."""
        return Environment(self._store, lookup=self._lookup, config=self._config)

    # -- Container protocol ----------------------------------------------------

    def __getitem__(self, key: str) -> Value | None:
        """Return ``query_value(key)``; a missing key gives None."""
        return self.query_value(key)

    def __setitem__(self, key: str, value: Value | str | None) -> None:
        """Set *key* only if the store does not already hold it."""
        self.set_value(key, value)

    def __delitem__(self, key: str) -> None:
        """Remove *key* from the store."""
        self.remove_value(key)

    def __contains__(self, key: object) -> bool:
        """Return True if the store (not the process) holds *key*."""
        return key in self._store

    def __iter__(self) -> Iterator[str]:
        """Iterate over stored keys in order."""
        return iter(self._store)

    def __len__(self) -> int:
        """Return the number of stored entries."""
        return len(self._store)

    def __getattr__(self, name: str) -> Value | None:
        """Resolve ``env.api_key`` / ``env.apiKey`` as the key ``API_KEY``."""
        if name.startswith("_"):
            raise AttributeError(name)
        return self.member(name)

    def __setattr__(self, name: str, value: object) -> None:
        """Write ``env.apiKey = value`` to the key ``API_KEY`` (unforced).

        Underscore names are ordinary instance attributes.  Names defined on
        the class (``values``, ``config``, methods) cannot be assigned.
        """
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        if hasattr(type(self), name):
            msg = f"{type(self).__name__}.{name} is read-only"
            raise AttributeError(msg)
        if value is not None and not isinstance(value, Value | str):
            msg = f"Cannot store {type(value).__name__} as a configuration value"
            raise TypeError(msg)
        self.set_member(name, value)

    def __repr__(self) -> str:
        """Show the stored entries."""
        return f"Environment({self._store!r})"
