"""The ordered key-value store behind an environment.

A ``.env`` file is an ordered list of entries, and writing it back out
should keep the entries where the user put them.  ``OrderedStore`` wraps
a plain dict (which keeps insertion order) and guards three invariants:

    - **No empty keys** — ``=value`` is never a valid entry.
    - **Writable keys** — a key never starts with ``#``, contains a line
      break, or has surrounding whitespace, so it reads back unchanged.
    - **No empty strings** — a STRING value must carry at least one
      character.  Booleans and numbers can never be empty.

Construction validates everything up front and is atomic: either every
pair is accepted, or an ``EmptyKeyValuePairError`` or ``InvalidKeyError``
names the first pair that failed and nothing is stored.

Mutation never fails.  ``set_value`` without ``force`` only fills keys
that are missing; with ``force`` it overwrites, and a ``None`` value
deletes the key.
"""

import logging
from collections.abc import Iterator, Mapping

from py_dotenv.errors import EmptyKeyValuePairError, InvalidKeyError
from py_dotenv.value import Value

log = logging.getLogger(__name__)

_COMMENT_PREFIX = "#"
_LINE_BREAKS = ("\n", "\r")


def is_valid_key(key: str) -> bool:
    """Return True if *key* survives being written to a file and parsed back."""
    return (
        bool(key)
        and key == key.strip()
        and not key.startswith(_COMMENT_PREFIX)
        and not any(brk in key for brk in _LINE_BREAKS)
    )


class OrderedStore:
    """An insertion-ordered mapping of keys to typed values."""

    def __init__(self, initial: Mapping[str, Value] | None = None) -> None:
        """Create a store, optionally seeded with already-typed values.

        Args:
            initial: Starting entries (copied, not referenced).

        Raises:
            EmptyKeyValuePairError: If a key is empty or a STRING value is empty.
            InvalidKeyError: If a key could not be written and read back.

        """
        validated: dict[str, Value] = {}
        for key, value in (initial or {}).items():
            if not key or value.is_empty:
                raise EmptyKeyValuePairError(key, value.string_value)
            if not is_valid_key(key):
                raise InvalidKeyError(key)
            validated[key] = value
        self._values = validated

    @classmethod
    def from_strings(cls, pairs: Mapping[str, str]) -> "OrderedStore":
        """Create a store from raw text pairs, inferring each value's type.

        Raises:
            EmptyKeyValuePairError: If a key or its raw text is empty, or the
                text is a quoted empty string such as ``""``.
            InvalidKeyError: If a key could not be written and read back.

        """
        inferred: dict[str, Value] = {}
        for key, text in pairs.items():
            value = Value.infer(text)
            if not key or value.is_empty:
                raise EmptyKeyValuePairError(key, text)
            inferred[key] = value
        return cls(inferred)

    @classmethod
    def from_values(cls, pairs: Mapping[str, Value]) -> "OrderedStore":
        """Create a store from already-typed values.

        Raises:
            EmptyKeyValuePairError: If a key or a STRING value is empty.
            InvalidKeyError: If a key could not be written and read back.

        """
        return cls(pairs)

    def get(self, key: str) -> Value | None:
        """Return the stored value for *key*, or None."""
        return self._values.get(key)

    def set_value(self, key: str, value: Value | str | None, *, force: bool = False) -> None:
        """Store *value* under *key*.

        Args:
            key: The entry to write.
            value: A typed value, raw text (inferred), or None to delete.
            force: Overwrite an existing entry.  Without it, writing to a
                key that already holds a value does nothing.

        """
        if key in self._values and not force:
            return
        if value is None:
            self._values.pop(key, None)
            return
        if isinstance(value, str):
            value = Value.infer(value)
        if not key or value.is_empty:
            log.warning("Ignoring empty key-value pair (%r, %r)", key, value.string_value)
            return
        if not is_valid_key(key):
            log.warning("Ignoring invalid key %r", key)
            return
        self._values[key] = value

    def discard(self, key: str) -> None:
        """Delete *key* if present (a forced write of None)."""
        self.set_value(key, None, force=True)

    def items(self) -> list[tuple[str, Value]]:
        """Return all (key, value) pairs in insertion order."""
        return list(self._values.items())

    def to_dict(self) -> dict[str, Value]:
        """Return an ordered copy of the entries."""
        return dict(self._values)

    def copy(self) -> "OrderedStore":
        """Return an independent copy of this store."""
        return OrderedStore(self._values)

    def __contains__(self, key: object) -> bool:
        """Return True if *key* has a stored value."""
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        """Iterate over keys in insertion order."""
        return iter(list(self._values))

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        """Two stores are equal when they hold the same entries in the same order."""
        if not isinstance(other, OrderedStore):
            return NotImplemented
        return self.items() == other.items()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Show the entries as text pairs."""
        pairs = ", ".join(f"{k}={v.string_value}" for k, v in self._values.items())
        return f"OrderedStore({pairs})"
