"""Typed configuration values — inferring a scalar type from literal text.

Every entry in a ``.env`` file is just text, but most of it is not meant
as text: ``DEBUG=true`` is a flag, ``RETRIES=3`` is a count, and
``TIMEOUT=10.5`` is a duration.  A ``Value`` captures exactly one of four
cases:

    - **BOOLEAN** — ``true`` / ``false`` (any letter case).
    - **FLOAT** — a decimal or exponent literal that is *not* an integer.
    - **INTEGER** — a signed 64-bit whole number.
    - **STRING** — anything else, with surrounding quotes removed.

Inference order matters.  Booleans are checked first, then floats (but
only when the text is not also an integer), then integers, and finally
everything falls through to a string.  Inference never fails.

Two values are equal only when both the type and the payload match, so
``Value.integer(1) != Value.boolean(True)`` even though ``1 == True`` in
plain Python.
"""

import math
import re
from dataclasses import dataclass
from enum import StrEnum

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_QUOTE = '"'
_ESCAPED_QUOTE = '\\"'


class ValueType(StrEnum):
    """The four cases a configuration value can take."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


_PAYLOAD_TYPES: dict[ValueType, type] = {
    ValueType.BOOLEAN: bool,
    ValueType.INTEGER: int,
    ValueType.FLOAT: float,
    ValueType.STRING: str,
}


def _parse_bool(text: str) -> bool | None:
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def _parse_int(text: str) -> int | None:
    """Return *text* as an int, or None if it is not a 64-bit integer literal."""
    if _INTEGER_PATTERN.fullmatch(text) is None:
        return None
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return None
    return number


def _parse_float(text: str) -> float | None:
    """Return *text* as a finite float, or None (``1e999`` overflows to None)."""
    if _FLOAT_PATTERN.fullmatch(text) is None:
        return None
    number = float(text)
    if math.isinf(number):
        return None
    return number


def _unquote(text: str) -> str:
    """Strip one pair of surrounding quotes and unescape ``\\"``."""
    if text.startswith(_QUOTE):
        text = text[1:]
    if text.endswith(_QUOTE):
        text = text[:-1]
    return text.replace(_ESCAPED_QUOTE, _QUOTE)


@dataclass(frozen=True)
class Value:
    """A single typed configuration value.

    Attributes:
        type: Which of the four cases this value is.
        payload: The Python object carried by the value
            (``bool``, ``int``, ``float``, or ``str``).

    """

    type: ValueType
    payload: bool | int | float | str

    def __post_init__(self) -> None:
        """Check that the payload fits the value type.

        Raises:
            TypeError: If the payload is the wrong Python type.
            ValueError: If an integer is outside the signed 64-bit range or
                a float is not finite.

        """
        expected = _PAYLOAD_TYPES[self.type]
        # bool is a subclass of int, so compare exact types
        if type(self.payload) is not expected:
            msg = f"{self.type} value needs a {expected.__name__} payload, got {self.payload!r}"
            raise TypeError(msg)
        if self.type is ValueType.INTEGER and not _INT64_MIN <= self.payload <= _INT64_MAX:
            msg = f"Integer {self.payload} is outside the signed 64-bit range"
            raise ValueError(msg)
        if self.type is ValueType.FLOAT and not math.isfinite(self.payload):
            msg = f"Float {self.payload!r} is not finite"
            raise ValueError(msg)

    @classmethod
    def boolean(cls, payload: bool) -> "Value":  # noqa: FBT001
        """Create a BOOLEAN value."""
        return cls(ValueType.BOOLEAN, bool(payload))

    @classmethod
    def integer(cls, payload: int) -> "Value":
        """Create an INTEGER value.

        Raises:
            ValueError: If *payload* does not fit in a signed 64-bit integer.

        """
        return cls(ValueType.INTEGER, int(payload))

    @classmethod
    def floating(cls, payload: float) -> "Value":
        """Create a FLOAT value."""
        return cls(ValueType.FLOAT, float(payload))

    @classmethod
    def string(cls, payload: str) -> "Value":
        """Create a STRING value (the payload is stored as-is)."""
        return cls(ValueType.STRING, str(payload))

    @classmethod
    def infer(cls, text: str) -> "Value":
        """Infer the most specific value type for *text*.

        The checks run in a fixed order: boolean, float (only if the text
        is not also an integer), integer, then string.  A string result
        has one leading and one trailing double quote removed and every
        ``\\"`` replaced by ``"``.

        Args:
            text: The raw literal, e.g. the right-hand side of ``KEY=VALUE``.

        Returns:
            The inferred value.  This never raises.

        """
        as_bool = _parse_bool(text)
        if as_bool is not None:
            return cls.boolean(as_bool)

        as_int = _parse_int(text)
        as_float = _parse_float(text)
        if as_float is not None and as_int is None:
            return cls.floating(as_float)
        if as_int is not None:
            return cls.integer(as_int)

        return cls.string(_unquote(text))

    @property
    def string_value(self) -> str:
        """Return the canonical text form used when writing a file.

        Booleans render as ``true`` / ``false``, numbers via ``repr``, and
        strings as their raw (unquoted, unescaped) payload.
        """
        match self.type:
            case ValueType.BOOLEAN:
                return "true" if self.payload else "false"
            case ValueType.INTEGER | ValueType.FLOAT:
                return repr(self.payload)
            case ValueType.STRING:
                return str(self.payload)

    @property
    def is_empty(self) -> bool:
        """Return True for a STRING value with no characters.

        Only strings can be empty; booleans and numbers never are.
        """
        return self.type is ValueType.STRING and self.payload == ""

    def __str__(self) -> str:
        """Return the same text as ``string_value``."""
        return self.string_value
