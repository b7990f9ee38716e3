"""Errors raised while building or writing an environment.

Decoding failures are validation errors: they are raised immediately, never
retried, and the operation that raised them commits nothing.
"""


class DecodingError(Exception):
    """Raise when file contents or a mapping cannot become an environment."""


class MalformedKeyValuePairError(DecodingError):
    """Raise when a line does not split into exactly one key and one value."""

    def __init__(self, line: str, line_number: int) -> None:
        """Record the offending line and its 1-based position."""
        self.line = line
        self.line_number = line_number
        msg = f"Malformed key-value pair on line {line_number}: {line!r}"
        super().__init__(msg)


class EmptyKeyValuePairError(DecodingError):
    """Raise when a key or a string value is empty."""

    def __init__(self, key: str, value: str) -> None:
        """Record the pair that failed validation."""
        self.key = key
        self.value = value
        msg = f"Empty key or value in pair ({key!r}, {value!r})"
        super().__init__(msg)


class InvalidKeyError(DecodingError):
    """Raise when a key could not be written to a file and read back.

    Keys must not start with ``#``, contain a line break, or carry
    surrounding whitespace.
    """

    def __init__(self, key: str) -> None:
        """Record the rejected key."""
        self.key = key
        msg = f"Invalid key {key!r}"
        super().__init__(msg)


class EncodingError(Exception):
    """Raise when an entry cannot be written as a parseable line."""

    def __init__(self, key: str, reason: str) -> None:
        """Record the entry's key and what makes it unwritable."""
        self.key = key
        self.reason = reason
        msg = f"Cannot serialize {key!r}: {reason}"
        super().__init__(msg)
