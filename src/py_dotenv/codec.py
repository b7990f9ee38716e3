r"""The ``.env`` file format — parsing text into a store and back.

Wire format::

    KEY=VALUE\n
    # a full-line comment\n
    OTHER_KEY="a \"quoted\" string"\n

Rules:
    - One entry per line; lines are separated by ``\n``.
    - A line whose *first* character is ``#`` is a comment.  There are no
      inline comments, so ``URL=http://host/#frag`` keeps its ``#``.
    - Every other line must split on the delimiter into exactly two parts,
      and both must be non-empty after trimming whitespace.  That includes
      blank lines: only the empty piece after a final newline is skipped.
    - A repeated key overwrites the earlier entry in place.

Serialization writes ``KEY<delimiter>VALUE\n`` for each entry in order.
String values are written bare unless reading them back would change
them (``"5"``, ``" padded "``, ``"true"``); those are wrapped in double
quotes with embedded quotes escaped as ``\"``.  An entry whose key or
value contains the delimiter, or whose value contains a line break, would
not read back as written, so serialization refuses it.
"""

import logging

from py_dotenv.config import DEFAULT_CONFIG, DotenvConfig
from py_dotenv.errors import EmptyKeyValuePairError, EncodingError, MalformedKeyValuePairError
from py_dotenv.store import OrderedStore
from py_dotenv.value import Value, ValueType

log = logging.getLogger(__name__)

_COMMENT_PREFIX = "#"
_NEWLINE = "\n"
_PAIR_PARTS = 2


def _split_lines(contents: str) -> list[str]:
    lines = contents.split(_NEWLINE)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse(contents: str, config: DotenvConfig = DEFAULT_CONFIG) -> OrderedStore:
    """Parse ``.env`` file contents into an ordered store.

    Args:
        contents: The whole file as text.
        config: Supplies the key/value delimiter.

    Returns:
        A store holding every entry, in file order.

    Raises:
        MalformedKeyValuePairError: If a non-comment line is not exactly
            one non-empty key and one non-empty value.
        EmptyKeyValuePairError: If a value is a quoted empty string such as
            ``""``; empty strings are never stored.

    """
    values: dict[str, Value] = {}
    for number, line in enumerate(_split_lines(contents), start=1):
        if line.startswith(_COMMENT_PREFIX):
            continue
        parts = [part.strip() for part in line.split(config.delimiter)]
        if len(parts) != _PAIR_PARTS or not all(parts):
            raise MalformedKeyValuePairError(line, number)
        key, text = parts
        value = Value.infer(text)
        if value.is_empty:
            raise EmptyKeyValuePairError(key, text)
        values[key] = value
    log.debug("Parsed %d entries", len(values))
    return OrderedStore(values)


def encode_value(value: Value) -> str:
    """Return the text written to a file for *value*.

    Non-string values use their canonical text.  A string is quoted only
    when its bare text would be read back as something else.
    """
    text = value.string_value
    if value.type is not ValueType.STRING:
        return text
    if Value.infer(text) == value and text == text.strip():
        return text
    escaped = text.replace('"', '\\"')
    return f'"{escaped}"'


def _encode_line(key: str, value: Value, delimiter: str) -> str:
    text = encode_value(value)
    if delimiter in key:
        raise EncodingError(key, f"key contains the delimiter {delimiter!r}")
    if delimiter in text:
        raise EncodingError(key, f"value contains the delimiter {delimiter!r}")
    if _NEWLINE in text:
        raise EncodingError(key, "value contains a line break")
    return f"{key}{delimiter}{text}{_NEWLINE}"


def serialize(store: OrderedStore, config: DotenvConfig = DEFAULT_CONFIG) -> str:
    """Render *store* as ``.env`` file contents, one entry per line.

    Raises:
        EncodingError: If a key or value contains the delimiter, or a value
            contains a line break; such a line could not be parsed back.

    """
    lines = [_encode_line(key, value, config.delimiter) for key, value in store.items()]
    log.debug("Serialized %d entries", len(lines))
    return "".join(lines)
