"""Typed ``.env`` configuration with a process-environment fallback.

Re-exports public symbols so callers can write::

    from py_dotenv import Environment, Value, load_environment
"""

from py_dotenv.codec import encode_value, parse, serialize
from py_dotenv.config import DEFAULT_CONFIG, DotenvConfig
from py_dotenv.environment import Environment
from py_dotenv.errors import (
    DecodingError,
    EmptyKeyValuePairError,
    EncodingError,
    InvalidKeyError,
    MalformedKeyValuePairError,
)
from py_dotenv.naming import member_to_key
from py_dotenv.persistence import dump_environment, load_environment
from py_dotenv.query import DataSource, EnvironmentLookup, FallbackQuery, FallbackStrategy, process_lookup
from py_dotenv.store import OrderedStore, is_valid_key
from py_dotenv.value import Value, ValueType

__all__ = [
    "DEFAULT_CONFIG",
    "DataSource",
    "DecodingError",
    "DotenvConfig",
    "EmptyKeyValuePairError",
    "EncodingError",
    "Environment",
    "EnvironmentLookup",
    "FallbackQuery",
    "FallbackStrategy",
    "InvalidKeyError",
    "MalformedKeyValuePairError",
    "OrderedStore",
    "Value",
    "ValueType",
    "dump_environment",
    "encode_value",
    "is_valid_key",
    "load_environment",
    "member_to_key",
    "parse",
    "process_lookup",
    "serialize",
]
