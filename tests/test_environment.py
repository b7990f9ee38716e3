"""Tests for the environment aggregate.

An environment owns a store of typed values and falls back to process
variables on a miss.  Only the store is ever mutated or serialized.
"""

import copy

import pytest

from py_dotenv.config import DEFAULT_CONFIG
from py_dotenv.environment import Environment
from py_dotenv.errors import EmptyKeyValuePairError, MalformedKeyValuePairError
from py_dotenv.query import DataSource, FallbackStrategy
from py_dotenv.value import Value

_NO_PROCESS: dict[str, str] = {}


def _env(pairs: dict[str, str], process: dict[str, str] | None = None) -> Environment:
    """Create an environment with a fake process lookup."""
    return Environment.from_strings(pairs, lookup=(process or _NO_PROCESS).get)


class TestConstruction:
    """Verify the ways to build an environment."""

    def test_empty(self) -> None:
        """A bare environment has no stored entries."""
        env = Environment(lookup=_NO_PROCESS.get)
        assert len(env) == 0
        assert env.serialize() == ""

    def test_from_strings(self) -> None:
        """Raw text pairs should be stored with inferred types."""
        env = _env({"A": "1", "B": "x"})
        assert env.values == {"A": Value.integer(1), "B": Value.string("x")}

    def test_from_strings_rejects_empty_pair(self) -> None:
        """An empty key or value should fail construction."""
        with pytest.raises(EmptyKeyValuePairError):
            Environment.from_strings({"k": ""})

    def test_from_contents(self) -> None:
        """File contents should be parsed into the store."""
        env = Environment.from_contents("A=true\n", lookup=_NO_PROCESS.get)
        assert env["A"] == Value.boolean(True)

    def test_from_contents_rejects_malformed(self) -> None:
        """A malformed line should fail construction."""
        with pytest.raises(MalformedKeyValuePairError):
            Environment.from_contents("A=B=C\n")

    def test_store_is_copied(self) -> None:
        """Changes to a copy must not leak into the original."""
        env = _env({"A": "1"})
        clone = env.copy()
        clone.set_value("B", "2")
        assert "B" not in env
        assert "B" in clone


class TestQueries:
    """Verify lookups through the fallback strategy."""

    def test_store_wins_over_process(self) -> None:
        """A stored value should shadow a process variable."""
        env = _env({"A": "file"}, {"A": "process"})
        assert env["A"] == Value.string("file")

    def test_process_fallback(self) -> None:
        """A key missing from the store should come from the process."""
        env = _env({}, {"DEBUG": "true"})
        assert env["DEBUG"] == Value.boolean(True)
        assert "DEBUG" not in env

    def test_missing_key_is_none(self) -> None:
        """Absence is not an error."""
        assert _env({})["MISSING"] is None

    def test_get_with_default(self) -> None:
        """``get`` should return the default when no source has the key."""
        env = _env({})
        default = Value.integer(7)
        assert env.get("MISSING", default) is default
        assert env.get("MISSING") is None

    def test_member_lookup(self) -> None:
        """camelCase member names should map to SCREAMING_SNAKE_CASE keys."""
        env = _env({"API_KEY": "secret", "BUILD_NUMBER": "5"})
        assert env.member("apiKey") == Value.string("secret")
        assert env.buildNumber == Value.integer(5)
        assert env.api_key == Value.string("secret")
        assert env.nonExistentValue is None

    def test_private_attributes_are_not_keys(self) -> None:
        """Underscore names must raise AttributeError, not query."""
        env = _env({})
        with pytest.raises(AttributeError):
            _ = env._does_not_exist

    def test_deepcopy(self) -> None:
        """Attribute lookups must not break the copy protocol."""
        env = _env({"A": "1"})
        clone = copy.deepcopy(env)
        assert clone.values == env.values

    def test_with_config_changes_strategy(self) -> None:
        """A new config should apply to later queries only on the copy."""
        env = _env({"A": "file"}, {"A": "process"})
        process_first = DEFAULT_CONFIG.with_fallback_strategy(
            FallbackStrategy(query=DataSource.PROCESS, fallback=DataSource.CONFIGURATION),
        )
        assert env.with_config(process_first)["A"] == Value.string("process")
        assert env["A"] == Value.string("file")


class TestMutation:
    """Verify set and remove semantics."""

    def test_set_value_without_force_is_noop(self) -> None:
        """An existing key should keep its value without force."""
        env = _env({"A": "1"})
        env.set_value("A", Value.integer(2))
        assert env["A"] == Value.integer(1)

    def test_set_value_with_force(self) -> None:
        """Force should overwrite an existing key."""
        env = _env({"A": "1"})
        env.set_value("A", Value.integer(2), force=True)
        assert env["A"] == Value.integer(2)

    def test_setitem_does_not_overwrite(self) -> None:
        """Item assignment behaves like an unforced set."""
        env = _env({"A": "1"})
        env["A"] = "2"
        env["B"] = "3"
        assert env["A"] == Value.integer(1)
        assert env["B"] == Value.integer(3)

    def test_set_member(self) -> None:
        """Member names should be converted before writing."""
        env = _env({})
        env.set_member("networkRetries", Value.integer(3))
        assert env.values == {"NETWORK_RETRIES": Value.integer(3)}

    def test_remove_returns_stored_value(self) -> None:
        """Removing should return the value and delete it from the store."""
        env = _env({"A": "1"})
        assert env.remove_value("A") == Value.integer(1)
        assert "A" not in env
        assert env["A"] is None

    def test_remove_returns_fallback_value(self) -> None:
        """The returned value may come from the process via fallback."""
        env = _env({}, {"HOME": "/root"})
        assert env.remove_value("HOME") == Value.string("/root")
        assert "HOME" not in env

    def test_remove_then_process_still_visible(self) -> None:
        """Removing a stored key exposes the process value behind it."""
        env = _env({"A": "file"}, {"A": "process"})
        assert env.remove_value("A") == Value.string("file")
        assert env["A"] == Value.string("process")

    def test_remove_missing_key(self) -> None:
        """Removing a key nobody has should return None."""
        env = _env({})
        assert env.remove_value("NOPE") is None

    def test_delitem(self) -> None:
        """``del env[key]`` should remove from the store."""
        env = _env({"A": "1"})
        del env["A"]
        assert len(env) == 0


class TestSerialization:
    """Verify that only stored entries are written."""

    def test_typed_values(self) -> None:
        """Typed values should serialize in insertion order."""
        env = Environment.from_values(
            {
                "apiKey": Value.string("some-secret"),
                "onboardingEnabled": Value.boolean(True),
                "networkRetries": Value.integer(3),
                "networkTimeout": Value.floating(10.5),
            },
            lookup=_NO_PROCESS.get,
        )
        expected = "apiKey=some-secret\nonboardingEnabled=true\nnetworkRetries=3\nnetworkTimeout=10.5\n"
        assert env.serialize() == expected

    def test_process_values_are_not_persisted(self) -> None:
        """Values read only from the process must not be written."""
        env = _env({"A": "1"}, {"B": "2"})
        assert env["B"] == Value.integer(2)
        assert env.serialize() == "A=1\n"

    def test_custom_delimiter(self) -> None:
        """The environment's config supplies the delimiter."""
        config = DEFAULT_CONFIG.with_delimiter(":")
        env = Environment.from_contents("A:1\n", lookup=_NO_PROCESS.get, config=config)
        assert env.serialize() == "A:1\n"


class TestAttributeAssignment:
    """Verify that ``env.apiKey = value`` writes through to the store."""

    def test_assignment_stores_under_derived_key(self) -> None:
        """A camelCase member maps to its SCREAMING_SNAKE_CASE key."""
        env = _env({})
        env.apiKey = Value.string("x")
        assert env.values == {"API_KEY": Value.string("x")}
        assert env.apiKey == Value.string("x")
        assert env.serialize() == "API_KEY=x\n"

    def test_assigned_text_is_inferred(self) -> None:
        """Raw text is typed the same way as ``env[key] = text``."""
        env = _env({})
        env.max_retries = "3"
        assert env.values == {"MAX_RETRIES": Value.integer(3)}

    def test_assignment_does_not_overwrite(self) -> None:
        """Like ``env[key] = value``, an existing entry is kept."""
        env = _env({"API_KEY": "old"})
        env.apiKey = "new"
        assert env["API_KEY"] == Value.string("old")

    def test_class_attributes_are_read_only(self) -> None:
        """Properties and methods cannot be replaced through assignment."""
        env = _env({"A": "1"})
        with pytest.raises(AttributeError, match="read-only"):
            env.values = {}  # type: ignore[misc]
        assert env.values == {"A": Value.integer(1)}

    def test_unsupported_type_is_rejected(self) -> None:
        """Only values and text can be stored."""
        env = _env({})
        with pytest.raises(TypeError):
            env.apiKey = 5
        assert len(env) == 0
