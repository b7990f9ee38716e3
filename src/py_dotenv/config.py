"""Parser and query settings.

Two settings shape how an environment behaves: the character separating
a key from its value, and the fallback strategy used for lookups.  They
live on an immutable ``DotenvConfig`` that is handed to the parser and
to each ``Environment``.  Changing a setting means building a new config;
anything already parsed or bound keeps the config it was given.
"""

from dataclasses import dataclass, field, replace

from py_dotenv.query import DataSource, FallbackStrategy

_FORBIDDEN_DELIMITERS = frozenset({"#", '"', "\\"})


def _default_strategy() -> FallbackStrategy:
    """Query the configuration first, then the process."""
    return FallbackStrategy(query=DataSource.CONFIGURATION, fallback=DataSource.PROCESS)


@dataclass(frozen=True)
class DotenvConfig:
    """Settings shared by parsing, serialization, and lookups.

    Attributes:
        delimiter: The single character between a key and its value.
        fallback_strategy: Which data source to query, and which to fall
            back to on a miss.

    """

    delimiter: str = "="
    fallback_strategy: FallbackStrategy = field(default_factory=_default_strategy)

    def __post_init__(self) -> None:
        """Validate the delimiter."""
        if len(self.delimiter) != 1:
            msg = f"Delimiter must be a single character, got {self.delimiter!r}"
            raise ValueError(msg)
        if self.delimiter in _FORBIDDEN_DELIMITERS or self.delimiter.isspace():
            msg = f"Delimiter {self.delimiter!r} clashes with the file syntax"
            raise ValueError(msg)

    def with_delimiter(self, delimiter: str) -> "DotenvConfig":
        """Return a copy using *delimiter*."""
        return replace(self, delimiter=delimiter)

    def with_fallback_strategy(self, strategy: FallbackStrategy) -> "DotenvConfig":
        """Return a copy using *strategy*."""
        return replace(self, fallback_strategy=strategy)


DEFAULT_CONFIG = DotenvConfig()
"""Equals-delimited files, configuration first with process fallback."""
