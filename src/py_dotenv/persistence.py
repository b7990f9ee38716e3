"""Environment persistence — load from and save to ``.env`` files.

    - ``load_environment(path)`` — read a file and parse it.
    - ``dump_environment(env, path)`` — serialize the stored entries and
      write them out.

Files are read and written whole, as UTF-8 text.  Values that were only
resolved from the process environment are not part of the store and are
therefore never written.
"""

import logging
from pathlib import Path

from py_dotenv.config import DEFAULT_CONFIG, DotenvConfig
from py_dotenv.environment import Environment
from py_dotenv.query import EnvironmentLookup, process_lookup

log = logging.getLogger(__name__)

_ENCODING = "utf-8"


def load_environment(
    path: Path | str,
    *,
    lookup: EnvironmentLookup = process_lookup,
    config: DotenvConfig = DEFAULT_CONFIG,
) -> Environment:
    """Load an environment from a ``.env`` file.

    Args:
        path: The file path to read from.
        lookup: Read-only view of process environment variables.
        config: Delimiter and fallback strategy to use.

    Returns:
        An environment holding the file's entries.

    Raises:
        FileNotFoundError: If the path does not exist.
        MalformedKeyValuePairError: If a line is not a valid pair.

    """
    path = Path(path)
    text = path.read_text(encoding=_ENCODING)
    env = Environment.from_contents(text, lookup=lookup, config=config)
    log.debug("Loaded %d entries from %s", len(env), path)
    return env


def dump_environment(env: Environment, path: Path | str) -> None:
    """Save an environment's stored entries to a ``.env`` file.

    Args:
        env: The environment to save.
        path: The file path to write to (replaced if it exists).

    Raises:
        EncodingError: If an entry could not be written; the file is left
            untouched.

    """
    path = Path(path)
    path.write_text(env.serialize(), encoding=_ENCODING)
    log.debug("Saved %d entries to %s", len(env), path)
