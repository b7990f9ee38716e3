"""Convert Python-style member names to environment variable keys."""

import re

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def member_to_key(name: str) -> str:
    """Convert a camelCase (or snake_case) name to SCREAMING_SNAKE_CASE.

    Examples::

        apiKey           -> API_KEY
        nonExistentValue -> NON_EXISTENT_VALUE
        httpURLPrefix    -> HTTP_URL_PREFIX
        build_number     -> BUILD_NUMBER

    """
    return _WORD_BOUNDARY.sub("_", name).upper()
