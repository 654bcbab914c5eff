"""Attribute name translation between the API and Python conventions.

The Pug API names attributes in camelCase (``startedAt``, ``playbackUrls``)
while resources expose them in snake_case (``started_at``,
``playback_urls``). Translation happens only at the API boundary: when a
payload is loaded and when a request body or patch is generated.

The mapping is not lossless for every input. ``playbackURLs`` becomes
``playback_urls``, which camelizes back to ``playbackUrls``; the API itself
uses the latter spelling, and callers depend on this exact mapping.
"""

import re
from typing import Any, Callable

# Segments whose camelCase spelling is not simply capitalized.
# Empty for now: every field in the API follows plain camelCase.
ACRONYMS: dict[str, str] = {}

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z]\w)")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(name: Any) -> str:
    """Convert a camelCase name to snake_case.

    Acronyms are split only when a new word follows them, so a trailing
    acronym such as ``URLs`` stays together.

    Examples:
        >>> underscore("startedAt")
        'started_at'
        >>> underscore("playbackURLs")
        'playback_urls'
        >>> underscore("HTTPSConnection")
        'https_connection'
    """
    text = str(name)
    text = _ACRONYM_BOUNDARY.sub(r"\1_\2", text)
    text = _WORD_BOUNDARY.sub(r"\1_\2", text)
    return text.lower()


def camelize(name: Any) -> str:
    """Convert a snake_case name to camelCase.

    Examples:
        >>> camelize("started_at")
        'startedAt'
        >>> camelize("api_endpoint")
        'apiEndpoint'
    """
    parts = str(name).split("_")
    buffer = [parts[0]]
    for part in parts[1:]:
        override = ACRONYMS.get(part.lower())
        if override is not None:
            buffer.append(override)
        else:
            buffer.append(part[:1].upper() + part[1:])
    return "".join(buffer)


def from_api(value: Any) -> Any:
    """Convert an API payload (camelCase keys) to snake_case keys, recursively."""
    return _deep_transform_keys(value, underscore)


def to_api(value: Any) -> Any:
    """Convert snake_case keys to camelCase for a request body, recursively."""
    return _deep_transform_keys(value, camelize)


def _deep_transform_keys(value: Any, transform: Callable[[Any], str]) -> Any:
    # Mapping and list subclasses (tracked containers included) come back as
    # plain dict and list; the input is never mutated.
    if isinstance(value, dict):
        return {transform(k): _deep_transform_keys(v, transform) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_deep_transform_keys(item, transform) for item in value]
    return value
