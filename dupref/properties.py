"""Parse the ``properties:Key=Value;Key=Value`` command line argument.

The pairs become global properties for loading project files, e.g.::

    properties:Configuration=Debug;Platform=AnyCPU
"""

from __future__ import annotations

from dupref.exceptions import PropertiesFormatError

PROPERTIES_PREFIX = "properties:"


def parse_properties(text: str) -> dict[str, str]:
    """Return the key/value pairs of a ``properties:`` argument.

    Empty segments are ignored and a later key overrides an earlier one.
    Values may contain ``=``; only the first one separates key from value.
    """
    if not text.startswith(PROPERTIES_PREFIX):
        raise PropertiesFormatError(
            f"Optional parameter must start with '{PROPERTIES_PREFIX}', got {text!r}"
        )

    result: dict[str, str] = {}
    for segment in text[len(PROPERTIES_PREFIX):].split(";"):
        if not segment.strip():
            continue
        key, sep, value = segment.partition("=")
        key = key.strip()
        if not sep:
            raise PropertiesFormatError(f"Property {segment!r} is missing '=' (expected Key=Value)")
        if not key:
            raise PropertiesFormatError(f"Property {segment!r} has an empty name")
        result[key] = value
    return result
