"""
# Web Toolkit: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import Any, Optional


def extract_nested_value(mapping: Any, *keys: Any) -> Any:
    """
    Follow a chain of keys (or list indices) through decoded JSON.

    Returns None as soon as a key is absent, rather than raising,
    since third-party API payloads routinely omit fields.
    """
    value = mapping
    for key in keys:
        try:
            value = value[key]
        except (KeyError, IndexError, TypeError):
            return None

    return value


def extract_url_extension(url: str) -> str:
    """
    Extract the file extension (without the dot) from the final path segment of a URL.

    Query string and fragment are disregarded.
    """
    path = re.sub(pattern=r'[?#] [\s\S]* \Z', repl='', string=url, flags=re.VERBOSE)
    basename = path.rsplit('/', 1)[-1]
    match = re.search(pattern=r'[.] (?P<extension> [^.]* ) \Z', string=basename, flags=re.VERBOSE)
    if match is None:
        return ''

    return match.group('extension')


def none_to_empty_string(string: Optional[str]) -> str:
    if string is None:
        return ''

    return string
