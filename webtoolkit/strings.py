"""
# Web Toolkit: strings.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

String helpers.
"""

import hmac
import re
import secrets
import unicodedata
from typing import Union

from webtoolkit.constants import RANDOM_CHARACTERS, RANDOM_DIGITS, RANDOM_LETTERS

EMAIL_PATTERN_COMPILED = re.compile(
    pattern=r'''
        (?P<local_part>
            [a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+
            (?: [.] [a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+ )*
        )
        @
        (?P<domain>
            (?: [a-zA-Z0-9] (?: [a-zA-Z0-9-]{0,61} [a-zA-Z0-9] )? [.] )+
            [a-zA-Z] (?: [a-zA-Z0-9-]{0,61} [a-zA-Z0-9] )?
        )
    ''',
    flags=re.ASCII | re.VERBOSE,
)
EMAIL_LOCAL_PART_MAX_LENGTH = 64
EMAIL_MAX_LENGTH = 254


def check_mail(email: str) -> bool:
    """
    Validate an email address.
    """
    if len(email) > EMAIL_MAX_LENGTH:
        return False

    match = EMAIL_PATTERN_COMPILED.fullmatch(email)
    if match is None:
        return False

    return len(match.group('local_part')) <= EMAIL_LOCAL_PART_MAX_LENGTH


def strip_tags(text: str) -> str:
    return re.sub(pattern=r'<[^>]*>', repl='', string=text)


def limit_text(text: str, number: int, by_character: bool = False) -> str:
    """
    Limit text (stripped of HTML tags) to a number of characters or words.

    Words are delimited by single spaces.
    """
    text = strip_tags(text)

    if by_character:
        return text[:number]

    words = text.split(' ')
    if len(words) < number:
        return text

    return ' '.join(words[:number])


def random_string(characters: int, type_: Union[str, int] = 'mixed') -> str:
    """
    Generate a random string.

    `type_` is one of:
    - `numeric` (or `number`, or 1) for digits
    - `letter` for lowercase letters
    - `mixed` for lowercase letters and digits
    """
    if type_ in ('numeric', 'number', 1, '1'):
        alphabet = RANDOM_DIGITS
    elif type_ == 'letter':
        alphabet = RANDOM_LETTERS
    elif type_ == 'mixed':
        alphabet = RANDOM_CHARACTERS
    else:
        raise ValueError(f'error: unrecognised random string type `{type_}`')

    return ''.join(secrets.choice(alphabet) for _ in range(characters))


def slug(text: str) -> str:
    """
    Generate an SEO friendly slug.

    The text is transliterated to ASCII by stripping accents (`é` becomes `e`).
    Characters that cannot be transliterated this way (`ß`, `東`) are dropped.
    Runs of characters other than letters and digits then become a single hyphen,
    and the result is lowercased.
    An empty slug becomes `na`.
    """
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = re.sub(pattern=r'[\W_]+', repl='-', string=text)
    text = text.strip('-')
    text = text.lower()

    if text == '':
        return 'na'

    return text


def compare(first: Union[str, int], second: Union[str, int]) -> bool:
    """
    Compare two strings (or passwords) in constant time.
    """
    return hmac.compare_digest(str(first).encode(), str(second).encode())
