"""
# Web Toolkit: videos.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Video identifiers and metadata.
"""

import re
from typing import Any, NamedTuple, Optional

from webtoolkit.constants import YOUTUBE_ID_PATTERNS
from webtoolkit.utilities import extract_nested_value, none_to_empty_string

YOUTUBE_ID_PATTERN_COMPILED = re.compile(
    pattern=' | '.join(YOUTUBE_ID_PATTERNS),
    flags=re.VERBOSE,
)


def extract_youtube_id(url_or_embed: Optional[str]) -> Optional[str]:
    """
    Extract a YouTube video ID from a URL or embed code.

    Recognised forms (the leftmost occurrence in the string wins):
    - `v=«id»&` (also `i=«id»&`), `v=«id»` at the end of a query
    - `vi/«id»`, `v/«id»`
    - `embed/«id»`
    - `youtu.be/«id»`

    Returns None if no form is recognised.
    """
    match = YOUTUBE_ID_PATTERN_COMPILED.search(none_to_empty_string(url_or_embed))
    if match is None:
        return None

    youtube_id = match.group().strip()
    if youtube_id == '':
        return None

    return youtube_id


class YoutubeDetails(NamedTuple):
    title: Optional[str]
    author: Optional[str]
    published: Optional[str]
    duration: Optional[str]
    updated: Optional[str]
    view_count: Optional[str]
    num_likes: Optional[str]
    num_dislikes: Optional[str]
    thumbnails: Optional[list[dict[str, Any]]]


def reshape_youtube_entry(payload: dict[str, Any]) -> YoutubeDetails:
    """
    Reshape a YouTube data feed (`alt=json`) payload into YoutubeDetails.

    Fields absent from the payload become None.
    """
    entry = extract_nested_value(payload, 'entry')

    return YoutubeDetails(
        title=extract_nested_value(entry, 'title', '$t'),
        author=extract_nested_value(entry, 'author', 0, 'name', '$t'),
        published=extract_nested_value(entry, 'published', '$t'),
        duration=extract_nested_value(entry, 'media$group', 'yt$duration', 'seconds'),
        updated=extract_nested_value(entry, 'updated', '$t'),
        view_count=extract_nested_value(entry, 'yt$statistics', 'viewCount'),
        num_likes=extract_nested_value(entry, 'yt$rating', 'numLikes'),
        num_dislikes=extract_nested_value(entry, 'yt$rating', 'numDislikes'),
        thumbnails=extract_nested_value(entry, 'media$group', 'media$thumbnail'),
    )
