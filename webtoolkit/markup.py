"""
# Web Toolkit: markup.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

HTML snippet builders.

As with BBCode conversion, arguments are inserted into the markup verbatim.
"""

import hashlib
from typing import Optional, Union

from webtoolkit.constants import GOOGLE_DOCS_VIEWER_URL, GRAVATAR_URL, VIMEO_EMBED_URL, YOUTUBE_EMBED_URL
from webtoolkit.exceptions import InvalidEmailException
from webtoolkit.strings import check_mail


def redirect_to(url: str, seconds: int = 0) -> str:
    return f'<meta http-equiv="refresh" content="{seconds}; url={url}" />'


def embed_youtube(youtube_id: str, width: Union[str, int] = '640', height: Union[str, int] = '360',
                  theme: str = 'dark', auto_play: bool = False, player_controls: bool = True,
                  show_details: bool = True, show_suggested: bool = False) -> str:
    """
    Build the iframe embed code of a YouTube video (privacy-enhanced mode).
    """
    url = YOUTUBE_EMBED_URL.format(youtube_id=youtube_id.strip())
    url += f'theme={theme}&'
    if auto_play:
        url += 'autoplay=1&'
    if not player_controls:
        url += 'controls=0&'
    if not show_details:
        url += 'showinfo=0&'
    if not show_suggested:
        url += 'rel=0&'

    return f'<iframe width="{width}" height="{height}" src="{url}" frameborder="0" allowfullscreen></iframe>'


def embed_vimeo(vimeo_id: str, width: Union[str, int] = '500', height: Union[str, int] = '281',
                auto_play: bool = False, color: Optional[str] = None, byline: bool = False,
                portrait: bool = False, title: bool = False) -> str:
    """
    Build the iframe embed code of a Vimeo video.

    `color` is the hex colour of the player controls, without the leading `#`.
    """
    url = VIMEO_EMBED_URL.format(vimeo_id=vimeo_id)
    if auto_play:
        url += 'autoplay=1&'
    if color:
        url += f'color={color}&'
    if not byline:
        url += 'byline=0&'
    if not portrait:
        url += 'portrait=0&'
    if not title:
        url += 'title=0&'

    return (
        f'<iframe src="{url}" width="{width}" height="{height}" frameborder="0" '
        f'webkitallowfullscreen mozallowfullscreen allowfullscreen></iframe>'
    )


def show_pdf(source: str, width: int = 640, height: int = 480) -> str:
    """
    Build an iframe showing a document through Google Docs Viewer.
    """
    url = GOOGLE_DOCS_VIEWER_URL.format(source=source)

    return f'<iframe src="{url}" style="width:{width}px; height:{height}px;" frameborder="0"></iframe>'


def gravatar(email: str, size: int = 80) -> str:
    email = email.strip()
    if not check_mail(email):
        raise InvalidEmailException(email)

    email_hash = hashlib.md5(email.lower().encode()).hexdigest()

    return GRAVATAR_URL.format(email_hash=email_hash, size=size)
