"""
# Web Toolkit: toolkit.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Helpers backed by third-party web services.
"""

import logging
import os
import random
import time
from typing import Any, Optional

import requests
from bs4 import BeautifulSoup

from webtoolkit.constants import (
    DEFAULT_DOWNLOAD_DIRECTORY,
    FACEBOOK_GRAPH_URL,
    IMGUR_CLIENT_ID_ENVIRONMENT_VARIABLE,
    IMGUR_UPLOAD_URL,
    VIMEO_DETAILS_URL,
    YOUTUBE_DETAILS_URL,
)
from webtoolkit.exceptions import MissingClientIdException
from webtoolkit.fetching import Fetcher
from webtoolkit.strings import slug
from webtoolkit.utilities import extract_nested_value, extract_url_extension
from webtoolkit.videos import YoutubeDetails, reshape_youtube_entry

logger = logging.getLogger(__name__)


def build_random_file_name() -> str:
    return ''.join(str(random.randint(0, 999)) for _ in range(7))


def build_file_path(directory: str, name: str, extension: str) -> str:
    if extension == '':
        return os.path.join(directory, name)

    return os.path.join(directory, f'{name}.{extension}')


def normalise_meta_name(name: str) -> str:
    """
    Lower-case a meta name, replacing characters other than letters, digits, and hyphens by underscores.
    """
    return ''.join(
        character if character.isalnum() or character == '-' else '_'
        for character in name.strip().lower()
    )


def parse_meta_tags(html: str) -> dict[str, str]:
    """
    Parse `<meta name=... content=...>` tags into a dictionary.

    Names are normalised by `normalise_meta_name`.
    Where a name occurs more than once, the last occurrence wins.
    """
    soup = BeautifulSoup(html, 'html.parser')

    content_from_name = {}
    for meta_tag in soup.find_all('meta', attrs={'name': True}):
        content_from_name[normalise_meta_name(meta_tag['name'])] = meta_tag.get('content', '')

    return content_from_name


def parse_title(html: str) -> Optional[str]:
    soup = BeautifulSoup(html, 'html.parser')
    if soup.title is None or soup.title.string is None:
        return None

    return str(soup.title.string)


class Toolkit:
    """
    Helpers that fetch from (or upload to) remote services.

    The Imgur ClientID defaults to the `IMGUR_CLIENT_ID` environment variable;
    one can be obtained at <https://api.imgur.com/oauth2/addclient>.
    """
    _imgur_client_id: Optional[str]
    _fetcher: Fetcher

    def __init__(self, imgur_client_id: Optional[str] = None, fetcher: Optional[Fetcher] = None):
        if imgur_client_id is None:
            imgur_client_id = os.environ.get(IMGUR_CLIENT_ID_ENVIRONMENT_VARIABLE)
        self._imgur_client_id = imgur_client_id

        if fetcher is None:
            fetcher = Fetcher()
        self._fetcher = fetcher

    @property
    def imgur_client_id(self) -> Optional[str]:
        return self._imgur_client_id

    @property
    def fetcher(self) -> Fetcher:
        return self._fetcher

    def get_youtube_details(self, youtube_id: str) -> YoutubeDetails:
        payload = self._fetcher.fetch_json(YOUTUBE_DETAILS_URL.format(youtube_id=youtube_id))
        return reshape_youtube_entry(payload)

    def get_vimeo_details(self, vimeo_id: str) -> Any:
        return self._fetcher.fetch_json(VIMEO_DETAILS_URL.format(vimeo_id=vimeo_id))

    def fb_detail(self, page_id: str) -> Any:
        """
        Get the Graph API details of a Facebook Page or User.
        """
        return self._fetcher.fetch_json(FACEBOOK_GRAPH_URL.format(page_id=page_id))

    def upload_image(self, image_url: str, client_id: Optional[str] = None) -> Optional[str]:
        """
        Upload an image (by URL) to Imgur.

        Returns the link of the uploaded image, or None if Imgur reports failure.
        """
        if not client_id:
            client_id = self._imgur_client_id
        if not client_id:
            raise MissingClientIdException('error: an Imgur ClientID is needed to upload images')

        response = self._fetcher.post_json(
            IMGUR_UPLOAD_URL,
            data={'image': image_url},
            headers={'Authorization': f'Client-ID {client_id}'},
        )

        if not extract_nested_value(response, 'success'):
            logger.warning('Imgur upload of %s failed: %s', image_url, extract_nested_value(response, 'data', 'error'))
            return None

        return extract_nested_value(response, 'data', 'link')

    def get_title(self, url: str) -> Optional[str]:
        return parse_title(self._fetcher.fetch(url))

    def get_meta(self, name: str, url: str) -> Optional[str]:
        """
        Get the content of a page's meta tag, looked up by its normalised name.
        """
        return parse_meta_tags(self._fetcher.fetch(url)).get(normalise_meta_name(name))

    def download_file(self, url: str, directory: str = DEFAULT_DOWNLOAD_DIRECTORY, name: Optional[str] = None) -> bool:
        """
        Download a file from a remote server and store it in a directory.

        The stored file is named `«name».«extension»`, where «extension» is taken from the URL.
        If no name is given, a random numeric name is used.
        If the file already exists, a slug of the current time is appended to the name.
        If the download fails, no file is left behind and the error propagates.
        """
        extension = extract_url_extension(url)

        if name is None:
            name = build_random_file_name()

        file_path = build_file_path(directory, name, extension)
        if os.path.exists(file_path):
            name += slug(str(time.time()))
            file_path = build_file_path(directory, name, extension)

        logger.info('downloading %s to %s', url, file_path)
        chunks = iter(self._fetcher.fetch_chunks(url))
        first_chunk = next(chunks, b'')

        try:
            with open(file_path, 'wb') as file:
                file.write(first_chunk)
                for chunk in chunks:
                    file.write(chunk)
        except (OSError, requests.RequestException):
            if os.path.exists(file_path):
                os.remove(file_path)
            raise

        return os.path.exists(file_path)