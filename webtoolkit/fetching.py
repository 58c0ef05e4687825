"""
# Web Toolkit: fetching.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

HTTP transport.

Requests are synchronous, with a caller-supplied timeout and no retries.
Unsuccessful status codes raise `requests.HTTPError`;
transport failures raise other `requests.RequestException` subclasses.
"""

import logging
from typing import Any, Iterator, Optional

import requests

from webtoolkit.constants import DEFAULT_REQUEST_TIMEOUT, DOWNLOAD_CHUNK_SIZE

logger = logging.getLogger(__name__)


class Fetcher:
    """
    Thin wrapper around a `requests.Session`.
    """
    _timeout: float
    _session: requests.Session

    def __init__(self, timeout: float = DEFAULT_REQUEST_TIMEOUT, session: Optional[requests.Session] = None):
        self._timeout = timeout
        if session is None:
            session = requests.Session()
        self._session = session

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def session(self) -> requests.Session:
        return self._session

    def fetch(self, url: str) -> str:
        """
        GET a URL and return the decoded body.
        """
        return self._get(url).text

    def fetch_json(self, url: str) -> Any:
        return self._get(url).json()

    def fetch_chunks(self, url: str) -> Iterator[bytes]:
        """
        GET a URL and yield the (content-decoded) body in chunks.
        """
        logger.debug('GET %s (streamed)', url)
        with self._session.get(url, timeout=self._timeout, stream=True) as response:
            response.raise_for_status()
            yield from response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE)

    def post_json(self, url: str, data: dict[str, Any], headers: Optional[dict[str, str]] = None) -> Any:
        """
        POST form data to a URL and return the decoded JSON response.

        The response body is decoded even for unsuccessful status codes,
        since JSON APIs report failures in the body.
        """
        logger.debug('POST %s', url)
        response = self._session.post(url, data=data, headers=headers, timeout=self._timeout)
        try:
            return response.json()
        except ValueError:
            response.raise_for_status()
            raise

    def _get(self, url: str) -> requests.Response:
        logger.debug('GET %s', url)
        response = self._session.get(url, timeout=self._timeout)
        response.raise_for_status()

        return response
