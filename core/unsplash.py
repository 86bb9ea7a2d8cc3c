# =============================================================================
# core/unsplash.py  —  Unsplash Search API Client
# =============================================================================
#
# The ONLY module that performs network I/O.
#
# ENDPOINT:
#   GET {api_base}/search/photos?query=...&page=...&per_page=...
#   Authorization: Client-ID <access key>
#
#   200 → {"total": int, "total_pages": int, "results": [photo, ...]}
#   4xx/5xx → {"errors": ["message", ...]}   (best effort, may be absent)
#
# FAILURES:
#   Anything that goes wrong at the HTTP level is raised as UnsplashAPIError,
#   with ``status`` set when Unsplash actually answered and None when we never
#   got a response (DNS failure, refused connection, ...).  A body that isn't
#   JSON is left to propagate as json.JSONDecodeError.
#
# No retries and no timeout: a call blocks until Unsplash answers or the
# connection fails.
# =============================================================================

import json
from typing import Any, Optional
import urllib.error
import urllib.parse
import urllib.request

from core.config import UNSPLASH_API_BASE
from core.models import SearchQuery


class UnsplashAPIError(Exception):
    """An HTTP-level failure talking to Unsplash.

    Attributes:
        message: The transport's own description, e.g. "HTTP Error 500: ...".
        status: HTTP status code, or None if no response was received.
        errors: The ``errors`` list from the response body, if any.
    """

    def __init__(self, message: str, status: Optional[int] = None, errors: Optional[list[str]] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.errors = errors or []


def _parse_error_list(body: bytes) -> list[str]:
    """Pull ``errors`` out of an error body; tolerate anything malformed."""
    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return []
    if not isinstance(data, dict):
        return []
    errors = data.get("errors")
    if not isinstance(errors, list):
        return []
    return [str(e) for e in errors]


class UnsplashClient:
    """Thin synchronous client for the photo search endpoint."""

    def __init__(self, access_key: str, api_base: str = UNSPLASH_API_BASE):
        self.access_key = access_key
        self.api_base = api_base.rstrip("/")

    def search_url(self, query: SearchQuery) -> str:
        params = urllib.parse.urlencode({
            "query": query.query,
            "page": query.page,
            "per_page": query.upstream_per_page,  # clamped to 30
        })
        return f"{self.api_base}/search/photos?{params}"

    def search_photos(self, query: SearchQuery) -> dict[str, Any]:
        """Run one search and return the decoded JSON body.

        Raises:
            UnsplashAPIError: on an HTTP error status or a connection failure.
        """
        req = urllib.request.Request(
            self.search_url(query),
            headers={
                "Authorization": f"Client-ID {self.access_key}",
                "Accept-Version": "v1",
            },
        )
        try:
            with urllib.request.urlopen(req) as response:
                raw = response.read()
        except urllib.error.HTTPError as e:
            raise UnsplashAPIError(str(e), status=e.code, errors=_parse_error_list(e.read())) from e
        except urllib.error.URLError as e:
            raise UnsplashAPIError(str(e.reason)) from e

        return json.loads(raw.decode("utf-8"))
