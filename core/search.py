# =============================================================================
# core/search.py  —  Invocation Handler for search_images
# =============================================================================
#
# THE FLOW (one invocation):
#   1. Check the capability name against the registry   → METHOD_NOT_FOUND
#   2. Validate arguments into a typed SearchQuery      → INVALID_PARAMS
#   3. One GET to Unsplash (per_page clamped to 30)
#   4. Shape the response:
#        - zero results  → a plain sentence (still a SUCCESS)
#        - otherwise     → pretty-printed JSON of SearchResultPage
#   5. Map failures:
#        - HTTP 401           → INVALID_REQUEST (fixed message)
#        - other HTTP/network → INTERNAL_ERROR "Unsplash API error: ..."
#        - anything else      → INTERNAL_ERROR "Failed to search images: ..."
#
# The handler owns no credential of its own: it gets a ready-made client
# (which carries the access key) at construction time.
# =============================================================================

from dataclasses import asdict
import json
from typing import Any, Callable, Mapping, Optional, Protocol

from core.errors import ErrorCode, InvocationError
from core.models import (
    InvocationRequest,
    InvocationResponse,
    Number,
    Photographer,
    PhotoUrls,
    SearchQuery,
    SearchResultItem,
    SearchResultPage,
)
from core.registry import SEARCH_IMAGES, get_capability
from core.unsplash import UnsplashAPIError

INVALID_KEY_MESSAGE = (
    "Invalid Unsplash access key. "
    "Please check your UNSPLASH_ACCESS_KEY environment variable."
)


class PhotoSearchClient(Protocol):
    def search_photos(self, query: SearchQuery) -> dict[str, Any]: ...


# =============================================================================
# Argument validation
# =============================================================================
def _number_arg(arguments: Mapping[str, Any], name: str, default: Number) -> Number:
    value = arguments.get(name)
    if value is None:
        return default
    # bool is an int subclass, but True is not a page number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvocationError(
            ErrorCode.INVALID_PARAMS,
            f"Invalid argument '{name}': expected a number, got {type(value).__name__}",
        )
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def parse_search_query(arguments: Optional[Mapping[str, Any]]) -> SearchQuery:
    """Turn raw call arguments into a SearchQuery.

    Defaults: page=1, per_page=10.  No lower bound is applied to either.

    Raises:
        InvocationError: INVALID_PARAMS if the arguments don't fit the schema.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise InvocationError(ErrorCode.INVALID_PARAMS, "Arguments must be an object")

    query = arguments.get("query")
    if query is None:
        raise InvocationError(ErrorCode.INVALID_PARAMS, "Missing required argument 'query'")
    if not isinstance(query, str):
        raise InvocationError(
            ErrorCode.INVALID_PARAMS,
            f"Invalid argument 'query': expected a string, got {type(query).__name__}",
        )

    return SearchQuery(
        query=query,
        page=_number_arg(arguments, "page", 1),
        per_page=_number_arg(arguments, "per_page", 10),
    )


# =============================================================================
# Result shaping
# =============================================================================
def no_results_text(query: str) -> str:
    return f'No images found for query: "{query}"'


def to_result_item(photo: Mapping[str, Any]) -> SearchResultItem:
    urls = photo["urls"]
    user = photo["user"]
    return SearchResultItem(
        id=photo["id"],
        description=photo.get("description") or photo.get("alt_description") or "No description",
        urls=PhotoUrls(small=urls["small"], regular=urls["regular"], full=urls["full"]),
        photographer=Photographer(name=user["name"], username=user["username"]),
        link=photo["links"]["html"],
    )


def format_results(query: SearchQuery, data: Mapping[str, Any]) -> str:
    """Render an Unsplash search body as the text the client receives."""
    photos = data["results"]
    if not photos:
        return no_results_text(query.query)

    result_page = SearchResultPage(
        query=query.query,
        total=data["total"],
        total_pages=data["total_pages"],
        page=query.page,
        results=[to_result_item(photo) for photo in photos],
    )
    return json.dumps(asdict(result_page), indent=2, ensure_ascii=False)


# =============================================================================
# The handler
# =============================================================================
class InvocationHandler:
    """Executes capability invocations against Unsplash."""

    def __init__(self, client: PhotoSearchClient):
        self.client = client
        self._handlers: dict[str, Callable[[InvocationRequest], InvocationResponse]] = {
            SEARCH_IMAGES.name: self.search_images,
        }

    def invoke(self, request: InvocationRequest) -> InvocationResponse:
        """Run one invocation to completion.

        Raises:
            InvocationError: for every failure; see the module header for
                the classification of each path.
        """
        if get_capability(request.capability_name) is None:
            raise InvocationError(
                ErrorCode.METHOD_NOT_FOUND,
                f"Unknown tool: {request.capability_name}",
            )
        return self._handlers[request.capability_name](request)

    def search_images(self, request: InvocationRequest) -> InvocationResponse:
        query = parse_search_query(request.arguments)

        try:
            data = self.client.search_photos(query)
            text = format_results(query, data)
        except UnsplashAPIError as e:
            if e.status == 401:
                raise InvocationError(ErrorCode.INVALID_REQUEST, INVALID_KEY_MESSAGE) from e
            # an empty list, or one that joins to "", falls back to the transport message
            detail = ", ".join(e.errors) or e.message
            raise InvocationError(ErrorCode.INTERNAL_ERROR, f"Unsplash API error: {detail}") from e
        except Exception as e:
            raise InvocationError(ErrorCode.INTERNAL_ERROR, f"Failed to search images: {e}") from e

        return InvocationResponse(text=text)
