# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Two families of dataclasses live here:
#
#   1. The capability contract: ParameterSpec and CapabilityDescriptor.
#      These are created once at import time and never mutated (frozen).
#
#   2. The per-call data: InvocationRequest → SearchQuery → SearchResultPage
#      → InvocationResponse.  Each exists for exactly one invocation.
#
# The result models mirror the compact JSON we send back to the client, NOT
# the full Unsplash photo object.  Unsplash returns a dozen URLs, links and
# user fields per photo; we keep three image sizes, the photographer and the
# public page link.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Union

Number = Union[int, float]

# Unsplash refuses to return more than 30 photos per page.
MAX_PER_PAGE = 30


# -----------------------------------------------------------------------------
# Capability contract
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ParameterSpec:
    """One named parameter of a capability's input schema."""

    name: str
    type: str                          # JSON schema type: "string", "number"
    description: str
    required: bool = False
    default: Optional[Any] = None

    def to_schema(self) -> dict:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True)
class CapabilityDescriptor:
    """A named, schema-described operation this server offers.

    The descriptor is the single source of truth for what a client sees in
    ``tools/list``: the MCP layer advertises ``input_schema()`` verbatim.
    """

    name: str
    description: str
    parameters: tuple[ParameterSpec, ...] = ()

    def input_schema(self) -> dict:
        """Render the parameters as a JSON schema object."""
        return {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


# -----------------------------------------------------------------------------
# Invocation data
# -----------------------------------------------------------------------------
@dataclass
class InvocationRequest:
    """One inbound call: which capability, with which raw arguments."""

    capability_name: str
    arguments: Optional[dict[str, Any]] = None


@dataclass
class InvocationResponse:
    """A successful invocation: a single text content block."""

    text: str


@dataclass(frozen=True)
class SearchQuery:
    """Validated search_images arguments.

    ``page`` and ``per_page`` carry no lower bound: 0 or negative values are
    forwarded to Unsplash as-is.  Only the upper bound of ``per_page`` is
    enforced, and only on the value sent upstream.
    """

    query: str
    page: Number = 1
    per_page: Number = 10

    @property
    def upstream_per_page(self) -> Number:
        return min(self.per_page, MAX_PER_PAGE)


# -----------------------------------------------------------------------------
# Result shape
# -----------------------------------------------------------------------------
@dataclass
class PhotoUrls:
    small: str
    regular: str
    full: str


@dataclass
class Photographer:
    name: str
    username: str


@dataclass
class SearchResultItem:
    """One photo, trimmed to what a client needs to show or link it."""

    id: str
    description: str                   # description → alt_description → "No description"
    urls: PhotoUrls
    photographer: Photographer
    link: str                          # public unsplash.com page for the photo


@dataclass
class SearchResultPage:
    """The JSON document returned for a non-empty search.

    Field order is the key order of the serialized output.
    """

    query: str
    total: int
    total_pages: int
    page: Number
    results: list[SearchResultItem] = field(default_factory=list)
