# =============================================================================
# core/registry.py  —  Capability Registry
# =============================================================================
#
# Answers "what can this server do?".  The answer never changes while the
# process runs: one capability, search_images, with a fixed schema.
#
# Capabilities are kept in a dict keyed by name.  Adding a capability means
# adding a descriptor here and a method to InvocationHandler keyed on the
# same name (core/search.py).
# =============================================================================

from typing import Optional

from core.models import CapabilityDescriptor, ParameterSpec

SEARCH_IMAGES = CapabilityDescriptor(
    name="search_images",
    description="Search for images on Unsplash",
    parameters=(
        ParameterSpec(
            name="query",
            type="string",
            description="Search query for images",
            required=True,
        ),
        ParameterSpec(
            name="page",
            type="number",
            description="Page number (default: 1)",
            default=1,
        ),
        ParameterSpec(
            name="per_page",
            type="number",
            description="Number of items per page (default: 10, max: 30)",
            default=10,
        ),
    ),
)

_CAPABILITIES: dict[str, CapabilityDescriptor] = {
    SEARCH_IMAGES.name: SEARCH_IMAGES,
}


def list_capabilities() -> list[CapabilityDescriptor]:
    """Return every capability this server offers, in a stable order."""
    return list(_CAPABILITIES.values())


def get_capability(name: str) -> Optional[CapabilityDescriptor]:
    """Look up a capability by name; None if this server doesn't offer it."""
    return _CAPABILITIES.get(name)
