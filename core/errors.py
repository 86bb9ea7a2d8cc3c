# =============================================================================
# core/errors.py  —  Error Taxonomy for Capability Invocations
# =============================================================================
#
# Every failure of an invocation ends up as exactly one InvocationError with
# one of the codes below.  The codes are the JSON-RPC values MCP uses on the
# wire, so the tools/ layer can forward them without a lookup table.
#
#   METHOD_NOT_FOUND  →  the caller named a capability we don't provide
#   INVALID_REQUEST   →  Unsplash rejected our access key (HTTP 401)
#   INVALID_PARAMS    →  arguments don't match the capability's schema
#   INTERNAL_ERROR    →  everything else (API error list, network, bugs)
#
# There is no partial success: an invocation either returns a response or
# raises one of these.
# =============================================================================

from enum import IntEnum


class ErrorCode(IntEnum):
    """JSON-RPC error codes used by MCP."""

    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class InvocationError(Exception):
    """A classified, caller-facing invocation failure."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"InvocationError({self.code.name}, {self.message!r})"
