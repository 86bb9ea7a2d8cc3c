# =============================================================================
# core/__init__.py
# =============================================================================
# Everything the image search server actually does: the capability contract,
# argument validation, the Unsplash client and response shaping.
#
# Nothing in this package imports FastMCP or the MCP SDK.  Failures are
# raised as plain Python exceptions (core/errors.py); the tools/ layer is
# responsible for turning them into protocol errors.
# =============================================================================
