# =============================================================================
# tools/__init__.py
# =============================================================================
# The MCP layer.  tools/ translates between the protocol (FastMCP) and the
# framework-agnostic core/ package:
#
#   - it registers each capability from core/registry.py as an MCP tool
#   - it forwards calls to core/search.py's InvocationHandler
#   - it turns core's InvocationError into an MCP protocol error
#
# Nothing in tools/ talks to Unsplash or reads configuration.
# =============================================================================
