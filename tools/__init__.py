# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP and the core logic.  Each
#   tool:
#     1. Calls a pure function from core/
#     2. Is registered with a FastMCP decorator
#     3. Turns the core result into text (the MCP content envelope)
#     4. Logs the request and response to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain business logic (that's in core/)
#   - They do NOT know about Google ADK (any MCP client works)
#
# TOOL CONTRACT QUALITY:
#   The docstring of each tool is sent to the client as its description.
#   Keep them specific: which inputs are accepted, what comes back, and
#   what happens on unknown input.
# =============================================================================
