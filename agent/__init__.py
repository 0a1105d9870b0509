# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK demo assistant.
#
# ARCHITECTURAL ROLE:
#   agent/ is a CLIENT of the tool server.  It:
#     1. Receives a request in plain language
#     2. Decides which MCP tool answers it
#     3. Calls the tool over stdio and presents the result
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the business logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
#   The server runs perfectly well without it; any MCP client can connect.
# =============================================================================
