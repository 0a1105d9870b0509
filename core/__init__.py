# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the demo server: lookup
# tables, arithmetic, and the document generator.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any other
#   framework.  Every module here is pure Python, importable in a bare REPL
#   with no network access, and testable without starting a server.
# =============================================================================
