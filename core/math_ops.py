# =============================================================================
# core/math_ops.py  —  Arithmetic Tools
# =============================================================================
#
# The simplest possible tools: two numbers in, one number out.  They exist
# so a client can check the round trip end-to-end before trying anything
# with more moving parts.
#
# The results are returned as TEXT via format_number(), so 1 + 2 reads "3"
# and not "3.0" even though MCP hands us floats.
# =============================================================================

from core.formatting import format_number


def add(a: float, b: float) -> float:
    return a + b


def multiply(a: float, b: float) -> float:
    return a * b


def as_text(value: float) -> str:
    """Render an arithmetic result for a tool response."""
    return format_number(value)
