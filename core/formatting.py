# =============================================================================
# core/formatting.py  —  Value → Text Conversion
# =============================================================================
#
# Every tool in this server answers with TEXT.  These helpers decide how a
# Python value looks once it lands in that text, so that "3.0" and "3" don't
# depend on which tool happened to produce them.
#
# RULES:
#   - Integral floats drop their fractional part:  3.0 → "3"
#   - Booleans are lower-case:                     True → "true"
#   - Lists are comma-joined, no spaces:           ["x", 2.0] → "x,2"
#   - Money is always two decimals:                9.5 → "9.50"
#   - Everything else is plain str()
# =============================================================================

import math
from typing import Any


def format_number(value: float) -> str:
    """Render a number the way a person would write it (no trailing ``.0``)."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def to_text(value: Any) -> str:
    """Convert an arbitrary payload value to its display text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else to_text(v) for v in value)
    return str(value)


def format_money(value: float) -> str:
    """Format a number with exactly two fractional digits (12.5 → "12.50")."""
    return f"{value:.2f}"
