"""
Pytest configuration and shared fixtures for the demo server tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path so `core`, `tools` and `agent` import
# without an editable install.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.documents import build_default_registry  # noqa: E402


@pytest.fixture
def registry():
    """The four built-in document templates."""
    return build_default_registry()


@pytest.fixture
def server(registry):
    """A fresh FastMCP server wired to the default registry."""
    from tools.mcp_server import create_server

    return create_server(registry)
