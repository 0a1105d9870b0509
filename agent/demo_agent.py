# =============================================================================
# agent/demo_agent.py  —  Google ADK Agent Configuration (any LLM via LiteLlm)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures the Google ADK agent that acts as a CLIENT of our tool server:
#   it receives the user's request, picks a tool, calls it over MCP, and
#   presents the result.
#
# ADK + LiteLlm:
#   Google ADK is the agent framework (orchestration, tool calling, session
#   management).  LiteLlm lets that framework talk to a non-Gemini model,
#   by default GPT-4o through OpenRouter.  Override with DEMO_AGENT_MODEL.
#
#   ┌──────────────────────────┐      stdio       ┌──────────────────────┐
#   │  Google ADK Agent        │ ───────────────▶ │  FastMCP "Demo"      │
#   │  (LLM via LiteLlm)       │   MCP tool calls │  (tools/mcp_server)  │
#   └──────────────────────────┘                  └──────────────────────┘
#                                                            │
#                                                            ▼
#                                                 core/ (pure Python)
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess (`python -m tools.mcp_server`)
#   from the project root and talks to it over stdin/stdout.  Tools are
#   discovered automatically; nothing here lists them by hand.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from google.adk.tools.mcp_tool.mcp_session_manager import StdioServerParameters

from agent.prompt import get_demo_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_parameters() -> StdioServerParameters:
    """How ADK should launch the tool server subprocess.

    We reuse the current interpreter so the subprocess sees the same
    virtualenv (fastmcp, core/, ...) as this process, and run from the
    project root so `tools.mcp_server` is importable as a module.
    """
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
        env={**os.environ, "MCP_TRANSPORT": "stdio"},
    )


def create_agent(model: str | None = None) -> Agent:
    """Create the demo assistant agent.

    Args:
        model: LiteLlm model string.  Falls back to DEMO_AGENT_MODEL, then
               to GPT-4o via OpenRouter (reads OPENROUTER_API_KEY).

    Returns:
        A configured Google ADK Agent instance.
    """
    model_name = model or os.environ.get("DEMO_AGENT_MODEL", DEFAULT_MODEL)

    mcp_tools = MCPToolset(connection_params=server_parameters())

    return Agent(
        name="demo_assistant",
        model=LiteLlm(model=model_name),
        instruction=get_demo_assistant_prompt(),
        tools=[mcp_tools],
    )
