# =============================================================================
# main.py  —  Entry Point for the Demo Assistant (interactive console)
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/demo_agent.py)
#   2. The agent launches the FastMCP tool server as a stdio subprocess
#   3. You type requests ("what's 17 times 23?", "draft an invoice for ...")
#   4. The agent calls tools and streams back its answer
#
# GOOGLE ADK CONCEPTS USED:
#   - Runner: Manages the agent's execution lifecycle
#   - SessionService: Tracks conversation state across turns
#   - Content/Part: ADK's message format
#   - Event stream: Real-time updates as the agent thinks and acts
#
# To talk to the tool server WITHOUT an LLM, run it directly instead:
#   python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load environment variables from .env (OPENROUTER_API_KEY, DEMO_AGENT_MODEL).
# This must happen BEFORE creating the agent, because LiteLlm reads its API
# key from the environment when it initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.demo_agent import create_agent

APP_NAME = "demo_assistant"
USER_ID = "demo_user"


async def run_agent():
    """Run the demo assistant in a read-eval-print loop."""

    print("=" * 70)
    print("  DEMO TOOL SERVER ASSISTANT")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    # InMemorySessionService keeps the conversation in RAM; fine for a demo.
    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Try: 'add 2 and 3', 'weather in Tokyo', 'write a letter to Jane Doe'")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # The last text part we see is the agent's final answer; function
        # calls in between are echoed so you can watch the tool traffic.
        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
