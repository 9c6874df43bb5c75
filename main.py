# =============================================================================
# main.py  -  Console entry point for the EigenLayer AVS assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/avs_agent.py)
#   2. ADK spawns the FastMCP server (tools/mcp_server.py) over stdio
#   3. Each question you type is sent to the agent
#   4. The agent calls get-avs-list, which fetches live AVS data from
#      EigenExplorer and asks Mistral to analyze it
#   5. The final answer is printed
#
# The MCP server can also be used on its own by any MCP client:
#   uv run python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load MISTRAL_API_KEY / EIGEN_EXPLORER_API_KEY before the agent is built;
# LiteLlm reads the key from the environment when it initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.avs_agent import create_agent

APP_NAME = "eigenlayer_avs_assistant"
USER_ID = "console_user"
EXIT_COMMANDS = ("quit", "exit", "q")


async def run_agent():
    """Run the AVS assistant interactively until the user quits."""
    print("=" * 70)
    print("  EIGENLAYER AVS ASSISTANT")
    print("  Google ADK + Mistral + FastMCP (EigenExplorer data)")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask anything about EigenLayer AVSs.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in EXIT_COMMANDS:
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
