# =============================================================================
# agent/avs_agent.py  -  Google ADK agent that consumes get-avs-list
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the console agent used by main.py.  The agent is an MCP CLIENT of
#   our own FastMCP server (tools/mcp_server.py):
#
#     ┌────────────────────────┐   stdio (MCP)   ┌──────────────────────┐
#     │  Google ADK Agent      │ ──────────────▶ │  FastMCP server      │
#     │  LiteLlm → Mistral     │                 │  get-avs-list        │
#     └────────────────────────┘                 └──────────────────────┘
#                                                          │
#                                                          ▼
#                                               EigenExplorer API + Mistral
#
# MCP CONNECTION:
#   ADK starts the server as a subprocess with "uv run python -m
#   tools.mcp_server" in the project root, so the subprocess uses the
#   project's .venv.  The current environment is passed through, so API keys
#   exported in the shell reach the server as well as those in .env.
#
# MODEL:
#   "mistral/mistral-large-latest" through LiteLlm, the same provider the
#   tool uses.  LiteLlm reads MISTRAL_API_KEY from the environment.
# =============================================================================

import os
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import AVS_AGENT_PROMPT
from core.config import DEFAULT_MODEL

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_parameters() -> StdioServerParameters:
    """How ADK launches the get-avs-list MCP server."""
    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
        env=dict(os.environ),
    )


def create_agent(model: Optional[str] = None) -> Agent:
    """Create the EigenLayer AVS console agent.

    Args:
        model: LiteLLM model string; defaults to AVS_ASSISTANT_MODEL or
            mistral/mistral-large-latest.

    Returns:
        A configured Google ADK Agent whose only tool source is the AVS
        MCP server.
    """
    model = model or os.environ.get("AVS_ASSISTANT_MODEL") or DEFAULT_MODEL

    avs_tools = MCPToolset(connection_params=server_parameters())

    return Agent(
        name="eigenlayer_avs_assistant",
        model=LiteLlm(model=model),
        instruction=AVS_AGENT_PROMPT,
        tools=[avs_tools],
    )
