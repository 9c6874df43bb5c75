# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server exposing get-avs-list
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers the one MCP tool this project offers and serves it over stdio.
#   The tool is a thin wrapper: it turns the validated arguments into a
#   ToolRequest, hands it to core.assistant.AvsAssistant, and converts the
#   ToolResponse into MCP TextContent.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (Claude Desktop, the console agent in agent/, ...)
#      calls "get-avs-list" with {"fullPrompt": ..., "avsName": ...}
#   2. FastMCP validates the arguments against the declared schema
#   3. get_avs_list() builds a ToolRequest and calls AvsAssistant.handle()
#   4. The single text item comes back as one TextContent
#
#   The tool never fails at the protocol level.  Registry outages and model
#   errors are reported inside the text.
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server        (from the project root)
#
#   The server reads MISTRAL_API_KEY and EIGEN_EXPLORER_API_KEY from the
#   environment or from the project's .env file.
# =============================================================================

import json
import logging
import os
import sys
from typing import Annotated, Optional

import litellm
from dotenv import load_dotenv
from fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from core.assistant import AvsAssistant
from core.config import Settings
from core.models import ToolRequest, ToolResponse

SERVER_NAME = "EigenLayer AVS Service"
SERVER_VERSION = "0.0.1"
TOOL_NAME = "get-avs-list"
TOOL_DESCRIPTION = "Query AVSs data"

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT is the MCP transport, so every log line goes to STDERR.
#   - CYAN for incoming requests (tool name + parameters)
#   - GREEN for response JSON
#   - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, response: ToolResponse) -> ToolResponse:
    """Log the tool response as compact JSON in GREEN, then return it."""
    payload = {"content": [{"type": item.type, "text": item.text} for item in response.content]}
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(payload, separators=(',', ':'))}{_RESET}")
    return response


def _to_mcp_content(response: ToolResponse) -> list[TextContent]:
    return [TextContent(type="text", text=item.text) for item in response.content]


# =============================================================================
# Server factory
# =============================================================================
# The assistant (and the Settings inside it) is built by main() and passed
# in, so tests can register the tool against fakes.
# =============================================================================
def create_server(assistant: AvsAssistant) -> FastMCP:
    """Create the FastMCP server with get-avs-list registered."""
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    # The parameter names are the wire names of the tool's input schema.
    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def get_avs_list(
        fullPrompt: Annotated[str, Field(description="The complete user query about AVS data")],  # noqa: N803
        avsName: Annotated[  # noqa: N803
            Optional[str], Field(description="The name of the AVS to focus on")
        ] = None,
    ) -> list[TextContent]:
        _log_request(TOOL_NAME, fullPrompt=fullPrompt, avsName=avsName)

        response = assistant.handle(ToolRequest(full_prompt=fullPrompt, avs_name=avsName))
        _log_status(f"Answer is {len(response.first_text)} characters")

        return _to_mcp_content(_log_response(TOOL_NAME, response))

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    try:
        load_dotenv(os.path.join(_PROJECT_ROOT, ".env"))
        settings = Settings.from_env()

        # LiteLLM prints help banners to stdout on errors, which would
        # corrupt the MCP stream.
        litellm.suppress_debug_info = True

        mcp = create_server(AvsAssistant.from_settings(settings))
        logging.info("EigenLayer MCP server starting on stdio")
        mcp.run()
    except Exception:
        logging.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
