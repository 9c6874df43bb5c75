# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wrapper around core/.
#
# ARCHITECTURAL ROLE:
#   tools/ is the transport adapter.  mcp_server.py:
#     1. Declares the get-avs-list tool and its input schema
#     2. Converts MCP arguments into a core.models.ToolRequest
#     3. Converts the core.models.ToolResponse into MCP TextContent
#     4. Configures logging (stderr) and runs the stdio transport
#
#   No AVS or LLM logic lives here; that is core/assistant.py.
# =============================================================================
