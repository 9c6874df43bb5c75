# =============================================================================
# agent/__init__.py
# =============================================================================
# The console agent (Google ADK + LiteLlm) that answers EigenLayer AVS
# questions by calling the get-avs-list MCP tool.
#
# ARCHITECTURAL ROLE:
#   agent/ is a CLIENT of tools/mcp_server.py.  It reaches the tool only
#   through the MCP stdio protocol and imports nothing from core/ except
#   the default model name.
# =============================================================================
