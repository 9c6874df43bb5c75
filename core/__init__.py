# =============================================================================
# core/__init__.py
# =============================================================================
# The AVS data assistant itself: settings, the EigenExplorer client, the
# prompt, the completion call and the orchestrator that ties them together.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or Google ADK.  The MCP server
#   and the console agent are wiring around it.
# =============================================================================
