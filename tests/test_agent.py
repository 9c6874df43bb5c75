"""Tests for the console agent: system prompt and MCP launch parameters."""

from datetime import date

from agent.prompt import get_avs_agent_prompt
from tools.mcp_server import TOOL_NAME


def test_prompt_routes_questions_to_the_tool():
    prompt = get_avs_agent_prompt()

    assert TOOL_NAME in prompt
    assert "fullPrompt" in prompt
    assert "avsName" in prompt


def test_prompt_carries_todays_date():
    assert date.today().isoformat() in get_avs_agent_prompt()


def test_prompt_explains_error_answers():
    assert "Error fetching AVS data" in get_avs_agent_prompt()


def test_agent_launches_the_mcp_server_module():
    from agent.avs_agent import PROJECT_ROOT, server_parameters

    params = server_parameters()

    assert params.args[-2:] == ["-m", "tools.mcp_server"]
    assert params.cwd == PROJECT_ROOT
