"""Tests for the example agent entry point."""

import os
from unittest.mock import MagicMock, patch

import pytest

from toolsette_github import BearerAuth, with_auth
from toolsette_github import agent as agent_module


def test_build_tools_unbound():
    tools = agent_module.build_tools()

    assert len(tools) == 36
    assert {t.tool_name for t in tools} >= {"create_issue", "get_repository"}


def test_build_tools_binds_token():
    with patch("toolsette_github.agent.with_auth", wraps=with_auth) as bind:
        tools = agent_module.build_tools("ghp_abc")

    assert len(tools) == 36
    assert bind.call_args.args[1] == BearerAuth(api_key="ghp_abc")


def test_create_agent_requires_api_key():
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(SystemExit):
            agent_module.create_agent()


@patch("toolsette_github.agent.Agent")
@patch("strands.models.anthropic.AnthropicModel")
def test_create_agent(mock_model, mock_agent):
    env = {"ANTHROPIC_API_KEY": "sk-test", "GITHUB_TOKEN": "ghp_abc", "ANTHROPIC_MODEL_ID": "claude-test"}
    with patch.dict(os.environ, env, clear=True):
        agent_module.create_agent()

    assert mock_model.call_args.kwargs["model_id"] == "claude-test"
    assert mock_model.call_args.kwargs["client_args"] == {"api_key": "sk-test"}
    kwargs = mock_agent.call_args.kwargs
    assert kwargs["system_prompt"] == agent_module.SYSTEM_PROMPT
    assert len(kwargs["tools"]) == 36


def test_main_help(capsys):
    agent_module.main(["--help"])

    assert "Usage" in capsys.readouterr().out


@patch("toolsette_github.agent.create_agent")
@patch("toolsette_github.agent.load_dotenv")
def test_main_single_query(mock_dotenv, mock_create, capsys):
    fake_agent = MagicMock(return_value="There are 3 open issues")
    fake_agent.event_loop_metrics.get_summary.return_value = {"accumulated_usage": {"totalTokens": 842}}
    mock_create.return_value = fake_agent

    agent_module.main(["how", "many", "issues?"])

    fake_agent.assert_called_once_with("how many issues?")
    out = capsys.readouterr().out
    assert "There are 3 open issues" in out
    assert "Tokens: 842" in out
    mock_dotenv.assert_called_once()


@patch("builtins.input", side_effect=["", "list my gists", "quit"])
def test_interactive_mode(mock_input, capsys):
    fake_agent = MagicMock(return_value="You have 2 gists")

    agent_module.interactive_mode(fake_agent)

    fake_agent.assert_called_once_with("list my gists")
    assert "Goodbye" in capsys.readouterr().out


@patch("builtins.input", side_effect=["metrics", "quit"])
def test_interactive_mode_metrics(mock_input, capsys):
    fake_agent = MagicMock()
    fake_agent.event_loop_metrics.get_summary.return_value = {
        "accumulated_usage": {"inputTokens": 1200, "outputTokens": 300, "totalTokens": 1500}
    }

    agent_module.interactive_mode(fake_agent)

    fake_agent.assert_not_called()
    out = capsys.readouterr().out
    assert "Input:  1,200" in out
    assert "Total:  1,500" in out
