"""Tests for tool descriptors, credential binding and the Strands adapter."""

import asyncio
import json

import pytest

from conftest import fake_response
from toolsette_github import ALL_TOOLS, TOOLS_BY_NAME, BearerAuth, format_tools, with_auth
from toolsette_github.registry import _strands_handler


def test_registry_has_every_endpoint():
    assert len(ALL_TOOLS) == 36
    assert len(TOOLS_BY_NAME) == len(ALL_TOOLS)
    for name in ["create_gist", "lock_issue", "add_labels_to_issue", "list_pull_requests", "update_repo"]:
        assert name in TOOLS_BY_NAME


def test_every_tool_has_schema_and_description():
    for t in ALL_TOOLS:
        schema = t.input_schema()
        assert schema["type"] == "object"
        assert t.description


def test_validation_error_before_network(mock_request, auth):
    """Missing required fields fail without a request."""
    result = TOOLS_BY_NAME["get_issue"]({"owner": "o", "repo": "r"}, auth=auth)

    assert result["success"] is False
    assert result["error_type"] == "ValidationError"
    assert result["action"] == "get_issue"
    assert "issue_number" in result["error"]
    assert result["details"][0]["loc"] == ("issue_number",)
    mock_request.assert_not_called()


@pytest.mark.parametrize("params", [["octocat", "Hello-World"], '{"owner": "octocat", "repo": "Hello-World"}', 42])
def test_non_mapping_params_rejected(mock_request, params):
    result = TOOLS_BY_NAME["get_repository"](params)

    assert result["success"] is False
    assert result["error_type"] == "ValidationError"
    assert result["action"] == "get_repository"
    assert type(params).__name__ in result["error"]
    mock_request.assert_not_called()


def test_out_of_range_per_page_rejected(mock_request):
    result = TOOLS_BY_NAME["list_forks"](owner="o", repo="r", per_page=101)

    assert result["success"] is False
    assert result["error_type"] == "ValidationError"
    mock_request.assert_not_called()


def test_bad_enum_rejected(mock_request, auth):
    result = TOOLS_BY_NAME["lock_issue"](owner="o", repo="r", issue_number=1, lock_reason="boring", auth=auth)

    assert result["success"] is False
    assert "lock_reason" in result["error"]
    mock_request.assert_not_called()


def test_auth_required_before_network(mock_request):
    result = TOOLS_BY_NAME["delete_repo"](owner="o", repo="r")

    assert result["success"] is False
    assert result["error_type"] == "AuthenticationRequired"
    assert "hint" in result
    mock_request.assert_not_called()


def test_empty_api_key_counts_as_missing(mock_request):
    result = TOOLS_BY_NAME["delete_repo"](owner="o", repo="r", auth=BearerAuth(api_key=""))

    assert result["error_type"] == "AuthenticationRequired"
    mock_request.assert_not_called()


def test_anonymous_read_omits_authorization(mock_request):
    result = TOOLS_BY_NAME["get_repository"](owner="octocat", repo="Hello-World")

    assert result["success"] is True
    assert result["action"] == "get_repository"
    assert "Authorization" not in mock_request.call_args.kwargs["headers"]


def test_kwargs_merge_over_params(mock_request, auth):
    TOOLS_BY_NAME["get_repository"]({"owner": "a", "repo": "r"}, owner="b", auth=auth)

    assert mock_request.call_args.args[1].endswith("/repos/b/r")


def test_with_auth_binds_credential(mock_request):
    tools = with_auth(ALL_TOOLS, BearerAuth(api_key="bound"))
    delete_repo = {t.name: t for t in tools}["delete_repo"]

    result = delete_repo(owner="o", repo="r")

    assert result["success"] is True
    assert mock_request.call_args.kwargs["headers"]["Authorization"] == "Bearer bound"
    # originals untouched
    assert TOOLS_BY_NAME["delete_repo"].auth is None


def test_call_auth_overrides_bound(mock_request):
    delete_repo = with_auth([TOOLS_BY_NAME["delete_repo"]], BearerAuth(api_key="bound"))[0]

    delete_repo(owner="o", repo="r", auth=BearerAuth(api_key="override"))

    assert mock_request.call_args.kwargs["headers"]["Authorization"] == "Bearer override"


def test_unexpected_exception_becomes_failure(mock_request, auth):
    mock_request.return_value = None

    result = TOOLS_BY_NAME["get_repository"](owner="o", repo="r", auth=auth)

    assert result["success"] is False
    assert result["action"] == "get_repository"
    assert result["error_type"] == "AttributeError"


def test_acall_runs_concurrently(mock_request, auth):
    mock_request.return_value = fake_response(200, {"full_name": "o/r"})

    async def run():
        tool = TOOLS_BY_NAME["get_repository"]
        return await asyncio.gather(
            tool.acall(owner="o", repo="r", auth=auth),
            tool.acall({"owner": "o", "repo": "r"}),
        )

    results = asyncio.run(run())

    assert all(r["success"] for r in results)
    assert mock_request.call_count == 2


def test_format_tools_strands():
    tools = format_tools(ALL_TOOLS, "strands")

    assert set(tools) == set(TOOLS_BY_NAME)
    agent_tool = tools["create_issue"]
    assert agent_tool.tool_name == "create_issue"
    spec = agent_tool.tool_spec
    assert spec["name"] == "create_issue"
    assert "title" in spec["inputSchema"]["json"]["properties"]


def test_format_tools_default_provider():
    assert set(format_tools(ALL_TOOLS[:2])) == {ALL_TOOLS[0].name, ALL_TOOLS[1].name}


def test_format_tools_unsupported_provider():
    with pytest.raises(ValueError, match="Provider not supported"):
        format_tools(ALL_TOOLS, "langchain")


def test_strands_handler_wraps_result(mock_request):
    mock_request.return_value = fake_response(200, {"number": 7})
    tool = with_auth([TOOLS_BY_NAME["get_issue"]], BearerAuth(api_key="t"))[0]

    handler = _strands_handler(tool)
    response = handler({"toolUseId": "abc", "input": {"owner": "o", "repo": "r", "issue_number": 7}})

    assert response["toolUseId"] == "abc"
    assert response["status"] == "success"
    payload = json.loads(response["content"][0]["text"])
    assert payload["data"]["number"] == 7
    assert mock_request.call_args.kwargs["headers"]["Authorization"] == "Bearer t"


def test_strands_handler_reports_errors(mock_request):
    handler = _strands_handler(TOOLS_BY_NAME["delete_gist"])

    response = handler({"toolUseId": "abc", "input": {"gist_id": "g"}})

    assert response["status"] == "error"
    assert json.loads(response["content"][0]["text"])["error_type"] == "AuthenticationRequired"
    mock_request.assert_not_called()
