"""Tests for the consolidated GitHub tool."""

from conftest import fake_response


def test_github_unknown_action(mock_env_token):
    """Test error for unknown action."""
    from toolsette_github import github

    result = github(action="unknown_action")

    assert result["success"] is False
    assert "Unknown action" in result["error"]
    assert "create_issue" in result["available_actions"]
    assert len(result["available_actions"]) == 36


def test_github_uses_env_token(mock_request, mock_env_token):
    """The token from GITHUB_TOKEN is sent as a bearer credential."""
    mock_request.return_value = fake_response(201, {"number": 42, "title": "Test Issue"})

    from toolsette_github import github

    result = github(
        action="create_issue",
        params={"owner": "owner", "repo": "repo", "title": "Test Issue", "labels": ["bug"]},
    )

    assert result["success"] is True
    assert result["action"] == "create_issue"
    assert result["data"]["number"] == 42
    assert mock_request.call_args.kwargs["headers"]["Authorization"] == "Bearer test_token_123"
    mock_request.assert_called_once()


def test_github_missing_token_for_write(mock_request, no_env_token):
    """Write actions need GITHUB_TOKEN."""
    from toolsette_github import github

    result = github(action="delete_gist", params={"gist_id": "abc"})

    assert result["success"] is False
    assert result["error_type"] == "AuthenticationRequired"
    mock_request.assert_not_called()


def test_github_anonymous_read(mock_request, no_env_token):
    mock_request.return_value = fake_response(200, {"full_name": "octocat/Hello-World"})

    from toolsette_github import github

    result = github(action="get_repository", params={"owner": "octocat", "repo": "Hello-World"})

    assert result["success"] is True
    assert "Authorization" not in mock_request.call_args.kwargs["headers"]


def test_github_validation_error(mock_request, mock_env_token):
    from toolsette_github import github

    result = github(action="get_issue", params={"owner": "o", "repo": "r"})

    assert result["success"] is False
    assert "issue_number" in result["error"]
    mock_request.assert_not_called()


def test_github_http_error(mock_request, mock_env_token):
    mock_request.return_value = fake_response(404, {"message": "Not Found"})

    from toolsette_github import github

    result = github(action="get_pull_request", params={"owner": "o", "repo": "r", "pull_number": 1})

    assert result["success"] is False
    assert result["status_code"] == 404
    assert result["action"] == "get_pull_request"
