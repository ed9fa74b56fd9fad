"""
GitHub Tool

Every GitHub endpoint in this package behind a single action-based tool.

Usage Examples:
    from strands import Agent
    from toolsette_github import github

    agent = Agent(tools=[github])

    # Get repository info
    agent.tool.github(action="get_repository", params={"owner": "octocat", "repo": "Hello-World"})

    # Create an issue
    agent.tool.github(
        action="create_issue",
        params={"owner": "octocat", "repo": "Hello-World", "title": "Found a bug", "labels": ["bug"]},
    )

    # Lock the conversation
    agent.tool.github(
        action="lock_issue",
        params={"owner": "octocat", "repo": "Hello-World", "issue_number": 42, "lock_reason": "resolved"},
    )

Available Actions:
    Gists: create_gist, delete_gist, get_gist, list_gists, update_gist
    Issues: create_issue, get_issue, list_issues, update_issue, lock_issue, unlock_issue,
        add_assignees, remove_assignees
    Issue comments: create_issue_comment, get_issue_comment, update_issue_comment,
        delete_issue_comment, list_issue_comments, list_issue_comments_for_repo
    Labels: create_label, get_label, update_label, delete_label, add_labels_to_issue,
        list_labels_for_issue, remove_label
    Pull requests: create_pull_request_review, get_pull_request, list_pull_requests
    Repositories: create_fork, create_org_repo, delete_repo, get_repository,
        get_repository_content, list_forks, update_repo

Environment Variables:
    GITHUB_TOKEN: GitHub personal access token (needed for write actions)
"""

from typing import Any, Dict, List, Optional

from strands import tool

from toolsette_github.client import get_token
from toolsette_github.gists import GIST_TOOLS
from toolsette_github.issues import ISSUE_TOOLS
from toolsette_github.labels import LABEL_TOOLS
from toolsette_github.pulls import PULL_TOOLS
from toolsette_github.registry import BearerAuth, Tool
from toolsette_github.repos import REPO_TOOLS

ALL_TOOLS: List[Tool] = [*GIST_TOOLS, *ISSUE_TOOLS, *LABEL_TOOLS, *PULL_TOOLS, *REPO_TOOLS]
TOOLS_BY_NAME: Dict[str, Tool] = {t.name: t for t in ALL_TOOLS}


@tool
def github(action: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Call a GitHub REST endpoint.

    Args:
        action: The endpoint to call, e.g. "get_repository", "create_issue",
            "list_pull_requests". Read-only actions work without a token for
            public data; everything else needs GITHUB_TOKEN.
        params: Arguments for the action, e.g. {"owner": "octocat", "repo": "Hello-World"}.
            Most actions take owner and repo; issue actions add issue_number,
            pull request actions pull_number, comment actions comment_id.

    Returns:
        dict: Result with "success" key and action-specific data

    Examples:
        >>> github(action="get_repository", params={"owner": "octocat", "repo": "Hello-World"})
        >>> github(action="list_issue_comments", params={"owner": "octocat", "repo": "Hello-World", "issue_number": 1})
    """
    descriptor = TOOLS_BY_NAME.get(action)
    if descriptor is None:
        return {
            "success": False,
            "action": action,
            "error": f"Unknown action: {action}",
            "available_actions": list(TOOLS_BY_NAME.keys()),
        }

    token = get_token()
    auth = BearerAuth(api_key=token) if token else None
    return descriptor(params or {}, auth=auth)
