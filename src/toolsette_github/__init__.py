"""
toolsette-github: GitHub REST API tools for Strands Agents.

Each endpoint is a ``Tool`` descriptor that validates its input with pydantic
and returns a ``{"success": ...}`` result dict. ``format_tools`` turns the
descriptors into Strands agent tools; ``github`` wraps them all in a single
action-based tool.
"""

from toolsette_github.gists import create_gist, delete_gist, get_gist, list_gists, update_gist
from toolsette_github.github import ALL_TOOLS, TOOLS_BY_NAME, github
from toolsette_github.issues import (
    add_assignees,
    create_issue,
    create_issue_comment,
    delete_issue_comment,
    get_issue,
    get_issue_comment,
    list_issue_comments,
    list_issue_comments_for_repo,
    list_issues,
    lock_issue,
    remove_assignees,
    unlock_issue,
    update_issue,
    update_issue_comment,
)
from toolsette_github.labels import (
    add_labels_to_issue,
    create_label,
    delete_label,
    get_label,
    list_labels_for_issue,
    remove_label,
    update_label,
)
from toolsette_github.pulls import create_pull_request_review, get_pull_request, list_pull_requests
from toolsette_github.registry import BearerAuth, Tool, format_tools, with_auth
from toolsette_github.repos import (
    create_fork,
    create_org_repo,
    delete_repo,
    get_repository,
    get_repository_content,
    list_forks,
    update_repo,
)

__version__ = "0.1.0"

__all__ = [
    "ALL_TOOLS",
    "TOOLS_BY_NAME",
    "BearerAuth",
    "Tool",
    "format_tools",
    "with_auth",
    "github",
    # Gists
    "create_gist",
    "delete_gist",
    "get_gist",
    "list_gists",
    "update_gist",
    # Issues
    "add_assignees",
    "create_issue",
    "create_issue_comment",
    "delete_issue_comment",
    "get_issue",
    "get_issue_comment",
    "list_issue_comments",
    "list_issue_comments_for_repo",
    "list_issues",
    "lock_issue",
    "remove_assignees",
    "unlock_issue",
    "update_issue",
    "update_issue_comment",
    # Labels
    "add_labels_to_issue",
    "create_label",
    "delete_label",
    "get_label",
    "list_labels_for_issue",
    "remove_label",
    "update_label",
    # Pull requests
    "create_pull_request_review",
    "get_pull_request",
    "list_pull_requests",
    # Repositories
    "create_fork",
    "create_org_repo",
    "delete_repo",
    "get_repository",
    "get_repository_content",
    "list_forks",
    "update_repo",
]
