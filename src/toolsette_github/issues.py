"""
GitHub Issue tools: issues, assignees, locking and issue comments.

Every pull request is an issue, so the comment, assignee and lock tools also
work with pull request numbers.

Usage Examples:
    from toolsette_github import BearerAuth, create_issue, create_issue_comment

    auth = BearerAuth(api_key="ghp_...")

    # Create an issue with labels
    create_issue(owner="octocat", repo="Hello-World", title="Found a bug", labels=["bug"], auth=auth)

    # Comment on it
    create_issue_comment(owner="octocat", repo="Hello-World", issue_number=42, body="Me too", auth=auth)

Available Tools:
    - create_issue, get_issue, list_issues, update_issue
    - lock_issue, unlock_issue
    - add_assignees, remove_assignees
    - create_issue_comment, get_issue_comment, update_issue_comment, delete_issue_comment
    - list_issue_comments, list_issue_comments_for_repo
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from toolsette_github.client import (
    ACCEPT_FULL_JSON,
    ACCEPT_GITHUB_JSON,
    ACCEPT_RAW_JSON,
    ACCEPT_V3_JSON,
    expand_path,
    make_request,
)
from toolsette_github.registry import BearerAuth, Tool
from toolsette_github.schemas import (
    SINCE_DESCRIPTION,
    CommentInput,
    IsoTimestamp,
    IssueInput,
    LabelObject,
    Page,
    PerPage,
    RepoInput,
)

ISSUE_PATH = "/repos/{owner}/{repo}/issues/{issue_number}"
COMMENT_PATH = "/repos/{owner}/{repo}/issues/comments/{comment_id}"


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------

class CreateIssueInput(RepoInput):
    title: Union[str, int] = Field(..., description="The title of the issue. (Example: 'Found a bug')")
    body: Optional[str] = Field(
        None, description="The contents of the issue. (Example: 'I'm having a problem with this.')"
    )
    assignee: Optional[str] = Field(
        None,
        description=(
            "Login for the user that this issue should be assigned to. _NOTE: Only users with push access "
            "can set the assignee for new issues. The assignee is silently dropped otherwise. "
            "**This field is closing down.**_"
        ),
    )
    milestone: Optional[Union[str, int]] = Field(
        None, description="The milestone to associate this issue with. (Example: 1)"
    )
    labels: Optional[List[Union[str, LabelObject]]] = Field(
        None, description="Labels to associate with this issue. (Example: ['bug'])"
    )
    assignees: Optional[List[str]] = Field(
        None, description="Logins for Users to assign to this issue. (Example: ['octocat'])"
    )


class ListIssuesInput(BaseModel):
    filter: Literal["assigned", "created", "mentioned", "subscribed", "repos", "all"] = Field(
        "assigned",
        description=(
            "Indicates which sorts of issues to return. `assigned` means issues assigned to you. "
            "`created` means issues created by you. `mentioned` means issues mentioning you. "
            "`subscribed` means issues you're subscribed to updates for. `all` or `repos` means all "
            "issues you can see, regardless of participation or creation."
        ),
    )
    state: Literal["open", "closed", "all"] = Field(
        "open", description="Indicates the state of the issues to return."
    )
    labels: Optional[str] = Field(
        None, description="A list of comma separated label names. Example: `bug,ui,@high`"
    )
    sort: Literal["created", "updated", "comments"] = Field("created", description="What to sort results by.")
    direction: Literal["asc", "desc"] = Field("desc", description="The direction to sort the results by.")
    since: Optional[IsoTimestamp] = Field(None, description=SINCE_DESCRIPTION)
    collab: Optional[bool] = None
    orgs: Optional[bool] = None
    owned: Optional[bool] = None
    pulls: Optional[bool] = None
    per_page: PerPage = 30
    page: Page = 1


class UpdateIssueInput(IssueInput):
    title: Optional[Union[str, int]] = Field(None, description="The title of the issue.")
    body: Optional[str] = Field(None, description="The contents of the issue.")
    assignee: Optional[str] = Field(
        None, description="Username to assign to this issue. **This field is closing down.**"
    )
    state: Optional[Literal["open", "closed"]] = Field(
        None, description="The open or closed state of the issue."
    )
    state_reason: Optional[Literal["completed", "not_planned", "reopened"]] = Field(
        None, description="The reason for the state change. Ignored unless `state` is changed."
    )
    milestone: Optional[Union[str, int]] = Field(
        None,
        description=(
            "The `number` of the milestone to associate this issue with or use `null` to remove the "
            "current milestone. Only users with push access can set the milestone for issues. Without "
            "push access to the repository, milestone changes are silently dropped."
        ),
    )
    labels: Optional[List[Union[str, LabelObject]]] = Field(
        None,
        description=(
            "Labels to associate with this issue. Pass one or more labels to _replace_ the set of labels "
            "on this issue. Send an empty array (`[]`) to clear all labels from the issue. Only users with "
            "push access can set labels for issues. Without push access to the repository, label changes "
            "are silently dropped."
        ),
    )
    assignees: Optional[List[str]] = Field(
        None,
        description=(
            "Usernames to assign to this issue. Pass one or more user logins to _replace_ the set of "
            "assignees on this issue. Send an empty array (`[]`) to clear all assignees from the issue. "
            "Only users with push access can set assignees for new issues. Without push access to the "
            "repository, assignee changes are silently dropped."
        ),
    )


class LockIssueInput(IssueInput):
    lock_reason: Optional[Literal["off-topic", "too heated", "resolved", "spam"]] = Field(
        None,
        description=(
            "The reason for locking the issue or pull request conversation. Lock will fail if you don't "
            "use one of these reasons: off-topic, too heated, resolved, spam. Example: off-topic"
        ),
    )


class AddAssigneesInput(IssueInput):
    assignees: Optional[List[str]] = Field(
        None,
        max_length=10,
        description=(
            "Usernames of people to assign this issue to. _NOTE: Only users with push access can add "
            "assignees to an issue. Assignees are silently ignored otherwise._"
        ),
    )


class RemoveAssigneesInput(IssueInput):
    assignees: List[str] = Field(
        ...,
        description=(
            "Usernames of assignees to remove from an issue. _NOTE: Only users with push access can remove "
            "assignees from an issue. Assignees are silently ignored otherwise._"
        ),
    )


class CreateIssueCommentInput(IssueInput):
    body: str = Field(..., description="The contents of the comment. Example: 'Me too'")


class UpdateIssueCommentInput(CommentInput):
    body: str = Field(..., description="The contents of the comment. Example: 'Me too'")


class ListIssueCommentsInput(IssueInput):
    since: Optional[IsoTimestamp] = Field(None, description=SINCE_DESCRIPTION)
    per_page: PerPage = 30
    page: Page = 1


class ListIssueCommentsForRepoInput(RepoInput):
    sort: Literal["created", "updated"] = Field("created", description="The property to sort the results by.")
    direction: Optional[Literal["asc", "desc"]] = Field(
        None, description="Either `asc` or `desc`. Ignored without the `sort` parameter."
    )
    since: Optional[IsoTimestamp] = Field(None, description=SINCE_DESCRIPTION)
    per_page: PerPage = 30
    page: Page = 1


# ---------------------------------------------------------------------------
# Request functions
# ---------------------------------------------------------------------------

def _issue_path(params: IssueInput, suffix: str = "") -> str:
    return expand_path(
        ISSUE_PATH + suffix, owner=params.owner, repo=params.repo, issue_number=params.issue_number
    )


def _comment_path(params: CommentInput) -> str:
    return expand_path(COMMENT_PATH, owner=params.owner, repo=params.repo, comment_id=params.comment_id)


def _create_issue(params: CreateIssueInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    payload = params.model_dump(exclude={"owner", "repo"}, exclude_unset=True)
    return make_request(
        "POST",
        expand_path("/repos/{owner}/{repo}/issues", owner=params.owner, repo=params.repo),
        auth=auth,
        accept=ACCEPT_V3_JSON,
        json=payload,
    )


def _get_issue(params: IssueInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request("GET", _issue_path(params), auth=auth, accept=ACCEPT_FULL_JSON)


def _list_issues(params: ListIssuesInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request("GET", "/issues", auth=auth, accept=ACCEPT_V3_JSON, params=params.model_dump())


def _update_issue(params: UpdateIssueInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    # Explicit nulls are meaningful here (e.g. milestone=None clears it)
    payload = params.model_dump(exclude={"owner", "repo", "issue_number"}, exclude_unset=True)
    return make_request("PATCH", _issue_path(params), auth=auth, accept=ACCEPT_V3_JSON, json=payload)


def _lock_issue(params: LockIssueInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    # Without a reason requests sends an empty body with Content-Length: 0
    payload = {"lock_reason": params.lock_reason} if params.lock_reason is not None else None
    return make_request("PUT", _issue_path(params, "/lock"), auth=auth, accept=ACCEPT_V3_JSON, json=payload)


def _unlock_issue(params: IssueInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    result = make_request("DELETE", _issue_path(params, "/lock"), auth=auth, accept=ACCEPT_V3_JSON)
    if result["success"]:
        result["message"] = "Issue unlocked successfully"
    return result


def _add_assignees(params: AddAssigneesInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    payload = {"assignees": params.assignees} if params.assignees is not None else {}
    return make_request(
        "POST", _issue_path(params, "/assignees"), auth=auth, accept=ACCEPT_GITHUB_JSON, json=payload
    )


def _remove_assignees(params: RemoveAssigneesInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request(
        "DELETE",
        _issue_path(params, "/assignees"),
        auth=auth,
        accept=ACCEPT_V3_JSON,
        json={"assignees": params.assignees},
    )


def _create_issue_comment(params: CreateIssueCommentInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request(
        "POST", _issue_path(params, "/comments"), auth=auth, accept=ACCEPT_V3_JSON, json={"body": params.body}
    )


def _get_issue_comment(params: CommentInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request("GET", _comment_path(params), auth=auth, accept=ACCEPT_V3_JSON)


def _update_issue_comment(params: UpdateIssueCommentInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request(
        "PATCH", _comment_path(params), auth=auth, accept=ACCEPT_RAW_JSON, json={"body": params.body}
    )


def _delete_issue_comment(params: CommentInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    result = make_request("DELETE", _comment_path(params), auth=auth, accept=ACCEPT_V3_JSON)
    if result["success"]:
        result["message"] = "Comment deleted successfully"
    return result


def _list_issue_comments(params: ListIssueCommentsInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    query = {"per_page": params.per_page, "page": params.page, "since": params.since}
    return make_request(
        "GET", _issue_path(params, "/comments"), auth=auth, accept=ACCEPT_RAW_JSON, params=query
    )


def _list_issue_comments_for_repo(
    params: ListIssueCommentsForRepoInput, auth: Optional[BearerAuth]
) -> Dict[str, Any]:
    return make_request(
        "GET",
        expand_path("/repos/{owner}/{repo}/issues/comments", owner=params.owner, repo=params.repo),
        auth=auth,
        accept=ACCEPT_V3_JSON,
        params=params.model_dump(exclude={"owner", "repo"}),
    )


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

create_issue = Tool(
    name="create_issue",
    description=(
        "Create an issue. Any user with pull access to a repository can create an issue. If issues are "
        "disabled in the repository (link: https://docs.github.com/articles/disabling-issues/), the API "
        "returns a 410 Gone status. This endpoint triggers notifications and supports custom media types "
        "such as application/vnd.github.raw+json, application/vnd.github.text+json, "
        "application/vnd.github.html+json, and application/vnd.github.full+json."
    ),
    parameters=CreateIssueInput,
    function=_create_issue,
)

get_issue = Tool(
    name="get_issue",
    description=(
        "Get an issue. The API returns a 301 Moved Permanently status if the issue was transferred to "
        "another repository. If the issue was transferred to or deleted from a repository where the "
        "authenticated user lacks read access, the API returns a 404 Not Found status. If the issue was "
        "deleted from a repository where the authenticated user has read access, the API returns a "
        "410 Gone status."
    ),
    parameters=IssueInput,
    function=_get_issue,
    requires_auth=False,
)

list_issues = Tool(
    name="list_issues",
    description=(
        "List issues assigned to the authenticated user across all visible repositories including owned "
        "repositories, member repositories, and organization repositories. You can use the `filter` query "
        "parameter to fetch issues that are not necessarily assigned to you.\n\n> [!NOTE]\n> GitHub's REST "
        "API considers every pull request an issue, but not every issue is a pull request. For this reason, "
        '"Issues" endpoints may return both issues and pull requests in the response. You can identify '
        "pull requests by the `pull_request` key."
    ),
    parameters=ListIssuesInput,
    function=_list_issues,
)

update_issue = Tool(
    name="update_issue",
    description=(
        "Issue owners and users with push access or Triage role can edit an issue. This endpoint supports "
        "custom media types (raw, text, HTML, and full representations) for the issue body."
    ),
    parameters=UpdateIssueInput,
    function=_update_issue,
)

lock_issue = Tool(
    name="lock_issue",
    description="Users with push access can lock an issue or pull request's conversation.",
    parameters=LockIssueInput,
    function=_lock_issue,
)

unlock_issue = Tool(
    name="unlock_issue",
    description="Users with push access can unlock an issue's conversation.",
    parameters=IssueInput,
    function=_unlock_issue,
)

add_assignees = Tool(
    name="add_assignees",
    description="Adds up to 10 assignees to an issue. Users already assigned to an issue are not replaced.",
    parameters=AddAssigneesInput,
    function=_add_assignees,
)

remove_assignees = Tool(
    name="remove_assignees",
    description="Removes one or more assignees from an issue.",
    parameters=RemoveAssigneesInput,
    function=_remove_assignees,
)

create_issue_comment = Tool(
    name="create_issue_comment",
    description=(
        "Create an issue comment. You can use the REST API to create comments on issues and pull requests. "
        "Every pull request is an issue, but not every issue is a pull request. This endpoint triggers "
        "notifications and creating content too quickly may result in secondary rate limiting."
    ),
    parameters=CreateIssueCommentInput,
    function=_create_issue_comment,
)

get_issue_comment = Tool(
    name="get_issue_comment",
    description=(
        "Get an issue comment. You can use the REST API to get comments on issues and pull requests. "
        "Every pull request is an issue, but not every issue is a pull request."
    ),
    parameters=CommentInput,
    function=_get_issue_comment,
    requires_auth=False,
)

update_issue_comment = Tool(
    name="update_issue_comment",
    description=(
        "Update an issue comment: You can use the REST API to update comments on issues and pull requests. "
        "Every pull request is an issue, but not every issue is a pull request."
    ),
    parameters=UpdateIssueCommentInput,
    function=_update_issue_comment,
)

delete_issue_comment = Tool(
    name="delete_issue_comment",
    description=(
        "You can use the REST API to delete comments on issues and pull requests. "
        "Every pull request is an issue, but not every issue is a pull request."
    ),
    parameters=CommentInput,
    function=_delete_issue_comment,
)

list_issue_comments = Tool(
    name="list_issue_comments",
    description=(
        "You can use the REST API to list comments on issues and pull requests. Every pull request is an "
        "issue, but not every issue is a pull request.\n\nIssue comments are ordered by ascending ID."
    ),
    parameters=ListIssueCommentsInput,
    function=_list_issue_comments,
    requires_auth=False,
)

list_issue_comments_for_repo = Tool(
    name="list_issue_comments_for_repo",
    description=(
        "List issue comments for a repository. You can use the REST API to list comments on issues and "
        "pull requests for a repository. By default, issue comments are ordered by ascending ID."
    ),
    parameters=ListIssueCommentsForRepoInput,
    function=_list_issue_comments_for_repo,
    requires_auth=False,
)

ISSUE_TOOLS = [
    create_issue,
    get_issue,
    list_issues,
    update_issue,
    lock_issue,
    unlock_issue,
    add_assignees,
    remove_assignees,
    create_issue_comment,
    get_issue_comment,
    update_issue_comment,
    delete_issue_comment,
    list_issue_comments,
    list_issue_comments_for_repo,
]
