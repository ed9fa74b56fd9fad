"""
GitHub Pull Request tools.

Available Tools:
    - create_pull_request_review: Review a pull request, optionally with inline comments
    - get_pull_request: Get a pull request by number
    - list_pull_requests: List pull requests in a repository
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from toolsette_github.client import (
    ACCEPT_COMMIT_COMMENT_RAW_JSON,
    ACCEPT_V3_JSON,
    expand_path,
    make_request,
)
from toolsette_github.registry import BearerAuth, Tool
from toolsette_github.schemas import Page, PerPage, PullInput, RepoInput


class ReviewComment(BaseModel):
    path: str = Field(..., description="The relative path to the file that necessitates a review comment.")
    position: Optional[int] = Field(
        None,
        description=(
            "The position in the diff where you want to add a review comment. Note this is not the same as "
            'the line number in the file. The position value equals the number of lines down from the first "@@" '
            "hunk header; the line just below the header is position 1, the next is 2, and so on."
        ),
    )
    body: str = Field(..., description="Text of the review comment.")
    line: Optional[int] = Field(None, description="The line in the file. Example: 28")
    side: Optional[str] = Field(None, description="Side, for example: RIGHT")
    start_line: Optional[int] = Field(None, description="The start line in the diff. Example: 26")
    start_side: Optional[str] = Field(None, description="The start side. Example: LEFT")


class CreateReviewInput(PullInput):
    commit_id: Optional[str] = Field(
        None,
        description=(
            "The SHA of the commit that needs a review. Not using the latest commit SHA may render your review "
            "comment outdated if a subsequent commit modifies the line you specify as the `position`. Defaults "
            "to the most recent commit in the pull request when you do not specify a value."
        ),
    )
    body: Optional[str] = Field(
        None,
        description=(
            "**Required** when using `REQUEST_CHANGES` or `COMMENT` for the `event` parameter. "
            "The body text of the pull request review."
        ),
    )
    event: Optional[Literal["APPROVE", "REQUEST_CHANGES", "COMMENT"]] = Field(
        None,
        description=(
            "The review action you want to perform. By leaving this blank, the review action state will be "
            "set to `PENDING`, meaning you will need to submit the review later."
        ),
    )
    comments: Optional[List[ReviewComment]] = Field(
        None,
        description="An array specifying the location, destination, and contents of draft review comments.",
    )


class ListPullRequestsInput(RepoInput):
    state: Literal["open", "closed", "all"] = Field(
        "open", description="Either `open`, `closed`, or `all` to filter by state."
    )
    head: Optional[str] = Field(
        None,
        description=(
            "Filter pulls by head user or head organization and branch name in the format of `user:ref-name` "
            "or `organization:ref-name`. For example: `github:new-script-format` or `octocat:test-branch`."
        ),
    )
    base: Optional[str] = Field(None, description="Filter pulls by base branch name. Example: `gh-pages`.")
    sort: Literal["created", "updated", "popularity", "long-running"] = Field(
        "created",
        description=(
            "What to sort results by. `popularity` will sort by the number of comments. `long-running` will "
            "sort by date created and will limit the results to pull requests that have been open for more "
            "than a month and have had activity within the past month."
        ),
    )
    direction: Optional[Literal["asc", "desc"]] = Field(
        None,
        description=(
            "The direction of the sort. Default: `desc` when sort is `created` or sort is not specified, "
            "otherwise `asc`."
        ),
    )
    per_page: PerPage = 30
    page: Page = 1


def _pull_path(params: PullInput, suffix: str = "") -> str:
    return expand_path(
        "/repos/{owner}/{repo}/pulls/{pull_number}" + suffix,
        owner=params.owner,
        repo=params.repo,
        pull_number=params.pull_number,
    )


def _create_pull_request_review(params: CreateReviewInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    payload = params.model_dump(include={"commit_id", "body", "event", "comments"}, exclude_none=True)
    return make_request(
        "POST",
        _pull_path(params, "/reviews"),
        auth=auth,
        accept=ACCEPT_COMMIT_COMMENT_RAW_JSON,
        json=payload,
    )


def _get_pull_request(params: PullInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request("GET", _pull_path(params), auth=auth, accept=ACCEPT_V3_JSON)


def _list_pull_requests(params: ListPullRequestsInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request(
        "GET",
        expand_path("/repos/{owner}/{repo}/pulls", owner=params.owner, repo=params.repo),
        auth=auth,
        accept=ACCEPT_V3_JSON,
        params=params.model_dump(exclude={"owner", "repo"}),
    )


create_pull_request_review = Tool(
    name="create_pull_request_review",
    description=(
        "Creates a review on a specified pull request. This endpoint triggers notifications and supports "
        "creating pending reviews with inline comments."
    ),
    parameters=CreateReviewInput,
    function=_create_pull_request_review,
)

get_pull_request = Tool(
    name="get_pull_request",
    description=(
        "Get a pull request. Draft pull requests are available in public repositories with GitHub Free and "
        "GitHub Free for organizations, GitHub Pro, and legacy per-repository billing plans, and in public and "
        "private repositories with GitHub Team and GitHub Enterprise Cloud. Lists details of a pull request by "
        "providing its number."
    ),
    parameters=PullInput,
    function=_get_pull_request,
    requires_auth=False,
)

list_pull_requests = Tool(
    name="list_pull_requests",
    description=(
        "Lists pull requests in a specified repository.\n\nDraft pull requests are available in public "
        "repositories with GitHub Free and GitHub Free for organizations, GitHub Pro, and legacy per-repository "
        "billing plans, and in public and private repositories with GitHub Team and GitHub Enterprise Cloud."
    ),
    parameters=ListPullRequestsInput,
    function=_list_pull_requests,
    requires_auth=False,
)

PULL_TOOLS = [create_pull_request_review, get_pull_request, list_pull_requests]
