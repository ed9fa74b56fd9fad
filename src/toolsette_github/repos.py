"""
GitHub Repository tools.

Usage Examples:
    from toolsette_github import BearerAuth, get_repository, get_repository_content, update_repo

    # Anonymous reads work for public repositories
    get_repository(owner="octocat", repo="Hello-World")
    get_repository_content(owner="octocat", repo="Hello-World", path="docs/README.md", ref="main")

    # Only the fields you pass are changed
    update_repo(owner="octocat", repo="Hello-World", description="New text", auth=BearerAuth(api_key="ghp_..."))

Available Tools:
    - create_fork, create_org_repo, delete_repo, update_repo
    - get_repository, get_repository_content, list_forks
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

from toolsette_github.client import (
    ACCEPT_GITHUB_JSON,
    ACCEPT_OBJECT_JSON,
    ACCEPT_V3_JSON,
    expand_path,
    make_request,
)
from toolsette_github.registry import BearerAuth, Tool
from toolsette_github.schemas import Page, PathSegment, PerPage, RepoInput, RepoPath

SquashMergeCommitTitle = Literal["PR_TITLE", "COMMIT_OR_PR_TITLE"]
SquashMergeCommitMessage = Literal["PR_BODY", "COMMIT_MESSAGES", "BLANK"]
MergeCommitTitle = Literal["PR_TITLE", "MERGE_MESSAGE"]
MergeCommitMessage = Literal["PR_BODY", "PR_TITLE", "BLANK"]

SQUASH_TITLE_DOC = (
    "The default value for a squash merge commit title: `PR_TITLE` - default to the pull request's title. "
    "`COMMIT_OR_PR_TITLE` - default to the commit's title (if only one commit) or the pull request's title "
    "(when more than one commit)."
)
SQUASH_MESSAGE_DOC = (
    "The default value for a squash merge commit message: `PR_BODY` - default to the pull request's body. "
    "`COMMIT_MESSAGES` - default to the branch's commit messages. `BLANK` - default to a blank commit message."
)
MERGE_TITLE_DOC = (
    "The default value for a merge commit title. `PR_TITLE` - default to the pull request's title. "
    "`MERGE_MESSAGE` - default to the classic title for a merge message (e.g., Merge pull request #123 "
    "from branch-name)."
)
MERGE_MESSAGE_DOC = (
    "The default value for a merge commit message. `PR_TITLE` - default to the pull request's title. "
    "`PR_BODY` - default to the pull request's body. `BLANK` - default to a blank commit message."
)


class CreateForkInput(RepoInput):
    organization: Optional[str] = Field(
        None, description="Optional parameter to specify the organization name if forking into an organization."
    )
    name: Optional[str] = Field(
        None, description="When forking from an existing repository, a new name for the fork."
    )
    default_branch_only: Optional[bool] = Field(
        None, description="When forking from an existing repository, fork with only the default branch."
    )


class CreateOrgRepoInput(BaseModel):
    org: PathSegment = Field(..., description="The organization name. The name is not case sensitive.")
    name: str = Field(..., description="The name of the repository.")
    description: Optional[str] = Field(None, description="A short description of the repository.")
    homepage: Optional[str] = Field(None, description="A URL with more information about the repository.")
    private: bool = Field(False, description="Whether the repository is private.")
    visibility: Optional[Literal["public", "private"]] = Field(
        None, description="The visibility of the repository."
    )
    has_issues: bool = Field(
        True, description="Either `true` to enable issues for this repository or `false` to disable them."
    )
    has_projects: bool = Field(
        True,
        description=(
            "Either `true` to enable projects for this repository or `false` to disable them. Note: If you're "
            "creating a repository in an organization that has disabled repository projects, the default is "
            "`false`, and if you pass `true`, the API returns an error."
        ),
    )
    has_wiki: bool = Field(
        True, description="Either `true` to enable the wiki for this repository or `false` to disable it."
    )
    has_downloads: bool = Field(True, description="Whether downloads are enabled.")
    is_template: bool = Field(
        False, description="Either `true` to make this repo available as a template repository or `false` to prevent it."
    )
    team_id: Optional[int] = Field(
        None,
        description=(
            "The id of the team that will be granted access to this repository. This is only valid when "
            "creating a repository in an organization."
        ),
    )
    auto_init: bool = Field(False, description="Pass `true` to create an initial commit with empty README.")
    gitignore_template: Optional[str] = Field(
        None, description='Desired language or platform .gitignore template to apply. Use the name of the template without the extension. For example, "Haskell".'
    )
    license_template: Optional[str] = Field(
        None,
        description=(
            "Choose an open source license template that best suits your needs, and then use the license "
            'keyword as the `license_template` string. For example, "mit" or "mpl-2.0".'
        ),
    )
    allow_squash_merge: bool = Field(
        True, description="Either `true` to allow squash-merging pull requests, or `false` to prevent squash-merging."
    )
    allow_merge_commit: bool = Field(
        True,
        description=(
            "Either `true` to allow merging pull requests with a merge commit, or `false` to prevent merging "
            "pull requests with merge commits."
        ),
    )
    allow_rebase_merge: bool = Field(
        True, description="Either `true` to allow rebase-merging pull requests, or `false` to prevent rebase-merging."
    )
    allow_auto_merge: bool = Field(
        False, description="Either `true` to allow auto-merge on pull requests, or `false` to disallow auto-merge."
    )
    delete_branch_on_merge: bool = Field(
        False,
        description=(
            "Either `true` to allow automatically deleting head branches when pull requests are merged, or "
            "`false` to prevent automatic deletion."
        ),
    )
    use_squash_pr_title_as_default: bool = Field(
        False,
        description=(
            "Either `true` to allow squash-merge commits to use pull request title, or `false` to use commit "
            "message. This property is closing down. Please use `squash_merge_commit_title` instead."
        ),
    )
    squash_merge_commit_title: Optional[SquashMergeCommitTitle] = Field(None, description=SQUASH_TITLE_DOC)
    squash_merge_commit_message: Optional[SquashMergeCommitMessage] = Field(None, description=SQUASH_MESSAGE_DOC)
    merge_commit_title: Optional[MergeCommitTitle] = Field(None, description=MERGE_TITLE_DOC)
    merge_commit_message: Optional[MergeCommitMessage] = Field(None, description=MERGE_MESSAGE_DOC)
    custom_properties: Optional[Dict[str, Any]] = Field(
        None,
        description=(
            "The custom properties for the new repository. The keys are the custom property names, and the "
            "values are the corresponding custom property values."
        ),
    )


class GetRepositoryContentInput(RepoInput):
    path: RepoPath = Field(
        ..., description="Specifies the file path or directory in the repository. Supports multi-segment paths."
    )
    ref: Optional[str] = Field(
        None, description="The name of the commit/branch/tag. Default: the repository's default branch."
    )


class ListForksInput(RepoInput):
    sort: Literal["newest", "oldest", "stargazers", "watchers"] = Field(
        "newest", description="The sort order. `stargazers` will sort by star count."
    )
    per_page: PerPage = 30
    page: Page = 1


class FeatureStatus(BaseModel):
    status: Literal["enabled", "disabled"] = Field(..., description="Can be `enabled` or `disabled`.")


class SecurityAndAnalysis(BaseModel):
    advanced_security: Optional[FeatureStatus] = Field(
        None, description="Enable or disable GitHub Advanced Security for this repository."
    )
    secret_scanning: Optional[FeatureStatus] = Field(
        None, description="Enable or disable secret scanning for this repository."
    )
    secret_scanning_push_protection: Optional[FeatureStatus] = Field(
        None, description="Enable or disable secret scanning push protection for this repository."
    )
    secret_scanning_ai_detection: Optional[FeatureStatus] = Field(
        None, description="Enable or disable secret scanning AI detection for this repository."
    )
    secret_scanning_non_provider_patterns: Optional[FeatureStatus] = Field(
        None, description="Enable or disable secret scanning non-provider patterns for this repository."
    )


class UpdateRepoInput(RepoInput):
    name: Optional[str] = Field(None, description="The name of the repository.")
    description: Optional[str] = Field(None, description="A short description of the repository.")
    homepage: Optional[str] = Field(None, description="A URL with more information about the repository.")
    private: Optional[bool] = Field(
        None,
        description=(
            "Either `true` to make the repository private or `false` to make it public. Note: You will get a "
            "422 error if the organization restricts changing repository visibility."
        ),
    )
    visibility: Optional[Literal["public", "private"]] = Field(None, description="The visibility of the repository.")
    security_and_analysis: Optional[SecurityAndAnalysis] = Field(
        None,
        description=(
            "Specify which security and analysis features to enable or disable for the repository. "
            "Pass null to leave them untouched."
        ),
    )
    has_issues: Optional[bool] = Field(
        None, description="Either `true` to enable issues for this repository or `false` to disable them."
    )
    has_projects: Optional[bool] = Field(
        None, description="Either `true` to enable projects for this repository or `false` to disable them."
    )
    has_wiki: Optional[bool] = Field(
        None, description="Either `true` to enable the wiki for this repository or `false` to disable it."
    )
    is_template: Optional[bool] = Field(
        None, description="Either `true` to make this repo available as a template repository or `false` to prevent it."
    )
    default_branch: Optional[str] = Field(None, description="Updates the default branch for this repository.")
    allow_squash_merge: Optional[bool] = Field(
        None, description="Either `true` to allow squash-merging pull requests, or `false` to prevent squash-merging."
    )
    allow_merge_commit: Optional[bool] = Field(
        None, description="Either `true` to allow merging pull requests with a merge commit, or `false` to prevent it."
    )
    allow_rebase_merge: Optional[bool] = Field(
        None, description="Either `true` to allow rebase-merging pull requests, or `false` to prevent rebase-merging."
    )
    allow_auto_merge: Optional[bool] = Field(
        None, description="Either `true` to allow auto-merge on pull requests, or `false` to disallow auto-merge."
    )
    delete_branch_on_merge: Optional[bool] = Field(
        None, description="Either `true` to automatically delete head branches when pull requests are merged."
    )
    allow_update_branch: Optional[bool] = Field(
        None,
        description=(
            "Either `true` to always allow a pull request head branch that is behind its base branch to be "
            "updated even if it is not required to be up to date before merging, or false otherwise."
        ),
    )
    use_squash_pr_title_as_default: Optional[bool] = Field(
        None,
        description=(
            "Either `true` to allow squash-merge commits to use pull request title, or `false` to use commit "
            "message. This property is closing down. Please use `squash_merge_commit_title` instead."
        ),
    )
    squash_merge_commit_title: Optional[SquashMergeCommitTitle] = Field(None, description=SQUASH_TITLE_DOC)
    squash_merge_commit_message: Optional[SquashMergeCommitMessage] = Field(None, description=SQUASH_MESSAGE_DOC)
    merge_commit_title: Optional[MergeCommitTitle] = Field(None, description=MERGE_TITLE_DOC)
    merge_commit_message: Optional[MergeCommitMessage] = Field(None, description=MERGE_MESSAGE_DOC)
    archived: Optional[bool] = Field(
        None, description="Whether to archive this repository. `false` will unarchive a previously archived repository."
    )
    allow_forking: Optional[bool] = Field(
        None, description="Either `true` to allow private forks, or `false` to prevent private forks."
    )
    web_commit_signoff_required: Optional[bool] = Field(
        None, description="Either `true` to require contributors to sign off on web-based commits, or `false` not to."
    )


def _repo_path(params: RepoInput, suffix: str = "") -> str:
    return expand_path("/repos/{owner}/{repo}" + suffix, owner=params.owner, repo=params.repo)


def _create_fork(params: CreateForkInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    payload = params.model_dump(include={"organization", "name", "default_branch_only"}, exclude_none=True)
    return make_request(
        "POST", _repo_path(params, "/forks"), auth=auth, accept=ACCEPT_V3_JSON, json=payload or None
    )


def _create_org_repo(params: CreateOrgRepoInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    payload = params.model_dump(exclude={"org"}, exclude_none=True)
    return make_request(
        "POST",
        expand_path("/orgs/{org}/repos", org=params.org),
        auth=auth,
        accept=ACCEPT_V3_JSON,
        json=payload,
    )


def _delete_repo(params: RepoInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    result = make_request("DELETE", _repo_path(params), auth=auth, accept=ACCEPT_V3_JSON)
    if result["success"]:
        result["message"] = "Repository deleted successfully"
    return result


def _get_repository(params: RepoInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request("GET", _repo_path(params), auth=auth, accept=ACCEPT_V3_JSON)


def _get_repository_content(params: GetRepositoryContentInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    endpoint = expand_path(
        "/repos/{owner}/{repo}/contents/{path}",
        keep_slashes=("path",),
        owner=params.owner,
        repo=params.repo,
        path=params.path,
    )
    return make_request(
        "GET", endpoint, auth=auth, accept=ACCEPT_OBJECT_JSON, params={"ref": params.ref or None}
    )


def _list_forks(params: ListForksInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request(
        "GET",
        _repo_path(params, "/forks"),
        auth=auth,
        accept=ACCEPT_V3_JSON,
        params={"sort": params.sort, "per_page": params.per_page, "page": params.page},
    )


def _update_repo(params: UpdateRepoInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    # Unset fields must not be sent or GitHub resets them
    payload = params.model_dump(exclude={"owner", "repo"}, exclude_unset=True)
    return make_request("PATCH", _repo_path(params), auth=auth, accept=ACCEPT_GITHUB_JSON, json=payload)


create_fork = Tool(
    name="create_fork",
    description=(
        "Create a fork for the authenticated user.\n\n> NOTE\n> Forking a repository happens asynchronously. "
        "You may have to wait a short period of time before you can access the git objects. If this takes "
        "longer than 5 minutes, be sure to contact GitHub Support."
    ),
    parameters=CreateForkInput,
    function=_create_fork,
)

create_org_repo = Tool(
    name="create_org_repo",
    description=(
        "Creates a new repository in the specified organization. The authenticated user must be a member of "
        "the organization.\n\nOAuth app tokens and personal access tokens (classic) need the `public_repo` or "
        "`repo` scope to create a public repository, and `repo` scope to create a private repository."
    ),
    parameters=CreateOrgRepoInput,
    function=_create_org_repo,
)

delete_repo = Tool(
    name="delete_repo",
    description=(
        "Deleting a repository requires admin access.\n\nIf an organization owner has configured the "
        "organization to prevent members from deleting organization-owned repositories, you will get a "
        "403 Forbidden response.\n\nOAuth app tokens and personal access tokens (classic) need the "
        "delete_repo scope to use this endpoint."
    ),
    parameters=RepoInput,
    function=_delete_repo,
)

get_repository = Tool(
    name="get_repository",
    description=(
        "Get a repository. The `parent` and `source` objects are present when the repository is a fork. "
        "`parent` is the repository this repository was forked from, `source` is the ultimate source for the "
        "network. In order to see the `security_and_analysis` block for a repository you must have admin "
        "permissions for the repository or be an owner or security manager for the organization that owns "
        "the repository."
    ),
    parameters=RepoInput,
    function=_get_repository,
    requires_auth=False,
)

get_repository_content = Tool(
    name="get_repository_content",
    description=(
        "Gets the contents of a file or directory in a repository. Specify the file path or directory with "
        "the `path` parameter. This endpoint returns an object for both files and directories."
    ),
    parameters=GetRepositoryContentInput,
    function=_get_repository_content,
    requires_auth=False,
)

list_forks = Tool(
    name="list_forks",
    description="List forks",
    parameters=ListForksInput,
    function=_list_forks,
    requires_auth=False,
)

update_repo = Tool(
    name="update_repo",
    description=(
        "Update a repository. Note: To edit a repository's topics, use the Replace all repository topics "
        "endpoint. API method documentation: https://docs.github.com/rest/repos/repos#update-a-repository"
    ),
    parameters=UpdateRepoInput,
    function=_update_repo,
)

REPO_TOOLS = [
    create_fork,
    create_org_repo,
    delete_repo,
    get_repository,
    get_repository_content,
    list_forks,
    update_repo,
]
