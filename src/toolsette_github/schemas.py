"""Input models and field types shared by the GitHub tools."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field

# URL normalisation drops these, which would retarget the request
DOT_SEGMENTS = (".", "..")

OWNER_DESCRIPTION = "The account owner of the repository. The name is not case sensitive."
REPO_DESCRIPTION = "The name of the repository without the `.git` extension. The name is not case sensitive."
PAGINATION_DOCS = (
    'For more information, see "[Using pagination in the REST API]'
    '(https://docs.github.com/rest/using-the-rest-api/using-pagination-in-the-rest-api)."'
)

# GitHub only accepts UTC timestamps of the form YYYY-MM-DDTHH:MM:SSZ
ISO_8601_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?Z$"

PerPage = Annotated[
    int,
    Field(ge=1, le=100, description=f"The number of results per page (max 100). {PAGINATION_DOCS}"),
]
Page = Annotated[
    int,
    Field(ge=1, description=f"The page number of the results to fetch. {PAGINATION_DOCS}"),
]
IsoTimestamp = Annotated[str, Field(pattern=ISO_8601_PATTERN)]
SINCE_DESCRIPTION = (
    "Only show results that were last updated after the given time. "
    "This is a timestamp in ISO 8601 format: `YYYY-MM-DDTHH:MM:SSZ`."
)


def _check_segment(value: str) -> str:
    if value in DOT_SEGMENTS:
        raise ValueError("'.' and '..' cannot be used as a name")
    return value


def _check_repo_path(value: str) -> str:
    if any(part in DOT_SEGMENTS for part in value.split("/")):
        raise ValueError("path must not contain '.' or '..' segments")
    return value


# A single URL path segment: owner, repo, label name, gist id...
PathSegment = Annotated[str, Field(min_length=1), AfterValidator(_check_segment)]
# A file path inside a repository; slashes separate segments
RepoPath = Annotated[str, Field(min_length=1), AfterValidator(_check_repo_path)]


class RepoInput(BaseModel):
    owner: PathSegment = Field(..., description=OWNER_DESCRIPTION)
    repo: PathSegment = Field(..., description=REPO_DESCRIPTION)


class IssueInput(RepoInput):
    issue_number: int = Field(..., description="The number that identifies the issue.")


class CommentInput(RepoInput):
    comment_id: int = Field(..., description="The unique identifier of the comment.")


class PullInput(RepoInput):
    pull_number: int = Field(..., description="The number that identifies the pull request.")


class LabelObject(BaseModel):
    """Full label object accepted wherever GitHub takes labels by value."""

    id: int = Field(..., description="The unique identifier of the label.")
    name: str = Field(..., description="The name of the label.")
    description: Optional[str] = Field(None, description="Description of the label.")
    color: Optional[str] = Field(None, description="Color of the label.")
