"""
GitHub Gist tools.

Usage Examples:
    from toolsette_github import BearerAuth, create_gist, list_gists

    auth = BearerAuth(api_key="ghp_...")

    # Create a secret gist
    create_gist({"files": {"hello.py": {"content": "print('hi')"}}}, auth=auth)

    # Public gists, anonymously
    list_gists(per_page=10)

Available Tools:
    - create_gist: Create a gist with one or more files
    - delete_gist: Delete a gist
    - get_gist: Get a gist
    - list_gists: List the authenticated user's gists, or public gists when anonymous
    - update_gist: Update a gist's description and files
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from toolsette_github.client import (
    ACCEPT_RAW_JSON,
    ACCEPT_V3_JSON,
    expand_path,
    make_request,
)
from toolsette_github.registry import BearerAuth, Tool
from toolsette_github.schemas import SINCE_DESCRIPTION, IsoTimestamp, Page, PathSegment, PerPage

GIST_ID_DESCRIPTION = "The unique identifier of the gist."


class GistFile(BaseModel):
    content: str = Field(..., description="Content of the file")


class GistFileUpdate(BaseModel):
    content: Optional[str] = Field(None, description="The new content of the file.")
    filename: Optional[str] = Field(None, description="The new filename for the file.")


class CreateGistInput(BaseModel):
    description: Optional[str] = Field(
        None, description="Description of the gist (e.g. 'Example Ruby script')"
    )
    files: Dict[str, GistFile] = Field(
        ...,
        description=(
            "Names and content for the files that make up the gist. "
            "Example: { 'hello.rb': { content: 'puts \"Hello, World!\"' } }"
        ),
    )
    public: bool = Field(
        False,
        description="Flag indicating whether the gist is public. Can be boolean or a string ('true' or 'false').",
    )


class GistIdInput(BaseModel):
    gist_id: PathSegment = Field(..., description=GIST_ID_DESCRIPTION)


class ListGistsInput(BaseModel):
    since: Optional[IsoTimestamp] = Field(None, description=SINCE_DESCRIPTION)
    per_page: PerPage = 30
    page: Page = 1


class UpdateGistInput(GistIdInput):
    description: Optional[str] = Field(
        None, description="The description of the gist. Example: 'Example Ruby script'"
    )
    files: Optional[Dict[str, Optional[GistFileUpdate]]] = Field(
        None,
        description=(
            "The gist files to be updated, renamed, or deleted. Each key must match the current "
            "filename (including extension) of the targeted gist file. To delete a file, set the file to null."
        ),
    )


def _create_gist(params: CreateGistInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    payload = params.model_dump(exclude_none=True)
    return make_request("POST", "/gists", auth=auth, accept=ACCEPT_V3_JSON, json=payload)


def _delete_gist(params: GistIdInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    result = make_request(
        "DELETE",
        expand_path("/gists/{gist_id}", gist_id=params.gist_id),
        auth=auth,
        accept=ACCEPT_V3_JSON,
    )
    if result["success"]:
        result["message"] = "Gist deleted successfully"
    return result


def _get_gist(params: GistIdInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request(
        "GET",
        expand_path("/gists/{gist_id}", gist_id=params.gist_id),
        auth=auth,
        accept=ACCEPT_RAW_JSON,
    )


def _list_gists(params: ListGistsInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    query = {"per_page": params.per_page, "page": params.page, "since": params.since}
    return make_request("GET", "/gists", auth=auth, accept=ACCEPT_V3_JSON, params=query)


def _update_gist(params: UpdateGistInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    # A null file entry deletes that file, so only unset fields are dropped
    payload = params.model_dump(exclude={"gist_id"}, exclude_unset=True)
    return make_request(
        "PATCH",
        expand_path("/gists/{gist_id}", gist_id=params.gist_id),
        auth=auth,
        accept=ACCEPT_RAW_JSON,
        json=payload,
    )


create_gist = Tool(
    name="create_gist",
    description=(
        "Allows you to add a new gist with one or more files.\n\n> [!NOTE]\n> Don't name your files "
        '"gistfile" with a numerical suffix. This is the format of the automatic naming scheme that '
        "Gist uses internally."
    ),
    parameters=CreateGistInput,
    function=_create_gist,
)

delete_gist = Tool(
    name="delete_gist",
    description="Delete a gist",
    parameters=GistIdInput,
    function=_delete_gist,
)

get_gist = Tool(
    name="get_gist",
    description=(
        "Gets a specified gist. This endpoint supports the following custom media types: "
        "application/vnd.github.raw+json returns the raw markdown (default), and "
        "application/vnd.github.base64+json returns the base64-encoded contents."
    ),
    parameters=GistIdInput,
    function=_get_gist,
    requires_auth=False,
)

list_gists = Tool(
    name="list_gists",
    description=(
        "Lists the authenticated user's gists or if called anonymously, "
        "this endpoint returns all public gists"
    ),
    parameters=ListGistsInput,
    function=_list_gists,
    requires_auth=False,
)

update_gist = Tool(
    name="update_gist",
    description=(
        "Allows you to update a gist's description and to update, delete, or rename gist files. "
        "Files from the previous version of the gist that aren't explicitly changed during an edit are unchanged."
    ),
    parameters=UpdateGistInput,
    function=_update_gist,
)

GIST_TOOLS = [create_gist, delete_gist, get_gist, list_gists, update_gist]
