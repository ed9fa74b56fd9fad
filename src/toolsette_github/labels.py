"""
GitHub Label tools: repository labels and the labels attached to an issue.

Usage Examples:
    from toolsette_github import BearerAuth, add_labels_to_issue, create_label

    auth = BearerAuth(api_key="ghp_...")
    create_label(owner="octocat", repo="Hello-World", name="bug", color="f29513", auth=auth)
    add_labels_to_issue(owner="octocat", repo="Hello-World", issue_number=42, body={"labels": ["bug"]}, auth=auth)
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from toolsette_github.client import ACCEPT_GITHUB_JSON, ACCEPT_V3_JSON, expand_path, make_request
from toolsette_github.registry import BearerAuth, Tool
from toolsette_github.schemas import IssueInput, Page, PathSegment, PerPage, RepoInput

LABEL_PATH = "/repos/{owner}/{repo}/labels/{name}"
ISSUE_LABELS_PATH = "/repos/{owner}/{repo}/issues/{issue_number}/labels"

EMOJI_NOTE = (
    "Emoji can be added to label names, using either native emoji or colon-style markup. For example, "
    "typing `:strawberry:` will render the emoji. For a full list of available emoji and codes, see "
    '"[Emoji cheat sheet](https://github.com/ikatyang/emoji-cheat-sheet)."'
)


class CreateLabelInput(RepoInput):
    name: str = Field(..., description=f"The name of the label. {EMOJI_NOTE}")
    color: str = Field(
        ...,
        pattern=r"^[0-9A-Fa-f]{6}$",
        description="The hexadecimal color code for the label, without the leading `#`.",
    )
    description: Optional[str] = Field(
        None, max_length=100, description="A short description of the label. Must be 100 characters or fewer."
    )


class LabelNameInput(RepoInput):
    name: PathSegment = Field(..., description="The name of the label.")


class UpdateLabelInput(RepoInput):
    name: PathSegment = Field(..., description="The current name of the label to update.")
    new_name: Optional[str] = Field(None, description=f"The new name of the label. {EMOJI_NOTE}")
    color: Optional[str] = Field(
        None, description="The hexadecimal color code for the label, without the leading `#`."
    )
    description: Optional[str] = Field(
        None,
        description=(
            "A short description of the label. Must be 100 characters or fewer. "
            "An empty string is ignored and keeps the current description."
        ),
    )


class LabelRef(BaseModel):
    name: str = Field(..., description="The name of the label.")


class LabelNameList(BaseModel):
    labels: List[str] = Field(
        ...,
        min_length=1,
        description=(
            "The names of the labels to add to the issue's existing labels. GitHub recommends passing "
            "an object with the labels key."
        ),
    )


class LabelRefList(BaseModel):
    labels: List[LabelRef] = Field(..., min_length=1)


# GitHub accepts any of these shapes for the request body
AddLabelsBody = Union[
    LabelNameList,
    LabelRefList,
    Annotated[List[str], Field(min_length=1)],
    Annotated[List[LabelRef], Field(min_length=1)],
    str,
]


class AddLabelsInput(IssueInput):
    body: Optional[AddLabelsBody] = Field(
        None,
        description=(
            "Labels to add: {labels: [names]}, {labels: [{name}]}, a list of names, "
            "a list of {name} objects, or a single label name."
        ),
    )


class ListLabelsForIssueInput(IssueInput):
    per_page: PerPage = 30
    page: Page = 1


class RemoveLabelInput(IssueInput):
    name: PathSegment = Field(..., description="The name of the label to remove")


def _label_path(params: Union[LabelNameInput, UpdateLabelInput]) -> str:
    return expand_path(LABEL_PATH, owner=params.owner, repo=params.repo, name=params.name)


def _issue_labels_path(params: IssueInput) -> str:
    return expand_path(
        ISSUE_LABELS_PATH, owner=params.owner, repo=params.repo, issue_number=params.issue_number
    )


def _create_label(params: CreateLabelInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    payload = params.model_dump(include={"name", "color", "description"}, exclude_none=True)
    return make_request(
        "POST",
        expand_path("/repos/{owner}/{repo}/labels", owner=params.owner, repo=params.repo),
        auth=auth,
        accept=ACCEPT_GITHUB_JSON,
        json=payload,
    )


def _get_label(params: LabelNameInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request("GET", _label_path(params), auth=auth, accept=ACCEPT_V3_JSON)


def _update_label(params: UpdateLabelInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    payload = {
        key: value
        for key, value in params.model_dump(include={"new_name", "color", "description"}).items()
        if value
    }
    return make_request(
        "PATCH", _label_path(params), auth=auth, accept=ACCEPT_V3_JSON, json=payload or None
    )


def _delete_label(params: LabelNameInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    result = make_request("DELETE", _label_path(params), auth=auth, accept=ACCEPT_GITHUB_JSON)
    if result["success"]:
        result["message"] = "Label deleted successfully."
    return result


def _add_labels_to_issue(params: AddLabelsInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    payload = params.model_dump(include={"body"})["body"] if params.body is not None else None
    return make_request(
        "POST", _issue_labels_path(params), auth=auth, accept=ACCEPT_V3_JSON, json=payload
    )


def _list_labels_for_issue(params: ListLabelsForIssueInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    return make_request(
        "GET",
        _issue_labels_path(params),
        auth=auth,
        accept=ACCEPT_GITHUB_JSON,
        params={"per_page": params.per_page, "page": params.page},
    )


def _remove_label(params: RemoveLabelInput, auth: Optional[BearerAuth]) -> Dict[str, Any]:
    endpoint = expand_path(
        ISSUE_LABELS_PATH + "/{name}",
        owner=params.owner,
        repo=params.repo,
        issue_number=params.issue_number,
        name=params.name,
    )
    return make_request("DELETE", endpoint, auth=auth, accept=ACCEPT_V3_JSON)


create_label = Tool(
    name="create_label",
    description="Creates a label for the specified repository with the given name and color.",
    parameters=CreateLabelInput,
    function=_create_label,
)

get_label = Tool(
    name="get_label",
    description="Gets a label using the given name.",
    parameters=LabelNameInput,
    function=_get_label,
    requires_auth=False,
)

update_label = Tool(
    name="update_label",
    description=(
        "Updates a label using the given label name. Only non-empty fields are sent, so an empty string "
        "leaves that field unchanged; a label's description cannot be cleared with this tool."
    ),
    parameters=UpdateLabelInput,
    function=_update_label,
)

delete_label = Tool(
    name="delete_label",
    description="Deletes a label using the given label name.",
    parameters=LabelNameInput,
    function=_delete_label,
)

add_labels_to_issue = Tool(
    name="add_labels_to_issue",
    description=(
        "Adds labels to an issue. If you provide an empty array of labels, all labels are removed from the issue."
    ),
    parameters=AddLabelsInput,
    function=_add_labels_to_issue,
)

list_labels_for_issue = Tool(
    name="list_labels_for_issue",
    description="Lists all labels for an issue.",
    parameters=ListLabelsForIssueInput,
    function=_list_labels_for_issue,
    requires_auth=False,
)

remove_label = Tool(
    name="remove_label",
    description=(
        "Removes the specified label from the issue, and returns the remaining labels on the issue. "
        "This endpoint returns a 404 Not Found status if the label does not exist."
    ),
    parameters=RemoveLabelInput,
    function=_remove_label,
)

LABEL_TOOLS = [
    create_label,
    get_label,
    update_label,
    delete_label,
    add_labels_to_issue,
    list_labels_for_issue,
    remove_label,
]
