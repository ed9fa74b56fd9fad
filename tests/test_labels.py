"""Tests for the label tools."""

import pytest

from conftest import fake_response
from toolsette_github import (
    add_labels_to_issue,
    create_label,
    delete_label,
    get_label,
    list_labels_for_issue,
    remove_label,
    update_label,
)
from toolsette_github.client import ACCEPT_GITHUB_JSON, ACCEPT_V3_JSON

BASE = "https://api.github.com/repos/octocat/Hello-World"


def test_create_label(mock_request, auth):
    mock_request.return_value = fake_response(201, {"id": 208045946, "name": "bug", "color": "f29513"})

    result = create_label(
        owner="octocat", repo="Hello-World", name="bug", color="f29513", description="Something isn't working",
        auth=auth,
    )

    assert result["success"] is True
    assert result["data"]["name"] == "bug"
    assert mock_request.call_args.args == ("POST", f"{BASE}/labels")
    assert mock_request.call_args.kwargs["json"] == {
        "name": "bug",
        "color": "f29513",
        "description": "Something isn't working",
    }
    assert mock_request.call_args.kwargs["headers"]["Accept"] == ACCEPT_GITHUB_JSON


@pytest.mark.parametrize("color", ["#f29513", "f2951", "zzzzzz"])
def test_create_label_rejects_bad_color(mock_request, auth, color):
    result = create_label(owner="o", repo="r", name="bug", color=color, auth=auth)

    assert result["success"] is False
    assert "color" in result["error"]
    mock_request.assert_not_called()


def test_create_label_description_limit(mock_request, auth):
    result = create_label(owner="o", repo="r", name="bug", color="f29513", description="x" * 101, auth=auth)

    assert result["success"] is False
    mock_request.assert_not_called()


def test_get_label_encodes_name(mock_request):
    get_label(owner="octocat", repo="Hello-World", name="good first issue")

    assert mock_request.call_args.args == ("GET", f"{BASE}/labels/good%20first%20issue")


def test_update_label_skips_empty_fields(mock_request, auth):
    update_label(owner="octocat", repo="Hello-World", name="bug", new_name="bug :bug:", description="", auth=auth)

    assert mock_request.call_args.args == ("PATCH", f"{BASE}/labels/bug")
    assert mock_request.call_args.kwargs["json"] == {"new_name": "bug :bug:"}
    assert mock_request.call_args.kwargs["headers"]["Accept"] == ACCEPT_V3_JSON


def test_update_label_documents_empty_fields():
    assert "empty string" in update_label.description
    assert "cannot be cleared" in update_label.description
    assert "empty string" in update_label.parameters.model_json_schema()["properties"]["description"]["description"]


def test_update_label_without_changes_sends_no_body(mock_request, auth):
    update_label(owner="o", repo="r", name="bug", auth=auth)

    assert mock_request.call_args.kwargs["json"] is None


def test_delete_label(mock_request, auth):
    mock_request.return_value = fake_response(204)

    result = delete_label(owner="octocat", repo="Hello-World", name="bug", auth=auth)

    assert result["message"] == "Label deleted successfully."
    assert mock_request.call_args.args == ("DELETE", f"{BASE}/labels/bug")


@pytest.mark.parametrize("name", [".", "..", ""])
def test_delete_label_rejects_dot_names(sent_request, auth, name):
    """A dot name would otherwise resolve to the labels collection or the repository."""
    result = delete_label(owner="o", repo="r", name=name, auth=auth)

    assert result["success"] is False
    assert result["error_type"] == "ValidationError"
    sent_request.assert_not_called()


def test_delete_label_prepared_url(sent_request, auth):
    sent_request.return_value = fake_response(204)

    result = delete_label(owner="o", repo="r", name="good first issue", auth=auth)

    assert result["success"] is True
    prepared = sent_request.call_args.args[0]
    assert prepared.method == "DELETE"
    assert prepared.url == "https://api.github.com/repos/o/r/labels/good%20first%20issue"


@pytest.mark.parametrize(
    "body",
    [
        {"labels": ["bug", "enhancement"]},
        {"labels": [{"name": "bug"}]},
        ["bug", "enhancement"],
        [{"name": "bug"}],
        "bug",
    ],
)
def test_add_labels_accepts_every_shape(mock_request, auth, body):
    result = add_labels_to_issue(owner="octocat", repo="Hello-World", issue_number=42, body=body, auth=auth)

    assert result["success"] is True
    assert mock_request.call_args.args == ("POST", f"{BASE}/issues/42/labels")
    assert mock_request.call_args.kwargs["json"] == body


def test_add_labels_without_body(mock_request, auth):
    add_labels_to_issue(owner="o", repo="r", issue_number=1, auth=auth)

    assert mock_request.call_args.kwargs["json"] is None


def test_add_labels_rejects_empty_list(mock_request, auth):
    result = add_labels_to_issue(owner="o", repo="r", issue_number=1, body={"labels": []}, auth=auth)

    assert result["success"] is False
    mock_request.assert_not_called()


def test_list_labels_for_issue(mock_request):
    mock_request.return_value = fake_response(200, [{"name": "bug"}])

    result = list_labels_for_issue(owner="octocat", repo="Hello-World", issue_number=42, per_page=5)

    assert result["data"] == [{"name": "bug"}]
    assert mock_request.call_args.kwargs["params"] == {"per_page": 5, "page": 1}
    assert "Authorization" not in mock_request.call_args.kwargs["headers"]


def test_remove_label(mock_request, auth):
    mock_request.return_value = fake_response(200, [{"name": "enhancement"}])

    result = remove_label(owner="octocat", repo="Hello-World", issue_number=42, name="bug", auth=auth)

    assert result["data"] == [{"name": "enhancement"}]
    assert mock_request.call_args.args == ("DELETE", f"{BASE}/issues/42/labels/bug")


def test_remove_label_missing(mock_request, auth):
    mock_request.return_value = fake_response(404, {"message": "Label does not exist"})

    result = remove_label(owner="o", repo="r", issue_number=1, name="nope", auth=auth)

    assert result["success"] is False
    assert result["status_code"] == 404
    assert result["error"] == "Label does not exist"


@pytest.mark.parametrize("name", [".", ".."])
def test_remove_label_rejects_dot_names(sent_request, auth, name):
    result = remove_label(owner="o", repo="r", issue_number=1, name=name, auth=auth)

    assert result["success"] is False
    assert result["error_type"] == "ValidationError"
    sent_request.assert_not_called()
