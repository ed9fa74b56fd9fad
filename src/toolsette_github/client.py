"""
GitHub REST plumbing shared by every tool.

One request per call: build headers, substitute path parameters, send with
``requests`` and fold the response into a result dict. Nothing here raises;
HTTP and transport failures come back as ``{"success": False, ...}``.

Environment Variables:
    GITHUB_TOKEN: Personal access token used by the consolidated ``github`` tool
        and the example agent.
    GITHUB_TIMEOUT: Request timeout in seconds (default 30).
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional
from urllib.parse import quote

import requests

if TYPE_CHECKING:
    from toolsette_github.registry import BearerAuth

logger = logging.getLogger(__name__)

GITHUB_API_BASE = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
USER_AGENT = "Toolsette-GitHub/0.1"
DEFAULT_TIMEOUT = 30.0

# Media types used across endpoints
ACCEPT_GITHUB_JSON = "application/vnd.github+json"
ACCEPT_V3_JSON = "application/vnd.github.v3+json"
ACCEPT_RAW_JSON = "application/vnd.github.raw+json"
ACCEPT_FULL_JSON = "application/vnd.github.full+json"
ACCEPT_OBJECT_JSON = "application/vnd.github.object+json"
ACCEPT_COMMIT_COMMENT_RAW_JSON = "application/vnd.github-commitcomment.raw+json"


def get_token() -> Optional[str]:
    """Get GitHub token from environment."""
    return os.environ.get("GITHUB_TOKEN") or None


def get_timeout() -> float:
    raw = os.environ.get("GITHUB_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid GITHUB_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT


def ok(**data: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {"success": True}
    out.update(data)
    return out


def err(message: str, *, error_type: Optional[str] = None, **data: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {"success": False, "error": message}
    if error_type:
        out["error_type"] = error_type
    out.update(data)
    return out


def get_headers(auth: Optional["BearerAuth"] = None, accept: str = ACCEPT_GITHUB_JSON) -> Dict[str, str]:
    """Get headers for GitHub API requests.

    The Authorization header is only present when a credential with a
    non-empty key is supplied.
    """
    headers = {
        "Accept": accept,
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
        "User-Agent": USER_AGENT,
    }
    if auth is not None and auth.api_key:
        headers["Authorization"] = f"{auth.type} {auth.api_key}"
    return headers


def expand_path(template: str, *, keep_slashes: Iterable[str] = (), **params: Any) -> str:
    """Substitute URL-encoded path parameters into an endpoint template.

    Names listed in ``keep_slashes`` are encoded per segment so multi-segment
    values such as file paths survive.

        >>> expand_path("/repos/{owner}/{repo}/labels/{name}", owner="o", repo="r", name="good first issue")
        '/repos/o/r/labels/good%20first%20issue'

    Raises:
        ValueError: If a value is empty or contains a ``.``/``..`` segment.
            URL normalisation would drop such segments and send the request
            to a different endpoint, and percent-encoding them does not help
            since ``requests`` decodes ``%2E`` again.
    """
    keep = set(keep_slashes)
    encoded = {}
    for key, value in params.items():
        text = str(value)
        segments = text.split("/") if key in keep else [text]
        if not text or any(segment in (".", "..") for segment in segments):
            raise ValueError(f"Invalid path parameter {key}={text!r}")
        encoded[key] = quote(text, safe="/" if key in keep else "")
    return template.format(**encoded)


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _clean_query(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not params:
        return None
    cleaned = {key: _query_value(value) for key, value in params.items() if value is not None}
    return cleaned or None


def _parse_body(response: "requests.Response") -> Any:
    if response.status_code == 204 or not response.content:
        return None
    content_type = response.headers.get("Content-Type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


def _error_from_response(response: "requests.Response") -> Dict[str, Any]:
    error_data: Dict[str, Any] = {}
    if response.text:
        try:
            parsed = response.json()
            error_data = parsed if isinstance(parsed, dict) else {"message": str(parsed)}
        except ValueError:
            error_data = {"message": response.text[:500]}

    result = err(
        error_data.get("message") or f"HTTP {response.status_code}",
        error_type="HTTPError",
        status_code=response.status_code,
        documentation_url=error_data.get("documentation_url"),
    )
    if error_data.get("errors"):
        result["errors"] = error_data["errors"]
    if response.status_code == 401:
        result["hint"] = "Authorization failed. Check that the GitHub token is valid and has not expired."
    return result


def make_request(
    method: str,
    endpoint: str,
    *,
    auth: Optional["BearerAuth"] = None,
    accept: str = ACCEPT_GITHUB_JSON,
    params: Optional[Dict[str, Any]] = None,
    json: Any = None,
) -> Dict[str, Any]:
    """Make a single request to the GitHub API.

    Args:
        method: HTTP verb.
        endpoint: Path below the API root, already expanded.
        auth: Optional bearer credential.
        accept: Media type for the Accept header.
        params: Query parameters; ``None`` values are dropped.
        json: JSON body. ``None`` sends no body.

    Returns:
        dict: ``{"success": True, "data": ...}`` for 2xx responses, otherwise
        ``{"success": False, "error": ...}`` with status or transport details.
    """
    url = f"{GITHUB_API_BASE}{endpoint}"
    headers = get_headers(auth, accept)
    logger.debug("GitHub request: %s %s", method, url)

    try:
        response = requests.request(
            method,
            url,
            headers=headers,
            params=_clean_query(params),
            json=json,
            timeout=get_timeout(),
        )
    except requests.RequestException as e:
        logger.warning("GitHub request failed: %s %s: %s", method, url, e)
        return err(str(e), error_type=type(e).__name__)

    if not 200 <= response.status_code < 300:
        logger.warning("GitHub responded %s for %s %s", response.status_code, method, url)
        return _error_from_response(response)

    return ok(data=_parse_body(response))
