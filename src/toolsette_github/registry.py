"""
Tool descriptors and the adapters that hand them to an agent framework.

A ``Tool`` pairs a pydantic input model with the function that performs the
request. Calling a descriptor validates the arguments, checks the credential
and runs the function; it always returns a result dict.

Usage Examples:
    from strands import Agent
    from toolsette_github import ALL_TOOLS, BearerAuth, format_tools, with_auth

    tools = format_tools(with_auth(ALL_TOOLS, BearerAuth(api_key="ghp_...")), "strands")
    agent = Agent(tools=list(tools.values()))

    # Or call a descriptor directly
    from toolsette_github import get_repository
    get_repository(owner="octocat", repo="Hello-World")
"""

from __future__ import annotations

import asyncio
import dataclasses
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Sequence, Type

from pydantic import BaseModel, ValidationError
from strands.tools.tools import PythonAgentTool

from toolsette_github.client import err

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("strands",)


@dataclass(frozen=True)
class BearerAuth:
    """Bearer credential sent as ``Authorization: Bearer <api_key>``."""

    api_key: str
    type: Literal["Bearer"] = "Bearer"


ToolFunction = Callable[[Any, Optional[BearerAuth]], Dict[str, Any]]


def _describe_validation_error(e: ValidationError) -> str:
    parts = []
    for error in e.errors():
        location = ".".join(str(part) for part in error["loc"]) or "input"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


@dataclass(frozen=True)
class Tool:
    """Static descriptor for one GitHub endpoint."""

    name: str
    description: str
    parameters: Type[BaseModel]
    function: ToolFunction
    requires_auth: bool = True
    auth: Optional[BearerAuth] = None

    def input_schema(self) -> Dict[str, Any]:
        return self.parameters.model_json_schema()

    def __call__(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        auth: Optional[BearerAuth] = None,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """Validate ``params`` (merged with keyword arguments) and run the request.

        ``auth`` overrides the credential bound with ``with_auth``.
        """
        if params is not None and not isinstance(params, Mapping):
            return err(
                f"Invalid input for {self.name}: expected named arguments, got {type(params).__name__}",
                error_type="ValidationError",
                action=self.name,
            )
        arguments: Dict[str, Any] = dict(params or {})
        arguments.update(kwargs)

        try:
            validated = self.parameters.model_validate(arguments)
        except ValidationError as e:
            return err(
                f"Invalid input for {self.name}: {_describe_validation_error(e)}",
                error_type="ValidationError",
                action=self.name,
                details=e.errors(include_url=False, include_context=False, include_input=False),
            )

        credential = auth if auth is not None else self.auth
        if credential is not None and not credential.api_key:
            credential = None
        if self.requires_auth and credential is None:
            return err(
                f"{self.name} requires a GitHub token",
                error_type="AuthenticationRequired",
                action=self.name,
                hint="Bind a credential with with_auth() or set GITHUB_TOKEN",
            )

        try:
            result = self.function(validated, credential)
        except Exception as e:
            logger.exception("Tool %s failed", self.name)
            return err(str(e), error_type=type(e).__name__, action=self.name)

        result.setdefault("action", self.name)
        return result

    async def acall(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        auth: Optional[BearerAuth] = None,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """Run the call in a worker thread so several can be awaited together."""
        return await asyncio.to_thread(self.__call__, params, auth=auth, **kwargs)


def with_auth(tools: Sequence[Tool], auth: BearerAuth) -> List[Tool]:
    """Return copies of ``tools`` bound to ``auth``."""
    return [dataclasses.replace(t, auth=auth) for t in tools]


def _strands_tool(descriptor: Tool) -> PythonAgentTool:
    tool_spec = {
        "name": descriptor.name,
        "description": descriptor.description,
        "inputSchema": {"json": descriptor.input_schema()},
    }
    return PythonAgentTool(descriptor.name, tool_spec, _strands_handler(descriptor))


def _strands_handler(descriptor: Tool) -> Callable[..., Dict[str, Any]]:
    def handler(tool_use: Dict[str, Any], **_: Any) -> Dict[str, Any]:
        result = descriptor(tool_use.get("input") or {})
        return {
            "toolUseId": tool_use.get("toolUseId"),
            "status": "success" if result["success"] else "error",
            "content": [{"text": json.dumps(result, default=str)}],
        }

    return handler


def format_tools(tools: Sequence[Tool], provider: str = "strands") -> Dict[str, Any]:
    """Map tool name to an invocable tool for ``provider``.

    Args:
        tools: Descriptors, usually after ``with_auth``.
        provider: Calling convention. Only ``"strands"`` is supported.

    Raises:
        ValueError: If the provider is not supported.
    """
    if provider not in SUPPORTED_PROVIDERS:
        raise ValueError(f"Provider not supported: {provider}")
    return {t.name: _strands_tool(t) for t in tools}
