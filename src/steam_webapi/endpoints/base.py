"""Base endpoint class and tool routing for the MCP tool surface.

An endpoint class groups the tools of one Steam interface. Each tool is an
async method marked with @endpoint that returns a SteamResult; the
EndpointManager owns one instance per class and renders results to text.

    class ISteamNews(BaseEndpoint):
        @endpoint(
            name="get_news_for_app",
            description="Get news for a game",
            params={"app_id": {"type": "integer", "description": "App ID"}},
        )
        async def get_news_for_app(self, app_id: int, **options) -> SteamResult:
            return await self.client.get_news_for_app(app_id, **options)
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable, Coroutine, TypeVar

from mcp.types import Tool, TextContent

from steam_webapi.client import SteamClient, SteamResult
from steam_webapi.client.operations import ResponseFormat


logger = logging.getLogger(__name__)

Handler = Callable[..., Coroutine[Any, Any, SteamResult]]
F = TypeVar("F", bound=Handler)

# Schema keys copied through from a parameter definition
_SCHEMA_KEYS = ("enum", "default", "minimum", "maximum", "items")

FORMAT_PARAMS: dict[str, dict[str, Any]] = {
    "format": {
        "type": "string",
        "description": (
            "Response format: 'json' (default) returns parsed data, "
            "'xml' and 'vdf' return Steam's raw text"
        ),
        "enum": [f.value for f in ResponseFormat],
        "default": "json",
        "required": False,
    },
    "selector": {
        "type": "string",
        "description": (
            "Dotted path into the JSON payload, e.g. 'newsitems.0.title'. "
            "Omit to return the whole payload."
        ),
        "required": False,
    },
}


@dataclass(frozen=True)
class EndpointTool:
    """A tool published by an endpoint class."""

    name: str
    description: str
    input_schema: dict[str, Any]
    handler: Handler

    def to_mcp(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


def _build_input_schema(params: dict[str, dict[str, Any]]) -> dict[str, Any]:
    """Build a JSON Schema object from parameter definitions.

    Parameters are required unless they say "required": False.
    """
    properties = {
        name: {
            "type": param.get("type", "string"),
            "description": param.get("description", ""),
            **{key: param[key] for key in _SCHEMA_KEYS if key in param},
        }
        for name, param in params.items()
    }
    required = [name for name, param in params.items() if param.get("required", True)]
    return {"type": "object", "properties": properties, "required": required}


def endpoint(
    name: str,
    description: str,
    params: dict[str, dict[str, Any]] | None = None,
    supports_format: bool = True,
) -> Callable[[F], F]:
    """
    Mark an endpoint method as an MCP tool.

    Args:
        name: Tool name, unique across all endpoint classes
        description: What the tool returns
        params: Parameter definitions (type, description, required, enum,
                default, minimum, maximum, items)
        supports_format: Also accept the 'format' and 'selector' parameters

    Returns:
        The method, unchanged apart from the attached tool metadata
    """
    params = dict(params or {})
    if supports_format:
        params.update(FORMAT_PARAMS)
    input_schema = _build_input_schema(params)

    def decorator(func: F) -> F:
        func._endpoint_tool = EndpointTool(  # type: ignore[attr-defined]
            name=name,
            description=description,
            input_schema=input_schema,
            handler=func,
        )
        return func

    return decorator


class BaseEndpoint:
    """
    Base class for Steam API endpoint modules.

    Attributes:
        client: SteamClient instance for making API calls
    """

    def __init__(self, client: SteamClient) -> None:
        self.client = client

    @classmethod
    def endpoint_tools(cls) -> list[EndpointTool]:
        """Tools defined on this class, sorted by method name."""
        return [
            attr._endpoint_tool
            for attr in (getattr(cls, name) for name in dir(cls))
            if hasattr(attr, "_endpoint_tool")
        ]

    @classmethod
    def get_tools(cls) -> list[Tool]:
        """Get MCP Tool definitions for this endpoint class."""
        return [tool.to_mcp() for tool in cls.endpoint_tools()]


def render_result(result: SteamResult) -> str:
    """
    Render a SteamResult as tool output text.

    Raw XML/VDF strings are returned as-is, other values as indented JSON,
    and failures as a single "Error (<reason>): <message>" line.
    """
    if not result.ok:
        assert result.error is not None  # For type checker
        return f"Error ({result.error.value}): {result.message}"
    if isinstance(result.value, str):
        return result.value
    return json.dumps(result.value, indent=2)


class EndpointManager:
    """Routes tool calls to one shared instance of each endpoint class."""

    def __init__(
        self,
        client: SteamClient,
        endpoint_classes: Iterable[type[BaseEndpoint]],
    ) -> None:
        """
        Instantiate every endpoint class and index its tools by name.

        Raises:
            ValueError: If two tools share a name
        """
        self.client = client
        self._routes: dict[str, tuple[EndpointTool, BaseEndpoint]] = {}

        for endpoint_class in endpoint_classes:
            instance = endpoint_class(client)
            for tool in endpoint_class.endpoint_tools():
                if tool.name in self._routes:
                    raise ValueError(f"Duplicate tool name: {tool.name}")
                self._routes[tool.name] = (tool, instance)
                logger.debug(f"Registered tool: {tool.name}")

    def get_all_tools(self) -> list[Tool]:
        return [tool.to_mcp() for tool, _ in self._routes.values()]

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> list[TextContent]:
        """
        Run a tool and render its result.

        Raises:
            ValueError: If no tool has this name
        """
        if name not in self._routes:
            raise ValueError(f"Unknown tool: {name}")
        tool, instance = self._routes[name]

        try:
            result = await tool.handler(instance, **(arguments or {}))
        except Exception as e:
            logger.exception(f"Error executing tool {name}")
            return [TextContent(type="text", text=f"Error: {e}")]
        return [TextContent(type="text", text=render_result(result))]
