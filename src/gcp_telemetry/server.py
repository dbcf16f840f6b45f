# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""MCP server exposing the telemetry tools over stdio."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .constants import SERVER_NAME
from .core.error import InvalidArgumentError, TelemetryError
from .core.logging import get_logger
from .definitions import TOOL_DEFINITIONS, TOOLS_BY_NAME
from .tools import TelemetryTools

logger = get_logger(__name__)


def _text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(content=[types.TextContent(type='text', text=text)], isError=is_error)


class TelemetryMcpServer:
    """Serves `TelemetryTools` to MCP clients.

    Every tool call runs in a worker thread since the provider SDKs block.
    Failed calls are reported as error results rather than protocol errors:
    argument problems carry their validation message, provider failures
    read 'Failed to <action>: <error>'.
    """

    def __init__(self, tools: TelemetryTools, name: str = SERVER_NAME) -> None:
        """Initialize the server and register its request handlers.

        Args:
            tools: The tools to serve.
            name: Server name reported to clients.
        """
        self.tools = tools
        self.server = Server(name, version=__version__)

        @self.server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return await self.list_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
            return await self.call_tool(name, arguments)

    async def list_tools(self) -> list[types.Tool]:
        """Describe every tool."""
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)
            for tool in TOOL_DEFINITIONS
        ]

    async def call_tool(self, name: str, arguments: Mapping[str, Any] | None) -> types.CallToolResult:
        """Run one tool.

        Args:
            name: Tool name.
            arguments: Tool arguments.

        Returns:
            The tool result; `isError` is set when the call failed.

        Raises:
            TelemetryError: NOT_FOUND when no tool has this name.
        """
        definition = TOOLS_BY_NAME.get(name)
        if definition is None:
            raise TelemetryError(status='NOT_FOUND', message=f"Tried to call tool '{name}' but it could not be found.")

        try:
            text = await asyncio.to_thread(self.tools.call, name, arguments)
        except InvalidArgumentError as e:
            logger.info('Rejected tool arguments', tool=name, error=e.original_message)
            return _text_result(e.original_message, is_error=True)
        except Exception as e:
            logger.warning('Tool call failed', tool=name, error=str(e))
            return _text_result(f'Failed to {definition.action}: {e}', is_error=True)

        return _text_result(text)

    async def start(self, transport: Any = None) -> None:
        """Serve until the client disconnects.

        Args:
            transport: Optional MCP transport; stdio when not given.
        """
        if not transport:
            transport = stdio_server()

        logger.info('Starting MCP server', tools=len(TOOL_DEFINITIONS))
        async with transport as (read, write):
            await self.server.run(read, write, self.server.create_initialization_options())
        logger.debug('MCP server stopped')
