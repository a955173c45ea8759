"""Name-keyed tool registry with validated dispatch."""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from buddy.errors import ToolExecutionError, UnknownTool
from buddy.llm.base import ToolDefinition
from buddy.tools.base import Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Holds the tools available to the agent, in registration order."""

    def __init__(self, tools: Optional[List[Tool]] = None):
        self._tools: Dict[str, Tool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: Tool) -> None:
        """Add a tool.

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        name = tool.name()
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        self._tools[name] = tool

    def get(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownTool(name) from None

    def names(self) -> List[str]:
        return list(self._tools)

    def definitions(self) -> List[ToolDefinition]:
        return [tool.to_definition() for tool in self._tools.values()]

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    async def dispatch(self, name: str, tool_input: Optional[Dict[str, Any]] = None) -> str:
        """Validate ``tool_input`` and run the named tool.

        Args:
            name: Tool name as requested by the model
            tool_input: Raw arguments from the model

        Returns:
            Tool result text

        Raises:
            UnknownTool: If no tool has this name
            ToolExecutionError: If the input is invalid or the tool raises
        """
        tool = self.get(name)

        try:
            params = tool.input_model.model_validate(tool_input or {})
        except ValidationError as e:
            raise ToolExecutionError(name, f"invalid input: {e.errors(include_url=False)}") from e

        logger.info("Executing tool %s with %s", name, params.model_dump())
        try:
            return await tool.execute(params)
        except Exception as e:
            logger.exception("Tool %s failed", name)
            raise ToolExecutionError(name, str(e) or type(e).__name__) from e
