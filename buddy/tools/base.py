"""Base interface for tools that can be called by the agent."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Type

from pydantic import BaseModel, ConfigDict

from buddy.llm.base import ToolDefinition


class ToolInput(BaseModel):
    """Base input model: unknown fields are rejected, numbers pass as strings."""

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)


class NoInput(ToolInput):
    """Input model for tools that take no parameters."""


class Tool(ABC):
    """Abstract base class for all tools.

    Each tool declares a pydantic ``input_model``; its JSON schema is what the
    model sees and what tool input is validated against before ``execute``.
    """

    input_model: ClassVar[Type[ToolInput]] = NoInput

    @abstractmethod
    def name(self) -> str:
        """Return the tool name for function calling.

        The name should be snake_case and descriptive, e.g., "search_knowledge_base".
        """
        pass

    @abstractmethod
    def description(self) -> str:
        """Return a description of what the tool does.

        This description is used by the LLM to decide when to call the tool.
        """
        pass

    def parameters_schema(self) -> Dict[str, Any]:
        """Return the JSON schema for tool parameters."""
        schema = self.input_model.model_json_schema()
        schema.pop("title", None)
        schema.pop("description", None)
        for prop in schema.get("properties", {}).values():
            prop.pop("title", None)
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        return schema

    @abstractmethod
    async def execute(self, params: ToolInput) -> str:
        """Execute the tool with validated parameters.

        Args:
            params: Instance of ``input_model``

        Returns:
            String result for the model
        """
        pass

    def to_definition(self) -> ToolDefinition:
        """Convert tool to the provider-neutral definition sent to the LLM."""
        return ToolDefinition(
            name=self.name(),
            description=self.description(),
            input_schema=self.parameters_schema(),
        )
