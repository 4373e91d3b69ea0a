"""Base tool class."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, TypedDict

from ..data_structures import TextContent
from ..schema import (
    InputSchemaDict,
    convert_input,
    get_call_input_type,
    schema_from_dataclass,
)

_EMPTY_SCHEMA: InputSchemaDict = {
    "type": "object",
    "properties": {},
    "required": [],
    "additionalProperties": False,
}


@dataclass
class ToolResult:
    """Result from tool execution.

    Attributes:
        content: The tool output
        is_error: True when the tool could not do its job
    """

    content: TextContent
    is_error: bool = False


class ToolDict(TypedDict):
    name: str
    description: str
    input_schema: InputSchemaDict


@dataclass
class Tool:
    """Base class for all tools with automatic schema inference.

    The input_schema is automatically inferred from the __call__ method's
    'input' parameter type annotation. The input type must be a dataclass.

    Example:
        @dataclass
        class EchoInput:
            text: Annotated[str, Desc("Text to echo back")]

        @dataclass
        class EchoTool(Tool):
            name: str = "Echo"
            description: str = "Echo the input"

            async def __call__(self, input: EchoInput) -> TextContent:
                return TextContent(text=input.text)

    The framework will:
    1. Infer input_schema from EchoInput at class definition time
    2. Convert dict -> EchoInput when execute() is called
    """

    name: str
    description: str

    # Class-level attributes set by __init_subclass__
    _input_type: ClassVar[type | None] = None
    _inferred_schema: ClassVar[InputSchemaDict | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Compute input schema from __call__ type annotation at class definition."""
        super().__init_subclass__(**kwargs)

        if "__call__" not in cls.__dict__:
            return

        try:
            input_type = get_call_input_type(cls)
            cls._input_type = input_type
            cls._inferred_schema = schema_from_dataclass(input_type)
        except TypeError:
            # __call__ doesn't have proper type annotations
            pass

    @property
    def input_schema(self) -> InputSchemaDict:
        """Get the input schema (inferred from __call__ type annotation)."""
        if self._inferred_schema is not None:
            return self._inferred_schema
        return dict(_EMPTY_SCHEMA)

    def to_dict(self) -> ToolDict:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }

    def input_error(self, error: Exception) -> ToolResult:
        """Result returned when the raw input cannot be converted."""
        return ToolResult(
            content=TextContent(text=f"{self.name}: invalid input ({error})"),
            is_error=True,
        )

    async def execute(self, input: dict[str, Any] | None = None) -> ToolResult:
        """Convert the raw host input and call the tool.

        Args:
            input: Raw input dict from the host (converted to the typed dataclass)

        Returns:
            ToolResult wrapping the tool's content
        """
        try:
            typed_input = convert_input(input, self._input_type)
        except (TypeError, ValueError) as e:
            return self.input_error(e)
        result = await self.__call__(typed_input)

        if isinstance(result, ToolResult):
            return result
        return ToolResult(content=result)

    async def __call__(self, input: Any) -> TextContent | ToolResult:
        """Execute the tool with given input. Override in subclasses."""
        raise NotImplementedError(f"{self.name} does not implement __call__()")
