"""Tool definitions exposing the exchange to an agent host."""

from .ask_user_question import AskUserQuestionInput, AskUserQuestionTool
from .base import Tool, ToolResult


def get_default_tools() -> list[Tool]:
    """Get the default set of tools.

    Returns a new list of tool instances each time it's called.
    """
    return [AskUserQuestionTool()]


__all__ = [
    "Tool",
    "ToolResult",
    "AskUserQuestionTool",
    "AskUserQuestionInput",
    "get_default_tools",
]
