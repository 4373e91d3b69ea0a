"""AskUserQuestion tool for interactive user decisions."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Annotated

from ..ask import ask_user_questions
from ..config import AskUserConfig
from ..data_structures import (
    MAX_QUESTIONS,
    MIN_QUESTIONS,
    AskResult,
    Question,
    TextContent,
)
from ..presenter import Presenter
from ..schema import Desc
from .base import Tool, ToolResult


@dataclass
class AskUserQuestionInput:
    """Input for AskUserQuestionTool."""

    questions: Annotated[
        list[Question],
        Desc(
            "Questions to ask the user (1-4 questions)",
            min_items=MIN_QUESTIONS,
            max_items=MAX_QUESTIONS,
        ),
    ]


def _to_tool_result(result: AskResult) -> ToolResult:
    return ToolResult(
        content=TextContent(text=json.dumps(result.to_dict())),
        is_error=result.status == "error",
    )


@dataclass
class AskUserQuestionTool(Tool):
    """Ask the user questions in a native dialog and return their answers.

    The result is the JSON form of an AskResult: status, an answers mapping
    keyed by header, and the raw answer list.
    """

    name: str = "AskUserQuestion"
    description: str = """Use this tool when you need to ask the user questions during execution. This allows you to:
1. Gather user preferences or requirements
2. Clarify ambiguous instructions
3. Get decisions on implementation choices as you work
4. Offer choices to the user about what direction to take.

Usage notes:
- Users will always be able to select "Other" to provide custom text input
- Use multiSelect: true to allow multiple answers to be selected for a question
- If you recommend a specific option, make that the first option in the list and add "(Recommended)" at the end of the label"""

    presenter: Presenter | None = field(default=None, repr=False)
    config: AskUserConfig | None = field(default=None, repr=False)

    def input_error(self, error: Exception) -> ToolResult:
        return _to_tool_result(AskResult.failure(str(error)))

    async def __call__(self, input: AskUserQuestionInput) -> ToolResult:
        result = await ask_user_questions(
            input.questions, presenter=self.presenter, config=self.config
        )
        return _to_tool_result(result)
