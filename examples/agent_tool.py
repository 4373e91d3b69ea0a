"""Tool boundary: what an agent host sees when it calls AskUserQuestion."""

from __future__ import annotations

import asyncio
import json

from askuserquestion import AskUserQuestionTool


async def main() -> None:
    tool = AskUserQuestionTool()
    print(json.dumps(tool.to_dict(), indent=2))

    # The host passes the model's raw tool input straight through
    result = await tool.execute(
        {
            "questions": [
                {
                    "question": "How should we authenticate users?",
                    "header": "Auth method",
                    "options": [
                        {"label": "OAuth", "description": "Sign in with a provider"},
                        {"label": "Password", "description": "Email and password"},
                    ],
                    "multiSelect": False,
                }
            ]
        }
    )
    print(result.content.text)


if __name__ == "__main__":
    asyncio.run(main())
