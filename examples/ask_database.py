"""Ask the user two questions and print the answers."""

from __future__ import annotations

import asyncio

from askuserquestion import Question, QuestionOption, ask_user_questions


async def main() -> None:
    result = await ask_user_questions(
        [
            Question(
                question="Which database should we use?",
                header="DB",
                options=(
                    QuestionOption("Postgres (Recommended)", "Relational, production ready"),
                    QuestionOption("SQLite", "Single file, zero setup"),
                ),
                multiSelect=False,
            ),
            Question(
                question="Which features should be enabled?",
                header="Features",
                options=(
                    QuestionOption("Dark mode", "Follow the system theme"),
                    QuestionOption("Analytics", "Anonymous usage statistics"),
                    QuestionOption("Offline", "Cache data locally"),
                ),
                multiSelect=True,
            ),
        ]
    )

    if result.status == "error":
        print(f"Error: {result.error}")
    elif result.status == "cancelled":
        print("Dialog closed without answering.")
    else:
        for key, value in result.answers.items():
            print(f"{key}: {value}")


if __name__ == "__main__":
    asyncio.run(main())
