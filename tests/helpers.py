"""Test helpers: sample questions and an in-process presenter."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from askuserquestion import Question, QuestionOption, RawOutcome


def make_question(
    header: str = "DB",
    question: str = "Which DB?",
    labels: tuple[str, ...] = ("Postgres", "SQLite"),
    multi_select: bool = False,
) -> Question:
    return Question(
        question=question,
        header=header,
        options=tuple(
            QuestionOption(label=label, description=f"Use {label}") for label in labels
        ),
        multiSelect=multi_select,
    )


def question_dict(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "question": "Which DB?",
        "header": "DB",
        "options": [
            {"label": "Postgres", "description": "Relational"},
            {"label": "SQLite", "description": "Embedded"},
        ],
        "multiSelect": False,
    }
    data.update(overrides)
    return data


@dataclass
class FakePresenter:
    """Presenter returning a canned outcome and recording what it was shown."""

    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0
    calls: list[Path] = field(default_factory=list)
    seen_documents: list[str] = field(default_factory=list)
    raise_error: Exception | None = None

    async def run(self, request_file: Path) -> RawOutcome:
        self.calls.append(request_file)
        self.seen_documents.append(request_file.read_text())
        if self.raise_error is not None:
            raise self.raise_error
        return RawOutcome(
            stdout=self.stdout, stderr=self.stderr, exit_code=self.exit_code
        )


def request_files(directory: str | os.PathLike[str]) -> list[Path]:
    return sorted(Path(directory).glob("askuserquestion-*.json"))
