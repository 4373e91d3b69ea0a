"""Validation of question batches before anything is written or spawned."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .data_structures import (
    MAX_HEADER_LENGTH,
    MAX_OPTIONS,
    MAX_QUESTIONS,
    MIN_OPTIONS,
    MIN_QUESTIONS,
    Question,
    QuestionOption,
)
from .errors import InvalidSpec

__all__ = ["validate_questions", "parse_questions"]


def validate_questions(questions: Sequence[Question]) -> Sequence[Question]:
    """Check a question batch against the schema bounds.

    Returns the batch unchanged if valid.

    Raises:
        InvalidSpec: naming the first violated constraint.
    """
    if isinstance(questions, (str, bytes)) or not isinstance(questions, Sequence):
        raise InvalidSpec("questions must be a list")
    if not MIN_QUESTIONS <= len(questions) <= MAX_QUESTIONS:
        raise InvalidSpec(
            f"Expected {MIN_QUESTIONS}-{MAX_QUESTIONS} questions, got {len(questions)}"
        )

    for i, q in enumerate(questions):
        where = f"questions[{i}]"
        if not isinstance(q, Question):
            raise InvalidSpec(f"{where}: expected a question object")
        if not isinstance(q.question, str):
            raise InvalidSpec(f"{where}: 'question' must be a string")
        if not isinstance(q.header, str):
            raise InvalidSpec(f"{where}: 'header' must be a string")
        if not isinstance(q.multiSelect, bool):
            raise InvalidSpec(f"{where}: 'multiSelect' must be a boolean")
        if len(q.header) > MAX_HEADER_LENGTH:
            raise InvalidSpec(
                f"{where}: header {q.header!r} exceeds {MAX_HEADER_LENGTH} characters"
            )
        if isinstance(q.options, (str, bytes)) or not isinstance(q.options, Sequence):
            raise InvalidSpec(f"{where}: 'options' must be a list")
        if not MIN_OPTIONS <= len(q.options) <= MAX_OPTIONS:
            raise InvalidSpec(
                f"{where}: expected {MIN_OPTIONS}-{MAX_OPTIONS} options, "
                f"got {len(q.options)}"
            )
        for j, option in enumerate(q.options):
            _check_option(option, f"{where}.options[{j}]")

    return questions


def _check_option(option: object, where: str) -> None:
    if not isinstance(option, QuestionOption):
        raise InvalidSpec(f"{where}: expected an option object")
    if not isinstance(option.label, str):
        raise InvalidSpec(f"{where}: 'label' must be a string")
    if not isinstance(option.description, str):
        raise InvalidSpec(f"{where}: 'description' must be a string")


def parse_questions(raw: Any) -> list[Question]:
    """Convert raw JSON input (list of dicts) into a validated batch."""
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise InvalidSpec("questions must be a list")
    questions = [_as_question(q, f"questions[{i}]") for i, q in enumerate(raw)]
    validate_questions(questions)
    return questions


def _as_question(value: Any, where: str) -> Question:
    if isinstance(value, Question):
        return value
    if not isinstance(value, Mapping):
        raise InvalidSpec(f"{where}: expected an object")
    return Question.from_dict(value, where)
