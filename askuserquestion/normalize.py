"""Turning presenter output into an AskResult."""

from __future__ import annotations

import json
from collections.abc import Mapping

from .data_structures import AnswerValue, AskResult, QuestionAnswer, QuestionAnswerDict
from .errors import ResponseParseError

__all__ = ["normalize_response", "build_answer_map"]


def build_answer_map(answers: list[QuestionAnswer]) -> dict[str, AnswerValue]:
    """Map each answer to its header (or question text when header is empty).

    Later answers overwrite earlier ones with the same key. Skipped
    questions map to an empty string.
    """
    result: dict[str, AnswerValue] = {}
    for answer in answers:
        result[answer.key] = answer.selected if answer.selected is not None else ""
    return result


def normalize_response(stdout: str) -> AskResult:
    """Interpret the presenter's stdout.

    Empty output means the dialog was closed and is reported exactly like
    an explicit "cancelled" response.

    Raises:
        ResponseParseError: stdout is not a valid response document.
    """
    text = stdout.strip()
    if not text:
        return AskResult.cancelled()

    try:
        response = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Invalid presenter response: {e}") from e

    if not isinstance(response, Mapping):
        raise ResponseParseError("Invalid presenter response: expected a JSON object")

    status = response.get("status")
    if status == "cancelled":
        return AskResult.cancelled()
    if status != "selected":
        raise ResponseParseError(f"Invalid presenter response status: {status!r}")

    raw = response.get("answers")
    if not isinstance(raw, list) or not all(isinstance(a, Mapping) for a in raw):
        raise ResponseParseError(
            "Invalid presenter response: 'answers' must be a list of objects"
        )

    raw_answers: list[QuestionAnswerDict] = raw
    for i, answer in enumerate(raw_answers):
        _check_answer(answer, f"answers[{i}]")
    answers = [QuestionAnswer.from_dict(a) for a in raw_answers]
    return AskResult(
        status="selected", answers=build_answer_map(answers), raw=raw_answers
    )


def _check_answer(answer: Mapping[str, object], where: str) -> None:
    for key in ("question", "header"):
        if not isinstance(answer.get(key), str):
            raise ResponseParseError(
                f"Invalid presenter response: {where}.{key} must be a string"
            )
    selected = answer.get("selected")
    if selected is None or isinstance(selected, str):
        return
    if isinstance(selected, list) and all(isinstance(s, str) for s in selected):
        return
    raise ResponseParseError(
        f"Invalid presenter response: {where}.selected must be text or a list of text"
    )
