"""Tests for presenter response normalization."""

import json

import pytest

from askuserquestion import (
    QuestionAnswer,
    ResponseParseError,
    build_answer_map,
    normalize_response,
)


class TestNormalizeResponse:
    @pytest.mark.parametrize("stdout", ["", "   ", "\n\n", "\t \r\n"])
    def test_empty_output_is_cancelled(self, stdout: str) -> None:
        result = normalize_response(stdout)
        assert result.to_dict() == {"status": "cancelled", "answers": {}}

    def test_cancelled_discards_answers(self) -> None:
        stdout = json.dumps(
            {
                "status": "cancelled",
                "answers": [{"question": "Which DB?", "header": "DB", "selected": "Postgres"}],
            }
        )
        assert normalize_response(stdout).to_dict() == {"status": "cancelled", "answers": {}}

    def test_cancelled_without_answers(self) -> None:
        assert normalize_response('{"status":"cancelled"}').status == "cancelled"

    def test_single_select(self) -> None:
        stdout = (
            '{"status":"selected","answers":'
            '[{"question":"Which DB?","header":"DB","selected":"Postgres"}]}'
        )
        result = normalize_response(stdout)
        assert result.status == "selected"
        assert result.answers == {"DB": "Postgres"}
        assert result.raw == [{"question": "Which DB?", "header": "DB", "selected": "Postgres"}]
        assert result.error is None

    def test_multi_select_preserves_order(self) -> None:
        stdout = json.dumps(
            {
                "status": "selected",
                "answers": [
                    {
                        "question": "Features?",
                        "header": "Feat",
                        "selected": ["Dark mode", "Analytics"],
                        "selected_index": [1, 0],
                    }
                ],
            }
        )
        assert normalize_response(stdout).answers == {"Feat": ["Dark mode", "Analytics"]}

    def test_empty_header_falls_back_to_question(self) -> None:
        stdout = json.dumps(
            {
                "status": "selected",
                "answers": [{"question": "Which DB?", "header": "", "selected": "SQLite"}],
            }
        )
        assert normalize_response(stdout).answers == {"Which DB?": "SQLite"}

    def test_skipped_question_maps_to_empty_string(self) -> None:
        stdout = json.dumps(
            {"status": "selected", "answers": [{"question": "Which DB?", "header": "DB"}]}
        )
        assert normalize_response(stdout).answers == {"DB": ""}

    def test_duplicate_header_later_wins(self) -> None:
        stdout = json.dumps(
            {
                "status": "selected",
                "answers": [
                    {"question": "First?", "header": "Same", "selected": "one"},
                    {"question": "Second?", "header": "Same", "selected": "two"},
                ],
            }
        )
        result = normalize_response(stdout)
        assert result.answers == {"Same": "two"}
        assert len(result.raw or []) == 2

    def test_raw_is_verbatim(self) -> None:
        answers = [
            {
                "question": "Which DB?",
                "header": "DB",
                "selected": "MariaDB",
                "selected_index": -1,
                "extra": "kept",
            }
        ]
        stdout = json.dumps({"status": "selected", "answers": answers})
        assert normalize_response(stdout).raw == answers

    def test_surrounding_whitespace_is_ignored(self) -> None:
        stdout = '\n  {"status":"selected","answers":[]}  \n'
        result = normalize_response(stdout)
        assert result.status == "selected"
        assert result.answers == {}
        assert result.raw == []

    @pytest.mark.parametrize(
        "stdout",
        [
            '{"status":',
            "not json",
            "[]",
            '"selected"',
            '{"status":"unknown","answers":[]}',
            '{"answers":[]}',
            '{"status":"selected"}',
            '{"status":"selected","answers":{"DB":"Postgres"}}',
            '{"status":"selected","answers":["Postgres"]}',
            '{"status":"selected","answers":[{"question":"q","header":"H","selected":5}]}',
            '{"status":"selected","answers":[{"question":"q","header":"H","selected":{"a":1}}]}',
            '{"status":"selected","answers":[{"question":"q","header":"H","selected":["a",2]}]}',
            '{"status":"selected","answers":[{"question":"q","header":7,"selected":"a"}]}',
            '{"status":"selected","answers":[{"question":null,"header":"H","selected":"a"}]}',
            '{"status":"selected","answers":[{"question":"q","selected":"a"}]}',
        ],
    )
    def test_invalid_output_raises(self, stdout: str) -> None:
        with pytest.raises(ResponseParseError) as exc_info:
            normalize_response(stdout)
        assert exc_info.value.message

    def test_null_selection_is_skipped_question(self) -> None:
        stdout = json.dumps(
            {
                "status": "selected",
                "answers": [{"question": "Which DB?", "header": "DB", "selected": None}],
            }
        )
        assert normalize_response(stdout).answers == {"DB": ""}


class TestBuildAnswerMap:
    def test_keys_follow_answer_order(self) -> None:
        answers = [
            QuestionAnswer("Q1?", "B", "x"),
            QuestionAnswer("Q2?", "A", ["y", "z"]),
        ]
        assert list(build_answer_map(answers)) == ["B", "A"]
