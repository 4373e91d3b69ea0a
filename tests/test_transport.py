"""Tests for request file handling."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from helpers import make_question, request_files

from askuserquestion import (
    TransportWriteError,
    read_request_file,
    remove_request_file,
    request_file,
    write_request_file,
)


class TestWriteRequestFile:
    def test_writes_questions_document(self, tmp_path: Path) -> None:
        batch = [make_question(), make_question(header="Feat", multi_select=True)]
        path = write_request_file(batch, tmp_path)

        assert path.parent == tmp_path
        assert json.loads(path.read_text()) == {"questions": [q.to_dict() for q in batch]}

    def test_round_trip(self, tmp_path: Path) -> None:
        batch = [
            make_question(),
            make_question(header="", question="Anything else?", labels=("A", "B", "C")),
        ]
        path = write_request_file(batch, tmp_path)
        assert read_request_file(path) == batch

    def test_file_name_is_unique(self, tmp_path: Path) -> None:
        paths = {write_request_file([make_question()], tmp_path) for _ in range(20)}
        assert len(paths) == 20
        assert all(p.name.startswith("askuserquestion-") for p in paths)
        assert all(p.suffix == ".json" for p in paths)

    def test_defaults_to_system_temp_dir(self, tmp_path: Path) -> None:
        with patch(
            "askuserquestion.transport.tempfile.gettempdir",
            return_value=str(tmp_path),
        ):
            path = write_request_file([make_question()])
        assert path.parent == tmp_path

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(TransportWriteError, match="Failed to create request file"):
            write_request_file([make_question()], tmp_path / "missing")

    def test_never_overwrites_existing_file(self, tmp_path: Path) -> None:
        existing = tmp_path / "askuserquestion-fixed.json"
        existing.write_text("other invocation")
        with patch(
            "askuserquestion.transport.request_file_name",
            return_value=existing.name,
        ):
            with pytest.raises(TransportWriteError):
                write_request_file([make_question()], tmp_path)
        assert existing.read_text() == "other invocation"


class TestRemoveRequestFile:
    def test_removes_file(self, tmp_path: Path) -> None:
        path = write_request_file([make_question()], tmp_path)
        remove_request_file(path)
        assert not path.exists()

    def test_missing_file_is_ignored(self, tmp_path: Path) -> None:
        remove_request_file(tmp_path / "gone.json")

    def test_os_error_is_swallowed(self, tmp_path: Path) -> None:
        with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            remove_request_file(tmp_path / "locked.json")


class TestRequestFileContext:
    def test_removed_after_block(self, tmp_path: Path) -> None:
        with request_file([make_question()], tmp_path) as path:
            assert path.exists()
        assert request_files(tmp_path) == []

    def test_removed_when_block_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            with request_file([make_question()], tmp_path):
                raise RuntimeError("presenter crashed")
        assert request_files(tmp_path) == []

    def test_removal_failure_does_not_mask_error(self, tmp_path: Path) -> None:
        with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            with pytest.raises(RuntimeError, match="primary"):
                with request_file([make_question()], tmp_path):
                    raise RuntimeError("primary")
