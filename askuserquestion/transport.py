"""Request files handed to the presenter."""

from __future__ import annotations

import json
import logging
import tempfile
import uuid
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from .data_structures import Question, RequestDict
from .errors import TransportWriteError

logger = logging.getLogger(__name__)

REQUEST_FILE_PREFIX = "askuserquestion-"


def request_file_name() -> str:
    return f"{REQUEST_FILE_PREFIX}{uuid.uuid4()}.json"


def write_request_file(
    questions: Sequence[Question], directory: Path | str | None = None
) -> Path:
    """Serialize the batch to a new, uniquely named file.

    The file is fully written and closed before its path is returned, so
    the presenter never reads a partial document. Exclusive-create mode
    guarantees no two calls share a file.

    Raises:
        TransportWriteError: if the file cannot be created or written.
    """
    document: RequestDict = {"questions": [q.to_dict() for q in questions]}
    path = Path(directory or tempfile.gettempdir()) / request_file_name()
    try:
        f = open(path, "x", encoding="utf-8")
    except OSError as e:
        raise TransportWriteError(f"Failed to create request file {path}: {e}") from e
    try:
        with f:
            json.dump(document, f)
    except (OSError, TypeError, ValueError) as e:
        remove_request_file(path)
        raise TransportWriteError(f"Failed to write request file {path}: {e}") from e
    logger.debug("Wrote request file %s", path)
    return path


def read_request_file(path: Path | str) -> list[Question]:
    """Load a request file back into questions (presenter side of the format)."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [Question.from_dict(q) for q in data["questions"]]


def remove_request_file(path: Path | str) -> None:
    """Delete a request file, ignoring failures."""
    try:
        Path(path).unlink(missing_ok=True)
    except OSError as e:
        logger.debug("Could not remove request file %s: %s", path, e)


@contextmanager
def request_file(
    questions: Sequence[Question], directory: Path | str | None = None
) -> Iterator[Path]:
    """Write a request file and remove it on every exit path."""
    path = write_request_file(questions, directory)
    try:
        yield path
    finally:
        remove_request_file(path)
