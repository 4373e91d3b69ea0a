"""Running one question/answer exchange end to end."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .config import AskUserConfig, load_config
from .data_structures import AskResult, Question
from .errors import AskUserError
from .normalize import normalize_response
from .notification import notify
from .presenter import Presenter, SubprocessPresenter
from .resolver import resolve_executable
from .transport import request_file
from .validation import parse_questions

logger = logging.getLogger(__name__)

__all__ = ["ask_user_questions"]


async def ask_user_questions(
    questions: Sequence[Question] | Sequence[dict[str, Any]],
    *,
    presenter: Presenter | None = None,
    config: AskUserConfig | None = None,
) -> AskResult:
    """Show a question batch to the user and collect the answers.

    Steps: validate the batch, resolve the presenter binary (unless a
    presenter is given), fire the notification sound, write the request
    file, run the presenter, normalize its output, remove the request file.

    Never raises for exchange failures: every error becomes an AskResult
    with status "error". Task cancellation still propagates, after the
    request file is removed.

    Example:
        result = await ask_user_questions([
            Question(
                question="Which database should we use?",
                header="DB",
                options=(QuestionOption("Postgres"), QuestionOption("SQLite")),
                multiSelect=False,
            )
        ])
        if result.status == "selected":
            print(result.answers["DB"])
    """
    if config is None:
        config = load_config()

    try:
        batch = parse_questions(questions)

        if presenter is None:
            presenter = SubprocessPresenter(
                resolve_executable(override=config.binary_path)
            )

        if config.notify:
            notify()

        with request_file(batch, config.temp_dir) as path:
            outcome = await presenter.run(path)
            outcome.raise_for_status()
            result = normalize_response(outcome.stdout)

    except AskUserError as e:
        logger.warning("AskUserQuestion failed: %s", e.message)
        return AskResult.failure(e.message)
    except Exception as e:
        logger.exception("AskUserQuestion failed unexpectedly")
        return AskResult.failure(str(e))

    logger.debug("AskUserQuestion finished with status %s", result.status)
    return result
