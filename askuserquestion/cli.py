"""Command line entry point: ask the questions in a JSON file."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from rich.console import Console
from rich.json import JSON
from rich.logging import RichHandler

from .ask import ask_user_questions
from .config import DEFAULT_CONFIG_PATH, load_config
from .data_structures import AskResult


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="askuserquestion",
        description="Ask the user multiple-choice questions in a native dialog",
    )
    parser.add_argument(
        "questions_file",
        metavar="FILE",
        help='JSON file with {"questions": [...]} ("-" reads stdin)',
    )
    parser.add_argument(
        "--binary",
        metavar="PATH",
        help="Presenter executable (default: bundled binary for this platform)",
    )
    parser.add_argument(
        "--no-sound",
        action="store_true",
        help="Do not play the notification sound",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=DEFAULT_CONFIG_PATH,
        help=f"Config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print the result as a single JSON line",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log exchange details to stderr",
    )
    return parser


def load_questions(source: str) -> Any:
    """Read the "questions" list from a file path or "-" for stdin."""
    if source == "-":
        data = json.load(sys.stdin)
    else:
        with open(source, "r", encoding="utf-8") as f:
            data = json.load(f)
    if isinstance(data, dict):
        return data.get("questions")
    return data


def main(argv: list[str] | None = None) -> int:
    """Entry point for the askuserquestion command."""
    args = build_parser().parse_args(argv)

    err_console = Console(stderr=True)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )

    config = load_config(args.config)
    if args.binary:
        config.binary_path = args.binary
    if args.no_sound:
        config.notify = False

    try:
        questions = load_questions(args.questions_file)
    except (OSError, ValueError) as e:
        result = AskResult.failure(f"Could not read questions: {e}")
    else:
        try:
            result = asyncio.run(ask_user_questions(questions, config=config))
        except KeyboardInterrupt:
            result = AskResult.cancelled()

    output = json.dumps(result.to_dict())
    if args.compact:
        print(output)
    else:
        Console().print(JSON(output))
    return 1 if result.status == "error" else 0


if __name__ == "__main__":
    sys.exit(main())
