"""Shared fixtures."""

from __future__ import annotations

import stat
import sys
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from askuserquestion import AskUserConfig


@pytest.fixture
def config(tmp_path: Path) -> AskUserConfig:
    """Config writing request files to an isolated directory, no sound."""
    request_dir = tmp_path / "requests"
    request_dir.mkdir()
    return AskUserConfig(notify=False, temp_dir=str(request_dir))


@pytest.fixture
def make_presenter_script(tmp_path: Path) -> Callable[[str], Path]:
    """Create an executable Python script that acts as a presenter binary.

    The body runs with `input_path` (the --input argument) already defined.
    """
    counter = iter(range(1000))

    def factory(body: str) -> Path:
        script = tmp_path / f"presenter_{next(counter)}.py"
        header = textwrap.dedent(
            f"""\
            #!{sys.executable}
            import json
            import sys

            assert sys.argv[1] == "--input"
            input_path = sys.argv[2]
            """
        )
        script.write_text(header + textwrap.dedent(body))
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return script

    return factory
