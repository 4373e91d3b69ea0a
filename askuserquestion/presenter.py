"""Presenter processes that render the dialog."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .data_structures import RawOutcome
from .errors import SpawnError

logger = logging.getLogger(__name__)

# Seconds to wait for a terminated presenter before killing it
TERMINATE_GRACE_PERIOD = 2.0


class Presenter(Protocol):
    """Anything that can show a request file to the user and report back."""

    async def run(self, request_file: Path) -> RawOutcome: ...


@dataclass
class SubprocessPresenter:
    """Runs the native presenter binary as `<executable> --input <file>`.

    There is no timeout: the call resolves when the presenter exits. If the
    awaiting task is cancelled the child is terminated first.
    """

    executable: Path | str

    def argv(self, request_file: Path) -> list[str]:
        return [str(self.executable), "--input", str(request_file)]

    async def run(self, request_file: Path) -> RawOutcome:
        argv = self.argv(request_file)
        logger.debug("Spawning presenter: %s", argv)
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise SpawnError(f"Failed to start presenter {self.executable}: {e}") from e

        try:
            stdout, stderr = await process.communicate()
        except asyncio.CancelledError:
            # Terminate subprocess on cancellation
            if process.returncode is None:
                process.terminate()
                try:
                    await asyncio.wait_for(
                        process.wait(), timeout=TERMINATE_GRACE_PERIOD
                    )
                except asyncio.TimeoutError:
                    process.kill()
                    await process.wait()
            raise

        exit_code = process.returncode if process.returncode is not None else -1
        logger.debug("Presenter exited with code %d", exit_code)
        return RawOutcome(
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            exit_code=exit_code,
        )
