"""Error taxonomy for the question/answer exchange.

Every failure that can happen between receiving a question batch and
returning an answer is one of these. The orchestration boundary
(`ask_user_questions`) converts all of them into an error `AskResult`,
so callers only see them when using the lower-level building blocks
directly.
"""

from __future__ import annotations

__all__ = [
    "AskUserError",
    "InvalidSpec",
    "PlatformUnsupported",
    "BinaryMissing",
    "TransportWriteError",
    "SpawnError",
    "PresenterFailed",
    "ResponseParseError",
]


class AskUserError(Exception):
    """Base class for all exchange errors.

    Example:
        try:
            validate_questions([])
        except AskUserError as e:
            print(e.message)  # Expected 1-4 questions, got 0
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidSpec(AskUserError, ValueError):
    """The question batch violates the schema (caller's fault)."""


class PlatformUnsupported(AskUserError):
    """No presenter binary is published for the running platform."""

    def __init__(self, platform_id: str, supported: list[str]):
        self.platform_id = platform_id
        self.supported = supported
        super().__init__(
            f"Unsupported platform: {platform_id}. Supported: {', '.join(supported)}"
        )


class BinaryMissing(AskUserError):
    """The platform is supported but the presenter binary is not installed."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Binary not found at: {path}")


class TransportWriteError(AskUserError):
    """The request file could not be created or written."""


class SpawnError(AskUserError):
    """The presenter process could not be started."""


class PresenterFailed(SpawnError):
    """The presenter exited non-zero and reported a diagnostic on stderr."""

    def __init__(self, exit_code: int, stderr: str):
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(f"Presenter exited with code {exit_code}: {stderr.strip()}")


class ResponseParseError(AskUserError):
    """The presenter wrote something to stdout that is not a valid response."""
