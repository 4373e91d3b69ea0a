"""Audible cue played when a dialog is about to be shown."""

from __future__ import annotations

import logging
import subprocess
import threading

from .resolver import current_os

logger = logging.getLogger(__name__)

NOTIFICATION_COMMANDS: dict[str, list[str]] = {
    "darwin": ["afplay", "/System/Library/Sounds/Glass.aiff"],
    "win32": ["powershell", "-c", "[System.Media.SystemSounds]::Exclamation.Play()"],
    "linux": ["paplay", "/usr/share/sounds/freedesktop/stereo/bell.oga"],
}


def notification_command(os_name: str | None = None) -> list[str] | None:
    return NOTIFICATION_COMMANDS.get(os_name or current_os())


def _play(command: list[str]) -> None:
    try:
        proc = subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        proc.wait()
    except Exception as e:
        logger.debug("Notification sound failed: %s", e)


def notify(os_name: str | None = None) -> threading.Thread | None:
    """Play the platform's notification sound without waiting for it.

    Returns the started daemon thread (callers never need to join it), or
    None when the platform has no notification command.
    """
    command = notification_command(os_name)
    if command is None:
        return None
    thread = threading.Thread(
        target=_play, args=(command,), name="askuserquestion-notify", daemon=True
    )
    thread.start()
    return thread
