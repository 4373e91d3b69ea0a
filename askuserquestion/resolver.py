"""Presenter binary lookup for the running platform."""

from __future__ import annotations

import platform
import sys
from pathlib import Path

from .errors import BinaryMissing, PlatformUnsupported

# Platform id -> directory holding that platform's presenter build
SUPPORTED_PLATFORMS: dict[str, str] = {
    "darwin-arm64": "askuserquestion-darwin-arm64",
    "darwin-x64": "askuserquestion-darwin-x64",
    "linux-x64": "askuserquestion-linux-x64",
    "linux-arm64": "askuserquestion-linux-arm64",
    "win32-x64": "askuserquestion-win32-x64",
}

BINARY_NAMES: dict[str, str] = {
    "darwin": "askuserquestion",
    "linux": "askuserquestion",
    "win32": "askuserquestion.exe",
}

_ARCH_ALIASES: dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "arm64": "arm64",
    "aarch64": "arm64",
}

DEFAULT_SEARCH_ROOT = Path(__file__).parent / "bin"


def current_os() -> str:
    """Operating system name in presenter terms (darwin, linux, win32)."""
    if sys.platform.startswith("linux"):
        return "linux"
    return sys.platform


def current_platform_id() -> str:
    """Platform id like "darwin-arm64" or "win32-x64"."""
    machine = platform.machine().lower()
    return f"{current_os()}-{_ARCH_ALIASES.get(machine, machine)}"


def resolve_executable(
    platform_id: str | None = None,
    *,
    search_root: Path | str | None = None,
    override: str | None = None,
) -> Path:
    """Find the presenter executable.

    Args:
        platform_id: Platform to resolve for (default: the running one)
        search_root: Directory containing per-platform builds
        override: Explicit executable path from configuration

    Raises:
        PlatformUnsupported: platform_id is not in SUPPORTED_PLATFORMS
        BinaryMissing: the executable does not exist
    """
    if override:
        path = Path(override).expanduser()
        if not path.is_file():
            raise BinaryMissing(str(path))
        return path

    platform_id = platform_id or current_platform_id()
    dist_dir = SUPPORTED_PLATFORMS.get(platform_id)
    if dist_dir is None:
        raise PlatformUnsupported(platform_id, list(SUPPORTED_PLATFORMS))

    os_name = platform_id.split("-", 1)[0]
    binary_name = BINARY_NAMES.get(os_name, "askuserquestion")
    root = Path(search_root) if search_root is not None else DEFAULT_SEARCH_ROOT
    path = root / dist_dir / binary_name
    if not path.is_file():
        raise BinaryMissing(str(path))
    return path
