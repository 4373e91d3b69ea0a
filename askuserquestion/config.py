"""Configuration loading/saving for askuserquestion."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from typing import Any

DEFAULT_CONFIG_PATH = os.path.expanduser("~/.askuserquestion.json")

# Environment overrides, applied on top of the config file
ENV_BINARY = "ASKUSERQUESTION_BINARY"
ENV_NO_SOUND = "ASKUSERQUESTION_NO_SOUND"
ENV_TMPDIR = "ASKUSERQUESTION_TMPDIR"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class AskUserConfig:
    """Settings for one exchange.

    Attributes:
        binary_path: Explicit presenter executable (skips platform lookup)
        notify: Play a sound when a dialog is about to be shown
        temp_dir: Directory for request files (default: system temp dir)
    """

    binary_path: str | None = None
    notify: bool = True
    temp_dir: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AskUserConfig":
        binary_path = data.get("binary_path")
        temp_dir = data.get("temp_dir")
        notify = data.get("notify", True)
        return cls(
            binary_path=binary_path if isinstance(binary_path, str) else None,
            notify=notify if isinstance(notify, bool) else True,
            temp_dir=temp_dir if isinstance(temp_dir, str) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_config_file(path: str = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load config from disk. Returns empty dict if not found or invalid."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
    except FileNotFoundError:
        return {}
    except (OSError, ValueError):
        return {}


def load_config(
    path: str = DEFAULT_CONFIG_PATH, environ: dict[str, str] | None = None
) -> AskUserConfig:
    """Load the config file and apply environment overrides."""
    env = os.environ if environ is None else environ
    config = AskUserConfig.from_dict(load_config_file(path))

    if env.get(ENV_BINARY):
        config.binary_path = env[ENV_BINARY]
    if env.get(ENV_NO_SOUND, "").strip().lower() in _TRUTHY:
        config.notify = False
    if env.get(ENV_TMPDIR):
        config.temp_dir = env[ENV_TMPDIR]

    return config


def save_config(config: AskUserConfig, path: str = DEFAULT_CONFIG_PATH) -> None:
    """Persist config to disk."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
