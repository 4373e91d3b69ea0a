"""Tests for configuration loading."""

import json
from pathlib import Path

from askuserquestion import AskUserConfig, load_config, save_config


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        config = load_config(str(tmp_path / "missing.json"), environ={})
        assert config == AskUserConfig()
        assert config.notify is True

    def test_defaults_when_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert load_config(str(path), environ={}) == AskUserConfig()

    def test_ignores_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        assert load_config(str(path), environ={}) == AskUserConfig()

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"binary_path": "/opt/ask", "notify": False, "temp_dir": "/var/tmp"})
        )
        assert load_config(str(path), environ={}) == AskUserConfig(
            binary_path="/opt/ask", notify=False, temp_dir="/var/tmp"
        )

    def test_ignores_wrong_types(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"binary_path": 3, "notify": "no"}))
        assert load_config(str(path), environ={}) == AskUserConfig()

    def test_environment_overrides(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"binary_path": "/opt/ask"}))
        config = load_config(
            str(path),
            environ={
                "ASKUSERQUESTION_BINARY": "/usr/local/bin/ask",
                "ASKUSERQUESTION_NO_SOUND": "1",
                "ASKUSERQUESTION_TMPDIR": "/scratch",
            },
        )
        assert config.binary_path == "/usr/local/bin/ask"
        assert config.notify is False
        assert config.temp_dir == "/scratch"

    def test_no_sound_requires_truthy_value(self, tmp_path: Path) -> None:
        config = load_config(
            str(tmp_path / "missing.json"), environ={"ASKUSERQUESTION_NO_SOUND": "0"}
        )
        assert config.notify is True


class TestSaveConfig:
    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "config.json"
        config = AskUserConfig(binary_path="/opt/ask", notify=False)
        save_config(config, str(path))
        assert load_config(str(path), environ={}) == config
