"""Unit tests for core.yaml module."""

from __future__ import annotations

from pathlib import Path

import pytest

from notebrotr.core.exceptions import ConfigurationError
from notebrotr.core.yaml import load_yaml


class TestLoadYaml:
    def test_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "render.yaml"
        path.write_text("timezone: Europe/Rome\nlookup:\n  timeout: 5.0\n", encoding="utf-8")
        assert load_yaml(path) == {"timezone": "Europe/Rome", "lookup": {"timeout": 5.0}}

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "render.yaml"
        path.write_text("summary_length: 50\n", encoding="utf-8")
        assert load_yaml(str(path)) == {"summary_length": 50}

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("key: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml(path)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            load_yaml(path)

    def test_python_tags_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "unsafe.yaml"
        path.write_text("value: !!python/object/apply:os.system ['true']\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_yaml(path)
