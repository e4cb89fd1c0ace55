"""Unit tests for pathstamp.lib.yaml_loader YAML parsing."""

from __future__ import annotations

import pytest
import yaml

from pathstamp.lib.yaml_loader import load_yaml


class TestLoadYaml:
    """Tests for loading YAML from files."""

    def test_load_valid_yaml(self, tmp_path):
        """Load a valid YAML file and verify contents."""
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("key: value\nnested:\n  inner: 42\n")
        assert load_yaml(yaml_file) == {"key": "value", "nested": {"inner": 42}}

    def test_load_empty_yaml(self, tmp_path):
        """Loading an empty file returns None."""
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert load_yaml(str(yaml_file)) is None

    def test_load_missing_file(self):
        """Loading a nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_yaml("/nonexistent/path.yaml")

    def test_malformed_yaml_raises(self, tmp_path):
        """Unparseable YAML raises YAMLError."""
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("key: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_yaml(yaml_file)
