"""Unit tests for the settings loader."""

import pytest

from cargo_rustc_cfg.config.settings import (
    DEFAULT_CONFIG_NAME,
    Settings,
    apply_settings,
    load_settings,
)
from cargo_rustc_cfg.core.exceptions import ConfigError


def test_defaults_without_file(tmp_path):
    """Test built-in defaults when no file and no CARGO variable exist."""
    settings = load_settings(environ={}, search_dir=tmp_path)

    assert settings == Settings()
    assert settings.cargo == "cargo"
    assert settings.format == "text"


def test_cargo_from_environment(tmp_path):
    """Test the CARGO variable selects the cargo binary."""
    settings = load_settings(
        environ={"CARGO": "/home/user/.cargo/bin/cargo"}, search_dir=tmp_path
    )

    assert settings.cargo == "/home/user/.cargo/bin/cargo"


def test_empty_cargo_variable_ignored(tmp_path):
    """Test an empty CARGO variable keeps the default."""
    settings = load_settings(environ={"CARGO": ""}, search_dir=tmp_path)

    assert settings.cargo == "cargo"


def test_default_file_in_search_dir(tmp_path):
    """Test the default settings file is picked up."""
    # Arrange
    (tmp_path / DEFAULT_CONFIG_NAME).write_text(
        """
cargo_args:
  - --release
rustc_args:
  - -C
  - target-feature=+crt-static
targets:
  - aarch64-unknown-linux-gnu
  - x86_64-pc-windows-msvc
format: json
"""
    )

    # Act
    settings = load_settings(environ={}, search_dir=tmp_path)

    # Assert
    assert settings.cargo_args == ["--release"]
    assert settings.rustc_args == ["-C", "target-feature=+crt-static"]
    assert settings.targets == ["aarch64-unknown-linux-gnu", "x86_64-pc-windows-msvc"]
    assert settings.format == "json"


def test_file_overrides_environment(tmp_path):
    """Test the settings file takes precedence over CARGO."""
    config_file = tmp_path / "custom.yaml"
    config_file.write_text("cargo: /opt/rust/bin/cargo\n")

    settings = load_settings(config_file, environ={"CARGO": "/usr/bin/cargo"})

    assert settings.cargo == "/opt/rust/bin/cargo"


def test_explicit_file_must_exist(tmp_path):
    """Test a missing explicit file is an error."""
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "missing.yaml", environ={})


def test_empty_file(tmp_path):
    """Test an empty file keeps defaults."""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    assert load_settings(config_file, environ={}) == Settings()


def test_invalid_yaml(tmp_path):
    """Test YAML syntax errors become ConfigError."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("targets: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(config_file, environ={})


def test_top_level_must_be_mapping(tmp_path):
    """Test a YAML list at top level is rejected."""
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- cargo\n")

    with pytest.raises(ConfigError, match="mapping"):
        load_settings(config_file, environ={})


class TestApplySettings:
    """Tests for settings validation."""

    def test_unknown_key(self):
        """Test unknown keys are rejected."""
        with pytest.raises(ConfigError, match="Unknown settings: timeout"):
            apply_settings(Settings(), {"timeout": 5})

    def test_cargo_must_be_string(self):
        """Test cargo must be a non-empty string."""
        with pytest.raises(ConfigError):
            apply_settings(Settings(), {"cargo": 42})
        with pytest.raises(ConfigError):
            apply_settings(Settings(), {"cargo": ""})

    @pytest.mark.parametrize("key", ["cargo_args", "rustc_args", "targets"])
    def test_lists_must_hold_strings(self, key):
        """Test list settings reject non-string items."""
        with pytest.raises(ConfigError, match=key):
            apply_settings(Settings(), {key: ["ok", 1]})

    @pytest.mark.parametrize("key", ["cargo_args", "rustc_args", "targets"])
    def test_lists_reject_scalars(self, key):
        """Test list settings reject a bare string."""
        with pytest.raises(ConfigError):
            apply_settings(Settings(), {key: "--release"})

    def test_null_list_is_empty(self):
        """Test a null list setting clears the value."""
        settings = apply_settings(Settings(targets=["x"]), {"targets": None})

        assert settings.targets == []

    def test_invalid_format(self):
        """Test unknown output formats are rejected."""
        with pytest.raises(ConfigError, match="Invalid format"):
            apply_settings(Settings(), {"format": "xml"})

    def test_updates_in_place(self):
        """Test the given settings object is updated and returned."""
        settings = Settings()

        result = apply_settings(settings, {"format": "yaml"})

        assert result is settings
        assert settings.format == "yaml"
