# tests/test_settings.py
"""
Tests for the settings management in portraitgen/settings.py.
"""

import json

import pytest

from portraitgen import config
from portraitgen import settings as app_settings


@pytest.fixture(autouse=True)
def restore_settings(mocker):
    """save_setting updates the live dict; put it back after each test."""
    mocker.patch.dict(app_settings.settings)


class TestSettings:
    """Test suite for settings management."""

    def test_defaults_without_file(self, fake_fs):
        loaded = app_settings._load_settings()
        assert loaded["model"] == "gemini-2.5-flash-image-preview"
        assert loaded["input_mime_type"] == "image/jpeg"
        assert loaded["default_input_path"] == "./input.jpeg"
        assert loaded["default_output_path"] == "./output.png"

    def test_user_file_overrides_defaults(self, fake_fs):
        fake_fs.create_file(
            config.SETTINGS_FILE, contents=json.dumps({"model": "gemini-custom"})
        )
        loaded = app_settings._load_settings()
        assert loaded["model"] == "gemini-custom"
        assert loaded["default_output_path"] == "./output.png"

    def test_malformed_file_falls_back_to_defaults(self, fake_fs):
        fake_fs.create_file(config.SETTINGS_FILE, contents="{not json")
        assert app_settings._load_settings() == app_settings._get_default_settings()

    def test_save_setting_string(self, fake_fs):
        app_settings.save_setting("default_output_path", "./out/result.png")
        with open(config.SETTINGS_FILE, "r") as f:
            data = json.load(f)
        assert data["default_output_path"] == "./out/result.png"
        assert app_settings.settings["default_output_path"] == "./out/result.png"

    def test_save_setting_keeps_other_keys(self, fake_fs):
        app_settings.save_setting("model", "gemini-a")
        app_settings.save_setting("input_mime_type", "image/png")
        with open(config.SETTINGS_FILE, "r") as f:
            data = json.load(f)
        assert data["model"] == "gemini-a"
        assert data["input_mime_type"] == "image/png"

    def test_save_setting_empty_value(self, fake_fs, capsys):
        app_settings.save_setting("model", "  ")
        assert "cannot be empty" in capsys.readouterr().out
        assert not config.SETTINGS_FILE.exists()

    @pytest.mark.parametrize("key", ["model", "input_mime_type"])
    def test_save_setting_rejects_empty_model_settings(self, fake_fs, capsys, key):
        app_settings.save_setting(key, "")
        assert f"Setting '{key}' cannot be empty." in capsys.readouterr().out
        assert not config.SETTINGS_FILE.exists()
        assert app_settings.settings[key] != ""

    def test_save_setting_strips_whitespace(self, fake_fs):
        app_settings.save_setting("model", "  gemini-custom  ")
        with open(config.SETTINGS_FILE, "r") as f:
            assert json.load(f)["model"] == "gemini-custom"

    def test_save_setting_rejects_non_image_mime_type(self, fake_fs, capsys):
        app_settings.save_setting("input_mime_type", "text/plain")
        assert "not an image MIME type" in capsys.readouterr().out
        assert not config.SETTINGS_FILE.exists()

    def test_save_setting_accepts_image_mime_type(self, fake_fs):
        app_settings.save_setting("input_mime_type", "image/png")
        assert app_settings.settings["input_mime_type"] == "image/png"

    def test_save_setting_unknown_key(self, capsys):
        """Tests that an unknown key is handled gracefully."""
        app_settings.save_setting("non_existent_key", "some_value")
        captured = capsys.readouterr()
        assert "Unknown setting" in captured.out
