# portraitgen/settings.py
# portraitgen: A command-line tool for same-person portrait generation.
# Copyright (C) 2025 Dank A. Saurus

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY;
# without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

import json
from typing import Any

from . import config, utils
from .logger import log


def _get_default_settings() -> dict[str, Any]:
    """Returns a dictionary of the default application settings."""
    return {
        # --- Model ---
        "model": "gemini-2.5-flash-image-preview",
        "input_mime_type": "image/jpeg",
        # --- Paths ---
        "default_input_path": "./input.jpeg",
        "default_output_path": "./output.png",
    }


def _load_settings() -> dict[str, Any]:
    """Loads settings from the JSON file, merging them with defaults."""
    defaults = _get_default_settings()
    if not config.SETTINGS_FILE.exists():
        return defaults
    try:
        with open(config.SETTINGS_FILE, encoding="utf-8") as f:
            user_settings = json.load(f)
        defaults.update(user_settings)
        return defaults
    except (OSError, json.JSONDecodeError) as e:
        log.warning("Could not load settings file: %s. Using defaults.", e)
        return defaults


def _validate_setting(key: str, value: str) -> str:
    """Returns the cleaned value for a setting, or raises ValueError."""
    value = value.strip()
    if not value:
        raise ValueError(f"Setting '{key}' cannot be empty.")
    if key == "input_mime_type" and not value.startswith("image/"):
        raise ValueError(f"'{value}' is not an image MIME type (e.g. image/jpeg).")
    return value


def save_setting(key: str, value: str) -> None:
    """Validates a single setting and saves it to the JSON file."""
    default_settings = _get_default_settings()
    if key not in default_settings:
        print(f"{utils.SYSTEM_MSG}--> Unknown setting: '{key}'.{utils.RESET_COLOR}")
        return

    try:
        value = _validate_setting(key, value)
    except ValueError as e:
        print(f"{utils.SYSTEM_MSG}--> Error: {e}{utils.RESET_COLOR}")
        return

    current_settings = _load_settings()
    current_settings[key] = value

    user_settings_to_save = {
        k: v for k, v in current_settings.items() if k in default_settings
    }

    try:
        utils.ensure_dir_exists(config.CONFIG_DIR)
        with open(config.SETTINGS_FILE, "w", encoding="utf-8") as f:
            json.dump(user_settings_to_save, f, indent=2)
        print(
            f"{utils.SYSTEM_MSG}--> Setting '{key}' updated to '{value}'.{utils.RESET_COLOR}"
        )
        settings[key] = value
    except OSError as e:
        log.error("Failed to save settings: %s", e)


settings: dict[str, Any] = _load_settings()
