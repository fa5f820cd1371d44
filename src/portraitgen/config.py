# portraitgen/config.py
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


import os
from pathlib import Path

# Base directory for user-specific configuration files.
CONFIG_DIR = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config')) / 'portraitgen'

# Base directory for all application-generated data files.
DATA_DIR = Path(os.environ.get('XDG_DATA_HOME', Path.home() / '.local/share')) / 'portraitgen'

# --- Log Directory (under DATA_DIR) ---
LOG_DIRECTORY = DATA_DIR / "logs"

# --- Specific File Paths ---
SETTINGS_FILE = CONFIG_DIR / "settings.json"
DOTENV_FILE = CONFIG_DIR / ".env"
IMAGE_LOG_FILE = LOG_DIRECTORY / "image_log.jsonl"
RAW_LOG_FILE = LOG_DIRECTORY / "raw.log"
ROTATING_LOG_FILE = LOG_DIRECTORY / "portraitgen.log"

# --- Remote Service ---
# The only credential source. It is read, never logged.
API_KEY_ENV_VAR = "GEMINI_API_KEY"

# --- Output ---
# Applied when the output file is created; an existing file keeps its mode.
OUTPUT_FILE_MODE = 0o644
