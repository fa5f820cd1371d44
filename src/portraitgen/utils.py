# portraitgen/utils.py
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



import datetime
import json
import os
from pathlib import Path

from . import config
from .errors import InputFileError, OutputFileError
from .logger import log

USER_PROMPT = "\033[94m"
ASSISTANT_PROMPT = "\033[92m"
SYSTEM_MSG = "\033[93m"
RESET_COLOR = "\033[0m"


def ensure_dir_exists(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def format_bytes(byte_count: int) -> str:
    """Formats a byte count into a human-readable string (KB, MB, etc.)."""
    if byte_count is None:
        return "0 B"
    power = 1024
    n = 0
    power_labels = {0: "B", 1: "KB", 2: "MB", 3: "GB", 4: "TB"}
    while byte_count >= power and n < len(power_labels) - 1:
        byte_count /= power
        n += 1
    return f"{byte_count:.2f} {power_labels[n]}"


def read_input_image(path: Path) -> bytes:
    """Reads the whole input image into memory."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise InputFileError(
            f'Failed to read input image file "{path}": {e}', data={"path": str(path)}
        ) from e


def write_output_image(path: Path, data: bytes) -> None:
    """
    Writes image bytes to the output path, replacing any existing file.

    A newly created file gets config.OUTPUT_FILE_MODE (subject to the umask).
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, config.OUTPUT_FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        raise OutputFileError(
            f'Failed to write output image to "{path}": {e}', data={"path": str(path)}
        ) from e


def log_image_generation(
    model: str, prompt: str, input_path: str, output_path: str
) -> None:
    """
    Writes a record of a saved image to the image log file.

    Args:
        model: The model used for generation.
        prompt: The full prompt sent with the reference photo.
        input_path: The reference photo that was sent.
        output_path: Where the generated image was written.
    """
    try:
        log_entry = {
            "timestamp": datetime.datetime.now().isoformat(),
            "model": model,
            "prompt": prompt,
            "input": input_path,
            "file": output_path,
        }
        with open(config.IMAGE_LOG_FILE, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry) + "\n")
    except OSError as e:
        log.warning("Could not write to image log file: %s", e)
