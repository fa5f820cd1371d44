# portraitgen/api_client.py
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
from collections.abc import Mapping

from . import config
from .engine import ImageEngine, ResponsePart
from .errors import MissingApiKeyError, RemoteServiceError
from .logger import log


def check_api_key(environ: Mapping[str, str] | None = None) -> str:
    """Returns the API key from the environment, or raises MissingApiKeyError."""
    if environ is None:
        environ = os.environ
    api_key = environ.get(config.API_KEY_ENV_VAR)
    if not api_key:
        raise MissingApiKeyError(
            f"Environment variable '{config.API_KEY_ENV_VAR}' is not set."
        )
    return api_key


def _describe_parts(parts: list[ResponsePart]) -> list[dict]:
    """Summarizes response parts for the raw log without their binary payloads."""
    described = []
    for part in parts:
        if part.is_image:
            described.append(
                {"type": "image", "mime_type": part.mime_type, "bytes": len(part.data)}
            )
        elif part.is_text:
            described.append({"type": "text", "text": part.text})
        else:
            described.append({"type": "other"})
    return described


def perform_generation_request(
    engine: ImageEngine,
    model: str,
    prompt: str,
    image_bytes: bytes,
    mime_type: str,
) -> list[ResponsePart]:
    """
    Executes a single generation request and returns the response parts.
    Every attempt, failed or not, is summarized in the raw log.
    Raises RemoteServiceError on failure.
    """
    parts = None
    log_entry = {
        "timestamp": datetime.datetime.now().isoformat(),
        "request": {
            "engine": engine.name,
            "model": model,
            "prompt": prompt,
            "mime_type": mime_type,
            "image_bytes": len(image_bytes),
        },
    }
    log.info("Sending %s request to model %s", engine.name, model)
    try:
        parts = engine.generate(model, prompt, image_bytes, mime_type)
        log.info("Received %d response part(s)", len(parts))
        return parts
    except RemoteServiceError as e:
        log.error("%s: %s", type(e).__name__, e)
        log_entry["error"] = e.to_dict()
        raise
    finally:
        if parts is not None:
            log_entry["response"] = {"parts": _describe_parts(parts)}
        try:
            with open(config.RAW_LOG_FILE, "a", encoding="utf-8") as f:
                f.write(json.dumps(log_entry) + "\n")
        except IOError as e:
            log.warning("Could not write to raw log file: %s", e)
