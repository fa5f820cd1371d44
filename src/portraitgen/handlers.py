# portraitgen/handlers.py
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


import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from . import api_client, prompts, utils
from .engine import GeminiImageEngine, ImageEngine
from .errors import ConfigurationError, MissingApiKeyError
from .logger import log
from .settings import save_setting, settings


@dataclass
class GenerationOptions:
    """Everything a single run needs besides the API key."""

    input_path: Path | str
    output_path: Path | str
    prompt_fragment: str = prompts.DEFAULT_SAME_PERSON_PROMPT
    full_prompt: str = ""


@dataclass
class GenerationResult:
    prompt: str
    texts: list[str] = field(default_factory=list)
    images_written: int = 0
    output_path: Path | None = None


def run_generation(
    options: GenerationOptions,
    api_key: str,
    engine_factory: Callable[[str], ImageEngine] = GeminiImageEngine,
    model: str | None = None,
    mime_type: str | None = None,
    out: TextIO | None = None,
) -> GenerationResult:
    """
    Sends the input photo with the prompt and saves the returned image.

    Checks run in order: paths, then the API key, then the input file, then
    the remote call. The model and MIME type come from settings unless given
    and must not be empty. Text parts of the response are echoed to `out`;
    every image part is written to the output path, so the last one wins.
    """
    out = out or sys.stdout
    model = model or settings["model"]
    mime_type = mime_type or settings["input_mime_type"]

    if not options.input_path:
        raise ConfigurationError("Input file path cannot be empty.")
    if not options.output_path:
        raise ConfigurationError("Output file path cannot be empty.")
    if not model:
        raise ConfigurationError("Model name cannot be empty; check the 'model' setting.")
    if not mime_type:
        raise ConfigurationError(
            "Input MIME type cannot be empty; check the 'input_mime_type' setting."
        )
    input_path = Path(options.input_path)
    output_path = Path(options.output_path)

    prompt = prompts.build_prompt(options.prompt_fragment, options.full_prompt)

    if not api_key:
        raise MissingApiKeyError("An API key is required to contact the service.")

    image_bytes = utils.read_input_image(input_path)
    log.debug("Read %s from %s", utils.format_bytes(len(image_bytes)), input_path)

    engine = engine_factory(api_key)

    print(f"{utils.USER_PROMPT}YOU:{utils.RESET_COLOR} {prompt}", file=out)
    parts = api_client.perform_generation_request(
        engine, model, prompt, image_bytes, mime_type
    )

    result = GenerationResult(prompt=prompt)
    print(f"{utils.ASSISTANT_PROMPT}AGENT:{utils.RESET_COLOR} ", end="", file=out)
    for part in parts:
        if part.is_text:
            print(part.text, file=out)
            result.texts.append(part.text)
            continue
        if not part.is_image:
            continue
        utils.write_output_image(output_path, part.data)
        result.images_written += 1
        result.output_path = output_path

    if result.images_written:
        if result.images_written > 1:
            log.warning(
                "Response held %d images; only the last was kept in %s",
                result.images_written,
                output_path,
            )
        utils.log_image_generation(model, prompt, str(input_path), str(output_path))
    else:
        log.warning("Response contained no image data; %s was not written.", output_path)
    return result


def handle_generate(args: argparse.Namespace) -> None:
    """Runs one generation from parsed command-line arguments."""
    options = GenerationOptions(
        input_path=args.input,
        output_path=args.output,
        prompt_fragment=args.same_person_prompt,
        full_prompt=args.full_prompt,
    )
    api_key = api_client.check_api_key()
    result = run_generation(options, api_key, model=args.model)
    if result.output_path is not None:
        print(
            f"{utils.SYSTEM_MSG}--> Image saved to {result.output_path}{utils.RESET_COLOR}",
            file=sys.stderr,
        )


def handle_settings(args: argparse.Namespace) -> None:
    """Lists the current settings, or saves one when a key and value are given."""
    if args.key is None:
        for key, value in settings.items():
            print(f"{key}: {value}")
        return
    if args.value is None:
        print(f"{args.key}: {settings.get(args.key, '<unknown setting>')}")
        return
    save_setting(args.key, args.value)
