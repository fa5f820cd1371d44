#!/usr/bin/env python3
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

# -*- coding: utf-8 -*-

"""
Same-Person Portrait Generator
Main entry point for the application.
"""

import argparse
import sys

from dotenv import load_dotenv

from . import config, handlers, prompts, utils
from .errors import FileAccessError, GenerationError, MissingApiKeyError
from .logger import enable_debug, log
from .settings import settings


class CustomHelpFormatter(
    argparse.RawTextHelpFormatter, argparse.ArgumentDefaultsHelpFormatter
):
    """Custom formatter for argparse help messages."""


def build_generate_parser() -> argparse.ArgumentParser:
    """Builds the parser for the default `generate` command."""
    parser = argparse.ArgumentParser(
        prog="portraitgen",
        description="Generate a new photo of the same person from a reference photo.",
        formatter_class=CustomHelpFormatter,
    )
    io_group = parser.add_argument_group("Input & Output")
    prompt_group = parser.add_argument_group("Prompt")
    core_group = parser.add_argument_group("Core Execution")

    io_group.add_argument(
        "-input",
        "--input",
        type=str,
        default=settings["default_input_path"],
        metavar="PATH",
        help="Path to input image file.",
    )
    io_group.add_argument(
        "-output",
        "--output",
        type=str,
        default=settings["default_output_path"],
        metavar="PATH",
        help="Path to output image file.\nAn existing file is overwritten.",
    )
    prompt_group.add_argument(
        "-same-person-prompt",
        "--same-person-prompt",
        type=str,
        default=prompts.DEFAULT_SAME_PERSON_PROMPT,
        metavar="TEXT",
        help="Custom prompt for same-person image generation.",
    )
    prompt_group.add_argument(
        "-full-prompt",
        "--full-prompt",
        type=str,
        default="",
        metavar="TEXT",
        help="Full custom prompt (overrides -same-person-prompt).",
    )
    core_group.add_argument(
        "-m",
        "--model",
        type=str,
        default=settings["model"],
        help="Specify the model to use, overriding the default.",
    )
    core_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def build_settings_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portraitgen settings",
        description="Show or change persistent settings.",
    )
    parser.add_argument("key", nargs="?", help="Setting to show or change.")
    parser.add_argument("value", nargs="?", help="New value for the setting.")
    return parser


def report_error(error: GenerationError) -> None:
    """Prints a terminating error message for the user."""
    log.error("%s (%s): %s", type(error).__name__, error.kind, error)
    if isinstance(error, MissingApiKeyError):
        print(
            f"{utils.SYSTEM_MSG}Configuration Error:{utils.RESET_COLOR}",
            file=sys.stderr,
        )
        print(f"  {error}", file=sys.stderr)
        print(
            "\nExport the key, or create a .env file at the following location:",
            file=sys.stderr,
        )
        print(f"  {config.DOTENV_FILE}", file=sys.stderr)
        print("\nExample .env content:", file=sys.stderr)
        print(f"  {config.API_KEY_ENV_VAR}=AIza...", file=sys.stderr)
        return
    print(f"Error: {error}", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    """Parses arguments and orchestrates the application flow."""
    try:
        utils.ensure_dir_exists(config.CONFIG_DIR)
    except OSError as e:
        report_error(
            FileAccessError(
                f'Could not create config directory "{config.CONFIG_DIR}": {e}',
                data={"path": str(config.CONFIG_DIR)},
            )
        )
        sys.exit(1)
    load_dotenv(dotenv_path=config.DOTENV_FILE)

    args_list = sys.argv[1:] if argv is None else list(argv)
    is_settings_command = len(args_list) > 0 and args_list[0] == "settings"
    is_generate_command = len(args_list) > 0 and args_list[0] == "generate"

    if is_settings_command:
        args = build_settings_parser().parse_args(args_list[1:])
        handlers.handle_settings(args)
        return

    if is_generate_command:
        args_list = args_list[1:]

    args = build_generate_parser().parse_args(args_list)
    if args.debug:
        enable_debug()

    try:
        handlers.handle_generate(args)
    except GenerationError as e:
        report_error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
