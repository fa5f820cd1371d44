# portraitgen/prompts.py
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


# Default middle fragment for same-person prompts.
DEFAULT_SAME_PERSON_PROMPT = "give them a hairstyle that suits them the most"

SAME_PERSON_PREFIX = (
    "Generate a photorealistic image of the same person from the reference photo, but "
)

SAME_PERSON_SUFFIX = (
    ". It is essential to preserve their exact facial identity, "
    "ensuring they remain fully recognizable."
)


def build_prompt(fragment: str | None = None, full_prompt: str | None = None) -> str:
    """
    Returns the text sent alongside the reference photo.

    A non-empty full prompt is used verbatim. Otherwise the fragment (or the
    default fragment when none is given) is wrapped in the same-person
    prefix and suffix.
    """
    if full_prompt:
        return full_prompt
    if fragment is None:
        fragment = DEFAULT_SAME_PERSON_PROMPT
    return SAME_PERSON_PREFIX + fragment + SAME_PERSON_SUFFIX
