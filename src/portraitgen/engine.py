# portraitgen/engine.py
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


import abc
from dataclasses import dataclass

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from .errors import ApiRequestError, ClientInitError, NoCandidatesError


@dataclass
class ResponsePart:
    """One part of a model response: text, binary data, or neither."""

    text: str = ""
    data: bytes | None = None
    mime_type: str | None = None

    @property
    def is_text(self) -> bool:
        return bool(self.text)

    @property
    def is_image(self) -> bool:
        return self.data is not None


class ImageEngine(abc.ABC):
    """Abstract base class for an image generation provider."""

    def __init__(self, api_key: str):
        self.api_key = api_key

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """The name of the engine (e.g., 'gemini')."""
        pass

    @abc.abstractmethod
    def generate(
        self, model: str, prompt: str, image_bytes: bytes, mime_type: str
    ) -> list[ResponsePart]:
        """
        Sends the prompt and the reference image in a single request.

        Returns the parts of the first candidate in the order the service
        produced them. Raises a RemoteServiceError subclass on failure.
        """
        pass


class GeminiImageEngine(ImageEngine):
    """Image engine backed by the google-genai client."""

    def __init__(self, api_key: str):
        super().__init__(api_key)
        try:
            self._client = genai.Client(api_key=api_key)
        except (ValueError, genai_errors.APIError, httpx.HTTPError) as e:
            raise ClientInitError(f"Failed to create Gemini AI client: {e}") from e

    @property
    def name(self) -> str:
        return "gemini"

    def build_contents(
        self, prompt: str, image_bytes: bytes, mime_type: str
    ) -> list[types.Content]:
        parts = [
            types.Part.from_text(text=prompt),
            types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
        ]
        return [types.Content(role="user", parts=parts)]

    def generate(
        self, model: str, prompt: str, image_bytes: bytes, mime_type: str
    ) -> list[ResponsePart]:
        try:
            response = self._client.models.generate_content(
                model=model, contents=self.build_contents(prompt, image_bytes, mime_type)
            )
        except (genai_errors.APIError, httpx.HTTPError) as e:
            raise ApiRequestError(
                f"Failed to generate content with Gemini AI: {e}"
            ) from e

        if not response.candidates:
            raise NoCandidatesError(
                "No candidates returned from Gemini AI - "
                "the request may have been filtered or failed"
            )
        return self.parse_parts(response.candidates[0])

    @staticmethod
    def parse_parts(candidate) -> list[ResponsePart]:
        content = getattr(candidate, "content", None)
        if content is None or not content.parts:
            return []

        parsed = []
        for part in content.parts:
            inline = part.inline_data
            parsed.append(
                ResponsePart(
                    text=part.text or "",
                    data=inline.data if inline is not None else None,
                    mime_type=inline.mime_type if inline is not None else None,
                )
            )
        return parsed
