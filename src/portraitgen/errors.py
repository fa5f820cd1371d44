# portraitgen/errors.py
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

"""
Failure types for a generation run.

Every error names the class of failure it belongs to through ``kind`` so a
front-end can decide how to report it without inspecting messages:

- ``configuration``: a required path or the API key is missing.
- ``io``: the input image cannot be read or the output cannot be written.
- ``remote``: the client could not be built, the call failed, or the
  service answered without any candidates.
"""

from typing import Any


class GenerationError(Exception):
    """Base class for every failure of a generation run."""

    kind: str = "error"

    def __init__(self, message: str, *, data: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "error": type(self).__name__,
            "message": self.message,
            "data": self.data,
        }


class ConfigurationError(GenerationError):
    kind = "configuration"


class MissingApiKeyError(ConfigurationError):
    """Raised when the API key environment variable is unset or empty."""


class FileAccessError(GenerationError):
    kind = "io"


class InputFileError(FileAccessError):
    pass


class OutputFileError(FileAccessError):
    pass


class RemoteServiceError(GenerationError):
    kind = "remote"


class ClientInitError(RemoteServiceError):
    pass


class ApiRequestError(RemoteServiceError):
    """Raised when the generation call itself fails."""


class NoCandidatesError(RemoteServiceError):
    """The call succeeded but returned nothing, usually because of filtering."""
