# tests/conftest.py
"""
This module contains shared fixtures for the pytest suite.
Fixtures defined here are automatically available to all test functions.
"""

import pytest
from pyfakefs.fake_filesystem_unittest import Patcher

from portraitgen.engine import ImageEngine, ResponsePart

# Enough of a JPEG header to look like one; the service is never contacted.
FAKE_JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01fake-jpeg-body\xff\xd9"
FAKE_PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png-body"


class FakeImageEngine(ImageEngine):
    """An ImageEngine that replays canned parts and records every call."""

    def __init__(self, api_key, parts=None, error=None):
        super().__init__(api_key)
        self.parts = parts or []
        self.error = error
        self.calls = []

    @property
    def name(self):
        return "fake"

    def generate(self, model, prompt, image_bytes, mime_type):
        self.calls.append(
            {
                "model": model,
                "prompt": prompt,
                "image_bytes": image_bytes,
                "mime_type": mime_type,
            }
        )
        if self.error is not None:
            raise self.error
        return list(self.parts)


class FakeEngineFactory:
    """Callable standing in for GeminiImageEngine; remembers what it built."""

    def __init__(self, parts=None, error=None):
        self.parts = parts
        self.error = error
        self.engines = []

    def __call__(self, api_key):
        engine = FakeImageEngine(api_key, self.parts, self.error)
        self.engines.append(engine)
        return engine

    @property
    def calls(self):
        return [call for engine in self.engines for call in engine.calls]


@pytest.fixture
def fake_fs():
    """
    Initializes a fake filesystem using pyfakefs for tests that
    require filesystem interactions (input photos, output images, logs).
    """
    with Patcher() as patcher:
        yield patcher.fs


@pytest.fixture
def input_photo(fake_fs):
    """A reference photo on the fake filesystem."""
    fake_fs.create_file("/work/photo.jpg", contents=FAKE_JPEG_BYTES)
    return "/work/photo.jpg"


@pytest.fixture
def engine_factory():
    """A factory whose engines answer with one text part and one image part."""
    return FakeEngineFactory(
        parts=[
            ResponsePart(text="Here is the result"),
            ResponsePart(data=FAKE_PNG_BYTES, mime_type="image/png"),
        ]
    )


@pytest.fixture
def fake_engine_cls():
    """The FakeImageEngine class, for tests that build engines directly."""
    return FakeImageEngine
