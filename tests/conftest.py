"""Pytest configuration and fixtures."""

import base64
from typing import List

import pytest

from transformime.artifacts.math import MathArtifact
from transformime.display import HTMLDisplaySurface
from transformime.transformers import HTMLTransformer, TextTransformer
from transformime.transformime import Transformime
from transformime.typeset import Typesetter

# PNG signature followed by an IHDR chunk header
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


class RecordingTypesetter(Typesetter):
    """Typesetter that records every artifact it is asked to typeset."""

    def __init__(self) -> None:
        """Initialize with an empty record."""
        self.calls: List[MathArtifact] = []

    def typeset(self, artifact: MathArtifact) -> None:
        """Record the call."""
        self.calls.append(artifact)


@pytest.fixture
def png_base64() -> str:
    """Base64 payload of a tiny PNG image."""
    return base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.fixture
def html_and_text() -> Transformime:
    """A dispatcher preferring HTML over plain text."""
    return Transformime(
        transformers=[TextTransformer(), HTMLTransformer()],
        order=["text/html", "text/plain"],
    )


@pytest.fixture
def typesetter() -> RecordingTypesetter:
    """A typesetter recording its calls."""
    return RecordingTypesetter()


@pytest.fixture
def surface(typesetter: RecordingTypesetter) -> HTMLDisplaySurface:
    """An HTML display surface using the recording typesetter."""
    return HTMLDisplaySurface(typesetter=typesetter)
