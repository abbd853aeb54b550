"""Displayable artifacts produced by transformers."""

from transformime.artifacts.base import Artifact
from transformime.artifacts.image import ImageArtifact
from transformime.artifacts.math import MathArtifact
from transformime.artifacts.script import ScriptArtifact
from transformime.artifacts.text import MarkupArtifact, TextArtifact

__all__ = [
    "Artifact",
    "ImageArtifact",
    "MarkupArtifact",
    "MathArtifact",
    "ScriptArtifact",
    "TextArtifact",
]
