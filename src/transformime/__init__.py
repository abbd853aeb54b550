"""Mimetype transformer registry and dispatch engine for notebook outputs."""

__version__ = "0.1.0"

from transformime.artifacts import (
    Artifact,
    ImageArtifact,
    MarkupArtifact,
    MathArtifact,
    ScriptArtifact,
    TextArtifact,
)
from transformime.errors import ConfigurationError, RenderError, TransformimeError
from transformime.transformer import Transformer, TransformerCatalog
from transformime.transformers import (
    ConsoleTextTransformer,
    HTMLTransformer,
    ImageTransformer,
    JavascriptTransformer,
    JSONTransformer,
    LatexTransformer,
    MarkdownTransformer,
    SVGTransformer,
    TextTransformer,
)
from transformime.transformime import Transformime
from transformime.typeset import NullTypesetter, Typesetter, TypesetState
from transformime.display import DisplaySurface, HTMLDisplaySurface
from transformime.config import (
    TransformimeConfig,
    build_transformime,
    default_transformime,
)

__all__ = [
    # Dispatcher
    "Transformime",
    "Transformer",
    "TransformerCatalog",
    # Built-in transformers
    "ConsoleTextTransformer",
    "HTMLTransformer",
    "ImageTransformer",
    "JSONTransformer",
    "JavascriptTransformer",
    "LatexTransformer",
    "MarkdownTransformer",
    "SVGTransformer",
    "TextTransformer",
    # Artifacts
    "Artifact",
    "ImageArtifact",
    "MarkupArtifact",
    "MathArtifact",
    "ScriptArtifact",
    "TextArtifact",
    # Typesetting and display
    "DisplaySurface",
    "HTMLDisplaySurface",
    "NullTypesetter",
    "TypesetState",
    "Typesetter",
    # Configuration
    "TransformimeConfig",
    "build_transformime",
    "default_transformime",
    # Errors
    "ConfigurationError",
    "RenderError",
    "TransformimeError",
]
