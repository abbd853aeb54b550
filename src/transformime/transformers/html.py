"""Transformers for HTML and Markdown content."""

import logging
from typing import Any, List, Optional, Sequence

import markdown

from transformime.artifacts.base import Artifact
from transformime.artifacts.math import MathArtifact
from transformime.transformer import Transformer, TransformerCatalog

logger = logging.getLogger(__name__)

DEFAULT_MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]


@TransformerCatalog.register("html")
class HTMLTransformer(Transformer):
    """A transformer for raw HTML.

    The markup is trusted as-is. It may embed math, so the artifact is
    typeset when attached.
    """

    mimetypes = ("text/html",)

    def create_artifact(self, mimetype: str, data: str) -> Artifact:
        """Wrap the markup in a math-aware artifact."""
        artifact = MathArtifact(mimetype=mimetype)
        artifact.set_inner_html(data)
        return artifact


@TransformerCatalog.register("markdown")
class MarkdownTransformer(Transformer):
    """A transformer for Markdown, converted to HTML with python-markdown."""

    mimetypes = ("text/markdown",)

    def __init__(
        self, extensions: Optional[Sequence[str]] = None, **kwargs: Any
    ):
        """Initialize the transformer.

        Args:
            extensions: python-markdown extensions to enable
        """
        super().__init__(**kwargs)
        self.extensions: List[str] = list(
            DEFAULT_MARKDOWN_EXTENSIONS if extensions is None else extensions
        )

    def create_artifact(self, mimetype: str, data: str) -> Artifact:
        """Convert the Markdown and wrap it in a math-aware artifact."""
        html = markdown.markdown(data, extensions=self.extensions)
        logger.debug(f"Converted {len(data)} chars of markdown")
        artifact = MathArtifact(mimetype=mimetype)
        artifact.set_inner_html(html)
        return artifact
