"""Transformers for raster and vector images."""

import base64
import binascii

from bs4 import BeautifulSoup

from transformime.artifacts.base import Artifact
from transformime.artifacts.image import ImageArtifact
from transformime.artifacts.text import MarkupArtifact
from transformime.errors import RenderError
from transformime.transformer import Transformer, TransformerCatalog


@TransformerCatalog.register("image")
class ImageTransformer(Transformer):
    """A transformer for base64-encoded raster images."""

    mimetypes = ("image/png", "image/jpeg", "image/gif")

    def create_artifact(self, mimetype: str, data: str) -> Artifact:
        """Build an image artifact referencing a data URL."""
        # Notebook files wrap base64 payloads over several lines
        payload = "".join(data.split())
        try:
            base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise RenderError(
                f"Invalid base64 payload for {mimetype}: {e}",
                mimetype=mimetype,
            ) from e
        return ImageArtifact(mimetype=mimetype, data=payload)


@TransformerCatalog.register("svg")
class SVGTransformer(Transformer):
    """A transformer for inline SVG markup."""

    mimetypes = ("image/svg+xml",)

    def create_artifact(self, mimetype: str, data: str) -> Artifact:
        """Check the markup contains an <svg> element and wrap it.

        Raises:
            RenderError: If parsing the markup yields no <svg> element
        """
        if BeautifulSoup(data, "html.parser").find("svg") is None:
            raise RenderError(
                "Failed to create <svg> element", mimetype=mimetype
            )
        return MarkupArtifact(
            mimetype=mimetype, markup=data, css_class="transformime-svg"
        )
