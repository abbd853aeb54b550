"""Transformer for LaTeX math."""

from transformime.artifacts.base import Artifact
from transformime.artifacts.math import MathArtifact
from transformime.transformer import Transformer, TransformerCatalog


@TransformerCatalog.register("latex")
class LatexTransformer(Transformer):
    """A transformer for LaTeX data.

    The artifact holds the raw LaTeX source as text. Turning it into rendered
    math is left to the typesetter of the display surface.
    """

    mimetypes = ("text/latex",)

    def create_artifact(self, mimetype: str, data: str) -> Artifact:
        """Wrap the LaTeX source in a math artifact."""
        artifact = MathArtifact(mimetype=mimetype)
        artifact.set_text_content(data)
        return artifact
