"""Transformers for plain and console text."""

from typing import Any

from ansi2html import Ansi2HTMLConverter

from transformime.artifacts.base import Artifact
from transformime.artifacts.text import MarkupArtifact, TextArtifact
from transformime.transformer import Transformer, TransformerCatalog


@TransformerCatalog.register("text")
class TextTransformer(Transformer):
    """A transformer for raw text content."""

    mimetypes = ("text/plain",)

    def create_artifact(self, mimetype: str, data: str) -> Artifact:
        """Wrap the text in a text-only artifact."""
        return TextArtifact(mimetype=mimetype, text=data)


@TransformerCatalog.register("console")
class ConsoleTextTransformer(Transformer):
    """A transformer for Jupyter console text with ANSI escape codes.

    Markup characters in the text are escaped before color and style codes
    are converted to styled spans, so console output can never inject markup.
    """

    mimetypes = ("application/vnd.jupyter.console-text",)

    def __init__(self, inline: bool = True, dark_bg: bool = False, **kwargs: Any):
        """Initialize the ANSI converter.

        Args:
            inline: Emit inline styles instead of CSS classes
            dark_bg: Use the color scheme for dark backgrounds
        """
        super().__init__(**kwargs)
        self._converter = Ansi2HTMLConverter(
            inline=inline, dark_bg=dark_bg, escaped=True, line_wrap=False
        )

    def create_artifact(self, mimetype: str, data: str) -> Artifact:
        """Convert the ANSI text to styled markup."""
        converted = self._converter.convert(data, full=False)
        markup = converted.rstrip("\n").replace("\n", "<br />")
        return MarkupArtifact(
            mimetype=mimetype, markup=markup, css_class="transformime-console"
        )
