"""Text and markup artifacts."""

import html
from dataclasses import dataclass

from transformime.artifacts.base import Artifact


@dataclass
class TextArtifact(Artifact):
    """A text-only artifact. Markup in the text is shown literally."""

    text: str = ""

    def render_html(self) -> str:
        """Render the text escaped inside a <pre> block."""
        escaped = html.escape(self.text, quote=False)
        return f'<pre class="transformime-text">{escaped}</pre>'


@dataclass
class MarkupArtifact(Artifact):
    """An artifact holding markup that is trusted as-is.

    Sandboxing untrusted markup is the responsibility of the caller.
    """

    markup: str = ""
    css_class: str = "transformime-markup"

    def render_html(self) -> str:
        """Render the markup inside a wrapper element."""
        return f'<div class="{self.css_class}">{self.markup}</div>'
