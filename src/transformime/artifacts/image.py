"""Image artifact."""

import html
from dataclasses import dataclass

from transformime.artifacts.base import Artifact


@dataclass
class ImageArtifact(Artifact):
    """An image referencing its payload through a data URL.

    Attributes:
        data: Base64-encoded image bytes.
        alt: Alternative text for the image.
    """

    data: str = ""
    alt: str = ""

    @property
    def src(self) -> str:
        """The data URL of the image."""
        return f"data:{self.mimetype};base64,{self.data}"

    def render_html(self) -> str:
        """Render an <img> tag for the image."""
        alt = html.escape(self.alt)
        return (
            f'<div class="transformime-image">'
            f'<img src="{self.src}" alt="{alt}" /></div>'
        )
