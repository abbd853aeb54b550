"""Executable script artifact."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from transformime.artifacts.base import Artifact

if TYPE_CHECKING:
    from transformime.display import DisplaySurface


@dataclass
class ScriptArtifact(Artifact):
    """An artifact that runs a script when attached to a display surface.

    The script runs in the scripting context of the surface, once per
    surface it is attached to.

    Attributes:
        source: The script source.
    """

    source: str = ""

    def on_after_attach(self, surface: "DisplaySurface") -> None:
        """Execute the script on the surface."""
        surface.execute_script(self.mimetype, self.source)

    def render_script(self) -> str:
        """Render the script as a <script> element."""
        return script_tag(self.mimetype, self.source)

    def render_html(self) -> str:
        """Render the output container the script may write into."""
        return '<div class="transformime-javascript"></div>'


def script_tag(mimetype: str, source: str) -> str:
    """Build a <script> element; `</` is escaped so the source cannot close it."""
    body = source.replace("</", "<\\/")
    return f'<script type="{mimetype}">{body}</script>'
