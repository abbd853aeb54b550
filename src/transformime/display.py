"""Display surfaces that attach artifacts and produce output."""

import html
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from pygments.formatters import HtmlFormatter

from transformime.artifacts.base import Artifact
from transformime.artifacts.math import MathArtifact
from transformime.artifacts.script import script_tag
from transformime.static import render_template
from transformime.typeset import NullTypesetter, Typesetter

logger = logging.getLogger(__name__)

DEFAULT_MATHJAX_URL = (
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-chtml.js"
)


class DisplaySurface(ABC):
    """An output area that artifacts are attached to.

    Attaching an artifact triggers its deferred work: math artifacts are
    typeset with `typesetter` if dirty, script artifacts run through
    `execute_script`.
    """

    def __init__(self, typesetter: Optional[Typesetter] = None):
        """Initialize the surface.

        Args:
            typesetter: Typesetting delegate (default: NullTypesetter)
        """
        self.typesetter = typesetter or NullTypesetter()
        self.artifacts: List[Artifact] = []

    def attach(self, artifact: Artifact) -> Artifact:
        """Attach an artifact to this surface.

        Attaching an artifact that is already attached here does nothing.

        Returns:
            The attached artifact
        """
        if artifact.surface is self:
            return artifact
        artifact.attach(self)
        self.artifacts.append(artifact)
        logger.debug(f"Attached {type(artifact).__name__} ({artifact.mimetype})")
        return artifact

    @abstractmethod
    def execute_script(self, mimetype: str, source: str) -> None:
        """Run a script in this surface's scripting context."""
        pass


class HTMLDisplaySurface(DisplaySurface):
    """A display surface that renders attached artifacts to an HTML page.

    Scripts executed on the surface are emitted as <script> elements after
    the outputs, so they run when the page loads.
    """

    def __init__(
        self,
        typesetter: Optional[Typesetter] = None,
        mathjax_url: Optional[str] = DEFAULT_MATHJAX_URL,
    ):
        """Initialize the surface.

        Args:
            typesetter: Typesetting delegate (default: NullTypesetter)
            mathjax_url: MathJax loader included when math is attached,
                or None to never include it
        """
        super().__init__(typesetter)
        self.mathjax_url = mathjax_url
        self.scripts: List[str] = []

    def execute_script(self, mimetype: str, source: str) -> None:
        """Queue the script to run when the page loads."""
        self.scripts.append(script_tag(mimetype, source))

    def render_fragment(self) -> str:
        """Render the attached artifacts as a sequence of HTML fragments."""
        return "\n".join(artifact.render_html() for artifact in self.artifacts)

    def render_page(self, title: str = "Output") -> str:
        """Render a complete HTML page with all attached artifacts.

        Args:
            title: Title for the HTML page

        Returns:
            Complete HTML page as a string
        """
        has_math = any(isinstance(a, MathArtifact) for a in self.artifacts)
        outputs = [
            {"mimetype": html.escape(a.mimetype), "html": a.render_html()}
            for a in self.artifacts
        ]
        return render_template(
            "page.html",
            title=html.escape(title),
            outputs=outputs,
            scripts=self.scripts,
            mathjax_url=self.mathjax_url if has_math else None,
            extra_css=HtmlFormatter(
                cssclass="transformime-json-source"
            ).get_style_defs(".transformime-json-source"),
        )
