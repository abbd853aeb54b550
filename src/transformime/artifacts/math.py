"""Math-aware artifact with deferred typesetting."""

import html
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from transformime.artifacts.base import Artifact
from transformime.typeset import TypesetState, Typesetter

if TYPE_CHECKING:
    from transformime.display import DisplaySurface


@dataclass
class MathArtifact(Artifact):
    """An artifact whose content may contain math that needs typesetting.

    Setting content marks the artifact dirty. Typesetting marks it clean.
    Attaching the artifact to a display surface typesets it only if it is
    dirty, so content is typeset once per change.

    Attributes:
        content: Text or HTML content of the artifact.
        is_html: Whether `content` is markup rather than plain text.
        state: Current typesetting state.
    """

    content: str = ""
    is_html: bool = False
    state: TypesetState = field(default=TypesetState.CLEAN, init=False)

    def set_text_content(self, content: str) -> None:
        """Set plain text content.

        Use this instead of assigning `content` directly so the artifact is
        typeset again.
        """
        self.content = content
        self.is_html = False
        self.state = TypesetState.DIRTY

    def set_inner_html(self, content: str) -> None:
        """Set HTML content.

        Use this instead of assigning `content` directly so the artifact is
        typeset again.
        """
        self.content = content
        self.is_html = True
        self.state = TypesetState.DIRTY

    @property
    def is_dirty(self) -> bool:
        """Whether the content changed since the last typeset pass."""
        return self.state is TypesetState.DIRTY

    def typeset(self, typesetter: Typesetter) -> None:
        """Typeset the content and mark the artifact clean."""
        typesetter.typeset(self)
        self.state = TypesetState.CLEAN

    def ensure_typeset(self, typesetter: Typesetter) -> bool:
        """Typeset the content if it is dirty.

        Returns:
            True if a typeset pass ran
        """
        if not self.is_dirty:
            return False
        self.typeset(typesetter)
        return True

    def on_after_attach(self, surface: "DisplaySurface") -> None:
        """Typeset on attach if the content is dirty."""
        self.ensure_typeset(surface.typesetter)

    def render_html(self) -> str:
        """Render the content; plain text is escaped."""
        kind = self.mimetype.split("/")[-1]
        body = (
            self.content
            if self.is_html
            else html.escape(self.content, quote=False)
        )
        return f'<div class="transformime-math transformime-{kind}">{body}</div>'
