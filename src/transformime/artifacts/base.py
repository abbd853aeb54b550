"""Base class for displayable artifacts."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from transformime.display import DisplaySurface


@dataclass
class Artifact(ABC):
    """A displayable unit produced by a transformer.

    The dispatcher never inspects artifacts. Display surfaces attach them and
    render them to HTML fragments.

    Attributes:
        mimetype: The mimetype the artifact was produced from.
    """

    mimetype: str
    _surface: Optional["DisplaySurface"] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def surface(self) -> Optional["DisplaySurface"]:
        """The display surface this artifact is attached to, if any."""
        return self._surface

    @property
    def is_attached(self) -> bool:
        """Whether the artifact is attached to a display surface."""
        return self._surface is not None

    def attach(self, surface: "DisplaySurface") -> None:
        """Attach the artifact to a display surface.

        Attaching to the surface the artifact is already attached to does
        nothing. If `on_after_attach` raises, the artifact stays detached so
        a later attach retries it.

        Args:
            surface: The display surface
        """
        if self._surface is surface:
            return
        self.on_after_attach(surface)
        self._surface = surface

    def on_after_attach(self, surface: "DisplaySurface") -> None:
        """Handle the artifact becoming part of a display surface.

        Override this to run deferred work such as typesetting.
        """
        pass

    @abstractmethod
    def render_html(self) -> str:
        """Render the artifact as an HTML fragment."""
        pass
