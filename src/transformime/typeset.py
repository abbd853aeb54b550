"""Typesetting delegates for math-bearing artifacts.

Typesetting is the post-processing pass that makes math visually correct
(MathJax, KaTeX, ...). It is deferred until an artifact is attached to a
display surface and must be idempotent: typesetting an artifact twice looks
the same as typesetting it once.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from transformime.artifacts.math import MathArtifact

logger = logging.getLogger(__name__)


class TypesetState(Enum):
    """Typesetting state of a math artifact."""

    CLEAN = "clean"
    DIRTY = "dirty"


class Typesetter(ABC):
    """A delegate that typesets math artifacts."""

    @abstractmethod
    def typeset(self, artifact: "MathArtifact") -> None:
        """Typeset the content of an artifact.

        Must be safe to call several times on the same artifact.

        Args:
            artifact: The artifact to typeset
        """
        pass


class NullTypesetter(Typesetter):
    """Typesetter that leaves content untouched.

    Used when math is typeset by the page itself, e.g. by a MathJax script
    loaded by the display surface.
    """

    def typeset(self, artifact: "MathArtifact") -> None:
        """Do nothing."""
        logger.debug(f"Skipping typesetting of {artifact.mimetype} artifact")
