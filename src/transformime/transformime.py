"""Mimebundle dispatcher."""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from transformime.artifacts.base import Artifact
from transformime.errors import ConfigurationError, RenderError
from transformime.transformer import Transformer

logger = logging.getLogger(__name__)


class Transformime:
    """A composite transformer for mimebundles.

    When rendering a mimebundle, a mimetype is selected by searching the
    `order` list. The first mimetype that is present in the bundle and has a
    registered transformer determines the transformer used. Mimetypes that
    are not in `order` are never selected, even if a transformer claims them.

    Example:
        transformime = Transformime(
            transformers=[HTMLTransformer(), TextTransformer()],
            order=["text/html", "text/plain"],
        )
        artifact = transformime.transform({"text/plain": "hi"})
    """

    def __init__(
        self,
        transformers: Iterable[Transformer] = (),
        order: Sequence[str] = (),
    ):
        """Initialize the dispatcher.

        Args:
            transformers: Transformers to register
            order: Mimetypes in order of precedence (earliest wins)

        Raises:
            ConfigurationError: If two transformers claim the same mimetype
        """
        self._transformers: Dict[str, Transformer] = {}
        self._order: Tuple[str, ...] = _unique(order)
        for transformer in transformers:
            self.register(transformer)

    @property
    def order(self) -> Tuple[str, ...]:
        """The mimetypes in order of precedence."""
        return self._order

    @property
    def transformers(self) -> Dict[str, Transformer]:
        """A copy of the mimetype to transformer map."""
        return dict(self._transformers)

    @property
    def mimetypes(self) -> List[str]:
        """Registered mimetypes, in precedence order then registration order.

        Registered mimetypes missing from `order` come last; they can never
        be selected by `preferred_mimetype`.
        """
        ordered = [m for m in self._order if m in self._transformers]
        ordered.extend(m for m in self._transformers if m not in self._order)
        return ordered

    def register(self, transformer: Transformer) -> Transformer:
        """Register a transformer for all of its mimetypes.

        Registration is all-or-nothing: if any of the transformer's mimetypes
        is already claimed, nothing is registered.

        Args:
            transformer: The transformer to register

        Returns:
            The registered transformer

        Raises:
            ConfigurationError: If the transformer is invalid or one of its
                mimetypes is already claimed
        """
        if not isinstance(transformer, Transformer):
            raise ConfigurationError(
                f"Expected a Transformer, got {type(transformer).__name__}"
            )
        mimetypes = _unique(transformer.mimetypes)
        if not mimetypes:
            raise ConfigurationError(
                f"{transformer.__class__.__name__} does not claim any mimetypes"
            )

        claimed = [m for m in mimetypes if m in self._transformers]
        if claimed:
            owners = ", ".join(
                f"{m} ({self._transformers[m].__class__.__name__})"
                for m in claimed
            )
            logger.warning(
                f"Rejected {transformer.__class__.__name__}: "
                f"mimetypes already claimed: {owners}"
            )
            raise ConfigurationError(f"Mimetypes already claimed: {owners}")

        for mimetype in mimetypes:
            self._transformers[mimetype] = transformer
        logger.debug(
            f"Registered {transformer.__class__.__name__} for {list(mimetypes)}"
        )
        return transformer

    def get_transformer(self, mimetype: str) -> Optional[Transformer]:
        """Get the transformer registered for a mimetype, if any."""
        return self._transformers.get(mimetype)

    def preferred_mimetype(self, bundle: Mapping[str, str]) -> Optional[str]:
        """Find the preferred mimetype in a mimebundle.

        Args:
            bundle: The mimebundle giving available mimetype content

        Returns:
            The earliest mimetype in `order` that is both in the bundle and
            registered, or None if there is no such mimetype
        """
        for mimetype in self._order:
            if mimetype in bundle and mimetype in self._transformers:
                return mimetype
        return None

    def transform(self, bundle: Mapping[str, str]) -> Optional[Artifact]:
        """Transform (render) a mimebundle.

        Args:
            bundle: The mimebundle to render

        Returns:
            The artifact for the preferred mimetype, or None if the bundle
            has no renderable representation

        Raises:
            RenderError: If the selected payload is invalid for its mimetype
        """
        mimetype = self.preferred_mimetype(bundle)
        if mimetype is None:
            logger.debug(
                f"No renderable mimetype among {sorted(bundle.keys())}"
            )
            return None

        transformer = self._transformers[mimetype]
        try:
            return transformer.transform(mimetype, bundle[mimetype])
        except RenderError as e:
            logger.debug(f"Failed to render {mimetype}: {e}")
            raise

    def clone(self) -> "Transformime":
        """Create a copy sharing transformers but with an independent registry.

        Registering on the clone does not affect this instance.
        """
        clone = Transformime(order=self._order)
        clone._transformers = dict(self._transformers)
        return clone

    def __repr__(self) -> str:
        return f"Transformime(mimetypes={self.mimetypes!r})"


def _unique(mimetypes: Iterable[str]) -> Tuple[str, ...]:
    """Drop duplicate mimetypes, keeping the first occurrence."""
    return tuple(dict.fromkeys(mimetypes))
