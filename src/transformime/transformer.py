"""Base classes for mimetype transformers."""

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, List, Optional, Sequence, Tuple, Type

from transformime.artifacts.base import Artifact
from transformime.errors import ConfigurationError, RenderError


class Transformer(ABC):
    """Base class for mimetype transformers.

    A transformer claims a non-empty set of mimetypes and converts raw
    payloads of those mimetypes into displayable artifacts. Transformers do
    not touch the dispatcher that owns them.

    Example usage:
        @TransformerCatalog.register("csv")
        class CSVTransformer(Transformer):
            mimetypes = ("text/csv",)

            def create_artifact(self, mimetype: str, data: str) -> Artifact:
                return TextArtifact(mimetype=mimetype, text=data)
    """

    mimetypes: Tuple[str, ...] = ()
    # Whether non-string payloads (parsed JSON documents) are accepted
    accepts_documents: bool = False

    def __init__(self, mimetypes: Optional[Sequence[str]] = None):
        """Initialize the transformer.

        Args:
            mimetypes: Optional override of the class-level mimetypes
        """
        if mimetypes is not None:
            self.mimetypes = tuple(mimetypes)

    def claims(self, mimetype: str) -> bool:
        """Check if this transformer handles the given mimetype."""
        return mimetype in self.mimetypes

    def transform(self, mimetype: str, data: str) -> Artifact:
        """Transform a raw payload into an artifact.

        Args:
            mimetype: The mimetype of the payload
            data: The raw payload (base64 for binary mimetypes)

        Returns:
            The displayable artifact

        Raises:
            RenderError: If the mimetype is not claimed or the payload is invalid
        """
        if not self.claims(mimetype):
            raise RenderError(
                f"{self.__class__.__name__} cannot transform {mimetype}",
                mimetype=mimetype,
            )
        if not isinstance(data, str) and not self.accepts_documents:
            raise RenderError(
                f"Expected a string payload for {mimetype}, "
                f"got {type(data).__name__}",
                mimetype=mimetype,
            )
        return self.create_artifact(mimetype, data)

    @abstractmethod
    def create_artifact(self, mimetype: str, data: str) -> Artifact:
        """Build the artifact for a payload of a claimed mimetype.

        Args:
            mimetype: The mimetype of the payload, always one of `mimetypes`
            data: The raw payload

        Returns:
            The displayable artifact
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mimetypes={list(self.mimetypes)!r})"


class TransformerCatalog:
    """Catalog of transformer classes by name.

    Configuration files refer to transformers by these names. The catalog
    only creates transformer instances; adding mimetype support to a
    dispatcher still goes through `Transformime.register`.
    """

    _registry: ClassVar[Dict[str, Type[Transformer]]] = {}

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[Type[Transformer]], Type[Transformer]]:
        """Register a transformer class under a name.

        Args:
            name: The name used in configuration files (e.g., "html")

        Returns:
            Decorator function that registers the transformer class
        """

        def decorator(
            transformer_class: Type[Transformer],
        ) -> Type[Transformer]:
            existing = cls._registry.get(name)
            if existing is not None and existing is not transformer_class:
                raise ConfigurationError(
                    f"Transformer name {name!r} already used by "
                    f"{existing.__name__}"
                )
            cls._registry[name] = transformer_class
            return transformer_class

        return decorator

    @classmethod
    def get(cls, name: str) -> Type[Transformer]:
        """Get a transformer class by name.

        Raises:
            ConfigurationError: If no transformer is registered under the name
        """
        if name not in cls._registry:
            raise ConfigurationError(f"Unknown transformer: {name}")
        return cls._registry[name]

    @classmethod
    def create(cls, name: str, **options: Any) -> Transformer:
        """Instantiate the transformer registered under a name."""
        transformer_class = cls.get(name)
        try:
            return transformer_class(**options)
        except TypeError as e:
            raise ConfigurationError(
                f"Invalid options for transformer {name}: {e}"
            ) from e

    @classmethod
    def name_of(cls, transformer: Transformer) -> Optional[str]:
        """Get the catalog name of a transformer instance, if any."""
        for name, transformer_class in cls._registry.items():
            if type(transformer) is transformer_class:
                return name
        return None

    @classmethod
    def list_registered_names(cls) -> List[str]:
        """List all registered transformer names."""
        return list(cls._registry.keys())
