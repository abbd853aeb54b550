"""Configuration for building a Transformime dispatcher."""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

import transformime.transformers  # noqa: F401
from transformime.errors import ConfigurationError
from transformime.transformer import TransformerCatalog
from transformime.transformime import Transformime

logger = logging.getLogger(__name__)

# Standard notebook precedence: richer representations first
DEFAULT_ORDER: List[str] = [
    "application/javascript",
    "text/javascript",
    "text/html",
    "text/markdown",
    "text/latex",
    "image/svg+xml",
    "image/png",
    "image/jpeg",
    "image/gif",
    "application/json",
    "application/vnd.jupyter.console-text",
    "text/plain",
]

DEFAULT_TRANSFORMERS: List[str] = [
    "javascript",
    "html",
    "markdown",
    "latex",
    "svg",
    "image",
    "json",
    "console",
    "text",
]


@dataclass
class TransformimeConfig:
    """Configuration for a Transformime dispatcher.

    Attributes:
        order: Mimetypes in order of precedence (earliest wins).
        transformers: Names of the transformers to register, as known to
            the TransformerCatalog.
        options: Constructor keyword arguments per transformer name.
    """

    order: List[str] = field(default_factory=lambda: list(DEFAULT_ORDER))
    transformers: List[str] = field(
        default_factory=lambda: list(DEFAULT_TRANSFORMERS)
    )
    options: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the config to a dictionary.

        Returns:
            The dictionary representation of the config.
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TransformimeConfig":
        """Deserialize the config from a dictionary.

        Missing keys fall back to the defaults.

        Args:
            data: The dictionary to deserialize the config from.

        Returns:
            The deserialized config.

        Raises:
            ConfigurationError: If the dictionary has unknown keys or
                values of the wrong type
        """
        data = dict(data or {})
        unknown = set(data) - {"order", "transformers", "options"}
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {sorted(unknown)}"
            )

        config = cls()
        if "order" in data:
            config.order = _string_list(data["order"], "order")
        if "transformers" in data:
            config.transformers = _string_list(
                data["transformers"], "transformers"
            )
        if "options" in data:
            options = data["options"] or {}
            if not isinstance(options, dict) or not all(
                isinstance(v, dict) for v in options.values()
            ):
                raise ConfigurationError(
                    "'options' must map transformer names to mappings"
                )
            config.options = {str(k): dict(v) for k, v in options.items()}
        return config

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "TransformimeConfig":
        """Load the config from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            The loaded config.
        """
        with open(path, "r") as file:
            try:
                config_yaml = yaml.safe_load(file)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        if config_yaml is not None and not isinstance(config_yaml, dict):
            raise ConfigurationError(f"{path} must contain a mapping")
        logger.debug(f"Loaded transformime config from {path}")
        return cls.from_dict(config_yaml)


def build_transformime(
    config: Optional[TransformimeConfig] = None,
) -> Transformime:
    """Build a dispatcher from a configuration.

    Args:
        config: The configuration (default: TransformimeConfig())

    Returns:
        A Transformime with the configured transformers and order

    Raises:
        ConfigurationError: If a transformer name is unknown, its options
            are invalid, or two transformers claim the same mimetype
    """
    config = config or TransformimeConfig()
    unused = set(config.options) - set(config.transformers)
    if unused:
        logger.warning(f"Options given for unused transformers: {sorted(unused)}")

    transformers = [
        TransformerCatalog.create(name, **config.options.get(name, {}))
        for name in config.transformers
    ]
    return Transformime(transformers=transformers, order=config.order)


def default_transformime() -> Transformime:
    """Build a dispatcher with all built-in transformers and the default order."""
    return build_transformime(TransformimeConfig())


def _string_list(value: Any, key: str) -> List[str]:
    """Validate that a config value is a list of strings."""
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"'{key}' must be a list of strings")
    return list(value)
