"""Exceptions raised by the transformime package."""


class TransformimeError(Exception):
    """Base class for all transformime errors."""


class ConfigurationError(TransformimeError):
    """Raised when a registry or configuration is set up incorrectly.

    The most common cause is registering a transformer for a mimetype that is
    already claimed by another transformer. The registry is left unchanged.
    """


class RenderError(TransformimeError):
    """Raised when a payload is structurally invalid for its mimetype.

    Attributes:
        mimetype: The mimetype that failed to render, if known.
    """

    def __init__(self, message: str, mimetype: str = ""):
        """Initialize the error with the offending mimetype."""
        super().__init__(message)
        self.mimetype = mimetype
