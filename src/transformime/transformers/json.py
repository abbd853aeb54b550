"""Transformer for JSON data."""

import json
from typing import Any

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import JsonLexer

from transformime.artifacts.base import Artifact
from transformime.artifacts.text import MarkupArtifact
from transformime.errors import RenderError
from transformime.transformer import Transformer, TransformerCatalog


@TransformerCatalog.register("json")
class JSONTransformer(Transformer):
    """A transformer for JSON, pretty-printed and syntax highlighted."""

    mimetypes = ("application/json",)
    accepts_documents = True

    def __init__(self, indent: int = 2, **kwargs: Any):
        """Initialize the transformer.

        Args:
            indent: Indentation used when pretty-printing
        """
        super().__init__(**kwargs)
        self.indent = indent
        self._formatter = HtmlFormatter(cssclass="transformime-json-source")

    def create_artifact(self, mimetype: str, data: Any) -> Artifact:
        """Pretty-print and highlight the JSON document.

        Notebook files store JSON outputs as objects rather than strings, so
        non-string payloads are accepted as already-parsed documents.

        Raises:
            RenderError: If a string payload is not valid JSON
        """
        if isinstance(data, str):
            try:
                document = json.loads(data)
            except json.JSONDecodeError as e:
                raise RenderError(
                    f"Invalid JSON: {e}", mimetype=mimetype
                ) from e
        else:
            document = data
        pretty = json.dumps(document, indent=self.indent)
        markup = highlight(pretty, JsonLexer(), self._formatter)
        return MarkupArtifact(
            mimetype=mimetype, markup=markup, css_class="transformime-json"
        )
