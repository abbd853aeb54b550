"""Transformer for executable JavaScript."""

from transformime.artifacts.base import Artifact
from transformime.artifacts.script import ScriptArtifact
from transformime.transformer import Transformer, TransformerCatalog


@TransformerCatalog.register("javascript")
class JavascriptTransformer(Transformer):
    """A transformer for scripts, run by the display surface on attach."""

    mimetypes = ("text/javascript", "application/javascript")

    def create_artifact(self, mimetype: str, data: str) -> Artifact:
        return ScriptArtifact(mimetype=mimetype, source=data)
