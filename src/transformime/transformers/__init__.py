"""Built-in transformers.

Importing this package registers every built-in transformer in the
`TransformerCatalog`.
"""

from transformime.transformers.html import HTMLTransformer, MarkdownTransformer
from transformime.transformers.image import ImageTransformer, SVGTransformer
from transformime.transformers.javascript import JavascriptTransformer
from transformime.transformers.json import JSONTransformer
from transformime.transformers.latex import LatexTransformer
from transformime.transformers.text import ConsoleTextTransformer, TextTransformer

__all__ = [
    "ConsoleTextTransformer",
    "HTMLTransformer",
    "ImageTransformer",
    "JSONTransformer",
    "JavascriptTransformer",
    "LatexTransformer",
    "MarkdownTransformer",
    "SVGTransformer",
    "TextTransformer",
]
