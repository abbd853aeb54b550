"""Tests for the Transformime dispatcher."""

import pytest

from transformime.artifacts.base import Artifact
from transformime.artifacts.math import MathArtifact
from transformime.artifacts.text import TextArtifact
from transformime.errors import ConfigurationError, RenderError
from transformime.transformer import Transformer
from transformime.transformers import (
    HTMLTransformer,
    ImageTransformer,
    SVGTransformer,
    TextTransformer,
)
from transformime.transformime import Transformime


class CountingTransformer(Transformer):
    """Transformer that counts its calls and wraps data as text."""

    def __init__(self, mimetypes):
        """Initialize with the given mimetypes."""
        super().__init__(mimetypes=mimetypes)
        self.calls = []

    def create_artifact(self, mimetype: str, data: str) -> Artifact:
        """Record the call and return a text artifact."""
        self.calls.append((mimetype, data))
        return TextArtifact(mimetype=mimetype, text=data)


class TestPreferredMimetype:
    """Test precedence resolution."""

    def test_html_preferred_over_plain(self, html_and_text):
        """Test that the earliest mimetype in the order wins."""
        bundle = {"text/plain": "hi", "text/html": "<b>hi</b>"}
        assert html_and_text.preferred_mimetype(bundle) == "text/html"

    def test_plain_only(self, html_and_text):
        """Test a bundle with only the lower-precedence mimetype."""
        assert html_and_text.preferred_mimetype({"text/plain": "hi"}) == (
            "text/plain"
        )

    def test_unregistered_mimetype(self, html_and_text):
        """Test that a bundle with no registered mimetype yields None."""
        assert html_and_text.preferred_mimetype({"application/pdf": "..."}) is None

    def test_empty_bundle(self, html_and_text):
        """Test that an empty bundle yields None."""
        assert html_and_text.preferred_mimetype({}) is None

    def test_order_entry_without_transformer_is_inert(self):
        """Test that order entries with no transformer are skipped."""
        transformime = Transformime(
            transformers=[TextTransformer()],
            order=["text/html", "text/plain"],
        )
        bundle = {"text/html": "<b>hi</b>", "text/plain": "hi"}
        assert transformime.preferred_mimetype(bundle) == "text/plain"

    def test_registered_mimetype_missing_from_order_is_never_selected(self):
        """Test that the order is authoritative."""
        transformime = Transformime(
            transformers=[TextTransformer(), HTMLTransformer()],
            order=["text/plain"],
        )
        assert transformime.preferred_mimetype({"text/html": "<b>hi</b>"}) is None
        assert transformime.transform({"text/html": "<b>hi</b>"}) is None

    def test_order_wins_over_registration_order(self):
        """Test that registration order does not affect precedence."""
        first = Transformime(
            transformers=[TextTransformer(), HTMLTransformer()],
            order=["text/html", "text/plain"],
        )
        second = Transformime(
            transformers=[HTMLTransformer(), TextTransformer()],
            order=["text/html", "text/plain"],
        )
        bundle = {"text/plain": "hi", "text/html": "<b>hi</b>"}
        assert first.preferred_mimetype(bundle) == "text/html"
        assert second.preferred_mimetype(bundle) == "text/html"

    def test_result_is_earliest_common_mimetype(self, png_base64):
        """Test the result against every subset of a small bundle."""
        order = ["image/svg+xml", "text/html", "image/png", "text/plain"]
        transformime = Transformime(
            transformers=[
                TextTransformer(),
                HTMLTransformer(),
                ImageTransformer(),
            ],
            order=order,
        )
        full = {
            "image/svg+xml": "<svg></svg>",
            "text/html": "<i>x</i>",
            "image/png": png_base64,
            "text/plain": "x",
            "application/pdf": "...",
        }
        keys = list(full)
        for mask in range(1 << len(keys)):
            bundle = {k: full[k] for i, k in enumerate(keys) if mask & (1 << i)}
            expected = next(
                (
                    m
                    for m in order
                    if m in bundle and m in transformime.transformers
                ),
                None,
            )
            assert transformime.preferred_mimetype(bundle) == expected

    def test_duplicate_order_entries_collapsed(self):
        """Test that duplicates in the order keep the first occurrence."""
        transformime = Transformime(
            order=["text/html", "text/plain", "text/html"]
        )
        assert transformime.order == ("text/html", "text/plain")


class TestTransform:
    """Test dispatching a bundle to its transformer."""

    def test_transform_html(self, html_and_text):
        """Test that the HTML artifact wraps the markup."""
        bundle = {"text/plain": "hi", "text/html": "<b>hi</b>"}
        artifact = html_and_text.transform(bundle)
        assert isinstance(artifact, MathArtifact)
        assert artifact.mimetype == "text/html"
        assert artifact.content == "<b>hi</b>"
        assert artifact.is_html

    def test_transform_plain(self, html_and_text):
        """Test that plain text yields a text artifact."""
        artifact = html_and_text.transform({"text/plain": "hi"})
        assert isinstance(artifact, TextArtifact)
        assert artifact.text == "hi"

    def test_transform_nothing_renderable(self, html_and_text):
        """Test that an unrenderable bundle returns None."""
        assert html_and_text.transform({"application/pdf": "..."}) is None

    def test_only_selected_transformer_called(self):
        """Test that only the preferred transformer is invoked."""
        html = CountingTransformer(["text/html"])
        text = CountingTransformer(["text/plain"])
        transformime = Transformime(
            transformers=[html, text], order=["text/html", "text/plain"]
        )
        transformime.transform({"text/html": "<p/>", "text/plain": "p"})
        assert html.calls == [("text/html", "<p/>")]
        assert text.calls == []

    def test_bundle_not_mutated(self, html_and_text):
        """Test that dispatch leaves the bundle untouched."""
        bundle = {"text/plain": "hi", "text/html": "<b>hi</b>"}
        snapshot = dict(bundle)
        html_and_text.transform(bundle)
        assert bundle == snapshot

    def test_render_error_propagates_without_fallback(self):
        """Test that a failed render is not retried with another mimetype."""
        text = CountingTransformer(["text/plain"])
        transformime = Transformime(
            transformers=[SVGTransformer(), text],
            order=["image/svg+xml", "text/plain"],
        )
        with pytest.raises(RenderError):
            transformime.transform(
                {"image/svg+xml": "not svg", "text/plain": "fallback"}
            )
        assert text.calls == []


class TestRegister:
    """Test transformer registration."""

    def test_register_claims_all_mimetypes(self):
        """Test that every mimetype of a transformer is registered."""
        transformime = Transformime()
        image = ImageTransformer()
        assert transformime.register(image) is image
        for mimetype in ("image/png", "image/jpeg", "image/gif"):
            assert transformime.get_transformer(mimetype) is image

    def test_register_duplicate_mimetype(self, html_and_text):
        """Test that claiming a registered mimetype again is rejected."""
        original = html_and_text.get_transformer("text/html")
        with pytest.raises(ConfigurationError, match="text/html"):
            html_and_text.register(HTMLTransformer())
        assert html_and_text.get_transformer("text/html") is original

    def test_register_partial_overlap_is_all_or_nothing(self, html_and_text):
        """Test that a rejected registration leaves no partial mappings."""
        overlapping = CountingTransformer(["text/markdown", "text/plain"])
        with pytest.raises(ConfigurationError):
            html_and_text.register(overlapping)
        assert html_and_text.get_transformer("text/markdown") is None
        assert isinstance(
            html_and_text.get_transformer("text/plain"), TextTransformer
        )

    def test_duplicate_in_constructor(self):
        """Test that the constructor applies the same rule."""
        with pytest.raises(ConfigurationError):
            Transformime(transformers=[TextTransformer(), TextTransformer()])

    def test_register_without_mimetypes(self):
        """Test that a transformer must claim at least one mimetype."""
        with pytest.raises(ConfigurationError):
            Transformime().register(CountingTransformer([]))

    def test_register_non_transformer(self):
        """Test that arbitrary objects are rejected."""
        with pytest.raises(ConfigurationError):
            Transformime().register(object())  # type: ignore[arg-type]

    def test_transformers_property_is_a_copy(self, html_and_text):
        """Test that the transformers map cannot be mutated from outside."""
        html_and_text.transformers["text/markdown"] = TextTransformer()
        assert html_and_text.get_transformer("text/markdown") is None

    def test_mimetypes_in_precedence_order(self):
        """Test the listing of registered mimetypes."""
        transformime = Transformime(
            transformers=[TextTransformer(), SVGTransformer(), HTMLTransformer()],
            order=["text/html", "text/plain", "application/pdf"],
        )
        assert transformime.mimetypes == [
            "text/html",
            "text/plain",
            "image/svg+xml",
        ]


class TestClone:
    """Test cloning a dispatcher."""

    def test_clone_is_independent(self, html_and_text):
        """Test that registering on a clone leaves the original untouched."""
        clone = html_and_text.clone()
        clone.register(SVGTransformer())
        assert clone.get_transformer("image/svg+xml") is not None
        assert html_and_text.get_transformer("image/svg+xml") is None
        assert clone.order == html_and_text.order

    def test_clone_shares_transformers(self, html_and_text):
        """Test that the clone reuses the same transformer instances."""
        clone = html_and_text.clone()
        assert clone.get_transformer("text/html") is html_and_text.get_transformer(
            "text/html"
        )
