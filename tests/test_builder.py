"""Tests for document builders."""

import io
import json

import pytest

from esanalysis.builder import (
    DocumentBuilder,
    JsonDocumentBuilder,
    StreamingJsonWriter,
    json_builder,
)
from esanalysis.exceptions import AnalysisError, BuilderStateError


class TestJsonDocumentBuilder:
    """Test the in-memory builder."""

    def test_json_builder_opens_root(self):
        """json_builder() should return a builder with the root open."""
        builder = json_builder()

        assert isinstance(builder, DocumentBuilder)
        assert not builder.closed
        builder.end_object()
        assert builder.closed
        assert builder.value() == {}

    def test_nested_objects_and_fields(self):
        """Fields should land in the innermost open object."""
        builder = json_builder()
        builder.start_object("outer").field("a", 1).start_object("inner")
        builder.field("b", True).end_object().field("c", "x").end_object()
        builder.end_object()

        assert builder.value() == {"outer": {"a": 1, "inner": {"b": True}, "c": "x"}}

    def test_sequences_become_lists(self):
        """Tuples and generators should be written as JSON arrays."""
        builder = json_builder()
        builder.field("tuple", ("a", "b"))
        builder.field("gen", (w for w in ["c", "d"]))
        builder.field("empty", ())
        builder.end_object()

        assert builder.value() == {"tuple": ["a", "b"], "gen": ["c", "d"], "empty": []}

    def test_key_order_preserved(self):
        """Keys should serialize in insertion order."""
        builder = json_builder()
        for key in ["z", "a", "m"]:
            builder.field(key, key)
        builder.end_object()

        assert builder.string() == '{"z":"z","a":"a","m":"m"}'

    def test_string_escaping(self):
        """Strings should be JSON-escaped, not otherwise altered."""
        builder = json_builder().field("pattern", '\\d+"').end_object()

        assert json.loads(builder.string()) == {"pattern": '\\d+"'}

    def test_pretty_output(self):
        """pretty() should produce indented JSON of the same document."""
        builder = json_builder().field("type", "stop").end_object()

        pretty = builder.pretty()

        assert "\n" in pretty
        assert json.loads(pretty) == {"type": "stop"}

    def test_value_before_close(self):
        """The tree is unavailable until the root is closed."""
        with pytest.raises(BuilderStateError):
            json_builder().value()

    def test_end_without_open_object(self):
        """Ending with nothing open should fail."""
        with pytest.raises(BuilderStateError):
            JsonDocumentBuilder().end_object()

    def test_field_without_open_object(self):
        """Fields need an open object."""
        with pytest.raises(BuilderStateError):
            JsonDocumentBuilder().field("a", 1)

    def test_named_object_without_root(self):
        """Named objects need an enclosing object."""
        with pytest.raises(BuilderStateError):
            JsonDocumentBuilder().start_object("a")

    def test_anonymous_nested_object(self):
        """Objects inside objects must be named."""
        with pytest.raises(BuilderStateError):
            json_builder().start_object()

    def test_write_after_close(self):
        """A completed document cannot be extended."""
        builder = json_builder().end_object()

        with pytest.raises(BuilderStateError):
            builder.field("a", 1)
        with pytest.raises(BuilderStateError):
            builder.start_object()

    def test_errors_share_base(self):
        """Builder errors should be analysis errors."""
        with pytest.raises(AnalysisError):
            JsonDocumentBuilder().end_object()


class TestStreamingJsonWriter:
    """Test the streaming writer."""

    def test_writes_compact_json(self):
        """Output should be compact JSON with commas between members."""
        stream = io.StringIO()
        writer = StreamingJsonWriter(stream)

        writer.start_object()
        writer.start_object("sb").field("type", "snowball").field("stopwords", ["a"])
        writer.end_object().field("n", 3).end_object()

        assert stream.getvalue() == '{"sb":{"type":"snowball","stopwords":["a"]},"n":3}'
        assert writer.closed

    def test_empty_document(self):
        """An empty root should be written as {}."""
        stream = io.StringIO()

        StreamingJsonWriter(stream).start_object().end_object()

        assert stream.getvalue() == "{}"

    def test_keys_are_escaped(self):
        """Keys should be encoded as JSON strings."""
        stream = io.StringIO()

        StreamingJsonWriter(stream).start_object().field('a"b', False).end_object()

        assert json.loads(stream.getvalue()) == {'a"b': False}

    def test_state_errors(self):
        """The writer should reject the same misuse as the tree builder."""
        writer = StreamingJsonWriter(io.StringIO())

        with pytest.raises(BuilderStateError):
            writer.field("a", 1)
        with pytest.raises(BuilderStateError):
            writer.end_object()

        writer.start_object()
        with pytest.raises(BuilderStateError):
            writer.start_object()

        writer.end_object()
        with pytest.raises(BuilderStateError):
            writer.start_object()
