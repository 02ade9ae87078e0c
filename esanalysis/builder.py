"""Document builders for analysis settings.

Analyzer definitions never produce JSON themselves. They write fields into
a DocumentBuilder, which decides how the result is represented:

- JsonDocumentBuilder: accumulates a tree of plain dicts and lists
- StreamingJsonWriter: writes JSON text straight to a text stream

Both encode scalar values with msgspec, so escaping is identical.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, TextIO

import msgspec

from .exceptions import BuilderStateError

FieldValue = str | bool | int | Iterable[str]

_encoder = msgspec.json.Encoder()


def _coerce_value(value: Any) -> Any:
    """Normalize a field value into a JSON-compatible builtin."""
    if isinstance(value, (str, bytes, bool, int, float)) or value is None:
        return value
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, Iterable):
        return list(value)
    return value


class DocumentBuilder(ABC):
    """Accumulates structured key/value output destined for JSON."""

    @abstractmethod
    def start_object(self, name: str | None = None) -> "DocumentBuilder":
        """Open an object, keyed by name inside the current object.

        Args:
            name: Key of the new object, or None for the root object

        Returns:
            The builder, for chaining
        """

    @abstractmethod
    def end_object(self) -> "DocumentBuilder":
        """Close the innermost open object."""

    @abstractmethod
    def field(self, key: str, value: FieldValue) -> "DocumentBuilder":
        """Write a key/value pair into the innermost open object.

        Args:
            key: Field name
            value: String, boolean, integer, or ordered sequence of strings

        Returns:
            The builder, for chaining
        """


class JsonDocumentBuilder(DocumentBuilder):
    """In-memory builder producing a tree of dicts and lists."""

    def __init__(self):
        self._root: dict[str, Any] | None = None
        self._stack: list[dict[str, Any]] = []
        self._closed = False

    def start_object(self, name: str | None = None) -> "JsonDocumentBuilder":
        self._check_writable()

        if name is None:
            if self._stack:
                raise BuilderStateError("Nested objects require a name")
            self._root = {}
            self._stack.append(self._root)
            return self

        if not self._stack:
            raise BuilderStateError(f"Cannot start object '{name}': no open object")

        obj: dict[str, Any] = {}
        self._stack[-1][name] = obj
        self._stack.append(obj)
        return self

    def end_object(self) -> "JsonDocumentBuilder":
        if not self._stack:
            raise BuilderStateError("No open object to end")

        self._stack.pop()
        if not self._stack:
            self._closed = True
        return self

    def field(self, key: str, value: FieldValue) -> "JsonDocumentBuilder":
        self._check_writable()
        if not self._stack:
            raise BuilderStateError(f"Cannot write field '{key}': no open object")

        self._stack[-1][key] = _coerce_value(value)
        return self

    @property
    def closed(self) -> bool:
        """Whether the root object has been closed."""
        return self._closed

    def value(self) -> dict[str, Any]:
        """Return the finished tree.

        Raises:
            BuilderStateError: If the root object is still open
        """
        if not self._closed or self._root is None:
            raise BuilderStateError("Document is not complete")
        return self._root

    def encode(self) -> bytes:
        """Return the document as compact JSON bytes."""
        return _encoder.encode(self.value())

    def string(self) -> str:
        """Return the document as a compact JSON string."""
        return self.encode().decode("utf-8")

    def pretty(self, indent: int = 2) -> str:
        """Return the document as indented JSON."""
        return msgspec.json.format(self.encode(), indent=indent).decode("utf-8")

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"open depth={len(self._stack)}"
        return f"<JsonDocumentBuilder {state}>"

    def _check_writable(self) -> None:
        if self._closed:
            raise BuilderStateError("Document is already complete")


class StreamingJsonWriter(DocumentBuilder):
    """Builder that writes JSON text directly to a stream.

    Nothing is buffered: each call appends to the stream immediately, so the
    stream holds valid JSON only after the root object is closed.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._first: list[bool] = []
        self._started = False

    def start_object(self, name: str | None = None) -> "StreamingJsonWriter":
        if name is None:
            if self._first:
                raise BuilderStateError("Nested objects require a name")
            if self._started:
                raise BuilderStateError("Document is already complete")
            self._started = True
        else:
            if not self._first:
                raise BuilderStateError(
                    f"Cannot start object '{name}': no open object"
                )
            self._write_key(name)

        self.stream.write("{")
        self._first.append(True)
        return self

    def end_object(self) -> "StreamingJsonWriter":
        if not self._first:
            raise BuilderStateError("No open object to end")

        self._first.pop()
        self.stream.write("}")
        return self

    def field(self, key: str, value: FieldValue) -> "StreamingJsonWriter":
        if not self._first:
            raise BuilderStateError(f"Cannot write field '{key}': no open object")

        self._write_key(key)
        self.stream.write(_encoder.encode(_coerce_value(value)).decode("utf-8"))
        return self

    @property
    def closed(self) -> bool:
        """Whether the root object has been written and closed."""
        return self._started and not self._first

    def _write_key(self, key: str) -> None:
        if self._first[-1]:
            self._first[-1] = False
        else:
            self.stream.write(",")
        self.stream.write(_encoder.encode(key).decode("utf-8"))
        self.stream.write(":")


def json_builder() -> JsonDocumentBuilder:
    """Create an in-memory builder with its root object already open."""
    return JsonDocumentBuilder().start_object()
