"""HTML document model — element lookup, attribute edits, text appends.

The source is parsed with :class:`html.parser.HTMLParser`, which only
records where each element's start tag and end tag sit in the text.
Serialization splices edits into the original source, so everything the
caller did not touch comes back byte-for-byte.

Attribute names are case-insensitive (the parser lowercases them).
"""

from __future__ import annotations

import html
from html.parser import HTMLParser
from typing import Protocol

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


class ElementLike(Protocol):
    """The slice of a DOM element the annotator needs."""

    def get_attribute(self, name: str) -> str | None: ...

    def set_attribute(self, name: str, value: str) -> None: ...

    def append_text(self, text: str) -> None: ...


class Element:
    """A single element located in an :class:`HtmlDocument`."""

    def __init__(
        self,
        tag: str,
        attrs: list[tuple[str, str | None]],
        *,
        start: int,
        start_end: int,
        self_closing: bool = False,
        source_tag: str | None = None,
    ) -> None:
        self.tag = tag
        # Tag name as spelled in the source; the parser lowercases *tag*.
        self.source_tag = source_tag or tag
        self._attrs = list(attrs)
        self.start = start
        self.start_end = start_end
        # Offset where appended text is inserted (just before the end tag).
        self.content_end: int | None = None
        self.self_closing = self_closing
        self._text: list[str] = []
        self._appended: list[str] = []
        self._attrs_dirty = False

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, attrs={self._attrs!r})"

    # --- Attributes ---

    @property
    def attributes(self) -> dict[str, str]:
        return {name: value or "" for name, value in self._attrs}

    def get_attribute(self, name: str) -> str | None:
        """Return the attribute value, ``""`` for a bare attribute, or None."""
        name = name.lower()
        for attr_name, value in self._attrs:
            if attr_name == name:
                return value or ""
        return None

    def set_attribute(self, name: str, value: str) -> None:
        name = name.lower()
        for i, (attr_name, _) in enumerate(self._attrs):
            if attr_name == name:
                self._attrs[i] = (name, value)
                break
        else:
            self._attrs.append((name, value))
        self._attrs_dirty = True

    # --- Text ---

    @property
    def text(self) -> str:
        """Text content, including anything appended since parsing."""
        return "".join(self._text) + "".join(self._appended)

    def append_text(self, text: str) -> None:
        self._appended.append(text)

    @property
    def modified(self) -> bool:
        return self._attrs_dirty or bool(self._appended)

    # --- Serialization helpers ---

    def render_start_tag(self) -> str:
        parts = [f"<{self.source_tag}"]
        for name, value in self._attrs:
            if value is None:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{html.escape(value, quote=True)}"')
        if self.self_closing:
            parts.append(" /")
        parts.append(">")
        return "".join(parts)

    def edits(self) -> list[tuple[int, int, str]]:
        """Return ``(start, end, replacement)`` splices for this element."""
        result: list[tuple[int, int, str]] = []
        if self._attrs_dirty:
            result.append((self.start, self.start_end, self.render_start_tag()))
        if self._appended:
            at = self.content_end if self.content_end is not None else self.start_end
            result.append((at, at, html.escape("".join(self._appended), quote=False)))
        return result


class _Collector(HTMLParser):
    """Record element positions and text content."""

    def __init__(self, source: str) -> None:
        super().__init__(convert_charrefs=True)
        self._line_starts = [0]
        for i, char in enumerate(source):
            if char == "\n":
                self._line_starts.append(i + 1)
        self.elements: list[Element] = []
        self._open: list[Element] = []

    def _offset(self) -> int:
        line, column = self.getpos()
        return self._line_starts[line - 1] + column

    def _make(
        self, tag: str, attrs: list[tuple[str, str | None]], *, self_closing: bool
    ) -> Element:
        start = self._offset()
        raw = self.get_starttag_text() or ""
        spelled = raw[1 : 1 + len(tag)]
        element = Element(
            tag,
            attrs,
            start=start,
            start_end=start + len(raw),
            self_closing=self_closing,
            source_tag=spelled if spelled.lower() == tag else tag,
        )
        self.elements.append(element)
        return element

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        element = self._make(tag, attrs, self_closing=False)
        if tag not in VOID_ELEMENTS:
            self._open.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # HTML ignores the trailing slash on non-void elements; content
        # that follows still belongs to them.
        element = self._make(tag, attrs, self_closing=True)
        if tag not in VOID_ELEMENTS:
            self._open.append(element)

    def handle_endtag(self, tag: str) -> None:
        if not any(element.tag == tag for element in self._open):
            return
        position = self._offset()
        while self._open:
            element = self._open.pop()
            element.content_end = position
            if element.tag == tag:
                break

    def handle_data(self, data: str) -> None:
        for element in self._open:
            element._text.append(data)

    def finish(self, length: int) -> None:
        self.close()
        for element in self._open:
            element.content_end = length
        self._open.clear()


class HtmlDocument:
    """Parsed HTML source supporting ``query_all`` and in-place edits."""

    def __init__(self, source: str, elements: list[Element]) -> None:
        self.source = source
        self._elements = elements

    @classmethod
    def parse(cls, source: str) -> HtmlDocument:
        collector = _Collector(source)
        collector.feed(source)
        collector.finish(len(source))
        return cls(source, collector.elements)

    def query_all(self, tag: str) -> list[Element]:
        """Return every element named *tag*, in document order."""
        tag = tag.lower()
        return [element for element in self._elements if element.tag == tag]

    @property
    def modified(self) -> bool:
        return any(element.modified for element in self._elements)

    def serialize(self) -> str:
        """Return the source with all element edits applied."""
        edits = [edit for element in self._elements for edit in element.edits()]
        if not edits:
            return self.source
        # Apply back to front so earlier offsets stay valid.
        edits.sort(key=lambda edit: (edit[0], edit[1]), reverse=True)
        out = self.source
        for start, end, replacement in edits:
            out = out[:start] + replacement + out[end:]
        return out
