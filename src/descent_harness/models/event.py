"""Parse events and their line rendering.

This module provides the Pydantic model a generated parser emits for every
parsed construct, plus the encoder that turns event content into text.

Rendering format:
- Content events:  ``Text "hello" @ 0..5``
- Bracket events:  ``ElementStart @ 1..1``

Content that decodes as UTF-8 is shown as a quoted string. Anything else
falls back to a ``b"..."`` literal with ``\\xHH`` escapes, so every event
renders to exactly one line.
"""

from typing import Self

from pydantic import BaseModel, Field, model_validator


# Escapes shared by both encoder branches
_COMMON_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Unicode line separators above the C0 control range
_LINE_BREAKS = {"\x85", "\u2028", "\u2029"}


def _escape_char(ch: str) -> str:
    if ch in _COMMON_ESCAPES:
        return _COMMON_ESCAPES[ch]
    if ch < " " or ch == "\x7f" or ch in _LINE_BREAKS:
        return f"\\u{{{ord(ch):x}}}"
    return ch


def _escape_byte(b: int) -> str:
    ch = chr(b)
    if ch in _COMMON_ESCAPES:
        return _COMMON_ESCAPES[ch]
    if 0x20 <= b < 0x7f:
        return ch
    return f"\\x{b:02x}"


def encode_content(content: bytes) -> str:
    """Render raw content bytes as a single-line quoted literal.

    Two branches:
        - valid UTF-8: ``"..."`` with control characters escaped
        - anything else: ``b"..."`` with non-printable bytes as ``\\xHH``

    Args:
        content: Raw bytes taken from the input buffer.

    Returns:
        Quoted representation containing no line-break characters.
    """
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        return 'b"' + "".join(_escape_byte(b) for b in content) + '"'
    return '"' + "".join(_escape_char(ch) for ch in text) + '"'


class Event(BaseModel):
    """A single unit emitted by a parse pass.

    Attributes:
        kind: Variant tag, e.g. ``Text`` or ``ElementStart``.
        content: Raw content bytes, or None for bracket events.
        start: Byte offset where the construct begins.
        end: Byte offset where the construct ends (exclusive).

    Example:
        >>> Event(kind="Text", content=b"hi", start=0, end=2).format_line()
        'Text "hi" @ 0..2'
    """

    kind: str = Field(..., pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    content: bytes | None = Field(default=None)
    start: int = Field(default=0, ge=0)
    end: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_span(self) -> Self:
        """Ensure the span is not reversed."""
        if self.end < self.start:
            raise ValueError(f"Event span reversed: {self.start}..{self.end}")
        return self

    @property
    def span(self) -> tuple[int, int]:
        """Return the (start, end) byte offsets."""
        return self.start, self.end

    @property
    def is_bracket(self) -> bool:
        """Return whether this event carries no content."""
        return self.content is None

    def format_line(self) -> str:
        """Render the event as one line of text."""
        if self.content is None:
            return f"{self.kind} @ {self.start}..{self.end}"
        return f"{self.kind} {encode_content(self.content)} @ {self.start}..{self.end}"

    def __str__(self) -> str:
        return self.format_line()
