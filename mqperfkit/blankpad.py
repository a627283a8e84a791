"""Helpers for blank-padded MQ names and identifiers, and the MQI error type."""

from __future__ import annotations

from collections.abc import Iterator

ID_LENGTH = 24


class MQIError(RuntimeError):
    """An MQI call failed, with its completion and reason codes."""

    def __init__(self, function: str, comp_code: int, reason_code: int) -> None:
        self.function = function
        self.comp_code = comp_code
        self.reason_code = reason_code
        super().__init__(
            f"{function} failed: Comp Code: {comp_code}; Reason: {reason_code}"
        )


def _as_text(value: str | bytes | None) -> str | None:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return value


def _padded(text: str | None, length: int) -> Iterator[str | None]:
    """Yield characters up to a terminator, then None for each remaining slot."""
    ended = text is None
    for i in range(length):
        if not ended and (i >= len(text) or text[i] == "\0"):
            ended = True
        yield None if ended else text[i]


def blank_padded_compare(
    a: str | bytes | None, b: str | bytes | None, length: int
) -> int:
    """Compare up to ``length`` characters, treating padding blanks and the end
    of a string as the same.

    Returns a negative, zero or positive number like ``strncmp``.
    """
    for ca, cb in zip(_padded(_as_text(a), length), _padded(_as_text(b), length)):
        if ca is None and cb is None:
            return 0
        result = ord(" " if ca is None else ca) - ord(" " if cb is None else cb)
        if result:
            return result
    return 0


def blank_padded_length(text: str | bytes, buffer_length: int) -> int:
    """Length of a possibly blank-padded string within ``buffer_length``.

    This is one past the last non-blank character before any NUL, or zero.
    """
    length = 0
    for i, ch in enumerate(_padded(_as_text(text), buffer_length)):
        if ch is None:
            break
        if ch != " ":
            length = i + 1
    return length


def format_id(label: str, ident: bytes) -> str:
    """Render a 24-byte message or correlation id as upper-case hex."""
    ident = bytes(ident)
    if len(ident) != ID_LENGTH:
        raise ValueError(f"id must be {ID_LENGTH} bytes, got {len(ident)}")
    return f"{label}: Bytes: {ident.hex().upper()}"