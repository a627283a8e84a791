"""A growable text buffer used to assemble statistics lines and messages."""

from __future__ import annotations


class StringBuffer:
    """Accumulates text by appending strings, integers and doubles."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def _contents(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def append(self, text: str) -> StringBuffer:
        """Append ``text`` and return the buffer for chaining."""
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        if text:
            self._parts.append(text)
            self._length += len(text)
        return self

    def append_int(self, value: int) -> StringBuffer:
        """Append an integer in plain decimal form."""
        return self.append("%d" % value)

    def append_double(self, value: float) -> StringBuffer:
        """Append a number with exactly two decimal places."""
        return self.append("%.2f" % value)

    def set_length(self, length: int) -> None:
        """Truncate the buffer to ``length`` characters.

        A length of zero empties the buffer. A length greater than the
        current contents leaves them unchanged. Negative lengths are rejected.
        """
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        if length == 0:
            self._parts = []
            self._length = 0
        elif length < self._length:
            self._parts = [self._contents()[:length]]
            self._length = length

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self._contents()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._contents()!r})"