"""Ordered list of configuration name/value pairs."""

from __future__ import annotations

from collections.abc import Iterator


class ValueTooLongError(ValueError):
    """Raised when a stored value exceeds the size a caller allows."""

    def __init__(self, name: str, value: str, limit: int) -> None:
        self.name = name
        self.value = value
        self.limit = limit
        super().__init__(
            f"Size limit for parameter {name} exceeded. "
            f"Maximum permitted size: {limit}. "
            f"Size of value passed: {len(value)}. "
            f"Value passed: {value}"
        )


class NameValueList:
    """Configuration properties kept in insertion order.

    Names may repeat; lookups return the first entry added under a name.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[str, str]] = []

    def add(self, name: str, value: str) -> None:
        """Append a name/value pair to the end of the list."""
        self._entries.append((name, value))

    def lookup(self, name: str) -> str | None:
        """Return the first value stored under ``name``, or None."""
        return next((v for n, v in self._entries if n == name), None)

    def get(self, name: str, max_length: int) -> str | None:
        """Return the value for ``name`` if it is at most ``max_length`` long.

        Returns None when the name is absent and raises ValueTooLongError
        when the stored value is longer than ``max_length`` characters.
        """
        value = self.lookup(name)
        if value is None:
            return None
        if len(value) > max_length:
            raise ValueTooLongError(name, value, max_length)
        return value

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return any(n == name for n, _ in self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"