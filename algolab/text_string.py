"""A mutable character string."""

from __future__ import annotations


class CharString:
    """Mutable sequence of characters with C-string construction semantics.

    Text given to the constructor or :meth:`set_text` ends at the first NUL
    character, as a C string would.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, text: str = "") -> None:
        self._chars: list[str] = []
        self.set_text(text)

    def __add__(self, other: CharString | str) -> CharString:
        if isinstance(other, CharString):
            other_text = other.text()
        elif isinstance(other, str):
            other_text = other
        else:
            return NotImplemented
        result = CharString()
        result._chars = self._chars + list(other_text)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharString):
            return NotImplemented
        return self is other or self._chars == other._chars

    def __getitem__(self, index: int) -> str:
        return self._chars[index]

    def __setitem__(self, index: int, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("a single character is required")
        self._chars[index] = char

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text()!r})"

    def set_text(self, text: str) -> None:
        """Replace the contents with ``text`` up to its first NUL."""
        if not isinstance(text, str):
            raise TypeError("text must be a str")
        self._chars = list(text.split("\0", 1)[0])

    def text(self) -> str:
        """Return the contents as a Python string."""
        return "".join(self._chars)