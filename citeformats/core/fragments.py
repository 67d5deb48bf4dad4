"""Punctuation-aware joining of citation fragments."""

from typing import NamedTuple


class Fragment(NamedTuple):
    """A piece of citation text and the punctuation that follows it."""

    content: str
    separator: str = ""


class FragmentList:
    """Ordered fragments where an empty fragment vanishes with its separator.

    A fragment's separator is written only when a later fragment has
    content, so the joined text never ends with dangling punctuation and
    never doubles a delimiter around a missing value.
    """

    def __init__(self):
        self._fragments: list[Fragment] = []

    def add(self, content: str | None, separator: str = "") -> "FragmentList":
        """Append a fragment; blank content is dropped."""
        if content and content.strip():
            self._fragments.append(Fragment(content, separator))
        return self

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self):
        return iter(self._fragments)

    def join(self) -> str:
        parts = []
        for i, fragment in enumerate(self._fragments):
            parts.append(fragment.content)
            if i < len(self._fragments) - 1:
                parts.append(fragment.separator)
        return "".join(parts)

    def __str__(self) -> str:
        return self.join()
