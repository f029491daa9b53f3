"""A singly linked chain of arbitrary items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass
class _Link:
    content: Any
    next: Optional["_Link"] = None


class ChainList:
    """A singly linked list that grows at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._size = 0
        for item in items:
            self.append(item)

    def append(self, content: Any) -> None:
        """Add ``content`` at the end of the chain."""
        link = _Link(content)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._size += 1

    def prepend(self, content: Any) -> None:
        """Add ``content`` at the front of the chain."""
        self._head = _Link(content, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def last(self) -> Any:
        """Return the last item; raises ``IndexError`` when the chain is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty chain")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        link = self._head
        while link is not None:
            yield link.content
            link = link.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChainList):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    def __repr__(self) -> str:
        return f"ChainList({list(self)!r})"