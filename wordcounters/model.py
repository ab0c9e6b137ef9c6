"""A list of the most frequent words, with change notification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator


@dataclass(frozen=True)
class Entry:
    """One word and how many times it occurred."""

    word: str
    count: int


class WordFrequencyModel:
    """Holds the current top words and notifies subscribers when they change."""

    def __init__(self):
        self._entries: list[Entry] = []
        self._max_count = 0
        self._subscribers: list[Callable[[], None]] = []

    def update(self, words, counts):
        """Replace the contents with paired words and counts.

        Extra items in the longer sequence are ignored.
        """
        self._entries = [Entry(word, count) for word, count in zip(words, counts)]
        self._max_count = max((entry.count for entry in self._entries), default=0)
        for callback in list(self._subscribers):
            callback()

    def clear(self):
        """Remove all entries."""
        self.update([], [])

    def subscribe(self, callback):
        """Call ``callback`` after every change; returns a function that unsubscribes."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def max_count(self):
        """The largest count held, or 0 when empty."""
        return self._max_count

    def __len__(self):
        return len(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))