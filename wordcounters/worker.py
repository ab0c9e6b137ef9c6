"""Chunked, pausable word-frequency counting over a text file."""

from __future__ import annotations

import codecs
import locale
import os
import threading
from collections import Counter
from typing import Callable, Optional

import regex

CHUNK_SIZE = 64 * 1024
REPORT_EVERY = 4
TOP_LIMIT = 15

_SEPARATOR = regex.compile(r"[^\p{L}\p{Nd}']+")

ResultsCallback = Callable[[list, list], None]
ProgressCallback = Callable[[int], None]
FinishedCallback = Callable[[], None]


def tokenize(text):
    """Split text into words made of letters, decimal digits and apostrophes."""
    return [token for token in _SEPARATOR.split(text) if token]


class WordCountWorker:
    """Counts words in a file chunk by chunk, reporting the most frequent ones.

    ``process`` is meant to run in its own thread; ``pause``, ``resume`` and
    ``cancel`` may be called from any other thread.
    """

    def __init__(
        self,
        file_path,
        on_results: Optional[ResultsCallback] = None,
        on_progress: Optional[ProgressCallback] = None,
        on_finished: Optional[FinishedCallback] = None,
    ):
        self.file_path = os.fspath(file_path)
        self._on_results = on_results
        self._on_progress = on_progress
        self._on_finished = on_finished
        self._encoding = locale.getpreferredencoding(False)
        self._counts: Counter = Counter()
        self._counts_lock = threading.Lock()
        self._state = threading.Condition()
        self._paused = False
        self._cancelled = False

    def process(self):
        """Read the whole file, counting words and reporting as it goes."""
        try:
            handle = open(self.file_path, "rb")
        except OSError:
            self._finish()
            return

        with handle:
            total = os.fstat(handle.fileno()).st_size
            bytes_read = 0
            chunks_since_report = 0
            decoder = codecs.getincrementaldecoder(self._encoding)(errors="replace")
            pending = ""

            while bytes_read < total:
                if not self._wait_while_paused():
                    break

                buffer = handle.read(CHUNK_SIZE)
                if not buffer:
                    break
                bytes_read += len(buffer)
                chunks_since_report += 1
                at_end = bytes_read >= total

                data = pending + decoder.decode(buffer, final=at_end)
                pending = ""
                tokens = tokenize(data)
                # A chunk that does not end in whitespace may have cut its last word.
                if tokens and not data[-1].isspace():
                    pending = tokens.pop()

                with self._counts_lock:
                    self._counts.update(tokens)

                if chunks_since_report % REPORT_EVERY == 0 or at_end:
                    self._report(min(bytes_read * 100 // total, 100))
                    chunks_since_report = 0

        if pending:
            with self._counts_lock:
                self._counts[pending] += 1

        with self._state:
            cancelled = self._cancelled

        percent = bytes_read * 100 // total if total else 0
        if not cancelled:
            percent = 100
        self._report(min(percent, 100))
        self._finish()

    def pause(self):
        """Hold processing before the next chunk."""
        with self._state:
            self._paused = True

    def resume(self):
        """Continue processing after a pause."""
        with self._state:
            self._paused = False
            self._state.notify_all()

    def cancel(self):
        """Stop processing before the next chunk."""
        with self._state:
            self._cancelled = True
            self._state.notify_all()

    def top_words(self, limit=TOP_LIMIT):
        """Return the ``limit`` most frequent words as (word, count) pairs."""
        with self._counts_lock:
            return self._counts.most_common(limit)

    def _wait_while_paused(self) -> bool:
        with self._state:
            while self._paused and not self._cancelled:
                self._state.wait()
            return not self._cancelled

    def _report(self, percent: int) -> None:
        top = self.top_words(TOP_LIMIT)
        words = [word for word, _ in top]
        counts = [count for _, count in top]
        if self._on_results is not None:
            self._on_results(words, counts)
        if self._on_progress is not None:
            self._on_progress(percent)

    def _finish(self) -> None:
        if self._on_finished is not None:
            self._on_finished()