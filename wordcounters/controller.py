"""Starts, pauses, resumes and cancels a background word count."""

from __future__ import annotations

import errno
import logging
import os
import threading
from typing import Optional

from .model import WordFrequencyModel
from .worker import WordCountWorker

log = logging.getLogger(__name__)


class Controller:
    """Runs a word count in a background thread and feeds a model with results."""

    def __init__(self, model: Optional[WordFrequencyModel] = None):
        self._model = model
        self._lock = threading.RLock()
        self._file_path: Optional[str] = None
        self._progress = 0.0
        self._running = False
        self._paused = False
        self._canceled = False
        self._worker: Optional[WordCountWorker] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def file_path(self):
        """The file to be counted, or None."""
        return self._file_path

    @file_path.setter
    def file_path(self, value):
        self._file_path = None if value is None else os.fspath(value)

    @property
    def progress(self):
        """Percentage of the file processed so far."""
        return self._progress

    @property
    def running(self):
        return self._running

    @property
    def paused(self):
        return self._paused

    def start(self):
        """Begin counting the current file; does nothing if already running or no file is set.

        Raises FileNotFoundError if the path is not a regular file.
        """
        with self._lock:
            if self._running or not self._file_path:
                return
            path = self._file_path
            if not os.path.isfile(path):
                log.warning("Invalid file: %s", path)
                raise FileNotFoundError(errno.ENOENT, "Not a file", path)

            self._canceled = False

            def on_results(words, counts):
                with self._lock:
                    if worker is self._worker and not self._canceled and self._model:
                        self._model.update(words, counts)

            def on_progress(percent):
                with self._lock:
                    if worker is self._worker and not self._canceled:
                        self._progress = float(percent)

            def on_finished():
                with self._lock:
                    if worker is not self._worker:
                        return
                    self._running = False
                    self._paused = False
                    self._canceled = False
                    self._worker = None

            worker = WordCountWorker(path, on_results, on_progress, on_finished)
            self._worker = worker
            self._thread = threading.Thread(
                target=worker.process, name="word-count", daemon=True
            )
            self._running = True
            self._paused = False
            self._progress = 0.0
            self._thread.start()

    def pause(self):
        """Pause a running count."""
        with self._lock:
            if self._running and not self._paused and self._worker:
                self._paused = True
                self._worker.pause()

    def resume(self):
        """Resume a paused count."""
        with self._lock:
            if self._running and self._paused and self._worker:
                self._paused = False
                self._worker.resume()

    def cancel(self):
        """Clear the results and stop any running count."""
        with self._lock:
            if self._model is not None:
                self._model.clear()
            self._progress = 0.0
            if self._running and self._worker:
                self._canceled = True
                self._paused = False
                self._worker.cancel()
            self._running = False

    def wait(self, timeout=None):
        """Wait for the background thread; return True once it has ended."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()