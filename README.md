# wordcounters

Find the most frequent words in a text file, however large.

The file is read in 64 KiB chunks, so memory use stays small. Words are
runs of Unicode letters, decimal digits and apostrophes; everything else
separates them. Counting is case-sensitive. The file is decoded with the
system's preferred encoding, and bytes that do not decode are replaced
rather than rejected.

## Installation

```
pip install .
```

## Command line

```
wordcounters path/to/book.txt
```

This counts the words in the file and, when done, prints the 15 most
frequent ones, one per line: the count right-aligned in ten columns, two
spaces, then the word.

If the path is not a regular file, a message goes to standard error and
the exit status is 1. Pressing Ctrl-C stops the count and exits with
status 130.

## Library use

```python
from wordcounters.model import WordFrequencyModel
from wordcounters.controller import Controller

model = WordFrequencyModel()
unsubscribe = model.subscribe(lambda: print("top words changed"))

controller = Controller(model)
controller.file_path = "book.txt"
controller.start()        # counting runs on a background thread
controller.wait(None)     # block until it is done

for entry in model:
    print(entry.word, entry.count)
print("largest count:", model.max_count)
```

### Controller

`Controller.start()` does nothing if a count is already running or no
`file_path` is set, and raises `FileNotFoundError` if the path is not a
regular file. While a run is going, `pause()`, `resume()` and `cancel()`
control it, and `progress` (a percentage), `running` and `paused` give its
state. `cancel()` clears the model and sets the progress back to zero;
results arriving after a cancel are ignored. `wait(timeout)` joins the
background thread and returns `True` once it has ended.

### WordFrequencyModel

Holds the current top words as `Entry(word, count)` items. It supports
`len()`, indexing and iteration. `update(words, counts)` replaces the
contents, pairing the two sequences and ignoring extra items in the longer
one; `clear()` empties it. `max_count` is the largest count held, or 0.
`subscribe(callback)` registers a function called after every change and
returns a function that removes it.

### WordCountWorker and tokenize

`wordcounters.worker.WordCountWorker(file_path, on_results, on_progress,
on_finished)` does the counting itself. Its `process()` method reads the
file and, about every 256 KiB and once at the end, calls
`on_results(words, counts)` with the current top 15 and
`on_progress(percent)`; `on_finished()` is called when it stops, also when
the file cannot be opened. `pause()`, `resume()` and `cancel()` may be
called from another thread and take effect before the next chunk.
`top_words(limit)` returns the most frequent `(word, count)` pairs.

`wordcounters.worker.tokenize(text)` splits a piece of text into words by
the same rule.

## What it does not do

There is no graphical window: results are available through the library
or printed by the command once counting is finished. The command does not
show progress while it runs and offers no pause or resume; those are
available only through the library.

## Tests

```
pip install .[test]
pytest
```