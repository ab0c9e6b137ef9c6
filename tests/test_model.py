import pytest

from wordcounters.model import Entry, WordFrequencyModel


def test_update_stores_entries_in_order():
    model = WordFrequencyModel()
    model.update(["a", "b"], [3, 1])
    assert len(model) == 2
    assert list(model) == [Entry("a", 3), Entry("b", 1)]
    assert model[0] == Entry("a", 3)
    assert model[1].word == "b"


def test_update_truncates_to_shorter_sequence():
    model = WordFrequencyModel()
    model.update(["a", "b", "c"], [4, 2])
    assert [entry.word for entry in model] == ["a", "b"]
    model.update(["x"], [5, 6, 7])
    assert list(model) == [Entry("x", 5)]


def test_max_count_tracks_largest():
    model = WordFrequencyModel()
    model.update(["a", "b", "c"], [2, 7, 4])
    assert model.max_count == 7


def test_empty_model_has_zero_max():
    model = WordFrequencyModel()
    assert len(model) == 0
    assert model.max_count == 0


def test_update_replaces_previous_contents():
    model = WordFrequencyModel()
    model.update(["a", "b"], [9, 8])
    model.update(["c"], [1])
    assert list(model) == [Entry("c", 1)]
    assert model.max_count == 1


def test_clear_empties_model():
    model = WordFrequencyModel()
    model.update(["a"], [3])
    model.clear()
    assert list(model) == []
    assert model.max_count == 0


def test_subscribers_are_notified_and_can_unsubscribe():
    model = WordFrequencyModel()
    calls = []
    unsubscribe = model.subscribe(lambda: calls.append(len(model)))
    model.update(["a", "b"], [2, 1])
    model.clear()
    assert calls == [2, 0]
    unsubscribe()
    model.update(["a"], [1])
    assert calls == [2, 0]


def test_index_out_of_range_raises():
    model = WordFrequencyModel()
    model.update(["a"], [1])
    assert model[0] == Entry("a", 1)
    with pytest.raises(IndexError):
        model[1]
    assert len(model) == 1
    assert list(model) == [Entry("a", 1)]