"""
Tests for the label table.
"""
import pytest

from nondelang.exceptions import DuplicateLabelError
from nondelang.labels import LabelTable


def test_add_and_find():
    """Labels map to the index they were registered with."""
    labels = LabelTable()
    labels.add("start", 0, 1)
    labels.add("end", 4, 9)
    assert labels.find("start") == 0
    assert labels.find("end") == 4
    assert labels.find("missing") is None
    assert labels.line_of("end") == 9
    assert "start" in labels
    assert len(labels) == 2


def test_iterates_in_declaration_order():
    """Iteration yields (name, index) in the order labels were added."""
    labels = LabelTable()
    for index, name in enumerate(["c", "a", "b"]):
        labels.add(name, index)
    assert list(labels) == [("c", 0), ("a", 1), ("b", 2)]


def test_duplicate_label_rejected():
    """Adding a name twice fails and keeps the first entry."""
    labels = LabelTable()
    labels.add("again", 1, 2)
    with pytest.raises(DuplicateLabelError) as exc:
        labels.add("again", 3, 7)
    assert exc.value.name == "again"
    assert str(exc.value) == "Duplicate label: again (line 7)"
    assert labels.find("again") == 1


def test_several_labels_may_share_an_index():
    """Back-to-back labels point at the same command."""
    labels = LabelTable()
    labels.add("one", 2)
    labels.add("two", 2)
    assert labels.find("one") == labels.find("two") == 2
