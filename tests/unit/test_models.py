"""Tests for the bookmark model."""

import pytest

from bookmark_datesort.models.bookmark import Bookmark, DateRecord


def test_create_child_appends_by_default() -> None:
    root = Bookmark(label="root")
    first = root.create_child("first")
    second = root.create_child("second", "goto:2")

    assert root.children == [first, second]
    assert second.action == "goto:2"
    assert second.parent is root


def test_create_child_at_index_zero_goes_first() -> None:
    root = Bookmark(label="root")
    root.create_child("later")
    top = root.create_child("top", None, 0)

    assert root.children is not None
    assert root.children[0] is top


def test_bookmarks_compare_by_identity() -> None:
    assert Bookmark(label="same") != Bookmark(label="same")
    a = Bookmark(label="same")
    assert {a: 1}[a] == 1


def test_insert_child_moves_bookmark_between_parents() -> None:
    child = Bookmark(label="child")
    old = Bookmark(label="old", children=[child])
    new = Bookmark(label="new")

    new.insert_child(child)

    assert old.children is None
    assert new.children == [child]
    assert child.parent is new


def test_insert_child_rejects_own_ancestor() -> None:
    leaf = Bookmark(label="leaf")
    top = Bookmark(label="top", children=[Bookmark(label="mid", children=[leaf])])

    with pytest.raises(ValueError, match="own subtree"):
        leaf.insert_child(top)


def test_insert_child_rejects_out_of_range_index() -> None:
    root = Bookmark(label="root")
    with pytest.raises(IndexError):
        root.insert_child(Bookmark(label="x"), 3)
    assert root.children is None


def test_date_record_is_frozen() -> None:
    record = DateRecord(bookmark=Bookmark(label="2020-01-01"), token="2020-01-01", timestamp=0)
    with pytest.raises(AttributeError):
        record.token = "changed"  # type: ignore[misc]


def test_constructor_rejects_child_of_another_bookmark() -> None:
    shared = Bookmark(label="shared")
    first = Bookmark(label="first", children=[shared])

    with pytest.raises(ValueError, match="already belongs to 'first'"):
        Bookmark(label="second", children=[shared])
    assert first.children == [shared]
    assert shared.parent is first


def test_constructor_rejects_repeated_child() -> None:
    twice = Bookmark(label="twice")
    with pytest.raises(ValueError, match="already belongs"):
        Bookmark(label="root", children=[twice, twice])
