import pytest
from hypothesis import given
from hypothesis import strategies as st

from algocollection.linked_lists import (
    DayLists,
    DoublyLinkedList,
    SinglyLinkedList,
    Timetable,
)


def test_singly_append_keeps_insertion_order():
    items = SinglyLinkedList()
    for value in (10, 3, 98, 78, 3):
        items.append(value)
    assert list(items) == [10, 3, 98, 78, 3]
    assert len(items) == 5


def test_singly_prepend_reverses_order():
    items = SinglyLinkedList()
    for value in (10, 20, 30):
        items.prepend(value)
    assert list(items) == [30, 20, 10]


def test_singly_mixed_operations():
    items = SinglyLinkedList([2])
    items.prepend(1)
    items.append(3)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_singly_empty():
    assert list(SinglyLinkedList()) == []
    assert len(SinglyLinkedList()) == 0


@given(st.lists(st.integers()))
def test_singly_round_trip(values):
    items = SinglyLinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


def test_doubly_append_and_prepend():
    dll = DoublyLinkedList()
    dll.append(1, "a")
    dll.append(2, "b")
    dll.prepend(0, "z")
    assert dll.items() == [(0, "z"), (1, "a"), (2, "b")]


def test_doubly_duplicate_key_rejected():
    dll = DoublyLinkedList()
    dll.append(1, "a")
    with pytest.raises(ValueError):
        dll.append(1, "b")
    with pytest.raises(ValueError):
        dll.prepend(1, "c")
    assert dll.items() == [(1, "a")]


def test_doubly_insert_after_middle_and_end():
    dll = DoublyLinkedList()
    dll.append(1, "a")
    dll.append(3, "c")
    dll.insert_after(1, 2, "b")
    dll.insert_after(3, 4, "d")
    assert dll.items() == [(1, "a"), (2, "b"), (3, "c"), (4, "d")]


def test_doubly_insert_after_missing_key():
    dll = DoublyLinkedList()
    with pytest.raises(KeyError):
        dll.insert_after(9, 1, "a")


def test_doubly_delete_head_middle_tail():
    dll = DoublyLinkedList()
    for key in range(5):
        dll.append(key, str(key))
    assert dll.delete(2) == "2"
    assert dll.delete(0) == "0"
    assert dll.delete(4) == "4"
    assert dll.items() == [(1, "1"), (3, "3")]
    dll.append(5, "5")
    assert dll.items()[-1] == (5, "5")


def test_doubly_delete_missing():
    dll = DoublyLinkedList()
    dll.append(1, "a")
    with pytest.raises(KeyError):
        dll.delete(2)


def test_doubly_find_and_update():
    dll = DoublyLinkedList()
    dll.append(7, "old")
    assert dll.find(7) == "old"
    assert dll.find(8) is None
    dll.update(7, "new")
    assert dll.find(7) == "new"
    with pytest.raises(KeyError):
        dll.update(8, "x")


def test_day_lists_keep_order_per_day():
    lists = DayLists()
    lists.add(1, "maths")
    lists.add(1, "physics")
    lists.add(3, "art")
    assert lists.entries(1) == ["maths", "physics"]
    assert lists.entries(3) == ["art"]
    assert lists.entries(7) == []


@pytest.mark.parametrize("day", [0, 8])
def test_day_lists_reject_out_of_range(day):
    with pytest.raises(ValueError):
        DayLists().add(day, "x")


def test_timetable_orders_by_slot():
    table = Timetable()
    table.add(2, "chemistry", 3)
    table.add(2, "maths", 1)
    table.add(2, "biology", 2)
    assert table.entries(2) == [("maths", 1), ("biology", 2), ("chemistry", 3)]


def test_timetable_equal_slot_to_head_goes_after_it():
    table = Timetable()
    table.add(1, "first", 5)
    table.add(1, "second", 5)
    assert table.entries(1) == [("first", 5), ("second", 5)]


@given(st.lists(st.integers(min_value=0, max_value=20)))
def test_timetable_slots_non_decreasing(slots):
    table = Timetable()
    for index, slot in enumerate(slots):
        table.add(4, f"s{index}", slot)
    stored = [slot for _, slot in table.entries(4)]
    assert stored == sorted(slots)


def test_busiest_day_picks_earliest_maximum():
    table = Timetable()
    table.add(3, "a", 1)
    table.add(3, "b", 2)
    table.add(5, "c", 1)
    table.add(5, "d", 2)
    table.add(1, "e", 1)
    assert table.busiest_day() == 3


def test_busiest_day_empty():
    assert Timetable().busiest_day() is None