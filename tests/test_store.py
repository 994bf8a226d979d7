from conftest import make_table
from region_table_extractor.spatial import Selection
from region_table_extractor.structures import Table


def test_put_and_list(store):
    t1, t2 = make_table([["A"], ["1"]], 1), make_table([["A"], ["2"]], 2)
    store.put(1, t1)
    store.put(2, t2, Selection(0, 0, 10, 10))
    assert [e.table for e in store.list()] == [t1, t2]
    assert store.pages() == [1, 2]
    assert store.get(2).selection == Selection(0, 0, 10, 10)


def test_put_replaces_same_page_and_moves_it_last(store):
    store.put(1, make_table([["A"], ["old"]], 1))
    store.put(2, make_table([["A"], ["p2"]], 2))
    replacement = make_table([["A"], ["new"]], 1)
    store.put(1, replacement)
    assert len(store) == 2
    assert store.pages() == [2, 1]
    assert store.get(1).table == replacement


def test_empty_table_is_stored_as_is(store):
    store.put(4, Table(rows=[]))
    assert 4 in store
    assert store.get(4).table.is_empty
    assert store.get(4).page_number == 4


def test_clear(store):
    store.put(1, make_table([["A"]], 1))
    store.clear()
    assert store.list() == []
    assert len(store) == 0
    assert store.get(1) is None


def test_list_is_a_copy(store):
    store.put(1, make_table([["A"]], 1))
    store.list().clear()
    assert len(store) == 1


def test_same_table_under_two_pages_keeps_both(store):
    table = make_table([["A"], ["1"]], 1)
    store.put(1, table)
    store.put(2, table)
    assert store.pages() == [1, 2]
    assert store.get(1).page_number == 1
    assert store.get(2).page_number == 2
    assert len(store) == 2


def test_put_does_not_touch_callers_table(store):
    table = make_table([["A"], ["1"]], 1)
    store.put(3, table)
    assert table.page_number == 1
    assert store.get(3).table.page_number == 3
    assert store.get(3).table.rows == table.rows
