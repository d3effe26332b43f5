from datetime import datetime

from asserts import assert_equal

from .ordering import PlayerOrder, paginate, sort_players
from .player import Player


def players():
    return [
        Player(id=3, experience=500, level=2, birthday=datetime(2003, 1, 1)),
        Player(id=1, experience=100, level=1, birthday=datetime(2009, 1, 1)),
        Player(id=4, experience=100, level=1, birthday=datetime(2001, 1, 1)),
        Player(id=2, experience=9000, level=12, birthday=datetime(2005, 1, 1)),
    ]


def ids(items):
    return [p.id for p in items]


def test_no_order_keeps_input():
    assert_equal(ids(sort_players(players(), None)), [3, 1, 4, 2])


def test_sort_by_each_field():
    assert_equal(ids(sort_players(players(), PlayerOrder.ID)), [1, 2, 3, 4])
    assert_equal(ids(sort_players(players(), PlayerOrder.BIRTHDAY)), [4, 3, 2, 1])
    assert_equal(ids(sort_players(players(), PlayerOrder.LEVEL)), [1, 4, 3, 2])


def test_ties_keep_input_order():
    assert_equal(ids(sort_players(players(), PlayerOrder.EXPERIENCE)), [1, 4, 3, 2])
    reversed_input = list(reversed(players()))
    assert_equal(ids(sort_players(reversed_input, PlayerOrder.EXPERIENCE)), [4, 1, 3, 2])


def test_sort_does_not_touch_input():
    items = players()
    sort_players(items, PlayerOrder.ID)
    assert_equal(ids(items), [3, 1, 4, 2])


def test_field_names():
    assert_equal(PlayerOrder.ID.field_name, "id")
    assert_equal(PlayerOrder.EXPERIENCE.field_name, "experience")


def test_pages():
    items = list(range(7))
    assert_equal(paginate(items, 0, 3), [0, 1, 2])
    assert_equal(paginate(items, 2, 3), [6])
    assert_equal(paginate(items, 3, 3), [])


def test_zero_page_size():
    items = list(range(7))
    for page in range(3):
        assert_equal(paginate(items, page, 0), [])


def test_pages_rebuild_sequence():
    items = sort_players(players(), PlayerOrder.LEVEL)
    for size in range(1, 6):
        total_pages = -(-len(items) // size)
        rebuilt = []
        for page in range(total_pages):
            rebuilt.extend(paginate(items, page, size))
        assert_equal(ids(rebuilt), ids(items))
