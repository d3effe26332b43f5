from datetime import datetime

from asserts import assert_equal, assert_raises

from .exceptions import InvalidField, InvalidPlayer
from .player import (Player, Profession, Race, birthday_from_millis,
                     millis_from_birthday)
from .validation import (validate_birthday, validate_experience, validate_name,
                         validate_player, validate_profession, validate_race,
                         validate_title)


def valid_player(**kwargs):
    fields = dict(
        name="Ash",
        title="Novice",
        race=Race.HUMAN,
        profession=Profession.WARRIOR,
        birthday=datetime(2020, 1, 1),
        experience=100,
    )
    fields.update(kwargs)
    return Player(**fields)


def test_valid_player():
    validate_player(valid_player())


def test_null_player():
    with assert_raises(InvalidPlayer):
        validate_player(None)


def test_name():
    validate_name("a")
    validate_name("a" * 12)
    for bad in [None, "", "a" * 13]:
        with assert_raises(InvalidField):
            validate_name(bad)


def test_title():
    validate_title("t")
    validate_title("t" * 30)
    for bad in [None, "", "t" * 31]:
        with assert_raises(InvalidField):
            validate_title(bad)


def test_experience():
    validate_experience(0)
    validate_experience(10_000_000)
    for bad in [None, -1, 10_000_001, "100"]:
        with assert_raises(InvalidField):
            validate_experience(bad)


def test_race_and_profession():
    validate_race(Race.ORC)
    validate_profession(Profession.DRUID)
    with assert_raises(InvalidField):
        validate_race(None)
    with assert_raises(InvalidField):
        validate_race("ORC")
    with assert_raises(InvalidField):
        validate_profession(None)


def test_birthday():
    validate_birthday(datetime(2000, 1, 1))
    validate_birthday(datetime(2999, 12, 31, 23, 59, 59))
    for bad in [None, datetime(1999, 12, 31, 23, 59, 59), datetime(3000, 1, 1)]:
        with assert_raises(InvalidField):
            validate_birthday(bad)


def test_invalid_field_carries_field_name():
    try:
        validate_player(valid_player(experience=10_000_001))
    except InvalidField as e:
        assert_equal(e.field, "experience")
    else:
        raise AssertionError("InvalidField not raised")


def test_first_failure_wins():
    try:
        validate_player(valid_player(name="", experience=-5))
    except InvalidField as e:
        assert_equal(e.field, "name")
    else:
        raise AssertionError("InvalidField not raised")


def test_missing_banned_is_valid():
    # banned no se valida, se completa al crear
    validate_player(valid_player(banned=None))


def test_birthday_from_millis():
    millis = millis_from_birthday(datetime(2020, 1, 1))
    assert_equal(birthday_from_millis(millis), datetime(2020, 1, 1))


def test_birthday_from_millis_out_of_range():
    for millis in [10**17, -(10**17)]:
        try:
            birthday_from_millis(millis, "after")
        except InvalidField as e:
            assert_equal(e.field, "after")
        else:
            raise AssertionError("InvalidField not raised")
    with assert_raises(InvalidField):
        birthday_from_millis(10**17)
