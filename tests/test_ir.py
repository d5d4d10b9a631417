import pytest

from usequence.ir import Course, Season, SequenceConfig, parse_bool


def test_course_is_hashable(make_course):
    first = make_course("CSI", 1111, "MAT 1341", offered="F")
    same = make_course("CSI", 1111, "MAT 1341", offered="F")
    assert hash(first) == hash(same)
    assert len({first, same, make_course("CSI", 1112)}) == 2


def test_terms_offered_has_every_season():
    course = Course("CSI", "Intro", 1111, terms_offered={Season.FALL: True})
    assert course.terms_offered == {
        Season.SUMMER: False, Season.FALL: True, Season.WINTER: False,
    }
    assert course.offered_seasons == [Season.FALL]


@pytest.mark.parametrize("current, include_summer, expected", [
    (Season.FALL, False, Season.WINTER),
    (Season.WINTER, False, Season.FALL),
    (Season.WINTER, True, Season.SUMMER),
    (Season.SUMMER, False, Season.FALL),
])
def test_season_cycle(current, include_summer, expected):
    assert current.next(include_summer) is expected


def test_config_from_dict():
    config = SequenceConfig.from_dict({
        "include_summer": "TRUE",
        "starting_year": "2024",
        "starting_semester": "winter",
        "max_courses_per_term": "4",
    })
    assert config.include_summer is True
    assert config.starting_semester is Season.WINTER
    assert config.to_dict()["starting_semester"] == "Winter"


@pytest.mark.parametrize("data", [
    {"include_summer": "false", "starting_year": 2024, "starting_semester": "Fall"},
    {"include_summer": "no", "starting_year": 2024, "starting_semester": "Fall",
     "max_courses_per_term": 3},
    {"include_summer": "false", "starting_year": 2024, "starting_semester": "Fall",
     "max_courses_per_term": 0},
])
def test_config_rejects_bad_values(data):
    with pytest.raises(ValueError):
        SequenceConfig.from_dict(data)


def test_parse_bool():
    assert parse_bool("False") is False
    assert parse_bool(True) is True
    with pytest.raises(ValueError):
        parse_bool("1")
