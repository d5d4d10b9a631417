import pytest

from usequence.ir import Course, Season, SequenceConfig
from usequence.parser import parse_prerequisites

SEASON_CODES = {'S': Season.SUMMER, 'F': Season.FALL, 'W': Season.WINTER}


@pytest.fixture
def make_course():
    """Fabrika kurseva: offered je string od slova S/F/W."""
    def _make(subject, catalog, prerequisites=None, offered="SFW", name=None):
        tree = parse_prerequisites(prerequisites) if prerequisites else None
        return Course(
            subject_code=subject,
            name=name or f"{subject} {catalog} course",
            catalog_code=catalog,
            prerequisites=tree,
            terms_offered={SEASON_CODES[ch]: True for ch in offered},
        )
    return _make


@pytest.fixture
def make_config():
    def _make(include_summer=False, starting_semester=Season.FALL,
              starting_year=2023, max_courses_per_term=3):
        return SequenceConfig(
            include_summer=include_summer,
            starting_year=starting_year,
            starting_semester=starting_semester,
            max_courses_per_term=max_courses_per_term,
        )
    return _make


@pytest.fixture
def scenario_catalog(make_course):
    """Katalog iz primjera: CSI1111, MAT1111, CSI1112 (trazi CSI1111), PHY1111."""
    return [
        make_course("CSI", 1111, offered="FS", name="Intro to computing"),
        make_course("MAT", 1111, offered="SF", name="A math course"),
        make_course("CSI", 1112, "CSI 1111.", offered="SFW", name="Computing II"),
        make_course("PHY", 1111, offered="WF", name="A physics course"),
    ]


SCENARIO_CSV = (
    "Subject,Catalog,Name,Prerequisites,Winter,Summer,Fall\n"
    "CSI,1111,Intro to computing,,false,true,true\n"
    "MAT,1111,A math course,,false,true,true\n"
    "CSI,1112,Computing II,CSI 1111.,true,true,true\n"
    "PHY,1111,A physics course,,true,false,true\n"
)


@pytest.fixture
def scenario_csv():
    return SCENARIO_CSV
