"""
ir.py - Domenski modeli (kursevi, semestri, termini, konfiguracija)

IR je sloj izmedju ucitanog kataloga i izlaznih generatora.
Course nosi vec parsirano stablo preduslova (models.py), a Term je
rezultat rada sekvencera (sequencer.py).

Generatori (generators/) citaju samo Term/Course objekte.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

# Stablo preduslova je definisano u models.py (AST nivo)
from .models import PrerequisiteTree


# ---------------------------------------------------------------------------
# Semestar (sezona)
# ---------------------------------------------------------------------------
class Season(Enum):
    """Sezona u kojoj se odrzava termin.

    Ciklus: Summer -> Fall -> Winter -> (Summer ili Fall, zavisno od
    toga da li je ljetni semestar ukljucen)."""
    SUMMER = "Summer"
    FALL = "Fall"
    WINTER = "Winter"

    def next(self, include_summer):
        """Vraca sljedecu sezonu u ciklusu."""
        if self is Season.SUMMER:
            return Season.FALL
        if self is Season.FALL:
            return Season.WINTER
        return Season.SUMMER if include_summer else Season.FALL

    @classmethod
    def from_name(cls, name):
        """Parsira naziv sezone bez obzira na velika/mala slova.
        Prihvata i vec gotov Season objekat."""
        if isinstance(name, cls):
            return name
        for season in cls:
            if season.value.lower() == str(name).strip().lower():
                return season
        raise ValueError(f"Nepoznata sezona: '{name}'")

    def __str__(self):
        return self.value


# ---------------------------------------------------------------------------
# Kurs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class CourseRef:
    """Identifikator kursa: predmet + kataloski broj."""
    subject_code: str
    catalog_code: int

    def __str__(self):
        return f"{self.subject_code} {self.catalog_code}"


@dataclass(frozen=True)
class Course:
    """Kurs iz kataloga sa parsiranim preduslovima.

    terms_offered uvijek ima sva tri kljuca (Summer, Fall, Winter);
    kljucevi koji nedostaju pri kreiranju dobijaju False.
    Kurs je hashable (po ref-u) iako terms_offered nije."""
    subject_code: str
    name: str
    catalog_code: int
    prerequisites: Optional[PrerequisiteTree] = None
    terms_offered: Dict[Season, bool] = field(default_factory=dict)

    # Hash samo po identitetu (predmet + broj); jednaki kursevi imaju isti ref
    def __hash__(self):
        return hash(self.ref)

    def __post_init__(self):
        offered = {season: bool(self.terms_offered.get(season, False))
                   for season in Season}
        object.__setattr__(self, 'terms_offered', offered)

    @property
    def ref(self) -> CourseRef:
        return CourseRef(self.subject_code, self.catalog_code)

    def is_offered(self, season: Season) -> bool:
        return self.terms_offered[season]

    @property
    def offered_seasons(self) -> List[Season]:
        return [s for s in Season if self.terms_offered[s]]

    def __str__(self):
        return f"{self.subject_code} {self.catalog_code}: {self.name}"


# ---------------------------------------------------------------------------
# Termin (jedan semestar u planu)
# ---------------------------------------------------------------------------
@dataclass
class Term:
    """Jedan semestar plana: sezona, godina i kursevi po redoslijedu izbora."""
    season: Season
    year: int
    courses: List[Course] = field(default_factory=list)

    def __str__(self):
        lines = [f"Term: {self.season} {self.year}"]
        if self.courses:
            lines.extend(str(c) for c in self.courses)
        else:
            lines.append("<No courses in this term>")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Konfiguracija sekvenciranja
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SequenceConfig:
    """Parametri jednog pokretanja sekvencera."""
    include_summer: bool
    starting_year: int
    starting_semester: Season
    max_courses_per_term: int

    def __post_init__(self):
        if not isinstance(self.starting_semester, Season):
            object.__setattr__(self, 'starting_semester',
                               Season.from_name(self.starting_semester))
        if int(self.max_courses_per_term) < 1:
            raise ValueError("max_courses_per_term mora biti barem 1")
        if int(self.starting_year) < 0:
            raise ValueError("starting_year ne moze biti negativan")

    @classmethod
    def from_dict(cls, data):
        """Gradi konfiguraciju iz JSON/form podataka (vrijednosti mogu biti stringovi)."""
        missing = [k for k in ('include_summer', 'starting_year',
                               'starting_semester', 'max_courses_per_term')
                   if k not in data]
        if missing:
            raise ValueError(f"Nedostaju kljucevi konfiguracije: {', '.join(missing)}")
        return cls(
            include_summer=parse_bool(data['include_summer']),
            starting_year=int(data['starting_year']),
            starting_semester=Season.from_name(data['starting_semester']),
            max_courses_per_term=int(data['max_courses_per_term']),
        )

    def to_dict(self):
        return {
            'include_summer': self.include_summer,
            'starting_year': self.starting_year,
            'starting_semester': self.starting_semester.value,
            'max_courses_per_term': self.max_courses_per_term,
        }


def parse_bool(value):
    """'true'/'false' (bilo koja velika/mala slova) ili bool -> bool."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text == 'true':
        return True
    if text == 'false':
        return False
    raise ValueError(f"Ocekivano true ili false, dobijeno '{value}'")
