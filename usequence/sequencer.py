"""
sequencer.py - Raspored kurseva po semestrima (greedy)

Pretvara listu kurseva u niz termina (Term) postujuci preduslove,
ponudu po sezonama i maksimalan broj kurseva po terminu.

Koraci sekvenciranja:
    1. Stabilno sortiranje kurseva po kataloskom broju
    2. Otvaranje termina od pocetne sezone/godine iz konfiguracije
    3. Punjenje termina: uvijek prvi preostali kurs ciji su preduslovi
       zadovoljeni i koji se nudi u toj sezoni
    4. Zatvaranje termina, prelazak na sljedecu sezonu (Winter -> godina + 1)

Rezultat je potpuno deterministican za isti ulaz. Plan nije optimalan,
samo izvodljiv.
"""
from typing import List

from .errors import SchedulingStall
from .evaluator import evaluate_refs
from .ir import Season, Term


class CourseSequencer:
    """Rasporedjuje katalog kurseva u termine."""

    def __init__(self, courses, config, max_terms=None):
        self.config = config

        # Stabilno sortiranje - kursevi sa istim brojem zadrzavaju redoslijed
        self.remaining = sorted(courses, key=lambda c: c.catalog_code)

        # Sezone kroz koje ciklus prolazi (za detekciju zastoja)
        self.cycle = {Season.FALL, Season.WINTER}
        if config.include_summer:
            self.cycle.add(Season.SUMMER)

        # Gornja granica broja termina (zastita od beskonacne petlje)
        if max_terms is None:
            max_terms = (len(self.remaining) + 1) * (len(self.cycle) + 1)
        self.max_terms = max_terms

        self.taken = set()
        self.terms: List[Term] = []

    def sequence(self) -> List[Term]:
        """Glavna metoda: vraca listu termina po redoslijedu."""
        season = self.config.starting_semester
        year = self.config.starting_year

        # Sezone uzastopnih praznih termina
        idle_seasons = set()

        while self.remaining:
            if len(self.terms) >= self.max_terms:
                raise SchedulingStall(self.remaining, len(self.terms),
                                      "Premasen maksimalan broj termina")

            term = self._fill_term(season, year)
            self.taken.update(c.ref for c in term.courses)
            self.terms.append(term)

            # Ako su prazni termini obisli sve sezone, nista se vise ne mijenja
            if term.courses:
                idle_seasons.clear()
            else:
                idle_seasons.add(season)
                if idle_seasons >= self.cycle:
                    raise SchedulingStall(self.remaining, len(self.terms))

            season = season.next(self.config.include_summer)
            if season is Season.WINTER:
                year += 1

        return self.terms

    # ------------------------------------------------------------------
    # Pomocne metode
    # ------------------------------------------------------------------

    def _fill_term(self, season, year) -> Term:
        """Puni jedan termin dok ima mjesta i dostupnih kurseva."""
        term = Term(season, year)

        while len(term.courses) < self.config.max_courses_per_term:
            idx = self._next_course_index(season)
            if idx is None:
                break
            term.courses.append(self.remaining.pop(idx))

        return term

    def _next_course_index(self, season):
        """Indeks prvog preostalog kursa koji se moze upisati, ili None.
        Kursevi upisani u istom terminu se ne racunaju kao zavrseni."""
        for idx, course in enumerate(self.remaining):
            if not course.is_offered(season):
                continue
            if (course.prerequisites is None
                    or evaluate_refs(course.prerequisites, self.taken)):
                return idx
        return None


def sequence_courses(courses, config, max_terms=None) -> List[Term]:
    """Skracenica za CourseSequencer(courses, config).sequence()."""
    return CourseSequencer(courses, config, max_terms).sequence()
