class JSONPlanGenerator:
    """Pretvara listu termina u JSON-serijalizabilnu strukturu.

    Izlaz sadrzi samo sezonu, godinu i osnovne podatke o kursu -
    stabla preduslova i ponuda po sezonama se ne izlazu."""

    def __init__(self, terms):
        self.terms = terms

    def generate(self):
        return [self._to_term(term) for term in self.terms]

    def _to_term(self, term):
        return {
            "season": term.season.value,
            "year": term.year,
            "courses": [self._to_course(c) for c in term.courses],
        }

    def _to_course(self, course):
        return {
            "subject_code": course.subject_code,
            "catalog_code": course.catalog_code,
            "name": course.name,
        }
