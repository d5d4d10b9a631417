"""
errors.py - Tipizirane greske usequence modula

Sve greske nasljedjuju SequencingError (a on ValueError), tako da
pozivatelj moze hvatati jednu klasu, a CLI/server je pretvaraju u
poruku koja imenuje kurs i prekrseno pravilo.

Jezgro (parser, evaluator, validator, sekvencer) nikad ne loguje i nikad
ne zavrsava proces - samo baca ove izuzetke.
"""


class SequencingError(ValueError):
    """Bazna klasa za sve greske pri pravljenju plana."""


class ParseError(SequencingError):
    """Neispravan tekst preduslova.

    Nosi originalni tekst, problematicni fragment i poziciju (kolonu)
    na kojoj je parser stao."""

    def __init__(self, text, fragment, position, message=None):
        self.text = text
        self.fragment = fragment
        self.position = position
        self.message = message or "Neocekivan sadrzaj"
        super().__init__(
            f"{self.message} '{fragment}' (pozicija {position}) u: {text!r}"
        )


class CatalogError(SequencingError):
    """Neispravan red kataloga (CSV)."""

    def __init__(self, row, reason):
        self.row = row          # broj reda u CSV-u (zaglavlje = 1)
        self.reason = reason
        super().__init__(f"Red {row}: {reason}")


class ValidationError(SequencingError):
    """Katalog ne prolazi provjeru prije sekvenciranja."""

    def __init__(self, course, reason):
        self.course = course
        self.reason = reason
        super().__init__(
            f"{course.subject_code} {course.catalog_code}: {reason}"
        )


class SchedulingStall(SequencingError):
    """Sekvencer ne moze napredovati (ciklus preduslova ili limit termina)."""

    def __init__(self, remaining, term_count, reason=None):
        self.remaining = list(remaining)
        self.term_count = term_count
        codes = ", ".join(
            f"{c.subject_code} {c.catalog_code}" for c in self.remaining
        )
        self.reason = reason or "Raspored se ne moze zavrsiti"
        super().__init__(
            f"{self.reason} nakon {term_count} termina; preostali kursevi: {codes}"
        )
