"""
validator.py - Validacija kataloga prije sekvenciranja

Provjerava da li se katalog uopste moze rasporediti uz datu konfiguraciju:
    1. Preduslovi svakog kursa su zadovoljivi cijelim katalogom
    2. Kurs koji se nudi samo ljeti nije u planu bez ljetnog semestra
    3. Kurs se nudi u barem jednom semestru
    4. Kataloski brojevi su jedinstveni po predmetu

Provjera 1 je gruba: cijeli katalog se tretira kao "zavrsen", pa kursevi
koji su medjusobno jedni drugima preduslov prolaze. Takve cikluse hvata
tek sekvencer (SchedulingStall).

Prva greska prekida validaciju (ValidationError).
"""
from .errors import ValidationError
from .evaluator import completed_refs, evaluate_refs
from .ir import Season


def check_course(course, catalog_refs, config):
    """Vraca razlog zbog kojeg kurs ne prolazi validaciju, ili None."""
    # 1. Preduslovi zadovoljivi katalogom
    if (course.prerequisites is not None
            and not evaluate_refs(course.prerequisites, catalog_refs)):
        return f"Preduslovi se ne mogu zadovoljiti ({course.prerequisites})"

    offered = course.offered_seasons

    # 2. Nudi se nekad uopste
    if not offered:
        return "Kurs se ne nudi ni u jednom semestru"

    # 3. Samo ljetni kurs bez ljetnog semestra
    if not config.include_summer and offered == [Season.SUMMER]:
        return "Kurs se moze pohadjati samo ljeti, a ljetni semestar nije ukljucen"

    return None


def validate_catalog(courses, config):
    """Validira cijeli katalog. Baca ValidationError za prvi problematicni kurs."""
    catalog_refs = completed_refs(courses)
    seen = set()

    for course in courses:
        # 4. Duplikati (predmet + kataloski broj)
        if course.ref in seen:
            raise ValidationError(course, "Kurs se pojavljuje vise puta u katalogu")
        seen.add(course.ref)

        reason = check_course(course, catalog_refs, config)
        if reason:
            raise ValidationError(course, reason)
