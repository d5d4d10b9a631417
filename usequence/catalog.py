"""
catalog.py - Ucitavanje kataloga kurseva iz CSV-a

Ocekivano zaglavlje (nazivi kolona bez obzira na velika/mala slova,
redoslijed kolona proizvoljan):

    Subject,Catalog,Name,Prerequisites,Winter,Summer,Fall

Prerequisites kolona je opcionalna; prazna vrijednost znaci "bez preduslova".
Winter/Summer/Fall su 'true' ili 'false' (bilo koja velika/mala slova).
Catalog je tacno 4 cifre; kod predmeta se cuva velikim slovima.

Tekst preduslova svakog reda se odmah parsira (Lexer -> Parser), tako da
katalog sadrzi gotova stabla. Neispravan tekst se nikad ne pretvara u
"bez preduslova" - red se ili odbacuje (skip_invalid) ili je greska.
"""
import csv
import io
import re

from .errors import CatalogError, ParseError
from .ir import Course, Season, parse_bool
from .parser import parse_prerequisites

REQUIRED_COLUMNS = ('subject', 'catalog', 'name', 'winter', 'summer', 'fall')

# Kataloski broj: tacno 4 ASCII cifre
CATALOG_CODE = re.compile(r'[0-9]{4}')

SEASON_COLUMNS = {
    'winter': Season.WINTER,
    'summer': Season.SUMMER,
    'fall': Season.FALL,
}


def course_from_record(record, row=None):
    """Pretvara jedan zapis kataloga (dict sa malim kljucevima) u Course."""
    subject = (record.get('subject') or '').strip().upper()
    if not subject:
        raise CatalogError(row, "Prazan kod predmeta")

    catalog_raw = (record.get('catalog') or '').strip()
    if not CATALOG_CODE.fullmatch(catalog_raw):
        raise CatalogError(row, f"Neispravan kataloski broj '{catalog_raw}' (ocekivane 4 cifre)")
    catalog_code = int(catalog_raw)

    terms_offered = {}
    for column, season in SEASON_COLUMNS.items():
        try:
            terms_offered[season] = parse_bool(record.get(column))
        except ValueError as e:
            raise CatalogError(row, f"{subject} {catalog_code}, kolona {column}: {e}")

    prerequisites = None
    text = (record.get('prerequisites') or '').strip()
    if text:
        try:
            prerequisites = parse_prerequisites(text)
        except ParseError as e:
            raise CatalogError(row, f"{subject} {catalog_code}: {e}") from e

    return Course(
        subject_code=subject,
        name=(record.get('name') or '').strip(),
        catalog_code=catalog_code,
        prerequisites=prerequisites,
        terms_offered=terms_offered,
    )


def load_catalog(text, skip_invalid=False):
    """Ucitava katalog iz CSV teksta.

    Vraca:
        (courses, rejected) - courses je lista Course objekata,
        rejected je lista (broj_reda, razlog) parova.
        Bez skip_invalid prva neispravna linija baca CatalogError,
        pa je rejected uvijek prazan.
    """
    reader = csv.DictReader(io.StringIO(text.lstrip('\ufeff')))
    if not reader.fieldnames:
        raise CatalogError(1, "Katalog je prazan (nema zaglavlja)")

    # Nazivi kolona bez obzira na velika/mala slova
    fieldnames = [(name or '').strip().lower() for name in reader.fieldnames]
    missing = [c for c in REQUIRED_COLUMNS if c not in fieldnames]
    if missing:
        raise CatalogError(1, f"Nedostaju kolone: {', '.join(missing)}")
    reader.fieldnames = fieldnames

    courses = []
    rejected = []

    # Red 1 je zaglavlje
    for row_num, record in enumerate(reader, start=2):
        try:
            courses.append(course_from_record(record, row_num))
        except CatalogError as e:
            if not skip_invalid:
                raise
            rejected.append((row_num, e.reason))

    return courses, rejected


def parse_catalog(text):
    """Kao load_catalog, ali vraca samo kurseve (svaka greska prekida)."""
    courses, _ = load_catalog(text)
    return courses


def load_catalog_file(path, skip_invalid=False):
    """Ucitava katalog iz CSV fajla (UTF-8)."""
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return load_catalog(f.read(), skip_invalid=skip_invalid)
