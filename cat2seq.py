#!/usr/bin/env python3
"""
cat2seq.py - Sekvencer kurseva (CSV katalog -> plan po semestrima)

Ovaj fajl je glavni ulazni punkt za rad sa katalozima.
Sva podrazumijevana konfiguracija (pocetna sezona, kapacitet termina, itd.)
se definise ovdje. Modul usequence/ je apstraktan i ne sadrzi defaulte.

Hijerarhija konfiguracije:
    1. CLI argumenti (najjaci prioritet)
    2. JSON konfiguracioni fajl (-c/--config)
    3. DEFAULT_CONFIG iz ovog fajla (fallback)

Autor: Ernedin Zajko <ezajko@root.ba>
"""

import argparse
import json
import signal
import sys
from datetime import datetime

from usequence.catalog import load_catalog_file
from usequence.errors import CatalogError, SequencingError
from usequence.generators import JSONPlanGenerator, MarkdownReportGenerator
from usequence.ir import SequenceConfig
from usequence.sequencer import sequence_courses
from usequence.validator import validate_catalog

# Omogucava cist izlaz pri pipe-anju (npr. | head, | grep)
signal.signal(signal.SIGPIPE, signal.SIG_DFL)


# ---------------------------------------------------------------------------
# Podrazumijevana konfiguracija
# ---------------------------------------------------------------------------
DEFAULT_CONFIG = {
    "include_summer": False,
    "starting_semester": "Fall",
    "starting_year": datetime.now().year,
    "max_courses_per_term": 5,
}


def main(argv=None):
    # -------------------------------------------------------------------
    # Definicija CLI argumenata
    # -------------------------------------------------------------------
    parser = argparse.ArgumentParser(
        description="Sekvencer kurseva: CSV katalog u plan po semestrima (JSON/Markdown)."
    )

    # Ulazni fajlovi
    parser.add_argument("-i", "--input", required=True,
                        help="Putanja do CSV kataloga kurseva")
    parser.add_argument("-c", "--config",
                        help="JSON fajl sa konfiguracijom sekvenciranja")

    # Izlazni formati
    parser.add_argument("-j", "--json", help="Putanja za JSON izlaz")
    parser.add_argument("-m", "--md", help="Putanja za Markdown izvjestaj")
    parser.add_argument("-s", "--stdout", action="store_true",
                        help="Ispisi JSON na standardni izlaz (stdout)")
    parser.add_argument("-p", "--plain", action="store_true",
                        help="Ispisi plan kao obican tekst na stdout")

    # Debug i inspekcija
    parser.add_argument("-a", "--ast", action="store_true",
                        help="Ispisi parsirana stabla preduslova na stdout")

    # Konfiguracija sekvenciranja
    parser.add_argument("--include-summer", dest="include_summer",
                        action="store_true", default=None,
                        help="Ukljuci ljetni semestar")
    parser.add_argument("--no-summer", dest="include_summer",
                        action="store_false",
                        help="Iskljuci ljetni semestar (default)")
    parser.add_argument("--start-season",
                        help="Pocetna sezona: Summer, Fall ili Winter (default: Fall)")
    parser.add_argument("--start-year", type=int,
                        help="Pocetna godina (default: tekuca)")
    parser.add_argument("--max-courses", type=int,
                        help="Maksimalan broj kurseva po terminu (default: 5)")

    # Politika za neispravne redove kataloga
    parser.add_argument("--skip-invalid", action="store_true",
                        help="Preskoci neispravne redove kataloga umjesto prekida")
    parser.add_argument("--title", default="Plan Studija",
                        help="Naslov Markdown izvjestaja")

    args = parser.parse_args(argv)

    # Provjera da je specificiran barem jedan izlazni format
    has_output = any([args.json, args.md, args.stdout, args.plain, args.ast])
    if not has_output:
        parser.print_help(sys.stderr)
        print("\nGreska: nije specificiran izlazni format."
              " Koristite -j, -m, -s, -p ili -a.", file=sys.stderr)
        sys.exit(1)

    # -------------------------------------------------------------------
    # 1. Ucitavanje kataloga (CSV -> Lexer -> Parser -> Course)
    # -------------------------------------------------------------------
    try:
        courses, rejected = load_catalog_file(args.input, args.skip_invalid)
    except FileNotFoundError:
        print(f"Greska: Ulazni fajl '{args.input}' nije pronadjen.", file=sys.stderr)
        sys.exit(1)
    except CatalogError as e:
        print(f"Greska u katalogu: {e}", file=sys.stderr)
        sys.exit(1)

    for row, reason in rejected:
        print(f"Upozorenje (red {row}): {reason}. Preskacem.", file=sys.stderr)

    # -------------------------------------------------------------------
    # 2. Razrjesavanje konfiguracije
    # -------------------------------------------------------------------
    # Hijerarhija: CLI argument > config fajl > DEFAULT_CONFIG
    try:
        config = _resolve_config(args)
    except (OSError, ValueError) as e:
        print(f"Greska u konfiguraciji: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Katalog: {len(courses)} kurseva, pocetak {config.starting_semester}"
          f" {config.starting_year}, do {config.max_courses_per_term} po terminu"
          f"{', sa ljetnim semestrom' if config.include_summer else ''}",
          file=sys.stderr)

    # -------------------------------------------------------------------
    # 3. Ispis stabala preduslova (debug/inspekcija)
    # -------------------------------------------------------------------
    if args.ast:
        _print_ast(courses)

    # -------------------------------------------------------------------
    # 4. Validacija i sekvenciranje
    # -------------------------------------------------------------------
    try:
        validate_catalog(courses, config)
        terms = sequence_courses(courses, config)
    except SequencingError as e:
        print(f"Greska: {e}", file=sys.stderr)
        sys.exit(1)

    # -------------------------------------------------------------------
    # 5. Generisanje izlaza
    # -------------------------------------------------------------------

    # JSON
    if args.json or args.stdout:
        output_data = {
            "meta": config.to_dict(),
            "terms": JSONPlanGenerator(terms).generate(),
        }

        if args.json:
            with open(args.json, 'w', encoding='utf-8') as f:
                json.dump(output_data, f, indent=4, ensure_ascii=False)
            if not args.stdout:
                print(f"Generisan JSON: {args.json}", file=sys.stderr)

        if args.stdout:
            print(json.dumps(output_data, indent=4, ensure_ascii=False))

    # Markdown
    if args.md:
        md_gen = MarkdownReportGenerator(terms, title=args.title)
        with open(args.md, 'w', encoding='utf-8') as f:
            f.write(md_gen.generate())
        print(f"Generisan Markdown: {args.md}", file=sys.stderr)

    # Obican tekst
    if args.plain:
        print("\n\n".join(str(term) for term in terms))


# ---------------------------------------------------------------------------
# Pomocne funkcije
# ---------------------------------------------------------------------------

def _resolve_config(args):
    """Spaja DEFAULT_CONFIG, config fajl i CLI argumente u SequenceConfig."""
    data = dict(DEFAULT_CONFIG)

    if args.config:
        with open(args.config, 'r', encoding='utf-8') as f:
            data.update(json.load(f))

    overrides = {
        "include_summer": args.include_summer,
        "starting_semester": args.start_season,
        "starting_year": args.start_year,
        "max_courses_per_term": args.max_courses,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})

    return SequenceConfig.from_dict(data)


def _print_ast(courses):
    """Ispisuje stabla preduslova svih kurseva na stdout.
    Koristi se sa -a/--ast flagom za debug i inspekciju."""
    print("=== STABLA PREDUSLOVA ===")
    for course in courses:
        seasons = ", ".join(s.value for s in course.offered_seasons) or "-"
        print(f"{course.subject_code} {course.catalog_code} [{seasons}]")
        print(f"    {course.prerequisites!r}")
    print("=========================")


if __name__ == "__main__":
    main()
