#!/usr/bin/env python3
#
# Author: Ernedin Zajko <ezajko@root.ba>
# License: GNU General Public License v2.0 or later (GPL-2.0+)
#

import argparse
import json
import logging
import os
import sys
from datetime import date, timedelta

from google.oauth2 import service_account
from googleapiclient.discovery import build

# --- KONFIGURACIJA PUTANJA ---
LOG_DIR  = 'logs'
AUTH_DIR = 'auth'
JSON_DIR = 'data'

SERVICE_ACCOUNT_FILE = os.path.join(AUTH_DIR, 'service_account.json')
SCOPES = ['https://www.googleapis.com/auth/calendar']
TIME_ZONE = 'Europe/Sarajevo'

# Okvirni datumi termina: sezona -> ((mjesec, dan) pocetka, (mjesec, dan) kraja)
TERM_DATES = {
    'Winter': ((1, 8), (4, 30)),
    'Summer': ((5, 1), (8, 31)),
    'Fall':   ((9, 1), (12, 23)),
}

def setup_logging(calendar_name):
    if not os.path.exists(LOG_DIR): os.makedirs(LOG_DIR)
    timestamp = date.today().strftime('%Y-%m-%d')
    log_path = os.path.join(LOG_DIR, f"sync.{calendar_name}.{timestamp}.log")

    logger = logging.getLogger()
    logger.setLevel(logging.INFO)
    if logger.hasHandlers(): logger.handlers.clear()

    fh = logging.FileHandler(log_path, encoding='utf-8')
    fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))
    logger.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(ch)
    return logger

def batch_callback(request_id, response, exception):
    """Callback funkcija koja hvata greške unutar batch-a."""
    if exception is not None:
        logging.error(f"   [BATCH ERROR] Zahtjev {request_id} neuspješan: {exception}")

def load_plan(path):
    """Učitava plan (izlaz cat2seq.py -j ili odgovor /sequence servisa)."""
    with open(path, mode='r', encoding='utf-8') as f:
        data = json.load(f)
    # cat2seq.py pakuje termine u {"meta": ..., "terms": [...]}
    if isinstance(data, dict):
        return data.get('terms', [])
    return data

def term_dates(season, year):
    """Vraća (početak, kraj) termina; kraj je ekskluzivan (Google all-day)."""
    (sm, sd), (em, ed) = TERM_DATES[season]
    return date(year, sm, sd), date(year, em, ed) + timedelta(days=1)

def transform_term(term):
    start, end = term_dates(term['season'], term['year'])
    courses = term.get('courses', [])

    # Izgradnja opisa (svi kursevi termina)
    desc_lines = []
    for c in courses:
        line = f"{c['subject_code']} {c['catalog_code']}"
        if c.get('name'):
            line += f": {c['name']}"
        desc_lines.append(line)
    if not desc_lines:
        desc_lines.append("Nema kurseva u ovom terminu.")

    return {
        'summary': f"{term['season']} {term['year']} ({len(courses)} kurseva)",
        'description': "\n".join(desc_lines),
        'start': {'date': start.isoformat()},
        'end': {'date': end.isoformat()},
        'transparency': 'transparent',
    }

def find_or_create_calendar(service, name):
    page_token = None
    while True:
        res = service.calendarList().list(pageToken=page_token).execute()
        for cal in res.get('items', []):
            if cal.get('summary') == name:
                return cal['id']
        page_token = res.get('nextPageToken')
        if not page_token: break

    new_cal = service.calendars().insert(body={'summary': name, 'timeZone': TIME_ZONE}).execute()
    return new_cal['id']

def sync_plan(args):
    logger = setup_logging(args.calendar)

    plan_path = args.plan if os.path.exists(args.plan) else os.path.join(JSON_DIR, args.plan)
    if not os.path.exists(plan_path):
        logger.error(f"Nedostaje fajl: {args.plan}")
        sys.exit(1)
    terms = load_plan(plan_path)

    logger.info(f"--- SYNC PLANA: {args.calendar} ({len(terms)} termina) ---")

    if args.dry_run:
        logger.info(f"   [DRY-RUN] Pronađeno {len(terms)} termina za obradu:")
        for t in terms:
            try:
                ev = transform_term(t)
                logger.info(f"      - {ev['summary']} | {ev['start']['date']} -> {ev['end']['date']}")
            except (KeyError, TypeError, ValueError) as e:
                logger.error(f"      [GREŠKA U PARSIRANJU] {t}: {e}")
        return

    try:
        creds = service_account.Credentials.from_service_account_file(
            SERVICE_ACCOUNT_FILE, scopes=SCOPES, subject=args.user)
        service = build('calendar', 'v3', credentials=creds)

        target_id = find_or_create_calendar(service, args.calendar)

        # 1. Brisanje postojećih događaja
        all_events_to_delete = []
        page_token = None
        while True:
            events_res = service.events().list(calendarId=target_id, pageToken=page_token).execute()
            all_events_to_delete.extend(events_res.get('items', []))
            page_token = events_res.get('nextPageToken')
            if not page_token: break

        if all_events_to_delete:
            logger.info(f"   Brisanje {len(all_events_to_delete)} starih događaja...")
            for i in range(0, len(all_events_to_delete), 50):
                chunk = all_events_to_delete[i:i+50]
                batch_del = service.new_batch_http_request(callback=batch_callback)
                for ev in chunk:
                    batch_del.add(service.events().delete(calendarId=target_id, eventId=ev['id']))
                batch_del.execute()
        else:
            logger.info("   Nema starih događaja za brisanje.")

        # 2. Batch Insert (u paketima po 50)
        for i in range(0, len(terms), 50):
            chunk = terms[i:i+50]
            batch = service.new_batch_http_request(callback=batch_callback)
            for t in chunk:
                batch.add(service.events().insert(calendarId=target_id, body=transform_term(t)))
            batch.execute()

        logger.info(f"   Sinhronizovano: {len(terms)} termina preko Batch API-ja.")

    except Exception as e:
        logger.error(f"   Greska za {args.user}: {e}")

def main(argv=None):
    parser = argparse.ArgumentParser(description="Objavljuje plan studija u Google Calendar.")
    parser.add_argument('--calendar', required=True, help="Naziv kalendara.")
    parser.add_argument('--plan', required=True, help="JSON fajl sa planom (izlaz cat2seq.py -j).")
    parser.add_argument('--user', help="Google ID (email) vlasnika kalendara.")
    parser.add_argument('--dry-run', action='store_true')
    args = parser.parse_args(argv)

    if not args.dry_run and not args.user:
        parser.error("Argument --user je obavezan osim ako se koristi --dry-run")

    sync_plan(args)

if __name__ == "__main__":
    main()
