"""
server.py - HTTP servis za sekvenciranje kataloga

Rute:
    GET  /heartbeat  - provjera da servis radi ("OK")
    POST /sequence   - multipart forma: include_summer, starting_semester,
                       starting_year, max_courses_per_term + CSV fajl 'courses'

Svaki zahtjev je nezavisan: katalog i konfiguracija dolaze u zahtjevu,
servis ne drzi nikakvo stanje izmedju zahtjeva. Greske parsiranja,
validacije i zastoja sekvenciranja vracaju 400 sa tekstom greske.
"""
import argparse
import logging
from typing import List

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from .catalog import parse_catalog
from .generators import JSONPlanGenerator
from .ir import SequenceConfig
from .sequencer import sequence_courses
from .validator import validate_catalog

logger = logging.getLogger(__name__)


class CourseOut(BaseModel):
    subject_code: str
    catalog_code: int
    name: str


class TermOut(BaseModel):
    season: str
    year: int
    courses: List[CourseOut]


app = FastAPI(title="usequence")


@app.get("/heartbeat", response_class=PlainTextResponse)
def heartbeat():
    return "OK"


@app.post("/sequence", response_model=List[TermOut])
def sequence(
    include_summer: bool = Form(...),
    starting_semester: str = Form(...),
    starting_year: int = Form(...),
    max_courses_per_term: int = Form(...),
    courses: UploadFile = File(...),
):
    try:
        text = courses.file.read().decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Katalog mora biti UTF-8 CSV")

    try:
        config = SequenceConfig.from_dict({
            "include_summer": include_summer,
            "starting_semester": starting_semester,
            "starting_year": starting_year,
            "max_courses_per_term": max_courses_per_term,
        })
        catalog = parse_catalog(text)
        validate_catalog(catalog, config)
        terms = sequence_courses(catalog, config)
    # SequencingError nasljedjuje ValueError
    except ValueError as e:
        logger.info("Odbijen zahtjev /sequence: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return JSONPlanGenerator(terms).generate()


def main():
    import uvicorn

    parser = argparse.ArgumentParser(description="HTTP servis za sekvenciranje kurseva.")
    parser.add_argument("--host", default="127.0.0.1", help="Adresa (default: 127.0.0.1)")
    parser.add_argument("--port", default=8000, type=int, help="Port (default: 8000)")
    args = parser.parse_args()

    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
