"""
lexer.py - Leksicka analiza teksta preduslova

Pretvara sirovi tekst preduslova (npr. "Prerequisite: CSI 2110, CSI 2132.")
u niz tokena koristeci regularne izraze. Tokeni se koriste kao ulaz za Parser.

Pravila su definisana kao lista (naziv, regex) parova.
Redoslijed pravila je bitan - kljucne rijeci moraju biti ispred COURSE
(inace bi npr. 'or 4000' bio prepoznat kao kurs 'OR 4000').
"""
import re

from .errors import ParseError


class Token:
    """Jedan token sa tipom, vrijednoscu i pozicijom (kolona, od 0)."""
    def __init__(self, type, value, pos):
        self.type = type
        self.value = value
        self.pos = pos

    def __repr__(self):
        return f"Token({self.type}, {self.value!r}, pos={self.pos})"


class Lexer:
    """Leksicki analizator za tekst preduslova.

    Whitespace se odbacuje. Svaki znak koji ne odgovara nijednom
    pravilu je greska (ParseError) - nista se ne preskace tiho.
    Sve kljucne rijeci se matchuju case-insensitive."""

    # Pravila tokenizacije (redoslijed je bitan!)
    RULES = [
        # Labela na pocetku ("Prerequisite:", "Prerequisites:")
        ('LABEL',    r'\bprerequisites?\s*:'),

        # Klauzula minimalnih kredita
        ('UNITS',    r'\b(?:course|university)\s+units?\b'),
        ('AT_THE',   r'\bat\s+the\b'),
        ('LEVEL',    r'\blevels?\b'),
        ('IN',       r'\bin\b'),

        # Veznici
        ('OR',       r'\bor\b'),
        ('AND',      r'\band\b'),

        # Literali (kurs prije broja i identifikatora)
        ('COURSE',   r'\b[A-Za-z]+ ?\d{4}\b'),
        ('NUMBER',   r'\d+'),
        ('ID',       r"[^\W\d_]+(?:['\-][^\W\d_]+)*"),

        # Interpunkcija i whitespace
        ('LPAREN',   r'\('),
        ('RPAREN',   r'\)'),
        ('COMMA',    r','),
        ('DOT',      r'\.'),
        ('SKIP',     r'\s+'),

        # Sve ostalo je greska
        ('MISMATCH', r'.'),
    ]

    # Kompajliraj sva pravila u jedan regex sa imenovanim grupama
    REGEX = re.compile(
        '|'.join(f'(?P<{name}>{pattern})' for name, pattern in RULES),
        re.IGNORECASE,
    )

    def __init__(self, text):
        """Tokenizira ulazni tekst."""
        self.text = text
        self.tokens = []

        for mo in self.REGEX.finditer(text):
            kind = mo.lastgroup
            if kind == 'SKIP':
                continue
            if kind == 'MISMATCH':
                raise ParseError(text, mo.group(), mo.start(),
                                 "Neprepoznat znak")
            self.tokens.append(Token(kind, mo.group(), mo.start()))
