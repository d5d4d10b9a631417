"""
parser.py - Sintaksna analiza teksta preduslova

Prima niz tokena iz Lexer-a i gradi stablo preduslova (models.py).

Podrzani oblici:
    - Kurs: 'CSI 1111' ili 'CSI1111'
    - Konjunkcija: 'A, B' ili 'A and B'
    - Disjunkcija: 'A or B'
    - Grupisanje: '(A or B), C' (proizvoljno ugnijezdeno)
    - Minimalni krediti: '18 university units in CSI or SEG at the 3000 level'
      (predmet moze biti i puni naziv sa kodom u zagradi:
      'Computer Science (CSI)')

Prioritet operatora se ne pretpostavlja: separatori se kombinuju striktno
redom kojim se pojavljuju u tekstu (lijevo na desno), a samo zagrade
grupisu. Labela na pocetku i tacka na kraju su opcionalne.
Kodovi predmeta se uvijek vracaju velikim slovima ('csi 1111' -> CSI 1111),
kao i u katalogu (catalog.py).
"""
from .errors import ParseError
from .lexer import Lexer
from .models import AndNode, CourseNode, MinCreditNode, OrNode


class Parser:
    """Rekurzivni parser za tekst preduslova.

    Koristi peek/consume mehanizam za citanje tokena.
    Svaka neispravnost zavrsava sa ParseError - parser nikad ne vraca
    "nema preduslova" umjesto greske."""

    def __init__(self, tokens, text=""):
        self.tokens = tokens
        self.text = text
        self.pos = 0

    def peek(self, offset=0):
        """Vraca token na trenutnoj poziciji + offset, bez pomjeranja."""
        idx = self.pos + offset
        return self.tokens[idx] if idx < len(self.tokens) else None

    def peek_type(self, offset=0):
        token = self.peek(offset)
        return token.type if token else None

    def consume(self, expected=None):
        """Konzumira sljedeci token. Ako je dat expected tip, vraca None
        ako se ne poklapa (bez pomjeranja pozicije)."""
        token = self.peek()
        if not token:
            return None
        if expected and token.type != expected:
            return None
        self.pos += 1
        return token

    def expect(self, expected, message):
        """Kao consume, ali baca ParseError ako token nije ocekivanog tipa."""
        token = self.consume(expected)
        if token is None:
            self.error(message)
        return token

    def error(self, message):
        token = self.peek()
        if token:
            raise ParseError(self.text, token.value, token.pos, message)
        raise ParseError(self.text, "<kraj teksta>", len(self.text), message)

    def parse(self):
        """Parsira cijeli niz tokena i vraca korijen stabla."""
        # Labela ("Prerequisite:") se ignorise
        self.consume('LABEL')

        if self.peek() is None or self.peek_type() == 'DOT':
            self.error("Prazan opis preduslova")

        tree = self.parse_expression()

        # Zavrsna tacka je opcionalna
        self.consume('DOT')
        if self.peek():
            self.error("Neocekivan sadrzaj nakon izraza")
        return tree

    def parse_expression(self):
        """Niz termova spojenih zarezom, 'and' ili 'or' (lijevo na desno)."""
        left = self.parse_term()

        while self.peek_type() in ('COMMA', 'AND', 'OR'):
            sep = self.consume().type
            # ", or" / ", and" - odlucuje rijec, ne zarez
            if sep == 'COMMA' and self.peek_type() in ('AND', 'OR'):
                sep = self.consume().type

            right = self.parse_term()
            if sep == 'OR':
                left = OrNode(left, right)
            else:
                left = AndNode(left, right)

        return left

    def parse_term(self):
        """Jedan kurs, klauzula kredita ili izraz u zagradama."""
        t = self.peek()
        if t is None:
            self.error("Ocekivan kurs ili izraz")

        # --- Grupisanje ---
        # Format: ( {izraz} )
        if t.type == 'LPAREN':
            self.consume('LPAREN')
            inner = self.parse_expression()
            self.expect('RPAREN', "Nedostaje zatvorena zagrada")
            return inner

        # --- Kurs ---
        # Format: {Predmet}[ ]{NNNN}
        if t.type == 'COURSE':
            self.consume('COURSE')
            subject = t.value[:-4].strip().upper()
            return CourseNode(subject, int(t.value[-4:]))

        # --- Minimalni krediti ---
        # Format: {N} (course|university) units in {predmeti} [at the {nivoi} level]
        if t.type == 'NUMBER' and self.peek_type(1) == 'UNITS':
            return self._parse_min_credit()

        self.error("Ocekivan kurs ili izraz")

    def _parse_min_credit(self):
        """Parsira klauzulu minimalnih kredita."""
        credits = int(self.consume('NUMBER').value)
        self.consume('UNITS')
        self.expect('IN', "Ocekivano 'in' nakon 'units'")

        subjects = [self._parse_subject()]
        while self._at_list_separator('ID'):
            self._consume_list_separator()
            subjects.append(self._parse_subject())

        levels = None
        if self.consume('AT_THE'):
            levels = [self._parse_level()]
            while self._at_list_separator('NUMBER'):
                self._consume_list_separator()
                levels.append(self._parse_level())
            self.expect('LEVEL', "Ocekivano 'level' nakon liste nivoa")

        return MinCreditNode(
            credits,
            frozenset(subjects),
            frozenset(levels) if levels is not None else None,
        )

    def _at_list_separator(self, item_type):
        """Da li slijedi ',' / 'or' / ', or' iza kojeg ide stavka liste?"""
        if self.peek_type() not in ('COMMA', 'OR'):
            return False
        offset = 1
        if self.peek_type() == 'COMMA' and self.peek_type(1) == 'OR':
            offset = 2
        return self.peek_type(offset) == item_type

    def _consume_list_separator(self):
        if self.consume('COMMA'):
            self.consume('OR')
        else:
            self.consume('OR')

    def _parse_subject(self):
        """Kod predmeta ('CSI') ili puni naziv sa kodom u zagradi
        ('Computer Science (CSI)'). Vraca samo kod."""
        # Puni naziv: rijeci (i 'and' izmedju njih) do '(' KOD ')'
        i = 0
        while self.peek_type(i) in ('ID', 'AND'):
            i += 1
        if (i > 0 and self.peek_type(i) == 'LPAREN'
                and self.peek_type(i + 1) == 'ID'
                and self.peek_type(i + 2) == 'RPAREN'):
            self.pos += i + 1
            code = self.consume('ID').value.upper()
            self.consume('RPAREN')
            return code

        code = self.expect('ID', "Ocekivan kod predmeta")
        if self.peek_type() == 'ID':
            self.error("Naziv predmeta bez koda u zagradi")
        return code.value.upper()

    def _parse_level(self):
        token = self.expect('NUMBER', "Ocekivan nivo (npr. 3000)")
        if len(token.value) != 4:
            raise ParseError(self.text, token.value, token.pos,
                             "Nivo mora imati 4 cifre")
        return int(token.value)


def parse_prerequisites(text):
    """Tekst preduslova -> stablo. Baca ParseError za neispravan tekst."""
    return Parser(Lexer(text).tokens, text).parse()
