"""
models.py - Stablo preduslova (AST)

Definise cvorove koji nastaju kao rezultat parsiranja teksta preduslova.
Stablo je zatvoren skup od cetiri tipa cvora:

    CourseNode     - tacno odredjen kurs ("CSI 1111")
    AndNode        - oba podstabla moraju biti zadovoljena
    OrNode         - barem jedno podstablo mora biti zadovoljeno
    MinCreditNode  - minimalan broj kredita iz predmeta/nivoa

Cvorovi su frozen dataclass-ovi: grade se jednom u Parser-u i nikad
se ne mijenjaju, pa se mogu dijeliti izmedju kopija Course objekata.
"""
from dataclasses import dataclass
from typing import FrozenSet, Optional, Union


@dataclass(frozen=True)
class CourseNode:
    """List stabla: 'CSI 1111'."""
    subject_code: str   # "CSI"
    catalog_code: int   # 1111

    def __str__(self):
        return f"{self.subject_code} {self.catalog_code}"


@dataclass(frozen=True)
class AndNode:
    """Konjunkcija: 'A, B' ili 'A and B'."""
    left: 'PrerequisiteTree'
    right: 'PrerequisiteTree'

    def __str__(self):
        return f"({self.left}, {self.right})"


@dataclass(frozen=True)
class OrNode:
    """Disjunkcija: 'A or B'."""
    left: 'PrerequisiteTree'
    right: 'PrerequisiteTree'

    def __str__(self):
        return f"({self.left} or {self.right})"


@dataclass(frozen=True)
class MinCreditNode:
    """Minimalni krediti: '18 university units in CSI or SEG at the 3000 level.'

    None za required_subjects/required_levels znaci da filter ne postoji."""
    credits: int
    required_subjects: Optional[FrozenSet[str]] = None
    required_levels: Optional[FrozenSet[int]] = None

    def __str__(self):
        text = f"{self.credits} units"
        if self.required_subjects is not None:
            text += " in " + " or ".join(sorted(self.required_subjects))
        if self.required_levels is not None:
            levels = " or ".join(str(lvl) for lvl in sorted(self.required_levels))
            text += f" at the {levels} level"
        return text


PrerequisiteTree = Union[CourseNode, AndNode, OrNode, MinCreditNode]
