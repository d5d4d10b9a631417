"""
evaluator.py - Provjera da li je stablo preduslova zadovoljeno

Rekurzivno evaluira stablo (models.py) nad skupom vec zavrsenih kurseva.
Funkcije su ciste: ne mijenjaju ulaz i ne drze nikakvo stanje.

evaluate() prihvata bilo koju kolekciju Course/CourseRef objekata i
normalizuje je jednom po pozivu. evaluate_refs() radi nad vec gotovim
skupom CourseRef-ova (sekvencer i validator ga drze sami).
"""
from typing import AbstractSet, FrozenSet, Iterable, Optional

from .ir import Course, CourseRef
from .models import AndNode, CourseNode, MinCreditNode, OrNode

# Broj kredita koji nosi jedan zavrseni kurs u klauzulama minimalnih kredita
CREDITS_PER_COURSE = 3


def course_level(catalog_code: int) -> int:
    """Nivo kursa: hiljadica kataloskog broja (npr. 3110 -> 3000)."""
    return (catalog_code // 1000 % 10) * 1000


def completed_refs(completed: Iterable) -> FrozenSet[CourseRef]:
    """Normalizuje kolekciju Course/CourseRef objekata u skup CourseRef-ova."""
    return frozenset(c.ref if isinstance(c, Course) else c for c in completed)


def evaluate(tree, completed) -> bool:
    """Da li je stablo zadovoljeno skupom zavrsenih kurseva?"""
    return evaluate_refs(tree, completed_refs(completed))


def evaluate_refs(tree, refs: AbstractSet[CourseRef]) -> bool:
    """Kao evaluate(), ali refs mora vec biti skup CourseRef-ova (bez kopiranja)."""
    if isinstance(tree, CourseNode):
        return CourseRef(tree.subject_code, tree.catalog_code) in refs
    if isinstance(tree, AndNode):
        return evaluate_refs(tree.left, refs) and evaluate_refs(tree.right, refs)
    if isinstance(tree, OrNode):
        return evaluate_refs(tree.left, refs) or evaluate_refs(tree.right, refs)
    if isinstance(tree, MinCreditNode):
        return _count_matching(tree, refs) * CREDITS_PER_COURSE >= tree.credits
    raise TypeError(f"Nepoznat cvor stabla preduslova: {tree!r}")


def satisfies_min_credits(node: MinCreditNode, completed) -> bool:
    """Broji zavrsene kurseve koji prolaze filtere predmeta i nivoa;
    svaki nosi CREDITS_PER_COURSE kredita."""
    return evaluate_refs(node, completed_refs(completed))


def _count_matching(node: MinCreditNode, refs) -> int:
    matching = 0
    for ref in refs:
        if (node.required_subjects is not None
                and ref.subject_code not in node.required_subjects):
            continue
        if (node.required_levels is not None
                and course_level(ref.catalog_code) not in node.required_levels):
            continue
        matching += 1
    return matching


def validate_prerequisites(tree: Optional[object], completed) -> bool:
    """Kurs bez preduslova (tree is None) je uvijek dostupan."""
    if tree is None:
        return True
    return evaluate(tree, completed)
