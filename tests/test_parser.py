import pytest

from usequence.errors import ParseError
from usequence.models import AndNode, CourseNode, MinCreditNode, OrNode
from usequence.parser import parse_prerequisites


def C(subject, code):
    return CourseNode(subject, code)


def test_trailing_period_is_optional():
    assert parse_prerequisites("CSI 1111.") == C("CSI", 1111)
    assert parse_prerequisites("CSI 1111") == C("CSI", 1111)


def test_label_is_ignored():
    assert parse_prerequisites("Prerequisite: ITI 1120.") == C("ITI", 1120)
    assert parse_prerequisites("Prerequisites: ITI 1120") == C("ITI", 1120)


def test_conjunction():
    assert parse_prerequisites("ITI 1120, GNG1106.") == AndNode(
        C("ITI", 1120), C("GNG", 1106))


def test_and_keyword():
    assert parse_prerequisites("ITI 1120 and GNG 1106") == AndNode(
        C("ITI", 1120), C("GNG", 1106))


def test_disjunction():
    assert parse_prerequisites("ITI 1120 or GNG 1106.") == OrNode(
        C("ITI", 1120), C("GNG", 1106))


def test_grouping():
    assert parse_prerequisites("MAT1341, (MAT2371 or MAT 2377).") == AndNode(
        C("MAT", 1341),
        OrNode(C("MAT", 2371), C("MAT", 2377)),
    )


def test_double_nested_grouping():
    assert parse_prerequisites("MAT 1341, ((MAT 2371, MAT 2375) or MAT 2377).") == AndNode(
        C("MAT", 1341),
        OrNode(
            AndNode(C("MAT", 2371), C("MAT", 2375)),
            C("MAT", 2377),
        ),
    )


def test_separators_combine_in_textual_order():
    assert parse_prerequisites("CSI 1111, CSI 1112 or CSI 1113") == OrNode(
        AndNode(C("CSI", 1111), C("CSI", 1112)),
        C("CSI", 1113),
    )
    assert parse_prerequisites("CSI 1111 or CSI 1112, CSI 1113") == AndNode(
        OrNode(C("CSI", 1111), C("CSI", 1112)),
        C("CSI", 1113),
    )


def test_comma_before_or_acts_as_or():
    assert parse_prerequisites("CSI 1111, CSI 1112, or CSI 1113.") == OrNode(
        AndNode(C("CSI", 1111), C("CSI", 1112)),
        C("CSI", 1113),
    )


def test_min_credit_subject_only():
    assert parse_prerequisites("18 university units in CSI.") == MinCreditNode(
        18, frozenset({"CSI"}), None)


def test_min_credit_with_levels():
    tree = parse_prerequisites(
        "18 university units in CSI or SEG at the 3000 or 4000 level.")
    assert tree == MinCreditNode(18, frozenset({"CSI", "SEG"}), frozenset({3000, 4000}))


def test_min_credit_comma_separated_levels():
    tree = parse_prerequisites("9 course units in CSI, SEG at the 3000, 4000 level")
    assert tree == MinCreditNode(9, frozenset({"CSI", "SEG"}), frozenset({3000, 4000}))


def test_min_credit_full_subject_names():
    tree = parse_prerequisites(
        "18 course units in Computer Science (CSI) or Software Engineering (SEG)"
        " at the 3000 level.")
    assert tree == MinCreditNode(18, frozenset({"CSI", "SEG"}), frozenset({3000}))


def test_min_credit_subject_name_with_and():
    tree = parse_prerequisites("6 course units in Mathematics and Statistics (MAT).")
    assert tree == MinCreditNode(6, frozenset({"MAT"}), None)


def test_course_and_min_credit():
    tree = parse_prerequisites(
        "CSI 1111 and 18 course units in CSI or SEG at the 3000 level.")
    assert tree == AndNode(
        C("CSI", 1111),
        MinCreditNode(18, frozenset({"CSI", "SEG"}), frozenset({3000})),
    )


def test_min_credit_followed_by_course():
    tree = parse_prerequisites("6 course units in CSI, MAT 1341.")
    assert tree == AndNode(MinCreditNode(6, frozenset({"CSI"}), None), C("MAT", 1341))


@pytest.mark.parametrize("text", [
    "",
    "   ",
    ".",
    "Prerequisite:",
    "CSI 1111 or",
    "(CSI 1111",
    "CSI 1111)",
    "CSI",
    "18 units in CSI",
    "18 university units CSI",
    "18 university units in CSI at the 300 level",
    "18 university units in CSI at the 3000",
    "3 course units in Computer Science.",
])
def test_malformed_text_raises(text):
    with pytest.raises(ParseError):
        parse_prerequisites(text)


def test_error_reports_offending_fragment():
    with pytest.raises(ParseError) as exc:
        parse_prerequisites("CSI 1111 MAT 1341.")
    assert exc.value.fragment == "MAT 1341"
    assert exc.value.position == 9
    assert "MAT 1341" in str(exc.value)


def test_error_at_end_of_text():
    text = "CSI 1111 or"
    with pytest.raises(ParseError) as exc:
        parse_prerequisites(text)
    assert exc.value.position == len(text)


def test_subject_codes_are_uppercased():
    assert parse_prerequisites("csi 1111 or Seg2105") == OrNode(
        C("CSI", 1111), C("SEG", 2105))
    assert parse_prerequisites("6 course units in csi or Software (seg).") == MinCreditNode(
        6, frozenset({"CSI", "SEG"}), None)
