"""Tests for the showcase use cases and the entry point."""

from lineage.__main__ import main
from lineage.application import (
    ChildReport,
    FamilyReport,
    create_child_report,
    family_report,
)
from lineage.domain import Person

CHILD_LINE = (
    "the son of Person[name=P1 P1son, address=A1, value=9000] and "
    "Person[name=P2 P2son, address=A2, value=1] is "
    "Person[name=P3 P1son, address=A1, value=9001]"
)
FAMILY_LINE = "newCouple has 0 ; withTwoChildren has 2"


def test_create_child_report() -> None:
    report = create_child_report()
    assert isinstance(report, ChildReport)
    assert report.child == Person("P3 P1son", "A1", 9001)
    assert report.describe() == CHILD_LINE


def test_create_child_report_with_other_name() -> None:
    assert create_child_report("Q").child.name == "Q P1son"


def test_family_report() -> None:
    report = family_report()
    assert report == FamilyReport(new_couple_children=0, grown_children=2)
    assert report.describe() == FAMILY_LINE


def test_main_prints_both_lines(capsys) -> None:
    main()
    out = capsys.readouterr().out
    assert out.splitlines() == [CHILD_LINE, FAMILY_LINE]
