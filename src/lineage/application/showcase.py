"""Showcase use cases: derive a child from two people, grow a family."""

from lineage.application.dto import ChildReport, FamilyReport
from lineage.domain import Family, Person


def create_child_report(child_name: str = "P3") -> ChildReport:
    """Combine two fixed parents into a child named child_name."""
    first = Person("P1 P1son", "A1", 9000)
    second = Person("P2 P2son", "A2", 1)
    return ChildReport(
        first_parent=first,
        second_parent=second,
        child=first.child_with(second, child_name),
    )


def family_report() -> FamilyReport:
    """Build a childless couple, then one with a first born and one more child."""
    father, mother = Person("p1"), Person("p2")
    new_couple = Family(father, mother)
    with_one_child = Family.of(father, mother, Person("p3"))
    with_two_children = with_one_child.with_child(Person("p4"))
    return FamilyReport(
        new_couple_children=len(new_couple.children),
        grown_children=len(with_two_children.children),
    )
