"""DTOs returned by the showcase use cases."""

from dataclasses import dataclass

from lineage.domain import Person


@dataclass(frozen=True)
class ChildReport:
    first_parent: Person
    second_parent: Person
    child: Person

    def describe(self) -> str:
        return (
            f"the son of {self.first_parent} and {self.second_parent}"
            f" is {self.child}"
        )


@dataclass(frozen=True)
class FamilyReport:
    """Children counts of a new couple and of the same couple after two births."""

    new_couple_children: int
    grown_children: int

    def describe(self) -> str:
        return (
            f"newCouple has {self.new_couple_children} ; "
            f"withTwoChildren has {self.grown_children}"
        )
