"""Domain records: Person, House, LandOwner and Family."""

from dataclasses import dataclass, fields, replace
from typing import Generic, Protocol, TypeVar, runtime_checkable

from lineage.domain.errors import InvalidArgument, InvalidOperation


def _dump(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_dump(item) for item in value) + "]"
    return str(value)


class _Record:
    """Renders a dataclass as TypeName[field=value, ...] in field order."""

    def __str__(self) -> str:
        parts = (f"{f.name}={_dump(getattr(self, f.name))}" for f in fields(self))
        return f"{type(self).__name__}[{', '.join(parts)}]"


@dataclass(frozen=True)
class Person(_Record):
    """
    An immutable person record.
    Name is required; address is optional and value defaults to 0.
    """

    name: str
    address: str | None = None
    value: int = 0

    def __post_init__(self):
        if self.name is None:
            raise InvalidArgument("Person name is required.")

    def first_name(self) -> str:
        tokens = self.name.split()
        return tokens[0] if tokens else ""

    def family_name(self) -> str:
        return " ".join(self.name.split()[1:])

    def child_with(self, other: "Person", child_name: str) -> "Person":
        """Return the child of this person and other, named child_name.

        The parent with the higher value passes on its first name and address.
        On equal values, self inherits only when child_name sorts before
        other.name ignoring case: the comparison is against the child's name,
        not between the two parents.
        """
        if self.value > other.value:
            inherit = self
        elif self.value == other.value and child_name.lower() < other.name.lower():
            inherit = self
        else:
            inherit = other
        return Person(
            name=f"{child_name} {inherit.first_name()}son",
            address=inherit.address,
            value=self.value + other.value,
        )

    @classmethod
    def nobody(cls) -> "Person":
        """Shared sentinel for an absent person."""
        return NOBODY


NOBODY = Person("nobody")


@runtime_checkable
class Liveable(Protocol):
    """Anything a person can live in."""

    @property
    def rooms(self) -> int: ...


@dataclass(frozen=True)
class House(_Record, Liveable):
    """
    A house at a required address with at least one room.
    Resizing returns a new House.
    """

    name: str | None = None
    address: str | None = None
    rooms: int = 1

    def __post_init__(self):
        if self.address is None:
            raise InvalidArgument("House address is required.")
        if self.rooms < 1:
            raise InvalidOperation("can't have a house with less than one room")

    @classmethod
    def at(cls, address: str) -> "House":
        return cls(name=None, address=address, rooms=1)

    def increase_size(self, added_rooms: int = 1) -> "House":
        return replace(self, rooms=self.rooms + added_rooms)


T = TypeVar("T", bound=Liveable)


@dataclass(frozen=True)
class LandOwner(_Record, Generic[T]):
    """Pairs a person with the place they own. Both fields are optional."""

    person: Person | None
    owned: T | None


@dataclass(frozen=True)
class Family(_Record):
    """
    Two parents and their children, in birth order.
    The children sequence is copied at construction; the caller's list can
    change afterwards without affecting the family.
    """

    father: Person
    mother: Person
    children: tuple[Person, ...] = ()

    def __post_init__(self):
        if self.father is None:
            raise InvalidArgument("Family father is required.")
        if self.mother is None:
            raise InvalidArgument("Family mother is required.")
        if self.children is None:
            raise InvalidArgument("Family children must be a sequence, not None.")
        children = tuple(self.children)
        if any(child is None for child in children):
            raise InvalidArgument("Family children cannot contain None.")
        object.__setattr__(self, "children", children)

    @classmethod
    def of(
        cls,
        father: Person,
        mother: Person,
        first_born: Person,
        *more_children: Person,
    ) -> "Family":
        return cls(father, mother, (first_born, *more_children))

    def with_child(self, newborn: Person) -> "Family":
        return replace(self, children=self.children + (newborn,))
