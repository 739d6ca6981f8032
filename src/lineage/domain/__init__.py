"""Domain layer: value records and their errors. No dependencies on outer layers."""

from lineage.domain.entities import (
    NOBODY,
    Family,
    House,
    LandOwner,
    Liveable,
    Person,
)
from lineage.domain.errors import InvalidArgument, InvalidOperation

__all__ = [
    "NOBODY",
    "Family",
    "House",
    "InvalidArgument",
    "InvalidOperation",
    "LandOwner",
    "Liveable",
    "Person",
]
