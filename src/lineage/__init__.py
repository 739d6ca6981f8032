"""
Lineage core: clean-architecture layout.

- domain: value records (Person, House, LandOwner, Family) and errors. No outer dependencies.
- application: showcase use cases (create_child_report, family_report) and DTOs.
"""

from lineage.application import (
    ChildReport,
    FamilyReport,
    create_child_report,
    family_report,
)
from lineage.domain import (
    NOBODY,
    Family,
    House,
    InvalidArgument,
    InvalidOperation,
    LandOwner,
    Liveable,
    Person,
)

__all__ = [
    "NOBODY",
    "ChildReport",
    "Family",
    "FamilyReport",
    "House",
    "InvalidArgument",
    "InvalidOperation",
    "LandOwner",
    "Liveable",
    "Person",
    "create_child_report",
    "family_report",
]
