"""Application layer: showcase use cases and DTOs. Depends only on domain."""

from lineage.application.dto import ChildReport, FamilyReport
from lineage.application.showcase import create_child_report, family_report

__all__ = [
    "ChildReport",
    "FamilyReport",
    "create_child_report",
    "family_report",
]
