"""
Migration report model for MyDay.

This module provides the MigrationReport model summarising one run of the
legacy text to YAML migration.
"""

from typing import Dict

from pydantic import BaseModel


class MigrationReport(BaseModel):
    """Outcome of a migration run, keyed by ``YYYYMM``."""

    migrated: Dict[str, int] = {}
    skipped: Dict[str, str] = {}

    def record_migrated(self, date_key: str, count: int) -> None:
        self.migrated[date_key] = count

    def record_skipped(self, date_key: str, reason: str) -> None:
        self.skipped[date_key] = reason

    @property
    def total_items(self) -> int:
        return sum(self.migrated.values())

    @property
    def changed(self) -> bool:
        return bool(self.migrated)
