"""Overview of diseases per category with data completeness."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import asdict, dataclass
from itertools import groupby

_SEVERITY_EMOJI = {"high": "🔴", "medium": "🟡"}


@dataclass(frozen=True)
class PrevalenceEntry:
    """A disease with how much data the database holds about it."""

    disease: str
    severity: str
    category: str
    symptom_count: int
    risk_factor_count: int

    @property
    def completeness(self) -> int:
        return self.symptom_count + self.risk_factor_count

    @property
    def completeness_bar(self) -> str:
        if self.completeness >= 10:
            return "████"
        if self.completeness >= 6:
            return "███░"
        return "██░░"

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def prevalence_entries(
    conn: sqlite3.Connection, category_filter: str | None = None
) -> list[PrevalenceEntry]:
    """Return diseases ordered by category and name.

    A missing category reads as "general"; ``category_filter`` keeps
    categories containing it, ignoring case.
    """
    rows = conn.execute(
        """SELECT d.id, d.name, d.severity, d.category,
                  (SELECT COUNT(*) FROM disease_symptoms WHERE disease_id = d.id),
                  (SELECT COUNT(*) FROM risk_factors WHERE disease_id = d.id)
           FROM diseases d
           ORDER BY d.category, d.name"""
    )
    entries = [
        PrevalenceEntry(name, severity, category or "general", sym_count, rf_count)
        for _id, name, severity, category, sym_count, rf_count in rows
        if name is not None and severity is not None
    ]
    if category_filter is not None:
        needle = category_filter.lower()
        entries = [e for e in entries if needle in e.category.lower()]
    return entries


def run(
    conn: sqlite3.Connection, category_filter: str | None = None, as_json: bool = False
) -> list[PrevalenceEntry]:
    """Print the prevalence overview and return its entries."""
    entries = prevalence_entries(conn, category_filter)

    if as_json:
        print(json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False))
        return entries

    if not entries:
        print("No diseases found for the given filter.")
        return entries

    print("━━━ Disease Prevalence Overview ━━━")
    print()
    groups = [(cat, list(items)) for cat, items in groupby(entries, key=lambda e: e.category)]
    for index, (category, items) in enumerate(groups):
        print(f"📂 {category.upper()}")
        for e in items:
            print(
                f"   {_SEVERITY_EMOJI.get(e.severity, '🟢')} {e.disease} — "
                f"{e.symptom_count} symptoms, {e.risk_factor_count} risk factors "
                f"[{e.completeness_bar}]"
            )
        print(f"   {len(items)} diseases in category")
        if index < len(groups) - 1:
            print()

    print()
    print(f"📊 Total: {len(entries)} diseases across all categories")
    print()
    return entries