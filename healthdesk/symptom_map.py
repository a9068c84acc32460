"""How many diseases share each symptom."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SymptomMapEntry:
    """One symptom and the diseases it belongs to."""

    symptom: str
    diseases: list[str] = field(default_factory=list)

    @property
    def disease_count(self) -> int:
        return len(self.diseases)

    @property
    def specificity(self) -> str:
        if self.disease_count <= 3:
            return "HIGHLY SPECIFIC"
        if self.disease_count <= 10:
            return "MODERATE"
        return "COMMON"

    def to_dict(self) -> dict[str, object]:
        return {
            "symptom": self.symptom,
            "disease_count": self.disease_count,
            "diseases": list(self.diseases),
        }


def build_symptom_map(
    conn: sqlite3.Connection, filter_text: str | None = None
) -> list[SymptomMapEntry]:
    """Return symptoms with their diseases, most widely shared first.

    ``filter_text`` keeps only symptoms whose name contains it, ignoring case.
    """
    grouped: dict[str, list[str]] = {}
    for symptom, disease in conn.execute(
        """SELECT s.name, d.name
           FROM symptoms s
           JOIN disease_symptoms ds ON ds.symptom_id = s.id
           JOIN diseases d ON d.id = ds.disease_id
           ORDER BY s.name"""
    ):
        grouped.setdefault(symptom, []).append(disease)

    entries = [SymptomMapEntry(symptom, diseases) for symptom, diseases in grouped.items()]
    if filter_text is not None:
        needle = filter_text.lower()
        entries = [e for e in entries if needle in e.symptom.lower()]
    entries.sort(key=lambda e: e.disease_count, reverse=True)
    return entries


def run(
    conn: sqlite3.Connection, filter_text: str | None = None, as_json: bool = False
) -> list[SymptomMapEntry]:
    """Print the symptom specificity map and return its entries."""
    entries = build_symptom_map(conn, filter_text)

    if as_json:
        print(json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False))
        return entries

    if not entries:
        print("No symptoms found matching your filter.")
        return entries

    print("\n═══ Symptom Specificity Map ═══")
    print("Shows how many diseases share each symptom (higher = less specific)\n")
    for e in entries:
        print(f"  {e.disease_count:>3} {e.symptom} [{e.specificity}]")

    print(f"\nTotal: {len(entries)} symptoms tracked across the database.")
    print("Tip: Highly specific symptoms narrow diagnoses faster.\n")
    return entries