"""Free-text search over symptoms and diseases."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass, field

_SEVERITY_EMOJI = {"high": "🔴", "medium": "🟡"}


@dataclass(frozen=True)
class SearchResult:
    """Symptoms and diseases matching a search query.

    ``diseases`` holds (name, category, severity) triples.
    """

    query: str
    symptoms: list[str] = field(default_factory=list)
    diseases: list[tuple[str, str, str]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.symptoms and not self.diseases

    def to_dict(self) -> dict[str, object]:
        return {
            "query": self.query,
            "matching_symptoms": list(self.symptoms),
            "matching_diseases": [
                {"name": n, "category": c, "severity": s} for n, c, s in self.diseases
            ],
        }


def search(conn: sqlite3.Connection, query: str) -> SearchResult:
    """Find symptoms by name and diseases by name or description, ignoring case."""
    pattern = f"%{query.lower()}%"

    symptoms = [
        row[0]
        for row in conn.execute(
            "SELECT DISTINCT s.name FROM symptoms s WHERE LOWER(s.name) LIKE :p ORDER BY s.name",
            {"p": pattern},
        )
        if row[0] is not None
    ]
    diseases = [
        (name, category, severity)
        for name, category, severity in conn.execute(
            """SELECT name, category, severity FROM diseases
               WHERE LOWER(name) LIKE :p OR LOWER(description) LIKE :p
               ORDER BY name""",
            {"p": pattern},
        )
        if None not in (name, category, severity)
    ]
    return SearchResult(query=query, symptoms=symptoms, diseases=diseases)


def _related_diseases(conn: sqlite3.Connection, symptom: str) -> list[str]:
    return [
        row[0]
        for row in conn.execute(
            """SELECT d.name FROM diseases d
               JOIN disease_symptoms ds ON d.id = ds.disease_id
               JOIN symptoms s ON s.id = ds.symptom_id
               WHERE s.name = ? ORDER BY d.name""",
            (symptom,),
        )
    ]


def run(conn: sqlite3.Connection, query: str, as_json: bool = False) -> SearchResult:
    """Print the search results for ``query`` and return them."""
    result = search(conn, query)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False, sort_keys=True))
        return result

    if result.is_empty:
        print(f"No results for '{query}'.")
        return result

    print(f"━━━ Search: '{query}' ━━━")
    print()

    if result.symptoms:
        print(f"  Matching Symptoms: ({len(result.symptoms)} found)")
        for sym in result.symptoms:
            related = ", ".join(_related_diseases(conn, sym))
            print(f"    🔍 {sym} → {related}")
        print()

    if result.diseases:
        print(f"  Matching Diseases: ({len(result.diseases)} found)")
        for name, category, severity in result.diseases:
            emoji = _SEVERITY_EMOJI.get(severity, "🟢")
            print(f"    {emoji} {name} [{category}]")
        print()

    return result