"""Find diseases similar to a given one by symptom overlap (Jaccard similarity)."""

from __future__ import annotations

import json
import math
import sqlite3
from dataclasses import dataclass

_SEVERITY_EMOJI = {"high": "🔴", "medium": "🟡"}


@dataclass(frozen=True)
class SimilarDisease:
    """A disease and how much of its symptom set it shares with the target."""

    name: str
    severity: str
    similarity: float
    shared_symptoms: int
    union: int

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "severity": self.severity,
            "similarity": math.floor(self.similarity * 100.0 + 0.5) / 100.0,
            "shared_symptoms": self.shared_symptoms,
        }


def get_symptom_ids(conn: sqlite3.Connection, disease_id: int) -> list[int]:
    """Return the symptom ids linked to a disease."""
    return [
        row[0]
        for row in conn.execute(
            "SELECT symptom_id FROM disease_symptoms WHERE disease_id = ?", (disease_id,)
        )
        if row[0] is not None
    ]


def _find_target(conn: sqlite3.Connection, name: str) -> tuple[int, str]:
    row = conn.execute(
        "SELECT id, name FROM diseases WHERE name LIKE ?", (f"%{name}%",)
    ).fetchone()
    if row is None or row[1] is None:
        raise LookupError(f"Disease '{name}' not found.")
    return row[0], row[1]


def _rank(
    conn: sqlite3.Connection, target_id: int, target_symptoms: list[int], limit: int
) -> list[SimilarDisease]:
    others = conn.execute(
        "SELECT id, name, severity FROM diseases WHERE id != ?", (target_id,)
    ).fetchall()
    results = []
    for other_id, other_name, other_severity in others:
        if other_name is None or other_severity is None:
            continue
        other_symptoms = get_symptom_ids(conn, other_id)
        if not other_symptoms:
            continue
        shared = sum(1 for s in target_symptoms if s in other_symptoms)
        if shared == 0:
            continue
        union = len(target_symptoms) + len(other_symptoms) - shared
        results.append(
            SimilarDisease(other_name, other_severity, shared / union, shared, union)
        )
    results.sort(key=lambda d: d.similarity, reverse=True)
    return results[:limit]


def find_similar(conn: sqlite3.Connection, name: str, limit: int = 5) -> list[SimilarDisease]:
    """Return up to ``limit`` diseases sharing symptoms with the named one, most similar first.

    Raises LookupError when no disease name contains ``name``.
    """
    target_id, _ = _find_target(conn, name)
    target_symptoms = get_symptom_ids(conn, target_id)
    if not target_symptoms:
        return []
    return _rank(conn, target_id, target_symptoms, limit)


def run(
    conn: sqlite3.Connection, name: str, limit: int = 5, as_json: bool = False
) -> list[SimilarDisease]:
    """Print the diseases similar to ``name`` and return them."""
    try:
        target_id, target_name = _find_target(conn, name)
    except LookupError:
        message = f"Disease '{name}' not found."
        print(json.dumps({"error": message}, ensure_ascii=False) if as_json else message)
        return []

    target_symptoms = get_symptom_ids(conn, target_id)
    if not target_symptoms:
        print("[]" if as_json else f"No symptoms found for '{target_name}'.")
        return []

    similar = _rank(conn, target_id, target_symptoms, limit)

    if as_json:
        payload = {
            "target": target_name,
            "similar_diseases": [d.to_dict() for d in similar],
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return similar

    print(f"━━━ Diseases Similar to {target_name} ━━━")
    print()
    if not similar:
        print("  No similar diseases found.")
        return similar

    for rank, d in enumerate(similar, start=1):
        pct = math.floor(d.similarity * 100.0 + 0.5)
        print(
            f"  {rank}. {_SEVERITY_EMOJI.get(d.severity, '🟢')} {d.name} — "
            f"{pct}% similar ({d.shared_symptoms} shared symptoms)"
        )
    print()
    return similar