"""Database statistics summary."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field

_SEVERITY_EMOJI = {"high": "🔴", "medium": "🟡"}


@dataclass(frozen=True)
class DatabaseStats:
    """Counts and breakdowns describing the disease database."""

    version: str
    diseases: int
    symptoms: int
    treatments: int
    risk_factors: int
    mappings: int
    contagious: int
    severities: list[tuple[str, int]] = field(default_factory=list)
    categories: list[tuple[str, int]] = field(default_factory=list)

    @property
    def contagious_percent(self) -> float:
        return self.contagious / max(self.diseases, 1) * 100.0


def _scalar(conn: sqlite3.Connection, sql: str, default):
    try:
        row = conn.execute(sql).fetchone()
    except sqlite3.Error:
        return default
    if row is None or row[0] is None:
        return default
    return row[0]


def collect_stats(conn: sqlite3.Connection) -> DatabaseStats:
    """Gather counts; a count that cannot be read is reported as 0."""
    severities = [
        (sev, count)
        for sev, count in conn.execute(
            "SELECT severity, COUNT(*) FROM diseases GROUP BY severity ORDER BY severity"
        )
        if sev is not None
    ]
    categories = [
        (cat, count)
        for cat, count in conn.execute(
            "SELECT category, COUNT(*) FROM diseases GROUP BY category ORDER BY COUNT(*) DESC"
        )
        if cat is not None
    ]
    return DatabaseStats(
        version=str(
            _scalar(conn, "SELECT value FROM metadata WHERE key = 'seed_version'", "unknown")
        ),
        diseases=_scalar(conn, "SELECT COUNT(*) FROM diseases", 0),
        symptoms=_scalar(conn, "SELECT COUNT(*) FROM symptoms", 0),
        treatments=_scalar(conn, "SELECT COUNT(*) FROM treatments", 0),
        risk_factors=_scalar(conn, "SELECT COUNT(*) FROM risk_factors", 0),
        mappings=_scalar(conn, "SELECT COUNT(*) FROM disease_symptoms", 0),
        contagious=_scalar(conn, "SELECT COUNT(*) FROM diseases WHERE contagious = 1", 0),
        severities=severities,
        categories=categories,
    )


def run(conn: sqlite3.Connection) -> DatabaseStats:
    """Print the database statistics and return them."""
    stats = collect_stats(conn)

    print("━━━ Database Statistics ━━━")
    print()
    print(f"  Database version:       {stats.version}")
    print(f"  Diseases:               {stats.diseases}")
    print(f"  Unique symptoms:        {stats.symptoms}")
    print(f"  Treatments:             {stats.treatments}")
    print(f"  Risk factors:           {stats.risk_factors}")
    print(f"  Symptom-disease links:  {stats.mappings}")
    print()

    print("  Severity breakdown:")
    for sev, count in stats.severities:
        print(f"    {_SEVERITY_EMOJI.get(sev, '🟢')} {sev}: {count}")
    print()

    print("  Categories:")
    for cat, count in stats.categories:
        print(f"    {cat}: {count}")
    print()

    print(
        f"  Contagious diseases:    {stats.contagious}/{stats.diseases} "
        f"({stats.contagious_percent:.0f}%)"
    )
    print()
    return stats