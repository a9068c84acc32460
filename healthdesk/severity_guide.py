"""Severity classification guide with database counts."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass, field

_LEVELS = (
    ("low", "🟢", "Monitor at home — mild, self-care appropriate"),
    ("medium", "🟡", "See a doctor soon — needs medical attention"),
    ("high", "🔴", "Emergency — seek immediate medical help"),
)
_EXAMPLE_LIMIT = 5


@dataclass(frozen=True)
class SeverityStats:
    """How many diseases have one severity level, with examples."""

    level: str
    emoji: str
    description: str
    count: int
    examples: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "level": self.level,
            "emoji": self.emoji,
            "description": self.description,
            "count": self.count,
            "examples": list(self.examples),
        }


def build_guide(conn: sqlite3.Connection) -> list[SeverityStats]:
    """Return statistics for the low, medium and high levels, in that order."""
    guide = []
    for level, emoji, description in _LEVELS:
        names = [
            row[0]
            for row in conn.execute(
                "SELECT name FROM diseases WHERE severity = ? ORDER BY name", (level,)
            )
            if row[0] is not None
        ]
        guide.append(
            SeverityStats(level, emoji, description, len(names), names[:_EXAMPLE_LIMIT])
        )
    return guide


def run(conn: sqlite3.Connection, as_json: bool = False) -> list[SeverityStats]:
    """Print the severity guide and return its levels."""
    levels = build_guide(conn)
    total = sum(lvl.count for lvl in levels)

    if as_json:
        payload = {"levels": [lvl.to_dict() for lvl in levels], "total_diseases": total}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return levels

    print()
    print("⚕️  Severity Classification Guide")
    print("═" * 50)
    print()
    for lvl in levels:
        pct = int(lvl.count / total * 100) if total else 0
        print(f"  {lvl.emoji} {lvl.level.upper()}")
        print(f"  {lvl.description}")
        print(f"  {lvl.count} diseases ({pct}%)  {'█' * (pct // 3)}")
        print(f"  Examples: {', '.join(lvl.examples)}")
        print()
    print(f"  Total diseases in database: {total}")
    print()
    print("  ⚠️  Severity ratings are general guidance. Always seek professional")
    print("     medical advice for any health concern.")
    print()
    return levels