"""Treatment protocol lookup."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Treatment:
    """Treatment protocol for one disease."""

    disease: str
    protocol: str
    source: str
    first_aid: str
    prevention: str


def find_treatment(conn: sqlite3.Connection, name: str) -> Treatment | None:
    """Return the first treatment whose disease name contains ``name``."""
    row = conn.execute(
        """SELECT d.name, t.protocol, t.source, t.first_aid, t.prevention
           FROM treatments t
           JOIN diseases d ON d.id = t.disease_id
           WHERE d.name LIKE ?""",
        (f"%{name}%",),
    ).fetchone()
    if row is None:
        return None
    disease, protocol, source, first_aid, prevention = row
    return Treatment(
        disease=disease,
        protocol=protocol,
        source=source if source is not None else "WHO",
        first_aid=first_aid or "",
        prevention=prevention or "",
    )


def _format_treatment(treatment: Treatment) -> str:
    lines = [
        "⚠️  This is not a substitute for professional medical advice.",
        "",
        f"━━━ Treatment: {treatment.disease} ━━━",
        f"  Source: {treatment.source}",
        "",
        "  Protocol:",
        f"  {treatment.protocol}",
    ]
    if treatment.first_aid:
        lines += ["", "  First Aid:", f"  {treatment.first_aid}"]
    if treatment.prevention:
        lines += ["", "  Prevention:", f"  {treatment.prevention}"]
    lines.append("")
    return "\n".join(lines)


def run(conn: sqlite3.Connection, name: str, as_json: bool = False) -> Treatment | None:
    """Print the treatment for ``name`` and return it, or None if absent."""
    treatment = find_treatment(conn, name)
    if as_json:
        payload = None if treatment is None else asdict(treatment)
        print(json.dumps(payload, indent=2, ensure_ascii=False, sort_keys=True))
        return treatment

    if treatment is None:
        print(f"Treatment for '{name}' not found in database.")
        print('Try: healthdesk treatment "malaria"')
    else:
        print(_format_treatment(treatment))
    return treatment