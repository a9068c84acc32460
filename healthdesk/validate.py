"""Database integrity checks: orphaned records, missing data and inconsistencies."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import asdict, dataclass

_ICONS = {"error": "❌", "warning": "⚠️ "}


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in the database."""

    severity: str
    entity: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def _names(conn: sqlite3.Connection, sql: str) -> list[str]:
    return [row[0] for row in conn.execute(sql) if row[0] is not None]


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _count(conn: sqlite3.Connection, sql: str) -> int:
    try:
        row = conn.execute(sql).fetchone()
    except sqlite3.Error:
        return 0
    return 0 if row is None or row[0] is None else row[0]


def validate_database(conn: sqlite3.Connection) -> list[ValidationIssue]:
    """Run every integrity check and return the issues found, in check order."""
    issues: list[ValidationIssue] = []

    for name in _names(
        conn,
        "SELECT d.name FROM diseases d LEFT JOIN disease_symptoms ds "
        "ON d.id = ds.disease_id WHERE ds.disease_id IS NULL",
    ):
        issues.append(ValidationIssue("error", name, "Disease has no symptoms linked"))

    for name in _names(
        conn,
        "SELECT d.name FROM diseases d LEFT JOIN treatments t "
        "ON d.id = t.disease_id WHERE t.disease_id IS NULL",
    ):
        issues.append(ValidationIssue("warning", name, "Disease has no treatment protocol"))

    for name in _names(
        conn,
        "SELECT s.name FROM symptoms s LEFT JOIN disease_symptoms ds "
        "ON s.id = ds.symptom_id WHERE ds.symptom_id IS NULL",
    ):
        issues.append(ValidationIssue("info", name, "Symptom not linked to any disease"))

    for name, count in conn.execute(
        "SELECT d.name, COUNT(ds.symptom_id) AS cnt FROM diseases d "
        "JOIN disease_symptoms ds ON d.id = ds.disease_id GROUP BY d.id HAVING cnt < 3"
    ):
        if name is None:
            continue
        issues.append(
            ValidationIssue(
                "warning", name, f"Disease has only {count} symptoms (recommend ≥3)"
            )
        )

    for name in _names(
        conn,
        "SELECT d.name FROM diseases d WHERE d.id NOT IN "
        "(SELECT DISTINCT ds.disease_id FROM disease_symptoms ds WHERE ds.is_primary = 1)",
    ):
        issues.append(ValidationIssue("warning", name, "Disease has no primary symptoms marked"))

    for disease, symptom, weight in conn.execute(
        "SELECT d.name, s.name, ds.weight FROM disease_symptoms ds "
        "JOIN diseases d ON d.id = ds.disease_id "
        "JOIN symptoms s ON s.id = ds.symptom_id "
        "WHERE ds.weight < 0.0 OR ds.weight > 1.0"
    ):
        if None in (disease, symptom, weight):
            continue
        issues.append(
            ValidationIssue(
                "error",
                f"{disease}/{symptom}",
                f"Symptom weight {_format_number(weight)} is outside valid range [0.0, 1.0]",
            )
        )

    duplicates = _count(
        conn,
        "SELECT COUNT(*) FROM (SELECT disease_id, symptom_id, COUNT(*) AS cnt "
        "FROM disease_symptoms GROUP BY disease_id, symptom_id HAVING cnt > 1)",
    )
    if duplicates > 0:
        issues.append(
            ValidationIssue(
                "error",
                "disease_symptoms",
                f"{duplicates} duplicate disease-symptom links found",
            )
        )

    return issues


def run(conn: sqlite3.Connection, as_json: bool = False) -> list[ValidationIssue]:
    """Print the validation report and return the issues found."""
    issues = validate_database(conn)
    diseases = _count(conn, "SELECT COUNT(*) FROM diseases")
    symptoms = _count(conn, "SELECT COUNT(*) FROM symptoms")
    treatments = _count(conn, "SELECT COUNT(*) FROM treatments")

    if as_json:
        payload = {
            "valid": not any(i.is_error for i in issues),
            "diseases": diseases,
            "symptoms": symptoms,
            "treatments": treatments,
            "issues": [i.to_dict() for i in issues],
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return issues

    print("━━━ Database Validation ━━━")
    print()
    print(f"  Diseases:   {diseases}  Symptoms: {symptoms}  Treatments: {treatments}")
    print()

    if not issues:
        print("  ✅ All checks passed!")
    else:
        for issue in issues:
            icon = _ICONS.get(issue.severity, "ℹ️ ")
            print(f"  {icon} {issue.entity} — {issue.message}")
        print()
        counts = {
            level: sum(1 for i in issues if i.severity == level)
            for level in ("error", "warning", "info")
        }
        print(
            f"  Summary: {counts['error']} errors, {counts['warning']} warnings, "
            f"{counts['info']} info"
        )
    print()
    return issues