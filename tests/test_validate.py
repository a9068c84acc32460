import json
import sqlite3

import pytest

from healthdesk.validate import ValidationIssue, run, validate_database

SCHEMA = """
CREATE TABLE diseases (id INTEGER PRIMARY KEY, name TEXT NOT NULL, category TEXT,
    severity TEXT NOT NULL, contagious INTEGER DEFAULT 0, description TEXT DEFAULT '');
CREATE TABLE symptoms (id INTEGER PRIMARY KEY, name TEXT UNIQUE);
CREATE TABLE disease_symptoms (disease_id INTEGER, symptom_id INTEGER,
    weight REAL DEFAULT 0.5, is_primary INTEGER DEFAULT 0);
CREATE TABLE treatments (disease_id INTEGER, protocol TEXT, source TEXT,
    first_aid TEXT, prevention TEXT);
CREATE TABLE risk_factors (disease_id INTEGER, factor TEXT, impact TEXT);
CREATE TABLE metadata (key TEXT PRIMARY KEY, value TEXT);
"""


def _symptom_id(conn, name):
    row = conn.execute("SELECT id FROM symptoms WHERE name = ?", (name,)).fetchone()
    if row:
        return row[0]
    return conn.execute("INSERT INTO symptoms (name) VALUES (?)", (name,)).lastrowid


def _add(conn, name, symptoms, treatment=True, severity="medium"):
    did = conn.execute(
        "INSERT INTO diseases (name, category, severity, description) VALUES (?, 'general', ?, 'x')",
        (name, severity),
    ).lastrowid
    for sym, weight, primary in symptoms:
        conn.execute(
            "INSERT INTO disease_symptoms VALUES (?, ?, ?, ?)",
            (did, _symptom_id(conn, sym), weight, primary),
        )
    if treatment:
        conn.execute(
            "INSERT INTO treatments VALUES (?, 'Rest.', 'WHO', '', '')", (did,)
        )
    return did


@pytest.fixture
def conn():
    c = sqlite3.connect(":memory:")
    c.executescript(SCHEMA)
    _add(c, "Malaria", [("fever", 0.9, 1), ("chills", 0.8, 1), ("headache", 0.5, 0)])
    _add(c, "Influenza", [("fever", 0.7, 1), ("cough", 0.6, 0), ("fatigue", 0.5, 0)])
    yield c
    c.close()


def test_clean_database_has_no_issues(conn):
    assert validate_database(conn) == []


def test_no_disease_without_symptoms(conn):
    issues = validate_database(conn)
    orphans = [i.entity for i in issues if i.message == "Disease has no symptoms linked"]
    assert orphans == []


def test_disease_without_symptoms_is_error(conn):
    _add(conn, "Mystery", [])
    issues = validate_database(conn)
    assert ValidationIssue("error", "Mystery", "Disease has no symptoms linked") in issues
    assert ValidationIssue("warning", "Mystery", "Disease has no primary symptoms marked") in issues


def test_missing_treatment_is_warning(conn):
    _add(conn, "Untreated", [("a", 0.5, 1), ("b", 0.5, 0), ("c", 0.5, 0)], treatment=False)
    issues = validate_database(conn)
    assert issues == [
        ValidationIssue("warning", "Untreated", "Disease has no treatment protocol")
    ]


def test_orphan_symptom_is_info(conn):
    conn.execute("INSERT INTO symptoms (name) VALUES ('lonely')")
    issues = validate_database(conn)
    assert issues == [ValidationIssue("info", "lonely", "Symptom not linked to any disease")]


def test_few_symptoms_warning(conn):
    _add(conn, "Sparse", [("rash", 0.5, 1), ("itch", 0.5, 0)])
    issues = validate_database(conn)
    assert ValidationIssue(
        "warning", "Sparse", "Disease has only 2 symptoms (recommend ≥3)"
    ) in issues


def test_weight_out_of_range(conn):
    _add(conn, "Heavy", [("pain", 1.5, 1), ("swelling", 0.5, 0), ("redness", 0.5, 0)])
    issues = validate_database(conn)
    assert issues == [
        ValidationIssue(
            "error", "Heavy/pain", "Symptom weight 1.5 is outside valid range [0.0, 1.0]"
        )
    ]


def test_duplicate_links(conn):
    conn.execute("INSERT INTO disease_symptoms VALUES (1, 1, 0.5, 0)")
    issues = validate_database(conn)
    assert issues == [
        ValidationIssue("error", "disease_symptoms", "1 duplicate disease-symptom links found")
    ]


def test_run_json_valid(conn, capsys):
    run(conn, as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data["valid"] is True
    assert data["diseases"] == 2
    assert data["treatments"] == 2
    assert data["issues"] == []


def test_run_json_invalid(conn, capsys):
    _add(conn, "Mystery", [])
    issues = run(conn, as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data["valid"] is False
    assert len(data["issues"]) == len(issues)


def test_run_text(conn, capsys):
    issues = run(conn)
    out = capsys.readouterr().out
    assert issues == []
    assert "All checks passed!" in out