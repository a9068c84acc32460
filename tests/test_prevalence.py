import json
import sqlite3

import pytest

from healthdesk.prevalence import prevalence_entries, run

SCHEMA = """
CREATE TABLE diseases (id INTEGER PRIMARY KEY, name TEXT NOT NULL, category TEXT,
    severity TEXT NOT NULL, contagious INTEGER DEFAULT 0, description TEXT DEFAULT '');
CREATE TABLE symptoms (id INTEGER PRIMARY KEY, name TEXT UNIQUE);
CREATE TABLE disease_symptoms (disease_id INTEGER, symptom_id INTEGER,
    weight REAL DEFAULT 0.5, is_primary INTEGER DEFAULT 0);
CREATE TABLE risk_factors (disease_id INTEGER, factor TEXT, impact TEXT);
"""


def _add(conn, name, category, severity, n_symptoms, n_factors):
    did = conn.execute(
        "INSERT INTO diseases (name, category, severity) VALUES (?, ?, ?)",
        (name, category, severity),
    ).lastrowid
    for i in range(n_symptoms):
        conn.execute("INSERT INTO disease_symptoms VALUES (?, ?, 0.5, 0)", (did, i + 1))
    for i in range(n_factors):
        conn.execute("INSERT INTO risk_factors VALUES (?, ?, 'low')", (did, f"f{i}"))


@pytest.fixture
def conn():
    c = sqlite3.connect(":memory:")
    c.executescript(SCHEMA)
    _add(c, "Malaria", "infectious", "high", 6, 4)
    _add(c, "Asthma", "respiratory", "medium", 3, 1)
    _add(c, "Cholera", "infectious", "high", 2, 1)
    _add(c, "Hiccups", None, "low", 1, 0)
    yield c
    c.close()


def test_entries_ordered_by_category_then_name(conn):
    entries = prevalence_entries(conn)
    keys = [(e.category, e.disease) for e in entries if e.disease != "Hiccups"]
    assert keys == sorted(keys)


def test_missing_category_reads_general(conn):
    by_name = {e.disease: e for e in prevalence_entries(conn)}
    assert by_name["Hiccups"].category == "general"


def test_counts_match_inserted_rows(conn):
    by_name = {e.disease: e for e in prevalence_entries(conn)}
    assert by_name["Malaria"].symptom_count == 6
    assert by_name["Malaria"].risk_factor_count == 4
    assert by_name["Malaria"].completeness_bar == "████"
    assert by_name["Hiccups"].completeness_bar == "██░░"


def test_filter_is_case_insensitive_substring(conn):
    entries = prevalence_entries(conn, "INFECT")
    assert [e.disease for e in entries] == ["Cholera", "Malaria"]


def test_filter_without_matches(conn):
    assert prevalence_entries(conn, "cardio") == []


def test_run_json(conn, capsys):
    entries = run(conn, "respiratory", as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data == [e.to_dict() for e in entries]
    assert data[0]["disease"] == "Asthma"


def test_run_text_empty_filter(conn, capsys):
    assert run(conn, "cardio") == []
    assert "No diseases found for the given filter." in capsys.readouterr().out


def test_run_text_total(conn, capsys):
    entries = run(conn)
    out = capsys.readouterr().out
    assert f"Total: {len(entries)} diseases" in out
    assert "📂 INFECTIOUS" in out