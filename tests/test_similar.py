import json
import sqlite3

import pytest

from healthdesk.similar import find_similar, get_symptom_ids, run

SCHEMA = """
CREATE TABLE diseases (id INTEGER PRIMARY KEY, name TEXT NOT NULL, category TEXT,
    severity TEXT NOT NULL, contagious INTEGER DEFAULT 0, description TEXT DEFAULT '');
CREATE TABLE symptoms (id INTEGER PRIMARY KEY, name TEXT UNIQUE);
CREATE TABLE disease_symptoms (disease_id INTEGER, symptom_id INTEGER,
    weight REAL DEFAULT 0.5, is_primary INTEGER DEFAULT 0);
"""


def _symptom_id(conn, name):
    row = conn.execute("SELECT id FROM symptoms WHERE name = ?", (name,)).fetchone()
    if row:
        return row[0]
    return conn.execute("INSERT INTO symptoms (name) VALUES (?)", (name,)).lastrowid


def _add(conn, name, severity, symptoms):
    did = conn.execute(
        "INSERT INTO diseases (name, severity) VALUES (?, ?)", (name, severity)
    ).lastrowid
    for sym in symptoms:
        conn.execute(
            "INSERT INTO disease_symptoms (disease_id, symptom_id) VALUES (?, ?)",
            (did, _symptom_id(conn, sym)),
        )
    return did


@pytest.fixture
def conn():
    c = sqlite3.connect(":memory:")
    c.executescript(SCHEMA)
    _add(c, "Malaria", "high", ["fever", "chills", "headache", "sweating"])
    _add(c, "Dengue", "high", ["fever", "headache", "rash", "joint pain"])
    _add(c, "Typhoid Fever", "high", ["fever", "headache", "abdominal pain"])
    _add(c, "Relapsing Fever", "medium", ["fever", "chills", "headache", "sweating"])
    _add(c, "Eczema", "low", ["itching", "dry skin"])
    _add(c, "Empty", "low", [])
    yield c
    c.close()


def test_similar_returns_symptoms_for_malaria(conn):
    target_id = conn.execute("SELECT id FROM diseases WHERE name = 'Malaria'").fetchone()[0]
    syms = get_symptom_ids(conn, target_id)
    assert syms
    assert len(syms) == 4


def test_find_similar_malaria(conn):
    results = find_similar(conn, "malaria", 5)
    names = [r.name for r in results]
    assert "Dengue" in names
    assert "Typhoid Fever" in names
    assert "Malaria" not in names


def test_identical_symptom_set_is_fully_similar(conn):
    top = find_similar(conn, "malaria", 5)[0]
    assert top.name == "Relapsing Fever"
    assert top.similarity == 1.0
    assert top.shared_symptoms == 4


def test_disjoint_diseases_excluded(conn):
    names = [r.name for r in find_similar(conn, "malaria", 10)]
    assert "Eczema" not in names
    assert "Empty" not in names


def test_sorted_and_limited(conn):
    results = find_similar(conn, "malaria", 2)
    assert len(results) == 2
    sims = [r.similarity for r in find_similar(conn, "malaria", 10)]
    assert sims == sorted(sims, reverse=True)
    assert all(0.0 < s <= 1.0 for s in sims)


def test_not_found_raises(conn):
    with pytest.raises(LookupError):
        find_similar(conn, "xyznothing", 5)


def test_target_without_symptoms(conn):
    assert find_similar(conn, "Empty", 5) == []


def test_run_json(conn, capsys):
    results = run(conn, "malaria", 3, as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data["target"] == "Malaria"
    assert len(data["similar_diseases"]) == len(results) == 3
    assert data["similar_diseases"][0]["similarity"] == 1.0


def test_run_not_found_json(conn, capsys):
    assert run(conn, "xyznothing", 5, as_json=True) == []
    data = json.loads(capsys.readouterr().out)
    assert data == {"error": "Disease 'xyznothing' not found."}


def test_run_text(conn, capsys):
    results = run(conn, "malaria", 5)
    out = capsys.readouterr().out
    assert "Diseases Similar to Malaria" in out
    assert results[0].name in out


def test_run_text_not_found(conn, capsys):
    assert run(conn, "xyznothing", 5) == []
    assert "Disease 'xyznothing' not found." in capsys.readouterr().out