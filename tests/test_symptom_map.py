import json
import sqlite3

import pytest

from healthdesk.symptom_map import SymptomMapEntry, build_symptom_map, run

_LINKS = {
    "Malaria": ["fever", "chills", "headache"],
    "Dengue": ["fever", "rash", "headache"],
    "Influenza": ["fever", "cough"],
    "Migraine": ["headache"],
}


@pytest.fixture
def conn():
    db = sqlite3.connect(":memory:")
    db.executescript(
        """
        CREATE TABLE diseases (id INTEGER PRIMARY KEY, name TEXT, severity TEXT,
                               description TEXT, category TEXT, contagious INTEGER);
        CREATE TABLE symptoms (id INTEGER PRIMARY KEY, name TEXT UNIQUE);
        CREATE TABLE disease_symptoms (disease_id INTEGER, symptom_id INTEGER,
                                       weight REAL, is_primary INTEGER);
        """
    )
    for disease, symptoms in _LINKS.items():
        disease_id = db.execute(
            "INSERT INTO diseases (name, severity, description) VALUES (?, 'medium', '')",
            (disease,),
        ).lastrowid
        for sym in symptoms:
            db.execute("INSERT OR IGNORE INTO symptoms (name) VALUES (?)", (sym,))
            sym_id = db.execute("SELECT id FROM symptoms WHERE name = ?", (sym,)).fetchone()[0]
            db.execute("INSERT INTO disease_symptoms VALUES (?, ?, 0.5, 0)", (disease_id, sym_id))
    db.commit()
    yield db
    db.close()


def _expected_diseases(symptom):
    return sorted(d for d, syms in _LINKS.items() if symptom in syms)


def test_entries_sorted_by_count_descending(conn):
    entries = build_symptom_map(conn)
    counts = [e.disease_count for e in entries]
    assert counts == sorted(counts, reverse=True)


def test_entries_cover_every_symptom(conn):
    entries = build_symptom_map(conn)
    all_symptoms = {s for syms in _LINKS.values() for s in syms}
    assert {e.symptom for e in entries} == all_symptoms
    for e in entries:
        assert sorted(e.diseases) == _expected_diseases(e.symptom)
        assert e.disease_count == len(e.diseases)


def test_filter_is_case_insensitive(conn):
    entries = build_symptom_map(conn, "FEV")
    assert [e.symptom for e in entries] == ["fever"]


def test_filter_without_match(conn):
    assert build_symptom_map(conn, "xyz") == []


def test_specificity_labels():
    assert SymptomMapEntry("a", ["x"]).specificity == "HIGHLY SPECIFIC"
    assert SymptomMapEntry("b", [str(i) for i in range(11)]).specificity == "COMMON"


def test_run_json_matches_entries(conn, capsys):
    entries = run(conn, None, True)
    payload = json.loads(capsys.readouterr().out)
    assert payload == [e.to_dict() for e in entries]


def test_run_text_no_match(conn, capsys):
    assert run(conn, "xyz", False) == []
    assert "No symptoms found matching your filter." in capsys.readouterr().out


def test_run_text_lists_symptoms(conn, capsys):
    entries = run(conn, "cough", False)
    out = capsys.readouterr().out
    assert [e.symptom for e in entries] == ["cough"]
    assert "cough [HIGHLY SPECIFIC]" in out