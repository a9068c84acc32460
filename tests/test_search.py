import json
import sqlite3

import pytest

from healthdesk.search import SearchResult, run, search

_SCHEMA = """
CREATE TABLE diseases (
    id INTEGER PRIMARY KEY, name TEXT NOT NULL, category TEXT,
    severity TEXT NOT NULL, description TEXT NOT NULL, contagious INTEGER DEFAULT 0
);
CREATE TABLE symptoms (id INTEGER PRIMARY KEY, name TEXT NOT NULL UNIQUE);
CREATE TABLE disease_symptoms (
    disease_id INTEGER, symptom_id INTEGER, weight REAL DEFAULT 0.5,
    is_primary INTEGER DEFAULT 0, PRIMARY KEY (disease_id, symptom_id)
);
"""


@pytest.fixture
def conn():
    db = sqlite3.connect(":memory:")
    db.executescript(_SCHEMA)
    db.executemany(
        "INSERT INTO diseases (id, name, category, severity, description, contagious) VALUES (?, ?, ?, ?, ?, ?)",
        [
            (1, "Malaria", "infectious", "high", "Mosquito-borne parasitic infection with cyclic fever.", 0),
            (2, "Dengue", "infectious", "medium", "Viral infection spread by mosquitoes.", 0),
            (3, "Common Cold", "respiratory", "low", "Mild viral infection of the nose and throat.", 1),
        ],
    )
    db.executemany(
        "INSERT INTO symptoms (id, name) VALUES (?, ?)",
        [(1, "fever"), (2, "high fever"), (3, "headache"), (4, "runny nose")],
    )
    db.executemany(
        "INSERT INTO disease_symptoms (disease_id, symptom_id) VALUES (?, ?)",
        [(1, 1), (1, 3), (2, 1), (2, 2), (3, 4)],
    )
    yield db
    db.close()


def test_search_fever(conn):
    result = search(conn, "fever")
    assert result.symptoms == ["fever", "high fever"]
    assert [d[0] for d in result.diseases] == ["Malaria"]
    assert not result.is_empty


def test_search_is_case_insensitive(conn):
    assert search(conn, "FEVER").symptoms == search(conn, "fever").symptoms


def test_search_matches_disease_name(conn):
    result = search(conn, "malaria")
    assert result.diseases == [("Malaria", "infectious", "high")]
    assert result.symptoms == []


def test_search_no_results(conn):
    result = search(conn, "xyznonexistent")
    assert result.is_empty
    assert result.query == "xyznonexistent"


def test_search_json(conn, capsys):
    run(conn, "malaria", as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data["query"] == "malaria"
    assert data["matching_symptoms"] == []
    assert data["matching_diseases"] == [
        {"name": "Malaria", "category": "infectious", "severity": "high"}
    ]


def test_run_text_lists_related_diseases(conn, capsys):
    run(conn, "fever")
    out = capsys.readouterr().out
    assert "━━━ Search: 'fever' ━━━" in out
    assert "🔍 fever → Dengue, Malaria" in out
    assert "🔴 Malaria [infectious]" in out


def test_run_text_no_results(conn, capsys):
    result = run(conn, "xyznonexistent")
    assert result.is_empty
    assert "No results for 'xyznonexistent'." in capsys.readouterr().out


def test_to_dict_shape():
    result = SearchResult(query="q", symptoms=["a"], diseases=[("D", "c", "low")])
    assert result.to_dict() == {
        "query": "q",
        "matching_symptoms": ["a"],
        "matching_diseases": [{"name": "D", "category": "c", "severity": "low"}],
    }