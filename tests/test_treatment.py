import json
import sqlite3

import pytest

from healthdesk.treatment import Treatment, find_treatment, run


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    connection.executescript(
        """
        CREATE TABLE diseases (id INTEGER PRIMARY KEY, name TEXT NOT NULL);
        CREATE TABLE treatments (
            disease_id INTEGER, protocol TEXT NOT NULL,
            source TEXT, first_aid TEXT, prevention TEXT
        );
        INSERT INTO diseases (id, name) VALUES (1, 'Malaria'), (2, 'Cholera');
        INSERT INTO treatments VALUES
            (1, 'Give artemisinin therapy.', NULL, 'Keep cool.', 'Use bed nets.');
        INSERT INTO treatments VALUES
            (2, 'Rehydrate with ORS.', 'CDC', NULL, NULL);
        """
    )
    yield connection
    connection.close()


def test_find_treatment_case_insensitive_substring(conn):
    t = find_treatment(conn, "mala")
    assert t == Treatment(
        disease="Malaria",
        protocol="Give artemisinin therapy.",
        source="WHO",
        first_aid="Keep cool.",
        prevention="Use bed nets.",
    )


def test_null_fields_default_to_empty(conn):
    t = find_treatment(conn, "CHOLERA")
    assert t.source == "CDC"
    assert t.first_aid == ""
    assert t.prevention == ""


def test_find_treatment_missing(conn):
    assert find_treatment(conn, "xyznothing") is None


def test_run_json(conn, capsys):
    result = run(conn, "malaria", as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data["disease"] == "Malaria"
    assert data["source"] == "WHO"
    assert result.disease == data["disease"]


def test_run_json_missing_prints_null(conn, capsys):
    assert run(conn, "xyznothing", as_json=True) is None
    assert json.loads(capsys.readouterr().out) is None


def test_run_text(conn, capsys):
    run(conn, "cholera")
    out = capsys.readouterr().out
    assert "Rehydrate with ORS." in out
    assert "First Aid" not in out


def test_run_text_missing(conn, capsys):
    run(conn, "xyznothing")
    assert "Treatment for 'xyznothing' not found in database." in capsys.readouterr().out