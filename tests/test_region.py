import json
import sqlite3

import pytest

from healthdesk import region


@pytest.fixture
def conn():
    c = sqlite3.connect(":memory:")
    c.executescript(
        """
        CREATE TABLE diseases (id INTEGER PRIMARY KEY, name TEXT, severity TEXT, description TEXT);
        CREATE TABLE symptoms (id INTEGER PRIMARY KEY, name TEXT);
        CREATE TABLE disease_symptoms (disease_id INTEGER, symptom_id INTEGER);
        INSERT INTO diseases VALUES (1, 'Asthma', 'medium', 'Airway disease');
        INSERT INTO diseases VALUES (2, 'Common Cold', 'low', 'Viral infection');
        INSERT INTO diseases VALUES (3, 'Heart Attack', 'high', 'Cardiac emergency');
        INSERT INTO diseases VALUES (4, 'Eczema', 'low', 'Skin condition');
        INSERT INTO symptoms VALUES (1, 'wheezing');
        INSERT INTO symptoms VALUES (2, 'cough');
        INSERT INTO symptoms VALUES (3, 'chest pain');
        INSERT INTO symptoms VALUES (4, 'itchy rash');
        INSERT INTO disease_symptoms VALUES (1, 1);
        INSERT INTO disease_symptoms VALUES (1, 2);
        INSERT INTO disease_symptoms VALUES (2, 2);
        INSERT INTO disease_symptoms VALUES (3, 3);
        INSERT INTO disease_symptoms VALUES (4, 4);
        """
    )
    yield c
    c.close()


def test_match_region_exact():
    name, keywords = region.match_region("Chest")
    assert name == "chest"
    assert "cough" in keywords


def test_match_region_query_contains_region():
    assert region.match_region("my lower back")[0] == "back"


def test_match_region_unknown():
    with pytest.raises(LookupError):
        region.match_region("xyz")


def test_region_keywords_names_unique():
    names = [r for r, _ in region.get_region_keywords()]
    assert len(names) == len(set(names))
    assert all(len(kw) >= 3 for _, kw in region.get_region_keywords())


def test_diseases_for_region_sorted_by_severity(conn):
    result = region.diseases_for_region(conn, "chest")
    assert [d.name for d in result] == ["Heart Attack", "Asthma", "Common Cold"]
    asthma = result[1]
    assert asthma.key_symptoms == ["wheezing", "cough"]


def test_diseases_for_region_excludes_unrelated(conn):
    result = region.diseases_for_region(conn, "skin")
    assert [d.name for d in result] == ["Eczema"]


def test_diseases_for_region_unknown(conn):
    with pytest.raises(LookupError):
        region.diseases_for_region(conn, "xyz")


def test_run_without_region_lists(conn, capsys):
    assert region.run(conn, None, as_json=True) == []
    names = json.loads(capsys.readouterr().out)
    assert names == [r for r, _ in region.get_region_keywords()]


def test_run_json(conn, capsys):
    result = region.run(conn, "chest", as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data["region"] == "chest"
    assert [d["name"] for d in data["diseases"]] == [d.name for d in result]


def test_run_unknown_json(conn, capsys):
    assert region.run(conn, "XYZ", as_json=True) == []
    assert json.loads(capsys.readouterr().out)["error"] == "Unknown body region: xyz"


def test_run_text(conn, capsys):
    result = region.run(conn, "skin")
    out = capsys.readouterr().out
    assert len(result) == 1
    assert "Body Region: SKIN (1 conditions found)" in out
    assert "Related symptoms: itchy rash" in out