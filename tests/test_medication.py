import json

import pytest

from healthdesk.medication import (
    MedicationInfo,
    format_medication,
    get_medications,
    run,
    run_list,
    search_medications,
)


def test_medication_data_not_empty():
    assert len(get_medications()) >= 10


def test_medication_fields_not_empty():
    for m in get_medications():
        assert m.name
        assert m.drug_class
        assert m.uses
        assert m.dosage
        assert m.side_effects
        assert m.contraindications


def test_medication_search_paracetamol():
    assert any("paracetamol" in m.name.lower() for m in get_medications())


def test_medication_search_by_class():
    nsaids = [m for m in get_medications() if "nsaid" in m.drug_class.lower()]
    assert len(nsaids) >= 2


def test_search_by_name_case_insensitive():
    names = [m.name for m in search_medications("IBUPROFEN")]
    assert names == ["Ibuprofen"]


def test_search_falls_back_to_words():
    names = [m.name for m in search_medications("penicillin antibiotic")]
    assert "Amoxicillin" in names
    assert "Ciprofloxacin" in names


def test_search_short_words_ignored():
    assert search_medications("zz qq") == []


def test_search_no_match():
    assert search_medications("xyznothing") == []


def test_to_dict_uses_class_key():
    data = get_medications()[0].to_dict()
    assert data["class"] == "Analgesic / Antipyretic"
    assert list(data)[0] == "name"


def test_format_medication_contains_fields():
    med = get_medications()[2]
    text = format_medication(med)
    assert med.name in text
    assert med.dosage in text
    assert "Drug Interactions:" in text


def test_run_json_output(capsys):
    result = run("metformin", as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert [d["name"] for d in data] == ["Metformin"]
    assert [m.name for m in result] == ["Metformin"]


def test_run_json_no_match(capsys):
    result = run("xyznothing", as_json=True)
    assert json.loads(capsys.readouterr().out) == []
    assert result == []


def test_run_text_no_match_lists_all(capsys):
    run("xyznothing")
    out = capsys.readouterr().out
    assert "No medication found matching 'xyznothing'." in out
    assert "Diazepam" in out


def test_run_list_json(capsys):
    names = run_list(as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert data == names
    assert len(data) == len(get_medications())


def test_medication_info_is_frozen():
    med = get_medications()[0]
    assert isinstance(med, MedicationInfo)
    with pytest.raises(AttributeError):
        med.name = "other"
    assert med.name == "Paracetamol (Acetaminophen)"