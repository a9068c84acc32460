"""Filter diseases by how quickly their symptoms typically appear."""

from __future__ import annotations

import json
import re
import sqlite3
from dataclasses import asdict, dataclass
from enum import Enum


class OnsetSpeed(Enum):
    """How fast a disease typically develops."""

    HYPERACUTE = "hyperacute"
    ACUTE = "acute"
    SUBACUTE = "subacute"
    CHRONIC = "chronic"

    @classmethod
    def parse(cls, text: str) -> OnsetSpeed:
        """Return the speed named by ``text`` or one of its aliases.

        Raises ValueError for an unknown onset type.
        """
        try:
            return _ALIASES[text.lower()]
        except KeyError:
            raise ValueError(f"Unknown onset type: {text}") from None

    def label(self) -> str:
        return _LABELS[self]

    def emoji(self) -> str:
        return _EMOJIS[self]


_ALIASES: dict[str, OnsetSpeed] = {
    **dict.fromkeys(("hyperacute", "sudden", "seconds", "minutes"), OnsetSpeed.HYPERACUTE),
    **dict.fromkeys(("acute", "hours", "rapid"), OnsetSpeed.ACUTE),
    **dict.fromkeys(("subacute", "days", "weeks"), OnsetSpeed.SUBACUTE),
    **dict.fromkeys(("chronic", "months", "gradual", "slow"), OnsetSpeed.CHRONIC),
}

_LABELS = {
    OnsetSpeed.HYPERACUTE: "Hyperacute (seconds–minutes)",
    OnsetSpeed.ACUTE: "Acute (hours–1 day)",
    OnsetSpeed.SUBACUTE: "Subacute (days–weeks)",
    OnsetSpeed.CHRONIC: "Chronic (weeks–months)",
}

_EMOJIS = {
    OnsetSpeed.HYPERACUTE: "⚡",
    OnsetSpeed.ACUTE: "🔥",
    OnsetSpeed.SUBACUTE: "📅",
    OnsetSpeed.CHRONIC: "🐢",
}


@dataclass(frozen=True)
class OnsetDisease:
    """A disease listed for an onset speed."""

    name: str
    severity: str
    description: str


_H, _A, _S, _C = (
    OnsetSpeed.HYPERACUTE,
    OnsetSpeed.ACUTE,
    OnsetSpeed.SUBACUTE,
    OnsetSpeed.CHRONIC,
)

_ONSET_MAP: tuple[tuple[str, OnsetSpeed], ...] = (
    ("Anaphylaxis", _H),
    ("Anaphylaxis (Food Allergy)", _H),
    ("Anaphylactic Shock", _H),
    ("Stroke", _H),
    ("Heart Attack", _H),
    ("Myocardial Infarction (STEMI)", _H),
    ("Spontaneous Pneumothorax", _H),
    ("Pulmonary Embolism", _H),
    ("Aortic Dissection", _H),
    ("Cardiac Arrest", _H),
    ("Retinal Detachment", _H),
    ("Testicular Torsion", _H),
    ("Acute Compartment Syndrome", _H),
    ("Mesenteric Ischemia (Acute)", _H),
    ("Appendicitis", _A),
    ("Meningitis", _A),
    ("Cholera", _A),
    ("Diabetic Ketoacidosis", _A),
    ("Acute Pancreatitis", _A),
    ("Pneumonia", _A),
    ("Peritonitis", _A),
    ("Epiglottitis", _A),
    ("Ludwig Angina", _A),
    ("Sepsis", _A),
    ("Toxic Shock Syndrome", _A),
    ("Necrotizing Fasciitis", _A),
    ("Carbon Monoxide Poisoning", _A),
    ("Organophosphate Poisoning", _A),
    ("Botulism", _A),
    ("Heatstroke", _A),
    ("Hypothermia", _A),
    ("Pyelonephritis", _A),
    ("Cholangitis", _A),
    ("Urinary Tract Infection", _A),
    ("Leptospirosis", _A),
    ("Herpes Zoster (Shingles)", _A),
    ("Optic Neuritis", _A),
    ("Malaria", _S),
    ("Dengue", _S),
    ("Chikungunya", _S),
    ("Typhoid Fever", _S),
    ("Tuberculosis", _S),
    ("Mononucleosis", _S),
    ("COVID-19", _S),
    ("Influenza", _S),
    ("Common Cold", _S),
    ("Schistosomiasis", _S),
    ("Kawasaki Disease", _S),
    ("Myocarditis", _S),
    ("Guillain-Barré Syndrome", _S),
    ("Bell's Palsy", _S),
    ("Contact Dermatitis", _S),
    ("Chronic Obstructive Pulmonary Disease", _C),
    ("Pulmonary Fibrosis", _C),
    ("Rheumatoid Arthritis", _C),
    ("Osteoarthritis", _C),
    ("Multiple Sclerosis", _C),
    ("Parkinson's Disease", _C),
    ("Alzheimer's Disease", _C),
    ("Chronic Kidney Disease", _C),
    ("Chronic Hepatitis B", _C),
    ("Hashimoto's Thyroiditis", _C),
    ("Irritable Bowel Syndrome", _C),
    ("Fibromyalgia", _C),
    ("Chronic Fatigue Syndrome", _C),
    ("Metabolic Syndrome", _C),
    ("Ankylosing Spondylitis", _C),
    ("Acromegaly", _C),
    ("Leishmaniasis (Visceral)", _C),
    ("Thoracic Aortic Aneurysm", _C),
    ("Hyperaldosteronism (Conn's Syndrome)", _C),
)

_UNKNOWN_JSON = "Unknown onset type. Use: sudden, acute, subacute, chronic"
_UNKNOWN_TEXT = "Unknown onset type. Use: sudden, acute (hours), subacute (days), chronic (weeks+)"
_SEVERITY_DISPLAY = {"high": "🔴 HIGH", "medium": "🟡 MEDIUM"}


def get_onset_map() -> list[tuple[str, OnsetSpeed]]:
    """Return (disease name, onset speed) pairs."""
    return list(_ONSET_MAP)


def _disease_symptoms(conn: sqlite3.Connection, disease: str) -> list[str]:
    return [
        row[0]
        for row in conn.execute(
            """SELECT s.name FROM disease_symptoms ds
               JOIN symptoms s ON s.id = ds.symptom_id
               JOIN diseases di ON di.id = ds.disease_id
               WHERE di.name = ?""",
            (disease,),
        )
        if row[0] is not None
    ]


def diseases_by_onset(
    conn: sqlite3.Connection, speed: OnsetSpeed, symptoms: str | None = None
) -> list[OnsetDisease]:
    """Return diseases of the given onset speed found in the database.

    With ``symptoms`` (separated by commas or semicolons), keep only diseases
    sharing at least one symptom with them.
    """
    names = [name for name, s in _ONSET_MAP if s is speed]
    if not names:
        return []

    placeholders = ", ".join("?" * len(names))
    diseases = [
        OnsetDisease(name, severity, description)
        for name, severity, description in conn.execute(
            f"SELECT name, severity, description FROM diseases WHERE name IN ({placeholders})",
            names,
        )
        if None not in (name, severity, description)
    ]

    if symptoms is None:
        return diseases
    wanted = [s.strip().lower() for s in re.split(r"[,;]", symptoms) if s.strip()]
    if not wanted:
        return diseases

    def matches(disease: OnsetDisease) -> bool:
        known = [s.lower() for s in _disease_symptoms(conn, disease.name)]
        return any(w in k or k in w for w in wanted for k in known)

    return [d for d in diseases if matches(d)]


def run(
    conn: sqlite3.Connection,
    onset_input: str,
    symptoms: str | None = None,
    as_json: bool = False,
) -> list[OnsetDisease]:
    """Print diseases for an onset speed and return them."""
    try:
        speed = OnsetSpeed.parse(onset_input)
    except ValueError:
        print(json.dumps({"error": _UNKNOWN_JSON}) if as_json else _UNKNOWN_TEXT)
        return []

    diseases = diseases_by_onset(conn, speed, symptoms)

    if as_json:
        payload = {"onset_type": speed.label(), "diseases": [asdict(d) for d in diseases]}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return diseases

    print(f"\n{speed.emoji()} ═══ {speed.label()} Onset Diseases ═══")
    if symptoms is not None:
        print(f"  Filtered by symptoms: {symptoms}\n")
    else:
        print()

    if not diseases:
        print("  No matching diseases found for this onset + symptom combination.")
    for d in diseases:
        print(f"  {d.name} [{_SEVERITY_DISPLAY.get(d.severity, '🟢 LOW')}]")
        print(f"    {d.description}")

    print("\nTip: Combine with 'healthdesk symptoms' for full scoring.\n")
    return diseases