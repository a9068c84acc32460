"""Typical progression timelines for common diseases."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Phase:
    """One stage in the course of a disease."""

    name: str
    timeframe: str
    description: str
    key_symptoms: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "timeframe": self.timeframe,
            "description": self.description,
            "key_symptoms": list(self.key_symptoms),
        }


@dataclass(frozen=True)
class Timeline:
    """The phases, duration and warning signs of one disease."""

    disease: str
    phases: tuple[Phase, ...]
    total_duration: str
    warning_signs: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {
            "disease": self.disease,
            "phases": [p.to_dict() for p in self.phases],
            "total_duration": self.total_duration,
            "warning_signs": list(self.warning_signs),
        }


_TIMELINES: tuple[Timeline, ...] = (
    Timeline(
        "Malaria",
        (
            Phase("Incubation", "7-30 days", "Parasite multiplies in liver. No symptoms."),
            Phase("Prodrome", "1-2 days", "Non-specific symptoms begin.", ("fatigue", "malaise", "mild headache")),
            Phase("Acute paroxysms", "Days 3-7", "Classic cyclic fever pattern every 48-72h.", ("high fever", "rigors/chills", "profuse sweating", "headache", "nausea")),
            Phase("Crisis (if untreated)", "Week 2+", "Risk of severe/cerebral malaria.", ("confusion", "seizures", "severe anemia", "respiratory distress")),
            Phase("Recovery", "2-4 weeks", "With treatment, symptoms resolve. Relapses possible with P. vivax.", ("resolving fever", "lingering fatigue")),
        ),
        "2-6 weeks (treated); fatal if untreated cerebral malaria",
        ("confusion or altered consciousness", "severe anemia (extreme pallor)", "respiratory distress", "jaundice", "repeated vomiting"),
    ),
    Timeline(
        "Heart Attack",
        (
            Phase("Warning signs", "Hours to weeks before", "Some patients have prodromal symptoms.", ("unusual fatigue", "mild chest discomfort", "shortness of breath on exertion")),
            Phase("Acute event", "Minutes", "Sudden onset of symptoms.", ("crushing chest pain", "left arm/jaw pain", "cold sweat", "nausea", "shortness of breath")),
            Phase("Golden hour", "0-60 minutes", "Critical window for intervention. Every minute counts.", ("worsening chest pain", "anxiety", "feeling of doom")),
            Phase("Early hospital", "1-12 hours", "PCI or thrombolytics. Arrhythmia monitoring.", ("variable pain", "ECG changes")),
            Phase("Recovery", "Days to weeks", "Cardiac rehabilitation begins.", ("fatigue", "limited exertion tolerance")),
        ),
        "Acute event: minutes. Recovery: 4-12 weeks",
        ("chest pain lasting >15 minutes", "pain radiating to arm, jaw, or back", "sudden breathlessness at rest", "loss of consciousness"),
    ),
    Timeline(
        "Stroke",
        (
            Phase("Onset", "Seconds to minutes", "Sudden neurological deficit. FAST: Face, Arms, Speech, Time.", ("facial drooping", "arm weakness", "speech difficulty")),
            Phase("Golden window", "0-4.5 hours", "tPA (clot-buster) effective within this window.", ("progressing or stable deficits",)),
            Phase("Acute phase", "24-72 hours", "Monitoring for extension, edema, hemorrhagic transformation.", ("neurological fluctuations", "risk of aspiration")),
            Phase("Early recovery", "1-4 weeks", "Brain plasticity. Intensive rehabilitation begins.", ("improving deficits", "fatigue")),
            Phase("Chronic recovery", "3-12 months", "Continued rehab. Plateau typically at 6 months.", ("residual deficits", "depression", "spasticity")),
        ),
        "Acute: hours. Recovery: months to years",
        ("sudden severe headache", "sudden vision loss", "sudden confusion", "sudden weakness on one side"),
    ),
    Timeline(
        "Pneumonia",
        (
            Phase("Onset", "Days 1-3", "Initial infection takes hold.", ("fever", "cough", "malaise")),
            Phase("Progression", "Days 3-5", "Lung consolidation develops.", ("productive cough", "high fever", "chest pain", "shortness of breath")),
            Phase("Peak illness", "Days 5-7", "Highest risk of complications.", ("high fever", "severe cough", "tachypnea", "possible confusion in elderly")),
            Phase("Recovery", "Weeks 1-3", "With antibiotics, improvement in 48-72h.", ("resolving fever", "persistent cough", "fatigue")),
            Phase("Full recovery", "3-6 weeks", "Complete resolution. Chest X-ray may lag behind.", ("mild cough", "reduced stamina")),
        ),
        "2-3 weeks (treated community-acquired)",
        ("SpO2 <92%", "confusion (especially elderly)", "unable to drink fluids", "rapid breathing >30/min"),
    ),
    Timeline(
        "COVID-19",
        (
            Phase("Incubation", "2-14 days (avg 5)", "Virus replicating. Potentially contagious late in this phase."),
            Phase("Early symptoms", "Days 1-5", "Mild upper respiratory and systemic symptoms.", ("fever", "cough", "fatigue", "loss of taste/smell", "sore throat")),
            Phase("Progression (if moderate)", "Days 5-8", "Pulmonary involvement begins in some patients.", ("shortness of breath", "persistent fever", "chest tightness")),
            Phase("Critical (if severe)", "Days 8-12", "Cytokine storm risk. ARDS possible.", ("severe dyspnea", "hypoxemia", "confusion")),
            Phase("Recovery", "2-6 weeks", "Most recover. Long COVID possible.", ("fatigue", "brain fog", "exertional dyspnea")),
        ),
        "Mild: 1-2 weeks. Severe: 3-6 weeks. Long COVID: months",
        ("difficulty breathing at rest", "persistent chest pain", "confusion", "bluish lips/face", "inability to stay awake"),
    ),
    Timeline(
        "Appendicitis",
        (
            Phase("Early", "0-12 hours", "Periumbilical pain, vague discomfort.", ("periumbilical pain", "nausea", "loss of appetite")),
            Phase("Localization", "12-24 hours", "Pain migrates to right lower quadrant.", ("RLQ pain", "fever", "rebound tenderness")),
            Phase("Perforation risk", "24-72 hours", "Appendix at risk of rupture.", ("worsening pain", "high fever", "rigid abdomen")),
            Phase("Perforation (if untreated)", "48-72+ hours", "Peritonitis develops.", ("severe generalized pain", "high fever", "sepsis signs")),
        ),
        "24-72 hours to perforation if untreated",
        ("sudden worsening then brief relief (may indicate perforation)", "high fever >39°C", "rigid abdomen", "rapid heart rate"),
    ),
    Timeline(
        "Dengue Fever",
        (
            Phase("Incubation", "4-10 days", "Virus multiplying after mosquito bite."),
            Phase("Febrile phase", "Days 1-3", "High fever and systemic symptoms.", ("high fever", "severe headache", "retro-orbital pain", "muscle pain", "rash")),
            Phase("Critical phase", "Days 3-7", "Defervescence period — HIGHEST RISK. Plasma leakage possible.", ("dropping fever", "abdominal pain", "persistent vomiting", "bleeding")),
            Phase("Recovery", "Days 7-10", "Fluid reabsorption. Appetite returns.", ("improving appetite", "rash", "itching", "bradycardia")),
        ),
        "7-10 days. Critical phase day 3-7 most dangerous",
        ("abdominal pain or tenderness", "persistent vomiting", "mucosal bleeding", "lethargy/restlessness", "liver enlargement", "rising hematocrit with dropping platelets"),
    ),
)


def get_timelines() -> dict[str, Timeline]:
    """Return the built-in timelines keyed by disease name."""
    return {t.disease: t for t in _TIMELINES}


def find_timeline(name: str) -> Timeline | None:
    """Return the timeline whose disease name contains, or is contained in, ``name``."""
    needle = name.lower()
    for t in _TIMELINES:
        key = t.disease.lower()
        if needle in key or key in needle:
            return t
    return None


def _db_disease(conn: sqlite3.Connection, name: str) -> str | None:
    try:
        row = conn.execute(
            "SELECT name FROM diseases WHERE LOWER(name) LIKE ?",
            (f"%{name.lower()}%",),
        ).fetchone()
    except sqlite3.Error:
        return None
    return None if row is None else row[0]


def _format_timeline(t: Timeline) -> str:
    lines = [
        "",
        "╔══════════════════════════════════════════════════════════╗",
        "║           📅  DISEASE PROGRESSION TIMELINE              ║",
        "╚══════════════════════════════════════════════════════════╝",
        "",
        f"Disease: {t.disease}",
        f"Expected duration: {t.total_duration}",
        "",
    ]
    last = len(t.phases) - 1
    for i, phase in enumerate(t.phases):
        marker = "┌" if i == 0 else "└" if i == last else "├"
        lines.append(f"  {marker} [{phase.timeframe}] {phase.name}")
        lines.append(f"  │   {phase.description}")
        if phase.key_symptoms:
            lines.append(f"  │   Symptoms: {', '.join(phase.key_symptoms)}")
        lines.append("  │")
    if t.warning_signs:
        lines += ["", "⚠️  WARNING SIGNS — seek immediate help if:"]
        lines += [f"  🔴 {sign}" for sign in t.warning_signs]
    lines += ["", "⚠️  Timelines vary by individual. This is a general guide.", ""]
    return "\n".join(lines)


def run(conn: sqlite3.Connection, name: str, as_json: bool = False) -> Timeline | None:
    """Print the timeline for ``name`` and return it, or None if there is none."""
    timeline = find_timeline(name)

    if timeline is not None:
        if as_json:
            print(json.dumps(timeline.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(_format_timeline(timeline))
        return None if timeline is None else timeline

    if as_json:
        print(json.dumps({"error": f"No timeline available for '{name}'"}, ensure_ascii=False))
        return None

    print()
    db_name = _db_disease(conn, name)
    if db_name is not None:
        print(
            f"Disease '{db_name}' exists in the database but no progression "
            "timeline is available yet."
        )
    else:
        print(f"Disease '{name}' not found.")
    print()
    print("Available timelines:")
    for key in sorted(get_timelines()):
        print(f"  • {key}")
    print()
    return None