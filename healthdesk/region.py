"""Find diseases whose symptoms point at a body region."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass, field

_REGIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("head", ("headache", "head", "scalp", "skull", "migraine", "brain", "confusion", "seizure", "dizziness", "vertigo")),
    ("eyes", ("eye", "vision", "blurred", "blind", "floater", "retinal", "pupil", "corneal", "glaucoma", "eyelid", "conjunctiv")),
    ("ears", ("ear", "hearing", "tinnitus", "deaf", "otitis", "auditory", "vertigo")),
    ("mouth", ("mouth", "oral", "tongue", "tooth", "dental", "gum", "jaw", "throat", "swallow", "tonsil")),
    ("neck", ("neck", "stiff neck", "cervical", "thyroid", "lymph node")),
    ("chest", ("chest", "heart", "cardiac", "lung", "breath", "cough", "wheez", "palpitation", "rib")),
    ("abdomen", ("abdomen", "abdominal", "stomach", "liver", "pancrea", "gallbladder", "spleen", "intestin", "bowel", "nausea", "vomit", "diarrhea")),
    ("pelvis", ("pelvis", "pelvic", "bladder", "urin", "kidney", "groin", "genital", "uterus", "ovary", "prostate", "testicular")),
    ("skin", ("skin", "rash", "itch", "blister", "lesion", "sore", "wart", "mole", "hive", "eczema", "psoriasis", "acne", "dermat")),
    ("extremities", ("arm", "leg", "hand", "foot", "finger", "toe", "joint", "knee", "ankle", "wrist", "elbow", "shoulder", "hip", "heel")),
    ("back", ("back pain", "spine", "spinal", "lumbar", "sciatic")),
    ("whole body", ("fever", "fatigue", "weight loss", "chills", "sweating", "malaise")),
)

_SEVERITY_ORDER = {"high": 0, "medium": 1}
_SEVERITY_EMOJI = {"high": "🔴", "medium": "🟡"}
_DISPLAY_LIMIT = 20


@dataclass(frozen=True)
class RegionDisease:
    """A disease with the symptoms that tie it to a region."""

    name: str
    severity: str
    description: str
    key_symptoms: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "severity": self.severity,
            "description": self.description,
            "key_symptoms": list(self.key_symptoms),
        }


def get_region_keywords() -> list[tuple[str, tuple[str, ...]]]:
    """Return (region, symptom keywords) pairs."""
    return list(_REGIONS)


def match_region(query: str) -> tuple[str, tuple[str, ...]]:
    """Return the first region whose name contains, or is contained in, ``query``.

    Raises LookupError for an unknown region.
    """
    needle = query.lower()
    for region, keywords in _REGIONS:
        if needle in region or region in needle:
            return region, keywords
    raise LookupError(f"Unknown body region: {needle}")


def _symptoms_of(conn: sqlite3.Connection, disease_id: int) -> list[str]:
    return [
        row[0]
        for row in conn.execute(
            """SELECT s.name FROM disease_symptoms ds
               JOIN symptoms s ON s.id = ds.symptom_id
               WHERE ds.disease_id = ?""",
            (disease_id,),
        )
        if row[0] is not None
    ]


def diseases_for_region(conn: sqlite3.Connection, region: str) -> list[RegionDisease]:
    """Return diseases with symptoms in ``region``, most severe first.

    Raises LookupError for an unknown region.
    """
    _, keywords = match_region(region)
    rows = conn.execute(
        "SELECT d.id, d.name, d.severity, d.description FROM diseases d ORDER BY d.name"
    ).fetchall()

    matches = []
    for disease_id, name, severity, description in rows:
        if None in (name, severity, description):
            continue
        related = [
            sym
            for sym in _symptoms_of(conn, disease_id)
            if any(kw in sym.lower() for kw in keywords)
        ]
        if related:
            matches.append(RegionDisease(name, severity, description, related))

    matches.sort(key=lambda d: _SEVERITY_ORDER.get(d.severity, 2))
    return matches


def _print_region_list() -> None:
    print("━━━ Body Regions ━━━")
    print()
    for region, keywords in _REGIONS:
        print(f"  🏷️  {region} — keywords: {', '.join(keywords[:3])}")
    print()
    print("Usage: healthdesk region <region>")
    print("Example: healthdesk region chest")


def run(
    conn: sqlite3.Connection, region_input: str | None = None, as_json: bool = False
) -> list[RegionDisease]:
    """Print diseases for a region, or the list of regions, and return the diseases."""
    if region_input is None:
        if as_json:
            print(json.dumps([r for r, _ in _REGIONS], indent=2))
        else:
            _print_region_list()
        return []

    try:
        region_name, _ = match_region(region_input)
    except LookupError:
        query = region_input.lower()
        if as_json:
            print(json.dumps({"error": f"Unknown body region: {query}"}, ensure_ascii=False))
        else:
            print(f"✗ Unknown body region: '{query}'")
            print(f"Available regions: {', '.join(r for r, _ in _REGIONS)}")
        return []

    diseases = diseases_for_region(conn, region_name)

    if as_json:
        payload = {"region": region_name, "diseases": [d.to_dict() for d in diseases]}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return diseases

    print()
    print(f"━━━ Body Region: {region_name.upper()} ({len(diseases)} conditions found)")
    print()
    if not diseases:
        print("  No diseases found for this region.")
        return diseases

    for d in diseases[:_DISPLAY_LIMIT]:
        print(f"  {_SEVERITY_EMOJI.get(d.severity, '🟢')} {d.name} — {d.description}")
        print(f"    Related symptoms: {', '.join(d.key_symptoms)}")
        print()
    if len(diseases) > _DISPLAY_LIMIT:
        print(
            f"  ... and {len(diseases) - _DISPLAY_LIMIT} more. Use --json for complete list."
        )
    return diseases