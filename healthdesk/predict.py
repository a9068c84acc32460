"""Prognosis summary for a disease."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass, field

_OUTLOOK = {
    "high": "Requires prompt medical intervention. Outcomes depend heavily on speed of treatment.",
    "medium": "Generally treatable with appropriate medical care. Most patients recover well.",
}
_OUTLOOK_DEFAULT = "Usually self-limiting or manageable with simple treatment. Good prognosis."

_DURATION = {
    "high": "Days to weeks for acute phase; may require ongoing management",
    "medium": "1-4 weeks with treatment; some conditions are chronic",
}
_DURATION_DEFAULT = "3-14 days for most cases; chronic conditions need ongoing care"

_SPECIFIC_COMPLICATIONS = {
    "Malaria": ["Cerebral malaria", "Severe anemia", "Organ failure"],
    "Pneumonia": ["Pleural effusion", "Sepsis", "Lung abscess"],
    "Heart Attack": ["Heart failure", "Arrhythmias", "Cardiogenic shock"],
    "Stroke": ["Permanent disability", "Aspiration pneumonia", "Recurrent stroke"],
    "Diabetes Type 2": ["Diabetic neuropathy", "Kidney disease", "Retinopathy"],
}
_GENERIC_COMPLICATIONS = {
    "high": [
        "Organ damage if untreated",
        "Secondary infections",
        "Long-term sequelae possible",
    ],
    "medium": ["Chronic progression if untreated", "Recurrence possible"],
}
_GENERIC_COMPLICATIONS_DEFAULT = ["Rare complications with proper care"]

_WARNING_SIGNS = {
    "high": [
        "Difficulty breathing or shortness of breath",
        "Confusion or altered consciousness",
        "Persistent high fever (>39°C / 102°F)",
        "Severe chest or abdominal pain",
    ],
    "medium": [
        "Fever not improving after 48 hours",
        "New or unusual symptoms appearing",
        "Unable to keep fluids down",
    ],
}
_WARNING_SIGNS_DEFAULT = [
    "Symptoms lasting more than 7-10 days",
    "Fever developing in a previously afebrile illness",
]

_MODIFIABLE_KEYWORDS = ("smoking", "obesity", "diet", "alcohol", "exercise", "hygiene", "sedentary")

_LIFESTYLE = {
    "high": "May require significant lifestyle adjustments during and after treatment.",
    "medium": "Moderate lifestyle adjustments may help recovery and prevention.",
}
_LIFESTYLE_DEFAULT = "Minimal long-term lifestyle impact expected with proper management."

_SEVERITY_DISPLAY = {"high": "🔴 High", "medium": "🟡 Medium"}
_IMPACT_ICON = {"high": "🔴", "moderate": "🟡"}


@dataclass(frozen=True)
class Prognosis:
    """Expected course of a disease, with its treatment and risk factors."""

    disease: str
    severity: str
    recovery_outlook: str
    typical_duration: str
    complications: list[str]
    when_to_seek_help: list[str]
    lifestyle_impact: str
    treatment: tuple[str, str] | None = None
    risk_factors: list[tuple[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "disease": self.disease,
            "severity": self.severity,
            "recovery_outlook": self.recovery_outlook,
            "typical_duration": self.typical_duration,
            "complications": list(self.complications),
            "when_to_seek_help": list(self.when_to_seek_help),
            "lifestyle_impact": self.lifestyle_impact,
        }


def build_complications(disease: str, severity: str) -> list[str]:
    """Return known complications for a disease, or generic ones by severity."""
    if disease in _SPECIFIC_COMPLICATIONS:
        return list(_SPECIFIC_COMPLICATIONS[disease])
    return list(_GENERIC_COMPLICATIONS.get(severity, _GENERIC_COMPLICATIONS_DEFAULT))


def build_warning_signs(disease: str, severity: str) -> list[str]:
    """Return the signs that should prompt seeking help, by severity."""
    return ["Symptoms worsening despite treatment", *_WARNING_SIGNS.get(severity, _WARNING_SIGNS_DEFAULT)]


def build_lifestyle_impact(severity: str, risk_factors: list[tuple[str, str]]) -> str:
    """Describe lifestyle impact, naming modifiable high/moderate risk factors."""
    modifiable = [
        factor
        for factor, impact in risk_factors
        if impact in ("high", "moderate")
        and any(keyword in factor for keyword in _MODIFIABLE_KEYWORDS)
    ]
    if modifiable:
        return (
            f"Modifiable risk factors identified: {', '.join(modifiable)}. "
            "Addressing these can significantly improve outcomes."
        )
    return _LIFESTYLE.get(severity, _LIFESTYLE_DEFAULT)


def _find_treatment(conn: sqlite3.Connection, disease: str) -> tuple[str, str] | None:
    row = conn.execute(
        """SELECT protocol, prevention FROM treatments t
           JOIN diseases d ON d.id = t.disease_id WHERE d.name = ?""",
        (disease,),
    ).fetchone()
    if row is None or row[0] is None:
        return None
    return row[0], row[1] or ""


def _risk_factors(conn: sqlite3.Connection, disease: str) -> list[tuple[str, str]]:
    return [
        (factor, impact)
        for factor, impact in conn.execute(
            """SELECT factor, impact FROM risk_factors rf
               JOIN diseases d ON d.id = rf.disease_id WHERE d.name = ?""",
            (disease,),
        )
        if factor is not None and impact is not None
    ]


def predict(conn: sqlite3.Connection, name: str) -> Prognosis:
    """Build the prognosis for the first disease whose name contains ``name``.

    Raises LookupError when no disease matches.
    """
    row = conn.execute(
        "SELECT name, severity, description FROM diseases WHERE name LIKE ?",
        (f"%{name}%",),
    ).fetchone()
    if row is None or row[0] is None or row[1] is None:
        raise LookupError(f"Disease not found: {name}")
    disease, severity, _description = row

    risk_factors = _risk_factors(conn, disease)
    return Prognosis(
        disease=disease,
        severity=severity,
        recovery_outlook=_OUTLOOK.get(severity, _OUTLOOK_DEFAULT),
        typical_duration=_DURATION.get(severity, _DURATION_DEFAULT),
        complications=build_complications(disease, severity),
        when_to_seek_help=build_warning_signs(disease, severity),
        lifestyle_impact=build_lifestyle_impact(severity, risk_factors),
        treatment=_find_treatment(conn, disease),
        risk_factors=risk_factors,
    )


def _format_prognosis(p: Prognosis) -> str:
    lines = [
        "",
        f"🔮 Prognosis: {p.disease}",
        "─" * 50,
        f"  Severity: {_SEVERITY_DISPLAY.get(p.severity, '🟢 Low')}",
        f"  Outlook: {p.recovery_outlook}",
        f"  Typical Duration: {p.typical_duration}",
    ]
    if p.complications:
        lines += ["", "  ⚠️  Possible Complications:"]
        lines += [f"    • {c}" for c in p.complications]
    if p.when_to_seek_help:
        lines += ["", "  🚨 Seek Help If:"]
        lines += [f"    • {w}" for w in p.when_to_seek_help]
    if p.treatment is not None:
        protocol, prevention = p.treatment
        lines += ["", "  💊 Treatment Summary:", f"    {protocol.split('.')[0]}."]
        if prevention:
            lines += ["  🛡️  Prevention:", f"    {prevention.split('.')[0]}."]
    if p.risk_factors:
        lines += ["", "  📊 Key Risk Factors:"]
        lines += [
            f"    {_IMPACT_ICON.get(impact, '🟢')} {factor} ({impact})"
            for factor, impact in p.risk_factors[:5]
        ]
    lines += [
        "",
        "  ⚕️  This is informational only — consult a healthcare provider.",
        f'    Use: healthdesk treatment "{p.disease}" for full protocol',
        "",
    ]
    return "\n".join(lines)


def run(conn: sqlite3.Connection, name: str, as_json: bool = False) -> Prognosis | None:
    """Print the prognosis for ``name`` and return it, or None if not found."""
    try:
        prognosis = predict(conn, name)
    except LookupError:
        if as_json:
            print(json.dumps({"error": f"Disease not found: {name}"}, ensure_ascii=False))
        else:
            print(f"✗ Disease not found: {name}")
            print(f"  Try: healthdesk search {name}")
        return None

    if as_json:
        print(json.dumps(prognosis.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(_format_prognosis(prognosis))
    return prognosis