"""Disease risk assessment from user-supplied risk factors."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass, field

_IMPACT_SCORE = {"high": 3.0, "moderate": 2.0}
_SEVERITY_EMOJI = {"high": "🔴", "medium": "🟡"}
_MIN_SCORE = 5.0
_MAX_SCORE = 95.0
_DISPLAY_LIMIT = 15


@dataclass(frozen=True)
class MatchedFactor:
    """A risk factor of a disease that matched the user's input."""

    factor: str
    impact: str

    def to_dict(self) -> dict[str, str]:
        return {"factor": self.factor, "impact": self.impact}


@dataclass(frozen=True)
class RiskResult:
    """A disease with the factors that matched and its risk score (5–95)."""

    disease: str
    severity: str
    matched_factors: list[MatchedFactor] = field(default_factory=list)
    risk_score: float = 0.0

    def to_dict(self) -> dict[str, object]:
        return {
            "disease": self.disease,
            "severity": self.severity,
            "matched_factors": [m.to_dict() for m in self.matched_factors],
            "risk_score": self.risk_score,
        }


def parse_factors(text: str) -> list[str]:
    """Split comma-separated factors into trimmed, lower-case entries."""
    return [part.strip().lower() for part in text.split(",") if part.strip()]


def _long_words(text: str) -> list[str]:
    return [w for w in text.split() if len(w) >= 4]


def _factor_matches(factor: str, wanted: list[str]) -> bool:
    factor = factor.lower()
    return any(
        w in factor
        or factor in w
        or any(word in w for word in _long_words(factor))
        or any(word in factor for word in _long_words(w))
        for w in wanted
    )


def assess_risk(conn: sqlite3.Connection, factors: list[str]) -> list[RiskResult]:
    """Score every disease against ``factors``, highest risk first."""
    if not factors:
        return []

    diseases = conn.execute(
        "SELECT d.id, d.name, d.severity FROM diseases d ORDER BY d.name"
    ).fetchall()

    results = []
    for disease_id, name, severity in diseases:
        if name is None or severity is None:
            continue
        risk_factors = [
            (factor, impact)
            for factor, impact in conn.execute(
                "SELECT factor, impact FROM risk_factors WHERE disease_id = ?", (disease_id,)
            )
            if factor is not None and impact is not None
        ]
        if not risk_factors:
            continue

        matched = [
            MatchedFactor(factor, impact)
            for factor, impact in risk_factors
            if _factor_matches(factor, factors)
        ]
        if not matched:
            continue

        score = sum(_IMPACT_SCORE.get(m.impact, 1.0) for m in matched)
        normalized = score / (len(risk_factors) * 3.0) * 100.0
        results.append(
            RiskResult(name, severity, matched, min(max(normalized, _MIN_SCORE), _MAX_SCORE))
        )

    results.sort(key=lambda r: r.risk_score, reverse=True)
    return results


def _impact_label(impact: str) -> str:
    return f"[{impact}]"


def run(conn: sqlite3.Connection, text: str, as_json: bool = False) -> list[RiskResult]:
    """Print the risk assessment for comma-separated factors and return it."""
    factors = parse_factors(text)
    if not factors:
        if as_json:
            print("[]")
        else:
            print("Please provide at least one risk factor (comma-separated).")
            print('Example: healthdesk risk "smoking, obesity, age > 50"')
        return []

    results = assess_risk(conn, factors)

    if as_json:
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
        return results

    if not results:
        print("No diseases matched the given risk factors.")
        print("Try broader terms like: smoking, obesity, diabetes, immunosuppression")
        return results

    print("━━━ Risk Assessment ━━━")
    print(f"  Factors: {', '.join(factors)}")
    print()
    for rank, r in enumerate(results[:_DISPLAY_LIMIT], start=1):
        emoji = _SEVERITY_EMOJI.get(r.severity, "🟢")
        print(f"{rank}. {emoji} {r.disease} — risk score: {r.risk_score:.0f}%")
        for m in r.matched_factors:
            print(f"      ⚡ {m.factor} {_impact_label(m.impact)}")
        print()

    if len(results) > _DISPLAY_LIMIT:
        print(
            f"  ... and {len(results) - _DISPLAY_LIMIT} more (use --json for full output)"
        )

    print("━━━━━━━━━━━━━━━━━━━━━━━━")
    print("⚠️  Risk assessment is informational only. Consult a healthcare provider.")
    print()
    return results