"""Age- and sex-based preventive health screening recommendations."""

from __future__ import annotations

import json
from dataclasses import dataclass

_ONGOING_AGE = 120
_DISCLAIMER = (
    "General guidelines only. Consult your healthcare provider for "
    "personalized recommendations."
)


@dataclass(frozen=True)
class Screening:
    """One recommended screening test. ``sex`` is None when it applies to all."""

    name: str
    test: str
    start_age: int
    end_age: int
    frequency: str
    sex: str | None
    source: str
    notes: str

    def applies_to_age(self, age: int) -> bool:
        return self.start_age <= age <= self.end_age

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "test": self.test,
            "start_age": self.start_age,
            "end_age": None if self.end_age >= _ONGOING_AGE else self.end_age,
            "frequency": self.frequency,
            "sex": self.sex,
            "source": self.source,
            "notes": self.notes,
        }


_SCREENINGS: tuple[Screening, ...] = (
    Screening("Blood Pressure", "Sphygmomanometry", 18, 120, "Every 1-2 years", None, "WHO/AHA", "More frequent if elevated or risk factors present"),
    Screening("Cholesterol / Lipid Panel", "Fasting lipid profile", 20, 120, "Every 4-6 years", None, "AHA/ACC", "More frequent if on statins or high risk. Start at 9-11 for family history."),
    Screening("Diabetes (Type 2)", "Fasting glucose or HbA1c", 35, 120, "Every 3 years", None, "USPSTF", "Screen earlier if overweight/obese with risk factors. BMI ≥25 triggers earlier screening."),
    Screening("Colorectal Cancer", "Colonoscopy / FIT / Cologuard", 45, 75, "Colonoscopy every 10 years, FIT annually", None, "USPSTF/ACS", "Start at 40 or earlier with family history. Most cost-effective cancer screening."),
    Screening("Breast Cancer", "Mammography", 40, 74, "Every 1-2 years", "female", "USPSTF/ACS", "Earlier and with MRI for BRCA carriers or high-risk. Discuss with provider at 40."),
    Screening("Cervical Cancer", "Pap smear / HPV co-test", 21, 65, "Pap every 3 years (21-29), Pap+HPV every 5 years (30-65)", "female", "USPSTF", "Can stop at 65 if adequate prior screening. HPV vaccination reduces risk."),
    Screening("Prostate Cancer", "PSA blood test ± DRE", 50, 70, "Discuss with provider; individualized decision", "male", "USPSTF/AUA", "Start at 45 for African ancestry or family history. Shared decision-making recommended."),
    Screening("Lung Cancer", "Low-dose CT scan", 50, 80, "Annually", None, "USPSTF", "Only for adults with ≥20 pack-year smoking history who currently smoke or quit within 15 years."),
    Screening("Osteoporosis", "DEXA bone density scan", 65, 120, "Every 2-5 years", "female", "USPSTF", "Men at 70. Earlier for postmenopausal women with risk factors. T-score ≤-2.5 = osteoporosis."),
    Screening("Abdominal Aortic Aneurysm", "Abdominal ultrasound", 65, 75, "One-time screening", "male", "USPSTF", "For men who have ever smoked. Selective screening for women with risk factors."),
    Screening("Hepatitis C", "HCV antibody test", 18, 79, "One-time screening", None, "USPSTF", "All adults 18-79. Additional testing for ongoing risk factors (injection drug use)."),
    Screening("Hepatitis B", "HBsAg, anti-HBs, anti-HBc", 18, 120, "One-time screening", None, "USPSTF", "Screen all adolescents and adults. Vaccinate if susceptible."),
    Screening("HIV", "HIV antigen/antibody test", 15, 65, "At least once; annually if high risk", None, "USPSTF", "All adolescents and adults 15-65. Pregnant women at each pregnancy."),
    Screening("Depression", "PHQ-9 questionnaire", 12, 120, "Annually or at wellness visits", None, "USPSTF", "Screen when adequate systems in place for diagnosis, treatment, and follow-up."),
    Screening("Vision / Eye Exam", "Comprehensive eye exam", 40, 120, "Every 2-4 years (40-54), every 1-3 years (55-64), every 1-2 years (65+)", None, "AAO", "Earlier for diabetes, family history of glaucoma, or African ancestry."),
    Screening("Skin Cancer", "Full-body skin exam", 18, 120, "Annual self-exam; provider exam based on risk", None, "AAD", "Higher frequency for fair skin, many moles, family history, or prior skin cancer."),
    Screening("Dental Health", "Dental exam + cleaning", 1, 120, "Every 6-12 months", None, "ADA", "Includes oral cancer screening. Essential for overall health."),
)


def get_screenings() -> list[Screening]:
    """Return every screening in the reference."""
    return list(_SCREENINGS)


def filter_screenings(age: int | None = None, sex: str | None = None) -> list[Screening]:
    """Return screenings for ``age`` and ``sex``; an age of None or 0 means any age."""
    user_sex = sex.lower() if sex is not None else None
    return [
        s
        for s in _SCREENINGS
        if (not age or s.applies_to_age(age))
        and (user_sex is None or s.sex is None or s.sex == user_sex)
    ]


def screenings_to_json(
    screenings: list[Screening], age: int | None = None, sex: str | None = None
) -> dict[str, object]:
    """Build the JSON document describing a set of screenings."""
    items = [s.to_dict() for s in screenings]
    return {
        "filter_age": age,
        "filter_sex": sex,
        "screening_count": len(items),
        "screenings": items,
        "disclaimer": _DISCLAIMER,
    }


def _format_screening(index: int, s: Screening, age: int) -> str:
    if age:
        priority = "✅" if s.applies_to_age(age) else "⏳"
    else:
        priority = "📋"
    until = "ongoing" if s.end_age >= _ONGOING_AGE else str(s.end_age)
    lines = [
        f"  {priority} {index}. {s.name}",
        f"     Test: {s.test}",
        f"     When: Ages {s.start_age}-{until}",
        f"     How often: {s.frequency}",
    ]
    if s.sex is not None:
        lines.append(f"     For: {s.sex}")
    lines += [f"     Source: {s.source}", f"     ℹ️  {s.notes}", ""]
    return "\n".join(lines)


def run(age: int | None = None, sex: str | None = None, as_json: bool = False) -> list[Screening]:
    """Print the screenings that apply and return them."""
    filtered = filter_screenings(age, sex)

    if as_json:
        print(json.dumps(screenings_to_json(filtered, age, sex), indent=2, ensure_ascii=False))
        return filtered

    print("╔══════════════════════════════════════════════════════════════╗")
    print("║        🏥  HEALTH SCREENING RECOMMENDATIONS                 ║")
    print("╚══════════════════════════════════════════════════════════════╝")
    print()

    if age is not None:
        header = f"  👤 Age: {age}"
        if sex is not None:
            header += f"  |  Sex: {sex}"
        print(header)
        print()

    if not filtered:
        print("  No applicable screenings found for the given criteria.")
        return filtered

    print(f"  {len(filtered)} recommended screenings:\n")
    for index, s in enumerate(filtered, start=1):
        print(_format_screening(index, s, age or 0))

    print("  ⚠️  These are general guidelines. Consult your healthcare")
    print("     provider for personalized screening recommendations.")
    print()
    print("  Source: USPSTF, WHO, ACS, AAO, ADA guidelines")
    return filtered