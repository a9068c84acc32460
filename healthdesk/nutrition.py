"""Nutritional deficiency reference and symptom-based assessment."""

from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class NutrientInfo:
    """Reference entry for one nutrient and what its deficiency looks like."""

    nutrient: str
    rda: str
    deficiency_symptoms: tuple[str, ...]
    food_sources: tuple[str, ...]
    risk_groups: tuple[str, ...]
    deficiency_disease: str

    def to_dict(self) -> dict[str, object]:
        return {
            "nutrient": self.nutrient,
            "rda": self.rda,
            "deficiency_symptoms": list(self.deficiency_symptoms),
            "food_sources": list(self.food_sources),
            "risk_groups": list(self.risk_groups),
            "deficiency_disease": self.deficiency_disease,
        }


@dataclass(frozen=True)
class DeficiencyMatch:
    """How well a set of symptoms matches one nutrient's deficiency."""

    nutrient: str
    matched_symptoms: tuple[str, ...]
    total_deficiency_symptoms: int
    match_ratio: float
    deficiency_disease: str
    food_sources: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "nutrient": self.nutrient,
            "matched_symptoms": list(self.matched_symptoms),
            "total_deficiency_symptoms": self.total_deficiency_symptoms,
            "match_ratio": self.match_ratio,
            "deficiency_disease": self.deficiency_disease,
            "food_sources": list(self.food_sources),
        }


_NUTRIENTS: tuple[NutrientInfo, ...] = (
    NutrientInfo(
        nutrient="Vitamin A",
        rda="700-900 mcg RAE/day",
        deficiency_symptoms=("night blindness", "dry eyes", "dry skin", "frequent infections", "delayed growth"),
        food_sources=("liver", "sweet potatoes", "carrots", "spinach", "eggs", "fortified milk"),
        risk_groups=("children in developing countries", "pregnant/lactating women", "malabsorption disorders"),
        deficiency_disease="Xerophthalmia / Night Blindness",
    ),
    NutrientInfo(
        nutrient="Vitamin B1 (Thiamine)",
        rda="1.1-1.2 mg/day",
        deficiency_symptoms=("fatigue", "irritability", "poor memory", "muscle weakness", "leg tingling", "heart failure"),
        food_sources=("whole grains", "pork", "legumes", "seeds", "fortified cereals"),
        risk_groups=("chronic alcoholics", "bariatric surgery patients", "malnutrition"),
        deficiency_disease="Beriberi / Wernicke-Korsakoff Syndrome",
    ),
    NutrientInfo(
        nutrient="Vitamin B3 (Niacin)",
        rda="14-16 mg NE/day",
        deficiency_symptoms=("skin rash in sun-exposed areas", "diarrhea", "confusion", "swollen mouth/tongue"),
        food_sources=("meat", "poultry", "fish", "peanuts", "mushrooms", "fortified grains"),
        risk_groups=("chronic alcoholics", "corn-dependent diets", "malabsorption"),
        deficiency_disease="Pellagra (3 D's: Dermatitis, Diarrhea, Dementia)",
    ),
    NutrientInfo(
        nutrient="Vitamin B12",
        rda="2.4 mcg/day",
        deficiency_symptoms=("fatigue", "weakness", "numbness/tingling", "pale skin", "sore tongue", "memory problems", "mood changes"),
        food_sources=("meat", "fish", "eggs", "dairy", "fortified cereals", "nutritional yeast"),
        risk_groups=("vegans/vegetarians", "elderly", "pernicious anemia", "gastric surgery patients"),
        deficiency_disease="Megaloblastic Anemia / Subacute Combined Degeneration",
    ),
    NutrientInfo(
        nutrient="Vitamin C",
        rda="75-90 mg/day",
        deficiency_symptoms=("bleeding gums", "easy bruising", "slow wound healing", "fatigue", "joint pain", "dry skin"),
        food_sources=("citrus fruits", "strawberries", "bell peppers", "broccoli", "tomatoes", "kiwi"),
        risk_groups=("smokers", "limited fruit/vegetable intake", "malabsorption", "elderly"),
        deficiency_disease="Scurvy",
    ),
    NutrientInfo(
        nutrient="Vitamin D",
        rda="600-800 IU/day (15-20 mcg)",
        deficiency_symptoms=("bone pain", "muscle weakness", "fatigue", "depression", "frequent infections", "slow wound healing"),
        food_sources=("sunlight exposure", "fatty fish", "fortified milk", "egg yolks", "fortified cereals", "mushrooms (UV-exposed)"),
        risk_groups=("limited sun exposure", "dark skin", "elderly", "obese", "malabsorption", "northern latitudes"),
        deficiency_disease="Rickets (children) / Osteomalacia (adults)",
    ),
    NutrientInfo(
        nutrient="Iron",
        rda="8-18 mg/day (higher for menstruating women)",
        deficiency_symptoms=("fatigue", "weakness", "pale skin", "cold hands/feet", "brittle nails", "cravings for non-food items", "dizziness"),
        food_sources=("red meat", "spinach", "lentils", "fortified cereals", "tofu", "dark chocolate"),
        risk_groups=("menstruating women", "pregnant women", "vegetarians", "frequent blood donors", "infants"),
        deficiency_disease="Iron-Deficiency Anemia",
    ),
    NutrientInfo(
        nutrient="Iodine",
        rda="150 mcg/day",
        deficiency_symptoms=("goiter", "fatigue", "weight gain", "cold intolerance", "dry skin", "cognitive impairment"),
        food_sources=("iodized salt", "seaweed", "fish", "dairy", "eggs"),
        risk_groups=("non-iodized salt users", "pregnant women", "regions without iodized salt"),
        deficiency_disease="Goiter / Cretinism (in children)",
    ),
    NutrientInfo(
        nutrient="Zinc",
        rda="8-11 mg/day",
        deficiency_symptoms=("poor wound healing", "hair loss", "diarrhea", "loss of taste", "loss of smell", "frequent infections", "skin lesions"),
        food_sources=("oysters", "red meat", "poultry", "beans", "nuts", "whole grains"),
        risk_groups=("vegetarians", "pregnant/lactating women", "alcoholics", "GI disease patients"),
        deficiency_disease="Acrodermatitis Enteropathica (severe) / Growth Retardation",
    ),
    NutrientInfo(
        nutrient="Folate (Vitamin B9)",
        rda="400 mcg DFE/day (600 in pregnancy)",
        deficiency_symptoms=("fatigue", "mouth sores", "gray hair", "swollen tongue", "poor growth"),
        food_sources=("dark leafy greens", "legumes", "fortified grains", "asparagus", "avocado", "citrus"),
        risk_groups=("pregnant women", "alcoholics", "malabsorption", "certain medications (methotrexate)"),
        deficiency_disease="Megaloblastic Anemia / Neural Tube Defects (in pregnancy)",
    ),
    NutrientInfo(
        nutrient="Calcium",
        rda="1000-1200 mg/day",
        deficiency_symptoms=("muscle cramps", "numbness/tingling in fingers", "brittle nails", "bone fractures", "dental problems"),
        food_sources=("dairy products", "fortified plant milks", "sardines", "leafy greens", "tofu", "almonds"),
        risk_groups=("postmenopausal women", "lactose intolerant", "vegans", "elderly", "vitamin D deficient"),
        deficiency_disease="Osteoporosis / Osteopenia / Hypocalcemia",
    ),
    NutrientInfo(
        nutrient="Magnesium",
        rda="310-420 mg/day",
        deficiency_symptoms=("muscle cramps", "tremors", "insomnia", "anxiety", "irregular heartbeat", "nausea", "fatigue"),
        food_sources=("dark chocolate", "avocados", "nuts", "legumes", "whole grains", "seeds", "bananas"),
        risk_groups=("type 2 diabetes", "GI diseases", "alcoholics", "elderly", "diuretic users"),
        deficiency_disease="Hypomagnesemia / Cardiac Arrhythmias",
    ),
)

_RULE = "━" * 60


def get_nutrients() -> list[NutrientInfo]:
    """Return every nutrient in the reference."""
    return list(_NUTRIENTS)


def search_nutrients(query: str) -> list[NutrientInfo]:
    """Find nutrients whose name, deficiency disease or symptoms contain ``query``."""
    needle = query.lower()
    return [
        n
        for n in _NUTRIENTS
        if needle in n.nutrient.lower()
        or needle in n.deficiency_disease.lower()
        or any(needle in s.lower() for s in n.deficiency_symptoms)
    ]


def _tokenize(symptoms: str) -> list[str]:
    return [word.lower() for part in symptoms.split(",") for word in part.split()]


def assess_symptoms(symptoms: str) -> list[DeficiencyMatch]:
    """Rank nutrient deficiencies by how many of their symptoms match.

    Raises ValueError when no symptoms are given.
    """
    tokens = _tokenize(symptoms)
    if not tokens:
        raise ValueError("No symptoms provided")

    matches = []
    for n in _NUTRIENTS:
        matched = tuple(
            s
            for s in n.deficiency_symptoms
            if any(tok in s.lower() or s.lower() in tok for tok in tokens)
        )
        if matched:
            total = len(n.deficiency_symptoms)
            matches.append(
                DeficiencyMatch(
                    nutrient=n.nutrient,
                    matched_symptoms=matched,
                    total_deficiency_symptoms=total,
                    match_ratio=len(matched) / total,
                    deficiency_disease=n.deficiency_disease,
                    food_sources=n.food_sources,
                )
            )
    matches.sort(key=lambda m: m.match_ratio, reverse=True)
    return matches


def _format_nutrient(n: NutrientInfo) -> str:
    return "\n".join(
        [
            f"  💊 {n.nutrient}",
            f"     RDA: {n.rda}",
            f"     Deficiency: {n.deficiency_disease}",
            f"     Symptoms: {', '.join(n.deficiency_symptoms)}",
            f"     Food sources: {', '.join(n.food_sources)}",
            f"     At-risk groups: {', '.join(n.risk_groups)}",
            "",
        ]
    )


def run(query: str | None = None, as_json: bool = False) -> list[NutrientInfo]:
    """Print nutrients (all, or those matching ``query``) and return them."""
    if query is not None:
        matched = search_nutrients(query)
        if not matched:
            message = f"No nutrients found matching '{query}'"
            print(json.dumps({"error": message}) if as_json else f"✗ {message}")
            return matched
        if as_json:
            print(json.dumps([n.to_dict() for n in matched], indent=2, ensure_ascii=False))
            return matched
        for n in matched:
            print(_format_nutrient(n))
        return matched

    nutrients = get_nutrients()
    if as_json:
        print(json.dumps([n.to_dict() for n in nutrients], indent=2, ensure_ascii=False))
        return nutrients

    print("🥗 Nutritional Deficiency Reference")
    print(_RULE)
    print()
    for n in nutrients:
        print(_format_nutrient(n))
    print(_RULE)
    print("💡 Tip: Use `healthdesk nutrition <query>` to search by nutrient, symptom, or disease.")
    print("   Example: `healthdesk nutrition fatigue` to find deficiencies causing fatigue.")
    return nutrients


def assess(symptoms: str, as_json: bool = False) -> list[DeficiencyMatch]:
    """Print a deficiency assessment for ``symptoms`` and return the matches."""
    try:
        matches = assess_symptoms(symptoms)
    except ValueError:
        if as_json:
            print(json.dumps({"error": "No symptoms provided"}))
        else:
            print("✗ Please provide symptoms to assess.")
        return []

    if as_json:
        print(json.dumps([m.to_dict() for m in matches], indent=2, ensure_ascii=False))
        return matches

    tokens = ", ".join(_tokenize(symptoms))
    if not matches:
        print("✗ No nutritional deficiencies matched your symptoms.")
        print(f"   Symptoms checked: {tokens}")
        return matches

    print("🥗 Nutritional Deficiency Assessment")
    print(_RULE)
    print(f"   Symptoms: {tokens}")
    print()
    for m in matches:
        pct = int(m.match_ratio * 100)
        indicator = "🔴" if pct >= 50 else "🟡" if pct >= 30 else "🟢"
        print(f"  {indicator} {m.nutrient} — {pct}% symptom match")
        print(f"     Matched: {', '.join(m.matched_symptoms)}")
        print(f"     Could indicate: {m.deficiency_disease}")
        print(f"     Eat more: {', '.join(m.food_sources)}")
        print()
    print(_RULE)
    print("⚠️  This is informational only. See a healthcare provider for proper testing.")
    return matches