"""Reference data and lookup for common medications."""

from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class MedicationInfo:
    """Reference entry for one medication."""

    name: str
    drug_class: str
    uses: str
    dosage: str
    side_effects: str
    contraindications: str
    interactions: str
    pregnancy_category: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "class": self.drug_class,
            "uses": self.uses,
            "dosage": self.dosage,
            "side_effects": self.side_effects,
            "contraindications": self.contraindications,
            "interactions": self.interactions,
            "pregnancy_category": self.pregnancy_category,
        }


_MEDICATIONS: tuple[MedicationInfo, ...] = (
    MedicationInfo(
        name="Paracetamol (Acetaminophen)",
        drug_class="Analgesic / Antipyretic",
        uses="Pain relief, fever reduction. First-line for mild-moderate pain.",
        dosage="Adults: 500-1000 mg every 4-6h, max 4g/day. Children: 10-15 mg/kg every 4-6h.",
        side_effects="Rare at therapeutic doses. Hepatotoxicity in overdose. Allergic reactions (rare).",
        contraindications="Severe hepatic impairment. Active liver disease. Known hypersensitivity.",
        interactions="Warfarin (increased INR). Alcohol (hepatotoxicity risk). Carbamazepine. Isoniazid.",
        pregnancy_category="Generally safe in pregnancy (all trimesters).",
    ),
    MedicationInfo(
        name="Ibuprofen",
        drug_class="NSAID (Non-Steroidal Anti-Inflammatory Drug)",
        uses="Pain, inflammation, fever. Arthritis, headache, menstrual cramps, dental pain.",
        dosage="Adults: 200-400 mg every 4-6h, max 1200 mg/day (OTC) or 2400 mg/day (Rx). Children >6mo: 5-10 mg/kg every 6-8h.",
        side_effects="GI upset, ulcers, bleeding. Renal impairment. Cardiovascular risk with prolonged use. Allergic reactions.",
        contraindications="Active GI bleeding. Severe renal/hepatic impairment. Third trimester pregnancy. Aspirin-sensitive asthma.",
        interactions="Anticoagulants (bleeding risk). ACE inhibitors (reduced effect). Lithium (increased levels). SSRIs (bleeding risk). Methotrexate.",
        pregnancy_category="Avoid in third trimester. Use with caution in first/second trimester.",
    ),
    MedicationInfo(
        name="Amoxicillin",
        drug_class="Antibiotic (Penicillin)",
        uses="Bacterial infections: otitis media, sinusitis, pneumonia, UTI, H. pylori (combo), dental infections.",
        dosage="Adults: 250-500 mg every 8h or 500-875 mg every 12h. Children: 25-50 mg/kg/day divided every 8h.",
        side_effects="Diarrhea, nausea, rash. Allergic reactions (including anaphylaxis). C. difficile colitis.",
        contraindications="Penicillin allergy. History of amoxicillin-associated cholestatic jaundice.",
        interactions="Methotrexate (increased toxicity). Warfarin (increased INR). Oral contraceptives (reduced efficacy debated).",
        pregnancy_category="Generally safe in pregnancy (Category B).",
    ),
    MedicationInfo(
        name="Metformin",
        drug_class="Biguanide (Antidiabetic)",
        uses="Type 2 diabetes mellitus (first-line). Polycystic ovary syndrome. Prediabetes prevention.",
        dosage="Start 500 mg once or twice daily with meals. Titrate to 1000 mg twice daily. Max 2550 mg/day.",
        side_effects="GI upset (nausea, diarrhea, bloating — usually transient). Lactic acidosis (rare). Vitamin B12 deficiency with long-term use.",
        contraindications="Severe renal impairment (eGFR <30). Acute/chronic metabolic acidosis. Before iodinated contrast (hold 48h).",
        interactions="Alcohol (lactic acidosis risk). Iodinated contrast agents. Carbonic anhydrase inhibitors.",
        pregnancy_category="Generally used in gestational diabetes (off-label). Insulin preferred.",
    ),
    MedicationInfo(
        name="Omeprazole",
        drug_class="Proton Pump Inhibitor (PPI)",
        uses="GERD, peptic ulcers, H. pylori eradication (combo), Zollinger-Ellison syndrome, NSAID gastroprotection.",
        dosage="Adults: 20-40 mg once daily before breakfast. Ulcer healing: 4-8 weeks. H. pylori: 20 mg twice daily for 14 days.",
        side_effects="Headache, nausea, diarrhea. Long-term: fracture risk, C. difficile, hypomagnesemia, vitamin B12 deficiency.",
        contraindications="Known hypersensitivity. Rilpivirine co-administration.",
        interactions="Clopidogrel (reduced activation — avoid). Methotrexate (increased levels). Ketoconazole, itraconazole (reduced absorption).",
        pregnancy_category="Use if clearly needed. Limited data but generally considered safe.",
    ),
    MedicationInfo(
        name="Salbutamol (Albuterol)",
        drug_class="Short-Acting Beta-2 Agonist (SABA)",
        uses="Acute bronchospasm, asthma rescue, exercise-induced bronchospasm, COPD exacerbations.",
        dosage="Inhaler: 1-2 puffs every 4-6h as needed. Nebulizer: 2.5-5 mg every 20 min for acute attacks (up to 3 doses).",
        side_effects="Tremor, tachycardia, palpitations, headache, hypokalemia. Paradoxical bronchospasm (rare).",
        contraindications="Known hypersensitivity. Use with caution in cardiovascular disease, hyperthyroidism.",
        interactions="Beta-blockers (antagonism). MAOIs. Diuretics (hypokalemia). Digoxin.",
        pregnancy_category="Generally safe. Use when benefit outweighs risk.",
    ),
    MedicationInfo(
        name="Aspirin (Acetylsalicylic Acid)",
        drug_class="NSAID / Antiplatelet",
        uses="Pain, fever, inflammation. Low-dose: cardiovascular prophylaxis, post-MI, post-stroke. Kawasaki disease.",
        dosage="Analgesic: 300-600 mg every 4-6h, max 4g/day. Antiplatelet: 75-100 mg daily. Kawasaki: 80-100 mg/kg/day acute phase.",
        side_effects="GI bleeding, ulcers. Tinnitus at high doses. Reye syndrome in children with viral illness. Bleeding risk.",
        contraindications="Children <16 with viral illness (Reye syndrome). Active GI bleeding. Hemophilia. Third trimester pregnancy.",
        interactions="Anticoagulants (major bleeding risk). Methotrexate. SSRIs. Other NSAIDs. ACE inhibitors.",
        pregnancy_category="Low-dose may be used for preeclampsia prevention. Avoid in third trimester.",
    ),
    MedicationInfo(
        name="Metoprolol",
        drug_class="Beta-Blocker (Beta-1 Selective)",
        uses="Hypertension, angina, heart failure, post-MI, rate control in atrial fibrillation, migraine prophylaxis.",
        dosage="Hypertension: start 25-50 mg twice daily (tartrate) or 25-100 mg daily (succinate). Max 400 mg/day. Heart failure: start 12.5-25 mg daily, titrate slowly.",
        side_effects="Bradycardia, fatigue, dizziness, cold extremities, depression, bronchospasm, weight gain.",
        contraindications="Severe bradycardia. Heart block (2nd/3rd degree). Decompensated heart failure. Cardiogenic shock.",
        interactions="Calcium channel blockers (additive bradycardia). Digoxin. Clonidine (rebound hypertension). CYP2D6 inhibitors (increased levels).",
        pregnancy_category="Use with caution. May cause fetal bradycardia and growth restriction.",
    ),
    MedicationInfo(
        name="Prednisolone",
        drug_class="Corticosteroid",
        uses="Inflammation, autoimmune disorders, asthma exacerbations, croup, allergic reactions, organ transplant rejection.",
        dosage="Variable by condition. Asthma flare: 40-60 mg/day for 5-7 days. Autoimmune: 0.5-1 mg/kg/day, taper gradually. Children croup: 1-2 mg/kg single dose.",
        side_effects="Short-term: mood changes, insomnia, appetite increase, hyperglycemia. Long-term: osteoporosis, Cushing's, adrenal suppression, immunosuppression, cataracts.",
        contraindications="Systemic fungal infections. Live vaccines during high-dose therapy. Avoid abrupt discontinuation after prolonged use.",
        interactions="NSAIDs (GI bleeding risk). Diabetes medications (hyperglycemia). Warfarin (altered effect). CYP3A4 inhibitors/inducers.",
        pregnancy_category="Use when benefit outweighs risk. Minimal placental transfer of prednisolone vs prednisone.",
    ),
    MedicationInfo(
        name="Ciprofloxacin",
        drug_class="Antibiotic (Fluoroquinolone)",
        uses="UTI, pyelonephritis, prostatitis, GI infections, bone/joint infections, anthrax prophylaxis.",
        dosage="Adults: 250-750 mg every 12h. UTI uncomplicated: 250 mg every 12h for 3 days. Pyelonephritis: 500 mg every 12h for 7 days.",
        side_effects="Tendon rupture, peripheral neuropathy, QT prolongation, C. difficile. GI upset, dizziness, photosensitivity.",
        contraindications="Children <18 (except specific indications). Concurrent tizanidine. History of tendon disorders with fluoroquinolones.",
        interactions="Antacids, iron, calcium (reduced absorption — space 2h). Warfarin (increased INR). Theophylline (increased levels). QT-prolonging drugs.",
        pregnancy_category="Avoid in pregnancy and breastfeeding (cartilage toxicity risk).",
    ),
    MedicationInfo(
        name="Diazepam",
        drug_class="Benzodiazepine",
        uses="Anxiety, seizures (status epilepticus), muscle spasm, alcohol withdrawal, procedural sedation.",
        dosage="Anxiety: 2-10 mg 2-4 times daily. Seizures: 5-10 mg IV (repeat once). Muscle spasm: 2-10 mg 3-4 times daily. Use lowest effective dose, shortest duration.",
        side_effects="Drowsiness, confusion, ataxia, respiratory depression, dependence, paradoxical agitation (elderly/children).",
        contraindications="Severe respiratory insufficiency. Sleep apnea. Myasthenia gravis. Acute narrow-angle glaucoma.",
        interactions="Opioids (respiratory depression — avoid). Alcohol. Other CNS depressants. CYP3A4 inhibitors (increased levels).",
        pregnancy_category="Avoid. Risk of neonatal withdrawal, floppy infant syndrome. Cleft palate risk in first trimester.",
    ),
    MedicationInfo(
        name="Oral Rehydration Salts (ORS)",
        drug_class="Electrolyte Solution",
        uses="Dehydration from diarrhea, vomiting, cholera. WHO-recommended for all ages. Cornerstone of diarrheal disease treatment.",
        dosage="WHO formula: dissolve 1 packet in 1L clean water. Mild dehydration: 50-100 mL/kg over 4h. Maintenance: replace ongoing losses. Give small frequent sips if vomiting.",
        side_effects="Vomiting if given too fast. Hypernatremia if prepared incorrectly (too concentrated).",
        contraindications="Severe dehydration requiring IV fluids. Ileus. Persistent vomiting unresponsive to small sips.",
        interactions="None significant. Can be given with zinc supplementation (recommended by WHO for children).",
        pregnancy_category="Safe in pregnancy and breastfeeding.",
    ),
)


def get_medications() -> list[MedicationInfo]:
    """Return every medication in the reference."""
    return list(_MEDICATIONS)


def search_medications(query: str) -> list[MedicationInfo]:
    """Find medications by name, class or use, falling back to single words."""
    meds = get_medications()
    needle = query.lower()

    matches = [
        m
        for m in meds
        if needle in m.name.lower()
        or needle in m.drug_class.lower()
        or needle in m.uses.lower()
    ]
    if matches:
        return matches

    words = [w for w in needle.split() if len(w) >= 3]
    return [
        m
        for m in meds
        if any(w in m.name.lower() or w in m.drug_class.lower() for w in words)
    ]


def format_medication(med: MedicationInfo) -> str:
    """Render a medication as a readable text block."""
    sections = [
        ("Uses:", med.uses),
        ("Dosage:", med.dosage),
        ("Side Effects:", med.side_effects),
        ("Contraindications:", med.contraindications),
        ("Drug Interactions:", med.interactions),
        ("Pregnancy:", med.pregnancy_category),
    ]
    lines = ["", f"💊 {med.name}", "═" * 60, f"  Class: {med.drug_class}", ""]
    for title, body in sections:
        lines.extend([f"  {title}", f"  {body}", ""])
    lines.append(
        "  ⚠️  Always consult a healthcare professional before taking any medication."
    )
    lines.append("")
    return "\n".join(lines)


def run(name: str, as_json: bool = False) -> list[MedicationInfo]:
    """Print the medications matching ``name`` and return them."""
    matches = search_medications(name)

    if as_json:
        print(json.dumps([m.to_dict() for m in matches], indent=2, ensure_ascii=False))
        return matches

    if not matches:
        print(f"No medication found matching '{name}'.")
        print("\nAvailable medications:")
        for m in get_medications():
            print(f"  • {m.name}")
        return matches

    for m in matches:
        print(format_medication(m))
    return matches


def run_list(as_json: bool = False) -> list[str]:
    """Print the names of all medications and return them."""
    meds = get_medications()
    names = [m.name for m in meds]
    if as_json:
        print(json.dumps(names, indent=2, ensure_ascii=False))
        return names

    print("💊 Medication Reference")
    print("═" * 50)
    print()
    for m in meds:
        print(f"  • {m.name} — {m.drug_class}")
    print()
    print("Use 'healthdesk medication <name>' for detailed info.")
    return names