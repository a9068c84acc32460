# healthdesk

An offline medical reference library. It bundles curated reference tables
(medications, nutrients, screenings, vaccines, onset speeds, disease
timelines, body regions) and query functions that work over a SQLite disease
database you supply.

It uses only the Python standard library; there are no runtime dependencies.

> This package provides general information only. It is not a diagnosis and
> does not replace a healthcare professional.

## Installation

```
pip install healthdesk
```

To run the test suite:

```
pip install "healthdesk[test]"
pytest
```

## Built-in reference data

These modules need no database.

```python
from healthdesk import medication, nutrition, screen, vaccine, timeline

# Medications: search by name, drug class or use (falls back to single words)
for med in medication.search_medications("nsaid"):
    print(medication.format_medication(med))

# Nutrient deficiencies ranked by how many of their symptoms match
for match in nutrition.assess_symptoms("fatigue, pale skin, brittle nails"):
    print(match.nutrient, match.match_ratio)

# Screenings for a 52-year-old woman (age None or 0 means any age)
for item in screen.filter_screenings(52, "female"):
    print(item.name, item.frequency)

# Vaccines for an age group (plus those for "all"), or by name search
print(vaccine.filter_vaccines("infants", None))
print(vaccine.filter_vaccines(None, "polio"))

# Disease progression timelines
print(timeline.find_timeline("dengue"))
```

`nutrition.assess_symptoms` raises `ValueError` when given no symptoms.

## Working with a disease database

The database modules take an open `sqlite3.Connection` holding these tables:

| table              | columns used                                                      |
|--------------------|-------------------------------------------------------------------|
| `diseases`         | `id`, `name`, `severity`, `category`, `contagious`, `description` |
| `symptoms`         | `id`, `name`                                                      |
| `disease_symptoms` | `disease_id`, `symptom_id`, `weight`, `is_primary`                |
| `treatments`       | `disease_id`, `protocol`, `source`, `first_aid`, `prevention`     |
| `risk_factors`     | `disease_id`, `factor`, `impact`                                  |
| `metadata`         | `key`, `value`                                                    |

Severity is `low`, `medium` or `high`; risk factor impact is `low`,
`moderate` or `high`. The `metadata` keys read are `seed_version`,
`profile_age` and `profile_sex`.

```python
import sqlite3
from healthdesk import onset, predict, profile, risk, search, similar, stats, validate

conn = sqlite3.connect("health.db")

result = search.search(conn, "fever")
print(result.symptoms, result.diseases)

speed = onset.OnsetSpeed.parse("sudden")          # ValueError if unknown
print(onset.diseases_by_onset(conn, speed, "headache"))

print(predict.predict(conn, "malaria"))          # LookupError if not found

print(similar.find_similar(conn, "malaria", 5))  # Jaccard symptom overlap

for r in risk.assess_risk(conn, risk.parse_factors("smoking, obesity")):
    print(r.disease, r.risk_score)

profile.set_profile(conn, 35, "male")            # ValueError on bad input; commits
print(profile.get_profile_age(conn), profile.get_profile_sex(conn))
profile.clear_profile(conn)

print(stats.collect_stats(conn))
for issue in validate.validate_database(conn):
    print(issue.severity, issue.entity, issue.message)
```

Other database queries: `symptom_map.build_symptom_map`,
`region.match_region` and `region.diseases_for_region`,
`severity_guide.build_guide`, `prevalence.prevalence_entries` and
`treatment.find_treatment`.

## Printed reports

Each module has a `run(...)` function that prints a formatted text report and
returns the data it printed. All of them except `stats.run` take an `as_json`
argument that prints JSON instead. `medication.run_list` prints the
medication names.

## What this package does not do

- It ships no disease data and does not create or fill the database; the
  tables above must already exist and hold data.
- It has no command-line program. The `run` functions are called from
  Python; the usage hints they print name commands that this package does
  not install.
- It does not score symptoms into a ranked diagnosis.