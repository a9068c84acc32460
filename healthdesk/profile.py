"""Stored user profile (age and sex) kept in the metadata table."""

from __future__ import annotations

import json
import re
import sqlite3
import sys

_VALID_SEXES = ("male", "female")
_AGE_PATTERN = re.compile(r"\+?\d+")


def get_profile_age(conn: sqlite3.Connection) -> int | None:
    """Return the stored age, or None when unset or not a valid age."""
    row = conn.execute(
        "SELECT value FROM metadata WHERE key = 'profile_age'"
    ).fetchone()
    if row is None or row[0] is None:
        return None
    value = str(row[0])
    if not _AGE_PATTERN.fullmatch(value):
        return None
    age = int(value)
    return age if age <= 255 else None


def get_profile_sex(conn: sqlite3.Connection) -> str | None:
    """Return the stored sex, or None when unset."""
    row = conn.execute(
        "SELECT value FROM metadata WHERE key = 'profile_sex'"
    ).fetchone()
    return None if row is None else row[0]


def set_profile(
    conn: sqlite3.Connection, age: int | None = None, sex: str | None = None
) -> None:
    """Store age and/or sex. Age is written before sex is checked.

    Raises ValueError for an age outside 0-255 or a sex other than male/female.
    """
    if age is not None:
        if not 0 <= age <= 255:
            raise ValueError("age must be between 0 and 255")
        conn.execute(
            "INSERT OR REPLACE INTO metadata (key, value) VALUES ('profile_age', ?)",
            (str(age),),
        )
        conn.commit()

    if sex is not None:
        sex = sex.lower()
        if sex not in _VALID_SEXES:
            raise ValueError("sex must be 'male' or 'female'")
        conn.execute(
            "INSERT OR REPLACE INTO metadata (key, value) VALUES ('profile_sex', ?)",
            (sex,),
        )
        conn.commit()


def clear_profile(conn: sqlite3.Connection) -> None:
    """Remove the stored age and sex."""
    conn.execute("DELETE FROM metadata WHERE key IN ('profile_age', 'profile_sex')")
    conn.commit()


def run(
    conn: sqlite3.Connection,
    age: int | None = None,
    sex: str | None = None,
    show: bool = False,
    clear: bool = False,
    as_json: bool = False,
) -> None:
    """Set, show or clear the profile and report the outcome."""
    if clear:
        clear_profile(conn)
        print('{"status": "cleared"}' if as_json else "✅ Profile cleared.")
        return

    try:
        set_profile(conn, age, sex)
    except ValueError as exc:
        if as_json:
            print(json.dumps({"error": str(exc)}))
        else:
            print(f"{str(exc)[0].upper()}{str(exc)[1:]}.", file=sys.stderr)
        return

    if show or (age is None and sex is None):
        current_age = get_profile_age(conn)
        current_sex = get_profile_sex(conn)
        if as_json:
            print(json.dumps({"age": current_age, "sex": current_sex}, indent=2))
        else:
            print("━━━ User Profile ━━━")
            print(f"  Age: {current_age if current_age is not None else 'not set'}")
            print(f"  Sex: {current_sex if current_sex is not None else 'not set'}")
            print()
            print("  Set with: healthdesk profile --age 35 --sex male")
        return

    print('{"status": "updated"}' if as_json else "✅ Profile updated.")