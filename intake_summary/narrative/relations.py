"""Allergy and family history sections built from repeated form rows."""

from __future__ import annotations

from typing import List

from .fields import FieldReader
from .groups import ALLERGY_GROUP, FAMILY_GROUP, IndexedRecord
from .sections import render_block
from .vocab import EM_DASH

ALLERGY_TITLE = "ALLERGIES"
FAMILY_TITLE = "FAMILY HISTORY"
NO_KNOWN_ALLERGIES = "No Adverse Reactions known"
ADOPTED_LINE = "Adopted (biological relatives only)."

_DECEASED_MARKERS = ("passed", "died")


def allergy_lines(reader: FieldReader) -> List[str]:
    # The "no known allergies" box wins over any rows left on the form.
    if reader.is_yes("noAllergies"):
        return [NO_KNOWN_ALLERGIES]
    return [
        f"{record.get('allergen') or EM_DASH} - {record.get('reaction') or EM_DASH}"
        for record in ALLERGY_GROUP.collect(reader.data)
    ]


def render_allergies(reader: FieldReader) -> str:
    return render_block(ALLERGY_TITLE, allergy_lines(reader))


def family_member_line(record: IndexedRecord) -> str:
    status = record.get("status") or ""
    age = record.get("age")
    deceased = any(marker in status.lower() for marker in _DECEASED_MARKERS)
    if age:
        phrase = f"{'died at' if deceased else 'living at'} {age}"
    else:
        phrase = status or EM_DASH
    relation = record.get("relation") or EM_DASH
    conditions = record.get("conditions") or ""
    # No trailing space after the colon when conditions are blank.
    return f"{relation}, {phrase}: {conditions}".rstrip()


def family_history_lines(reader: FieldReader) -> List[str]:
    lines = [family_member_line(record) for record in FAMILY_GROUP.collect(reader.data)]
    if reader.is_yes("adopted"):
        lines.insert(0, ADOPTED_LINE)
    return lines


def render_family_history(reader: FieldReader) -> str:
    return render_block(FAMILY_TITLE, family_history_lines(reader))


__all__ = [
    "ALLERGY_TITLE",
    "FAMILY_TITLE",
    "NO_KNOWN_ALLERGIES",
    "ADOPTED_LINE",
    "allergy_lines",
    "render_allergies",
    "family_member_line",
    "family_history_lines",
    "render_family_history",
]
