"""Past medical history: checked conditions, free text, extra rows, surgeries."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

from .catalog import CONDITION_CATALOG, FREE_TEXT_CONDITION_FIELDS
from .fields import FieldReader
from .groups import OTHER_CONDITION_GROUP, SURGERY_GROUP, IndexedRecord
from .sections import render_block

PMH_TITLE = "PAST MEDICAL HISTORY"


def _diabetes(reader: FieldReader) -> List[str]:
    parts: List[str] = []
    diabetes_type = reader.value("diabetesType")
    if diabetes_type:
        parts.append(diabetes_type)
    if reader.is_yes("diabetesInsulin"):
        parts.append("on insulin")
    age = reader.value("diabetesAge")
    if age:
        parts.append(f"dx age {age}")
    return parts


def _sleep_apnea(reader: FieldReader) -> List[str]:
    parts: List[str] = []
    if reader.is_yes("sleepApneaCpap"):
        parts.append("on CPAP")
    if reader.is_yes("sleepApneaNoTolerate"):
        parts.append("didn't tolerate CPAP")
    return parts


def _hepatitis_c(reader: FieldReader) -> List[str]:
    return ["treated" if reader.is_yes("hepCTreated") else "untreated"]


def _menopause(reader: FieldReader) -> List[str]:
    age = reader.value("menopausalAge")
    return [f"age {age}"] if age else []


CONDITION_MODIFIERS: Dict[str, Callable[[FieldReader], List[str]]] = {
    "cond_diabetes": _diabetes,
    "cond_sleep_apnea": _sleep_apnea,
    "cond_hep_c": _hepatitis_c,
    "cond_menopausal": _menopause,
}


def checked_conditions(
    reader: FieldReader,
    catalog: Sequence[Tuple[str, str]] = CONDITION_CATALOG,
) -> List[str]:
    items: List[str] = []
    for key, label in catalog:
        if not reader.is_yes(key):
            continue
        modifier = CONDITION_MODIFIERS.get(key)
        parts = modifier(reader) if modifier else []
        items.append(f"{label} ({', '.join(parts)})" if parts else label)
    return items


def free_text_conditions(reader: FieldReader) -> List[str]:
    return [text for text in map(reader.value, FREE_TEXT_CONDITION_FIELDS) if text]


def format_surgery(record: IndexedRecord) -> str | None:
    details = record.get("details")
    year = record.get("year")
    if details and year:
        return f"{details} ({year})"
    return details or year


def past_medical_history_items(reader: FieldReader) -> List[str]:
    """Catalog entries, free-text others, extra condition rows, then surgeries."""
    items = checked_conditions(reader)
    items.extend(free_text_conditions(reader))
    items.extend(
        record.get("details") or ""
        for record in OTHER_CONDITION_GROUP.collect(reader.data)
    )
    items.extend(
        format_surgery(record) or "" for record in SURGERY_GROUP.collect(reader.data)
    )
    return [item for item in items if item]


def render_past_medical_history(reader: FieldReader) -> str:
    return render_block(PMH_TITLE, (f"{item}." for item in past_medical_history_items(reader)))


__all__ = [
    "PMH_TITLE",
    "CONDITION_MODIFIERS",
    "checked_conditions",
    "free_text_conditions",
    "format_surgery",
    "past_medical_history_items",
    "render_past_medical_history",
]
