"""Indexed record groups (``<prefix>_<index>_<field>`` keys).

The intake form lets patients add any number of allergies, relatives,
surgeries and extra conditions. Each added row posts its fields under a shared
prefix and a numeric index, e.g. ``allergy_3_allergen`` and
``allergy_3_reaction``. Rows can be removed client-side, so indices are
neither contiguous nor ordered in the submitted mapping.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence

from .fields import normalize


@dataclass(frozen=True, slots=True)
class IndexedRecord:
    index: int
    values: Dict[str, str | None] = field(default_factory=dict)

    def get(self, name: str) -> str | None:
        return self.values.get(name)


@dataclass(frozen=True, slots=True)
class RecordGroup:
    """A named repeated group and the sibling fields of each record."""

    prefix: str
    fields: tuple[str, ...]

    def key_pattern(self) -> re.Pattern[str]:
        suffixes = "|".join(re.escape(name) for name in self.fields)
        return re.compile(rf"^{re.escape(self.prefix)}_(\d+)_(?:{suffixes})$", re.ASCII)

    def collect(self, submission: Mapping[str, Any]) -> List[IndexedRecord]:
        return collect_group(submission, self.prefix, self.fields)


ALLERGY_GROUP = RecordGroup("allergy", ("allergen", "reaction"))
FAMILY_GROUP = RecordGroup("family", ("relation", "status", "age", "conditions"))
SURGERY_GROUP = RecordGroup("surgery", ("details", "year"))
OTHER_CONDITION_GROUP = RecordGroup("other_condition", ("details",))


def discover_indices(
    submission: Mapping[str, Any], prefix: str, fields: Sequence[str]
) -> List[int]:
    """Return the distinct indices used by ``prefix`` keys, ascending."""
    pattern = RecordGroup(prefix, tuple(fields)).key_pattern()
    found: set[int] = set()
    for key in submission.keys():
        match = pattern.match(str(key))
        if match:
            found.add(int(match.group(1)))
    return sorted(found)


def collect_group(
    submission: Mapping[str, Any] | None,
    prefix: str,
    fields: Sequence[str],
) -> List[IndexedRecord]:
    """Resolve every record of a repeated group in ascending index order.

    Records whose sibling fields are all blank are dropped.
    """
    if not submission or not fields:
        return []
    records: List[IndexedRecord] = []
    for index in discover_indices(submission, prefix, fields):
        values = {
            name: normalize(submission.get(f"{prefix}_{index}_{name}"))
            for name in fields
        }
        if any(value is not None for value in values.values()):
            records.append(IndexedRecord(index=index, values=values))
    return records


__all__ = [
    "IndexedRecord",
    "RecordGroup",
    "ALLERGY_GROUP",
    "FAMILY_GROUP",
    "SURGERY_GROUP",
    "OTHER_CONDITION_GROUP",
    "collect_group",
    "discover_indices",
]
