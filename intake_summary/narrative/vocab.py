"""Enumerated answers posted by the intake form's radio groups.

Each enum's values are the literal strings the form sends. ``parse`` returns
``None`` for a blank answer and ``OTHER`` for any literal the form does not
define, so narrators handle every answer explicitly.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Type, TypeVar

from .fields import normalize

_E = TypeVar("_E", bound="FormChoice")


class FormChoice(str, Enum):
    @classmethod
    def parse(cls: Type[_E], value: Any) -> _E | None:
        text = normalize(value)
        if text is None:
            return None
        for member in cls:
            if member.value == text:
                return member
        return cls["OTHER"]


class TobaccoStatus(FormChoice):
    NEVER = "Never smoked"
    FORMER = "Former"
    CURRENT = "Current"
    OTHER = "__other__"


class AlcoholUse(FormChoice):
    NONE = "None"
    STRUGGLE = "Struggle"
    OTHER = "__other__"


class MarijuanaUse(FormChoice):
    NONE = "None"
    MEDICAL = "Medical"
    OTHER = "__other__"


class OtherDrugUse(FormChoice):
    NO = "No"
    OTHER = "__other__"


class MaritalStatus(FormChoice):
    PARTNER = "Partner"
    OTHER = "__other__"


class ExerciseLevel(FormChoice):
    NOT_MUCH = "Not much"
    YES = "Yes"
    OTHER = "__other__"


class DrinkPeriod(FormChoice):
    DAY = "day"
    OTHER = "__other__"


class RxInsuranceType(FormChoice):
    PRIVATE = "Private"
    OTHER = "__other__"


# Placeholder for a missing half of a paired value.
EM_DASH = "—"

__all__ = [
    "FormChoice",
    "TobaccoStatus",
    "AlcoholUse",
    "MarijuanaUse",
    "OtherDrugUse",
    "MaritalStatus",
    "ExerciseLevel",
    "DrinkPeriod",
    "RxInsuranceType",
    "EM_DASH",
]
