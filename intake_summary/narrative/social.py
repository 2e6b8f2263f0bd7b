"""Social history sentences.

Each facet reads its own fields and returns one sentence or ``None``; the
section keeps the sentences in facet order.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from .fields import FieldReader, plural
from .sections import render_block
from .vocab import (
    EM_DASH,
    AlcoholUse,
    DrinkPeriod,
    ExerciseLevel,
    MaritalStatus,
    MarijuanaUse,
    OtherDrugUse,
    RxInsuranceType,
    TobaccoStatus,
)

SOCIAL_TITLE = "SOCIAL HISTORY"

Facet = Callable[[FieldReader], Optional[str]]


def _present(*values: str | None) -> List[str]:
    return [value for value in values if value]


def occupation(reader: FieldReader) -> str | None:
    job = reader.value("occupation")
    if not job:
        return None
    status = reader.value("occupationStatus")
    return f"{job} ({status})." if status else f"{job}."


def residence(reader: FieldReader) -> str | None:
    place = (reader.value("residence") or "").lower()
    lives_with = reader.value("livesWith")
    if not place and not lives_with:
        return None
    if lives_with:
        return f"Lives in {place or EM_DASH} with {lives_with}."
    return f"Lives in {place}."


def marital_status(reader: FieldReader) -> str | None:
    status = MaritalStatus.parse(reader.raw("maritalStatus"))
    if status is None:
        return None
    if status is MaritalStatus.PARTNER:
        return "Has a partner."
    return f"{reader.value('maritalStatus')}."


def education(reader: FieldReader) -> str | None:
    text = reader.value("education") or ""
    if reader.is_yes("student"):
        text = f"{text} (student)" if text else "Student"
    if reader.is_yes("readingDifficulties"):
        text = f"{text} (reading difficulties)" if text else "Reading difficulties"
    return f"Education: {text}." if text else None


def _smoking_history(packs: str, years: str) -> str:
    return (
        f"{packs} {plural(packs, 'pack', 'packs')} a day "
        f"for {years} {plural(years, 'year', 'years')}"
    )


def tobacco(reader: FieldReader) -> str | None:
    status = TobaccoStatus.parse(reader.raw("tobacco"))
    if status is None or status is TobaccoStatus.NEVER:
        return None
    if status is TobaccoStatus.FORMER:
        quit_date = reader.value("quitDate")
        packs = reader.value("packsPerDay")
        years = reader.value("yearsSmoked")
        known = _present(quit_date, packs, years)
        if quit_date and packs and years:
            return f"Former smoker: quit {quit_date} after {_smoking_history(packs, years)}."
        if known:
            return f"Former smoker: quit {', '.join(known)}."
        return "Former smoker."
    if status is TobaccoStatus.CURRENT:
        smoke_type = ", ".join(reader.items("smokeType")) or "nicotine"
        packs = reader.value("currentPacksPerDay")
        years = reader.value("currentYears")
        if packs and years:
            return f"Uses {smoke_type}: {_smoking_history(packs, years)}."
        if packs or years:
            return f"Uses {smoke_type}: {', '.join(_present(packs, years))}."
        return f"Uses {smoke_type}."
    return f"Nicotine use: {reader.value('tobacco')}."


def alcohol(reader: FieldReader) -> str | None:
    use = AlcoholUse.parse(reader.raw("alcohol"))
    if use is None or use is AlcoholUse.NONE:
        return None
    suffix = " (struggling)" if use is AlcoholUse.STRUGGLE else ""
    drinks = reader.value("alcoholDrinks")
    if drinks:
        period = "day" if DrinkPeriod.parse(reader.raw("alcoholPer")) is DrinkPeriod.DAY else "week"
        word = plural(drinks, "drink", "drinks")
        return f"{drinks} alcoholic {word} per {period}.{suffix}"
    return f"Alcohol use: {reader.value('alcohol')}.{suffix}"


def marijuana(reader: FieldReader) -> str | None:
    use = MarijuanaUse.parse(reader.raw("marijuana"))
    if use is None or use is MarijuanaUse.NONE:
        return None
    if use is MarijuanaUse.MEDICAL:
        return "Uses marijuana medicinally."
    return "Uses marijuana recreationally."


def other_drugs(reader: FieldReader) -> str | None:
    use = OtherDrugUse.parse(reader.raw("otherDrugs"))
    if use is None or use is OtherDrugUse.NO:
        return None
    free_text = reader.value("otherDrugsOther")
    types = reader.items("otherDrugsType")
    if types:
        named = _present(*(free_text if kind == "Other" else kind for kind in types))
        drug_list = ", ".join(named) or free_text
    else:
        drug_list = free_text
    return f"Uses {drug_list.lower()}." if drug_list else "Uses other drugs."


def caffeine(reader: FieldReader) -> str | None:
    count = reader.value("caffeinePerDay")
    if not count:
        return None
    return f"{count} {plural(count, 'caffeinated drink', 'caffeinated drinks')} per day."


def exercise(reader: FieldReader) -> str | None:
    level = ExerciseLevel.parse(reader.raw("exercise"))
    if level is None:
        return None
    if level is ExerciseLevel.NOT_MUCH:
        return "Does not exercise."
    if level is ExerciseLevel.YES:
        details = reader.value("exerciseDetails")
        return f"Exercise: {details}." if details else "Exercises."
    return f"Exercise: {reader.value('exercise')}."


def prescription_insurance(reader: FieldReader) -> str | None:
    kind = reader.value("rxInsurance")
    plan = reader.value("rxInsurancePlan")
    if kind:
        if plan and RxInsuranceType.parse(kind) is RxInsuranceType.PRIVATE:
            return f"Prescription insurance: {kind} ({plan})."
        return f"Prescription insurance: {kind}."
    if plan:
        return f"Prescription insurance: {plan}."
    return None


SOCIAL_FACETS: Sequence[Facet] = (
    occupation,
    residence,
    marital_status,
    education,
    tobacco,
    alcohol,
    marijuana,
    other_drugs,
    caffeine,
    exercise,
    prescription_insurance,
)


def social_history_lines(reader: FieldReader) -> List[str]:
    return [line for line in (facet(reader) for facet in SOCIAL_FACETS) if line]


def render_social_history(reader: FieldReader) -> str:
    return render_block(SOCIAL_TITLE, social_history_lines(reader))


__all__ = [
    "SOCIAL_TITLE",
    "SOCIAL_FACETS",
    "occupation",
    "residence",
    "marital_status",
    "education",
    "tobacco",
    "alcohol",
    "marijuana",
    "other_drugs",
    "caffeine",
    "exercise",
    "prescription_insurance",
    "social_history_lines",
    "render_social_history",
]
