"""Assemble the plain-text intake narrative from a submitted form."""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Sequence, Tuple

from .fields import FieldReader
from .history import render_past_medical_history
from .relations import render_allergies, render_family_history
from .sections import LabelledValue, render_section
from .social import render_social_history

CONTACT_TITLE = "CONTACT"
MEDICAL_TEAM_TITLE = "MEDICAL TEAM"
BODY_TITLE = "HEIGHT / WEIGHT / HOBBIES"

CONTACT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Full name", "fullName"),
    ("Preferred name", "preferredName"),
    ("Age", "age"),
    ("Phone Home", "phoneHome"),
    ("Phone Work", "phoneWork"),
    ("Phone Cell", "phoneCell"),
    ("Preferred number", "preferredNumber"),
    ("May we leave a message?", "leaveMessage"),
    ("Email", "email"),
    ("Emergency contact", "emergencyContact"),
    ("Emergency relationship", "emergencyRelation"),
    ("Emergency phone", "emergencyPhone"),
)


def contact_pairs(reader: FieldReader) -> List[LabelledValue]:
    return [(label, reader.value(key)) for label, key in CONTACT_FIELDS]


def medical_team_pairs(reader: FieldReader) -> List[LabelledValue]:
    doctor = "None" if reader.is_yes("familyDoctorNone") else reader.value("familyDoctor")
    return [
        ("Family doctor / NP", doctor),
        ("Met Dr. Moore before", reader.value("metDrMoore")),
        ("Main medical question", reader.value("mainMedicalQuestion")),
        ("Other specialists", reader.value("otherSpecialists")),
        ("Upcoming surgery", reader.value("upcomingSurgery")),
        ("Preferred pharmacy", reader.value("preferredPharmacy")),
    ]


def body_pairs(reader: FieldReader) -> List[LabelledValue]:
    return [
        ("Height", reader.value("height")),
        ("Weight", reader.value("weight")),
        ("Weight not sure", "Yes" if reader.is_yes("weightNotSure") else None),
        ("Hobbies", reader.value("hobbies")),
    ]


def render_contact(reader: FieldReader) -> str:
    return render_section(CONTACT_TITLE, contact_pairs(reader))


def render_medical_team(reader: FieldReader) -> str:
    return render_section(MEDICAL_TEAM_TITLE, medical_team_pairs(reader))


def render_body(reader: FieldReader) -> str:
    return render_section(BODY_TITLE, body_pairs(reader))


SectionBuilder = Callable[[FieldReader], str]

SECTION_BUILDERS: Sequence[SectionBuilder] = (
    render_contact,
    render_medical_team,
    render_body,
    render_past_medical_history,
    render_social_history,
    render_allergies,
    render_family_history,
)


def render_sections(submission: Mapping[str, Any] | None) -> List[str]:
    """Rendered sections in document order; absent sections are skipped."""
    reader = FieldReader(submission)
    return [block for block in (build(reader) for build in SECTION_BUILDERS) if block]


def build_narrative(submission: Mapping[str, Any] | None) -> str:
    """Return the trimmed narrative, or ``""`` when nothing was filled in."""
    return "".join(render_sections(submission)).strip()


__all__ = [
    "CONTACT_FIELDS",
    "SECTION_BUILDERS",
    "render_sections",
    "build_narrative",
]
