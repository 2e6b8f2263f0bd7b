"""Narrative compiler for patient intake submissions."""

from .catalog import CONDITION_CATALOG
from .compiler import build_narrative, render_sections
from .fields import FieldReader, normalize, plural
from .groups import IndexedRecord, RecordGroup, collect_group
from .sections import render_block, render_section

__all__ = [
    "CONDITION_CATALOG",
    "FieldReader",
    "IndexedRecord",
    "RecordGroup",
    "build_narrative",
    "collect_group",
    "normalize",
    "plural",
    "render_block",
    "render_section",
    "render_sections",
]
