"""Field access helpers shared by every narrative section.

Submissions arrive as loosely typed mappings (decoded JSON or url-encoded
forms). Nothing here raises on odd input: missing, blank or oddly typed values
collapse to ``None`` so the caller can simply skip the line.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping

YES = "yes"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def normalize(value: Any) -> str | None:
    """Return the trimmed display form of ``value`` or ``None`` when blank."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        entries = [_entry_text(entry) for entry in value]
        joined = ", ".join(entry for entry in entries if entry)
        return joined or None
    text = str(value).strip()
    return text or None


def _entry_text(entry: Any) -> str:
    if entry is None or entry is False:
        return ""
    return str(entry).strip()


def plural(count_text: Any, singular: str, plural_word: str) -> str:
    """Pick ``singular`` when ``count_text`` starts with the integer one.

    Only the leading integer counts, so ``"1/2"`` and ``"1 pack"`` read as one.
    Counts with no leading digits fall back to the plural form.
    """
    match = _LEADING_INT.match("" if count_text is None else str(count_text))
    if match is None:
        return plural_word
    return singular if int(match.group(1)) == 1 else plural_word


def is_yes(value: Any) -> bool:
    if value is True:
        return True
    return isinstance(value, str) and value.strip() == YES


class FieldReader:
    """Read-only view over a submission mapping."""

    def __init__(self, submission: Mapping[str, Any] | None) -> None:
        self._data: Mapping[str, Any] = submission or {}

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    def raw(self, key: str) -> Any:
        return self._data.get(key)

    def value(self, key: str) -> str | None:
        return normalize(self._data.get(key))

    def is_yes(self, key: str) -> bool:
        return is_yes(self._data.get(key))

    def items(self, key: str) -> List[str]:
        """Non-empty entries of a field that may be a scalar or a list."""
        raw = self._data.get(key)
        if raw is None:
            return []
        values = raw if isinstance(raw, (list, tuple)) else [raw]
        return [text for text in (_entry_text(entry) for entry in values) if text]


__all__ = ["FieldReader", "normalize", "plural", "is_yes"]
