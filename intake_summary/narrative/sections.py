"""Section rendering for the plain-text narrative."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

LabelledValue = Tuple[str, Optional[str]]


def render_block(title: str, lines: Iterable[str]) -> str:
    """Render ``title`` followed by one line per entry, or nothing."""
    body = [line for line in lines if line and line.strip()]
    if not body:
        return ""
    return "\n" + title + "\n" + "\n".join(body) + "\n"


def render_section(title: str, pairs: Sequence[LabelledValue]) -> str:
    """Render ``label: value`` lines, dropping pairs without a value."""
    return render_block(
        title,
        (
            f"{label}: {value}"
            for label, value in pairs
            if value is not None and str(value).strip()
        ),
    )


__all__ = ["render_block", "render_section", "LabelledValue"]
