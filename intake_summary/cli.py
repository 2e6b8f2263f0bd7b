"""CLI entrypoint: render the narrative for a saved intake submission."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from intake_summary.errors import ValidationError
from intake_summary.services.submission_service import compile_submission

_LOG = logging.getLogger("intake_summary.cli")


def _load_submission(path: str) -> Dict[str, Any]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ValidationError(f"{path} is not UTF-8 text: {exc.reason}") from exc
    except json.JSONDecodeError as exc:
        raise ValidationError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValidationError("Input payload must be a JSON object.")
    return data


def run_cli(argv: Optional[Iterable[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render the plain-text narrative for an intake form submission."
    )
    parser.add_argument("--input", required=True, help="Path to the submission JSON object.")
    parser.add_argument("--output", help="Optional path to write the narrative instead of stdout.")
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        submission = _load_submission(args.input)
    except (OSError, ValidationError) as exc:
        _LOG.error("submission_load_failed", extra={"error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return 2

    compiled = compile_submission(submission)
    if args.output:
        Path(args.output).write_text(compiled.text + "\n", encoding="utf-8")
    else:
        print(compiled.text)
    return 0


def main() -> None:  # pragma: no cover - console script shim
    raise SystemExit(run_cli())


if __name__ == "__main__":  # pragma: no cover
    main()


__all__ = ["run_cli"]
