"""
Validate a questionnaire dataset and print a summary.

Usage:
  python -m investor_diagnostic.tools.validate_dataset
  python -m investor_diagnostic.tools.validate_dataset --dataset path/to/questionnaire.json

Exit code 1 when the dataset cannot be loaded (ConfigError).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from investor_diagnostic.config import get_settings
from investor_diagnostic.core.exceptions import ConfigError
from investor_diagnostic.engine.dataset import load_dataset_file
from investor_diagnostic.engine.models import DiagnosticContext


def summarize(context: DiagnosticContext) -> list[str]:
    """Human-readable summary lines for a loaded dataset."""
    t = context.thresholds
    weighted = sum(1 for row in context.weights.values() if row)
    lines = [
        f"diagnostic: {context.meta.diagnostic_id} v{context.meta.version} ({context.meta.language})",
        f"questions: {len(context.questions)}",
        f"archetypes: {len(context.archetypes)} ({', '.join(context.archetype_ids)})",
        f"weighted answers: {weighted}",
        f"tie-break order: {', '.join(context.tie_break_order) or '-'}",
        (
            f"secondary eligibility: min_score={t.min_score} "
            f"max_gap={t.max_gap_from_primary} min_gap={t.min_gap_from_primary}"
        ),
    ]
    answer_ids = {a.id for q in context.questions for a in q.answers}
    unweighted = sorted(a for a in answer_ids if not context.weights.get(a))
    if unweighted:
        lines.append(f"answers without weights: {', '.join(unweighted)}")
    return lines


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    ap = argparse.ArgumentParser(description="Validate an investor diagnostic dataset")
    ap.add_argument("--dataset", type=str, default=str(settings.dataset_path), help="Dataset JSON path")
    args = ap.parse_args(argv)

    try:
        context = load_dataset_file(Path(args.dataset))
    except ConfigError as e:
        print("[validate_dataset] ERROR:", e)
        return 1

    for line in summarize(context):
        print("[validate_dataset]", line)
    print("[validate_dataset] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
