"""
Evaluate one set of questionnaire responses and print the result as JSON.

Usage:
  python -m investor_diagnostic.tools.evaluate_responses --responses '{"q1_goal": "q1_a"}'
  python -m investor_diagnostic.tools.evaluate_responses --responses-file answers.json --dataset custom.json

Responses are a JSON object {question_id: answer_id}. Exit code 1 when the
dataset cannot be loaded or the responses are not a JSON object.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from investor_diagnostic.config import get_settings
from investor_diagnostic.core.exceptions import ConfigError
from investor_diagnostic.engine.dataset import load_dataset_file
from investor_diagnostic.engine.pipeline import evaluate


def parse_responses(raw: str) -> dict[str, str]:
    """
    Parse a responses JSON object. Values are kept as strings; non-string
    values are dropped since they can never match an answer id.

    Raises:
        ValueError: not valid JSON or not an object.
    """
    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"responses are not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("responses must be a JSON object {question_id: answer_id}")
    return {str(k): v for k, v in data.items() if isinstance(v, str)}


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    ap = argparse.ArgumentParser(description="Evaluate investor diagnostic responses")
    ap.add_argument("--dataset", type=str, default=str(settings.dataset_path), help="Dataset JSON path")
    group = ap.add_mutually_exclusive_group(required=True)
    group.add_argument("--responses", type=str, help="Responses as a JSON object")
    group.add_argument("--responses-file", type=str, help="Path to a JSON file with responses")
    ap.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")
    args = ap.parse_args(argv)

    try:
        context = load_dataset_file(Path(args.dataset))
    except ConfigError as e:
        print("[evaluate_responses] ERROR:", e)
        return 1

    try:
        if args.responses_file:
            raw = Path(args.responses_file).read_text(encoding="utf-8")
        else:
            raw = args.responses
        responses = parse_responses(raw)
    except (OSError, ValueError) as e:
        print("[evaluate_responses] ERROR:", e)
        return 1

    result = evaluate(context, responses)
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=args.indent or None))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
