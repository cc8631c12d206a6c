"""
Tests for the command-line tools (validate_dataset, evaluate_responses).
"""

from __future__ import annotations

import json

import pytest

from investor_diagnostic.engine.dataset import load_dataset
from investor_diagnostic.tools import evaluate_responses, validate_dataset


@pytest.fixture(autouse=True)
def _default_dataset_env(monkeypatch):
    monkeypatch.delenv("INVESTOR_DIAGNOSTIC_DATASET", raising=False)


def test_validate_bundled_dataset(capsys):
    """Bundled questionnaire validates and the summary lists its archetypes."""
    assert validate_dataset.main([]) == 0
    out = capsys.readouterr().out
    assert "diagnostic_investisseur_v1" in out
    assert "archetypes: 7" in out
    assert "[validate_dataset] OK" in out


def test_validate_broken_dataset(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"archetypes": []}), encoding="utf-8")
    assert validate_dataset.main(["--dataset", str(path)]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_summarize_reports_unweighted_answers(raw_dataset):
    raw_dataset["questions"][1]["answers"].append({"id": "x_none", "text": "No weight"})
    lines = validate_dataset.summarize(load_dataset(raw_dataset))
    assert "tie-break order: q1, q2" in lines
    assert "answers without weights: x_none" in lines


def test_evaluate_inline_responses(capsys):
    """Inline JSON responses print the result JSON."""
    responses = {
        "q1_goal": "q1_a",
        "q2_horizon": "q2_d",
        "q3_drawdown_reaction": "q3_a",
        "q4_structure": "q4_a",
    }
    assert evaluate_responses.main(["--responses", json.dumps(responses)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["primary"]["id"] == "architecte"
    assert data["confidence"] == "high"
    assert set(data["scores"]) == {
        "architecte",
        "stratege",
        "delegateur",
        "navigateur",
        "optimiseur",
        "prudent",
        "explorateur",
    }


def test_evaluate_responses_file(tmp_path, capsys, raw_dataset):
    """Responses and dataset both read from files."""
    dataset_path = tmp_path / "dataset.json"
    dataset_path.write_text(json.dumps(raw_dataset), encoding="utf-8")
    responses_path = tmp_path / "answers.json"
    responses_path.write_text(json.dumps({"q1": "x1", "q2": "x2"}), encoding="utf-8")
    code = evaluate_responses.main(
        ["--dataset", str(dataset_path), "--responses-file", str(responses_path), "--indent", "0"]
    )
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["primary"]["id"] == "A"
    assert data["secondary"]["id"] == "B"
    assert data["confidence"] == "low"


def test_evaluate_invalid_responses(capsys):
    assert evaluate_responses.main(["--responses", "[1, 2]"]) == 1
    assert "ERROR" in capsys.readouterr().out
    assert evaluate_responses.main(["--responses", "{not json"]) == 1


def test_evaluate_missing_dataset(tmp_path, capsys):
    code = evaluate_responses.main(["--dataset", str(tmp_path / "missing.json"), "--responses", "{}"])
    assert code == 1


def test_parse_responses_drops_non_string_values():
    assert evaluate_responses.parse_responses('{"q1": "x1", "q2": 3, "q3": null}') == {"q1": "x1"}
