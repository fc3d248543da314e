from __future__ import annotations

import json

import pytest

from vanning.cli import main


@pytest.fixture(autouse=True)
def no_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("VANNING_DEFAULT_STRATEGY", raising=False)
    monkeypatch.delenv("VANNING_MAX_BOXES", raising=False)


def test_default_run_prints_summary(capsys) -> None:
    assert main([]) == 0

    summary = json.loads(capsys.readouterr().out)
    assert summary["strategy"] == "simpleStacking"
    assert summary["count"] == 220
    assert summary["warnings"] == []


def test_compare_runs_every_strategy(capsys) -> None:
    assert main(["--compare"]) == 0

    summaries = json.loads(capsys.readouterr().out)
    assert [(s["strategy"], s["count"]) for s in summaries] == [
        ("simpleStacking", 220),
        ("palletLoading", 80),
        ("optimizedPacking", 224),
    ]


def test_overrides_and_output_file(capsys, tmp_path) -> None:
    out = tmp_path / "plans" / "plan.json"

    code = main([
        "--container-preset", "40ft",
        "--cargo-preset", "large",
        "--cargo-gap", "0",
        "--strategy", "optimizedPacking",
        "--output", str(out),
    ])

    assert code == 0
    plan = json.loads(out.read_text(encoding="utf-8"))
    assert plan["cargo"]["gap"] == 0.0
    assert plan["container"]["width"] == 12.03
    result = plan["results"][0]
    assert result["strategy"] == "optimizedPacking"
    assert len(result["positions"]) == result["count"]
    assert plan["summaries"][0]["count"] == result["count"]


def test_invalid_dimension_exits_with_error(capsys) -> None:
    assert main(["--cargo-width", "-1"]) == 2
    assert capsys.readouterr().out == ""


def test_unknown_preset_exits_with_error() -> None:
    assert main(["--container-preset", "60ft"]) == 2


@pytest.mark.parametrize("value", ["inf", "nan"])
def test_non_finite_dimension_exits_with_error(value, capsys) -> None:
    assert main(["--container-width", value]) == 2
    assert capsys.readouterr().out == ""


def test_run_over_box_limit_exits_with_error(monkeypatch, capsys) -> None:
    monkeypatch.setenv("VANNING_MAX_BOXES", "100")

    assert main(["--strategy", "palletLoading"]) == 0
    capsys.readouterr()
    assert main([]) == 2
    assert capsys.readouterr().out == ""
