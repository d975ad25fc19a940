import pathlib

import pytest

import scorecalc


def test_summarize() -> None:
    summary = scorecalc.report.summarize([8.0, 5.5, 9.0, 5.5])
    assert summary.count == 4
    assert summary.mean == pytest.approx(7.0)
    assert summary.maximum == 9.0
    assert summary.minimum == 5.5
    assert summary.population_std == pytest.approx(1.5411, abs=1e-4)
    assert summary.format() == "\n".join([
        "Mean: 7.00",
        "Highest: 9.00",
        "Lowest: 5.50",
        "Standard deviation: 1.54",
    ])


def test_summarize_empty() -> None:
    summary = scorecalc.report.summarize([])
    assert summary == scorecalc.report.Summary(0, 0.0, 0.0, 0.0, 0.0)
    assert summary.format() == scorecalc.report.NO_SCORES


def test_save_load(tmp_path: pathlib.Path) -> None:
    summary = scorecalc.report.summarize([1.0, 2.0, 3.5])
    summary.save(tmp_path / "summary.json")
    assert scorecalc.report.Summary.load(tmp_path / "summary.json") == summary


def test_format_listing() -> None:
    assert scorecalc.report.format_listing([]) == "No scores recorded."
    assert scorecalc.report.format_listing([7.5, 10.0]) == (
        "Scores (total 2):\n  1: 7.50\n  2: 10.00"
    )


def test_write_report(tmp_path: pathlib.Path) -> None:
    out_dir = tmp_path / "report"
    summary = scorecalc.report.write_report([2.0, 4.0, 4.0, 9.5], out_dir)
    assert summary.count == 4
    assert (out_dir / "summary.json").exists()
    assert (out_dir / "distribution.png").stat().st_size > 0


def test_write_report_empty(tmp_path: pathlib.Path) -> None:
    scorecalc.report.write_report([], tmp_path)
    assert (tmp_path / "summary.json").exists()
    assert not (tmp_path / "distribution.png").exists()


def test_write_report_into_file_path(tmp_path: pathlib.Path) -> None:
    blocker = tmp_path / "taken"
    blocker.write_text("not a directory")
    with pytest.raises(scorecalc.PersistenceError):
        scorecalc.report.write_report([1.0], blocker)
