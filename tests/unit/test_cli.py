"""Tests for the bookmark-datesort CLI."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from bookmark_datesort.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _drop_log_handlers() -> Iterator[None]:
    """The CLI logs to the runner's stderr, which is closed after each invoke."""
    yield
    logger.remove()
    logger.disable("bookmark_datesort")


def _json_output(output: str) -> dict:
    """Parse the JSON document printed after any log lines."""
    return json.loads(output[output.index("{") :])


def test_sort_prints_sorted_tree(scenario_file: Path) -> None:
    result = runner.invoke(app, ["sort", str(scenario_file)])

    assert result.exit_code == 0, result.output
    assert "+ Sorted by Date" in result.output
    assert "+ Original Bookmarks" in result.output
    assert result.output.index("2020-07-15\n") < result.output.index("2021-03-01\n")


def test_sort_json_output(scenario_file: Path) -> None:
    result = runner.invoke(app, ["sort", str(scenario_file), "--json"])

    assert result.exit_code == 0, result.output
    data = _json_output(result.output)
    sorted_root, original_root = data["children"]
    assert [e["label"] for e in sorted_root["children"]] == ["2020-07-15", "2021-03-01"]
    assert sorted_root["children"][0]["action"] == (
        "bookmarkRoot.children[1].children[1].children[0].execute()"
    )
    assert [b["label"] for b in original_root["children"]] == ["Report 2021-03-01", "Notes"]


def test_sort_dark_mode_uses_dark_palette(scenario_file: Path) -> None:
    result = runner.invoke(app, ["sort", str(scenario_file), "--dark-mode", "--json"])

    assert result.exit_code == 0, result.output
    assert _json_output(result.output)["children"][0]["color"] == [0.0, 1.0, 0.0]


def test_sort_already_sorted_file_fails(tmp_path: Path) -> None:
    path = tmp_path / "sorted.json"
    path.write_text(json.dumps([{"label": "Sorted by Date"}, {"label": "2020-01-01"}]))

    result = runner.invoke(app, ["sort", str(path)])

    assert result.exit_code == 1
    assert "already been sorted" in result.output


def test_sort_empty_file_fails(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("[]")

    result = runner.invoke(app, ["sort", str(path)])

    assert result.exit_code == 1
    assert "no bookmarks to sort" in result.output


def test_sort_missing_file_fails(tmp_path: Path) -> None:
    result = runner.invoke(app, ["sort", str(tmp_path / "missing.json")])
    assert result.exit_code == 1


def test_sort_malformed_date_fails(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"label": "Due 2021-02-30"}]))

    result = runner.invoke(app, ["sort", str(path)])

    assert result.exit_code == 1
    assert "Unexpected error." in result.output


def test_dates_lists_chronologically(scenario_file: Path) -> None:
    result = runner.invoke(app, ["dates", str(scenario_file)])

    assert result.exit_code == 0, result.output
    assert "Found 2 dated bookmarks" in result.output
    lines = [line.strip() for line in result.output.splitlines() if line.strip()]
    assert lines[1] == "2020-07-15  2020-07-15 Summary"
    assert lines[2] == "bookmarkRoot.children[1].children[0].execute()"
    assert lines[3] == "2021-03-01  Report 2021-03-01"
    assert lines[4] == "bookmarkRoot.children[0].execute()"


def test_dates_on_sorted_output_lists_originals(tmp_path: Path, scenario_file: Path) -> None:
    sorted_result = runner.invoke(app, ["sort", str(scenario_file), "--json"])
    assert sorted_result.exit_code == 0, sorted_result.output
    sorted_file = tmp_path / "sorted.json"
    sorted_file.write_text(json.dumps(_json_output(sorted_result.output)))

    result = runner.invoke(app, ["dates", str(sorted_file)])

    assert result.exit_code == 0, result.output
    assert "Found 2 dated bookmarks" in result.output
    assert "bookmarkRoot.children[1].children[1].children[0].execute()" in result.output
    assert "bookmarkRoot.children[1].children[0].execute()" in result.output
