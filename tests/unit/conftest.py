"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from bookmark_datesort.core.importer.json_reader import parse_tree
from bookmark_datesort.models.bookmark import Bookmark
from tests.unit.fakes import make_root

# Root children: A("Report 2021-03-01"), B("Notes") with child C("2020-07-15 Summary").
SCENARIO_OUTLINE: list[dict[str, Any]] = [
    {"label": "Report 2021-03-01", "action": "goto:1"},
    {
        "label": "Notes",
        "action": "goto:2",
        "children": [{"label": "2020-07-15 Summary", "action": "goto:3"}],
    },
]

NESTED_OUTLINE: list[dict[str, Any]] = [
    {"label": "Intro"},
    {
        "label": "Meeting 2022-05-10",
        "children": [
            {"label": "Agenda"},
            {"label": "Follow-up 2022-01-20", "children": [{"label": "Action items"}]},
            {"label": "Minutes", "children": [{"label": "Decision 2023-02-01"}]},
        ],
    },
    {"label": "Kickoff 2022-01-20"},
]


@pytest.fixture
def scenario_root() -> Bookmark:
    """The A/B/C tree: one top-level date and one nested date."""
    c = Bookmark(label="2020-07-15 Summary", action="goto:3")
    b = Bookmark(label="Notes", action="goto:2", children=[c])
    a = Bookmark(label="Report 2021-03-01", action="goto:1")
    return make_root(a, b)


@pytest.fixture
def nested_root() -> Bookmark:
    """Dates at several depths, including a date below a date and a tie."""
    return parse_tree(NESTED_OUTLINE)


@pytest.fixture
def scenario_file(tmp_path: Path) -> Path:
    path = tmp_path / "bookmarks.json"
    path.write_text(json.dumps(SCENARIO_OUTLINE))
    return path
