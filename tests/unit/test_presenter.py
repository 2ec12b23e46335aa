"""Unit tests for presenter.py."""

import io
import json
import pytest
from unittest.mock import MagicMock

from vscode_problems_filtering.errors import ProblemsIOError
from vscode_problems_filtering.matcher import FilterConfig
from vscode_problems_filtering.presenter import (
    NO_MATCH_TEXT,
    OutputMode,
    present,
    render_count,
    render_json,
    render_summary,
    render_table,
)


@pytest.fixture
def problems(make_problem):
    return [
        make_problem(
            resource="/home/dev/app/src/client.ts",
            message="'fetchUser' is deprecated.",
            line=42,
            severity=4,
            source="ts",
        ),
        make_problem(
            resource="/home/dev/app/src/Button.tsx",
            message="Cannot find name 'React'.",
            line=7,
            severity=8,
        ),
    ]


def test_render_count(problems):
    assert render_count(problems) == "2"
    assert render_count([]) == "0"


def test_render_json_keeps_all_fields(problems):
    data = json.loads(render_json(problems))
    assert data == [p.to_dict() for p in problems]
    assert data[0]["severity"] == 4
    assert data[0]["source"] == "ts"
    assert data[1]["startLineNumber"] == 7


def test_render_json_empty():
    assert json.loads(render_json([])) == []


def test_render_json_keeps_non_ascii(make_problem):
    text = render_json([make_problem(message="Variable « x » inutilisée")])
    assert "« x »" in text


def test_render_summary():
    config = FilterConfig.from_terms(["deprecated", "API"], ["test"], ignore_case=True)
    summary = render_summary(config, 10, 3)
    assert summary.splitlines() == [
        "Total problems: 10",
        "Include terms: deprecated, API",
        "Exclude terms: test",
        "Case-insensitive matching enabled",
        "",
        "Filtered problems: 3",
    ]


def test_render_summary_without_terms():
    summary = render_summary(FilterConfig(), 2, 2)
    assert "Include terms" not in summary
    assert "Exclude terms" not in summary
    assert "Case-insensitive" not in summary


def test_render_table(problems):
    config = FilterConfig.from_terms(include_terms=["src"])
    table = render_table(problems, config, total=5)
    lines = table.splitlines()

    assert lines[0] == "Total problems: 5"
    assert "Filtered problems: 2" in lines
    header = next(line for line in lines if line.lstrip().startswith("Resource"))
    assert "Message" in header
    assert "Line" in header
    # one row per problem, in order
    rows = lines[lines.index(header) + 1 :]
    assert len(rows) == 2
    assert rows[0].lstrip().startswith(".../src/client.ts")
    assert "'fetchUser' is deprecated." in rows[0]
    assert rows[0].rstrip().endswith("42")
    assert rows[1].lstrip().startswith(".../src/Button.tsx")
    assert rows[1].rstrip().endswith("7")


def test_render_table_truncates_long_messages(make_problem):
    problem = make_problem(resource="/a/b/c.ts", message="z" * 300, line=1)
    table = render_table([problem], FilterConfig(), total=1)
    assert "z" * 147 + "..." in table
    assert "z" * 148 not in table
    assert ".../b/c.ts" in table


def test_render_table_without_truncation(make_problem):
    problem = make_problem(resource="/a/b/c.ts", message="z" * 300, line=1)
    table = render_table([problem], FilterConfig(), total=1, truncate=False)
    assert "z" * 300 in table
    assert "/a/b/c.ts" in table


def test_render_table_multiline_message(make_problem):
    problem = make_problem(message="first line\nsecond line", line=3)
    table = render_table([problem], FilterConfig(), total=1)
    assert "first line second line" in table


def test_render_table_no_match():
    table = render_table([], FilterConfig.from_terms(["nothing"]), total=4)
    assert table.splitlines()[-1] == NO_MATCH_TEXT
    assert "Resource" not in table


@pytest.mark.parametrize(
    "mode,expected",
    [
        (OutputMode.COUNT, "2\n"),
        ("count", "2\n"),
    ],
)
def test_present_count(problems, mode, expected):
    stream = io.StringIO()
    present(problems, mode, stream=stream)
    assert stream.getvalue() == expected


def test_present_json(problems):
    stream = io.StringIO()
    present(problems, OutputMode.JSON, stream=stream)
    assert json.loads(stream.getvalue()) == [p.to_dict() for p in problems]


def test_present_jsonl(problems):
    stream = io.StringIO()
    present(problems, OutputMode.JSONL, stream=stream)
    lines = stream.getvalue().splitlines()
    assert [json.loads(line) for line in lines] == [p.to_dict() for p in problems]
    # the writer must leave the stream usable
    assert not stream.closed


def test_present_table_defaults_total(problems):
    stream = io.StringIO()
    present(problems, OutputMode.TABLE, stream=stream, config=FilterConfig())
    assert stream.getvalue().startswith("Total problems: 2\n")


def test_count_matches_json_length(problems):
    """Count, JSON and table output agree on the number of problems."""
    count = int(render_count(problems))
    assert count == len(json.loads(render_json(problems)))
    assert f"Filtered problems: {count}" in render_table(problems, FilterConfig(), 2)


def test_present_write_failure(problems):
    stream = MagicMock()
    stream.name = "<stdout>"
    stream.write.side_effect = BrokenPipeError(32, "Broken pipe")
    with pytest.raises(ProblemsIOError) as excinfo:
        present(problems, OutputMode.COUNT, stream=stream)
    assert excinfo.value.path == "<stdout>"


def test_present_rejects_unknown_mode(problems):
    with pytest.raises(ValueError):
        present(problems, "yaml", stream=io.StringIO())
