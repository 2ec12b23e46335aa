"""Test fixtures for vscode-problems-filtering."""

import json
import os
import pytest

from vscode_problems_filtering.problem import Problem


@pytest.fixture
def test_fixtures_dir():
    """Return the path to the test fixtures directory."""
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def vscode_problems_file(test_fixtures_dir):
    """Five problems exported from a Java + TypeScript workspace."""
    return os.path.join(test_fixtures_dir, "vscode_problems.json")


@pytest.fixture
def deprecated_problem_data():
    return {"resource": "a.ts", "message": "deprecated API", "startLineNumber": 5}


@pytest.fixture
def make_problem():
    """Factory for Problem objects with sensible defaults."""

    def _make(resource="src/app/test.java", message="a message", line=10, **extra):
        data = {"resource": resource, "message": message, "startLineNumber": line}
        data.update(extra)
        return Problem.from_dict(data, 0)

    return _make


@pytest.fixture
def write_problems(tmp_path):
    """Write a list of problem dicts to a JSON file and return its path."""

    def _write(problems, name="problems.json"):
        path = tmp_path / name
        path.write_text(json.dumps(problems), encoding="utf-8")
        return path

    return _write
