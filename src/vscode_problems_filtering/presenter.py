"""Rendering of filtered problems: table, count, JSON or JSON Lines."""

from enum import Enum
import json
import sys

import jsonlines
import pandas as pd

from .errors import ProblemsIOError
from .logger import logger
from .matcher import FilterConfig
from .problem import ProblemRow


class OutputMode(Enum):
    TABLE = "table"
    COUNT = "count"
    JSON = "json"
    JSONL = "jsonl"


TABLE_COLUMNS = ["Resource", "Message", "Line"]
NO_MATCH_TEXT = "No problems match the filter criteria."


def _cell(value):
    # keep one table row per problem
    return " ".join(str(value).splitlines())


def _left_aligned(width):
    return lambda value: value.ljust(width)


def format_table(rows):
    """
    Lay out ProblemRow objects with pandas. Text columns are left aligned,
    the line number column is right aligned.
    """
    df = pd.DataFrame(
        [[_cell(row.resource), _cell(row.message), row.line] for row in rows],
        columns=TABLE_COLUMNS,
    )
    formatters = {}
    for column in ["Resource", "Message"]:
        width = max([len(column)] + [len(value) for value in df[column]])
        formatters[column] = _left_aligned(width)
    return df.to_string(index=False, justify="left", formatters=formatters)


def render_summary(config, total, n_filtered):
    lines = [f"Total problems: {total}"]
    if config.include_terms:
        lines.append(f"Include terms: {', '.join(config.include_terms)}")
    if config.exclude_terms:
        lines.append(f"Exclude terms: {', '.join(config.exclude_terms)}")
    if config.ignore_case:
        lines.append("Case-insensitive matching enabled")
    lines.append("")
    lines.append(f"Filtered problems: {n_filtered}")
    return "\n".join(lines)


def render_table(problems, config, total, truncate=True):
    parts = [render_summary(config, total, len(problems)), ""]
    if not problems:
        parts.append(NO_MATCH_TEXT)
    else:
        rows = [ProblemRow.from_problem(p, truncate=truncate) for p in problems]
        parts.append(format_table(rows))
    return "\n".join(parts)


def render_count(problems):
    return str(len(problems))


def render_json(problems):
    return json.dumps([p.to_dict() for p in problems], indent=2, ensure_ascii=False)


def write_jsonl(problems, stream):
    writer = jsonlines.Writer(stream, flush=True)
    try:
        writer.write_all(p.to_dict() for p in problems)
    finally:
        # closing the writer must not close stdout
        writer.close()


def present(problems, mode, stream=None, config=None, total=None, truncate=True):
    """
    Write exactly one representation of problems to stream (default stdout).
    config and total are only needed for the table summary.
    """
    if stream is None:
        stream = sys.stdout
    mode = OutputMode(mode)
    logger.debug(f"Rendering {len(problems)} problems as {mode.value}")

    try:
        if mode is OutputMode.JSONL:
            write_jsonl(problems, stream)
        else:
            if mode is OutputMode.COUNT:
                text = render_count(problems)
            elif mode is OutputMode.JSON:
                text = render_json(problems)
            else:
                if config is None:
                    config = FilterConfig()
                if total is None:
                    total = len(problems)
                text = render_table(problems, config, total, truncate=truncate)
            stream.write(text + "\n")
        stream.flush()
    except OSError as e:
        raise ProblemsIOError(getattr(stream, "name", "<output>"), str(e)) from e
