from .errors import ParseError, ProblemsIOError
from .logger import logger
from .problem import Problem
from pathlib import Path
import gzip
import io
import json
import jsonlines
import zlib


INPUT_FORMATS = ["auto", "json", "jsonl"]


def _is_gzipped(path):
    return path.suffix == ".gz"


def _detect_format(path):
    suffixes = path.suffixes
    if suffixes and suffixes[-1] == ".gz":
        suffixes = suffixes[:-1]
    if suffixes and suffixes[-1] == ".jsonl":
        return "jsonl"
    return "json"


def read_input_file(file_path):
    """
    Read the whole input file as text. .gz files are decompressed.
    """
    path = Path(file_path)
    logger.info(f"Reading input from {path}")
    try:
        if _is_gzipped(path):
            with gzip.open(path, "rb") as f:
                data = f.read()
        else:
            data = path.read_bytes()
    except (OSError, EOFError, zlib.error) as e:
        raise ProblemsIOError(path, getattr(e, "strerror", None) or str(e)) from e

    try:
        # exports saved from Windows editors often start with a BOM
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid UTF-8 ({e.reason})") from e


def _reject_constant(name):
    # json accepts NaN and Infinity, which are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def _strict_loads(text):
    return json.loads(text, parse_constant=_reject_constant)


def load_problems(text):
    """
    Construct Problem objects from a JSON array of problem objects.
    """
    try:
        data = _strict_loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(e.msg, e.lineno, e.colno) from e
    except ValueError as e:
        raise ParseError(str(e)) from e
    except RecursionError as e:
        raise ParseError("input nested too deeply") from e

    if not isinstance(data, list):
        raise ParseError(
            f"expected a JSON array of problems, got {type(data).__name__}"
        )

    return [Problem.from_dict(obj, i) for i, obj in enumerate(data)]


def load_problems_jsonl(text):
    """
    Construct Problem objects from JSON Lines, one problem per line. Blank
    lines are skipped and do not count towards the element index.
    """
    problems = []
    with jsonlines.Reader(io.StringIO(text), loads=_strict_loads) as reader:
        try:
            for i, obj in enumerate(reader.iter(skip_empty=True)):
                problems.append(Problem.from_dict(obj, i))
        except jsonlines.InvalidLineError as e:
            cause = e.__cause__
            if isinstance(cause, json.JSONDecodeError):
                raise ParseError(cause.msg, e.lineno, cause.colno) from e
            # jsonlines appends "(line N)" to its own message
            if cause is not None:
                description = str(cause)
            else:
                description = str(e).rsplit(" (line ", 1)[0]
            raise ParseError(description, e.lineno) from e
        except RecursionError as e:
            raise ParseError("input nested too deeply") from e
    return problems


def read_problems(file_path, input_format="auto"):
    path = Path(file_path)
    if input_format == "auto":
        input_format = _detect_format(path)
    logger.debug(f"Input format for {path} is {input_format}")

    text = read_input_file(path)
    if input_format == "jsonl":
        problems = load_problems_jsonl(text)
    elif input_format == "json":
        problems = load_problems(text)
    else:
        raise ValueError(f"Unsupported input format: {input_format}")

    logger.info(f"Read {len(problems)} problems from {path}")
    return problems
