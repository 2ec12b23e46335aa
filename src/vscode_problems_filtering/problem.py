"""Model for a single entry of an exported VS Code problems list."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .errors import SchemaError


REQUIRED_FIELDS = {
    "resource": str,
    "message": str,
    "startLineNumber": int,
}

MAX_MESSAGE_WIDTH = 150
ELLIPSIS = "..."


@dataclass(frozen=True)
class Problem:
    """
    One diagnostic. The typed attributes are the fields used for filtering
    and display; raw keeps every field of the input object, in input order,
    so that JSON output can reproduce it verbatim.
    """

    resource: str
    message: str
    start_line_number: int
    raw: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, repr=False
    )

    @classmethod
    def from_dict(cls, data, index):
        if not isinstance(data, dict):
            raise SchemaError(
                index, None, f"expected an object, got {type(data).__name__}"
            )

        for name, expected_type in REQUIRED_FIELDS.items():
            if name not in data:
                raise SchemaError(index, name, "missing required field")
            value = data[name]
            # bool is a subclass of int but true/false is not a line number
            if not isinstance(value, expected_type) or isinstance(value, bool):
                raise SchemaError(
                    index,
                    name,
                    f"expected {expected_type.__name__}, got {type(value).__name__}",
                )

        if data["startLineNumber"] < 1:
            raise SchemaError(
                index,
                "startLineNumber",
                f"line numbers start at 1, got {data['startLineNumber']}",
            )

        return cls(
            resource=data["resource"],
            message=data["message"],
            start_line_number=data["startLineNumber"],
            raw=MappingProxyType(dict(data)),
        )

    def to_dict(self):
        """
        Return the problem as it appeared in the input. Problems built
        directly (not loaded) only carry the required fields.
        """
        data = dict(self.raw)
        data["resource"] = self.resource
        data["message"] = self.message
        data["startLineNumber"] = self.start_line_number
        return data


def shorten_resource(resource):
    """
    Keep the file name and the directory that holds it, marking the dropped
    leading directories with ".../". Paths with nothing to drop are returned
    unchanged.
    """
    parts = resource.rsplit("/", 2)
    if len(parts) < 3 or not parts[0]:
        return resource
    return f"{ELLIPSIS}/{parts[1]}/{parts[2]}"


def truncate_message(message, width=MAX_MESSAGE_WIDTH):
    if len(message) <= width:
        return message
    return message[: width - len(ELLIPSIS)] + ELLIPSIS


@dataclass(frozen=True)
class ProblemRow:
    """A problem as shown in the table output."""

    resource: str
    message: str
    line: int

    @classmethod
    def from_problem(cls, problem, truncate=True):
        if not truncate:
            return cls(problem.resource, problem.message, problem.start_line_number)
        return cls(
            resource=shorten_resource(problem.resource),
            message=truncate_message(problem.message),
            line=problem.start_line_number,
        )
