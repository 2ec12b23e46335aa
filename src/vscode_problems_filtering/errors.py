class ProblemsError(Exception):
    """Base class for errors raised while loading a problems export."""


class ProblemsIOError(ProblemsError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"I/O error on {path}: {reason}")


class ParseError(ProblemsError):
    """
    The input is not valid JSON (or JSON Lines), or its top-level value is
    not an array. line and column are 1-based and None when unknown.
    """

    def __init__(self, description, line=None, column=None):
        self.description = description
        self.line = line
        self.column = column
        location = ""
        if line is not None:
            location = f" (line {line}" + (
                f", column {column})" if column is not None else ")"
            )
        super().__init__(f"Invalid input{location}: {description}")


class SchemaError(ProblemsError):
    """
    An element of the problems array is not an object, or one of its
    required fields is missing or has the wrong type. field is None when the
    element itself is the problem.
    """

    def __init__(self, index, field, description):
        self.index = index
        self.field = field
        self.description = description
        where = f"element {index}"
        if field is not None:
            where += f", field '{field}'"
        super().__init__(f"Invalid problem at {where}: {description}")
