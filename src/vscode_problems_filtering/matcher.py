"""Include/exclude term filtering of problems."""

from dataclasses import dataclass
from typing import Tuple

from .logger import logger


@dataclass(frozen=True)
class FilterConfig:
    """
    include_terms must all be present, none of exclude_terms may be present.

    A term is present when it is a substring of the problem's resource or of
    its message. With ignore_case, terms and text are both casefolded.

    An empty term is a substring of everything: "" as an include term keeps
    every problem, "" as an exclude term drops every problem.
    """

    include_terms: Tuple[str, ...] = ()
    exclude_terms: Tuple[str, ...] = ()
    ignore_case: bool = False

    @classmethod
    def from_terms(cls, include_terms=None, exclude_terms=None, ignore_case=False):
        return cls(
            include_terms=tuple(include_terms or ()),
            exclude_terms=tuple(exclude_terms or ()),
            ignore_case=bool(ignore_case),
        )

    @property
    def has_terms(self):
        return bool(self.include_terms or self.exclude_terms)

    def normalize(self, text):
        return text.casefold() if self.ignore_case else text


def searchable_fields(problem, config):
    return (config.normalize(problem.resource), config.normalize(problem.message))


def contains_term(fields, term):
    return any(term in text for text in fields)


def matches(problem, config):
    fields = searchable_fields(problem, config)

    included = all(
        contains_term(fields, config.normalize(term)) for term in config.include_terms
    )
    if not included:
        return False

    excluded = any(
        contains_term(fields, config.normalize(term)) for term in config.exclude_terms
    )
    return not excluded


def filter_problems(problems, config):
    """
    Return the problems that match config, in input order.
    """
    kept = []
    n_problems = 0
    for problem in problems:
        n_problems += 1
        if matches(problem, config):
            kept.append(problem)
        else:
            logger.debug(
                f"Dropping {problem.resource}:{problem.start_line_number} "
                f"({problem.message!r})"
            )

    logger.info(f"Processed {n_problems} problems")
    logger.info(f"Kept {len(kept)} problems")
    return kept
