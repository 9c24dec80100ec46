"""Errors raised while lexing and parsing command lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum


class ParseErrorKind(Enum):
    """The kinds of problem a command line can have."""

    EMPTY = "empty input"
    MISSING_FILE_NAME = "missing file name after redirection"
    UNMATCHED_DELIMITER = "unmatched delimiter"
    INVALID_VARIABLE = "invalid variable name"
    UNTERMINATED_STRING_LITERAL = "unterminated string literal"
    NON_REDIR_TYPE_TOKEN = "token is not a redirection or pipe"
    NOT_FOUND = "nothing found"


class ParseError(Exception):
    """A single lexing or parsing error."""

    def __init__(self, kind: ParseErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class ParseErrors(Exception):
    """Every error found while parsing one command line."""

    def __init__(self, errors: Iterable[ParseError] = ()) -> None:
        self.errors = list(errors)
        message = "; ".join(str(error) for error in self.errors) or "no command"
        super().__init__(message)

    def __iter__(self) -> Iterator[ParseError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __repr__(self) -> str:
        return f"ParseErrors({self.errors!r})"