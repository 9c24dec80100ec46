"""Building a command tree from the tokens of a command line."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Union

from shellparse.errors import ParseError, ParseErrorKind, ParseErrors
from shellparse.lexer import Lexer, Token, TokenKind


class RedirType(Enum):
    """Which output streams a redirection or pipe carries."""

    STDOUT = auto()
    STDERR = auto()
    BOTH = auto()


_REDIR_TYPES = {
    TokenKind.REDIR_OUT: RedirType.STDOUT,
    TokenKind.PIPE: RedirType.STDOUT,
    TokenKind.REDIR_BOTH: RedirType.BOTH,
    TokenKind.PIPE_BOTH: RedirType.BOTH,
    TokenKind.REDIR_ERR: RedirType.STDERR,
}

_FILE_REDIRECTIONS = frozenset(
    {TokenKind.REDIR_OUT, TokenKind.REDIR_ERR, TokenKind.REDIR_BOTH}
)
_PIPES = frozenset({TokenKind.PIPE, TokenKind.PIPE_BOTH})


def redir_type_for(token: Token) -> RedirType:
    """Return the stream selection a redirection or pipe token stands for."""
    try:
        return _REDIR_TYPES[token.kind]
    except KeyError:
        raise ParseError(ParseErrorKind.NON_REDIR_TYPE_TOKEN) from None


@dataclass(frozen=True)
class Word:
    """A literal argument."""

    text: str


@dataclass(frozen=True)
class Variable:
    """A ``$name`` reference."""

    name: str


@dataclass(frozen=True)
class Subshell:
    """A ``$(...)`` or ``(...)`` command substitution."""

    command: Command


Arg = Union[Word, Variable, Subshell]


@dataclass(frozen=True)
class FileRedir:
    """Redirection of output streams to a file."""

    redirect_type: RedirType
    target: Path


@dataclass(frozen=True)
class PipeTo:
    """Output of a command piped into another command."""

    pipe_type: RedirType
    target: Command


@dataclass(frozen=True)
class AndThen:
    """A command that follows; ``conditional`` for ``&&``, not for ``;``."""

    conditional: bool
    target: Command


@dataclass
class Command:
    """A command with its arguments, redirections and what follows it."""

    argv: list[Arg]
    pipe_to: Optional[PipeTo] = None
    redirect_to: list[FileRedir] = field(default_factory=list)
    and_then: Optional[AndThen] = None


class Parser:
    """Turns a stream of tokens into a :class:`Command`."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)

    def _next(self) -> Union[Token, ParseError, None]:
        """Next token, the error the lexer raised for it, or None at the end."""
        try:
            return next(self._tokens)
        except StopIteration:
            return None
        except ParseError as error:
            return error

    def _follow(self, errors: list[ParseError]) -> Optional[Command]:
        try:
            return self.parse_command()
        except ParseErrors as failure:
            errors.extend(failure)
            return None

    def parse_command(self) -> Command:
        """Parse one command and everything chained after it.

        Raises :class:`ParseErrors` holding every error found, or none at
        all when there was no command to parse.
        """
        errors: list[ParseError] = []
        argv: list[Arg] = []
        pipe_to: Optional[PipeTo] = None
        redirect_to: list[FileRedir] = []
        and_then: Optional[AndThen] = None

        while (item := self._next()) is not None:
            if isinstance(item, ParseError):
                errors.append(item)
                continue
            kind = item.kind
            if kind is TokenKind.WORD:
                argv.append(Word(item.value))
            elif kind in _FILE_REDIRECTIONS:
                target = self._next()
                if isinstance(target, Token) and target.kind is TokenKind.WORD:
                    redirect_to.append(FileRedir(redir_type_for(item), Path(target.value)))
                else:
                    errors.append(ParseError(ParseErrorKind.MISSING_FILE_NAME))
            elif kind in _PIPES:
                next_command = self._follow(errors)
                if next_command is not None:
                    pipe_to = PipeTo(redir_type_for(item), next_command)
                break
            elif kind in (TokenKind.AND_THEN, TokenKind.AND_THEN_IF):
                next_command = self._follow(errors)
                if next_command is not None:
                    and_then = AndThen(kind is TokenKind.AND_THEN_IF, next_command)
                break
            elif kind is TokenKind.SUBSHELL:
                try:
                    argv.append(Subshell(parse(item.value)))
                except ParseErrors as failure:
                    errors.extend(failure)
            elif kind is TokenKind.VARIABLE:
                argv.append(Variable(item.value))

        if errors or not argv:
            raise ParseErrors(errors)
        return Command(argv, pipe_to, redirect_to, and_then)


def parse(text: str) -> Command:
    """Parse a command line, raising :class:`ParseErrors` if it is invalid."""
    return Parser(Lexer(text)).parse_command()