"""Splitting a command line into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from shellparse.errors import ParseError, ParseErrorKind


class TokenKind(Enum):
    WORD = auto()
    SUBSHELL = auto()
    VARIABLE = auto()
    PIPE = auto()
    PIPE_BOTH = auto()
    REDIR_OUT = auto()
    REDIR_ERR = auto()
    REDIR_BOTH = auto()
    AND_THEN = auto()
    AND_THEN_IF = auto()


@dataclass(frozen=True)
class Token:
    """A lexical token; ``value`` is set for words, subshells and variables."""

    kind: TokenKind
    value: Optional[str] = None


_REDIRECTIONS = {
    ">": TokenKind.REDIR_OUT,
    "1>": TokenKind.REDIR_OUT,
    ">>": TokenKind.REDIR_OUT,
    "1>>": TokenKind.REDIR_OUT,
    "2>": TokenKind.REDIR_ERR,
    "2>>": TokenKind.REDIR_ERR,
    "&>": TokenKind.REDIR_BOTH,
    "&>>": TokenKind.REDIR_BOTH,
}


class Lexer:
    """Iterator over the tokens of a command line.

    Errors are raised as :class:`ParseError`; the lexer stays usable
    afterwards, so iteration may continue past an error.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        self._skip_whitespace()
        for lex in (
            self._lex_redirection,
            self._lex_pipe,
            self._lex_and_then,
            self._lex_subshell,
            self._lex_variable,
            self._lex_word,
        ):
            token = lex()
            if token is not None:
                return token
        raise StopIteration

    def _peek(self, offset: int = 0) -> Optional[str]:
        index = self._pos + offset
        return self._text[index] if index < len(self._text) else None

    def _skip_whitespace(self) -> None:
        while (c := self._peek()) is not None and c.isspace():
            self._pos += 1

    def _lex_redirection(self) -> Optional[Token]:
        redir = ""
        c = self._peek()
        if c is not None and c in "12&":
            redir += c
        if self._peek(len(redir)) != ">":
            return None
        redir += ">"
        if self._peek(len(redir)) == ">":
            redir += ">"
        kind = _REDIRECTIONS.get(redir)
        if kind is None:
            return None
        self._pos += len(redir)
        return Token(kind)

    def _lex_pipe(self) -> Optional[Token]:
        if self._peek() != "|":
            return None
        if self._peek(1) == "&":
            self._pos += 2
            return Token(TokenKind.PIPE_BOTH)
        self._pos += 1
        return Token(TokenKind.PIPE)

    def _lex_and_then(self) -> Optional[Token]:
        c = self._peek()
        if c == "&" and self._peek(1) == "&":
            self._pos += 2
            return Token(TokenKind.AND_THEN_IF)
        if c == ";":
            self._pos += 1
            return Token(TokenKind.AND_THEN)
        return None

    def _subshell_inner(self) -> str:
        self._pos += 1  # the opening parenthesis
        inner = []
        open_parens = 1
        while (c := self._peek()) is not None:
            if c == ")":
                if open_parens == 1:
                    self._pos += 1
                    return "".join(inner)
                open_parens -= 1
            elif c == "(":
                open_parens += 1
            self._pos += 1
            inner.append(c)
        raise ParseError(ParseErrorKind.UNMATCHED_DELIMITER)

    def _lex_subshell(self) -> Optional[Token]:
        c = self._peek()
        if c == "$" and self._peek(1) == "(":
            self._pos += 1
            return Token(TokenKind.SUBSHELL, self._subshell_inner())
        if c == "(":
            return Token(TokenKind.SUBSHELL, self._subshell_inner())
        return None

    def _lex_variable(self) -> Optional[Token]:
        if self._peek() != "$":
            return None
        self._pos += 1
        first = self._peek()
        if first is None or not (first.isalpha() or first == "_"):
            raise ParseError(ParseErrorKind.INVALID_VARIABLE)
        start = self._pos
        while (c := self._peek()) is not None and (c.isalnum() or c == "_"):
            self._pos += 1
        return Token(TokenKind.VARIABLE, self._text[start:self._pos])

    def _lex_word(self) -> Optional[Token]:
        word = []
        quote: Optional[str] = None
        while (c := self._peek()) is not None:
            if quote is not None:
                self._pos += 1
                if c == quote:
                    quote = None
                else:
                    word.append(c)
            elif c.isspace() or c in "|;>&":
                break
            elif c in "'\"":
                self._pos += 1
                quote = c
            else:
                self._pos += 1
                word.append(c)
        if quote is not None:
            raise ParseError(ParseErrorKind.UNTERMINATED_STRING_LITERAL)
        if not word:
            return None
        return Token(TokenKind.WORD, "".join(word))


def tokenize(text: str) -> list[Token]:
    """Return all tokens of ``text``, raising the first error met."""
    return list(Lexer(text))