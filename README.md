# shellparse

A small lexer and parser for a shell-like command language. It turns a command
line into a tree of commands that holds its arguments, variables, subshells,
redirections, pipes and command sequencing.

## Installation

```
pip install shellparse
```

To run the tests:

```
pip install "shellparse[test]"
pytest
```

## What it understands

| Syntax                   | Token / meaning                                   |
|--------------------------|---------------------------------------------------|
| `word`, `'a b'`, `"a b"` | a plain argument, with the quotes removed         |
| `$NAME`                  | a variable reference (letter or `_` first)        |
| `$(cmd)` or `(cmd)`      | a subshell, parsed recursively                    |
| `>`, `1>`, `>>`, `1>>`   | redirect stdout to a file                         |
| `2>`, `2>>`              | redirect stderr to a file                         |
| `&>`, `&>>`              | redirect both streams to a file                   |
| `\|`                     | pipe stdout into the next command                 |
| `\|&`                    | pipe stdout and stderr into the next command      |
| `;`                      | another command follows, unconditionally          |
| `&&`                     | another command follows, conditionally            |

Appending (`>>`) and overwriting (`>`) produce the same redirection and are not
told apart in the result.

## Tokenizing

```python
from shellparse.lexer import tokenize, TokenKind

tokens = tokenize("echo $HOME | grep home")
assert [t.kind for t in tokens] == [
    TokenKind.WORD, TokenKind.VARIABLE, TokenKind.PIPE,
    TokenKind.WORD, TokenKind.WORD,
]
assert tokens[1].value == "HOME"
```

Each `Token` has a `kind` (a `TokenKind`) and a `value`. The `value` is set for
words, variables and subshells and is `None` for the others. `Lexer` is the
iterator behind `tokenize`. When it meets an unterminated quote, an unmatched
parenthesis or an invalid variable name, it raises a `ParseError`. You can keep
iterating after such an error. `tokenize` collects every token and raises the
first error it meets.

## Parsing

```python
from pathlib import Path
from shellparse.parser import parse, FileRedir, RedirType, Variable, Word

command = parse("echo hello > out.txt && echo $USER")

assert command.argv == [Word("echo"), Word("hello")]
assert command.redirect_to == [FileRedir(RedirType.STDOUT, Path("out.txt"))]
assert command.and_then.conditional is True
assert command.and_then.target.argv == [Word("echo"), Variable("USER")]
```

A `Command` has four parts:

- `argv`: a list of `Word`, `Variable` and `Subshell` arguments.
- `redirect_to`: a list of `FileRedir` entries, in the order they appear.
- `pipe_to`: an optional `PipeTo` that holds a `RedirType` and the next command.
- `and_then`: an optional `AndThen` that holds the next command and whether it is
  conditional (`&&`) or not (`;`).

`Parser` accepts any iterable of tokens. `Parser.parse_command()` does the work,
and `parse(text)` is shorthand for `Parser(Lexer(text)).parse_command()`.
`redir_type_for(token)` maps a redirection or pipe token to its `RedirType`. For
any other token it raises `ParseError`.

## Errors

`parse` raises `ParseErrors` when the input cannot be parsed. An empty command
also counts as an error, and in that case the exception holds no errors. A
`ParseErrors` supports iteration and `len()`. Each `ParseError` it holds
carries a `ParseErrorKind`:

```python
from shellparse.errors import ParseErrorKind, ParseErrors
from shellparse.parser import parse

try:
    parse('echo "unterminated')
except ParseErrors as errors:
    assert [e.kind for e in errors] == [ParseErrorKind.UNTERMINATED_STRING_LITERAL]
```

## What it does not do

This package only parses. It does not run commands, expand variables, open
redirection files or set up pipes, and it has no interactive shell or command
to start.