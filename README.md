# minishell

A small interactive shell front end. It shows a prompt, reads a line and
splits it into tokens. Each whitespace character and each of `|`, `>`, `<`,
`"` and `'` is a delimiter, and every delimiter becomes a token of its own.
Each run of other characters forms one token. The shell prints the tokens it
finds.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
minishell
```

Type a line and the shell lists its tokens, one per line, on standard output:

```
minishell> ls -l | wc
Token 0 ls
Token 1  
Token 2 -l
Token 3  
Token 4 |
Token 5  
Token 6 wc
```

Each non-empty line is added to the shell's in-memory history
(`Shell.history`). A line that yields more than 99 tokens is rejected. The
shell writes an error message to standard error and goes on to the next line.

Press Ctrl+D (end of input) to leave. The shell then writes `exit` to
standard error. If you start it with any arguments, it writes
`Error. Execution don't allow arguments` to standard error and returns
without starting the prompt.

## What it does not do

This shell only tokenizes. It does not run commands, set up pipes or
redirections, treat quoted text as a unit, expand variables, or provide
built-in commands. It does not keep history between sessions.

## Library use

You can call the tokenizer yourself:

```python
from minishell.tokenizer import tokenize, format_tokens, is_delimiter

tokens = tokenize("cat <in >out")
print(format_tokens(tokens), end="")
```

If a line yields `MAX_TOKENS` (100) or more tokens, `tokenize` raises
`minishell.tokenizer.TooManyTokensError`, which is a subclass of
`ValueError`.

The `Shell` class in `minishell.shell` accepts a reader function, an output
stream and an error stream. The reader receives the prompt and returns a line,
or returns `None` (or raises `EOFError`) at end of input. This lets you drive
the shell from tests or from other programs. `Shell.handle_line` processes a
single line and returns its tokens. `Shell.run` loops until the input runs out
and then returns 0.

```python
import io
from minishell.shell import Shell

lines = iter(["echo hi"])
out, err = io.StringIO(), io.StringIO()
Shell(lambda prompt: next(lines, None), out, err).run()
print(out.getvalue(), end="")   # Token 0 echo / Token 1   / Token 2 hi
```

The package also provides small helper modules:

- `minishell.chars`: ASCII character classification and case conversion
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`,
  `to_lower`, `to_upper`). Each function accepts a one-character string or an
  integer code.
- `minishell.memory`: byte-buffer operations on `bytearray` objects
  (`bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`).
- `minishell.textops`: string helpers (`strlen`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi`, `striteri`). It also has bounded copies into NUL-terminated
  `bytearray` buffers (`strlcpy`, `strlcat`).
- `minishell.linkedlist`: a singly linked list, `LinkedList`, made of
  `ListNode` objects. It supports `add_front`, `add_back`, `last`,
  `remove_first`, `clear`, `iterate`, `map`, iteration and `len()`.
- `minishell.output`: writers for characters, strings, lines and numbers
  (`put_char`, `put_str`, `put_endl`, `put_nbr`). They write to standard
  output unless you give a stream.
- `minishell.numbers`: `atoi`, which parses a leading decimal integer, and
  `itoa`.

## Running the tests

```
pip install .[test]
pytest
```