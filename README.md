# shellkit

Building blocks for a small interactive shell: character and string
helpers, printf-style output, a buffered line reader, here-document
handling with `$VAR` expansion, and opening the files of input and
output redirections. The package has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `shellkit.chars`

- `atoi(text)` parses a leading integer. It skips leading whitespace and
  honours one sign. Two signs in a row give 0. The result wraps like a
  signed 32-bit integer.
- `itoa(number)` renders an integer in decimal.
- `is_alnum`, `is_alpha`, `is_ascii`, `is_digit` and `is_print` take a
  one-character string or an integer code. `is_print` does not count the
  space as printable.
- `to_lower` and `to_upper` change ASCII letters only. They return the
  same kind of value they were given, a string or a code.
- `split(text, sep)` splits on a single character and drops empty words.

### `shellkit.text`

- `find_char` and `rfind_char` return an index or `None`. Searching for
  `"\0"` returns the length of the string.
- `find_within(haystack, needle, limit)` finds a needle that lies wholly
  within the first `limit` characters. An empty needle is found at 0.
- `compare_prefix(first, second, count)` compares at most `count`
  characters. `compare_bytes(first, second, count)` compares the first
  `count` bytes. Both return the difference of the first pair that
  differs, or 0.
- `trim(text, charset)` strips the characters in `charset` from both ends.
- `substring(text, start, length)` returns at most `length` characters
  starting at `start`.
- `join(first, second)` concatenates two strings.
- `bounded_copy(source, size)` and `bounded_concat(dest, source, size)`
  work as if the text went into a buffer of `size` characters that keeps
  room for a terminator. Each returns `(text, length)`, where `length` is
  the length the full result would have had.
- `map_indexed(text, func)` builds a string from `func(index, char)` for
  each character.

### `shellkit.output`

- `put_char`, `put_str`, `put_endl` and `put_nbr` write to a stream,
  which is standard output by default. `put_endl` writes nothing for an
  empty string.
- `format_printf(fmt, *args)` handles the conversions
  `%c %s %p %d %i %u %x %X %%`:
  - `%s` of `None` gives `(null)`.
  - `%p` of `None` or 0 gives `(nil)`.
  - `%d` and `%i` wrap to a signed 32-bit value.
  - `%u`, `%x` and `%X` wrap to an unsigned 32-bit value.
  - Any other conversion is dropped together with its percent sign.
- `print_formatted(fmt, *args, stream=None)` writes the formatted text and
  returns the number of characters written.

### `shellkit.linereader`

`LineReader(buffer_size=1)` reads from a raw file descriptor
`buffer_size` bytes at a time. Each reader keeps a separate store of
leftover data for every descriptor.

- `read_line(fd)` returns the next line with its newline. It returns
  `None` at end of file. A read error raises `OSError` and drops what
  was kept for that descriptor.
- `discard(fd)` drops what is kept for a descriptor.

### `shellkit.heredoc`

- `expand_line(line, env, exit_code)` expands `$NAME` and `$?`.
  - `env` may be a mapping or an iterable of `KEY=VALUE` strings.
  - A name is made of ASCII letters and digits.
  - An unknown name expands to nothing.
  - A `$` at the end of the line is kept.
- `has_quote(text)` tells whether a string holds `'` or `"`.
- `heredoc_path(index, directory=".")` returns the path of the document's
  file, `<directory>/.here_doc_<index>`.
- `write_heredoc(stream, limiter, lines=None, env=None, exit_code=0,
  expand=True, warn=None)` copies lines to `stream` until a line equal to
  the limiter.
  - With `lines=None` it prompts with `> ` on the terminal.
  - Running out of lines writes a warning to `warn`, which is standard
    error by default, and returns `True`.
- `open_heredocs(tokens, lines=None, env=None, exit_code=0, directory=".",
  unquote=None)` writes every `<<` document of a token list to its file.
  Documents are numbered from 0, and the function returns how many were
  written.
  - A limiter token that holds a quote turns expansion off.
  - `unquote` turns the limiter token into the limiter text.
  - A missing limiter, or one that starts with `>`, `<` or `|`, raises
    `HeredocError`.
  - An interruption with Ctrl-C removes the files written so far and
    raises `HeredocError` with `exit_code` 130.
- `remove_heredocs(directory=".")` deletes the numbered files from 0 up
  to the first missing one. It returns how many it removed.

### `shellkit.redirections`

- `count_redirections(marker, tokens)` counts the tokens that start with
  `marker`.
- `strip_redirections(tokens, marker)` returns the tokens without those
  redirections and the targets that follow them.
- `open_input_files(tokens, directory=".", unquote=None)` opens binary
  file objects for reading, in order:
  - `<<` opens the next here-document file.
  - `<>` opens its target and creates it if it is missing.
  - `<` opens its target.
- `open_output_files(tokens, unquote=None)` opens binary file objects for
  writing:
  - `>` truncates its target.
  - `>>` appends to its target, using the token as it stands.
  - Missing files are created.

Both open functions close what they had opened if a later file fails.
They then raise `RedirectionError`, whose `exit_code` is 2 for a missing
target and 1 otherwise. The caller closes the files returned.

## Example

```python
from shellkit.chars import split
from shellkit.heredoc import expand_line
from shellkit.output import format_printf

tokens = split("cat << EOF", " ")            # ['cat', '<<', 'EOF']
line = expand_line("home is $HOME, last status $?", ["HOME=/home/user"], 0)
text = format_printf("%s has %d tokens", "cat << EOF", len(tokens))
```

## What it does not do

This is a library, not a shell. It has no command to start and no prompt
loop. It does not tokenise or parse command lines beyond `split`. It does
not run programs, set up pipes, implement builtins or attach the opened
files to a process's standard input and output. Those parts are left to
the program that uses it.