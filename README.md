# ftkit

Helpers that behave like the classic C string, memory and `printf`
routines, a singly linked list, a buffered line reader, and a command that
runs two programs connected by a pipe.

Text arguments are read the way a C string would be: anything after an
embedded NUL is ignored. Failed searches return `None`; invalid counts or
spans raise `ValueError`.

## Modules

- `ftkit.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`. Each takes a one-character string or an integer
  code point; only ASCII ranges count. The case conversions return the same
  kind of value they were given.
- `ftkit.search`: `find_char`, `rfind_char`, `strncmp`, `memchr`, `memcmp`,
  `strnstr`. Positions are indices; searching for NUL finds the terminator at
  the string's length. The comparisons return the difference of the first
  pair of characters or bytes that differ.
- `ftkit.numbers`: `atoi` parses a leading decimal number after optional
  whitespace and one sign, saturating at the 64-bit limits and truncating the
  result to a 32-bit int. `itoa` gives the decimal text of a 32-bit int and
  raises `OverflowError` outside that range.
- `ftkit.memory`: `memset`, `bzero`, `calloc`, `memcpy`, and
  `memmove(buf, dest, src, n)`, which copies within one buffer between
  offsets that may overlap. Buffers are `bytearray`s. `calloc` raises
  `MemoryError` when the total size overflows a 64-bit size.
- `ftkit.strings`: `substr`, `strjoin`, `strtrim`, `split` (the non-empty
  pieces between a single-character separator), `strmapi`, `striteri`
  (replaces elements of a mutable sequence in place), and the bounded copies
  `strlcpy` and `strlcat` over NUL-terminated `bytearray` buffers.
- `ftkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`. The stream is
  any object with a `write` method taking text, or an integer file descriptor
  (written as UTF-8); it defaults to standard output.
- `ftkit.linkedlist`: `Node` (`content`, `next`) and `LinkedList`, with
  `push_front`, `append`, `last`, `len()`, iteration over contents,
  `clear(delete)`, `for_each(f)` and `map(f, delete)`. If `f` raises during
  `map`, the contents mapped so far are passed to `delete` and the exception
  propagates.
- `ftkit.linereader`: `LineReader(source, buffer_size=42)` and
  `read_lines(source, buffer_size=42)`. The source is a file descriptor or an
  object whose `read(n)` returns bytes or text. Lines keep their newline; the
  last may lack one. `read_line()` returns `None` once the source is
  exhausted. The buffer size must be between 1 and 8192000.
- `ftkit.spec`: `FormatSpec` and `parse_spec(fmt, pos)`, which reads the
  flags, width, precision and conversion character following a `%`.
- `ftkit.textconv`: `format_char`, `format_string`, `format_pointer`,
  `format_percent`, and the helpers `pad_spaces`, `pad_zeros`,
  `count_decimal_digits`, `count_hex_digits`. A `None` string renders as
  `(null)` and a null pointer as `(nil)`.
- `ftkit.numconv`: `format_decimal` (for `%d`/`%i`) and `sign_prefix`.
- `ftkit.hexconv`: `format_hex(value, spec, upper=False)`.
- `ftkit.unsignedconv`: `format_unsigned` (for `%u`).
- `ftkit.printer`: `format_output(fmt, *args)` returns the formatted text;
  `printf(fmt, *args, file=None)` writes it to a stream or descriptor
  (standard output by default) and returns the number of characters written.
  Supported conversions are `c s p d i u x X %` with the flags `#`, space,
  `+`, `-` and `0`, a width and a precision. An unknown conversion character
  produces nothing and takes no argument. Too few arguments raise
  `TypeError`, and surplus arguments are ignored.
- `ftkit.pipex`: `run_pipeline(infile, cmd1, cmd2, outfile, env=None)`, `main`,
  and the helpers `include_quote`, `split_command`, `search_paths`,
  `find_executable`, `exit_status`.

## Examples

```python
from ftkit.printer import format_output
from ftkit.strings import split
from ftkit.numbers import atoi

format_output("[%5d|%-4x|%.3s]", 42, 255, "hello")   # '[   42|ff  |hel]'
split("  a  b c ", " ")                              # ['a', 'b', 'c']
atoi("   -123abc")                                   # -123
```

```python
from ftkit.linereader import read_lines

with open("notes.txt", "rb") as fh:
    for line in read_lines(fh, 42):
        print(line.decode(), end="")
```

## Command

```
ftkit-pipex infile "cmd1 args" "cmd2 args" outfile
```

This acts like `< infile cmd1 args | cmd2 args > outfile` in a shell. The
output file is created or truncated with mode 0644. A command is looked up
as given first, then in each directory of `PATH`. A command that cannot be
found is reported as `name: command not found` on standard error and gives
status 127. The exit status is that of the second command, or 128 plus the
signal number if it was killed by a signal. Fewer than four arguments print
a usage line and give status 1.

## What it does not do

- Commands are split on spaces only. Quotes are not interpreted, and there
  is no shell: no variables, globbing or redirections inside a command.
- The pipeline always has exactly two commands and reads from a file; there
  is no here-document input and no appending to the output file.
- There is no interactive shell or prompt.

## Tests

```
pip install -e ".[test]"
pytest
```