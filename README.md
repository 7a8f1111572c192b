# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file. Its output feeds the second command. The second command's output
is written to an output file. The effect is that of the shell line

```
< infile cmd1 | cmd2 > outfile
```

## Installation

```
pip install .
```

## Command line

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

Exactly four arguments are required. Each command is split on spaces into a
program name and its arguments. Empty parts are dropped, and no quoting or
other shell syntax is interpreted. If the program name names an existing
file, it is used as given. Otherwise it is looked up, in order, in the
non-empty directories listed in `PATH`.

Example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

The output file is created with mode `0777`, less the umask, if it is
missing. If it exists, it is truncated.

### Errors and exit status

Error messages go to standard error. The exit status is:

- `1` for a wrong number of arguments or a missing or empty `PATH`.
- `1` when the output file cannot be opened, or the second command cannot
  be started.
- `127` when the second command cannot be found (`command not found`).
- Otherwise, the exit status of the second command. If the second command
  was killed by a signal, the status is 128 plus the signal number.

Problems on the first side are reported on standard error but do not change
the exit status. Such problems are an input file that cannot be opened, or a
first command that cannot be found or started. In these cases the second
command still runs, with empty input.

## Library use

`pipex.cli.main(argv=None)` runs the command line with the given argument
list, or with `sys.argv[1:]` by default, and returns the exit status.

`pipex.cli.run_pipeline(infile, first, second, outfile, env=None)` runs the
pipeline and returns the second command's exit status. `env` is a mapping
used as the commands' environment and for the `PATH` lookup; it defaults to
`os.environ`. Problems on the second side raise `pipex.paths.PipexError`,
which carries `message` and `code`.

`pipex.cli.parse_command(command, env)` splits a command string on spaces and
locates its program. It returns `(path, args)` and raises `PipexError` with
code 127 when the program is not found.

`pipex.paths` also provides:

- `find_command(command, env)` resolves a program name the way the command
  line does. It returns `None` when nothing matches.
- `check_environment(env)` returns `env["PATH"]`, or raises `PipexError` if
  it is missing or empty.
- `find_path_entry(env)` returns `env["PATH"]`, which may be empty. It
  raises `PipexError` when `PATH` is missing.

### Smaller helpers

`pipex.strings` holds text helpers that follow the C library semantics:

- `split`, `strtrim` and `substr` work on text.
- `strchr`, `strrchr` and `strnstr` return an index, or `None` when there is
  no match.
- `strncmp` compares bytes.
- `atoi` and `atol` parse leading integers, wrapping to 32 and 64 bits.
- `itoa` formats a 32-bit integer.

`pipex.lines.LineReader(stream, buffer_size=42)` reads a text or binary
stream in chunks. Use `next_line()` to get one line; it returns `None` at the
end. You can also iterate over the reader. Each line keeps its newline.

`pipex.formatting.format_printf(fmt, *args)` returns formatted text, and
`printf(fmt, *args)` writes it to standard output and returns the number of
bytes written. Both support the `%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`,
`%X` and `%%` conversions, without flags, width or precision.

## Limits

`pipex` joins exactly two commands. It does not chain more commands, and it
does not read input from a here-document. Commands are not run through a
shell, so redirections, quotes and variables inside a command string are
passed to the program as plain words.

## Running the tests

```
pip install .[test]
pytest
```