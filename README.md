# pyminishell

pyminishell holds the building blocks of a small POSIX-style shell:

- a lexer that turns a command line into tokens
- a parser that builds a tree of commands and pipes
- variable expansion with quote removal
- an ordered environment
- the shell's builtin commands

## Installing

```
pip install .
```

## Modules

### `pyminishell.tokens`

`tokenize(line)` returns a list of `Token(type, value)`. The token types are
`TokenType.WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`, `REDIR_APPEND` and `HEREDOC`.

- Spaces and tabs separate words, except inside quotes.
- `|`, `<`, `>`, `<<` and `>>` are operators.
- A word keeps its quotes.
- An unclosed quote runs to the end of the line.

`format_tokens(tokens)` renders a debugging listing of the tokens.

### `pyminishell.parser`

`parse(tokens)` returns a `Command` or a `Pipe`. It returns `None` when there
are no tokens.

- A `Command` has `args` and `redirections`, which is a list of `Redirection`.
- Pipes nest to the right.
- A trailing `|` raises `ParseError`, with `token == "|"`.
- A redirection with no word after it raises `ParseError`, with
  `token == "newline"`.

`command_count(node)` counts the simple commands in the tree. `format_ast(node,
level)` renders the tree for debugging.

```python
from pyminishell.tokens import tokenize
from pyminishell.parser import parse, command_count

tree = parse(tokenize("cat < in.txt | sort > out.txt"))
command_count(tree)  # 2
```

### `pyminishell.env`

`Environment` keeps variables in insertion order. Each variable is an `EnvVar`
with the fields `key`, `value` and `has_no_eq`.

- `Environment.from_envp(...)` builds one from a mapping or from `KEY=VALUE`
  strings.
- `get`, `add`, `set`, `delete` and `sort` read and change the variables.
- `to_envp()` returns `KEY=VALUE` strings for the variables that have a value.
- `split_assignment(var)` splits at the first `=`. It raises `ValueError` if
  there is none.

### `pyminishell.expander`

`expand_line(line, env, status)` expands `$NAME` and `$?` and removes quotes.

- Single quotes keep their contents as written.
- Double quotes still expand variables.
- A `$` that no name follows stays as written.

```python
from pyminishell.env import Environment
from pyminishell.expander import expand_line

env = Environment.from_envp({"USER": "alice"})
expand_line("echo $USER '$USER' $?", env, 3)  # "echo alice $USER 3"
```

`expand_command(command, env, status)` expands a `Command` in place. This
covers its arguments and its redirection targets. Arguments that expand to
nothing are dropped, which is also what `filter_empty_args` does.

### `pyminishell.builtins`

The builtins are `echo` (with `-n`), `cd`, `pwd`, `export`, `unset`, `env` and
`exit`. Each has its own `builtin_*` function. `run_builtin(args, env, status)`
dispatches on `args[0]`, and `is_builtin(name)` tells whether a name is one of
them.

- The builtins write to `sys.stdout` and `sys.stderr` and return an exit status.
- `cd` replaces every `~` with `$HOME` and updates `OLDPWD` and `PWD`.
- `exit` prints `exit` and raises `ShellExit`, whose `status` is the code to
  leave with.

```python
from pyminishell.builtins import run_builtin
from pyminishell.env import Environment

env = Environment()
run_builtin(["export", "NAME=value"], env, 0)  # 0
env.get("NAME")  # "value"
```

## What the package does not do

This package has no interactive prompt and no command to start. It does not
start external programs and does not connect pipelines. It does not open files
for redirections and does not read here-document bodies. It does not handle
signals. It parses, expands and runs builtins. Running whole command lines is
left to the caller.