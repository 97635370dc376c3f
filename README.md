# rustdrill

A runner for small Rust exercises. Each exercise is a `.rs` file that does not
yet compile, fails its tests or upsets Clippy; you fix it, and `rustdrill`
compiles and runs it for you, shows the compiler output, and moves you on to
the next one once it passes and you remove its `// I AM NOT DONE` marker.

## Requirements

- Python 3.11 or later
- A Rust toolchain with `rustc` on your `PATH` (and `cargo clippy` for the
  Clippy exercises)

## Installation

```
pip install .
```

## The exercise directory

`rustdrill` is run from a directory that holds an `info.toml` file listing the
exercises in their recommended order:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."

[[exercises]]
name = "if1"
path = "exercises/if/if1.rs"
mode = "test"
hint = "Compare the two numbers."
```

`mode` is one of:

- `compile` – the file is compiled with `rustc` as a binary and run
- `test` – the file is compiled with `rustc --test` and its tests are run
- `clippy` – a manifest is written to `./exercises/clippy/Cargo.toml` and the
  exercise is linted with `cargo clippy`, with warnings treated as errors

An exercise counts as done once it passes and its `// I AM NOT DONE` line has
been removed.

## Usage

Every command first checks that `info.toml` exists in the current directory
and that `rustc --version` runs.

```
rustdrill
```

prints a welcome banner and a short introduction. The subcommands are:

```
rustdrill watch          # verify in order, re-checking whenever a file changes
rustdrill verify         # verify every exercise once, in order
rustdrill run NAME       # compile and run (or test) a single exercise
rustdrill run next       # run the first exercise that is not done yet
rustdrill hint NAME      # print the hint for an exercise
rustdrill list           # table of exercises with their status
rustdrill lsp            # write rust-project.json for rust-analyzer
```

Options:

```
rustdrill --nocapture run NAME   # also show the output of passing tests
rustdrill --version              # print the version
```

`list` accepts:

- `-p`, `--paths` – show only the paths
- `-n`, `--names` – show only the names
- `-f`, `--filter PATTERNS` – comma separated substrings to match against
  names and paths
- `-u`, `--unsolved` – only exercises not yet done
- `-s`, `--solved` – only exercises already done

It ends with a line reporting how many exercises you have completed.

### Watch mode

`rustdrill watch` checks the exercises in order and stops at the first one that
fails. It then watches `./exercises` and, whenever a `.rs` file there is
created or saved, re-checks that exercise followed by the others still pending.
While it runs you can type:

- `hint` – print the hint for the exercise that failed last
- `clear` – clear the screen
- `quit` – leave watch mode
- `help` – list these commands

### Output

Set the environment variable `NO_EMOJI` to any value to replace the emoji in
the output with plain characters. Colours are used only when standard output
is a terminal; `NO_COLOR` turns them off and `CLICOLOR_FORCE` (any value but
`0`) forces them on.

## Exit status

`verify` and `run` exit with status 1 when an exercise fails; `run` and `hint`
exit with status 1 when the exercise cannot be found; `watch` exits with
status 1 when the exercises directory cannot be watched. `rustdrill` also exits
with status 1 when it is started outside a directory holding `info.toml`, when
`rustc` cannot be found, or when the command line is not understood.

## Using it from Python

The pieces behind the commands can be used directly:

```python
from rustdrill.exercise import load_exercises
from rustdrill.cli import find_exercise, list_exercises

exercises = load_exercises("info.toml")
for line in list_exercises(exercises, unsolved=True):
    print(line)
print(find_exercise("next", exercises).hint)
```

`Exercise.state()` returns `None` for a finished exercise, or the lines around
its `I AM NOT DONE` marker otherwise; `Exercise.compile()` raises
`CompileError` on failure. `rustdrill.verify.verify` and `rustdrill.run.run`
raise `ExerciseFailed` for an exercise that does not pass.

## Worked examples

The `rustdrill.drills` package holds solved exercises written in Python, one
module per topic (`basics`, `collections`, `strings`, `structs`, `enums`,
`hashmaps`, `quiz`, `errors`, `traits`, `iterators`, `threads`, `generics`,
`options`), for comparing approaches:

```python
from rustdrill.drills.basics import calculate_price_of_apples
from rustdrill.drills.strings import replace_me

calculate_price_of_apples(65)            # 65
replace_me("I think cars are cool")      # "I think balloons are cool"
```

There is no worked example for the type conversion exercises.