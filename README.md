# drillbook

drillbook is a runner for small programming exercises. It compiles each
exercise, runs it or its tests, and tells you which one to work on next. It
also ships a set of worked solutions to the topics such exercises cover.

## Installation

```
pip install .
```

The runner starts the Rust toolchain: `rustc` for every exercise, and `cargo`
for linted exercises. Both must be on your `PATH`; if `rustc --version` cannot
be run, every command stops with exit status 1.

## The info.toml file

Exercises are listed in an `info.toml` file, in the order they are checked:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."
```

`mode` is one of:

- `compile` – the file is compiled into a program, which is then run;
- `test` – the file is compiled as a test harness and its tests are run with
  `--show-output`;
- `clippy` – the file is compiled, then linted with `cargo clippy` with every
  warning treated as an error. For this the runner writes
  `./exercises/clippy/Cargo.toml`, naming the exercise as the package and its
  binary.

An exercise that builds and passes still counts as unfinished while a line of
it holds an `// I AM NOT DONE` comment. Remove the comment to move on.

## Usage

Run every command from the directory that holds `info.toml`; elsewhere the
runner stops with exit status 1. Command-line usage errors also exit with
status 1.

```
drillbook                 # print the welcome text, then default_out.txt
drillbook list            # list every exercise by name          (alias: l)
drillbook verify          # check all exercises in order          (alias: v)
drillbook watch           # re-check whenever a file changes      (alias: w)
drillbook run NAME        # compile and run, or test, one exercise (alias: r)
drillbook hint NAME       # show the hint for one exercise        (alias: h)
```

With no command, drillbook prints a welcome banner and then the contents of
`default_out.txt` from the current directory.

`verify` stops with exit status 1 at the first exercise that fails to compile,
fails to run, fails its tests, or still holds the `I AM NOT DONE` comment. For
a pending exercise it shows the lines around the comment, two either side, and
for a `compile` exercise also the program's output.

`run` checks a single exercise and does not look for the comment. It exits
with status 1 if the exercise fails or no exercise has that name.

`watch` verifies once, then watches the `./exercises` directory. When a `.rs`
file is created or changed, it waits until changes have settled for two
seconds and verifies again from the exercise at that path onwards. While it
waits you can type `hint` to see the hint for the exercise you are stuck on,
or `clear` to clear the screen. When every exercise is finished it prints a
closing message and exits.

Add `--nocapture` before the command to show the output of test exercises:

```
drillbook --nocapture run NAME
```

## Using it from Python

```python
from pathlib import Path

from drillbook.exercise import ExerciseFailed, load_exercises
from drillbook.verify import VerificationFailed, verify

exercises = load_exercises(Path("info.toml").read_text(encoding="utf-8"))

try:
    verify(exercises, verbose=False)
except VerificationFailed as failure:
    print("stuck on", failure.exercise.name)

exercise = exercises[0]
state = exercise.state()          # state.done, state.context (ContextLine items)
try:
    with exercise.compile() as compiled:   # the binary is removed on exit
        output = compiled.run()            # ExerciseOutput(stdout, stderr)
except ExerciseFailed as error:
    print(error.output.stderr)
```

- `drillbook.exercise` – `Mode`, `Exercise`, `CompiledExercise`,
  `ExerciseOutput`, `ExerciseFailed`, `State`, `ContextLine` and
  `load_exercises`.
- `drillbook.verify` – `verify(exercises, verbose)` and
  `test(exercise, verbose)`; failures raise `ExerciseError`, and `verify`
  raises its subclass `VerificationFailed`.
- `drillbook.run` – `run(exercise, verbose)`, which raises `ExerciseError` on
  failure.
- `drillbook.cli` – `main(argv=None)`, returning the exit status, `watch` and
  `rustc_exists`.
- `drillbook.ui` – `warn` and `success`, which print coloured status lines.

## Worked solutions

The `drillbook.exercises` package holds reference solutions as importable
functions and classes, one module per topic: `variables`, `functions`,
`control`, `primitive_types`, `strings`, `modules`, `macros`, `conversions`,
`vectors_maps`, `error_handling`, `stdlib_types`, `option`, `enums`,
`structs`, `generics`, `traits`, `move_semantics`, `threads`, `clippy` and
`quizzes`.

## What it does not include

drillbook does not come with the exercise source files, an `info.toml` or a
`default_out.txt`; you supply these in the directory you run it from. It does
not compile anything itself and depends on the Rust toolchain being installed.

## Running the tests

```
pip install ".[test]"
pytest
```