"""Run a single exercise without prompting for completion."""

from __future__ import annotations

from rich.console import Console
from rich.status import Status

from drillbook.exercise import Exercise, ExerciseFailed, Mode
from drillbook.ui import success, warn
from drillbook.verify import ExerciseError, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run, or test, one exercise; raise ExerciseError if it fails."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with Status(f"Compiling {exercise}...", console=Console(stderr=True)) as status:
        try:
            compiled = exercise.compile()
        except ExerciseFailed as exc:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(exc.output.stderr)
            raise ExerciseError(exercise) from exc

        with compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as exc:
                status.stop()
                print(exc.output.stdout)
                print(exc.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise ExerciseError(exercise) from exc

    print(output.stdout)
    success(f"Successfully ran {exercise}")