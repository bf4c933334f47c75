"""Check exercises in order and stop at the first one that is not finished."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.status import Status
from rich.text import Text

from drillbook.exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from drillbook.ui import success, warn

_SUCCESS_MESSAGES = {
    Mode.COMPILE: "The code is compiling!",
    Mode.TEST: "The code is compiling, and the tests pass!",
    Mode.CLIPPY: "The code is compiling, and 📎 Clippy 📎 is happy!",
}
_SEPARATOR = "===================="


class ExerciseError(Exception):
    """An exercise failed to compile, run or pass its tests."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


class VerificationFailed(ExerciseError):
    """Verification stopped at an exercise that failed or is still pending."""


def _spinner(message: str) -> Status:
    return Status(message, console=Console(stderr=True))


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first one not finished."""
    for exercise in exercises:
        try:
            finished = _check(exercise, verbose)
        except ExerciseError:
            finished = False
        if not finished:
            raise VerificationFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the test harness of an exercise without prompting."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _check(exercise: Exercise, verbose: bool) -> bool:
    match exercise.mode:
        case Mode.TEST:
            return _compile_and_test(exercise, interactive=True, verbose=verbose)
        case Mode.COMPILE:
            return _compile_and_run_interactively(exercise)
        case Mode.CLIPPY:
            return _compile_only(exercise)


def _compile(exercise: Exercise, status: Status) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as exc:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stderr)
        raise ExerciseError(exercise) from exc


def _compile_only(exercise: Exercise) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        _compile(exercise, status).close()
    success(f"Successfully compiled {exercise}!")
    return _prompt_for_completion(exercise)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as exc:
                status.stop()
                warn(f"Ran {exercise} with errors")
                print(exc.output.stdout)
                print(exc.output.stderr)
                raise ExerciseError(exercise) from exc
    success(f"Successfully ran {exercise}!")
    return _prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _spinner(f"Testing {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as exc:
                status.stop()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(exc.output.stdout)
                raise ExerciseError(exercise) from exc
    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    return _prompt_for_completion(exercise) if interactive else True


def _prompt_for_completion(exercise: Exercise, output: str | None = None) -> bool:
    state = exercise.state()
    if state.done:
        return True

    console = Console(highlight=False, soft_wrap=True, emoji=False)
    separator = Text(_SEPARATOR, style="bold")

    print()
    print(f"🎉 🎉  {_SUCCESS_MESSAGES[exercise.mode]} 🎉 🎉")
    print()

    if output is not None:
        print("Output:")
        console.print(separator)
        print(output)
        console.print(separator)
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False