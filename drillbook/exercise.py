"""Exercise descriptions, compilation through the Rust toolchain and progress state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = r"^\s*///?\s*I\s+AM\s+NOT\s+DONE"
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"

_I_AM_DONE = re.compile(I_AM_DONE_REGEX, re.MULTILINE)


def temp_file() -> str:
    """Return a binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the compiled binary, if there is one."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a command."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """A compile or run command exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr.strip() or "exercise command failed")
        self.output = output


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


def _capture(command: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(command, capture_output=True)


def _output_of(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _clippy_manifest(name: str) -> str:
    return (
        "[package]\n"
        f'name = "{name}"\n'
        'version = "0.0.1"\n'
        'edition = "2018"\n'
        "[[bin]]\n"
        f'name = "{name}"\n'
        f'path = "{name}.rs"'
    )


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


@dataclass
class Exercise:
    """One exercise as listed in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseFailed with the compiler output on failure."""
        source = str(self.path)
        target = temp_file()
        match self.mode:
            case Mode.COMPILE:
                result = _capture(["rustc", source, "-o", target, *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                result = _capture(
                    ["rustc", "--test", source, "-o", target, *RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                Path(CLIPPY_CARGO_TOML_PATH).write_text(
                    _clippy_manifest(self.name), encoding="utf-8"
                )
                # Build a binary as well so the exercise can be run afterwards.
                _capture(["rustc", source, "-o", target, *RUSTC_COLOR_ARGS])
                # Clippy only reports every lint after a clean build.
                _capture(
                    ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                     *RUSTC_COLOR_ARGS]
                )
                result = _capture(
                    ["cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                     *RUSTC_COLOR_ARGS, "--", "-D", "warnings"]
                )
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output_of(result))

    def _run(self) -> ExerciseOutput:
        command = [temp_file()]
        if self.mode is Mode.TEST:
            command.append("--show-output")
        result = _capture(command)
        output = _output_of(result)
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> State:
        """Read the source and report whether the pending marker is still there."""
        source = self.path.read_text(encoding="utf-8")
        if not _I_AM_DONE.search(source):
            return State()
        lines = _lines(source)
        index = next(
            (i for i, line in enumerate(lines) if _I_AM_DONE.search(line)), None
        )
        if index is None:
            raise RuntimeError(f"pending marker in {self} does not sit on one line")
        low = max(index - CONTEXT, 0)
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == index)
                for i, line in enumerate(lines[low:index + CONTEXT + 1], start=low)
            )
        )


class CompiledExercise:
    """A built exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed with its output if it fails."""
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from the text of an info.toml file."""
    data = tomllib.loads(text)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except KeyError as exc:
        raise ValueError(f"missing field {exc.args[0]!r}") from exc