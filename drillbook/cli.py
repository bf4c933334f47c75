"""Command-line entry point: list, run, hint, verify and watch exercises."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from drillbook.exercise import Exercise, load_exercises
from drillbook.run import run
from drillbook.verify import ExerciseError, VerificationFailed, verify

INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
EXERCISES_DIR = "./exercises"
DEBOUNCE_SECONDS = 2.0

_WELCOME = "\n".join(
    (
        "",
        "       welcome to...",
        "",
        "     d r i l l b o o k",
        "",
    )
)

_FINISH = "\n".join(
    (
        "",
        "+----------------------------------------------------+",
        "|          You made it to the Fe-nish line!          |",
        "+--------------------------  ------------------------+",
        "                          \\/                         ",
        "     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒   ",
        "   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒ ",
        "   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒ ",
        " ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒ ",
        "   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓ ",
        "     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒   ",
        "       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒     ",
        "         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒       ",
        "           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒         ",
        "             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒           ",
        "           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒         ",
        "         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒       ",
        "       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒     ",
        "       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒     ",
        "           ▒▒  ▒▒                      ▒▒  ▒▒         ",
        "",
        "We hope you enjoyed learning about the various aspects of Rust!",
        "If you noticed any issues, please don't hesitate to report them.",
        "You can also contribute your own exercises to help the greater community!",
        "",
        "Before reporting an issue or contributing, please read the contribution guidelines.",
    )
)


class _Parser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="drillbook",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument(
        "--nocapture",
        action="store_true",
        help="Show outputs from the test exercises",
    )
    commands = parser.add_subparsers(dest="alias")

    verify_cmd = commands.add_parser(
        "verify", aliases=["v"],
        help="Verifies all exercises according to the recommended order",
    )
    verify_cmd.set_defaults(command_name="verify")

    watch_cmd = commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_cmd.set_defaults(command_name="watch")

    run_cmd = commands.add_parser(
        "run", aliases=["r"], help="Runs/Tests a single exercise"
    )
    run_cmd.add_argument("name")
    run_cmd.set_defaults(command_name="run")

    hint_cmd = commands.add_parser(
        "hint", aliases=["h"], help="Returns a hint for the current exercise"
    )
    hint_cmd.add_argument("name")
    hint_cmd.set_defaults(command_name="hint")

    list_cmd = commands.add_parser(
        "list", aliases=["l"], help="Lists the exercises available"
    )
    list_cmd.set_defaults(command_name="list")
    return parser


def _find(exercises: Iterable[Exercise], name: str) -> Exercise | None:
    return next((exercise for exercise in exercises if exercise.name == name), None)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, carry out the command and return the exit status."""
    args = _parser().parse_args(argv)
    command = getattr(args, "command_name", None)

    if command is None:
        print(_WELCOME)

    if not Path(INFO_FILE).exists():
        program = Path(sys.argv[0]).name or "drillbook"
        print(f"{program} must be run from the directory that holds {INFO_FILE}")
        print("Try `cd` into the exercises' root directory!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(Path(INFO_FILE).read_text(encoding="utf-8"))
    verbose = args.nocapture

    match command:
        case "list":
            for exercise in exercises:
                print(exercise.name)
        case "run":
            exercise = _find(exercises, args.name)
            if exercise is None:
                print("No exercise found for your given name!")
                return 1
            try:
                run(exercise, verbose)
            except ExerciseError:
                return 1
        case "hint":
            exercise = _find(exercises, args.name)
            if exercise is None:
                print("No exercise found for your given name!")
                return 1
            print(exercise.hint)
        case "verify":
            try:
                verify(exercises, verbose)
            except VerificationFailed:
                return 1
        case "watch":
            try:
                watch(exercises, verbose)
            except OSError as error:
                print(f"Error: Could not watch your progress. Error message was {error!r}.")
                print(
                    "Most likely you've run out of disk space or your "
                    "'inotify limit' has been reached."
                )
                return 1
            print("🎉 All exercises completed! 🎉")
            print(_FINISH)
        case None:
            print(Path(DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
    return 0


class _SharedHint:
    """Hint of the exercise that failed last, shared with the shell thread."""

    def __init__(self, text: str) -> None:
        self._lock = threading.Lock()
        self._text = text

    @property
    def text(self) -> str:
        with self._lock:
            return self._text

    @text.setter
    def text(self, value: str) -> None:
        with self._lock:
            self._text = value


def _watch_shell(hint: _SharedHint) -> None:
    try:
        for raw in sys.stdin:
            command = raw.strip()
            if command == "hint":
                print(hint.text)
            elif command == "clear":
                print("\x1b[2J\x1b[1;1H")
            else:
                print(f"unknown command: {command}")
    except (OSError, ValueError) as error:
        print(f"error reading command: {error}")


def _spawn_watch_shell(hint: _SharedHint) -> None:
    print("Type 'hint' to get help or 'clear' to clear the screen")
    threading.Thread(target=_watch_shell, args=(hint,), daemon=True).start()


class _ChangeCollector(FileSystemEventHandler):
    """Queue the paths of files that were created or changed."""

    def __init__(self, changes: queue.Queue[Path]) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))


def _debounced(changes: queue.Queue[Path]) -> list[Path]:
    """Block for a change, then gather further ones until things settle."""
    pending = {changes.get(): None}
    while True:
        try:
            pending[changes.get(timeout=DEBOUNCE_SECONDS)] = None
        except queue.Empty:
            return list(pending)


def _ends_with(path: Path, suffix: Path) -> bool:
    parts = suffix.parts
    return not parts or path.parts[-len(parts):] == parts


def _clear_screen() -> None:
    print("\x1bc")


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Verify, then re-verify from each edited exercise until all are finished."""
    exercises = list(exercises)
    root = Path(EXERCISES_DIR)
    if not root.is_dir():
        raise FileNotFoundError(f"cannot watch {root}: no such directory")

    changes: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeCollector(changes), str(root), recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, verbose)
            return
        except VerificationFailed as failure:
            hint = _SharedHint(failure.exercise.hint)
        _spawn_watch_shell(hint)
        while True:
            for path in _debounced(changes):
                if path.suffix != ".rs" or not path.exists():
                    continue
                filepath = path.resolve()
                pending = itertools.dropwhile(
                    lambda exercise: not _ends_with(filepath, exercise.path), exercises
                )
                _clear_screen()
                try:
                    verify(pending, verbose)
                    return
                except VerificationFailed as failure:
                    hint.text = failure.exercise.hint
    finally:
        observer.stop()
        observer.join()


def rustc_exists() -> bool:
    """Tell whether the Rust compiler can be started."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return result.returncode == 0


if __name__ == "__main__":
    sys.exit(main())