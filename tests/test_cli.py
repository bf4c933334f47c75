import subprocess
from pathlib import Path

import pytest

from drillbook import cli

SOURCES = {
    "compSuccess": "fn main() {\n}\n",
    "testSuccess": (
        "#[test]\nfn passing() {\n"
        '    println!("THIS TEST TOO SHALL PASS");\n'
        "    assert!(true);\n}\n"
    ),
    "compFailure": "fn main() {\n    let\n}\n",
    "compNoExercise": "fn main() {\n}\n",
    "testFailure": "#[test]\nfn passing() {\n    asset!(true);\n}\n",
    "testNotPassed": "#[test]\nfn not_passing() {\n    assert!(false);\n}\n",
    "pending_exercise": "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n",
    "pending_test_exercise": "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n",
}

SUCCESS = [("compSuccess", "compile", ""), ("testSuccess", "test", "")]
FAILURE = [
    ("compFailure", "compile", ""),
    ("testFailure", "test", "Hello!"),
    ("testNotPassed", "test", ""),
]
STATE = [("pending_exercise", "compile", ""), ("pending_test_exercise", "test", "")]


class FakeToolchain:
    """Stands in for rustc, cargo and the binaries they build."""

    def __init__(self):
        self.has_rustc = True
        self.built = None

    def __call__(self, command, *args, **kwargs):
        program = command[0]
        if program == "rustc" and not self.has_rustc:
            raise FileNotFoundError(program)
        if program == "rustc" and "--version" in command:
            return subprocess.CompletedProcess(command, 0, b"", b"")
        if program == "rustc":
            source = next(arg for arg in command if arg.endswith(".rs"))
            if "Failure" in source:
                return subprocess.CompletedProcess(
                    command, 1, b"", b"error: expected pattern"
                )
            self.built = Path(source).stem
            return subprocess.CompletedProcess(command, 0, b"", b"")
        if program.startswith("./temp_"):
            if self.built == "testNotPassed":
                return subprocess.CompletedProcess(
                    command, 101, b"test not_passing ... FAILED\n", b""
                )
            if self.built == "testSuccess":
                return subprocess.CompletedProcess(
                    command, 0, b"THIS TEST TOO SHALL PASS\n", b""
                )
            return subprocess.CompletedProcess(command, 0, b"", b"")
        return subprocess.CompletedProcess(command, 0, b"", b"")


@pytest.fixture
def toolchain(monkeypatch):
    fake = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


def _info(entries):
    blocks = [
        f'[[exercises]]\nname = "{name}"\npath = "{name}.rs"\n'
        f'mode = "{mode}"\nhint = "{hint}"\n'
        for name, mode, hint in entries
    ]
    return "\n".join(blocks) if blocks else "exercises = []\n"


def make_workdir(tmp_path, monkeypatch, entries, extra=()):
    (tmp_path / "info.toml").write_text(_info(entries), encoding="utf-8")
    for name in [entry[0] for entry in entries] + list(extra):
        (tmp_path / f"{name}.rs").write_text(SOURCES[name], encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_runs_without_arguments(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    (tmp_path / "default_out.txt").write_text("Thanks for installing!\n", encoding="utf-8")
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "welcome to..." in out
    assert "Thanks for installing!" in out


def test_fails_when_in_wrong_dir(tmp_path, monkeypatch, toolchain, capsys):
    monkeypatch.chdir(tmp_path)
    assert cli.main([]) == 1
    assert "must be run from" in capsys.readouterr().out


def test_fails_without_rustc(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    toolchain.has_rustc = False
    assert cli.main(["list"]) == 1
    assert "We cannot find `rustc`." in capsys.readouterr().out


def test_rustc_exists_reflects_toolchain(toolchain):
    assert cli.rustc_exists() is True
    toolchain.has_rustc = False
    assert cli.rustc_exists() is False


def test_list_prints_names_in_order(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    assert cli.main(["l"]) == 0
    assert capsys.readouterr().out.splitlines() == ["compSuccess", "testSuccess"]


def test_verify_all_success(tmp_path, monkeypatch, toolchain):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    assert cli.main(["v"]) == 0


def test_verify_fails_if_some_fails(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, FAILURE)
    assert cli.main(["v"]) == 1
    assert "compFailure.rs" in capsys.readouterr().out


def test_verify_stops_at_pending_exercise(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, STATE)
    assert cli.main(["verify"]) == 1
    out = capsys.readouterr().out
    assert "I AM NOT DONE" in out
    assert "The code is compiling!" in out


def test_run_single_compile_success(tmp_path, monkeypatch, toolchain):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    assert cli.main(["r", "compSuccess"]) == 0


def test_run_single_compile_failure(tmp_path, monkeypatch, toolchain):
    make_workdir(tmp_path, monkeypatch, FAILURE)
    assert cli.main(["r", "compFailure"]) == 1


def test_run_single_test_success(tmp_path, monkeypatch, toolchain):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    assert cli.main(["r", "testSuccess"]) == 0


def test_run_single_test_failure(tmp_path, monkeypatch, toolchain):
    make_workdir(tmp_path, monkeypatch, FAILURE)
    assert cli.main(["r", "testFailure"]) == 1


def test_run_single_test_not_passed(tmp_path, monkeypatch, toolchain):
    make_workdir(tmp_path, monkeypatch, FAILURE)
    assert cli.main(["r", "testNotPassed.rs"]) == 1
    assert cli.main(["r", "testNotPassed"]) == 1


def test_run_single_test_no_filename(tmp_path, monkeypatch, toolchain):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    with pytest.raises(SystemExit) as exit_info:
        cli.main(["r"])
    assert exit_info.value.code == 1


def test_run_single_test_no_exercise(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, FAILURE, extra=["compNoExercise"])
    assert cli.main(["r", "compNoExercise.rs"]) == 1
    assert "No exercise found for your given name!" in capsys.readouterr().out


def test_get_hint_for_single_test(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, FAILURE)
    assert cli.main(["h", "testFailure"]) == 0
    assert capsys.readouterr().out == "Hello!\n"


def test_hint_for_unknown_exercise(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, FAILURE)
    assert cli.main(["hint", "missing"]) == 1
    assert "No exercise found for your given name!" in capsys.readouterr().out


def test_run_compile_exercise_does_not_prompt(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, STATE)
    assert cli.main(["r", "pending_exercise"]) == 0
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_test_exercise_does_not_prompt(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, STATE)
    assert cli.main(["r", "pending_test_exercise"]) == 0
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_single_test_success_with_output(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    assert cli.main(["--nocapture", "r", "testSuccess"]) == 0
    assert "THIS TEST TOO SHALL PAS" in capsys.readouterr().out


def test_run_single_test_success_without_output(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    assert cli.main(["r", "testSuccess"]) == 0
    assert "THIS TEST TOO SHALL PAS" not in capsys.readouterr().out


def test_watch_finishes_when_everything_passes(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    (tmp_path / "exercises").mkdir()
    assert cli.main(["w"]) == 0
    assert "You made it to the Fe-nish line!" in capsys.readouterr().out


def test_watch_without_exercise_directory(tmp_path, monkeypatch, toolchain, capsys):
    make_workdir(tmp_path, monkeypatch, SUCCESS)
    assert cli.main(["watch"]) == 1
    assert "Could not watch your progress" in capsys.readouterr().out