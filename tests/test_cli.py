import io
import json
import subprocess
from pathlib import Path

import pytest

from rustdrill.cli import (
    VERSION,
    WatchShell,
    build_parser,
    find_exercise,
    list_exercises,
    main,
    rustc_exists,
    watch,
)
from rustdrill.exercise import Exercise, Mode

FINISHED_SOURCE = "// fake_exercise\n\nfn main() {\n\n}\n"
PENDING_SOURCE = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"

DEFAULT_ENTRIES = [
    ("finished", "compile", False, "Finish it"),
    ("waiting", "compile", True, "Keep going"),
    ("testy", "test", False, "Hello!"),
]


def make_fake_run(returncode=0, stdout=b"", stderr=b""):
    calls = []

    def fake_run(command, *args, **kwargs):
        calls.append(list(command))
        if list(command[:2]) == ["rustc", "--version"]:
            return subprocess.CompletedProcess(command, 0, stdout=b"rustc 1.0.0", stderr=b"")
        return subprocess.CompletedProcess(command, returncode, stdout=stdout, stderr=stderr)

    fake_run.calls = calls
    return fake_run


def write_workspace(root: Path, entries):
    (root / "exercises").mkdir()
    blocks = []
    for name, mode, pending, hint in entries:
        source = PENDING_SOURCE if pending else FINISHED_SOURCE
        (root / "exercises" / f"{name}.rs").write_text(source, encoding="utf-8")
        blocks.append(
            "[[exercises]]\n"
            f'name = "{name}"\n'
            f'path = "exercises/{name}.rs"\n'
            f'mode = "{mode}"\n'
            f'hint = "{hint}"\n'
        )
    (root / "info.toml").write_text("\n".join(blocks), encoding="utf-8")


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    write_workspace(tmp_path, DEFAULT_ENTRIES)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def done_workspace(tmp_path, monkeypatch):
    write_workspace(
        tmp_path,
        [("finished", "compile", False, "Finish it"), ("testy", "test", False, "Hello!")],
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def exercises(tmp_path):
    (tmp_path / "done.rs").write_text(FINISHED_SOURCE, encoding="utf-8")
    (tmp_path / "todo.rs").write_text(PENDING_SOURCE, encoding="utf-8")
    return [
        Exercise("alpha", tmp_path / "done.rs", Mode.COMPILE, "a"),
        Exercise("beta", tmp_path / "todo.rs", Mode.TEST, "b"),
        Exercise("gamma", tmp_path / "done.rs", Mode.COMPILE, "c"),
    ]


def test_version_flag(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out == f"v{VERSION}\n"


def test_short_version_flag(capsys):
    assert main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == "v5.0.0"


def test_fails_when_in_wrong_dir(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "must be run from the rustdrill directory" in capsys.readouterr().out


def test_runs_without_arguments(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "welcome to..." in out
    assert "rustdrill watch" in out


def test_run_without_name_fails(workspace):
    assert main(["run"]) == 1


def test_help_exits_successfully(capsys):
    assert main(["--help"]) == 0
    assert "verify" in capsys.readouterr().out


def test_missing_rustc(workspace, monkeypatch, capsys):
    def missing(*args, **kwargs):
        raise FileNotFoundError("rustc")

    monkeypatch.setattr(subprocess, "run", missing)
    assert main(["list"]) == 1
    assert "We cannot find `rustc`." in capsys.readouterr().out


def test_hint_for_single_exercise(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main(["hint", "testy"]) == 0
    assert capsys.readouterr().out == "Hello!\n"


def test_run_unknown_exercise(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main(["run", "testNotPassed.rs"]) == 1
    assert "No exercise found for 'testNotPassed.rs'!" in capsys.readouterr().out


def test_run_compile_exercise_does_not_prompt(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main(["run", "waiting"]) == 0
    out = capsys.readouterr().out
    assert "I AM NOT DONE" not in out
    assert "Successfully ran exercises" in out


def test_run_compile_failure(workspace, monkeypatch, capsys):
    monkeypatch.setattr(
        subprocess, "run", make_fake_run(returncode=1, stderr=b"error: expected pattern")
    )
    assert main(["run", "finished"]) == 1
    assert "error: expected pattern" in capsys.readouterr().out


def test_run_test_success_with_output(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run(stdout=b"THIS TEST TOO SHALL PASS"))
    assert main(["--nocapture", "run", "testy"]) == 0
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out


def test_run_test_success_without_output(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run(stdout=b"THIS TEST TOO SHALL PASS"))
    assert main(["run", "testy"]) == 0
    assert "THIS TEST TOO SHALL PASS" not in capsys.readouterr().out


def test_run_test_failure(workspace, monkeypatch):
    monkeypatch.setattr(subprocess, "run", make_fake_run(returncode=101))
    assert main(["run", "testy"]) == 1


def test_run_next_picks_pending(workspace, monkeypatch, capsys):
    fake = make_fake_run()
    monkeypatch.setattr(subprocess, "run", fake)
    assert main(["run", "next"]) == 0
    compile_calls = [call for call in fake.calls if call[0] == "rustc" and "--version" not in call]
    assert compile_calls[0][1] == "exercises/waiting.rs"


def test_verify_all_success(done_workspace, monkeypatch):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main(["verify"]) == 0


def test_verify_fails_if_some_fails(done_workspace, monkeypatch):
    monkeypatch.setattr(subprocess, "run", make_fake_run(returncode=1))
    assert main(["verify"]) == 1


def test_verify_stops_at_pending(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main(["verify"]) == 1
    assert "I AM NOT DONE" in capsys.readouterr().out


def test_list_both_done_and_pending(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Done" in out
    assert "Pending" in out
    assert "Progress: You completed 2 / 3 exercises (66.67 %)." in out


def test_list_no_pending_when_all_done(done_workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main(["list"]) == 0
    assert "Pending" not in capsys.readouterr().out


def test_list_solved_only(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main(["list", "--solved"]) == 0
    assert "Pending" not in capsys.readouterr().out


def test_list_unsolved_only(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main(["list", "--unsolved"]) == 0
    assert "Done" not in capsys.readouterr().out


def test_lsp_writes_project(workspace, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", make_fake_run(stdout=b"/opt/toolchain\n"))
    assert main(["lsp"]) == 0
    data = json.loads((workspace / "rust-project.json").read_text(encoding="utf-8"))
    expected_sysroot = str(Path("/opt/toolchain") / "lib" / "rustlib" / "src" / "rust" / "library")
    assert data["sysroot_src"] == expected_sysroot
    modules = sorted(crate["root_module"] for crate in data["crates"])
    assert modules == sorted(
        str(Path("exercises") / f"{name}.rs") for name in ("finished", "waiting", "testy")
    )
    assert "Successfully generated rust-project.json" in capsys.readouterr().out


def test_watch_without_exercises_dir(tmp_path, monkeypatch, capsys):
    (tmp_path / "info.toml").write_text("exercises = []\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert main(["watch"]) == 1
    assert "Could not watch your progress" in capsys.readouterr().out


def test_watch_function_requires_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        watch([], False)


def test_rustc_exists_true(monkeypatch):
    monkeypatch.setattr(subprocess, "run", make_fake_run())
    assert rustc_exists() is True


def test_rustc_exists_false_on_failure(monkeypatch):
    monkeypatch.setattr(
        subprocess, "run", lambda *a, **k: subprocess.CompletedProcess(a[0], 1)
    )
    assert rustc_exists() is False


def test_rustc_exists_false_when_missing(monkeypatch):
    def missing(*args, **kwargs):
        raise FileNotFoundError("rustc")

    monkeypatch.setattr(subprocess, "run", missing)
    assert rustc_exists() is False


def test_parser_list_options():
    args = build_parser().parse_args(["list", "-p", "-f", "abc", "-u"])
    assert (args.command, args.paths, args.names, args.filter, args.unsolved, args.solved) == (
        "list", True, False, "abc", True, False,
    )


def test_find_exercise_by_name(exercises):
    assert find_exercise("gamma", exercises).hint == "c"


def test_find_exercise_next(exercises):
    assert find_exercise("next", exercises).name == "beta"


def test_find_exercise_unknown(exercises):
    with pytest.raises(LookupError, match="No exercise found for 'delta'!"):
        find_exercise("delta", exercises)


def test_find_exercise_next_when_all_done(exercises):
    done = [exercises[0], exercises[2]]
    with pytest.raises(LookupError, match="Congratulations"):
        find_exercise("next", done)


def test_list_names_with_filter(exercises):
    assert list_exercises(exercises, names=True, filter="alp,GAM") == [
        "alpha",
        "gamma",
        "Progress: You completed 2 / 3 exercises (66.67 %).",
    ]


def test_list_empty_filter_matches_nothing(exercises):
    assert list_exercises(exercises, names=True, filter="") == [
        "Progress: You completed 2 / 3 exercises (66.67 %).",
    ]


def test_list_filter_by_path(exercises):
    lines = list_exercises(exercises, paths=True, filter="todo.rs")
    assert lines[:-1] == [str(exercises[1].path)]


def test_list_full_table(exercises):
    lines = list_exercises(exercises)
    assert lines[0] == f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"
    assert lines[2].split("\t")[0].strip() == "beta"
    assert lines[2].split("\t")[2].strip() == "Pending"
    assert len(lines) == 5


def test_list_solved_and_unsolved_shows_all(exercises):
    lines = list_exercises(exercises, names=True, solved=True, unsolved=True)
    assert lines[:-1] == ["alpha", "beta", "gamma"]


def test_shell_hint():
    assert WatchShell("Try harder").handle("hint\n") == "Try harder"


def test_shell_hint_absent():
    assert WatchShell().handle("hint") is None


def test_shell_hint_updates():
    shell = WatchShell("first")
    shell.hint = "second"
    assert shell.handle("hint") == "second"


def test_shell_clear():
    assert WatchShell().handle("  clear  ") == "\x1b[2J\x1b[1;1H"


def test_shell_quit():
    shell = WatchShell()
    assert shell.handle("quit") == "Bye!"
    assert shell.should_quit.is_set()


def test_shell_help():
    text = WatchShell().handle("help")
    assert "  hint  - prints the current exercise's hint" in text
    assert text.splitlines()[0] == "Commands available to you in watch mode:"


def test_shell_unknown():
    assert WatchShell().handle("dance\n") == "unknown command: dance"


def test_shell_reads_stream(capsys):
    shell = WatchShell("Hint text")
    thread = shell.start(io.StringIO("hint\nquit\n"))
    thread.join(timeout=5)
    assert shell.should_quit.is_set()
    out = capsys.readouterr().out
    assert "Hint text" in out
    assert "Bye!" in out