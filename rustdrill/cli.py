"""Command-line interface: list, run, hint, verify, watch and lsp."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import subprocess
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from enum import Enum, auto
from pathlib import Path
from typing import TextIO

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from rustdrill import ui
from rustdrill.exercise import Exercise, load_exercises
from rustdrill.project import RustAnalyzerProject
from rustdrill.run import run
from rustdrill.verify import ExerciseFailed, verify

VERSION = "5.0.0"
INFO_FILE = "info.toml"
WATCH_DIR = "./exercises"
DEBOUNCE_SECONDS = 2.0
POLL_SECONDS = 1.0

WELCOME = """\
       welcome to...
  +---------------------------------+
  |     r u s t d r i l l           |
  +---------------------------------+"""

DEFAULT_OUT = """\
Thanks for installing rustdrill!

Is this your first time? Don't worry, these exercises are made for beginners.
Here are a few notes about how things work:

1. The central idea is that you solve exercises. Most exercises contain an
   error that stops them from compiling or from passing their tests; sometimes
   it is a logic error instead. Whatever the error, your job is to find and fix
   it. Once it is fixed, the exercise compiles and you can move on to the next.
2. In watch mode (recommended) you start with the first exercise right away.
   Don't be surprised by an error message as soon as it starts: that error is
   the exercise. Open the exercise file in an editor and start investigating!
3. If you're stuck, type 'hint' in watch mode, or run
   `rustdrill hint exercise_name`.
4. If an exercise doesn't make sense to you, feel free to report it on the
   project's issue tracker. Other learners may be able to help you, too.
5. If you want to use `rust-analyzer` with the exercises, which provides
   features like autocompletion, run `rustdrill lsp`.

Got all that? Great! To get started, run `rustdrill watch` to get the first
exercise. Make sure to have your editor open!"""

FINISH_LINE = """\
+----------------------------------------------------+
|          You made it to the finish line!           |
+----------------------------------------------------+

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help others learn."""

WATCH_HELP = """\
Commands available to you in watch mode:
  hint  - prints the current exercise's hint
  clear - clears the screen
  quit  - quits watch mode
  help  - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class WatchStatus(Enum):
    """How watch mode ended."""

    FINISHED = auto()
    UNFINISHED = auto()


class WatchShell:
    """The interactive command reader used while watching for changes."""

    def __init__(self, hint: str | None = None) -> None:
        self._lock = threading.Lock()
        self._hint = hint
        self.should_quit = threading.Event()

    @property
    def hint(self) -> str | None:
        """The hint of the exercise that failed most recently."""
        with self._lock:
            return self._hint

    @hint.setter
    def hint(self, value: str | None) -> None:
        with self._lock:
            self._hint = value

    def handle(self, line: str) -> str | None:
        """Interpret one command line; return the text to show, if any."""
        command = line.strip()
        if command == "hint":
            return self.hint
        if command == "clear":
            return "\x1b[2J\x1b[1;1H"
        if command == "quit":
            self.should_quit.set()
            return "Bye!"
        if command == "help":
            return WATCH_HELP
        return f"unknown command: {command}"

    def start(self, stream: TextIO | None = None) -> threading.Thread:
        """Read commands from the stream (stdin by default) on a daemon thread."""
        print(
            "Welcome to watch mode! You can type 'help' to get an overview "
            "of the commands you can use here."
        )
        thread = threading.Thread(
            target=self._serve, args=(stream if stream is not None else sys.stdin,), daemon=True
        )
        thread.start()
        return thread

    def _serve(self, stream: TextIO) -> None:
        try:
            for line in stream:
                text = self.handle(line)
                if text is not None:
                    print(text)
        except (OSError, ValueError) as error:
            print(f"error reading command: {error}")


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue) -> None:
        super().__init__()
        self._events = events

    def on_created(self, event) -> None:
        self._push(event, event.src_path)

    def on_modified(self, event) -> None:
        self._push(event, event.src_path)

    def on_moved(self, event) -> None:
        self._push(event, event.dest_path)

    def _push(self, event, path) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(path)))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog="rustdrill",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("verify", help="verify all exercises in the recommended order")
    commands.add_parser("watch", help="rerun verify when files are edited")
    run_parser = commands.add_parser("run", help="run or test a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")
    hint_parser = commands.add_parser("hint", help="show a hint for the given exercise")
    hint_parser.add_argument("name", help="the name of the exercise")
    list_parser = commands.add_parser("list", help="list the available exercises")
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        default=None,
        help="a string to match exercise names; comma separated patterns are accepted",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="display only unsolved exercises"
    )
    list_parser.add_argument(
        "-s", "--solved", action="store_true", help="display only solved exercises"
    )
    commands.add_parser("lsp", help="enable rust-analyzer for the exercises")
    return parser


def rustc_exists() -> bool:
    """Whether `rustc --version` can be run successfully."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return result.returncode == 0


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """Find an exercise by name, or the first pending one for 'next'.

    Raises LookupError with a user-facing message when nothing matches.
    """
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise LookupError(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise LookupError(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filter: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> list[str]:
    """Return the lines of the exercise listing, ending with the progress line."""
    lines = []
    if not paths and not names:
        lines.append(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}")
    patterns = [p for p in (filter or "").lower().split(",") if p.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        matches = any(p in exercise.name or p in fname for p in patterns)
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if not wanted or not (matches or filter is None):
            continue
        if paths:
            lines.append(fname)
        elif names:
            lines.append(exercise.name)
        else:
            lines.append(f"{exercise.name:<17}\t{fname:<46}\t{status:<7}")
    total = len(exercises)
    percentage = done_count / total * 100 if total else float("nan")
    lines.append(
        f"Progress: You completed {done_count} / {total} exercises ({percentage:.2f} %)."
    )
    return lines


def _clear_screen() -> None:
    print("\x1bc")


def _path_ends_with(path: Path, suffix: Path) -> bool:
    tail = Path(suffix).parts
    if not tail:
        return True
    parts = path.parts
    return len(tail) <= len(parts) and parts[len(parts) - len(tail):] == tail


def _next_batch(events: queue.Queue, timeout: float) -> list[Path]:
    try:
        first = events.get(timeout=timeout)
    except queue.Empty:
        return []
    batch = {first: None}
    deadline = time.monotonic() + DEBOUNCE_SECONDS
    while (remaining := deadline - time.monotonic()) > 0:
        try:
            batch[events.get(timeout=remaining)] = None
        except queue.Empty:
            break
    return list(batch)


def watch(exercises: Sequence[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify exercises, then re-verify whenever an exercise file changes."""
    watch_dir = Path(WATCH_DIR)
    if not watch_dir.is_dir():
        raise FileNotFoundError(f"no such directory: {watch_dir}")
    events: queue.Queue = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), str(watch_dir), recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose)
            return WatchStatus.FINISHED
        except ExerciseFailed as failed:
            shell = WatchShell(failed.exercise.hint)
        shell.start()
        while True:
            for changed in _next_batch(events, POLL_SECONDS):
                if changed.suffix != ".rs" or not changed.exists():
                    continue
                filepath = changed.resolve()
                current = next(
                    (e for e in exercises if _path_ends_with(filepath, e.path)), None
                )
                pending = itertools.chain(
                    [current] if current is not None else [],
                    (
                        e
                        for e in exercises
                        if not e.looks_done() and not _path_ends_with(filepath, e.path)
                    ),
                )
                num_done = sum(1 for e in exercises if e.looks_done())
                _clear_screen()
                try:
                    verify(pending, (num_done, len(exercises)), verbose)
                    return WatchStatus.FINISHED
                except ExerciseFailed as failed:
                    shell.hint = failed.exercise.hint
            if shell.should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _silence_stdout() -> None:
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path(INFO_FILE).exists():
        print(f"{os.path.abspath(sys.argv[0])} must be run from the rustdrill directory")
        print("Try `cd rustdrill/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(INFO_FILE)
    verbose = args.nocapture

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    if args.command == "list":
        try:
            for line in list_exercises(
                exercises, args.paths, args.names, args.filter, args.unsolved, args.solved
            ):
                print(line)
        except BrokenPipeError:
            _silence_stdout()
        return 0

    if args.command in ("run", "hint"):
        try:
            exercise = find_exercise(args.name, exercises)
        except LookupError as err:
            print(err.args[0])
            return 1
        if args.command == "hint":
            print(exercise.hint)
            return 0
        try:
            run(exercise, verbose)
        except ExerciseFailed:
            return 1
        return 0

    if args.command == "verify":
        try:
            verify(exercises, (0, len(exercises)), verbose)
        except ExerciseFailed:
            return 1
        return 0

    if args.command == "lsp":
        project = RustAnalyzerProject()
        try:
            project.get_sysroot_src()
        except OSError as err:
            print(f"Couldn't find toolchain path, do you have `rustc` installed? ({err})")
            return 1
        try:
            project.exercises_to_json()
        except OSError as err:
            print(f"Couldn't parse the exercise files ({err})")
            return 1
        if not project.crates:
            print("Failed to find any exercises, make sure you're in the `rustdrill` folder")
            return 0
        try:
            project.write_to_disk()
        except OSError:
            print("Failed to write rust-project.json to disk for rust-analyzer")
            return 0
        print("Successfully generated rust-project.json")
        print(
            "rust-analyzer will now parse exercises, restart your language server or editor"
        )
        return 0

    # watch
    try:
        status = watch(exercises, verbose)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' "
            "has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        symbol = "🎉" if ui.emoji_enabled() else "★"
        print(f"{symbol} All exercises completed! {symbol}")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustdrill watch` again"
        )
    return 0