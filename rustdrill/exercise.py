"""Exercises: loading, compiling, running and checking their progress state."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(Enum):
    """How an exercise is built and checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or exercise run."""

    stdout: str
    stderr: str
    success: bool = True


class CompileError(Exception):
    """Raised when an exercise fails to compile."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the compiled binary and capture its output."""
        return self.exercise._run()

    def close(self) -> None:
        """Remove the compiled binary."""
        clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

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
        """Build the exercise; raise CompileError on failure."""
        source = str(self.path)
        if self.mode is Mode.COMPILE:
            command = ["rustc", source, "-o", temp_file(), *RUSTC_COLOR_ARGS]
        elif self.mode is Mode.TEST:
            command = ["rustc", "--test", source, "-o", temp_file(), *RUSTC_COLOR_ARGS]
        else:
            self._write_clippy_manifest()
            # Build a binary too so clippy exercises can still be run.
            subprocess.run(
                ["rustc", source, "-o", temp_file(), *RUSTC_COLOR_ARGS],
                capture_output=True,
            )
            # A clean is needed for clippy to report every lint.
            subprocess.run(
                ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
                capture_output=True,
            )
            command = [
                "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--", "-D", "warnings", "-D", "clippy::float_cmp",
            ]
        result = subprocess.run(command, capture_output=True)
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompileError(
            ExerciseOutput(_decode(result.stdout), _decode(result.stderr), success=False)
        )

    def _write_clippy_manifest(self) -> None:
        manifest = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(manifest, encoding="utf-8")
        except OSError as err:
            if "NO_EMOJI" in os.environ:
                message = "Failed to write Clippy Cargo.toml file."
            else:
                message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
            raise OSError(message) from err

    def _run(self) -> ExerciseOutput:
        command = [temp_file()]
        if self.mode is Mode.TEST:
            command.append("--show-output")
        result = subprocess.run(command, capture_output=True)
        return ExerciseOutput(
            _decode(result.stdout), _decode(result.stderr), success=result.returncode == 0
        )

    def state(self) -> list[ContextLine] | None:
        """Return None when done, else the lines around the pending marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return None
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self.path} spans several lines")
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return [
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines)
            if first <= i <= last
        ]

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed."""
        return self.state() is None


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
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
    except KeyError as err:
        raise ValueError(f"missing field {err.args[0]!r} in {path}") from err