"""Verification of exercises: compile, run or test them and report progress."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from enum import Enum, auto

from rustdrill import ui
from rustdrill.exercise import CompileError, CompiledExercise, Exercise, Mode


class RunMode(Enum):
    """Whether a passing exercise should prompt the learner to move on."""

    INTERACTIVE = auto()
    NON_INTERACTIVE = auto()


class ExerciseFailed(Exception):
    """Raised when an exercise fails to build, run or pass its tests."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"exercise {exercise} failed")
        self.exercise = exercise


class _Spinner:
    """A one-line status message on a terminal's standard error."""

    def __init__(self, message: str) -> None:
        self._active = sys.stderr.isatty()
        self.set_message(message)

    def set_message(self, message: str) -> None:
        if self._active:
            sys.stderr.write(f"\r\x1b[2K{message}")
            sys.stderr.flush()

    def clear(self) -> None:
        if self._active:
            sys.stderr.write("\r\x1b[2K")
            sys.stderr.flush()

    def __enter__(self) -> _Spinner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()


class _ProgressBar:
    """An overall progress bar drawn on a terminal's standard error."""

    WIDTH = 60

    def __init__(self, total: int, position: int = 0) -> None:
        self.total = total
        self.position = position
        self._active = sys.stderr.isatty()
        self._draw()

    def inc(self, delta: int = 1) -> None:
        self.position += delta
        self._draw()

    def render(self) -> str:
        if self.total <= 0:
            filled = self.WIDTH
        else:
            filled = min(self.position * self.WIDTH // self.total, self.WIDTH)
        if filled >= self.WIDTH:
            done, rest = "#" * self.WIDTH, ""
        else:
            done, rest = "#" * filled, ">" + "-" * (self.WIDTH - filled - 1)
        return f"Progress: [{ui.green(done)}{ui.red(rest)}] {self.position}/{self.total}"

    def _draw(self) -> None:
        if self._active:
            sys.stderr.write(f"\r\x1b[2K{self.render()}\n")
            sys.stderr.flush()


def verify(
    exercises: Iterable[Exercise], progress: tuple[int, int], verbose: bool = False
) -> None:
    """Check each exercise in order; raise ExerciseFailed at the first one not passing."""
    num_done, total = progress
    bar = _ProgressBar(total, num_done)
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            passed = _compile_and_test(exercise, RunMode.INTERACTIVE, verbose)
        elif exercise.mode is Mode.COMPILE:
            passed = _compile_and_run_interactively(exercise)
        else:
            passed = _compile_only(exercise)
        if not passed:
            raise ExerciseFailed(exercise)
        bar.inc()


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run an exercise's tests; raise ExerciseFailed when they fail."""
    _compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose)


def _compile(exercise: Exercise, spinner: _Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except CompileError as err:
        spinner.clear()
        ui.warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise ExerciseFailed(exercise) from err


def _compile_only(exercise: Exercise) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner):
            pass
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            spinner.set_message(f"Running {exercise}...")
            output = compiled.run()
    if not output.success:
        ui.warn(f"Ran {exercise} with errors")
        print(output.stdout)
        print(output.stderr)
        raise ExerciseFailed(exercise)
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, run_mode: RunMode, verbose: bool) -> bool:
    with _Spinner(f"Testing {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            output = compiled.run()
    if not output.success:
        ui.warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
        print(output.stdout)
        raise ExerciseFailed(exercise)
    if verbose:
        print(output.stdout)
    if run_mode is RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> str:
    return ui.bold("====================")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True when the exercise is done; otherwise show where the marker is."""
    context = exercise.state()
    if context is None:
        return True

    if exercise.mode is Mode.COMPILE:
        ui.success(f"Successfully ran {exercise}!")
    elif exercise.mode is Mode.TEST:
        ui.success(f"Successfully tested {exercise}!")
    else:
        ui.success(f"Successfully compiled {exercise}!")

    no_emoji = not ui.emoji_enabled()
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif no_emoji:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    print()
    if no_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{ui.bold('`I AM NOT DONE`')} comment:"
    )
    print()
    for context_line in context:
        line = ui.bold(context_line.line) if context_line.important else context_line.line
        number = ui.blue(ui.bold(f"{context_line.number:>2}"))
        print(f"{number} {ui.blue('|')}  {line}")
    return False