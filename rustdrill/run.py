"""Running a single exercise."""

from __future__ import annotations

from rustdrill import ui
from rustdrill.exercise import CompileError, Exercise, Mode
from rustdrill.verify import ExerciseFailed, _Spinner, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run (or test) one exercise; raise ExerciseFailed on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        try:
            compiled = exercise.compile()
        except CompileError as err:
            spinner.clear()
            ui.warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(err.output.stderr)
            raise ExerciseFailed(exercise) from err
        with compiled:
            spinner.set_message(f"Running {exercise}...")
            output = compiled.run()

    if output.success:
        print(output.stdout)
        ui.success(f"Successfully ran {exercise}")
        return
    print(output.stdout)
    print(output.stderr)
    ui.warn(f"Ran {exercise} with errors")
    raise ExerciseFailed(exercise)