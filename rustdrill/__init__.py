"""Runner for small Rust exercises: compile, test, lint and track progress."""

__version__ = "5.0.0"