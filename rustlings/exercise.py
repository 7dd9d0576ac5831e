"""Exercises: their description, compilation, running and completion state."""

from __future__ import annotations

import contextlib
import enum
import os
import re
import subprocess
import threading
import tomllib
import weakref
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
RUSTC_NO_DEBUG_ARGS = ("-C", "strip=debuginfo")
I_AM_DONE_PATTERN = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("exercises/22_clippy/Cargo.toml")


def temp_file_path() -> str:
    """Return a binary path that is unique per process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def _remove(path: str) -> None:
    with contextlib.suppress(OSError):
        os.remove(path)


def clean() -> None:
    """Remove the temporary binary of the current thread, if any."""
    _remove(temp_file_path())


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


class Mode(enum.Enum):
    """How an exercise is checked."""

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
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or exercise run."""

    stdout: str
    stderr: str
    success: bool = True


class CompilationFailed(Exception):
    """Raised when an exercise does not compile."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


def _source_lines(source: str) -> list[str]:
    parts = source.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


@dataclass(frozen=True)
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __str__(self) -> str:
        return str(self.path)

    def _rustc_args(self, binary: str, *, test: bool = False) -> list[str]:
        head = ["rustc", "--test"] if test else ["rustc"]
        return [
            *head,
            str(self.path),
            "-o",
            binary,
            *RUSTC_COLOR_ARGS,
            *RUSTC_EDITION_ARGS,
            *RUSTC_NO_DEBUG_ARGS,
        ]

    def _compile_clippy(self, binary: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml, encoding="utf-8")
        # A binary is built as well so that clippy exercises can be run.
        _execute(self._rustc_args(binary))
        manifest = str(CLIPPY_CARGO_TOML_PATH)
        # A clean is needed for clippy to report every lint.
        _execute(["cargo", "clean", "--manifest-path", manifest, *RUSTC_COLOR_ARGS])
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                manifest,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise CompilationFailed with the output on error."""
        binary = temp_file_path()
        if self.mode is Mode.COMPILE:
            result = _execute(self._rustc_args(binary))
        elif self.mode is Mode.TEST:
            result = _execute(self._rustc_args(binary, test=True))
        else:
            result = self._compile_clippy(binary)

        if result.returncode == 0:
            return CompiledExercise(self, binary)
        _remove(binary)
        raise CompilationFailed(
            ExerciseOutput(_decode(result.stdout), _decode(result.stderr), success=False)
        )

    def state(self) -> State:
        """Read the source and report whether the pending marker is still there."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_PATTERN.search(source):
            return State()

        lines = _source_lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_PATTERN.search(line)), None
        )
        if matched is None:
            raise RuntimeError(f"marker found in {self.path} but on no single line")

        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines)
                if first <= i <= last
            )
        )

    def looks_done(self) -> bool:
        """True when the pending marker has been removed from the source."""
        return self.state().done


class CompiledExercise:
    """A compiled exercise whose binary is removed when it is closed."""

    def __init__(self, exercise: Exercise, binary: str) -> None:
        self.exercise = exercise
        self.binary = binary
        self._finalizer = weakref.finalize(self, _remove, binary)

    def run(self) -> ExerciseOutput:
        """Run the binary and capture its output."""
        args = [self.binary]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        result = _execute(args)
        return ExerciseOutput(
            _decode(result.stdout), _decode(result.stderr), success=result.returncode == 0
        )

    def close(self) -> None:
        """Remove the compiled binary."""
        self._finalizer()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Load the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    try:
        return [
            Exercise(
                name=str(entry["name"]),
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=str(entry["hint"]),
            )
            for entry in data["exercises"]
        ]
    except KeyError as exc:
        raise ValueError(f"missing field {exc} in {path}") from exc