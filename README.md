# rustlings

A Python library for working with a set of small Rust exercises. It reads
the exercise list from `info.toml` and compiles and runs each exercise with
`rustc`, or lints it with `cargo clippy`. It tells you whether an exercise is
still marked as pending, and it can write a `rust-project.json` for
rust-analyzer. The `rustlings.lessons` package holds worked Python solutions
to a selection of the exercises.

The package has no dependencies outside the standard library. Compiling
exercises needs a Rust toolchain (`rustc`, and `cargo` for Clippy exercises)
on your `PATH`.

## Exercises

`rustlings.exercise.load_exercises(path="info.toml")` reads the
`[[exercises]]` entries and returns a list of `Exercise` objects. Each has a
`name`, a `path`, a `mode` and a `hint`. The mode is a `Mode`: `COMPILE`,
`TEST` or `CLIPPY`. If an entry lacks one of these fields, a `ValueError`
is raised.

```python
from rustlings.exercise import load_exercises, CompilationFailed

for exercise in load_exercises("info.toml"):
    print(exercise.name, "done" if exercise.looks_done() else "pending")
```

### Completion state

An exercise counts as pending while its source still has a comment line such
as `// I AM NOT DONE`. `Exercise.state()` returns a `State`:

- When the marker is gone, `state.done` is true.
- Otherwise `state.context` holds the `ContextLine`s around the first marker,
  up to two lines on each side. Each one has `line`, `number` (starting
  from 1) and `important` (true for the marker line itself).

`Exercise.looks_done()` is a shortcut for `state().done`.

### Compiling and running

`Exercise.compile()` builds the exercise into a temporary binary in the
current directory. On failure it raises `CompilationFailed`, whose `output`
is an `ExerciseOutput` with `stdout`, `stderr` and `success`.

- `TEST` exercises are built with `rustc --test`.
- `CLIPPY` exercises write `exercises/22_clippy/Cargo.toml` relative to the
  current directory and also build a binary. They then run `cargo clean` and
  `cargo clippy` with `-D warnings -D clippy::float_cmp`.

On success `compile()` returns a `CompiledExercise`, which is a context
manager. `run()` executes the binary, passing `--show-output` for test
exercises, and returns an `ExerciseOutput` whose `success` reflects the exit
status. It does not raise when the run fails. `close()`, or leaving the
`with` block, removes the binary.

```python
try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except CompilationFailed as error:
    print(error.output.stderr)
```

`temp_file_path()` gives the binary path used by the current process and
thread, and `clean()` removes that file if it exists.

## rust-analyzer project file

`rustlings.project.RustAnalyzerProject` gathers the data for
`rust-project.json`:

- `get_sysroot_src()` takes `RUST_SRC_PATH` if it is set. Otherwise it asks
  `rustc --print sysroot`, prints the toolchain it found and points at
  `lib/rustlib/src/rust/library` under that toolchain.
- `exercises_to_json(root="exercises")` adds a `Crate` (edition 2021, with
  `cfg` set to `["test"]`) for every `.rs` file below `root`, in sorted order.
- `to_json()` returns compact JSON.
- `write_to_disk(path="rust-project.json")` writes that JSON to a file.

## Terminal output

`rustlings.ui` provides these helpers:

- `warn(message)` prints a red warning.
- `success(message)` prints a green success line.
- `bold(text)` and `blue(text)` return styled text.
- `no_emoji()` reports whether `NO_EMOJI` is set, in which case plain
  symbols replace the emoji.

Colours are used only when stdout is a terminal, or when `CLICOLOR_FORCE` is
set to a non-zero value. `NO_COLOR`, or `CLICOLOR=0`, turns them off.

## Worked solutions

The modules in `rustlings.lessons` hold the worked solutions:

| Module | What it solves |
| --- | --- |
| `quizzes` | `calculate_price_of_apples`; `transformer` with `Command` / `CommandKind`; `ReportCard` with numeric or letter grades |
| `basics` | `sale_price`, `is_even`, `square`, `bigger`, `foo_if_fizz`, `animal_habitat`, `vec_loop`, `vec_map`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `structs` | `Package`; the `Move` / `Echo` / `ChangeColor` / `Quit` messages processed by `State`; a validated `Rectangle` |
| `collections` | `fruit_basket`, `build_scores_table` with `Team`, `maybe_icecream` |
| `errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger` with `CreationError`, `parse_pos_nonzero` with `ParsePosNonzeroError` |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide` with its `DivisionError` subclasses, `result_with_list`, `list_of_results`, `factorial` |
| `progress` | counting `Progress` values with `count_for`, `count_iterator`, `count_collection_for`, `count_collection_iterator` |
| `cons` | a cons list of `Cons` and `Nil`, with `create_empty_list` and `create_non_empty_list` |

Invalid input raises an exception (`ValueError` and its subclasses, or the
`DivisionError` family) rather than returning an error value.

## What this package does not do

- It installs no command.
- There is no interactive watch mode.
- It does not verify every exercise in order or show a progress bar.
- It has no `list`, `hint`, `run` or `reset` commands.

Those workflows have to be built from the functions above. The worked
solutions cover only the exercises listed in the table; there are none for
the conversions exercises.