# drillbook

drillbook holds the building blocks for a course of small programming
exercises: coloured status lines for a terminal, a generator for the
`rust-project.json` file that lets rust-analyzer understand a directory of
standalone exercise files, and a library of worked solutions to the course
topics.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Status lines: `drillbook.ui`

- `warn(message)` prints the message in red, preceded by a warning marker.
- `success(message)` prints the message in green, preceded by a check mark.
- `use_emoji()` returns `False` when the `NO_EMOJI` environment variable is
  set. The markers are then plain text (`!` and `✓`) instead of emoji.

```python
from drillbook.ui import success, warn

success("Successfully ran exercises/intro/intro1.rs")
warn("Compiling of exercises/intro/intro2.rs failed!")
```

## Editor support: `drillbook.project`

`RustAnalyzerProject` collects the contents of `rust-project.json`:

- `get_sysroot_src()` sets the standard library source path. It uses
  `RUST_SRC_PATH` when that is set; otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found and appends
  `lib/rustlib/src/rust/library`.
- `exercises_to_json(root="./exercises")` adds one `Crate` for every `.rs`
  file found below `root`, in sorted order.
- `add_path(path)` adds a crate for a single path if it ends in `.rs`.
- `to_dict()` returns the project as a plain dictionary.
- `write_to_disk(path="./rust-project.json")` writes it as compact JSON.

Each `Crate` has a `root_module`, an `edition` (`"2021"`), empty `deps` and a
`cfg` of `["test"]` so that rust-analyzer also works inside test blocks.

```python
from drillbook.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json()
if project.crates:
    project.write_to_disk()
```

## Worked solutions: `drillbook.lessons`

Plain functions and classes solving the course topics:

- `quizzes`: `calculate_price_of_apples`, `transformer` with `Command` and
  `Append`, and `ReportCard.render`.
- `basics`: `bigger`, `foo_if_fizz`, `array_and_vec`, `vec_loop`,
  `vec_map`, `maybe_icecream` and `drain_countdown`.
- `enums`: the messages `ChangeColor`, `Echo`, `Move` and `Quit`, and a
  `State` whose `process` method applies them.
- `strings`: `current_favorite_color`, `is_a_color_word`, `trim_me`,
  `compose_me` and `replace_me`.
- `errors`: `generate_nametag_text`, `total_cost`, `purchase`,
  `PositiveNonzeroInteger` with `CreationError`, and `parse_pos_nonzero`
  with `ParsePosNonzeroError`.
- `hashmaps`: `fruit_basket`, `fill_fruit_basket` with `Fruit`, and
  `build_scores_table` returning `Team` records.
- `structs`: `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`,
  `Order` with `create_order_template`, and `Package` with
  `is_international` and `get_fees`.
- `iterators`: `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` with `NotDivisibleError` and
  `DivideByZeroError`, `result_with_list`, `list_of_results`, `factorial`,
  and the `Progress` counters `count_for`, `count_iterator`,
  `count_collection_for` and `count_collection_iterator`.
- `traits`: `append_bar`, `Licensed` with `SomeSoftware` and
  `OtherSoftware`, `compare_license_types`, `some_func` with `SomeStruct`
  and `OtherStruct`, and `Wrapper`.
- `pointers`: a cons list of `Cons` and `Nil` with `create_empty_list` and
  `create_non_empty_list`, and the copy-on-write `abs_all`.

```python
from drillbook.lessons.iterators import divide, factorial

divide(81, 9)   # 9
factorial(4)    # 24
```

## What this package does not do

drillbook has no command-line program. It does not read a course's
`info.toml`, does not compile, run or test exercise files, does not check
whether an exercise is still marked as not done, and has no watch mode,
progress listing, hints or reset. It provides the status-line helpers, the
`rust-project.json` generator and the lesson solutions described above.