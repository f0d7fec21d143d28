# rustlings

Helpers for a course of small programming exercises: coloured status lines
for the terminal, generation of a `rust-project.json` file so that
rust-analyzer understands a directory of exercise files, and worked
solutions to a number of the exercises as plain Python functions and
classes.

## Requirements

- Python 3.11 or later
- `rich` (installed with the package)
- `rustc` on your `PATH`, only if `RustAnalyzerProject.get_sysroot_src` has
  to ask it for the toolchain location

## Installation

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## Status lines: `rustlings.ui`

```python
from rustlings.ui import success, warn

success("Successfully ran exercises/00_intro/intro1.rs")
warn("Compilation of exercises/01_variables/variables1.rs failed!")
```

`success` prints the message in green after a ✅, `warn` prints it in red
after a ⚠️. When the `NO_EMOJI` environment variable is set (checked with
`no_emoji()`), the prefixes are `✓` and `!` instead.

## rust-analyzer project file: `rustlings.project`

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

- `get_sysroot_src()` takes the standard library path from `RUST_SRC_PATH`
  if it is set; otherwise it runs `rustc --print sysroot`, prints
  `Determined toolchain: ...` and uses `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` walks `root` (default `./exercises`) recursively
  and calls `add_path` for every entry, in sorted order.
- `add_path(path)` adds a `Crate` for the path when it ends in `.rs`, with
  edition `2021`, no dependencies and the `test` cfg enabled.
- `to_dict()` returns the JSON structure; `write_to_disk(path)` writes it
  compactly (default `./rust-project.json`).

## Worked solutions: `rustlings.solutions`

| Module | Contents |
|--------|----------|
| `basics` | `calculate_price_of_apples`, `bigger`, `foo_if_fizz`, `animal_habitat`, `is_even`, `sale_price`, `square` |
| `report_card` | `ReportCard` with a numeric or letter grade and `render()` |
| `counters` | `byte_counter` (UTF-8 bytes), `char_counter`, `num_sq` |
| `strings` | `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, and `transformer` over `Command`/`CommandKind` (uppercase, trim, append "bar" n times) |
| `baskets` | `vec_loop`, `vec_map`, `default_fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `records` | `Order`, `create_order_template`, `Package` (at least 10 g), `Point`, the messages `ChangeColor`, `Echo`, `Move`, `Quit`, `State.process`, `maybe_icecream` |
| `errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `CreationError`, `parse_pos_nonzero`, `ParsePosNonzeroError` |
| `traits` | `Wrapper`, `append_bar` (strings and lists), `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types`, `is_even`, `Rectangle`, `longest` |
| `iteration` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide` with `DivisionError`, `NotDivisibleError`, `DivideByZeroError`, `result_with_list`, `list_of_results`, `factorial` |
| `progress` | `Progress`, `count_for`, `count_iterator`, `count_collection_for`, `count_collection_iterator` |
| `pointers` | `Cons` lists, `create_empty_list`, `create_non_empty_list`, clone-on-write `Cow` and `abs_all` |

Errors are raised as exceptions: for example `divide(81, 0)` raises
`DivideByZeroError`, and `Package("Spain", "Austria", 5)` raises
`ValueError`.

```python
from rustlings.solutions.basics import calculate_price_of_apples
from rustlings.solutions.strings import Command, CommandKind, transformer

calculate_price_of_apples(41)   # 41
transformer([("foo", Command(CommandKind.APPEND, 1))])   # ["foobar"]
```

## What this package does not do

There is no command-line program. The package does not compile, run, test,
verify or watch exercise files, does not read an `info.toml` exercise list,
does not track which exercises are done, and does not print hints or reset
exercises. It offers only the status-line helpers, the `rust-project.json`
generator and the worked solutions described above.