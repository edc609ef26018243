# strkit

strkit is a small set of helpers for strings, numbers and files. It has no dependencies outside the standard library.

| Module             | Functions                                        |
|--------------------|--------------------------------------------------|
| `strkit.compare`   | `cmp_str`, `cmp_n_str`                           |
| `strkit.length`    | `str_len`, `arr_len`, `nb_len`                   |
| `strkit.convert`   | `str_to_int`, `int_to_str`                       |
| `strkit.duplicate` | `dup_str`, `dup_n_str`, `dup_arr`, `dup_n_arr`   |
| `strkit.cut`       | `cut`                                            |
| `strkit.files`     | `read_file`                                      |
| `strkit.output`    | `write_char`, `write_text`, `write_arr`          |
| `strkit.cli`       | `template`, `main`                               |

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```python
from strkit.compare import cmp_str, cmp_n_str
from strkit.convert import str_to_int, int_to_str
from strkit.cut import cut
from strkit.duplicate import dup_n_str, dup_n_arr
from strkit.files import read_file
from strkit.length import arr_len, nb_len
from strkit.output import write_arr

cmp_str("a", "b")              # -1: code-point difference at the first mismatch
cmp_n_str("abc", "abd", 2)     # 0: only the first two characters are compared
str_to_int("896345")           # 896345
str_to_int("e")                # -1: any non-digit makes the string invalid
str_to_int("")                 # 0
int_to_str(-42)                # "-42"
nb_len(-1034)                  # 4: digits, sign ignored
arr_len(iter("abc"))           # 3: counts the elements of any iterable
dup_n_str("arc on top", 5)     # "arc o"
dup_n_arr([1, 2, 3], 2)        # [1, 2]
cut("Hello World is_sucessfull", " _")
# ["Hello", "World", "is", "sucessfull"]

text = read_file("notes.txt")  # UTF-8, line endings kept as they are
write_arr(["first", "second"])  # prints each entry followed by a newline
```

Notes on behaviour:

- Comparison looks only at the common prefix of the two strings, so a string compares equal to any of its prefixes: `cmp_str("a", "")` returns `0`.
- `cut` drops empty pieces, so runs of separators and separators at either end produce no empty strings.
- `read_file` raises `OSError` when the file cannot be opened.
- The `write_*` functions write to standard output unless a `stream` is given. `write_char` raises `ValueError` unless it gets exactly one character other than NUL.
- A negative `limit` in `cmp_n_str`, `dup_n_str` or `dup_n_arr` raises `ValueError`. Passing `None` where a string or iterable is expected raises `TypeError`.

## Command line

The package installs a `strkit` command:

```
strkit
```

The command accepts any arguments and exits with status 0. It does no other work. Its only purpose is to serve as an entry point. All of the functionality lives in the library modules listed above.

## Running the tests

```
pip install ".[test]"
pytest
```