# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. It then prints the instructions it used, one per line.

The instructions are:

| name  | effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: the top element goes to bottom |
| `rra` | rotate `a` down: the bottom goes to the top   |

Each number is first replaced by its rank among the inputs. Two or three
numbers are sorted with a fixed case table. Four or five are sorted by
first moving the smallest ones to `b`. Larger inputs are sorted with a
binary radix sort on the ranks.

## Installation

```
pip install .
```

## Command line

```
pushswap 3 2 1
```

prints

```
sa
rra
```

You can give the numbers as separate arguments, or in one quoted argument
separated by spaces (`pushswap "4 67 3" 87 23`). Input that is already
sorted, and an empty argument list, produce no output. In both cases the
exit status is 0.

On invalid input the command writes `Error` to standard error and exits
with status 1. Input is invalid when a token:

- is not an optionally signed decimal integer,
- is outside the 32-bit signed range, or
- appears more than once.

## Library use

```python
from pushswap.sorting import solve

print(solve([3, 2, 1]))          # ['sa', 'rra']
```

For more control, build the state yourself:

```python
from pushswap.operations import PushSwap
from pushswap.sorting import radix_sort

state = PushSwap([5, 1, 4, 2, 3, 0])
radix_sort(state)
print(state.a.values())          # [0, 1, 2, 3, 4, 5]
print(state.instruction_count())
print(state.operations)          # the recorded moves
```

`PushSwap` holds the two stacks as `state.a` and `state.b`. Both are
`pushswap.stacks.Stack` objects, and their nodes carry a `value` and a rank
(`index`). The module `pushswap.sorting` also provides `sort_three` and
`sort_five` for the small cases.

You can also validate input on its own:

```python
from pushswap.parser import InputError, parse_arguments

try:
    values = parse_arguments(["1 2", "3"])   # [1, 2, 3]
except InputError:
    ...
```

## Helper modules

The package also contains small helpers that work on plain Python values:

- `pushswap.chars`: ASCII tests and case changes (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`).
- `pushswap.strings`: NUL-terminated string operations (`strlen`, `strdup`,
  `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`).
- `pushswap.strtools`: parsing and building strings (`atoi`, `itoa`,
  `split`, `count_words`, `strjoin`, `strtrim`, `substr`, `strmapi`,
  `striteri`).
- `pushswap.output`: printf-style formatting of `%d %i %s %c %p %u %x %X %%`
  (`format_printf`, `printf`), plus the writers `put_char`, `put_str`,
  `put_endl` and `put_nbr`.
- `pushswap.memory`: byte-buffer operations on `bytearray` (`bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`).

## What it does not do

The package has no checker. It cannot read instructions back and check
that they sort a given input. It also only ever uses the six instructions
listed above.

## Tests

```
pip install ".[test]"
pytest
```