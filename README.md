# pushswap

The two-stack puzzle. Integers start on stack `a`, stack `b` starts empty, and a
small fixed set of operations moves numbers between them:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse-rotate: the bottom element goes to the top |

Each operation writes its name on a line of its own when it is applied, even
when it has nothing to act on (swapping a stack of one, pushing from an empty
stack); in that case the stacks are left as they are.

## Installing

```
pip install .
```

## Command line

```
push_swap 3 2 1
push_swap "4 -7 12" 5
```

The command checks its arguments. Each argument is either a single integer or
a string of integers separated by spaces. A `+` or `-` sign is allowed before a
number, and every number has to fit in a signed 32-bit integer. If no
arguments are given, or any argument is invalid, `Error` is written to standard
error, followed by a newline on standard output. The exit status is 0 in every
case, and valid input produces no output.

## What it does not do

The package has no sorting strategy: the command validates its input but does
not load the numbers onto a stack or print a sequence of operations that sorts
them. Operations are applied only through the library, one call at a time.

## Library

```python
import io

from pushswap.stack import Stack
from pushswap.operations import PushSwap, Operation

out = io.StringIO()
game = PushSwap(Stack([3, 2, 1]), Stack([]), out)
game.sa()
game.apply(Operation.RA)
print(out.getvalue())    # "sa\nra\n"
print(list(game.a))      # top first
print(game.a.render())
```

`PushSwap(a, b, out)` holds the two stacks as `game.a` and `game.b`; each
defaults to an empty `Stack`, and `out` defaults to standard output. `apply`
accepts an `Operation` or its name as a string, such as `"rra"`.

`Stack(items)` is a last-in, first-out stack of integers, with `items` given top
first. `push` adds a number on top and returns it; `pop` and `peek` raise
`StackError` on an empty stack. `len()` gives its size, iterating goes from the
top element down, and `render()` returns the elements on one line, top first,
with a space before non-negative numbers so that signs line up.

Input checking is available without the command:

```python
from pushswap.cli import validate_input, valid_multinumber_string

validate_input(["1", "-2", "3 4 5"])      # True
valid_multinumber_string("1 2 x")         # False
```

Other helper modules:

- `pushswap.numbers`: `atol` and `atoi` parse the leading integer of a string
  (after whitespace and an optional sign) as a 64-bit or 32-bit signed value,
  returning 0 when there is none; `is_digit` and `is_num_str` check single
  characters and whole signed numbers.
- `pushswap.printf`: `cformat(fmt, *args)` returns formatted text and
  `cprint(fmt, *args, stream=None)` writes it and returns the number of
  characters written. The conversions are `%c %s %p %d %i %u %x %X %%`; an
  unknown conversion is written as a literal `%`, and too few arguments raise
  `TypeError`.
- `pushswap.lines`: `LineReader(stream, buffer_size=1024)` reads a text or
  binary stream in fixed-size chunks and returns one line per `read_line()`
  call, keeping the trailing newline, and `None` once the stream is exhausted.
  It can also be used as an iterator.

## Running the tests

```
pip install .[test]
pytest
```