# cslib

Small, predictable collection classes and a configurable token scanner.
The package has no dependencies outside the standard library.

- `cslib.vector.Vector`: an ordered list whose indexing is strictly
  bounds-checked. Negative indices are rejected.
- `cslib.stack.Stack`: a last-in/first-out stack.
- `cslib.sortedset.SortedSet`: a set of distinct values kept in ascending
  order, with an optional sort key.
- `cslib.tokenscanner.TokenScanner`: splits text into words, numbers,
  quoted strings and operators.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Collections

```python
from cslib.vector import Vector
from cslib.stack import Stack
from cslib.sortedset import SortedSet

v = Vector([1, 2, 3])
v.add(4)
v.insert(0, 0)
print(v)                      # {0, 1, 2, 3, 4}
print(Vector(["a", "b"]))     # {"a", "b"}
print(Vector.filled(3, 0))    # {0, 0, 0}

s = Stack()
s.push("a")
s.push("b")
print(s.peek())     # b
print(s.pop())      # b

digits = SortedSet([3, 1, 2])
print(digits.first())                 # 1
print(digits + SortedSet([5]))        # {1, 2, 3, 5}
print(digits * SortedSet([2, 3, 9]))  # {2, 3}
print(digits - 2)                     # {1, 3}
```

In the printed form, all three collections use braces. Strings appear in
double quotes with escape sequences.

### Vector

`Vector` supports `get`, `set`, `insert`, `remove` (by index), `add`,
`clear`, `is_empty`, `len()`, `[]`, iteration, `==`, and `+`. The `+=`
operator appends either another `Vector`'s elements or a single value.
`map_all(fn)` calls `fn` on each element in index order. An index outside
the valid range raises `IndexError`. `insert` also accepts an index equal
to the length.

### Stack

`Stack` supports `push`, `pop`, `peek`, `clear`, `is_empty`, `len()`, `==`
and iteration. Iteration and the printed form both run from the bottom of
the stack to the top. Calling `pop` or `peek` on an empty stack raises
`IndexError`.

### SortedSet

`SortedSet(items, key=...)` keeps its elements ordered by `key` (by the
values themselves if no key is given). Two values count as the same
element when neither key sorts before the other. The class supports:

- `add`, `remove`, `in`, `clear`, `is_empty`, `len()`, `is_subset_of`,
  `first` and `map_all`.
- Union `+`, intersection `*` and difference `-`, and their in-place forms.
  `+`, `-`, `+=` and `-=` also accept a single element.

Removing an absent value is not an error. Calling `first()` on an empty set
raises `ValueError`.

## Token scanning

```python
from cslib.tokenscanner import TokenScanner, TokenType

scanner = TokenScanner("LET x = 3.5 + y // comment")
scanner.ignore_whitespace()
scanner.ignore_comments()
scanner.scan_numbers()

for token in scanner:
    print(token, scanner.get_token_type(token))
```

The input may be a string or a readable text stream, given to the
constructor or to `set_input()`.

`next_token()` returns `""` at the end of the input. Iterating over the
scanner stops there. Other methods:

- `has_more_tokens()` looks ahead without consuming a token.
- `save_token()` pushes a token back.
- `position()` gives the offset of the next unread token.

Options are switched on by calling:

- `ignore_whitespace()`
- `ignore_comments()` (`//` and `/* */`)
- `scan_numbers()` (with fraction and exponent)
- `scan_strings()` (quoted strings as single tokens)
- `add_word_characters(chars)`
- `add_operator(op)` (multi-character operators such as `<=`)

`get_token_type()` returns a `TokenType`: `EOF`, `SEPARATOR`, `WORD`,
`NUMBER`, `STRING` or `OPERATOR`. `get_string_value()` strips the quotes
from a string token and decodes its escapes, including octal and `\x`
forms.

Two conditions raise `ScannerError`, a subclass of `ValueError`:

- `verify_token(expected)` raises it when the next token is not `expected`.
- An unterminated string raises it.

`get_char()` and `unget_char()` give raw character access.