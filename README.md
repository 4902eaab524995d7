# hofkit

Small, composable higher-order function adaptors for Python. The package
has no dependencies beyond the standard library.

## Installation

```
pip install hofkit
```

## Modules

| Module | What it gives you |
| --- | --- |
| `hofkit.placeholders` | Numbered placeholders `_1` … `_9` (`Placeholder`) that build `BindExpression`s from operators, and the unnamed placeholder `_` (`UnnamedPlaceholder`) that turns an operator into a plain function; `is_placeholder(obj)` returns a placeholder's index or 0 |
| `hofkit.always` | `always(value)` returns an `Always` function that ignores its arguments and returns a shallow copy of `value`; `always()` returns `None`; `always_ref(value)` returns the object itself |
| `hofkit.decay` | `decay(x)` returns a shallow copy of `x` |
| `hofkit.arg` | `arg(n)` builds an `ArgSelector` that returns the n-th argument (counting from 1); `arg_c(n, *args)` selects directly |
| `hofkit.flip` | `flip(f)` returns a `FlipAdaptor` that swaps the first two arguments |
| `hofkit.fold` | `fold(f)` and `fold(f, state)` return a `FoldAdaptor`: a left fold of a binary function over the arguments |
| `hofkit.lift` | `lift(f)` wraps a callable in a `LiftAdaptor`; `lift_class(name, f)` makes a named class whose instances call `f` |
| `hofkit.combine` | `combine(f, *gs)` returns a `CombineAdaptor` that calls `f(g1(x1), g2(x2), ...)` |
| `hofkit.decorate` | `decorate(f)` builds decorators: `decorate(f)(x)(g)(*xs) == f(x, g, *xs)` |
| `hofkit.unpack` | `unpack_sequence(f, seq)` calls `f(*seq)` for a tuple or list; `is_unpackable(seq)` tells whether that works for an object or a type |

## Examples

Placeholders:

```python
from hofkit.placeholders import _, _1, _2

assert (_1 + _2)(1, 2) == 3
assert (_1 * _1)(4) == 16
assert (_ + _)(1, 2) == 3
assert (_ - 1)(2) == 1
assert (2 * _)(3) == 6
assert (-_)(2) == -2
```

Selecting, flipping and folding:

```python
from hofkit.always import always
from hofkit.arg import arg
from hofkit.flip import flip
from hofkit.fold import fold
from hofkit.placeholders import _

assert always(10)(1, 2, 3, 4, 5) == 10
assert arg(3)(1, 2, 3, 4, 5) == 3
assert flip(arg(1))(1, 2, 3, 4) == 2
assert flip(_ - _)(2, 5) == 3
assert fold(max, 0)(2, 3, 4, 5) == 5
assert fold(max, 0)() == 0
assert fold(lambda s, x: s + x, "")("hello", "-", "world") == "hello-world"
```

`fold(f)` without an initial state uses the first argument as the state and
raises `TypeError` when called with no arguments.

A decorator that logs before calling a function:

```python
from hofkit.decorate import decorate

def logger(message, f, *args):
    print(message)
    return f(*args)

log = decorate(logger)
assert log("Calling sum")(lambda x, y: x + y)(1, 2) == 3
```

Combining functions with their arguments:

```python
from hofkit.combine import combine

f = combine(lambda *xs: tuple(xs), lambda x: (1, x), lambda x: (2, x))
assert f(3, 7) == ((1, 3), (2, 7))
```

The number of call arguments must match the number of argument functions;
otherwise `TypeError` is raised.

Lifting and unpacking:

```python
from hofkit.lift import lift, lift_class
from hofkit.unpack import is_unpackable, unpack_sequence

my_max = lift(max)
assert my_max(3, 4) == 4

MaxF = lift_class("MaxF", max)
assert MaxF()(3, 4) == 4

assert unpack_sequence(lambda a, b: a + b, (1, 2)) == 3
assert is_unpackable([1, 2])
assert not is_unpackable(dict)
```

## Scope

The package offers the adaptors listed above and nothing more. It does not
choose between several overloads by the arguments given, and it does not
explain why a call could not be made: a call that does not fit simply
raises the error Python raises.

## Running the tests

```
pip install -e ".[test]"
pytest
```