# reflex

A handful of small, dependency-free Python utilities.

## Modules

### `reflex.none`

- `NoneT` – a "no value" marker. Every instance is the same singleton, it is
  falsy, it equals only other `NoneT` instances, and it prints and formats as
  `none`.
- `none` – the singleton instance.
- `is_none(value)` – `True` when `value` is the marker.
- `void_is_none(value)` – turns `None` into `none`; anything else is returned
  unchanged.

### `reflex.args`

- `Pack(*args)` / `forward_as_pack(*args)` – an immutable bundle of arguments.
  It supports `len()`, iteration, indexing (a slice gives a new `Pack`),
  equality and hashing.
  - `get(i)` returns one element; `get(i, j, ...)` returns a tuple.
  - `selector(matcher)` gives the indexes of elements whose type matches;
    `get_if(matcher)` gives those elements.
  - `select_indexes(*matchers)` gives one index group per matcher followed by
    the indexes no matcher picked; `select(*matchers)` gives the same groups as
    `Pack` objects.
  - A matcher is a type, a tuple of types (matched with `issubclass`), or a
    callable taking the element's type and returning a truthy value.
- Free functions `get(index, pack)`, `get_if(matcher, pack)` and
  `select(pack, *matchers)`; they raise `TypeError` if `pack` is not a `Pack`.
- `Kwargs` – a read-only mapping whose values are also reachable as attributes.
- `make_kwargs(names, *args)` – pairs a comma-separated name list with the
  values in order. Each entry's name is taken by `parse_name`, so
  `"a, b = 2"` gives the names `a` and `b`. Raises `ValueError` for more values
  than names, an empty name, or a duplicate name.
- `parse_name(raw)` – the first run of characters that are neither spaces nor
  `=`.
- `parse_integral(text)` – parses decimal digits, treating the empty string
  (or all zeros) as `0`; any other character raises `ValueError`.

### `reflex.permutations`

- `permutations(n, iterable)` – yields, as tuples, the first `n` elements of
  every full arrangement of the input, in lexicographic order of element
  positions. When `n` is less than the number of elements minus one, each
  prefix therefore appears once per ordering of the remaining elements.
  Raises `ValueError` when `n` is negative or larger than the input.

### `reflex.registry`

- `Registry` – types registered in order, each with a stable index.
  - `add(type_)` registers a type and returns it, so it works as a class
    decorator. Adding a type again keeps its first index; non-types raise
    `TypeError`; more than `Registry.max_types` (512) types raise
    `OverflowError`.
  - `len()`, iteration, `in`, `contains(type_)`, `has_index(index)`,
    `at(index)` (raises `IndexError`), `index_of(type_)` (returns
    `Registry.npos`, `-1`, when absent) and `all()`.
  - `visit(index, fn)` calls `fn` with the registered type, or with `NotFound`
    when nothing is registered at that index.
  - `lock()` returns a tuple of `RegistryEntry(type_, name)` records, the name
    being the type's qualified name.

## Example

```python
from reflex.args import forward_as_pack, make_kwargs
from reflex.permutations import permutations
from reflex.registry import Registry

pack = forward_as_pack(1, "two", 3.0, "four")
strings, rest = pack.select(str)
assert tuple(strings) == ("two", "four")
assert tuple(rest) == (1, 3.0)

kw = make_kwargs("a, b = 2", 1, 2)
assert kw.a == 1 and kw["b"] == 2

shapes = Registry()


@shapes.add
class Circle:
    pass


assert shapes.index_of(Circle) == 0

print(list(permutations(2, "abc")))
```

## What this package does not do

It has no JSON reading or writing and no value-dispatching helpers; it offers
only the modules listed above.

## Installation

```
pip install .
```

## Running the tests

```
pip install ".[test]"
pytest
```