# categories

Small, explicit finite categories in Python: objects, morphisms between them,
hom-sets, and power objects (products, coproducts and exponentials) that are
generated on demand and remembered.

## Installing

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Concepts

- **Objects** are any values that compare with `==`.
- **Morphisms** subclass `categories.morphism.Morphism`. Each one provides
  `domain()`, `codomain()` and `map(value)`.
- **Hom-sets** collect the morphisms between a pair of objects, which are
  given by their indices in the category. They are kept in
  `Category.morphisms`, a dict keyed by `(domain index, codomain index)`.
- **Power objects** are described by a `PowerObjectType`, which holds a
  `PowerKind` (`PRODUCT`, `COPRODUCT` or `EXPONENTIAL`) and two object
  indices. A `PowerObjectGenerator` subclass builds each one on request by
  implementing `generate_power_object(power_type, objects)`, which returns the
  new object and a list of its morphisms.

Errors are raised as `categories.morphism.CategoryError`.

## Morphism helpers

- `check_eq_morphisms(first, second)` is true when both morphisms have the
  same domain and codomain and map their domain to the same result.
- `compose(domain, first, second)` applies `first` and then `second` to
  `domain` and returns the result.

## Example

```python
from categories.morphism import Morphism, compose
from categories.category import Category


class Const(Morphism):
    def __init__(self, source, target):
        self._source, self._target = source, target

    def domain(self):
        return self._source

    def codomain(self):
        return self._target

    def map(self, value):
        return self._target


cat = Category(None)
cat.add_object("A")   # index 0
cat.add_object("B")   # index 1
cat.add_object("B")   # already present, not added again
cat.add_morphism(0, 1, Const("A", "B"))
cat.add_morphism(0, 1, Const("A", "B"))  # equal morphism, not added again
cat.add_morphism(1, 1, Const("B", "B"))

print(len(cat.morphisms[(0, 1)]))                      # 1
print(cat.terminal())                                  # 1
print(compose("A", Const("A", "B"), Const("B", "C")))  # C
```

`add_morphism` raises `CategoryError` when an index is out of range or the
object at it is not the morphism's own domain or codomain.

`Category.from_object_list(objects, generator)` builds a category holding the
given objects and no morphisms.

## Power objects

Pass a `PowerObjectGenerator` to `Category` and the category can produce
power objects:

- `fetch_power_object_id(power_type)` returns the index of the object. If the
  object has not been requested before, it is generated, added to the
  category together with its morphisms, and remembered for later calls.
  Each of those morphisms must lead between objects already in the category,
  otherwise `CategoryError` is raised.
- `CategoryBuilder(objects, morphisms)` takes seed objects and an optional
  dict of hom-sets. After `set_generator(generator)`, `build()` creates, for
  every ordered pair of seed indices, the coproduct, exponential and product
  in that order, appending each new object and recording it in the
  category's `power_objects` table. Without a generator, `build()` returns a
  category of the seed objects and morphisms only, with an empty table.

Without a generator, `fetch_power_object_id` raises `CategoryError`.

## Other queries

- `is_monic(domain, codomain, index)` tests whether the `index`-th morphism of
  a hom-set is left-cancellable with respect to the morphisms that lead into
  its domain. It raises `CategoryError` if there is no such morphism.
- `fetch_subobjects()` returns a dict from codomain index to the list of
  `(domain index, position in hom-set)` pairs of the monic morphisms into it.
- `terminal()` returns the single object that has exactly one morphism into
  it from every object. It raises `CategoryError` when there is no such
  object, or when there is more than one.

## What it does not do

The package is a library only: it has no command-line tool. It ships no
concrete morphisms or power-object generators; products, coproducts and
exponentials exist only as far as the `PowerObjectGenerator` you supply
builds them.