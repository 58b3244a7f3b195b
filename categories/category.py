"""Categories of a single class of object, with power-object management."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from categories.morphism import (
    CategoryError,
    Morphism,
    PowerKind,
    PowerObjectGenerator,
    PowerObjectType,
    check_eq_morphisms,
)

HomKey = tuple[int, int]
HomSets = dict[HomKey, list[Morphism]]


def _index_of(objects: Sequence[Any], obj: Any) -> Optional[int]:
    return next((k for k, candidate in enumerate(objects) if candidate == obj), None)


class Category:
    """A category: objects, hom-sets between them keyed by object indices,
    and, when a generator is supplied, a table of generated power objects."""

    def __init__(self, generator: Optional[PowerObjectGenerator] = None) -> None:
        self.objects: list[Any] = []
        self.morphisms: HomSets = {}
        self.power_objects: Optional[dict[PowerObjectType, int]] = (
            None if generator is None else {}
        )
        self.generator = generator

    @classmethod
    def from_object_list(
        cls,
        objects: Iterable[Any],
        generator: Optional[PowerObjectGenerator] = None,
    ) -> "Category":
        """Build a category holding ``objects`` and no morphisms."""
        category = cls(generator)
        category.objects = list(objects)
        return category

    @classmethod
    def _from_parts(
        cls,
        objects: list[Any],
        morphisms: HomSets,
        power_objects: Optional[dict[PowerObjectType, int]],
        generator: Optional[PowerObjectGenerator],
    ) -> "Category":
        category = cls(generator)
        category.objects = objects
        category.morphisms = morphisms
        category.power_objects = power_objects
        return category

    def _object_at(self, index: int) -> tuple[bool, Any]:
        if 0 <= index < len(self.objects):
            return True, self.objects[index]
        return False, None

    def add_object(self, obj: Any) -> None:
        """Add ``obj`` unless an equal object is already present."""
        if obj not in self.objects:
            self.objects.append(obj)

    def add_morphism(self, domain: int, codomain: int, morphism: Morphism) -> None:
        """Add ``morphism`` to the hom-set between the objects at the given indices.

        Raises CategoryError if the indices do not name the morphism's own
        domain and codomain. A morphism equal to one already present is ignored.
        """
        found, obj = self._object_at(domain)
        if not found or obj != morphism.domain():
            raise CategoryError(
                f"Domain index {domain} does not match morphism's domain object"
            )
        found, obj = self._object_at(codomain)
        if not found or obj != morphism.codomain():
            raise CategoryError(
                f"Codomain index {codomain} does not match morphism's codomain object"
            )

        homset = self.morphisms.setdefault((domain, codomain), [])
        if not any(check_eq_morphisms(existing, morphism) for existing in homset):
            homset.append(morphism)

    def fetch_power_object_id(self, power_type: PowerObjectType) -> int:
        """Return the index of a power object, generating it on first request."""
        if self.generator is None or self.power_objects is None:
            raise CategoryError("Uninitialized power object generator!")
        known = self.power_objects.get(power_type)
        if known is not None:
            return known

        new_obj, new_morphisms = self.generator.generate_power_object(
            power_type, list(self.objects)
        )
        self.add_object(new_obj)
        new_idx = len(self.objects) - 1
        self.power_objects[power_type] = new_idx

        for morphism in new_morphisms:
            domain_idx = _index_of(self.objects, morphism.domain())
            if domain_idx is None:
                raise CategoryError("Domain object not found for morphism")
            codomain_idx = _index_of(self.objects, morphism.codomain())
            if codomain_idx is None:
                raise CategoryError("Codomain object not found for morphism")
            self.add_morphism(domain_idx, codomain_idx, morphism)

        return new_idx

    def is_monic(self, domain: int, codomain: int, index: int) -> bool:
        """Return whether the ``index``-th morphism of Hom(domain, codomain)
        is left-cancellable against every hom-set into ``domain``."""
        homset = self.morphisms.get((domain, codomain))
        if homset is None or not 0 <= index < len(homset):
            raise CategoryError(
                f"No morphism {index} in hom-set ({domain}, {codomain})"
            )
        base = homset[index]

        for source in range(len(self.objects)):
            prior_maps = self.morphisms.get((source, domain))
            if prior_maps is None:
                continue
            outputs = [m.map(m.domain()) for m in prior_maps]
            chained = [base.map(out) for out in outputs]
            for ref_output, ref_chained in zip(outputs, chained):
                for test_output, test_chained in zip(outputs, chained):
                    if test_chained == ref_chained and test_output != ref_output:
                        return False
        return True

    def fetch_subobjects(self) -> dict[int, list[tuple[int, int]]]:
        """Group every monic morphism by codomain index, as
        ``(domain index, position in hom-set)`` pairs."""
        subobjects: dict[int, list[tuple[int, int]]] = {}
        for (domain, codomain), homset in self.morphisms.items():
            for position in range(len(homset)):
                if self.is_monic(domain, codomain, position):
                    subobjects.setdefault(codomain, []).append((domain, position))
        return subobjects

    def terminal(self) -> int:
        """Return the index of the unique terminal object."""
        count = len(self.objects)
        options = [
            idx
            for idx in range(count)
            if all(len(self.morphisms.get((j, idx), ())) == 1 for j in range(count))
        ]
        if not options:
            raise CategoryError("No terminal object found in this category")
        if len(options) > 1:
            raise CategoryError(f"Multiple terminal objects found: {options}")
        return options[0]


class CategoryBuilder:
    """Builds a category with every first-order power object of its seed objects."""

    def __init__(
        self, objects: Iterable[Any], morphisms: Optional[HomSets] = None
    ) -> None:
        self.objects = list(objects)
        self.morphisms: HomSets = {
            key: list(homset) for key, homset in (morphisms or {}).items()
        }
        self.generator: Optional[PowerObjectGenerator] = None

    def set_generator(self, generator: PowerObjectGenerator) -> None:
        """Set the generator used to create power objects on build."""
        self.generator = generator

    def build(self) -> Category:
        """Construct the category, generating coproducts, exponentials and
        products for every ordered pair of seed objects if a generator is set."""
        power_objects: dict[PowerObjectType, int] = {}
        objects = list(self.objects)
        morphisms: HomSets = {key: list(homset) for key, homset in self.morphisms.items()}

        if self.generator is not None:
            seed_count = len(self.objects)
            for i in range(seed_count):
                for j in range(seed_count):
                    for kind in (
                        PowerKind.COPRODUCT,
                        PowerKind.EXPONENTIAL,
                        PowerKind.PRODUCT,
                    ):
                        variant = PowerObjectType(kind, i, j)
                        obj, homset = self.generator.generate_power_object(
                            variant, list(objects)
                        )
                        for morphism in homset:
                            start = _index_of(objects, morphism.domain())
                            if start is None:
                                raise CategoryError(
                                    "Domain object not found for morphism"
                                )
                            end = _index_of(objects, morphism.codomain())
                            if end is None:
                                raise CategoryError(
                                    "Codomain object not found for morphism"
                                )
                            morphisms.setdefault((start, end), []).append(morphism)
                        objects.append(obj)
                        power_objects[variant] = len(objects) - 1

        return Category._from_parts(objects, morphisms, power_objects, self.generator)