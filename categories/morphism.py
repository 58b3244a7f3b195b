"""Morphisms, their comparison and composition, and power-object descriptors."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence


class CategoryError(Exception):
    """Raised when a categorical operation cannot be carried out."""


class Morphism(ABC):
    """A map between two objects of a category.

    Objects may be any values that support equality comparison.
    """

    @abstractmethod
    def domain(self) -> Any:
        """Return the source object."""

    @abstractmethod
    def codomain(self) -> Any:
        """Return the target object."""

    @abstractmethod
    def map(self, value: Any) -> Any:
        """Send an object of the domain to an object of the codomain."""


def check_eq_morphisms(first: Morphism, second: Morphism) -> bool:
    """Return True if both morphisms share domain and codomain and map the
    domain to the same result."""
    return (
        first.domain() == second.domain()
        and first.codomain() == second.codomain()
        and first.map(first.domain()) == second.map(second.domain())
    )


def compose(domain: Any, first: Morphism, second: Morphism) -> Any:
    """Apply ``first`` then ``second`` to ``domain`` (that is, second ∘ first)."""
    return second.map(first.map(domain))


class PowerKind(enum.Enum):
    """The kinds of power object a category can construct."""

    PRODUCT = "product"
    COPRODUCT = "coproduct"
    EXPONENTIAL = "exponential"


@dataclass(frozen=True)
class PowerObjectType:
    """A power object of a given kind built from the objects at two indices."""

    kind: PowerKind
    first: int
    second: int


class PowerObjectGenerator(ABC):
    """Builds power objects and the morphisms that accompany them."""

    @abstractmethod
    def generate_power_object(
        self, power_type: PowerObjectType, objects: Sequence[Any]
    ) -> tuple[Any, list[Morphism]]:
        """Return the new object and its structural morphisms
        (projections, injections or evaluation maps)."""