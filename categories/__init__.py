"""Finite categories with objects, morphisms, hom-sets and memoised power objects."""

__version__ = "0.1.0"
__all__ = ["category", "morphism"]