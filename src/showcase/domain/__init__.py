"""Domain layer: the small records the demos work on. No dependencies on outer layers."""

from showcase.domain.entities import Address, Person, PersonRecord, Range, UserProfile

__all__ = ["Address", "Person", "PersonRecord", "Range", "UserProfile"]
