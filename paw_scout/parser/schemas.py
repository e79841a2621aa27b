# paw_scout/parser/schemas.py
"""
Partial pydantic schemas for JSON-backed sources.

Only the envelope a listing cannot do without is required; everything below
it defaults to empty so a pet with a missing field still shows up.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Dict, Iterator, List, Optional, Tuple, Type

from pydantic import BaseModel


class AnimalListing(BaseModel):
    """Base class for structured listings: yields ``(pet id, link)`` pairs."""

    @abstractmethod
    def pet_links(self) -> Iterator[Tuple[str, str]]:
        ...


class _PetfinderSocial(BaseModel):
    email_url: Optional[str] = None


class _PetfinderAnimal(BaseModel):
    organization_animal_identifier: Optional[str] = None
    social_sharing: Optional[_PetfinderSocial] = None


class _PetfinderItem(BaseModel):
    animal: Optional[_PetfinderAnimal] = None


class _PetfinderResult(BaseModel):
    animals: List[Optional[_PetfinderItem]]


class PetfinderResponse(AnimalListing):
    """Subset of petfinder's animal search response."""

    result: _PetfinderResult

    def pet_links(self) -> Iterator[Tuple[str, str]]:
        for item in self.result.animals:
            animal = item.animal if item is not None else None
            if animal is None:
                continue
            social = animal.social_sharing
            yield (
                animal.organization_animal_identifier or "",
                (social.email_url if social is not None else None) or "",
            )


SCHEMAS: Dict[str, Type[AnimalListing]] = {
    "petfinder": PetfinderResponse,
}

__all__ = ["AnimalListing", "PetfinderResponse", "SCHEMAS"]
