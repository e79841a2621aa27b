"""paw_scout.parser: extraction strategies and the schemas they validate against."""
from paw_scout.parser.extractors import (
    AnimalMap,
    Extractor,
    MarkupExtractor,
    PatternExtractor,
    StructuredExtractor,
)
from paw_scout.parser.schemas import SCHEMAS, AnimalListing, PetfinderResponse

__all__ = [
    "AnimalMap",
    "Extractor",
    "PatternExtractor",
    "StructuredExtractor",
    "MarkupExtractor",
    "AnimalListing",
    "PetfinderResponse",
    "SCHEMAS",
]
