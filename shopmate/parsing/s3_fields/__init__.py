"""
Stage 3: Fields

ЦКП: Извлечение полей чека по якорным паттернам формата.
"""

from .stage import FieldsStage
from .field_extractor import FieldExtractor, ParsedFields, LenientFields, FIELD_NAMES

__all__ = [
    "FieldsStage",
    "ParsedFields",
    "LenientFields",
    "FIELD_NAMES",
    "FieldExtractor",
]
