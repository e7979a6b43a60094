"""
Домен Parsing: разбор OCR текста корейских чеков.

Архитектура: 4-этапный пайплайн
- Stage 1: Normalization (нормализация OCR текста)
- Stage 2: Format Selection (выбор формата магазина)
- Stage 3: Fields (магазин, дата, суммы, оплата)
- Stage 4: Items (товары с проверкой арифметики)

Вход: str (OCR текст)
Выход: contracts.ProcessedReceipt / contracts.LenientReceipt
"""

from shopmate.parsing.pipeline import ParsingPipeline, PipelineResult
from shopmate.parsing.application import create_pipeline, create_registry
from shopmate.parsing.formats import FormatRegistry, RetailerFormat

# Stage exports
from shopmate.parsing.s1_normalization import NormalizationStage, NormalizationResult, normalize
from shopmate.parsing.s2_format_selection import FormatSelectionStage, FormatSelectionResult
from shopmate.parsing.s3_fields import FieldsStage, FieldExtractor, ParsedFields, LenientFields
from shopmate.parsing.s4_items import ItemsStage, ItemExtractor, ItemsResult

from shopmate.parsing.domain.exceptions import (
    ReceiptProcessingError,
    UnsupportedFormatError,
    FieldNotFoundError,
    NoItemsFoundError,
    FormatConfigurationError,
)

__all__ = [
    # Pipeline
    "ParsingPipeline",
    "PipelineResult",
    "create_pipeline",
    "create_registry",
    "FormatRegistry",
    "RetailerFormat",
    # Stages
    "NormalizationStage",
    "NormalizationResult",
    "normalize",
    "FormatSelectionStage",
    "FormatSelectionResult",
    "FieldsStage",
    "FieldExtractor",
    "ParsedFields",
    "LenientFields",
    "ItemsStage",
    "ItemExtractor",
    "ItemsResult",
    # Errors
    "ReceiptProcessingError",
    "UnsupportedFormatError",
    "FieldNotFoundError",
    "NoItemsFoundError",
    "FormatConfigurationError",
]
