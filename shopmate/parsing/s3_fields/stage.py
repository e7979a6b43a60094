"""
Stage 3: Fields

ЦКП: Поля чека (магазин, дата, суммы, оплата, карта).

Input: NormalizationResult, FormatSelectionResult
Output: ParsedFields (strict) или LenientFields (lenient)
"""

from typing import Optional, Union
from loguru import logger

from ..s1_normalization import NormalizationResult
from ..s2_format_selection import FormatSelectionResult
from .field_extractor import FieldExtractor, ParsedFields, LenientFields


class FieldsStage:
    """
    Stage 3: Fields.
    """

    def __init__(self, extractor: Optional[FieldExtractor] = None):
        self.extractor = extractor or FieldExtractor()

    def process(
        self,
        normalized: NormalizationResult,
        selection: FormatSelectionResult,
        strict: bool = True,
    ) -> Union[ParsedFields, LenientFields]:
        """
        Извлекает поля по якорям выбранного формата.

        Raises:
            FieldNotFoundError: Только в strict-режиме
        """
        result = self.extractor.extract(normalized.text, selection.retailer_format, strict=strict)
        logger.debug(f"[Stage 3: Fields] {selection.code}: {result.to_dict()}")
        return result
