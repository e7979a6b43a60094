"""
Stage 4: Items

ЦКП: Список товаров чека.

Input: NormalizationResult, FormatSelectionResult
Output: ItemsResult
"""

from typing import Optional
from loguru import logger

from ..s1_normalization import NormalizationResult
from ..s2_format_selection import FormatSelectionResult
from .item_extractor import ItemExtractor, ItemsResult


class ItemsStage:
    """
    Stage 4: Items.
    """

    def __init__(self, extractor: Optional[ItemExtractor] = None):
        self.extractor = extractor or ItemExtractor()

    def process(
        self,
        normalized: NormalizationResult,
        selection: FormatSelectionResult,
        strict: bool = True,
    ) -> ItemsResult:
        result = self.extractor.run(normalized.text, selection.retailer_format, strict=strict)

        if not result.section_found:
            logger.warning(f"[Stage 4: Items] {selection.code}: заголовок таблицы товаров не найден")

        return result
