"""
Stage 2: Format Selection

ЦКП: Формат магазина, по правилам которого разбирается чек.

Input: NormalizationResult
Output: FormatSelectionResult(retailer_format)

Выбор детерминирован: первый формат реестра, распознавший текст.
Фолбэка на "похожий" формат нет.
"""

from dataclasses import dataclass
from loguru import logger

from ..formats import FormatRegistry, RetailerFormat
from ..s1_normalization import NormalizationResult


@dataclass
class FormatSelectionResult:
    """
    Результат Stage 2: Format Selection.
    """
    retailer_format: RetailerFormat
    recognized: bool = True

    @property
    def code(self) -> str:
        return self.retailer_format.code

    def to_dict(self) -> dict:
        return {
            "code": self.retailer_format.code,
            "name": self.retailer_format.name,
            "recognized": self.recognized,
        }


class FormatSelectionStage:
    """
    Stage 2: Format Selection.
    """

    def __init__(self, registry: FormatRegistry):
        """
        Args:
            registry: Реестр форматов (создаётся один раз при старте)
        """
        self.registry = registry

    def process(self, normalized: NormalizationResult) -> FormatSelectionResult:
        """
        Raises:
            UnsupportedFormatError: Ни один формат не распознал текст
        """
        retailer_format = self.registry.select(normalized.text)
        logger.debug(f"[Stage 2: Format Selection] {retailer_format.code} ({retailer_format.name})")
        return FormatSelectionResult(retailer_format=retailer_format)

    def assume(self, code: str) -> FormatSelectionResult:
        """Берёт формат по коду без распознавания (lenient-режим)."""
        retailer_format = self.registry.get(code)
        logger.debug(f"[Stage 2: Format Selection] Формат задан явно: {code}")
        return FormatSelectionResult(retailer_format=retailer_format, recognized=False)
