"""
Parsing Pipeline - Оркестратор этапов разбора чека.

Координирует выполнение этапов в строгом порядке:
1. Normalization -> 2. Format Selection -> 3. Fields -> 4. Items

Две точки входа:
- process(): strict, все поля и непустой список товаров обязательны
- process_lenient(): без распознавания формата, отсутствующие поля = None
"""

import time
from dataclasses import dataclass
from typing import Optional, Union
from loguru import logger

from config.settings import LENIENT_FORMAT
from contracts.receipt_dto import ProcessedReceipt, LenientReceipt

from .domain.exceptions import NoItemsFoundError
from .formats import FormatRegistry

# Stage imports
from .s1_normalization import NormalizationStage, NormalizationResult
from .s2_format_selection import FormatSelectionStage, FormatSelectionResult
from .s3_fields import FieldsStage, ParsedFields, LenientFields
from .s4_items import ItemsStage, ItemsResult


@dataclass
class PipelineResult:
    """
    Полный результат пайплайна со всеми промежуточными данными.

    Используется для отладки и анализа.
    """
    # Финальный результат
    receipt: Union[ProcessedReceipt, LenientReceipt]

    # Промежуточные результаты этапов
    normalization: Optional[NormalizationResult] = None
    selection: Optional[FormatSelectionResult] = None
    fields: Optional[Union[ParsedFields, LenientFields]] = None
    items: Optional[ItemsResult] = None

    # Метрики
    processing_time_ms: float = 0.0
    strict: bool = True

    def to_dict(self) -> dict:
        return {
            "receipt": self.receipt.model_dump() if self.receipt else None,
            "normalization": self.normalization.to_dict() if self.normalization else None,
            "selection": self.selection.to_dict() if self.selection else None,
            "fields": self.fields.to_dict() if self.fields else None,
            "items": self.items.to_dict() if self.items else None,
            "processing_time_ms": self.processing_time_ms,
            "strict": self.strict,
        }


class ParsingPipeline:
    """
    Пайплайн разбора чека.

    ЦКП: ProcessedReceipt (strict) или LenientReceipt (lenient).

    Пайплайн не хранит состояния между вызовами: реестр форматов неизменяем,
    каждый вызов владеет своими промежуточными результатами.
    """

    def __init__(
        self,
        registry: FormatRegistry,
        normalization_stage: Optional[NormalizationStage] = None,
        selection_stage: Optional[FormatSelectionStage] = None,
        fields_stage: Optional[FieldsStage] = None,
        items_stage: Optional[ItemsStage] = None,
        lenient_format: str = LENIENT_FORMAT,
    ):
        """
        Args:
            registry: Реестр форматов магазинов
            Этапы опциональны - по умолчанию создаются стандартные.
            lenient_format: Код формата для lenient-режима
        """
        self.registry = registry
        self.lenient_format = lenient_format

        self.normalization_stage = normalization_stage or NormalizationStage()
        self.selection_stage = selection_stage or FormatSelectionStage(registry)
        self.fields_stage = fields_stage or FieldsStage()
        self.items_stage = items_stage or ItemsStage()

        logger.info(f"[ParsingPipeline] Инициализирован (форматы: {registry.codes})")

    def process(self, raw_text: str) -> ProcessedReceipt:
        """
        Strict-разбор чека.

        Raises:
            UnsupportedFormatError: Ни один формат не распознал текст
            FieldNotFoundError: Не найдено обязательное поле
            NoItemsFoundError: Нет таблицы товаров или ни одна строка не принята
        """
        return self.run(raw_text, strict=True).receipt

    def process_lenient(self, raw_text: str) -> LenientReceipt:
        """Lenient-разбор: никогда не падает из-за отсутствующих полей или товаров."""
        return self.run(raw_text, strict=False).receipt

    def run(self, raw_text: str, strict: bool = True) -> PipelineResult:
        """
        Прогоняет текст через все этапы.

        Returns:
            PipelineResult: Результат с промежуточными данными этапов
        """
        start_time = time.time()
        mode = "strict" if strict else "lenient"
        logger.info(f"[ParsingPipeline] Старт обработки ({mode}): {len(raw_text)} символов")

        # Stage 1: Normalization
        logger.debug("[ParsingPipeline] Stage 1/4: Normalization")
        normalization = self.normalization_stage.process(raw_text)

        # Stage 2: Format Selection
        logger.debug("[ParsingPipeline] Stage 2/4: Format Selection")
        if strict:
            selection = self.selection_stage.process(normalization)
        else:
            selection = self.selection_stage.assume(self.lenient_format)

        # Stage 3: Fields
        logger.debug("[ParsingPipeline] Stage 3/4: Fields")
        fields = self.fields_stage.process(normalization, selection, strict=strict)

        # Stage 4: Items
        logger.debug("[ParsingPipeline] Stage 4/4: Items")
        items = self.items_stage.process(normalization, selection, strict=strict)

        if strict and not items.items:
            raise NoItemsFoundError(details={"format": selection.code, "section_found": items.section_found})

        receipt_cls = ProcessedReceipt if strict else LenientReceipt
        receipt = receipt_cls(
            raw_text=raw_text,
            processed_text=normalization.text,
            items=items.items,
            **fields.to_dict(),
        )

        processing_time_ms = (time.time() - start_time) * 1000

        logger.info(
            f"[ParsingPipeline] Завершено за {processing_time_ms:.1f}ms: "
            f"{selection.code}, {len(items.items)} товаров"
        )
        if not strict and receipt.missing_fields:
            logger.warning(f"[ParsingPipeline] Lenient: не найдены поля {receipt.missing_fields}")

        return PipelineResult(
            receipt=receipt,
            normalization=normalization,
            selection=selection,
            fields=fields,
            items=items,
            processing_time_ms=processing_time_ms,
            strict=strict,
        )
