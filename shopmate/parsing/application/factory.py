"""
Фабрика пайплайна разбора чеков.

Реестр форматов загружается из YAML один раз при создании пайплайна.
"""

from pathlib import Path
from typing import Optional, Sequence
from loguru import logger

from config.settings import LENIENT_FORMAT
from ..formats import FormatRegistry
from ..pipeline import ParsingPipeline


def create_registry(
    codes: Optional[Sequence[str]] = None,
    formats_dir: Optional[Path] = None,
) -> FormatRegistry:
    """
    Создаёт реестр форматов.

    Args:
        codes: Коды форматов по порядку (по умолчанию RETAILER_FORMATS)
        formats_dir: Директория с YAML форматов (по умолчанию FORMATS_DIR)

    Raises:
        FormatConfigurationError: Некорректный или отсутствующий YAML формата
    """
    return FormatRegistry.load(codes, formats_dir=formats_dir)


def create_pipeline(
    codes: Optional[Sequence[str]] = None,
    formats_dir: Optional[Path] = None,
    lenient_format: str = LENIENT_FORMAT,
) -> ParsingPipeline:
    """
    Создаёт пайплайн со стандартными этапами.

    Returns:
        ParsingPipeline: Готовый к использованию пайплайн
    """
    logger.debug("[Factory] Создание пайплайна")
    registry = create_registry(codes, formats_dir)
    return ParsingPipeline(registry, lenient_format=lenient_format)
