"""
Форматы магазинов для домена Parsing.

Содержит:
- FormatConfig: DTO конфигурации формата (с Pydantic валидацией)
- FormatConfigLoader: Загрузчик конфигураций из YAML файлов
- RetailerFormat: Скомпилированный формат (паттерны как данные)
- FormatRegistry: Упорядоченный реестр форматов
"""

from .format_config import FormatConfig, AnchorsConfig, ItemSectionConfig, FormatConfigLoader
from .retailer_format import RetailerFormat, ItemRules, tolerant_pattern
from .format_registry import FormatRegistry

__all__ = [
    "FormatConfig",
    "AnchorsConfig",
    "ItemSectionConfig",
    "FormatConfigLoader",
    "RetailerFormat",
    "ItemRules",
    "tolerant_pattern",
    "FormatRegistry",
]
