"""
RetailerFormat - скомпилированный формат чека одного магазина.

ЦКП: Неизменяемый набор паттернов (распознавание, якоря полей, правила товаров).

Формат - это данные, а не подкласс: выбор делает реестр по recognizes(),
поля и товары извлекают общие экстракторы, читая паттерны отсюда.
"""

import re
from dataclasses import dataclass
from typing import Tuple

from .format_config import FormatConfig


def tolerant_pattern(literal: str, separator: str = r"\s*") -> str:
    r"""
    Строит паттерн, допускающий мусор OCR между символами.

    "이마트" -> "이\s*마\s*트"
    """
    return separator.join(re.escape(ch) for ch in literal if not ch.isspace())


@dataclass(frozen=True)
class ItemRules:
    """Скомпилированные правила таблицы товаров."""
    section_pattern: re.Pattern
    exclude: Tuple[str, ...]
    shapes: Tuple[re.Pattern, ...]
    leading_noise_pattern: re.Pattern
    junk_prefix_pattern: re.Pattern
    name_strip_patterns: Tuple[re.Pattern, ...]
    header_residue_pattern: re.Pattern


@dataclass(frozen=True)
class RetailerFormat:
    """
    Формат чека конкретного магазина (tagged variant, тег = code).
    """
    code: str
    name: str
    store_pattern: re.Pattern
    date_pattern: re.Pattern
    total_pattern: re.Pattern
    payment_pattern: re.Pattern
    vat_pattern: re.Pattern
    card_pattern: re.Pattern
    items: ItemRules

    def recognizes(self, text: str) -> bool:
        """Распознаёт чек по названию магазина."""
        return self.store_pattern.search(text) is not None

    @classmethod
    def from_config(cls, config: FormatConfig) -> "RetailerFormat":
        """Компилирует все паттерны формата."""
        sep = config.separator
        amount = config.amount_pattern
        section = config.item_section

        header = tolerant_pattern("".join(section.header_columns), sep)
        footers = "|".join(tolerant_pattern(footer, sep) for footer in section.footers)

        if section.junk_prefixes:
            junk = "|".join(tolerant_pattern(prefix) for prefix in section.junk_prefixes)
            junk_prefix_pattern = re.compile(rf"^(?:{junk})\s*")
        else:
            # Никогда не совпадает
            junk_prefix_pattern = re.compile(r"(?!)")

        residue = ".*".join(re.escape(column) for column in section.header_columns)

        items = ItemRules(
            section_pattern=re.compile(rf"{header}([\s\S]*?)(?:{footers})"),
            exclude=tuple(section.exclude),
            shapes=tuple(re.compile(shape) for shape in section.shapes),
            leading_noise_pattern=re.compile(section.leading_noise),
            junk_prefix_pattern=junk_prefix_pattern,
            name_strip_patterns=tuple(re.compile(pattern) for pattern in section.name_strip),
            header_residue_pattern=re.compile(rf"{residue}.*$"),
        )

        return cls(
            code=config.code,
            name=config.name,
            store_pattern=re.compile(tolerant_pattern(config.store_name, sep)),
            date_pattern=re.compile(config.date_pattern),
            total_pattern=re.compile(rf"{tolerant_pattern(config.anchors.total, sep)}\s*{amount}"),
            payment_pattern=re.compile(tolerant_pattern(config.anchors.payment, sep)),
            vat_pattern=re.compile(rf"{tolerant_pattern(config.anchors.vat, sep)}\s*{amount}"),
            card_pattern=re.compile(re.escape(config.card_literal)),
            items=items,
        )
