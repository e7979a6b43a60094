"""
Item Extractor - Извлечение товаров из таблицы чека.

ЦКП: Упорядоченный список ReceiptItem без дублей.

Алгоритм:
1. Изолировать таблицу между заголовком и футером (нет заголовка -> [])
2. Отбросить служебные строки (скидки, заголовки, итоги)
3. Разобрать строку лучшей по арифметике формой (ItemParser)
4. Принять, если погрешность в пределах допуска
5. Очистить название, отбросить пустые и дубли (name, price, quantity)
"""

from dataclasses import dataclass, field
from typing import List, Optional
from loguru import logger

from contracts.receipt_dto import ReceiptItem
from ..formats import RetailerFormat
from .line_classifier import LineClassifier
from .item_parser import ItemParser
from .math_checker import MathChecker
from .name_cleaner import NameCleaner


@dataclass
class ItemsResult:
    """
    Результат извлечения товаров со статистикой по строкам.
    """
    items: List[ReceiptItem] = field(default_factory=list)
    section_found: bool = False
    lines_total: int = 0
    lines_excluded: int = 0
    lines_rejected: int = 0
    duplicates: int = 0
    corrected_prices: int = 0

    def to_dict(self) -> dict:
        return {
            "items": [item.model_dump() for item in self.items],
            "section_found": self.section_found,
            "lines_total": self.lines_total,
            "lines_excluded": self.lines_excluded,
            "lines_rejected": self.lines_rejected,
            "duplicates": self.duplicates,
            "corrected_prices": self.corrected_prices,
        }


class ItemExtractor:
    """
    Экстрактор товаров.
    """

    def __init__(
        self,
        classifier: Optional[LineClassifier] = None,
        parser: Optional[ItemParser] = None,
        cleaner: Optional[NameCleaner] = None,
        math_checker: Optional[MathChecker] = None,
    ):
        self.math_checker = math_checker or MathChecker()
        self.classifier = classifier or LineClassifier()
        self.parser = parser or ItemParser(self.math_checker)
        self.cleaner = cleaner or NameCleaner()

    def extract(self, text: str, fmt: RetailerFormat, strict: bool = True) -> List[ReceiptItem]:
        """Список товаров в порядке строк чека."""
        return self.run(text, fmt, strict).items

    def run(self, text: str, fmt: RetailerFormat, strict: bool = True) -> ItemsResult:
        """
        Извлечение товаров со статистикой.

        Args:
            text: Нормализованный текст чека
            fmt: Формат магазина
            strict: Режим очистки названий (strict удаляет все пробелы)
        """
        rules = fmt.items
        result = ItemsResult()

        section = self.classifier.find_section(text, rules)
        if section is None:
            return result

        result.section_found = True
        seen = set()

        for line in self.classifier.split_lines(section):
            result.lines_total += 1

            if self.classifier.is_excluded(line, rules):
                result.lines_excluded += 1
                continue

            best = self.parser.parse(line, rules).best
            if best is None or not self.math_checker.is_acceptable(best):
                logger.debug(f"[ItemExtractor] Отклонена: '{line}'")
                result.lines_rejected += 1
                continue

            name = self.cleaner.clean(best.name, rules, strict=strict)
            if not name:
                logger.debug(f"[ItemExtractor] Пустое название после очистки: '{line}'")
                result.lines_rejected += 1
                continue

            key = (name, best.price, best.quantity)
            if key in seen:
                logger.debug(f"[ItemExtractor] Дубль: {key}")
                result.duplicates += 1
                continue
            seen.add(key)

            if best.corrected:
                result.corrected_prices += 1
                logger.debug(f"[ItemExtractor] Цена исправлена: {name} -> {best.price}")

            result.items.append(ReceiptItem(name=name, price=best.price, quantity=best.quantity))

        logger.debug(
            f"[ItemExtractor] {fmt.code}: {len(result.items)} товаров "
            f"из {result.lines_total} строк (исключено: {result.lines_excluded}, "
            f"отклонено: {result.lines_rejected}, дублей: {result.duplicates})"
        )
        return result
