"""
Line Classifier - Классификация строк таблицы товаров.

ЦКП: Границы таблицы товаров и решение "строка-кандидат / служебная строка".

SRP: Только классификация строк, без парсинга товаров.
"""

from enum import Enum
from typing import List, Optional
from loguru import logger

from ..formats import ItemRules


class LineType(Enum):
    ITEM = "item"
    EXCLUDED = "excluded"


class LineClassifier:
    """
    Классификатор строк таблицы товаров.

    Список исключений (скидки, заголовки, итоги, промо) - данные формата.
    """

    def find_section(self, text: str, rules: ItemRules) -> Optional[str]:
        """
        Возвращает текст строго между заголовком таблицы и ближайшим футером.

        Args:
            text: Нормализованный текст чека
            rules: Правила таблицы товаров формата

        Returns:
            Текст таблицы или None если заголовок (или футер) не найден
        """
        match = rules.section_pattern.search(text)
        if match is None:
            logger.debug("[LineClassifier] Таблица товаров не найдена")
            return None
        return match.group(1)

    def split_lines(self, section: str) -> List[str]:
        """Разбивает таблицу на непустые фрагменты."""
        return [line for line in section.split("\n") if line.strip()]

    def classify(self, line: str, rules: ItemRules) -> LineType:
        """
        ЦКП: Тип строки (LineType).
        """
        for keyword in rules.exclude:
            if keyword in line:
                logger.trace(f"[LineClassifier] Исключена ('{keyword}'): '{line}'")
                return LineType.EXCLUDED
        return LineType.ITEM

    def is_excluded(self, line: str, rules: ItemRules) -> bool:
        return self.classify(line, rules) is LineType.EXCLUDED
