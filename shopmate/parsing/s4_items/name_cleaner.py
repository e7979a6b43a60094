"""
Name Cleaner - Очистка названия товара от мусора OCR.

ЦКП: Чистое название товара или пустая строка (товар отбрасывается).

Порядок:
1. Мусор в начале строки (leading_noise формата)
2. Пробелы: strict удаляет, lenient схлопывает
3. Рекламные префиксы (junk_prefixes формата)
4. name_strip формата, по порядку
5. Остаток заголовка таблицы, прилипший к названию
"""

import re

from ..formats import ItemRules

_WHITESPACE = re.compile(r"\s+")


class NameCleaner:
    """
    Очистка названия.

    Strict: все пробелы удаляются (OCR вставляет пробелы между слогами).
    Lenient: пробелы схлопываются в один.
    """

    def clean(self, name: str, rules: ItemRules, strict: bool = True) -> str:
        name = rules.leading_noise_pattern.sub("", name)
        name = _WHITESPACE.sub("" if strict else " ", name).strip()

        for pattern in (
            rules.junk_prefix_pattern,
            *rules.name_strip_patterns,
            rules.header_residue_pattern,
        ):
            name = pattern.sub("", name).strip()

        return name
