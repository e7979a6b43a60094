"""
Item Parser - Парсинг товарной строки.

ЦКП: Лучшая интерпретация строки (name, price, quantity, amount) по арифметике.

SRP: Только сопоставление форм строки и выбор лучшей, без классификации и очистки названия.

Алгоритм:
1. Удалить штрихкод EAN-13, нормализовать 。 -> "." и _ -> " "
2. Пробовать формы строки по приоритету
3. Для каждой совпавшей формы посчитать погрешность (и исправить цену)
4. Остановиться на первой форме с нулевой погрешностью, иначе взять минимальную
"""

import re
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Iterator, List, Optional
from loguru import logger

from ..formats import ItemRules
from .math_checker import ItemMatch, MathChecker

_BARCODE = re.compile(r"\d{13}")
_NUMBER_NOISE = re.compile(r"[,_.]")


@dataclass
class LineItemCandidate:
    """Строка таблицы между классификацией и приёмкой."""
    raw_text: str
    text: str
    barcode: Optional[str] = None
    attempts: List[ItemMatch] = field(default_factory=list)

    @property
    def best(self) -> Optional[ItemMatch]:
        # min() оставляет самую раннюю форму при равной погрешности
        return min(self.attempts, key=attrgetter("error"), default=None)

    def to_dict(self) -> dict:
        best = self.best
        return {
            "raw_text": self.raw_text,
            "barcode": self.barcode,
            "attempts": len(self.attempts),
            "best_error": best.error if best else None,
        }


class ItemParser:
    """
    Парсер товарных строк.

    ЦКП: LineItemCandidate с оценёнными интерпретациями строки.
    """

    def __init__(self, math_checker: MathChecker):
        """
        Args:
            math_checker: Проверка price * qty == amount и коррекция цены
        """
        self.math_checker = math_checker

    def parse(self, line: str, rules: ItemRules) -> LineItemCandidate:
        """
        Парсит строку таблицы товаров.

        Args:
            line: Строка-кандидат (уже прошла классификацию)
            rules: Правила таблицы товаров формата
        """
        barcode_match = _BARCODE.search(line)
        text = _BARCODE.sub("", line, count=1).strip()
        text = text.replace("。", ".").replace("_", " ")

        candidate = LineItemCandidate(
            raw_text=line,
            text=text,
            barcode=barcode_match.group(0) if barcode_match else None,
            attempts=list(self._scored_matches(text, rules)),
        )

        best = candidate.best
        if best:
            logger.trace(
                f"[ItemParser] '{text}' -> price={best.price}, qty={best.quantity}, "
                f"amount={best.amount}, error={best.error}, shape={best.shape_index}"
            )
        return candidate

    def _scored_matches(self, text: str, rules: ItemRules) -> Iterator[ItemMatch]:
        """Оценённые интерпретации строки; обрывается на точном совпадении."""
        for index, shape in enumerate(rules.shapes):
            match = self.match_shape(shape, text, index)
            if match is None:
                continue

            scored = self.math_checker.score(match)
            yield scored

            if scored.error == 0:
                return

    def match_shape(self, shape: re.Pattern, text: str, index: int = 0) -> Optional[ItemMatch]:
        """
        Применяет одну форму строки.

        Returns:
            ItemMatch без оценки или None, если форма не подошла
            (нет совпадения, в числах не только цифры, или число не положительное)
        """
        match = shape.search(text)
        if match is None:
            return None

        numbers = [_NUMBER_NOISE.sub("", group) for group in match.group(2, 3, 4)]
        if not all(number.isdecimal() for number in numbers):
            return None

        price, quantity, amount = (int(number) for number in numbers)
        if price <= 0 or quantity <= 0 or amount <= 0:
            logger.trace(f"[ItemParser] Форма {index}: нулевое значение в '{text}'")
            return None

        return ItemMatch(
            name=match.group(1).strip(),
            price=price,
            quantity=quantity,
            amount=amount,
            shape_index=index,
        )
