from dataclasses import dataclass, replace
from typing import Optional

from config.settings import (
    ITEM_ERROR_TOLERANCE,
    PRICE_CORRECTION_MIN_ERROR,
    PRICE_CORRECTION_MIN_AMOUNT,
    PRICE_CORRECTION_MIN_PRICE,
)


@dataclass(frozen=True)
class ItemMatch:
    """Одна интерпретация товарной строки: (name, price, quantity, amount) и её погрешность."""
    name: str
    price: int
    quantity: int
    amount: int
    shape_index: int = 0
    error: int = 0
    corrected: bool = False


@dataclass
class MathResult:
    is_valid: bool
    difference: int = 0
    expected_total: Optional[int] = None


class MathChecker:
    """Элемент-функция: Проверяет арифметику товарной строки (price * qty == amount) в вонах."""

    def __init__(
        self,
        tolerance: int = ITEM_ERROR_TOLERANCE,
        correction_min_error: int = PRICE_CORRECTION_MIN_ERROR,
        correction_min_amount: int = PRICE_CORRECTION_MIN_AMOUNT,
        correction_min_price: int = PRICE_CORRECTION_MIN_PRICE,
    ):
        self.tolerance = tolerance
        self.correction_min_error = correction_min_error
        self.correction_min_amount = correction_min_amount
        self.correction_min_price = correction_min_price

    def verify(self, quantity: int, price: int, amount: int) -> MathResult:
        """
        ЦКП: Результат верификации (MathResult).
        """
        expected = price * quantity
        diff = abs(expected - amount)

        # До tolerance вон погрешности допустимо (сегментация OCR)
        return MathResult(
            is_valid=(diff <= self.tolerance),
            difference=diff,
            expected_total=expected,
        )

    def score(self, match: ItemMatch) -> ItemMatch:
        """Проставляет погрешность и, если нужно, исправляет цену."""
        scored = replace(match, error=self.verify(match.quantity, match.price, match.amount).difference)
        return self.correct_price(scored)

    def correct_price(self, match: ItemMatch) -> ItemMatch:
        """
        Исправляет цену, в которую "протекла" цифра из названия товара.

        "짜파게티 530 2 10,600" -> price=530 вместо 5300: берём round(amount / qty).
        """
        if match.error <= self.correction_min_error or match.amount < self.correction_min_amount:
            return match

        # Округление half-up без float
        corrected_price = (2 * match.amount + match.quantity) // (2 * match.quantity)
        if corrected_price < self.correction_min_price:
            return match

        corrected_error = abs(corrected_price * match.quantity - match.amount)
        if corrected_error >= match.error:
            return match

        return replace(match, price=corrected_price, error=corrected_error, corrected=True)

    def is_acceptable(self, match: ItemMatch) -> bool:
        return match.price > 0 and match.quantity > 0 and match.error <= self.tolerance
