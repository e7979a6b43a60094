"""
Field Extractor - Извлечение полей чека по якорным паттернам.

ЦКП: Значение одного поля или FieldNotFoundError(field).

SRP: Каждое поле ищется одним паттерном формата и падает независимо.
Решение, фатально ли отсутствие поля, принимает вызывающий код.
"""

import re
from dataclasses import dataclass, asdict, fields
from typing import List, Optional, Union

from loguru import logger

from config.settings import PAYMENT_METHOD_LABEL
from ..domain.exceptions import FieldNotFoundError
from ..formats import RetailerFormat

_WHITESPACE = re.compile(r"\s+")
_DATE_SEPARATORS = re.compile(r"[-./]")
_AMOUNT_NOISE = re.compile(r"[,\s]")

# Порядок извлечения = порядок ошибок в strict-режиме
FIELD_NAMES = (
    "store_name",
    "date",
    "total_amount",
    "payment_method",
    "card_number",
    "vat_amount",
)


@dataclass(frozen=True)
class ParsedFields:
    """Все поля найдены."""
    store_name: str
    date: str
    total_amount: int
    payment_method: str
    card_number: str
    vat_amount: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class LenientFields:
    """Поля, которые удалось найти; остальные None."""
    store_name: Optional[str] = None
    date: Optional[str] = None
    total_amount: Optional[int] = None
    payment_method: Optional[str] = None
    card_number: Optional[str] = None
    vat_amount: Optional[int] = None

    @property
    def missing(self) -> List[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is None]

    def to_dict(self) -> dict:
        return asdict(self)


class FieldExtractor:
    """
    Экстрактор полей чека.

    ЦКП: store_name, date, total_amount, payment_method, card_number, vat_amount.
    """

    def extract(
        self, text: str, fmt: RetailerFormat, strict: bool = True
    ) -> Union[ParsedFields, LenientFields]:
        """
        Извлекает все поля по якорям формата.

        Strict: первое ненайденное поле прерывает разбор.
        Lenient: ненайденные поля равны None.

        Raises:
            FieldNotFoundError: Только в strict-режиме
        """
        if strict:
            return ParsedFields(**{name: getattr(self, name)(text, fmt) for name in FIELD_NAMES})

        values = {}
        for name in FIELD_NAMES:
            try:
                values[name] = getattr(self, name)(text, fmt)
            except FieldNotFoundError as e:
                logger.warning(f"[FieldExtractor] Lenient: поле '{e.field}' не найдено, пропускаем")
                values[name] = None
        return LenientFields(**values)

    def store_name(self, text: str, fmt: RetailerFormat) -> str:
        """Название магазина без пробелов ("이 마 트 파 주 점" -> "이마트파주점")."""
        match = self._search(fmt.store_pattern, text, "store_name")
        return _WHITESPACE.sub("", match.group(0))

    def date(self, text: str, fmt: RetailerFormat) -> str:
        """Дата в ISO формате YYYY-MM-DD."""
        match = self._search(fmt.date_pattern, text, "date")
        digits = _DATE_SEPARATORS.sub("", match.group(0))
        return f"{digits[:4]}-{digits[4:6]}-{digits[6:8]}"

    def total_amount(self, text: str, fmt: RetailerFormat) -> int:
        """Сумма к оплате (결제대상금액)."""
        match = self._search(fmt.total_pattern, text, "total_amount")
        return self.parse_amount(match.group(1))

    def payment_method(self, text: str, fmt: RetailerFormat) -> str:
        """
        Способ оплаты.

        Проверяется только наличие метки оплаты картой: поддерживается один способ.
        """
        self._search(fmt.payment_pattern, text, "payment_method")
        return PAYMENT_METHOD_LABEL

    def card_number(self, text: str, fmt: RetailerFormat) -> str:
        """Маскированный номер карты (точное совпадение с литералом формата)."""
        match = self._search(fmt.card_pattern, text, "card_number")
        return match.group(0)

    def vat_amount(self, text: str, fmt: RetailerFormat) -> int:
        """НДС (부가세)."""
        match = self._search(fmt.vat_pattern, text, "vat_amount")
        return self.parse_amount(match.group(1))

    @staticmethod
    def parse_amount(value: str) -> int:
        """ "70,950" -> 70950, "12, 787" -> 12787 """
        return int(_AMOUNT_NOISE.sub("", value))

    def _search(self, pattern: re.Pattern, text: str, field: str) -> re.Match:
        match = pattern.search(text)
        if match is None:
            logger.debug(f"[FieldExtractor] Поле не найдено: {field} (паттерн: {pattern.pattern})")
            raise FieldNotFoundError(field)
        logger.trace(f"[FieldExtractor] {field}: '{match.group(0)}'")
        return match
