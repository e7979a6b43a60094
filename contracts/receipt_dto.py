"""
DTO контракт: Parsing Engine -> Service (HTTP / persistence).

Результат разбора чека. Все денежные значения в вонах (int), без копеек.

ВАЖНО: Поля 1 в 1 соответствуют JSON, который сервис сохраняет в БД.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ReceiptItem(BaseModel):
    """
    Товарная позиция чека после очистки названия.

    Сумма позиции (price * quantity) не хранится.
    """

    name: str = Field(..., min_length=1, description="Название товара после очистки")
    price: int = Field(..., gt=0, description="Цена за единицу")
    quantity: int = Field(1, gt=0, description="Количество")

    model_config = ConfigDict(frozen=True)


class ProcessedReceipt(BaseModel):
    """
    Результат strict-разбора: все поля обязательны.
    """

    raw_text: str = Field(..., description="Исходный OCR текст")
    processed_text: str = Field(..., description="Нормализованный текст")
    store_name: str = Field(..., min_length=1, description="Название магазина")
    date: str = Field(..., description="Дата чека (YYYY-MM-DD)")
    total_amount: int = Field(..., ge=0, description="Сумма к оплате")
    vat_amount: int = Field(..., ge=0, description="НДС (부가세)")
    payment_method: str = Field(..., description="Способ оплаты")
    card_number: str = Field(..., description="Маскированный номер карты")
    items: list[ReceiptItem] = Field(..., min_length=1, description="Товары в порядке чека")

    model_config = ConfigDict(frozen=True)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        if not _ISO_DATE.match(v):
            raise ValueError(f"Date must be YYYY-MM-DD, got {v!r}")
        return v


class LenientReceipt(BaseModel):
    """
    Результат lenient-разбора: отсутствующие поля равны None, товаров может не быть.
    """

    raw_text: str = Field(..., description="Исходный OCR текст")
    processed_text: str = Field(..., description="Нормализованный текст")
    store_name: str | None = Field(None, description="Название магазина")
    date: str | None = Field(None, description="Дата чека (YYYY-MM-DD)")
    total_amount: int | None = Field(None, ge=0, description="Сумма к оплате")
    vat_amount: int | None = Field(None, ge=0, description="НДС (부가세)")
    payment_method: str | None = Field(None, description="Способ оплаты")
    card_number: str | None = Field(None, description="Маскированный номер карты")
    items: list[ReceiptItem] = Field(default_factory=list, description="Найденные товары")

    model_config = ConfigDict(frozen=True)

    @property
    def missing_fields(self) -> list[str]:
        """Поля, которые не удалось извлечь."""
        names = [
            "store_name", "date", "total_amount", "vat_amount",
            "payment_method", "card_number",
        ]
        return [name for name in names if getattr(self, name) is None]
