"""
Контракты DTO на границе движка разбора чеков.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- Engine -> Service: ProcessedReceipt (strict), LenientReceipt (lenient)
"""

from .receipt_dto import ReceiptItem, ProcessedReceipt, LenientReceipt

__all__ = [
    "ReceiptItem",
    "ProcessedReceipt",
    "LenientReceipt",
]
