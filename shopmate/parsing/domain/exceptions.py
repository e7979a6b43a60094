"""
Исключения для домена Parsing.

Специфичные для разбора чеков ошибки. Все наследуются от ReceiptProcessingError,
поэтому сервис может ловить одно исключение и отдавать клиенту str(error).
"""

from typing import Any, Optional


class ReceiptProcessingError(Exception):
    """Базовое исключение для ошибок разбора чека."""

    def __init__(self, message: str, component: Optional[str] = None, details: Any = None):
        self.message = message
        self.component = component
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Receipt Processing Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        return msg


class UnsupportedFormatError(ReceiptProcessingError):
    """Ни один зарегистрированный формат не распознал чек."""

    def __init__(self, message: str = "Unsupported receipt format", details: Any = None):
        super().__init__(message, component="FormatRegistry", details=details)


class FieldNotFoundError(ReceiptProcessingError):
    """Якорный паттерн обязательного поля не найден."""

    def __init__(self, field: str, details: Any = None):
        self.field = field
        super().__init__(f"Field not found: {field}", component="FieldExtractor", details=details)


class NoItemsFoundError(ReceiptProcessingError):
    """Нет таблицы товаров или ни одна строка не прошла проверку."""

    def __init__(self, message: str = "No items found", details: Any = None):
        super().__init__(message, component="ItemExtractor", details=details)


class FormatConfigurationError(ReceiptProcessingError):
    """Ошибка конфигурации формата магазина (YAML)."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message, component="FormatLoader", details=details)
