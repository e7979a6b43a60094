"""
Настройки проекта ShopMate Receipt Parser.

Все значения можно переопределить через переменные окружения с префиксом SHOPMATE_.
"""

import os
import sys
from pathlib import Path

from loguru import logger

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent

# Директория с YAML-описаниями форматов магазинов (base.yaml + <code>/format.yaml)
FORMATS_DIR = Path(
    os.getenv(
        "SHOPMATE_FORMATS_DIR",
        str(PROJECT_ROOT / "shopmate" / "parsing" / "formats"),
    )
)

# =============================================================================
# ФОРМАТЫ МАГАЗИНОВ
# =============================================================================
# Порядок важен: побеждает первый формат, распознавший текст
RETAILER_FORMATS = [
    code.strip()
    for code in os.getenv("SHOPMATE_RETAILER_FORMATS", "emart,traders").split(",")
    if code.strip()
]

# Формат для lenient-режима (без шага распознавания)
LENIENT_FORMAT = os.getenv("SHOPMATE_LENIENT_FORMAT", "emart")

# =============================================================================
# НАСТРОЙКИ ИЗВЛЕЧЕНИЯ ТОВАРОВ (все суммы в вонах)
# =============================================================================
# Максимальная погрешность |price * qty - amount| для принятия товара
ITEM_ERROR_TOLERANCE = 1000

# Коррекция цены включается только при погрешности больше этой
PRICE_CORRECTION_MIN_ERROR = 100

# ... и только для сумм не меньше этой
PRICE_CORRECTION_MIN_AMOUNT = 1000

# Исправленная цена меньше этой считается недостоверной
PRICE_CORRECTION_MIN_PRICE = 1000

# =============================================================================
# НАСТРОЙКИ ПОЛЕЙ
# =============================================================================
# Метка способа оплаты (поддерживается только оплата картой)
PAYMENT_METHOD_LABEL = "credit card"

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("SHOPMATE_LOG_LEVEL", "INFO")

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Заменяет стандартный sink loguru на stderr с нужным уровнем."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config():
    """Проверяет корректность конфигурации."""
    errors = []

    if not FORMATS_DIR.is_dir():
        errors.append(f"Директория форматов не найдена: {FORMATS_DIR}")
    elif not (FORMATS_DIR / "base.yaml").exists():
        errors.append(f"base.yaml не найден в {FORMATS_DIR}")

    if not RETAILER_FORMATS:
        errors.append("RETAILER_FORMATS пуст: не зарегистрировано ни одного формата")

    if LENIENT_FORMAT not in RETAILER_FORMATS:
        errors.append(
            f"LENIENT_FORMAT '{LENIENT_FORMAT}' отсутствует в RETAILER_FORMATS {RETAILER_FORMATS}"
        )

    if errors:
        raise ValueError("\n".join(errors))

    return True
