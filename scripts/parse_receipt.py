#!/usr/bin/env python3
"""
Точка входа для разбора OCR текста чека.

Использование:
    # Разобрать текст из файла (strict)
    python scripts/parse_receipt.py path/to/receipt.txt

    # Текст из stdin, lenient-режим
    cat receipt.txt | python scripts/parse_receipt.py --lenient

    # Полный результат со всеми этапами (для отладки)
    python scripts/parse_receipt.py receipt.txt --trace --log-level DEBUG
"""

import sys
import argparse
import json
from pathlib import Path

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import LOG_LEVEL, configure_logging
from shopmate.parsing import ReceiptProcessingError, create_pipeline


def read_text(path: str = None) -> str:
    """Читает OCR текст из файла или stdin."""
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv=None) -> int:
    """Главная функция: печатает результат разбора в JSON на stdout."""
    parser = argparse.ArgumentParser(description="ShopMate Receipt Parser")
    parser.add_argument("path", nargs="?", help="Файл с OCR текстом (по умолчанию stdin)")
    parser.add_argument("--lenient", action="store_true", help="Lenient-режим: отсутствующие поля = null")
    parser.add_argument("--trace", action="store_true", help="Вывести результаты всех этапов")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Уровень логирования (loguru)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        raw_text = read_text(args.path)
    except OSError as e:
        print(f"[ERROR] Не удалось прочитать {args.path}: {e}", file=sys.stderr)
        return 1

    pipeline = create_pipeline()

    try:
        result = pipeline.run(raw_text, strict=not args.lenient)
    except ReceiptProcessingError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    payload = result.to_dict() if args.trace else result.receipt.model_dump()
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
