"""
Stage 1: Normalization

ЦКП: Нормализованный текст, в котором один логический фрагмент чека = одна строка.

Input: сырой OCR текст (str)
Output: NormalizationResult(text)

OCR отдаёт чек одним блоком с мусорными пробелами. Здесь пробелы схлопываются,
а по структурным якорям (штрихкод EAN-13, сумма скидки, тройка цена。кол-во。сумма)
вставляются переводы строк.
"""

import re
from dataclasses import dataclass
from loguru import logger


_INLINE_WHITESPACE = re.compile(r"[^\S\n]+")
_NEWLINE_PADDING = re.compile(r"\s*\n\s*")

# Корейские штрихкоды - EAN-13
_BARCODE = re.compile(r"(\d{13})")
# Скидка: "-4,900"
_NEGATIVE_AMOUNT = re.compile(r"(-\d+(?:,\d+)?)")
# Матричные шрифты POS печатают "9,800。 1。 9,800" через полноширинную точку
_DOT_MATRIX_TRIPLET = re.compile(r"(\d+。\s*\d+。\s*\d+)")


def normalize(raw: str) -> str:
    """
    Нормализует OCR текст чека.

    Чистая функция, никогда не падает, идемпотентна:
    normalize(normalize(x)) == normalize(x).
    """
    text = _INLINE_WHITESPACE.sub(" ", raw)
    text = _NEWLINE_PADDING.sub("\n", text)

    text = _BARCODE.sub("\\1\n", text)
    text = _NEGATIVE_AMOUNT.sub("\\1\n", text)
    text = _DOT_MATRIX_TRIPLET.sub("\\1\n", text)

    # Вставки выше оставляют пробелы после \n и пустые строки
    text = _NEWLINE_PADDING.sub("\n", text)
    return text.strip()


@dataclass
class NormalizationResult:
    """
    Результат Stage 1: Normalization.

    ЦКП: Нормализованный текст.
    """
    text: str
    original_length: int = 0
    lines_count: int = 0

    def to_dict(self) -> dict:
        return {
            "original_length": self.original_length,
            "normalized_length": len(self.text),
            "lines_count": self.lines_count,
        }


class NormalizationStage:
    """
    Stage 1: Normalization.

    ЦКП: Текст, разбитый на фрагменты по структурным якорям.
    """

    def process(self, raw_text: str) -> NormalizationResult:
        """
        Нормализует сырой OCR текст.

        Args:
            raw_text: Текст от OCR (не изменяется)

        Returns:
            NormalizationResult: Нормализованный текст и статистика
        """
        text = normalize(raw_text)
        lines_count = text.count("\n") + 1 if text else 0

        logger.debug(
            f"[Stage 1: Normalization] {len(raw_text)} -> {len(text)} символов, "
            f"{lines_count} строк"
        )

        return NormalizationResult(
            text=text,
            original_length=len(raw_text),
            lines_count=lines_count,
        )
