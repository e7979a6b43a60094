"""
Stage 1: Normalization

ЦКП: Нормализация OCR текста и разбиение на фрагменты.
"""

from .stage import NormalizationStage, NormalizationResult, normalize

__all__ = [
    "NormalizationStage",
    "NormalizationResult",
    "normalize",
]
