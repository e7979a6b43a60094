"""
Stage 2: Format Selection

ЦКП: Выбор формата магазина.
"""

from .stage import FormatSelectionStage, FormatSelectionResult

__all__ = [
    "FormatSelectionStage",
    "FormatSelectionResult",
]
