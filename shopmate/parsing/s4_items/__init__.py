"""
Stage 4: Items

ЦКП: Товары чека с проверкой арифметики строки.
"""

from .stage import ItemsStage
from .item_extractor import ItemExtractor, ItemsResult
from .item_parser import ItemParser, LineItemCandidate
from .line_classifier import LineClassifier, LineType
from .math_checker import MathChecker, MathResult, ItemMatch
from .name_cleaner import NameCleaner

__all__ = [
    "ItemsStage",
    "ItemExtractor",
    "ItemsResult",
    "ItemParser",
    "LineItemCandidate",
    "LineClassifier",
    "LineType",
    "MathChecker",
    "MathResult",
    "ItemMatch",
    "NameCleaner",
]
