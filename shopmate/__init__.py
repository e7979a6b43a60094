"""ShopMate - разбор OCR-текста чеков корейских магазинов."""

__version__ = "0.1.0"
