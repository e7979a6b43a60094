"""
Реестр форматов магазинов.

Упорядоченный неизменяемый набор RetailerFormat. Порядок задаётся при создании
и никогда не меняется: select() возвращает первый формат, распознавший текст.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
from loguru import logger

from config.settings import RETAILER_FORMATS
from ..domain.exceptions import UnsupportedFormatError, FormatConfigurationError
from .format_config import FormatConfigLoader
from .retailer_format import RetailerFormat


class FormatRegistry:
    """
    Реестр форматов чеков.

    Создаётся один раз при старте процесса и передаётся в пайплайн явно.
    После создания только читается, поэтому безопасен для параллельных вызовов.
    """

    def __init__(self, formats: Iterable[RetailerFormat]):
        """
        Args:
            formats: Форматы в порядке приоритета
        """
        self._formats: Tuple[RetailerFormat, ...] = tuple(formats)

        codes = [fmt.code for fmt in self._formats]
        duplicates = {code for code in codes if codes.count(code) > 1}
        if duplicates:
            raise FormatConfigurationError(f"Дублирующиеся коды форматов: {sorted(duplicates)}")

        self._by_code: Dict[str, RetailerFormat] = {fmt.code: fmt for fmt in self._formats}

        logger.info(f"[FormatRegistry] Реестр форматов инициализирован: {codes}")

    @classmethod
    def load(
        cls,
        codes: Optional[List[str]] = None,
        formats_dir: Optional[Path] = None,
    ) -> "FormatRegistry":
        """
        Собирает реестр из YAML конфигураций.

        Args:
            codes: Коды форматов в порядке приоритета (по умолчанию RETAILER_FORMATS)
            formats_dir: Директория с конфигурациями (по умолчанию FORMATS_DIR)
        """
        loader = FormatConfigLoader(formats_dir)
        codes = RETAILER_FORMATS if codes is None else codes
        return cls(RetailerFormat.from_config(loader.load(code)) for code in codes)

    @property
    def formats(self) -> Tuple[RetailerFormat, ...]:
        return self._formats

    @property
    def codes(self) -> List[str]:
        return [fmt.code for fmt in self._formats]

    def select(self, text: str) -> RetailerFormat:
        """
        Выбирает формат для нормализованного текста.

        Raises:
            UnsupportedFormatError: Ни один формат не распознал текст
        """
        for fmt in self._formats:
            if fmt.recognizes(text):
                logger.debug(f"[FormatRegistry] Формат распознан: {fmt.code}")
                return fmt

        logger.warning(f"[FormatRegistry] Формат не распознан (проверено: {self.codes})")
        raise UnsupportedFormatError(details={"checked": self.codes})

    def get(self, code: str) -> RetailerFormat:
        """
        Возвращает формат по коду.

        Raises:
            UnsupportedFormatError: Формат не зарегистрирован
        """
        if code not in self._by_code:
            raise UnsupportedFormatError(
                f"Format '{code}' is not registered (available: {self.codes})",
                details={"code": code},
            )
        return self._by_code[code]

    def __len__(self) -> int:
        return len(self._formats)

    def __contains__(self, code: str) -> bool:
        return code in self._by_code
