"""
DTO и загрузчик конфигурации формата магазина.

ЦКП: Валидированная модель FormatConfig для одного формата чека.

Архитектурный принцип:
- Формат магазина = данные (YAML), а не подкласс
- base.yaml содержит общие правила (дата, сумма, формы товарных строк)
- <code>/format.yaml содержит якоря конкретного магазина
- Списки наследуются выборочно через $extends
"""

import re
from pathlib import Path
from typing import Any, List, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from config.settings import FORMATS_DIR
from ..domain.exceptions import FormatConfigurationError


def _validate_regex(value: str) -> str:
    try:
        re.compile(value)
    except re.error as e:
        raise ValueError(f"Некорректное регулярное выражение {value!r}: {e}")
    return value


class AnchorsConfig(BaseModel):
    """Якорные фразы полей (без пробелов, толерантность добавляется при компиляции)."""
    total: str = Field(..., min_length=1, description='Метка суммы к оплате ("결제대상금액")')
    payment: str = Field(..., min_length=1, description='Метка оплаты картой ("카드결제")')
    vat: str = Field(..., min_length=1, description='Метка НДС ("부가세")')

    model_config = ConfigDict(frozen=True)


class ItemSectionConfig(BaseModel):
    """Правила таблицы товаров."""
    header_columns: List[str] = Field(..., min_length=1, description="Колонки заголовка таблицы")
    footers: List[str] = Field(..., min_length=1, description="Метки конца таблицы")
    exclude: List[str] = Field(default_factory=list, description="Подстроки нетоварных строк")
    junk_prefixes: List[str] = Field(default_factory=list, description="Мусорные префиксы названий")
    leading_noise: str = Field(r"^[0-9Q*\s]+", description="Мусор OCR в начале названия")
    name_strip: List[str] = Field(default_factory=list, description="Что срезать с названия, по порядку")
    shapes: List[str] = Field(..., min_length=1, description="Формы товарной строки по приоритету")

    model_config = ConfigDict(frozen=True)

    @field_validator("shapes")
    @classmethod
    def validate_shapes(cls, v):
        for shape in v:
            _validate_regex(shape)
            groups = re.compile(shape).groups
            if groups != 4:
                raise ValueError(
                    f"Форма товарной строки должна иметь 4 группы (name, price, qty, amount), "
                    f"получено {groups}: {shape!r}"
                )
        return v

    @field_validator("leading_noise")
    @classmethod
    def validate_leading_noise(cls, v):
        return _validate_regex(v)

    @field_validator("name_strip")
    @classmethod
    def validate_name_strip(cls, v):
        for pattern in v:
            _validate_regex(pattern)
        return v


class FormatConfig(BaseModel):
    """
    Полная конфигурация формата магазина.

    Загружается из YAML и используется для сборки RetailerFormat.
    """
    code: str = Field(..., description="Код формата (emart, traders)")
    name: str = Field(..., description="Человекочитаемое название")
    store_name: str = Field(..., min_length=1, description="Название магазина без пробелов")
    separator: str = Field(r"\s*", description="Разделитель символов якорных фраз")
    date_pattern: str = Field(..., description="Регулярное выражение даты")
    amount_pattern: str = Field(..., description="Регулярное выражение суммы (одна группа)")
    card_literal: str = Field(..., min_length=1, description="Маскированный номер карты")
    anchors: AnchorsConfig
    item_section: ItemSectionConfig

    model_config = ConfigDict(frozen=True)

    @field_validator("code")
    @classmethod
    def validate_code(cls, v):
        if not re.fullmatch(r"[a-z][a-z0-9_]*", v):
            raise ValueError(f"Код формата должен быть в нижнем регистре (например, emart), получено: {v}")
        return v

    @field_validator("separator", "date_pattern")
    @classmethod
    def validate_patterns(cls, v):
        return _validate_regex(v)

    @field_validator("amount_pattern")
    @classmethod
    def validate_amount_pattern(cls, v):
        _validate_regex(v)
        if re.compile(v).groups != 1:
            raise ValueError(f"amount_pattern должен иметь ровно одну группу: {v!r}")
        return v


class FormatConfigLoader:
    """
    Загрузчик конфигураций форматов из YAML.

    Кеша нет: реестр форматов собирается один раз при старте процесса.
    """

    def __init__(self, formats_dir: Optional[Path] = None):
        """
        Args:
            formats_dir: Директория с base.yaml и <code>/format.yaml
        """
        self.formats_dir = Path(formats_dir) if formats_dir else FORMATS_DIR

    def load(self, code: str) -> FormatConfig:
        """
        Загружает и валидирует конфигурацию формата.

        Raises:
            FormatConfigurationError: Файл не найден или не прошёл валидацию
        """
        base_config = self._load_base_config()
        config_file = self.formats_dir / code / "format.yaml"

        if not config_file.exists():
            raise FormatConfigurationError(f"Конфиг формата '{code}' не найден: {config_file}")

        config_data = self._read_yaml(config_file)

        # Скалярные значения base.yaml - значения по умолчанию
        merged = {
            key: value for key, value in base_config.items()
            if not isinstance(value, (list, dict))
        }
        merged.update(config_data)

        section = dict(merged.get("item_section") or {})
        for key, value in section.items():
            section[key] = self._resolve_extends(value, base_config)
        merged["item_section"] = section

        try:
            config = FormatConfig.model_validate(merged)
        except ValidationError as e:
            raise FormatConfigurationError(f"Некорректный конфиг формата '{code}'", details=e.errors())

        if config.code != code:
            raise FormatConfigurationError(
                f"Код в {config_file} ('{config.code}') не совпадает с директорией ('{code}')"
            )

        logger.debug(
            f"[FormatConfigLoader] Загружен формат {code}: "
            f"{len(config.item_section.shapes)} форм строк, "
            f"{len(config.item_section.exclude)} exclude-слов"
        )
        return config

    def _load_base_config(self) -> dict:
        """Загружает общие правила из base.yaml."""
        base_file = self.formats_dir / "base.yaml"

        if not base_file.exists():
            logger.warning(f"[FormatConfigLoader] base.yaml не найден: {base_file}")
            return {}

        return self._read_yaml(base_file)

    def _read_yaml(self, path: Path) -> dict:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise FormatConfigurationError(f"Ошибка разбора YAML {path}", details=str(e))

        if not isinstance(data, dict):
            raise FormatConfigurationError(f"{path} должен содержать словарь, получено {type(data).__name__}")
        return data

    def _resolve_extends(self, value: Any, base_config: dict) -> Any:
        """
        Обрабатывает выборочное наследование через $extends для списков.
        Поддерживает форматы:
        - Строка: "$extends: key"
        - Словарь: {"$extends": "key"} (YAML без кавычек)
        - Словарь с "pattern" (формат base.yaml): берётся только regex
        """
        if not isinstance(value, list):
            return value

        result = []
        for item in value:
            extended_key = None

            if isinstance(item, str) and item.startswith("$extends:"):
                extended_key = item.split(":", 1)[1].strip()
            elif isinstance(item, dict) and "$extends" in item:
                extended_key = item["$extends"]
            elif isinstance(item, dict) and "pattern" in item:
                result.append(item["pattern"])
                continue

            if extended_key is None:
                result.append(item)
                continue

            if extended_key not in base_config:
                raise FormatConfigurationError(f"Ключ '{extended_key}' для $extends не найден в base.yaml")

            extended = base_config[extended_key]
            logger.trace(f"[FormatConfigLoader] Наследуем {len(extended)} элементов '{extended_key}'")
            for ext_item in extended:
                if isinstance(ext_item, dict) and "pattern" in ext_item:
                    result.append(ext_item["pattern"])
                else:
                    result.append(ext_item)

        return result
