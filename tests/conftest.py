"""
Общие фикстуры: реестр форматов и тексты реальных чеков.
"""

import sys

import pytest
from loguru import logger
from pathlib import Path

from shopmate.parsing import FormatRegistry, ParsingPipeline

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_receipt_text(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def registry():
    return FormatRegistry.load(["emart", "traders"])


@pytest.fixture(scope="session")
def emart(registry):
    return registry.get("emart")


@pytest.fixture(scope="session")
def traders(registry):
    return registry.get("traders")


@pytest.fixture
def pipeline(registry):
    return ParsingPipeline(registry, lenient_format="emart")


@pytest.fixture(scope="session")
def emart_text():
    return load_receipt_text("emart_pajoo.txt")


@pytest.fixture(scope="session")
def traders_text():
    return load_receipt_text("traders_kintex.txt")


@pytest.fixture
def reset_logging():
    """configure_logging() привязывает sink к stderr, подменённому capsys."""
    yield
    logger.remove()
    logger.add(sys.__stderr__, level="INFO")
