import pytest

from shopmate.parsing.domain.exceptions import FormatConfigurationError
from shopmate.parsing.formats import FormatConfigLoader, RetailerFormat, tolerant_pattern

MOCK_BASE_YAML = r"""
separator: '\s*'
date_pattern: '20\d{6}'
amount_pattern: '(\d[\d,]*)'
header_columns:
  - 상품명
  - 금액
exclude_keywords:
  - 할인
item_shapes:
  - pattern: '^(\D+)(\d+) (\d+) (\d+)'
"""

MOCK_FORMAT_YAML = """
code: test_mart
name: 테스트 마트
store_name: 테스트마트
anchors:
  total: 합계
  payment: 카드
  vat: 부가세
card_literal: '1234**56'
item_section:
  header_columns:
    - $extends: header_columns
  footers:
    - 합계
  exclude:
    - $extends: exclude_keywords
    - 쿠폰
  shapes:
    - $extends: item_shapes
"""


@pytest.fixture
def formats_dir(tmp_path):
    """Создаёт base.yaml и test_mart/format.yaml."""
    (tmp_path / "base.yaml").write_text(MOCK_BASE_YAML, encoding="utf-8")
    mart_dir = tmp_path / "test_mart"
    mart_dir.mkdir()
    (mart_dir / "format.yaml").write_text(MOCK_FORMAT_YAML, encoding="utf-8")
    return tmp_path


def _write_format(formats_dir, code, content):
    directory = formats_dir / code
    directory.mkdir(exist_ok=True)
    (directory / "format.yaml").write_text(content, encoding="utf-8")


def test_extends_resolved(formats_dir):
    config = FormatConfigLoader(formats_dir).load("test_mart")

    assert config.item_section.header_columns == ["상품명", "금액"]
    assert config.item_section.exclude == ["할인", "쿠폰"]
    assert config.item_section.shapes == [r"^(\D+)(\d+) (\d+) (\d+)"]
    assert config.item_section.junk_prefixes == []
    assert config.item_section.name_strip == []
    assert config.item_section.leading_noise == r"^[0-9Q*\s]+"


def test_base_scalars_are_defaults(formats_dir):
    config = FormatConfigLoader(formats_dir).load("test_mart")
    assert config.date_pattern == r"20\d{6}"
    assert config.amount_pattern == r"(\d[\d,]*)"


def test_format_overrides_base_scalar(formats_dir):
    _write_format(
        formats_dir, "test_mart",
        MOCK_FORMAT_YAML + "separator: '[\\s_]*'\n",
    )
    config = FormatConfigLoader(formats_dir).load("test_mart")
    assert config.separator == r"[\s_]*"


def test_missing_format_file(formats_dir):
    with pytest.raises(FormatConfigurationError, match="lotte"):
        FormatConfigLoader(formats_dir).load("lotte")


def test_missing_extends_key(formats_dir):
    broken = MOCK_FORMAT_YAML.replace("$extends: exclude_keywords", "$extends: no_such_key")
    _write_format(formats_dir, "test_mart", broken)
    with pytest.raises(FormatConfigurationError, match="no_such_key"):
        FormatConfigLoader(formats_dir).load("test_mart")


def test_shape_must_have_four_groups(formats_dir):
    (formats_dir / "base.yaml").write_text(
        MOCK_BASE_YAML.replace(r"^(\D+)(\d+) (\d+) (\d+)", r"^(\D+)(\d+) (\d+)"),
        encoding="utf-8",
    )
    with pytest.raises(FormatConfigurationError) as exc_info:
        FormatConfigLoader(formats_dir).load("test_mart")
    assert exc_info.value.details


def test_invalid_name_strip_regex(formats_dir):
    _write_format(
        formats_dir, "test_mart",
        MOCK_FORMAT_YAML + "  name_strip:\n    - '(unclosed'\n",
    )
    with pytest.raises(FormatConfigurationError):
        FormatConfigLoader(formats_dir).load("test_mart")


def test_code_must_match_directory(formats_dir):
    _write_format(formats_dir, "other_mart", MOCK_FORMAT_YAML)
    with pytest.raises(FormatConfigurationError, match="other_mart"):
        FormatConfigLoader(formats_dir).load("other_mart")


def test_invalid_yaml(formats_dir):
    _write_format(formats_dir, "test_mart", "code: [unclosed")
    with pytest.raises(FormatConfigurationError):
        FormatConfigLoader(formats_dir).load("test_mart")


def test_compiled_format(formats_dir):
    fmt = RetailerFormat.from_config(FormatConfigLoader(formats_dir).load("test_mart"))

    assert fmt.recognizes("테 스 트 마 트")
    assert fmt.items.exclude == ("할인", "쿠폰")
    assert fmt.items.section_pattern.search("상 품 명 금 액\n사과1 1 1\n합 계").group(1) == "\n사과1 1 1\n"
    # Без мусорных префиксов паттерн никогда не совпадает
    assert fmt.items.junk_prefix_pattern.search("분세차") is None


def test_tolerant_pattern():
    assert tolerant_pattern("이마트") == r"이\s*마\s*트"
    assert tolerant_pattern("이 마트", r"[\s_]*") == r"이[\s_]*마[\s_]*트"
    assert tolerant_pattern("[라면]") == r"\[\s*라\s*면\s*\]"


def test_shipped_formats_load():
    loader = FormatConfigLoader()
    emart = loader.load("emart")
    traders = loader.load("traders")

    assert emart.store_name == "이마트파주점"
    assert emart.item_section.junk_prefixes == ["분세차"]
    assert len(emart.item_section.shapes) == 4
    assert traders.separator == r"[\s_]*"
    assert "POINT" in traders.item_section.exclude
    assert traders.item_section.footers == ["총품목", "합계"]
    assert emart.item_section.name_strip == [r"\d+$", r"\([^)]*\)$", "[._]"]
    assert traders.item_section.name_strip == [r"[._*]+$", r"\d+$"]
    assert len(traders.item_section.shapes) == 5
