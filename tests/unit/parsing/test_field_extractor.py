import pytest

from shopmate.parsing.domain.exceptions import FieldNotFoundError
from shopmate.parsing.s1_normalization import normalize
from shopmate.parsing.s3_fields import FieldExtractor, LenientFields, ParsedFields

FRAGMENT = (
    "빠 른 환 불 접 수 20250302100645820007692021 이 마 트 파 주 점 "
    "부 가 세 2,053 합 계 76,920 결 제 대 상 금 액 70,950 "
    "0011 BC 94400200**020*/46978745 카 드 결 제 (1() 일 시 불 / 70,950"
)


@pytest.fixture
def extractor():
    return FieldExtractor()


@pytest.fixture
def text():
    return normalize(FRAGMENT)


def test_store_name(extractor, text, emart):
    assert extractor.store_name(text, emart) == "이마트파주점"


@pytest.mark.parametrize("raw, expected", [
    ("20250302100645820007692021", "2025-03-02"),
    ("[ 구 매 ]2025-03-02 18:38", "2025-03-02"),
    ("발 행 일 : 2024.12.31", "2024-12-31"),
    ("2025/01/09", "2025-01-09"),
])
def test_date_formats(extractor, emart, raw, expected):
    assert extractor.date(raw, emart) == expected


def test_date_rejects_invalid_month(extractor, emart):
    with pytest.raises(FieldNotFoundError):
        extractor.date("20251340", emart)


def test_total_amount(extractor, text, emart):
    assert extractor.total_amount(text, emart) == 70950


def test_vat_amount(extractor, text, emart):
    assert extractor.vat_amount(text, emart) == 2053


def test_vat_amount_with_ocr_space_after_comma(extractor, traders):
    assert extractor.vat_amount("부 가 세 12, 787 합 계 204,060", traders) == 12787


def test_payment_method(extractor, text, emart):
    assert extractor.payment_method(text, emart) == "credit card"


def test_card_number(extractor, text, emart):
    assert extractor.card_number(text, emart) == "94400200**020"


@pytest.mark.parametrize("value, expected", [
    ("70,950", 70950),
    ("12, 787", 12787),
    ("5880", 5880),
])
def test_parse_amount(value, expected):
    assert FieldExtractor.parse_amount(value) == expected


def test_missing_field_names_field(extractor, emart):
    with pytest.raises(FieldNotFoundError) as exc_info:
        extractor.vat_amount("결 제 대 상 금 액 70,950", emart)
    assert exc_info.value.field == "vat_amount"
    assert "Field not found: vat_amount" in str(exc_info.value)


def test_extract_strict(extractor, text, emart):
    fields = extractor.extract(text, emart)
    assert isinstance(fields, ParsedFields)
    assert fields.to_dict() == {
        "store_name": "이마트파주점",
        "date": "2025-03-02",
        "total_amount": 70950,
        "payment_method": "credit card",
        "card_number": "94400200**020",
        "vat_amount": 2053,
    }


def test_extract_strict_reports_first_missing_field(extractor, emart):
    text = normalize("이 마 트 파 주 점 20250302 카 드 결 제")
    with pytest.raises(FieldNotFoundError) as exc_info:
        extractor.extract(text, emart)
    assert exc_info.value.field == "total_amount"


def test_extract_lenient(extractor, emart):
    text = normalize("이 마 트 파 주 점 20250302 카 드 결 제")
    fields = extractor.extract(text, emart, strict=False)

    assert isinstance(fields, LenientFields)
    assert fields.store_name == "이마트파주점"
    assert fields.date == "2025-03-02"
    assert fields.payment_method == "credit card"
    assert fields.missing == ["total_amount", "card_number", "vat_amount"]
