import pytest

from shopmate.parsing.s4_items import NameCleaner


@pytest.fixture
def cleaner():
    return NameCleaner()


@pytest.mark.parametrize("raw, expected", [
    ("분 세 차 리 치 버 블 카 샴   ", "리치버블카샴"),
    ("청 정 원 찰 고 추 장 29", "청정원찰고추장"),
    ("Q 햇 반 불 고 기 주 먹 밥 ", "햇반불고기주먹밥"),
    ("버 터 롤 (24 입 )", "버터롤"),
    ("한 수 위 파 주 쌀 ( 참 드림   ", "한수위파주쌀(참드림"),
    ("미 니 안 심 한 입 까 스 .", "미니안심한입까스"),
    ("사 과 상 품 명 단 가 수 량 금 액", "사과"),
])
def test_strict_removes_whitespace(cleaner, emart, raw, expected):
    assert cleaner.clean(raw, emart.items) == expected


@pytest.mark.parametrize("raw, expected", [
    ("분 세 차 리 치 버 블 카 샴   ", "리 치 버 블 카 샴"),
    ("샘 표  쌈 토 장 4500", "샘 표 쌈 토 장"),
    ("버 터 롤 (24 입 )", "버 터 롤"),
])
def test_lenient_collapses_whitespace(cleaner, emart, raw, expected):
    assert cleaner.clean(raw, emart.items, strict=False) == expected


def test_junk_prefix_is_format_data(cleaner, traders):
    # У Traders нет мусорных префиксов
    assert cleaner.clean("분 세 차 세 제", traders.items) == "분세차세제"


@pytest.mark.parametrize("raw", ["123 ", "* 42", "(1+1)", "._"])
def test_noise_only_becomes_empty(cleaner, emart, raw):
    assert cleaner.clean(raw, emart.items) == ""


@pytest.mark.parametrize("raw, expected", [
    ("1+ 등 급 란 60 구 ( 특 란 )", "1+등급란60구(특란)"),
    (") 가 쓰 오 우 동 13359", "가쓰오우동"),
    ("#@ 컷 파 인 애 플", "컷파인애플"),
    ("하 림 용 가 리 치 킨 1.3k", "하림용가리치킨1.3k"),
    ("스 팸 클 래 식 2009*", "스팸클래식"),
    ("미 니 안 심 한 입 까 스 .", "미니안심한입까스"),
    (")9000", ""),
])
def test_traders_keeps_brackets_and_decimals(cleaner, traders, raw, expected):
    assert cleaner.clean(raw, traders.items) == expected
