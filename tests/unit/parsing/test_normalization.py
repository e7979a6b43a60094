import pytest

from shopmate.parsing.s1_normalization import NormalizationStage, normalize


def test_collapses_inline_whitespace():
    assert normalize("이   마\t트  파 주 점") == "이 마 트 파 주 점"


def test_newline_after_barcode():
    text = "리 치 버 블 카 샴 9,800 1 9,800 8807424243936 3월 고 래 잇"
    assert normalize(text) == "리 치 버 블 카 샴 9,800 1 9,800 8807424243936\n3월 고 래 잇"


def test_newline_after_discount():
    text = "가 격 할 인 -4,900 * 한 수 위"
    assert normalize(text) == "가 격 할 인 -4,900\n* 한 수 위"


def test_newline_after_dot_matrix_triplet():
    text = "요 플 레 8,980。1。8,980 다 음"
    assert normalize(text) == "요 플 레 8,980。1。8\n,980 다 음"


def test_blank_lines_and_padding_removed():
    assert normalize("  a \n\n\n   b  \n") == "a\nb"


def test_empty_input():
    assert normalize("") == ""
    assert normalize("   \n  ") == ""


@pytest.mark.parametrize("text", [
    "가 -1,000 -2,000 8801007828282 8801007828282",
    "12345678901234567890123456 -5 。 1。2。3",
    " \t다\n\n 라 -4,490\n냉 동",
    "8,580 1 。 8,580 8801115215448 ] 고 메",
])
def test_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_idempotent_on_real_receipts(emart_text, traders_text):
    for text in (emart_text, traders_text):
        once = normalize(text)
        assert normalize(once) == once


def test_stage_result_statistics():
    result = NormalizationStage().process("가 -1,000 나")
    assert result.text == "가 -1,000\n나"
    assert result.original_length == len("가 -1,000 나")
    assert result.lines_count == 2
    assert result.to_dict()["normalized_length"] == len(result.text)
