import pytest

from admincommon.langtags import CHINESE, parse_tags


@pytest.mark.parametrize(
    "lang, want",
    [
        ("zh", ["zh"]),
        ("en", ["en"]),
        ("one two", ["zh"]),
    ],
)
def test_parse_tags(lang, want):
    assert parse_tags(lang) == want


def test_chinese_constant():
    assert parse_tags("one two") == [CHINESE]


def test_sorted_by_weight():
    assert parse_tags("en;q=0.5, ja") == ["ja", "en"]


def test_equal_weights_keep_order():
    assert parse_tags("fr, de, en") == ["fr", "de", "en"]


def test_zero_weight_dropped():
    assert parse_tags("en;q=0, ja") == ["ja"]


def test_invalid_weight_falls_back():
    assert parse_tags("en;q=abc") == [CHINESE]


def test_case_is_normalised():
    assert parse_tags("ZH-cn") == ["zh-CN"]


def test_underscore_separator():
    assert parse_tags("en_us") == ["en-US"]


def test_named_fallback():
    assert parse_tags("english") == ["en"]


def test_empty_entries_skipped():
    assert parse_tags("en,,ja") == ["en", "ja"]