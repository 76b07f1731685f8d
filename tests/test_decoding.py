"""
Decoding Test Suite

This module contains tests for two-touch -> text conversion, including the
separate trailing mark produced for voiced and semi-voiced kana and the
validation order (length, digits, known chunks).
"""

import pytest

from twotouch import ParseError

DECODING_TEST_CASES = [
    ("48564940", "RUST"),
    ("81225223", "やきにく"),
    ("250459868884", "こ゛X* )"),
    ("2503524261", "こんにちは"),
    # Composite codes decode to base + mark
    ("2104", "か゛"),
    ("6105", "は゜"),
    ("25042395133103", "こ゛くろうさん"),
    # Digits and punctuation
    ("96979899900607080900", "1234567890"),
    ("67686960767786878882", "?!-/\\&*# ("),
    ("0102030405", "わをん゛゜"),
]


def test_decoding_cases(converter):
    """Decode every case and compare against the expected text."""
    passed = 0
    failed = 0

    for code, expected in DECODING_TEST_CASES:
        result = converter.decode(code)
        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{code}': expected {expected!r}, got {result!r}")

    assert failed == 0, f"Decoding tests: {failed} failures out of {len(DECODING_TEST_CASES)} tests"
    print(f"Decoding tests: {passed} passed, {failed} failed")


@pytest.mark.parametrize(
    "code",
    [
        "",  # empty
        "111",  # odd length
        "1",
        "8080",  # unknown chunks
        "70",
        "78",
        "79",
        "89",
        "1189",
        "筋肉",  # not digits
        "1a",
        "１１",  # full-width digits are not ASCII
        "11 2",
        " 11 ",
    ],
)
def test_decode_rejects_invalid_input(converter, code):
    with pytest.raises(ParseError):
        converter.decode(code)


def test_decode_error_reports_chunk_position(converter):
    with pytest.raises(ParseError) as excinfo:
        converter.decode("111280")

    assert excinfo.value.position == 4
    assert "80" in str(excinfo.value)


def test_length_is_checked_before_digits(converter):
    with pytest.raises(ParseError, match="multiple of 2"):
        converter.decode("abc")


def test_convert_from_two_touch_string_is_decode(converter):
    assert converter.convert_from_two_touch_string("81225223") == "やきにく"


def test_decoder_output_is_not_normalized(converter):
    """Decoding never emits variant forms, only canonical characters."""
    assert converter.decode("43") == "つ"
    assert converter.decode("69") == "-"
