"""
Tests for the converter facade: non-raising results, batches, the shared
default instance and concurrent read-only use.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

import twotouch
from twotouch import ParseError, get_default_converter
from twotouch.types import ConversionResult

BATCH_TEXTS = [
    "ごくろうさん",
    "ご苦労さん",
    "筋肉",
    "RUST",
    "",
    "ちょっと",
]


def _signature(result):
    return result.success, result.result if result.success else ""


def test_try_encode_success(converter):
    result = converter.try_encode("ごくろうさん")

    assert result.success
    assert result.result == ("5963", "25042395133103")
    assert result.error_message is None


def test_try_encode_failure_keeps_error(converter):
    result = converter.try_encode("筋肉")

    assert not result.success
    assert isinstance(result.error, ParseError)
    assert "筋" in result.error_message
    with pytest.raises(ParseError):
        result.unwrap()


def test_try_decode(converter):
    assert converter.try_decode("81225223").unwrap() == "やきにく"
    assert not converter.try_decode("111").success


def test_result_map_and_flat_map(converter):
    decoded = converter.try_encode("RUST").map(lambda codes: codes[-1]).flat_map(converter.try_decode)

    assert decoded == ConversionResult.success_with_text("RUST")

    failed = converter.try_encode("筋肉").map(lambda codes: codes[-1])
    assert not failed.success


def test_result_map_turns_parse_error_into_failure(converter):
    result = converter.try_encode("RUST").map(lambda codes: converter.decode(codes[-1] + "1"))

    assert not result.success
    assert isinstance(result.error, ParseError)


def test_encode_batch_preserves_order(converter):
    results = converter.encode_batch(BATCH_TEXTS)

    assert [_signature(result) for result in results] == [
        (True, ("5963", "25042395133103")),
        (True, ("5963",)),
        (False, ""),
        (True, ("48564940",)),
        (False, ""),
        (True, ("42854345",)),
    ]


def test_decode_batch(converter):
    results = converter.decode_batch(["48564940", "8080", "2104"])

    assert [_signature(result) for result in results] == [(True, "RUST"), (False, ""), (True, "か゛")]


def test_default_converter_is_shared():
    assert get_default_converter() is get_default_converter()


def test_module_level_helpers():
    assert twotouch.encode("ごくろうさん") == ["5963", "25042395133103"]
    assert twotouch.decode("81225223") == "やきにく"


def test_unknown_attribute():
    with pytest.raises(AttributeError):
        twotouch.does_not_exist


def test_concurrent_readers_agree(converter):
    texts = BATCH_TEXTS * 50
    expected = [_signature(result) for result in converter.encode_batch(texts)]

    with ThreadPoolExecutor(max_workers=4) as pool:
        actual = list(pool.map(lambda text: _signature(converter.try_encode(text)), texts))

    assert actual == expected
