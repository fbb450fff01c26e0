from __future__ import annotations

import json

import pytest

from tristate.codec import (
    InvalidLiteralError,
    decode,
    encode,
    from_json_value,
    to_json_value,
)
from tristate.value import FALSE, TRUE, UNSET, TriState


def test_encode_is_total():
    assert encode(TRUE) == "true"
    assert encode(FALSE) == "false"
    assert encode(UNSET) == "null"


@pytest.mark.parametrize("v", [True, False])
def test_decode_encode_roundtrip_for_booleans(v):
    ts = TriState.from_bool(v)
    assert decode(encode(ts)) == ts


def test_decode_null_is_unset():
    assert decode(encode(UNSET)) == UNSET
    assert decode("null").is_unset()


def test_encoded_tokens_are_valid_json():
    assert json.loads(encode(TRUE)) is True
    assert json.loads(encode(FALSE)) is False
    assert json.loads(encode(UNSET)) is None


def test_decode_bytes():
    assert decode(b"true") == TRUE
    assert decode(b"false") == FALSE
    assert decode(bytearray(b"null")) == UNSET


@pytest.mark.parametrize(
    "token",
    ["1", "0", "True", "FALSE", "Null", "", "nul", " true", "true\n", '"true"', "yes"],
)
def test_decode_is_strict(token):
    with pytest.raises(InvalidLiteralError) as exc:
        decode(token)
    assert exc.value.literal == token
    assert repr(token) in str(exc.value)


@pytest.mark.parametrize("token", [None, 1, True, b"TRUE", b""])
def test_decode_rejects_non_literals(token):
    with pytest.raises(InvalidLiteralError):
        decode(token)  # type: ignore[arg-type]


def test_invalid_literal_is_value_error():
    with pytest.raises(ValueError):
        decode("maybe")


def test_json_value_bridge():
    assert to_json_value(TRUE) is True
    assert to_json_value(FALSE) is False
    assert to_json_value(UNSET) is None

    assert from_json_value(None) == UNSET
    assert from_json_value(True) == TRUE
    assert from_json_value(False) == FALSE
    assert from_json_value(TRUE) is TRUE


@pytest.mark.parametrize("v", [0, 1, "true", "null", 0.0, [], {}])
def test_from_json_value_rejects_non_booleans(v):
    with pytest.raises(InvalidLiteralError) as exc:
        from_json_value(v)
    assert exc.value.literal == v
