from __future__ import annotations

from wxkit.wx.envelope import parse_envelope


def test_missing_errcode_is_success() -> None:
    envelope = parse_envelope(b'{"access_token": "T", "expires_in": 7200}')
    assert envelope.ok is True
    assert envelope.errcode == 0
    assert envelope.errmsg == ""


def test_explicit_zero_is_success() -> None:
    envelope = parse_envelope(b'{"errcode": 0, "errmsg": "ok"}')
    assert envelope.ok is True
    assert envelope.errmsg == "ok"


def test_non_zero_errcode_carries_code_and_message() -> None:
    envelope = parse_envelope('{"errcode": 40013, "errmsg": "invalid appid"}'.encode("utf-8"))
    assert envelope.ok is False
    assert envelope.errcode == 40013
    assert envelope.errmsg == "invalid appid"


def test_numeric_string_errcode_is_coerced() -> None:
    envelope = parse_envelope(b'{"errcode": "40001", "errmsg": "invalid credential"}')
    assert envelope.errcode == 40001
    assert envelope.ok is False


def test_null_or_garbage_errcode_counts_as_success() -> None:
    assert parse_envelope(b'{"errcode": null}').ok is True
    assert parse_envelope(b'{"errcode": "abc"}').ok is True


def test_boolean_errcode_follows_int_coercion() -> None:
    envelope = parse_envelope(b'{"errcode": true, "errmsg": "x"}')

    assert envelope.ok is False
    assert envelope.errcode == 1
    assert envelope.errmsg == "x"
    assert parse_envelope(b'{"errcode": false}').ok is True


def test_malformed_payload_never_raises() -> None:
    assert parse_envelope(b"not json").ok is True
    assert parse_envelope(b"[1, 2, 3]").ok is True
    assert parse_envelope(b"").ok is True
