from __future__ import annotations

import dataclasses
import json

import pytest

from wxkit.wx.action import (
    marshal_json,
    new_get_action,
    new_post_action,
    new_upload_action,
    with_body,
    with_decode,
    with_query,
    with_upload_form,
)
from wxkit.wx.errors import DecodeError, EncodeError
from wxkit.wx.form import FormField, FormFile, new_upload_form


def test_get_action_url_appends_token_then_query() -> None:
    action = new_get_action(
        "https://qyapi.weixin.qq.com/cgi-bin/agent/get",
        with_query("agentid", "1000005"),
    )

    assert action.method() == "GET"
    assert action.is_upload() is False
    assert action.body() is None
    assert action.url("ACCESS_TOKEN") == (
        "https://qyapi.weixin.qq.com/cgi-bin/agent/get?access_token=ACCESS_TOKEN&agentid=1000005"
    )


def test_url_without_token_omits_access_token() -> None:
    action = new_get_action("https://api.weixin.qq.com/cgi-bin/token", with_query("appid", "APPID"))
    assert action.url("") == "https://api.weixin.qq.com/cgi-bin/token?appid=APPID"
    assert new_get_action("https://example.com/x").url("") == "https://example.com/x"


def test_query_values_are_url_encoded() -> None:
    action = new_get_action("https://example.com/x", with_query("q", "a b&c"))
    assert action.url("T") == "https://example.com/x?access_token=T&q=a+b%26c"


def test_post_action_body_is_produced_lazily() -> None:
    calls: list[int] = []

    def produce() -> bytes:
        calls.append(1)
        return marshal_json({"name": "菜单"})

    action = new_post_action("https://example.com/x", with_body(produce))
    assert calls == []

    body = action.body()
    assert calls == [1]
    assert json.loads(body) == {"name": "菜单"}
    assert "菜单".encode("utf-8") in body


def test_post_action_without_body_option() -> None:
    action = new_post_action("https://example.com/x")
    assert action.method() == "POST"
    assert action.body() is None


def test_body_failure_raises_encode_error() -> None:
    action = new_post_action("https://example.com/x", with_body(lambda: marshal_json({"bad": object()})))
    with pytest.raises(EncodeError) as exc_info:
        action.body()
    assert isinstance(exc_info.value.__cause__, TypeError)


def test_upload_action_loads_form_files(tmp_path) -> None:
    path = tmp_path / "a.png"
    path.write_bytes(b"\x89PNG")
    action = new_upload_action(
        "https://example.com/upload",
        with_upload_form(lambda: new_upload_form(
            FormFile(fieldname="media", filename="a.png", path=str(path)),
            FormField(name="description", value="logo"),
        )),
    )

    assert action.is_upload() is True
    assert action.method() == "POST"
    form = action.upload_form()
    assert form.files[0].content == b"\x89PNG"
    assert form.field_parts() == {"description": "logo"}


def test_upload_form_missing_file_raises_encode_error(tmp_path) -> None:
    action = new_upload_action(
        "https://example.com/upload",
        with_upload_form(lambda: new_upload_form(
            FormFile(fieldname="media", filename="x.png", path=str(tmp_path / "missing.png")),
        )),
    )
    with pytest.raises(EncodeError):
        action.upload_form()


def test_decode_without_option_is_noop() -> None:
    action = new_get_action("https://example.com/x")
    assert action.decode(b'{"anything": true}') is None


def test_decode_failure_raises_decode_error() -> None:
    action = new_get_action("https://example.com/x", with_decode(lambda resp: json.loads(resp)["missing"]))
    with pytest.raises(DecodeError):
        action.decode(b"{}")


def test_action_is_immutable() -> None:
    action = new_get_action("https://example.com/x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        action.url_template = "https://evil.example.com"  # type: ignore[misc]
