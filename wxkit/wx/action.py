"""
描述: 微信 API 操作抽象 (Action)
主要功能:
    - Action 协议: 方法 / URL / 请求体或上传表单 / 响应解码
    - WxAction: 通过选项函数配置的通用实现, 无需为每个接口定义类型
    - new_get_action / new_post_action / new_upload_action 构造器
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol
from urllib.parse import urlencode

from pydantic import BaseModel

from wxkit.wx.errors import DecodeError, EncodeError
from wxkit.wx.form import UploadForm


METHOD_GET = "GET"
METHOD_POST = "POST"

BodyFunc = Callable[[], bytes]
FormFunc = Callable[[], UploadForm]
DecodeFunc = Callable[[bytes], None]


# region Action 协议
class Action(Protocol):
    """一次远程调用的描述"""

    def method(self) -> str: ...

    def url(self, access_token: str) -> str: ...

    def is_upload(self) -> bool: ...

    def body(self) -> bytes | None: ...

    def upload_form(self) -> UploadForm: ...

    def decode(self, resp: bytes) -> None: ...
# endregion


# region 通用实现
@dataclass(frozen=True)
class WxAction:
    """
    通用 Action

    属性:
        http_method: GET / POST
        url_template: 接口地址 (不含查询参数)
        query: 追加在 access_token 之后的有序查询参数
        upload: 是否为 multipart 上传
        body_func: 请求体生成函数
        form_func: 上传表单生成函数
        decode_func: 成功响应解码回调
    """
    http_method: str
    url_template: str
    query: tuple[tuple[str, str], ...] = ()
    upload: bool = False
    body_func: BodyFunc | None = None
    form_func: FormFunc | None = None
    decode_func: DecodeFunc | None = None

    def method(self) -> str:
        return self.http_method

    def url(self, access_token: str) -> str:
        params: list[tuple[str, str]] = []
        if access_token:
            params.append(("access_token", access_token))
        params.extend(self.query)
        if not params:
            return self.url_template
        return f"{self.url_template}?{urlencode(params)}"

    def is_upload(self) -> bool:
        return self.upload

    def body(self) -> bytes | None:
        if self.body_func is None:
            return None
        try:
            return self.body_func()
        except (TypeError, ValueError, OSError) as exc:
            raise EncodeError(f"failed to encode request body: {exc}") from exc

    def upload_form(self) -> UploadForm:
        if self.form_func is None:
            return UploadForm()
        try:
            return self.form_func().load()
        except (TypeError, ValueError, OSError) as exc:
            raise EncodeError(f"failed to build upload form: {exc}") from exc

    def decode(self, resp: bytes) -> None:
        if self.decode_func is None:
            return
        try:
            self.decode_func(resp)
        except (TypeError, ValueError, KeyError) as exc:
            raise DecodeError(f"failed to decode response: {exc}") from exc
# endregion


# region 构造选项
@dataclass
class _ActionOptions:
    query: list[tuple[str, str]] = field(default_factory=list)
    body_func: BodyFunc | None = None
    form_func: FormFunc | None = None
    decode_func: DecodeFunc | None = None


ActionOption = Callable[[_ActionOptions], None]


def with_query(key: str, value: str) -> ActionOption:
    """追加查询参数"""
    def apply(options: _ActionOptions) -> None:
        options.query.append((key, value))
    return apply


def with_body(func: BodyFunc) -> ActionOption:
    """设置请求体生成函数"""
    def apply(options: _ActionOptions) -> None:
        options.body_func = func
    return apply


def with_upload_form(func: FormFunc) -> ActionOption:
    """设置上传表单生成函数"""
    def apply(options: _ActionOptions) -> None:
        options.form_func = func
    return apply


def with_decode(func: DecodeFunc) -> ActionOption:
    """设置响应解码回调"""
    def apply(options: _ActionOptions) -> None:
        options.decode_func = func
    return apply


def _collect(options: tuple[ActionOption, ...]) -> _ActionOptions:
    collected = _ActionOptions()
    for apply in options:
        apply(collected)
    return collected
# endregion


# region 构造器
def new_get_action(url: str, *options: ActionOption) -> WxAction:
    collected = _collect(options)
    return WxAction(
        http_method=METHOD_GET,
        url_template=url,
        query=tuple(collected.query),
        decode_func=collected.decode_func,
    )


def new_post_action(url: str, *options: ActionOption) -> WxAction:
    collected = _collect(options)
    return WxAction(
        http_method=METHOD_POST,
        url_template=url,
        query=tuple(collected.query),
        body_func=collected.body_func,
        decode_func=collected.decode_func,
    )


def new_upload_action(url: str, *options: ActionOption) -> WxAction:
    collected = _collect(options)
    return WxAction(
        http_method=METHOD_POST,
        url_template=url,
        query=tuple(collected.query),
        upload=True,
        form_func=collected.form_func,
        decode_func=collected.decode_func,
    )
# endregion


# region 编解码辅助
def marshal_json(payload: Any) -> bytes:
    """序列化为 UTF-8 JSON (保留中文)"""
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(by_alias=True).encode("utf-8")
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def decode_into(model: BaseModel) -> DecodeFunc:
    """将响应解析后的字段逐一写入调用方提供的模型"""
    def decode(resp: bytes) -> None:
        parsed = type(model).model_validate_json(resp)
        for name in type(model).model_fields:
            setattr(model, name, getattr(parsed, name))
    return decode
# endregion
